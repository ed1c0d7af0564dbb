"""
Pydantic schemas for command-line calculation requests.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from src.core.constants import DIVIDE_ARITY, LITERAL_PATTERN

OperationName = Literal["add", "subtract", "multiply", "divide"]


class CalculationRequest(BaseModel):
    """Request model for a single calculation."""

    operation: OperationName = Field(..., description="Arithmetic operation to apply")
    operands: list[str] = Field(..., min_length=1, description="Decimal literals, in order")
    digits: int | None = Field(
        default=None, ge=0, description="Round the result to this many fractional digits"
    )
    exact: bool = Field(default=False, description="Print exact decimal text instead of a float")

    @field_validator("operands")
    @classmethod
    def validate_literals(cls, v: list[str]) -> list[str]:
        """Validate that every operand is a plain decimal literal."""
        stripped = [operand.strip() for operand in v]
        for operand in stripped:
            if not LITERAL_PATTERN.match(operand):
                raise ValueError(f"'{operand}' is not a decimal literal")
        return stripped

    @model_validator(mode="after")
    def validate_arity(self) -> "CalculationRequest":
        """Validate operand count for division."""
        if self.operation == "divide" and len(self.operands) != DIVIDE_ARITY:
            raise ValueError(
                f"divide takes exactly {DIVIDE_ARITY} operands, got {len(self.operands)}"
            )
        if self.exact and self.digits is not None:
            raise ValueError("--exact and --round cannot be combined")
        return self


class CalculationResult(BaseModel):
    """Result model for a single calculation."""

    operation: OperationName
    operands: list[str]
    exact: str
    value: float

    def render(self, exact: bool = False) -> str:
        """Format the result for printing."""
        return self.exact if exact else repr(self.value)
