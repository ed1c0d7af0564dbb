"""
Scaled integer value type for decimal-safe arithmetic.

A decimal number is held as an exact Python int with its decimal point
removed, plus the number of trailing digits that are fractional. Integer
math on the magnitude is exact, so 0.1 + 0.2 is computed as 1 + 2 at one
fractional digit and never touches binary floating point.

Alongside the number, each value carries provenance: which reducing
operation produced it and how many operands were folded. Multiplication
keeps the shared input scale on its result instead of the true one, and the
provenance is what lets finalization recover the true decimal position.
"""

from dataclasses import dataclass, replace
from decimal import Decimal

from src.core.enums import Operation
from src.core.exceptions.arithmetic import InvalidOperandError
from src.core.utils.validation import (
    split_literal,
    validate_fractional_digits,
    validate_magnitude,
)

# Raw operand forms accepted wherever a ScaledInteger is accepted
Literal = str | int | float | Decimal


@dataclass(frozen=True)
class ScaledInteger:
    """An exact integer magnitude with a tracked fractional-digit count.

    Examples:
        >>> ScaledInteger.from_literal("1.23")
        ScaledInteger(magnitude=123, fractional_digits=2, source_literal='1.23', operation=None, operand_count=0)
    """

    magnitude: int
    fractional_digits: int = 0
    source_literal: Literal | None = None
    operation: Operation | None = None
    operand_count: int = 0

    def __post_init__(self) -> None:
        """Validate scale and provenance after initialization."""
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise InvalidOperandError(self.magnitude, "magnitude must be an integer")
        validate_fractional_digits(self.fractional_digits)
        if self.operand_count < 0:
            raise InvalidOperandError(
                self.operand_count, "operand_count must be non-negative"
            )

    @classmethod
    def from_literal(cls, value: Literal) -> "ScaledInteger":
        """Parse a raw operand into a fresh value with no provenance.

        Args:
            value: Decimal literal as str, int, float or Decimal

        Returns:
            New ScaledInteger remembering the literal it came from

        Raises:
            InvalidOperandError: If value is not a recognizable numeric literal
        """
        magnitude, fractional_digits = split_literal(value)
        return cls(
            magnitude=magnitude,
            fractional_digits=fractional_digits,
            source_literal=value,
        )

    @property
    def is_negative(self) -> bool:
        """Check if the magnitude is below zero."""
        return self.magnitude < 0

    @property
    def has_fractional_digits(self) -> bool:
        """Check if any fractional digits are tracked."""
        return self.fractional_digits != 0

    @property
    def effective_fractional_digits(self) -> int:
        """Get the true decimal position of the magnitude.

        A multiply-stamped value keeps the shared input scale, while each
        folded operand contributed that many digits, so the true count is
        the stamped count times the operand count.
        """
        if self.operation is not None and self.operation.accumulates_digits:
            return self.fractional_digits * self.operand_count
        return self.fractional_digits

    def digit_string(self) -> str:
        """Get the unsigned decimal digits of the magnitude.

        Raises:
            InvalidOperandError: If the magnitude is too long to render
        """
        return str(abs(validate_magnitude(self.magnitude)))

    def decimal_string(self) -> str:
        """Render as exact decimal text at the effective decimal position.

        Examples:
            >>> ScaledInteger(-5, fractional_digits=3).decimal_string()
            '-0.005'
        """
        digits = self.effective_fractional_digits
        sign = "-" if self.is_negative else ""
        text = self.digit_string()

        if digits == 0:
            return f"{sign}{text}"

        if len(text) <= digits:
            int_part, fraction = "0", text.zfill(digits)
        else:
            int_part, fraction = text[:-digits], text[-digits:]
        return f"{sign}{int_part}.{fraction}"

    def rescale(self, target_digits: int) -> "ScaledInteger":
        """Raise the fractional-digit count while preserving the value.

        The result inherits this value's source literal.

        Args:
            target_digits: New fractional-digit count, not below the current one

        Returns:
            Rescaled ScaledInteger (self if already at target)

        Raises:
            InvalidOperandError: If target_digits would drop digits
        """
        validate_fractional_digits(target_digits, "target_digits")
        diff = target_digits - self.fractional_digits
        if diff < 0:
            raise InvalidOperandError(
                target_digits,
                f"cannot rescale from {self.fractional_digits} down to {target_digits} digits",
            )
        if diff == 0:
            return self
        return replace(
            self,
            magnitude=self.magnitude * 10**diff,
            fractional_digits=target_digits,
        )

    def stamp(
        self, operation: Operation, operand_count: int, fractional_digits: int
    ) -> "ScaledInteger":
        """Return a computed result carrying provenance.

        Computed results drop the source literal; they are new values, not
        re-readings of an input.
        """
        return ScaledInteger(
            magnitude=self.magnitude,
            fractional_digits=fractional_digits,
            operation=operation,
            operand_count=operand_count,
        )

    def adjust(self, delta: int) -> "ScaledInteger":
        """Add an integer delta to the magnitude, keeping scale and provenance."""
        return replace(self, magnitude=self.magnitude + delta)

    def __str__(self) -> str:
        return self.decimal_string()
