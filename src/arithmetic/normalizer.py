"""
Operand normalization.

Brings a mixed operand list onto one shared scale so the magnitudes can be
combined with plain integer arithmetic.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from src.core.types import Literal, ScaledInteger
from src.core.utils.validation import validate_not_empty


@dataclass(frozen=True)
class NormalizedOperands:
    """Operands rescaled to a shared fractional-digit count."""

    values: tuple[ScaledInteger, ...]
    fractional_digits: int

    def __len__(self) -> int:
        return len(self.values)

    @property
    def magnitudes(self) -> list[int]:
        """Get the integer magnitudes in operand order."""
        return [value.magnitude for value in self.values]


def to_scaled(value: Literal | ScaledInteger) -> ScaledInteger:
    """Coerce a single operand into a ScaledInteger.

    Existing ScaledInteger values pass through untouched, provenance included.

    Raises:
        InvalidOperandError: If value is not a recognizable numeric literal
    """
    if isinstance(value, ScaledInteger):
        return value
    return ScaledInteger.from_literal(value)


def normalize(operands: Iterable[Literal | ScaledInteger]) -> NormalizedOperands:
    """Parse operands and rescale them to the largest fractional-digit count.

    Args:
        operands: Ordered literals and/or ScaledInteger values

    Returns:
        NormalizedOperands in the original order plus the shared digit count

    Raises:
        InvalidOperandError: If the set is empty or any operand is unparsable

    Examples:
        >>> normalize(["1.2", "0.03"]).magnitudes
        [120, 3]
    """
    values = [to_scaled(value) for value in operands]
    validate_not_empty(values)

    max_digits = max(value.fractional_digits for value in values)
    if max_digits > 0:
        logger.debug(f"Rescaling {len(values)} operands to {max_digits} fractional digits")
        values = [value.rescale(max_digits) for value in values]

    return NormalizedOperands(values=tuple(values), fractional_digits=max_digits)
