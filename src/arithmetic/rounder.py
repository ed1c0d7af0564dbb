"""
Half-up rounding on scaled values.

Rounding looks at a single digit: the first one past the cut. If it is 5 or
more, one unit at the cut position is added away from zero, and ordinary
integer addition carries it as far as it needs to go. The digits past the
cut are then dropped from the exact decimal text.
"""

from loguru import logger

from src.arithmetic.finalizer import PlainNumber, finalize, to_decimal_string
from src.arithmetic.normalizer import to_scaled
from src.core.constants import DEFAULT_ROUND_DIGITS, ROUND_UP_THRESHOLD
from src.core.types import Literal, ScaledInteger
from src.core.utils.decorators import log_operations
from src.core.utils.validation import validate_round_digits


def can_round(value: ScaledInteger, digits: int) -> bool:
    """Check if value tracks more fractional digits than `digits` keeps."""
    if not value.has_fractional_digits:
        return False
    return value.effective_fractional_digits > digits


def rounding_digit(value: ScaledInteger, digits: int) -> int:
    """Get the digit immediately right of the cut at `digits` fractional places.

    The digit string is zero-padded so small values such as 0.005 expose
    their leading zeros.
    """
    effective = value.effective_fractional_digits
    text = value.digit_string().zfill(effective + 1)
    return int(text[len(text) - effective + digits])


@log_operations
def round_value(
    value: ScaledInteger | Literal | PlainNumber, digits: int = DEFAULT_ROUND_DIGITS
) -> PlainNumber:
    """Round to `digits` fractional digits, half up, away from zero.

    Args:
        value: ScaledInteger or plain number
        digits: Fractional digits to keep (default 0: whole number)

    Returns:
        Rounded plain number

    Raises:
        InvalidOperandError: If value is unparsable or digits is not an int

    Examples:
        >>> round_value(1.2345, 3)
        1.235
        >>> round_value(-2.5)
        -3.0
    """
    validate_round_digits(digits)
    scaled = to_scaled(value)

    if digits < 0:
        logger.warning(f"Negative rounding digits ({digits}) ignored, finalizing unrounded")
        return finalize(scaled)

    if not can_round(scaled, digits):
        return finalize(scaled)

    dropped = scaled.effective_fractional_digits - digits
    if rounding_digit(scaled, digits) >= ROUND_UP_THRESHOLD:
        step = 10**dropped
        scaled = scaled.adjust(-step if scaled.is_negative else step)

    exact = to_decimal_string(scaled)
    return float(exact[:-dropped].rstrip("."))
