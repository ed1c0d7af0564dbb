"""
Conversion of scaled results back to plain numbers.
"""

from decimal import Decimal

from src.core.exceptions.arithmetic import InvalidOperandError
from src.core.types import ScaledInteger
from src.core.utils.decorators import log_operations

PlainNumber = int | float | Decimal


def to_decimal_string(value: ScaledInteger) -> str:
    """Render a ScaledInteger as exact decimal text.

    The decimal point goes at the effective fractional-digit count, which
    accounts for digits accumulated by multiplication.

    Examples:
        >>> to_decimal_string(ScaledInteger(-5, fractional_digits=3))
        '-0.005'
        >>> to_decimal_string(ScaledInteger(300, 1, operation=Operation.MULTIPLY, operand_count=2))
        '3.00'
    """
    return value.decimal_string()


@log_operations
def finalize(value: ScaledInteger | PlainNumber) -> PlainNumber:
    """Convert a result to a plain number.

    Plain numbers are returned unchanged. A ScaledInteger becomes a float
    parsed from its exact decimal text.

    Raises:
        InvalidOperandError: If value is neither a number nor a ScaledInteger

    Examples:
        >>> finalize(add(0.1, 0.2))
        0.3
        >>> finalize(5)
        5
    """
    if isinstance(value, ScaledInteger):
        return float(to_decimal_string(value))
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        raise InvalidOperandError(value, "finalize expects a number or ScaledInteger")
    return value
