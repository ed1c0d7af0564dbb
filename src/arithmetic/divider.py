"""
Binary division over normalized operands.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from src.arithmetic.normalizer import normalize
from src.core.constants import DIVIDE_ARITY, DIVISION_PRECISION
from src.core.exceptions.arithmetic import DivisionByZeroError
from src.core.types import Literal, ScaledInteger
from src.core.utils.decorators import log_operations
from src.core.utils.validation import split_literal, validate_arity, validate_magnitude


def quotient(dividend: int, divisor: int) -> Decimal:
    """Divide two magnitudes, exact in the whole part.

    The whole part is always kept in full; DIVISION_PRECISION significant
    digits follow it, rounded half up. Exact quotients carry no padding.

    Examples:
        >>> quotient(10, 4)
        Decimal('2.5')
        >>> quotient(9, 3)
        Decimal('3')
    """
    whole = abs(validate_magnitude(dividend)) // abs(validate_magnitude(divisor))
    whole_digits = len(str(whole)) if whole else 0

    with localcontext() as ctx:
        ctx.prec = whole_digits + DIVISION_PRECISION
        ctx.rounding = ROUND_HALF_UP
        return Decimal(dividend) / Decimal(divisor)


@log_operations
def divide(*operands: Literal | ScaledInteger) -> ScaledInteger:
    """Divide the first operand by the second.

    Both operands share a scale after normalization, so the scales cancel
    and the quotient of the magnitudes is the answer. It is split back into
    a magnitude with its own fractional digits and carries no operation
    stamp or source literal.

    Raises:
        InvalidArityError: If not called with exactly two operands
        InvalidOperandError: If either operand is unparsable
        DivisionByZeroError: If the divisor is zero

    Example:
        >>> finalize(divide(1, "2"))
        0.5
    """
    validate_arity("divide", operands, DIVIDE_ARITY)
    dividend, divisor = normalize(operands).values

    if divisor.magnitude == 0:
        raise DivisionByZeroError(operands[0])

    magnitude, fractional_digits = split_literal(
        quotient(dividend.magnitude, divisor.magnitude)
    )
    return ScaledInteger(magnitude, fractional_digits)
