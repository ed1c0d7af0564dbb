"""
Left-fold reductions over normalized operands.

Every result is stamped with the operation and operand count that produced
it. The stamped fractional-digit count is always the shared input scale,
including for multiplication; finalize() corrects multiply results using the
operand count.
"""

import functools
import operator
from collections.abc import Callable, Sequence

from loguru import logger

from src.arithmetic.normalizer import normalize
from src.core.enums import Operation
from src.core.types import Literal, ScaledInteger
from src.core.utils.decorators import log_operations

_FOLDS: dict[Operation, Callable[[int, int], int]] = {
    Operation.ADD: operator.add,
    Operation.SUBTRACT: operator.sub,
    Operation.MULTIPLY: operator.mul,
}


def reduce_operands(
    operation: Operation, operands: Sequence[Literal | ScaledInteger]
) -> ScaledInteger:
    """Fold operands left to right with the integer form of `operation`.

    Args:
        operation: Operation to apply between consecutive magnitudes
        operands: At least one literal or ScaledInteger

    Returns:
        Stamped ScaledInteger at the shared input scale

    Raises:
        InvalidOperandError: If operands is empty or any operand is unparsable
    """
    normalized = normalize(operands)
    first, *rest = normalized.values
    logger.debug(f"Folding {len(normalized)} operands with '{operation.symbol}'")

    fold = _FOLDS[operation]
    magnitude = functools.reduce(fold, (value.magnitude for value in rest), first.magnitude)

    return ScaledInteger(magnitude=magnitude).stamp(
        operation,
        operand_count=len(normalized),
        fractional_digits=normalized.fractional_digits,
    )


@log_operations
def add(*operands: Literal | ScaledInteger) -> ScaledInteger:
    """Sum operands exactly.

    Example:
        >>> finalize(add(0.1, 0.2))
        0.3
    """
    return reduce_operands(Operation.ADD, operands)


@log_operations
def subtract(*operands: Literal | ScaledInteger) -> ScaledInteger:
    """Subtract each following operand from the first, left to right.

    Example:
        >>> finalize(subtract(100, 50, -50))
        100.0
    """
    return reduce_operands(Operation.SUBTRACT, operands)


@log_operations
def multiply(*operands: Literal | ScaledInteger) -> ScaledInteger:
    """Multiply operands exactly.

    The result must go through finalize() or round() to be read correctly.

    Example:
        >>> finalize(multiply(1.5, 2))
        3.0
    """
    return reduce_operands(Operation.MULTIPLY, operands)
