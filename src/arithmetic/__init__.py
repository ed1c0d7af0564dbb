"""
Decimal-safe arithmetic on scaled integers.

Public entry points:

    >>> from src.arithmetic import add, finalize
    >>> finalize(add(0.1, 0.2))
    0.3

Results of add/subtract/multiply/divide are ScaledInteger values that can be
fed back in as operands, then turned into plain numbers with finalize() or
round().
"""

from .calculator import add, multiply, reduce_operands, subtract
from .divider import divide
from .finalizer import finalize, to_decimal_string
from .normalizer import NormalizedOperands, normalize, to_scaled
from .rounder import round_value

round = round_value  # noqa: A001

__all__ = [
    # Reductions
    "add",
    "subtract",
    "multiply",
    "divide",
    "reduce_operands",
    # Conversion back to plain numbers
    "finalize",
    "round",
    "round_value",
    "to_decimal_string",
    # Normalization
    "NormalizedOperands",
    "normalize",
    "to_scaled",
]
