"""
Validation utilities for strict arithmetic.

Provides consistent operand parsing and argument checks across the application.
"""

import math
from decimal import Decimal
from typing import Any

from src.core.constants import (
    LITERAL_PATTERN,
    MAX_FRACTIONAL_DIGITS,
    MAX_MAGNITUDE,
    MAX_MAGNITUDE_DIGITS,
    MIN_REDUCE_OPERANDS,
)
from src.core.exceptions.arithmetic import InvalidArityError, InvalidOperandError


def literal_text(value: Any) -> str:
    """Render a raw operand as positional decimal text.

    Args:
        value: str, int, float or Decimal operand

    Returns:
        Decimal text without exponent notation

    Raises:
        InvalidOperandError: If value has an unsupported type or is not finite

    Examples:
        >>> literal_text(0.1)
        '0.1'
        >>> literal_text(1e-7)
        '0.0000001'
    """
    if isinstance(value, bool):
        raise InvalidOperandError(value, "booleans are not numeric literals")
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, int):
        validate_magnitude(value)
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidOperandError(value, "value must be finite")
        text = repr(value)
        if "e" in text or "E" in text:
            # repr is the shortest round-tripping text; expand only its exponent
            text = format(Decimal(text), "f")
        return text
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise InvalidOperandError(value, "value must be finite")
        return format(value, "f")
    raise InvalidOperandError(value, f"unsupported type {type(value).__name__}")


def split_literal(value: Any) -> tuple[int, int]:
    """Split a raw operand into its scaled magnitude and fractional-digit count.

    Args:
        value: str, int, float or Decimal operand

    Returns:
        Tuple of (magnitude, fractional_digits), e.g. '-1.23' -> (-123, 2)

    Raises:
        InvalidOperandError: If value is not a recognizable numeric literal
    """
    text = literal_text(value)
    match = LITERAL_PATTERN.match(text)
    if match is None:
        raise InvalidOperandError(value)

    sign, whole, fraction = match.groups()
    fraction = fraction or ""
    if len(whole) + len(fraction) > MAX_MAGNITUDE_DIGITS:
        raise InvalidOperandError(value, f"more than {MAX_MAGNITUDE_DIGITS} digits")
    if len(fraction) > MAX_FRACTIONAL_DIGITS:
        raise InvalidOperandError(
            value, f"more than {MAX_FRACTIONAL_DIGITS} fractional digits"
        )

    return int(f"{sign}{whole}{fraction}"), len(fraction)


def validate_magnitude(magnitude: int) -> int:
    """Validate that a magnitude can be rendered as decimal digits.

    Raises:
        InvalidOperandError: If abs(magnitude) has more than MAX_MAGNITUDE_DIGITS digits
    """
    if abs(magnitude) >= MAX_MAGNITUDE:
        raise InvalidOperandError(magnitude, f"more than {MAX_MAGNITUDE_DIGITS} digits")
    return magnitude


def validate_fractional_digits(digits: Any, param_name: str = "fractional_digits") -> int:
    """Validate that a fractional-digit count is a usable non-negative int.

    Args:
        digits: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated count

    Raises:
        InvalidOperandError: If digits is not an int in [0, MAX_FRACTIONAL_DIGITS]
    """
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise InvalidOperandError(digits, f"{param_name} must be an integer")
    if digits < 0 or digits > MAX_FRACTIONAL_DIGITS:
        raise InvalidOperandError(
            digits, f"{param_name} must be between 0 and {MAX_FRACTIONAL_DIGITS}"
        )
    return digits


def validate_round_digits(digits: Any) -> int:
    """Validate the target digit count passed to round.

    Negative counts are allowed through; the rounder treats them as a no-op.

    Raises:
        InvalidOperandError: If digits is not an int
    """
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise InvalidOperandError(digits, "digits must be an integer")
    return digits


def validate_arity(operation: str, operands: tuple[Any, ...], expected: int) -> tuple[Any, ...]:
    """Validate that exactly `expected` operands were supplied.

    Raises:
        InvalidArityError: If the operand count differs
    """
    if len(operands) != expected:
        raise InvalidArityError(operation, expected, len(operands))
    return operands


def validate_not_empty(operands: tuple[Any, ...] | list[Any]) -> None:
    """Validate that an operand set has at least one member.

    Raises:
        InvalidOperandError: If no operands were supplied
    """
    if len(operands) < MIN_REDUCE_OPERANDS:
        raise InvalidOperandError(tuple(operands), "empty operand set")
