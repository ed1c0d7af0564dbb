"""
Custom exception hierarchy for strict decimal arithmetic.

This module defines domain-specific exceptions for better error handling.
"""

from typing import Any

from src.core.constants import MAX_MAGNITUDE


def describe_value(value: Any) -> str:
    """Repr a value for messages, summarizing ints too large to print."""
    if isinstance(value, int) and not isinstance(value, bool) and abs(value) >= MAX_MAGNITUDE:
        return f"<int of {value.bit_length()} bits>"
    try:
        return repr(value)
    except ValueError:
        # Containers holding ints past the conversion limit
        return f"<{type(value).__name__}>"


class StrictArithmeticError(Exception):
    """Base exception for all strict-arithmetic errors."""

    pass


class InvalidOperandError(StrictArithmeticError, ValueError):
    """Raised when an operand is neither a numeric literal nor a ScaledInteger."""

    def __init__(self, value: Any, reason: str = "not a recognized numeric literal"):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid operand {describe_value(value)}: {reason}")


class InvalidArityError(StrictArithmeticError, TypeError):
    """Raised when an operation receives the wrong number of operands."""

    def __init__(self, operation: str, expected: int, received: int):
        self.operation = operation
        self.expected = expected
        self.received = received
        super().__init__(f"{operation} takes exactly {expected} operands, got {received}")


class DivisionByZeroError(StrictArithmeticError, ZeroDivisionError):
    """Raised when the divisor normalizes to zero."""

    def __init__(self, dividend: Any):
        self.dividend = dividend
        super().__init__(f"Cannot divide {describe_value(dividend)} by zero")
