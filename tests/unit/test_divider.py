"""
Unit tests for binary division.
"""

from decimal import Decimal

import pytest

from src.arithmetic import divide, finalize, to_decimal_string
from src.arithmetic.divider import quotient
from src.core.constants import DIVISION_PRECISION, MAX_MAGNITUDE_DIGITS
from src.core.exceptions.arithmetic import (
    DivisionByZeroError,
    InvalidArityError,
    InvalidOperandError,
)


class TestQuotient:
    """Test suite for magnitude division."""

    def test_should_keep_exact_quotients_unpadded(self) -> None:
        """Test terminating quotients carry only the digits they need."""
        assert quotient(10, 4) == Decimal("2.5")
        assert str(quotient(10, 4)) == "2.5"
        assert str(quotient(9, 3)) == "3"
        assert str(quotient(1, 8)) == "0.125"

    def test_should_keep_sign_in_every_quadrant(self) -> None:
        """Test signs of dividend and divisor."""
        assert quotient(7, 2) == Decimal("3.5")
        assert quotient(-7, 2) == Decimal("-3.5")
        assert quotient(7, -2) == Decimal("-3.5")
        assert quotient(-7, -2) == Decimal("3.5")

    def test_should_limit_repeating_fractions(self) -> None:
        """Test 1/3 keeps DIVISION_PRECISION significant digits."""
        assert str(quotient(1, 3)) == "0." + "3" * DIVISION_PRECISION

    def test_should_keep_whole_part_in_full(self) -> None:
        """Test a long whole part does not eat into the fraction."""
        # Arrange
        dividend = 10**40

        # Act
        result = str(quotient(dividend, 3))

        # Assert
        whole, fraction = result.split(".")
        assert whole == "3" * 40
        assert fraction == "3" * DIVISION_PRECISION

    def test_should_round_last_digit_half_up(self) -> None:
        """Test 2/3 rounds its final kept digit up."""
        assert str(quotient(2, 3)) == "0." + "6" * (DIVISION_PRECISION - 1) + "7"


class TestDivide:
    """Test suite for divide()."""

    def test_should_divide_exact_multiples(self) -> None:
        """Test 9 / 3."""
        # Act
        result = divide(9, "3")

        # Assert
        assert result.magnitude == 3
        assert result.fractional_digits == 0
        assert finalize(result) == 3

    def test_should_return_fractional_quotients(self) -> None:
        """Test 1 / 2 and 10 / 4."""
        assert finalize(divide(1, 2)) == 0.5
        assert finalize(divide(10, 4)) == 2.5
        assert to_decimal_string(divide(10, 4)) == "2.5"

    def test_should_keep_sign_of_fractional_quotients(self) -> None:
        """Test 7 / 2 and -7 / 2."""
        assert finalize(divide(7, 2)) == 3.5
        assert finalize(divide(-7, 2)) == -3.5

    def test_should_limit_repeating_quotients(self) -> None:
        """Test 1 / 3 as exact text and as a float."""
        # Act
        result = divide(1, 3)

        # Assert
        assert result.fractional_digits == DIVISION_PRECISION
        assert to_decimal_string(result) == "0." + "3" * DIVISION_PRECISION
        assert finalize(result) == 1 / 3

    def test_should_cancel_shared_scale(self) -> None:
        """Test decimals are normalized before dividing."""
        result = divide(1.5, 0.5)

        assert result.fractional_digits == 0
        assert finalize(result) == 3

    def test_should_divide_mixed_scales(self) -> None:
        """Test 7.5 / 2.5 with an integer-only divisor scale."""
        assert finalize(divide("7.5", 2.5)) == 3
        assert finalize(divide(10, "2.5")) == 4
        assert finalize(divide("0.1", "0.4")) == 0.25

    def test_should_carry_no_provenance(self) -> None:
        """Test division results are not stamped."""
        result = divide(1, 2)

        assert result.operation is None
        assert result.operand_count == 0
        assert result.source_literal is None

    def test_should_reject_more_than_two_operands(self) -> None:
        """Test divide(9, 3, 1)."""
        with pytest.raises(InvalidArityError, match="got 3"):
            divide(9, 3, 1)

    def test_should_reject_fewer_than_two_operands(self) -> None:
        """Test unary and empty divide."""
        with pytest.raises(InvalidArityError, match="got 1"):
            divide(9)

        with pytest.raises(InvalidArityError, match="got 0"):
            divide()

    def test_should_reject_zero_divisor(self) -> None:
        """Test division by zero, including a zero decimal."""
        with pytest.raises(DivisionByZeroError):
            divide(9, 0)

        with pytest.raises(ZeroDivisionError):
            divide("1.5", "0.00")

    def test_should_reject_invalid_operand(self) -> None:
        """Test parse failure."""
        with pytest.raises(InvalidOperandError):
            divide(9, "three")

    def test_should_reject_quotient_beyond_digit_limit(self) -> None:
        """Test a whole part that leaves no room for the fraction."""
        # Arrange
        dividend = "9" * MAX_MAGNITUDE_DIGITS

        # Act & Assert
        with pytest.raises(InvalidOperandError, match="digits"):
            divide(dividend, 7)
