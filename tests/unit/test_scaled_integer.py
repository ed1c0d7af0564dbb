"""
Unit tests for the ScaledInteger value type.
"""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from src.core.enums import Operation
from src.core.exceptions.arithmetic import InvalidOperandError
from src.core.types import ScaledInteger


class TestScaledIntegerCreation:
    """Test suite for ScaledInteger construction and validation."""

    def test_should_default_to_whole_number_without_provenance(self) -> None:
        """Test defaults."""
        # Act
        value = ScaledInteger(42)

        # Assert
        assert value.magnitude == 42
        assert value.fractional_digits == 0
        assert value.source_literal is None
        assert value.operation is None
        assert value.operand_count == 0

    def test_should_reject_negative_fractional_digits(self) -> None:
        """Test fractional digits must be non-negative."""
        with pytest.raises(InvalidOperandError, match="fractional_digits"):
            ScaledInteger(1, fractional_digits=-1)

    def test_should_reject_non_integer_magnitude(self) -> None:
        """Test magnitude must be an exact int."""
        with pytest.raises(InvalidOperandError, match="magnitude must be an integer"):
            ScaledInteger(1.5)  # type: ignore[arg-type]

        with pytest.raises(InvalidOperandError, match="magnitude must be an integer"):
            ScaledInteger(True)

    def test_should_reject_negative_operand_count(self) -> None:
        """Test operand count must be non-negative."""
        with pytest.raises(InvalidOperandError, match="operand_count"):
            ScaledInteger(1, operand_count=-1)

    def test_should_be_immutable(self) -> None:
        """Test values cannot be mutated after creation."""
        value = ScaledInteger(1)

        with pytest.raises(FrozenInstanceError):
            value.magnitude = 2  # type: ignore[misc]


class TestScaledIntegerFromLiteral:
    """Test suite for parsing literals."""

    def test_should_parse_string_literal(self) -> None:
        """Test parsing keeps the literal as source."""
        # Act
        value = ScaledInteger.from_literal("1.23")

        # Assert
        assert value.magnitude == 123
        assert value.fractional_digits == 2
        assert value.source_literal == "1.23"
        assert value.operation is None

    def test_should_parse_native_numbers(self) -> None:
        """Test int, float and Decimal literals."""
        assert ScaledInteger.from_literal(7).magnitude == 7
        assert ScaledInteger.from_literal(-0.25).magnitude == -25
        assert ScaledInteger.from_literal(Decimal("3.140")).fractional_digits == 3

    def test_should_reject_unparsable_literal(self) -> None:
        """Test invalid literal."""
        with pytest.raises(InvalidOperandError):
            ScaledInteger.from_literal("one")


class TestScaledIntegerProperties:
    """Test suite for derived properties."""

    def test_should_report_sign_and_fraction(self) -> None:
        """Test is_negative and has_fractional_digits."""
        assert ScaledInteger(-5, 1).is_negative is True
        assert ScaledInteger(0).is_negative is False
        assert ScaledInteger(5, 1).has_fractional_digits is True
        assert ScaledInteger(5).has_fractional_digits is False

    def test_should_render_unsigned_digits(self) -> None:
        """Test digit_string drops the sign."""
        assert ScaledInteger(-1234, 2).digit_string() == "1234"

    def test_should_multiply_digits_for_multiply_results(self) -> None:
        """Test effective digits of a multiply-stamped value."""
        value = ScaledInteger(1331, 1, operation=Operation.MULTIPLY, operand_count=3)

        assert value.effective_fractional_digits == 3

    def test_should_keep_digits_for_other_results(self) -> None:
        """Test effective digits of add/subtract/unstamped values."""
        assert ScaledInteger(6, 1, operation=Operation.ADD, operand_count=3).effective_fractional_digits == 1
        assert ScaledInteger(6, 1, operation=Operation.SUBTRACT, operand_count=2).effective_fractional_digits == 1
        assert ScaledInteger(6, 1).effective_fractional_digits == 1

    def test_should_render_exact_decimal_text(self) -> None:
        """Test __str__ reinserts the decimal point."""
        assert str(ScaledInteger(123, 2)) == "1.23"
        assert str(ScaledInteger(-5, 3)) == "-0.005"
        assert str(ScaledInteger(300, 1, operation=Operation.MULTIPLY, operand_count=2)) == "3.00"
        assert str(ScaledInteger(42)) == "42"

    def test_should_render_decimal_string_at_effective_scale(self) -> None:
        """Test decimal_string on plain and multiply-stamped values."""
        assert ScaledInteger(-5, 3).decimal_string() == "-0.005"
        assert ScaledInteger(1331, 1, operation=Operation.MULTIPLY, operand_count=3).decimal_string() == "1.331"

    def test_should_refuse_to_render_huge_magnitudes(self) -> None:
        """Test magnitudes past the digit limit raise instead of overflowing str()."""
        # Arrange
        value = ScaledInteger(10**5000, 2)

        # Act & Assert
        with pytest.raises(InvalidOperandError, match="digits"):
            value.digit_string()

        with pytest.raises(InvalidOperandError, match="digits"):
            value.decimal_string()


class TestScaledIntegerTransforms:
    """Test suite for rescale, stamp and adjust."""

    def test_should_rescale_preserving_value(self) -> None:
        """Test rescaling 1.2 to three digits."""
        # Arrange
        value = ScaledInteger.from_literal("1.2")

        # Act
        rescaled = value.rescale(3)

        # Assert
        assert rescaled.magnitude == 1200
        assert rescaled.fractional_digits == 3
        assert rescaled.source_literal == "1.2"
        assert value.magnitude == 12  # original untouched

    def test_should_return_self_when_already_at_target(self) -> None:
        """Test rescale no-op."""
        value = ScaledInteger(12, 1)

        assert value.rescale(1) is value

    def test_should_refuse_to_drop_digits(self) -> None:
        """Test rescaling downwards is rejected."""
        with pytest.raises(InvalidOperandError, match="cannot rescale"):
            ScaledInteger(1200, 3).rescale(1)

    def test_should_stamp_provenance_on_new_value(self) -> None:
        """Test stamping drops the source literal and sets provenance."""
        # Arrange
        value = ScaledInteger.from_literal("2.5")

        # Act
        stamped = value.stamp(Operation.MULTIPLY, operand_count=2, fractional_digits=1)

        # Assert
        assert stamped is not value
        assert stamped.magnitude == 25
        assert stamped.operation == Operation.MULTIPLY
        assert stamped.operand_count == 2
        assert stamped.source_literal is None
        assert value.operation is None

    def test_should_adjust_magnitude_keeping_metadata(self) -> None:
        """Test adjust carries scale and provenance forward."""
        value = ScaledInteger(225, 1, operation=Operation.MULTIPLY, operand_count=2)

        adjusted = value.adjust(10)

        assert adjusted.magnitude == 235
        assert adjusted.fractional_digits == 1
        assert adjusted.operation == Operation.MULTIPLY
        assert adjusted.operand_count == 2
