"""
Arithmetic operation enumerations.

This module defines the operations that stamp provenance onto a result.
"""

from enum import StrEnum


class Operation(StrEnum):
    """
    Reducing operations.

    Identifies which left-fold produced a ScaledInteger. Division is not
    listed: its results carry no provenance.
    """

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"

    @property
    def accumulates_digits(self) -> bool:
        """Check if each folded operand adds its fractional digits to the result."""
        return self == self.MULTIPLY

    @property
    def symbol(self) -> str:
        """Get the infix symbol for display."""
        symbols = {
            Operation.ADD: "+",
            Operation.SUBTRACT: "-",
            Operation.MULTIPLY: "*",
        }
        return symbols[self]

    @classmethod
    def from_string(cls, name: str) -> "Operation":
        """
        Convert string to Operation enum.

        Args:
            name: Operation name, case insensitive ('add', 'SUB', 'mul'...)

        Returns:
            Matching Operation

        Raises:
            ValueError: If the name does not match any operation
        """
        aliases = {
            "add": cls.ADD,
            "sub": cls.SUBTRACT,
            "subtract": cls.SUBTRACT,
            "mul": cls.MULTIPLY,
            "multiply": cls.MULTIPLY,
        }
        key = name.strip().lower()
        if key not in aliases:
            raise ValueError(f"Unsupported operation: {name}")
        return aliases[key]
