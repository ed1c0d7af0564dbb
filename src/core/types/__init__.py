"""
Core type definitions.
"""

# Re-export the value type for easy access
from .scaled import Literal, ScaledInteger

__all__ = [
    "Literal",
    "ScaledInteger",
]
