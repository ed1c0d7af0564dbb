"""
Core enumerations for strict arithmetic.

This module provides centralized enumerations for domain concepts
like the operation that produced a scaled result.
"""

from .operations import Operation

__all__ = ["Operation"]
