"""
Command-line front end for strict arithmetic.
"""

from .runner import run_calculation
from .schemas import CalculationRequest, CalculationResult

__all__ = ["CalculationRequest", "CalculationResult", "run_calculation"]
