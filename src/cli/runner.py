"""
Executes validated calculation requests.
"""

from loguru import logger

from src.arithmetic import divide, finalize, reduce_operands, round_value, to_decimal_string
from src.cli.schemas import CalculationRequest, CalculationResult
from src.core.enums import Operation
from src.core.types import ScaledInteger


def _evaluate(request: CalculationRequest) -> ScaledInteger:
    """Dispatch the request to divide or a reducing operation."""
    if request.operation == "divide":
        return divide(*request.operands)
    return reduce_operands(Operation.from_string(request.operation), request.operands)


def run_calculation(request: CalculationRequest) -> CalculationResult:
    """Run one request through the arithmetic core.

    Args:
        request: Validated calculation request

    Returns:
        CalculationResult with exact text and float value

    Raises:
        StrictArithmeticError: If the core rejects the operands
    """
    logger.info(f"Running {request.operation} over {len(request.operands)} operands")
    result = _evaluate(request)

    if request.digits is None:
        value = finalize(result)
    else:
        value = round_value(result, request.digits)

    return CalculationResult(
        operation=request.operation,
        operands=request.operands,
        exact=to_decimal_string(result),
        value=value,
    )
