"""
Utility decorators for operation logging.
"""

import functools
import inspect
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

from loguru import logger

from src.core.constants import MAX_MAGNITUDE
from src.core.exceptions.arithmetic import describe_value


def _serialize_operand(value: Any) -> Any:
    """Serialize an operand or argument for logging. Never raises."""
    if hasattr(value, "magnitude") and hasattr(value, "fractional_digits"):
        # ScaledInteger; huge magnitudes are logged by size only
        if abs(value.magnitude) >= MAX_MAGNITUDE:
            return f"<{value.magnitude.bit_length()}-bit>e-{value.fractional_digits}"
        return f"{value.magnitude}e-{value.fractional_digits}"
    elif hasattr(value, "quantize"):
        return str(value)  # Handle Decimal types
    elif isinstance(value, int) and not isinstance(value, bool) and abs(value) >= MAX_MAGNITUDE:
        return describe_value(value)
    elif isinstance(value, bool | int | float | str):
        return value
    return describe_value(value)


def _extract_operation_context(bound_args: inspect.BoundArguments) -> dict[str, Any]:
    """Extract operand context from function arguments."""
    context: dict[str, Any] = {}
    for param_name, value in bound_args.arguments.items():
        kind = bound_args.signature.parameters[param_name].kind
        if kind is inspect.Parameter.VAR_POSITIONAL:
            context[param_name] = [_serialize_operand(v) for v in value]
        else:
            context[param_name] = _serialize_operand(value)
    return context


def _create_success_context(
    base_context: dict[str, Any], execution_time_ms: float, result: Any
) -> dict[str, Any]:
    """Create success logging context."""
    return {
        **base_context,
        "success": True,
        "execution_time_ms": round(execution_time_ms, 3),
        "result_type": type(result).__name__,
        "result": _serialize_operand(result),
    }


def _create_error_context(
    base_context: dict[str, Any], execution_time_ms: float, error: Exception
) -> dict[str, Any]:
    """Create error logging context."""
    return {
        **base_context,
        "success": False,
        "execution_time_ms": round(execution_time_ms, 3),
        "error_type": type(error).__name__,
        "error_message": str(error),
    }


def _setup_logging_context(
    func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]
) -> tuple[dict[str, Any], str]:
    """Setup logging context for an arithmetic operation."""
    correlation_id = str(uuid.uuid4())[:8]
    func_name = func.__name__

    context: dict[str, Any] = {"correlation_id": correlation_id}
    sig = inspect.signature(func)
    try:
        bound_args = sig.bind(*args, **kwargs)
    except TypeError:
        # Let the call itself raise the signature error
        return context, func_name
    bound_args.apply_defaults()
    context.update(_extract_operation_context(bound_args))

    return context, func_name


def _execute_with_logging(
    func: Callable[..., Any],
    context: dict[str, Any],
    func_name: str,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> Any:
    """Execute function, logging start, completion and failure."""
    logger.bind(**context).debug(f"Arithmetic operation started: {func_name}")
    start_time = time.perf_counter()

    try:
        result = func(*args, **kwargs)
    except Exception as e:
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        error_context = _create_error_context(context, execution_time_ms, e)
        logger.bind(**error_context).warning(f"Arithmetic operation failed: {func_name}: {e}")
        raise

    execution_time_ms = (time.perf_counter() - start_time) * 1000
    success_context = _create_success_context(context, execution_time_ms, result)
    logger.bind(**success_context).debug(f"Arithmetic operation completed: {func_name}")
    return result


F = TypeVar("F", bound=Callable[..., Any])


def log_operations(func: F) -> F:
    """Decorator to log arithmetic operations with correlation IDs."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        context, func_name = _setup_logging_context(func, args, kwargs)
        return _execute_with_logging(func, context, func_name, args, kwargs)

    return wrapper  # type: ignore
