#!/usr/bin/env python3
"""
Strict arithmetic calculator.

Runs one decimal-safe calculation from the command line and prints the result.
"""

import argparse
import sys

from loguru import logger
from pydantic import ValidationError

from src.cli.runner import run_calculation
from src.cli.schemas import CalculationRequest
from src.core.exceptions.arithmetic import StrictArithmeticError

EXIT_OK = 0
EXIT_ARITHMETIC_ERROR = 1
EXIT_USAGE_ERROR = 2


def setup_logging(debug: bool = False) -> None:
    """Configure logging with loguru."""
    logger.remove()

    level = "DEBUG" if debug else "WARNING"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Decimal-safe arithmetic without floating-point error",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  strict-calc add 0.1 0.2
  strict-calc multiply 1.5 2 --round 1
  strict-calc subtract 100 50 -50 --exact
  strict-calc divide 9 3
        """,
    )

    parser.add_argument(
        "operation",
        choices=["add", "subtract", "multiply", "divide"],
        help="Operation to apply left to right",
    )

    parser.add_argument("operands", nargs="+", help="Decimal literals (e.g. 1.25 -3 0.1)")

    parser.add_argument(
        "--round",
        dest="digits",
        type=int,
        default=None,
        help="Round the result half up to this many fractional digits",
    )

    parser.add_argument(
        "--exact", action="store_true", help="Print exact decimal text instead of a float"
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(args.debug)

    try:
        request = CalculationRequest(
            operation=args.operation,
            operands=args.operands,
            digits=args.digits,
            exact=args.exact,
        )
    except ValidationError as e:
        for error in e.errors():
            logger.error(f"Invalid request: {error['msg']}")
        return EXIT_USAGE_ERROR

    try:
        result = run_calculation(request)
    except StrictArithmeticError as e:
        logger.error(str(e))
        return EXIT_ARITHMETIC_ERROR

    print(result.render(exact=request.exact))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
