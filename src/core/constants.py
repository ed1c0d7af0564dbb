"""
Core constants and limits.

Defines system-wide constants and resource limits to prevent abuse
and ensure system stability.
"""

import re

# Scale Limits
MAX_FRACTIONAL_DIGITS = 1000  # Maximum fractional digits tracked on one value
MAX_MAGNITUDE_DIGITS = 4000  # Largest magnitude parsed or rendered, below int/str conversion limit
MAX_MAGNITUDE = 10**MAX_MAGNITUDE_DIGITS  # Exclusive bound on abs(magnitude) for rendering

# Division
DIVISION_PRECISION = 28  # Significant digits kept past the whole part of a quotient

# Operand Limits
MIN_REDUCE_OPERANDS = 1  # add/subtract/multiply need at least one operand
DIVIDE_ARITY = 2  # divide is strictly binary

# Rounding
DEFAULT_ROUND_DIGITS = 0  # Round to a whole number unless told otherwise
ROUND_UP_THRESHOLD = 5  # Inspected digit at or above this rounds away from zero

# Accepted textual literals: optional minus, digits, optional fraction
LITERAL_PATTERN = re.compile(r"^(-?)(\d+)(?:\.(\d+))?$")
