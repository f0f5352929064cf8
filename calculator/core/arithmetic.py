"""
================================================================================
Arithmetic - Parsing, Computation and Result Formatting
================================================================================

The numeric heart of the calculator. Everything here is a pure function
over floats and short strings, which keeps it trivial to test and
completely independent of the widget tree.

    parse_number("1.5")            -> 1.5
    compute(7.0, 3.0, Operator.ADD) -> 10.0
    format_number(1 / 3)           -> "0.3333333333"

Errors raised here all derive from CalculatorError so the state reducer
can turn them into an error display in one place.
"""

import math
import re
from decimal import Decimal, ROUND_HALF_EVEN, localcontext
from enum import Enum

try:
    from ..utils.constants import MAX_FRACTION_DIGITS, DIVIDE_BY_ZERO_MESSAGE
except ImportError:
    from utils.constants import MAX_FRACTION_DIGITS, DIVIDE_BY_ZERO_MESSAGE


# Plain decimal numerals only: "12", "0.", "3.25", ".5", "-7"
_NUMBER_PATTERN = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")

# Enough significant digits for the integer part of any finite float
_FLOAT_INTEGER_DIGITS = 310

# From here on every float is an integer; show its shortest round-trip digits
_EXACT_INTEGER_LIMIT = 2 ** 53


# =============================================================================
# Errors
# =============================================================================

class CalculatorError(Exception):
    """Base class for recoverable calculation errors."""


class ParseError(CalculatorError, ValueError):
    """The display text is not a number."""


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """The right operand of a division was zero."""

    def __init__(self, message: str = DIVIDE_BY_ZERO_MESSAGE):
        super().__init__(message)


# =============================================================================
# Operators
# =============================================================================

class Operator(str, Enum):
    """The four binary operators, valued by their key label."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


def compute(a: float, b: float, op: Operator) -> float:
    """
    Apply a binary operator to two operands.

    Args:
        a: Left operand (the stored value)
        b: Right operand (the number on the display)
        op: Operator to apply

    Returns:
        The result of ``a op b``

    Raises:
        DivisionByZeroError: If dividing by zero
        ValueError: If ``op`` is not one of the four operators
    """
    op = Operator(op)

    if op is Operator.ADD:
        return a + b
    if op is Operator.SUBTRACT:
        return a - b
    if op is Operator.MULTIPLY:
        return a * b

    if b == 0:
        raise DivisionByZeroError()
    return a / b


# =============================================================================
# Parsing and Formatting
# =============================================================================

def parse_number(text: str) -> float:
    """
    Parse display text into a float.

    Only plain decimal numerals are accepted. Error markers, infinity
    symbols and exponent notation never parse.

    Raises:
        ParseError: If ``text`` is not a plain decimal numeral
    """
    if not _NUMBER_PATTERN.fullmatch(text):
        raise ParseError(f"Not a number: {text!r}")
    return float(text)


def format_number(value: float, max_fraction_digits: int = MAX_FRACTION_DIGITS) -> str:
    """
    Render a result for the display.

    The value is rounded half-even to ``max_fraction_digits`` places,
    trailing zeros are dropped and exponent notation is never used.

    Example:
        >>> format_number(0.1 + 0.2)
        '0.3'
        >>> format_number(2.5e-11)
        '0'
        >>> format_number(1e23)
        '100000000000000000000000'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    if abs(value) >= _EXACT_INTEGER_LIMIT:
        return format(Decimal(repr(value)).to_integral_value(), "f")

    with localcontext() as ctx:
        ctx.prec = _FLOAT_INTEGER_DIGITS + max_fraction_digits
        quantum = Decimal(1).scaleb(-max_fraction_digits)
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_EVEN)

    if rounded.is_zero():
        return "0"

    text = format(rounded, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
