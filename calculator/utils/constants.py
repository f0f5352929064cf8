"""
================================================================================
Constants - Application-Wide Configuration Values
================================================================================

This module defines all constants used throughout the calculator. Keeping
the key labels, layout and messages in one place means the keypad, the
keyboard handler and the evaluator always agree on what a key means.

Design Philosophy:
    "The details are not the details. They make the design." - Charles Eames
"""

from typing import Dict, List, Tuple

# =============================================================================
# Key Tokens
# =============================================================================

# Every key on the keypad is identified by its label
DIGIT_TOKENS: str = "0123456789"
DECIMAL_TOKEN: str = "."
CLEAR_TOKEN: str = "C"
BACKSPACE_TOKEN: str = "←"
EQUALS_TOKEN: str = "="
OPERATOR_TOKENS: str = "+-*/"

# =============================================================================
# Keypad Layout
# =============================================================================

KEYPAD_COLUMNS: int = 4

# (token, row, column, row_span, column_span)
# The "0" key is two columns wide and "=" is two rows tall
KEYPAD_LAYOUT: List[Tuple[str, int, int, int, int]] = [
    ("C", 0, 0, 1, 1), ("←", 0, 1, 1, 1), ("/", 0, 2, 1, 1), ("*", 0, 3, 1, 1),
    ("7", 1, 0, 1, 1), ("8", 1, 1, 1, 1), ("9", 1, 2, 1, 1), ("-", 1, 3, 1, 1),
    ("4", 2, 0, 1, 1), ("5", 2, 1, 1, 1), ("6", 2, 2, 1, 1), ("+", 2, 3, 1, 1),
    ("1", 3, 0, 1, 1), ("2", 3, 1, 1, 1), ("3", 3, 2, 1, 1), ("=", 3, 3, 2, 1),
    ("0", 4, 0, 1, 2), (".", 4, 2, 1, 1),
]

# =============================================================================
# Keyboard Bindings
# =============================================================================

# Typed characters that map onto a token other than themselves
KEY_TEXT_ALIASES: Dict[str, str] = {
    ",": DECIMAL_TOKEN,
    "\r": EQUALS_TOKEN,
    "\n": EQUALS_TOKEN,
    "x": "*",
    "X": "*",
    "c": CLEAR_TOKEN,
}

# =============================================================================
# Evaluation
# =============================================================================

# Results show at most this many digits after the decimal point
MAX_FRACTION_DIGITS: int = 10

# Text shown in the display when a calculation cannot complete
ERROR_TEXT: str = "Error"
DIVIDE_BY_ZERO_MESSAGE: str = "Divide by zero"
DIVIDE_BY_ZERO_TEXT: str = f"{ERROR_TEXT}: {DIVIDE_BY_ZERO_MESSAGE}"

# =============================================================================
# Window Defaults
# =============================================================================

WINDOW_TITLE: str = "Calculator"
WINDOW_WIDTH: int = 320
WINDOW_HEIGHT: int = 420
DISPLAY_FONT_SIZE: int = 28
BUTTON_FONT_SIZE: int = 20
