"""
================================================================================
Utils Package - Core Constants and Utilities
================================================================================

This package contains fundamental constants used throughout the
application. Keeping these centralized ensures consistency and makes the
codebase easier to maintain.

Modules:
    constants: Key tokens, keypad layout, messages and window defaults
"""

try:
    from .constants import (
        # Key tokens
        DIGIT_TOKENS,
        DECIMAL_TOKEN,
        CLEAR_TOKEN,
        BACKSPACE_TOKEN,
        EQUALS_TOKEN,
        OPERATOR_TOKENS,
        # Keypad and keyboard
        KEYPAD_COLUMNS,
        KEYPAD_LAYOUT,
        KEY_TEXT_ALIASES,
        # Evaluation
        MAX_FRACTION_DIGITS,
        ERROR_TEXT,
        DIVIDE_BY_ZERO_MESSAGE,
        DIVIDE_BY_ZERO_TEXT,
    )
except ImportError:
    from utils.constants import (
        DIGIT_TOKENS,
        DECIMAL_TOKEN,
        CLEAR_TOKEN,
        BACKSPACE_TOKEN,
        EQUALS_TOKEN,
        OPERATOR_TOKENS,
        KEYPAD_COLUMNS,
        KEYPAD_LAYOUT,
        KEY_TEXT_ALIASES,
        MAX_FRACTION_DIGITS,
        ERROR_TEXT,
        DIVIDE_BY_ZERO_MESSAGE,
        DIVIDE_BY_ZERO_TEXT,
    )

__all__ = [
    'DIGIT_TOKENS',
    'DECIMAL_TOKEN',
    'CLEAR_TOKEN',
    'BACKSPACE_TOKEN',
    'EQUALS_TOKEN',
    'OPERATOR_TOKENS',
    'KEYPAD_COLUMNS',
    'KEYPAD_LAYOUT',
    'KEY_TEXT_ALIASES',
    'MAX_FRACTION_DIGITS',
    'ERROR_TEXT',
    'DIVIDE_BY_ZERO_MESSAGE',
    'DIVIDE_BY_ZERO_TEXT',
]
