"""
================================================================================
Widgets Package - Custom UI Components
================================================================================

This package contains the custom widgets that make up the calculator
window. Each widget is self-contained and knows nothing about arithmetic.

Modules:
    animated_button: Keypad keys with hover animations
    display: The read-only number display
    keypad: The key grid card
"""

try:
    from .animated_button import KeyButton, color_scheme_for
    from .display import CalculatorDisplay
    from .keypad import Keypad
except ImportError:
    from widgets.animated_button import KeyButton, color_scheme_for
    from widgets.display import CalculatorDisplay
    from widgets.keypad import Keypad

__all__ = [
    'KeyButton',
    'color_scheme_for',
    'CalculatorDisplay',
    'Keypad',
]
