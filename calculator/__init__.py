"""
================================================================================
Calculator Package - Desktop Four-Function Calculator
================================================================================

A small, friendly desktop calculator: one display, one keypad, the four
basic operations, decimal input, backspace and clear.

Package Structure:
    calculator/
    ├── __init__.py          # This file - package entry point
    ├── __main__.py          # python -m calculator
    ├── app.py               # Application launcher
    ├── config.py            # Window and display settings
    ├── main_window.py       # Main application window
    ├── core/                # Calculator logic (no Qt)
    │   ├── arithmetic.py        # Parsing, compute, formatting
    │   ├── events.py            # Input events
    │   └── state.py             # State and reducer
    ├── styles/              # Visual design system
    │   └── theme.py         # Colors, fonts, styles
    ├── utils/               # Constants
    │   └── constants.py     # Key tokens, keypad layout, messages
    └── widgets/             # Custom UI components
        ├── animated_button.py   # Keypad keys
        ├── display.py           # Number display
        └── keypad.py            # Key grid

Usage:
    # Launch the application
    python -m calculator

    # Or import and run programmatically
    from calculator import main
    main()
"""

__version__ = "1.0.0"

try:
    from .app import main
    from .main_window import CalculatorWindow
except ImportError:
    from app import main
    from main_window import CalculatorWindow

__all__ = [
    'main',
    'CalculatorWindow',
]
