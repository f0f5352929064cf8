"""
================================================================================
Main Window - Application Core
================================================================================

This module contains the calculator window. It owns exactly one piece of
mutable data, the current CalculatorState, and replaces it on every key
press with whatever reduce() returns.

Design Philosophy:
    "That's been one of my mantras - focus and simplicity." - Steve Jobs

The window is organized top to bottom:
    - Display: the current number or error message
    - Keypad: digits, operators, clear, backspace and equals

Keys can be clicked or typed on the keyboard.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout
from PyQt6.QtCore import Qt

# Internal modules - support both package and direct execution
try:
    from .config import CalculatorConfig
    from .core import CalculatorState, INITIAL_STATE, Event, event_from_token, reduce
    from .styles.theme import get_window_style
    from .utils.constants import (
        KEY_TEXT_ALIASES, CLEAR_TOKEN, BACKSPACE_TOKEN, EQUALS_TOKEN
    )
    from .widgets import CalculatorDisplay, Keypad
except ImportError:
    from config import CalculatorConfig
    from core import CalculatorState, INITIAL_STATE, Event, event_from_token, reduce
    from styles.theme import get_window_style
    from utils.constants import (
        KEY_TEXT_ALIASES, CLEAR_TOKEN, BACKSPACE_TOKEN, EQUALS_TOKEN
    )
    from widgets import CalculatorDisplay, Keypad

logger = logging.getLogger(__name__)

# Non-printing keys and the tokens they stand for
SPECIAL_KEYS = {
    Qt.Key.Key_Return.value: EQUALS_TOKEN,
    Qt.Key.Key_Enter.value: EQUALS_TOKEN,
    Qt.Key.Key_Backspace.value: BACKSPACE_TOKEN,
    Qt.Key.Key_Escape.value: CLEAR_TOKEN,
    Qt.Key.Key_Delete.value: CLEAR_TOKEN,
}


class CalculatorWindow(QMainWindow):
    """
    Main calculator window.

    The window provides:
        - A read-only display
        - A keypad for the four operations, decimal point, backspace and clear
        - Keyboard shortcuts for every key

    Example:
        >>> app = QApplication(sys.argv)
        >>> window = CalculatorWindow()
        >>> window.show()
        >>> sys.exit(app.exec())
    """

    def __init__(self, config: Optional[CalculatorConfig] = None):
        """
        Initialize the main window.

        Args:
            config: Window settings (defaults are used when omitted)
        """
        super().__init__()
        self.config = config or CalculatorConfig()
        self._state = INITIAL_STATE

        self._build_ui()
        self._render()

    # =========================================================================
    # UI Building
    # =========================================================================

    def _build_ui(self) -> None:
        """Build the complete user interface."""
        self.setWindowTitle(self.config.window_title)
        if self.config.resizable:
            self.resize(self.config.window_width, self.config.window_height)
        else:
            self.setFixedSize(self.config.window_width, self.config.window_height)
        self.setStyleSheet(get_window_style())
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setSpacing(6)
        layout.setContentsMargins(12, 12, 12, 12)

        self.display = CalculatorDisplay(self.config.display_font_size)
        layout.addWidget(self.display)

        self.keypad = Keypad(self.config.button_font_size)
        self.keypad.token_clicked.connect(self.press)
        layout.addWidget(self.keypad, stretch=1)

    # =========================================================================
    # State
    # =========================================================================

    @property
    def state(self) -> CalculatorState:
        """The current calculator state."""
        return self._state

    @property
    def display_text(self) -> str:
        """Text currently shown in the display."""
        return self.display.text()

    def dispatch(self, event: Event) -> None:
        """
        Apply an event and refresh the display.

        Args:
            event: Calculator input event
        """
        self._state = reduce(self._state, event, self.config.max_fraction_digits)
        self._render()

    def press(self, token: str) -> None:
        """
        Handle a key by its label.

        Args:
            token: Key label such as "7", "+" or "="
        """
        self.dispatch(event_from_token(token))

    def _render(self) -> None:
        self.display.show_text(self._state.display)

    # =========================================================================
    # Keyboard
    # =========================================================================

    def keyPressEvent(self, event) -> None:
        """Translate typed keys into calculator tokens."""
        token = SPECIAL_KEYS.get(event.key())
        if token is None:
            text = event.text()
            token = KEY_TEXT_ALIASES.get(text, text)

        try:
            calc_event = event_from_token(token)
        except ValueError:
            super().keyPressEvent(event)
            return

        logger.debug("Key %r -> %r", event.text(), token)
        self.dispatch(calc_event)
