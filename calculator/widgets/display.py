"""
================================================================================
Calculator Display
================================================================================

The read-only number field at the top of the window. It shows whatever
the current state's display text is and turns red while an error message
is on screen.
"""

from PyQt6.QtWidgets import QLineEdit, QSizePolicy
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont

try:
    from ..styles.theme import FONT_NAME, get_display_style
    from ..utils.constants import ERROR_TEXT
except ImportError:
    from styles.theme import FONT_NAME, get_display_style
    from utils.constants import ERROR_TEXT


class CalculatorDisplay(QLineEdit):
    """
    Right-aligned, read-only display.

    Example:
        >>> display = CalculatorDisplay()
        >>> display.show_text("42")
        >>> display.is_error
        False
    """

    def __init__(self, font_size: int = 28, parent=None):
        """
        Initialize the display.

        Args:
            font_size: Digit size in points
            parent: Parent widget (optional)
        """
        super().__init__("0", parent)
        self.is_error = False

        self.setReadOnly(True)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.setFont(QFont(FONT_NAME, font_size, QFont.Weight.Bold))
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setStyleSheet(get_display_style())

    def show_text(self, text: str) -> None:
        """
        Update the displayed text, restyling on entering or leaving an error.

        Args:
            text: New display text
        """
        error = text.startswith(ERROR_TEXT)
        if error != self.is_error:
            self.is_error = error
            self.setStyleSheet(get_display_style(error))

        self.setText(text)
        # Keep the most significant digits visible for long numbers
        self.setCursorPosition(0)
