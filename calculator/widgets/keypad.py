"""
================================================================================
Keypad - Button Grid Container
================================================================================

The keypad groups every key on a white card with rounded corners and a
soft shadow. Keys are placed from KEYPAD_LAYOUT, so the wide "0" and the
tall "=" come straight from the constants.

Design Philosophy:
    "Design is a funny word. Some people think design means how it looks.
     But of course, if you dig deeper, it's really how it works." - Steve Jobs
"""

from typing import Dict

from PyQt6.QtWidgets import QFrame, QGridLayout, QGraphicsDropShadowEffect
from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QColor

try:
    from .animated_button import KeyButton
    from ..styles.theme import COLORS
    from ..utils.constants import KEYPAD_COLUMNS, KEYPAD_LAYOUT
except ImportError:
    from widgets.animated_button import KeyButton
    from styles.theme import COLORS
    from utils.constants import KEYPAD_COLUMNS, KEYPAD_LAYOUT


class Keypad(QFrame):
    """
    A card holding the calculator keys.

    Signals:
        token_clicked: Re-emitted from whichever key was clicked

    Attributes:
        buttons: Mapping of token to its KeyButton
        grid: The key layout, KEYPAD_COLUMNS equal-width columns

    Example:
        >>> keypad = Keypad()
        >>> keypad.token_clicked.connect(window.press)
        >>> keypad.buttons["7"].click()
    """

    token_clicked = pyqtSignal(str)

    def __init__(self, button_font_size: int = 20, parent=None):
        """
        Initialize the keypad.

        Args:
            button_font_size: Label size for every key
            parent: Parent widget (optional)
        """
        super().__init__(parent)
        self.buttons: Dict[str, KeyButton] = {}

        self._setup_appearance()
        self._build_keys(button_font_size)

    def _setup_appearance(self) -> None:
        """Configure the card's visual appearance."""
        self.setStyleSheet(f"""
            Keypad {{
                background-color: {COLORS['bg_card']};
                border-radius: 16px;
                border: 1px solid {COLORS['border']};
            }}
        """)

        shadow = QGraphicsDropShadowEffect()
        shadow.setBlurRadius(20)
        shadow.setColor(QColor(0, 0, 0, 25))
        shadow.setOffset(0, 4)
        self.setGraphicsEffect(shadow)

    def _build_keys(self, font_size: int) -> None:
        layout = QGridLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(6)
        for col in range(KEYPAD_COLUMNS):
            layout.setColumnStretch(col, 1)

        for token, row, col, row_span, col_span in KEYPAD_LAYOUT:
            button = KeyButton(token, font_size)
            button.token_clicked.connect(self.token_clicked)
            layout.addWidget(button, row, col, row_span, col_span)
            self.buttons[token] = button

        self.grid = layout
