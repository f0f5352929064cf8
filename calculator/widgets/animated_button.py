"""
================================================================================
Key Button Widget
================================================================================

A keypad key with a smooth hover animation. Each key knows the token it
stands for and announces it through ``token_clicked``, so the keypad never
has to look at button labels.

Design Philosophy:
    "Details matter, it's worth waiting to get it right." - Steve Jobs
"""

from PyQt6.QtWidgets import QPushButton, QSizePolicy
from PyQt6.QtCore import Qt, QPropertyAnimation, QEasingCurve, pyqtProperty, pyqtSignal
from PyQt6.QtGui import QFont, QColor

try:
    from ..styles.theme import COLORS, FONT_NAME, get_button_style
    from ..utils.constants import (
        DIGIT_TOKENS, DECIMAL_TOKEN, CLEAR_TOKEN, BACKSPACE_TOKEN, EQUALS_TOKEN
    )
except ImportError:
    from styles.theme import COLORS, FONT_NAME, get_button_style
    from utils.constants import (
        DIGIT_TOKENS, DECIMAL_TOKEN, CLEAR_TOKEN, BACKSPACE_TOKEN, EQUALS_TOKEN
    )


def color_scheme_for(token: str) -> str:
    """
    Pick the color scheme for a key.

    Example:
        >>> color_scheme_for("7")
        'secondary'
        >>> color_scheme_for("=")
        'success'
    """
    if token in (CLEAR_TOKEN, BACKSPACE_TOKEN):
        return 'danger'
    if token == EQUALS_TOKEN:
        return 'success'
    if token == DECIMAL_TOKEN or (len(token) == 1 and token in DIGIT_TOKENS):
        return 'secondary'
    return 'primary'


class KeyButton(QPushButton):
    """
    A calculator key with hover color animation.

    Signals:
        token_clicked: Emitted with the key's token when it is clicked

    Example:
        >>> key = KeyButton("7")
        >>> key.token_clicked.connect(window.press)
    """

    token_clicked = pyqtSignal(str)

    def __init__(self, token: str, font_size: int = 20, parent=None):
        """
        Initialize the key.

        Args:
            token: Key label, also used as the command token
            font_size: Label size in points
            parent: Parent widget (optional)
        """
        super().__init__(token, parent)

        self.token = token
        self.color_scheme = color_scheme_for(token)
        self.font_size = font_size
        self._bg_color = QColor(COLORS[f'btn_{self.color_scheme}'])

        self._setup_appearance()
        self._setup_animation()

        self.clicked.connect(lambda: self.token_clicked.emit(self.token))

    def _setup_appearance(self) -> None:
        """Configure font, cursor and sizing."""
        self.setFont(QFont(FONT_NAME, self.font_size))
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(48, 48)
        self._update_style()

    def _setup_animation(self) -> None:
        self._color_anim = QPropertyAnimation(self, b"bgColor")
        self._color_anim.setDuration(150)
        self._color_anim.setEasingCurve(QEasingCurve.Type.OutCubic)

    def _update_style(self) -> None:
        self.setStyleSheet(get_button_style(
            self.color_scheme, self._bg_color.name(), self.font_size
        ))

    # =========================================================================
    # Qt Properties for Animation
    # =========================================================================

    @pyqtProperty(QColor)
    def bgColor(self) -> QColor:
        """Get the current background color."""
        return self._bg_color

    @bgColor.setter
    def bgColor(self, value: QColor) -> None:
        """Set the background color and update style."""
        self._bg_color = value
        self._update_style()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def _animate_to(self, color_key: str) -> None:
        self._color_anim.stop()
        self._color_anim.setStartValue(self._bg_color)
        self._color_anim.setEndValue(QColor(COLORS[color_key]))
        self._color_anim.start()

    def enterEvent(self, event) -> None:
        """Handle mouse enter - transition to hover color."""
        self._animate_to(f'btn_{self.color_scheme}_hover')
        super().enterEvent(event)

    def leaveEvent(self, event) -> None:
        """Handle mouse leave - transition back to base color."""
        self._animate_to(f'btn_{self.color_scheme}')
        super().leaveEvent(event)
