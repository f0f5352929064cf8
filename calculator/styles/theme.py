"""
================================================================================
Theme - Application Visual Design System
================================================================================

This module defines the visual design system for the calculator: a calm
palette, one font family, and stylesheet helpers for the display and the
keys.

Design Philosophy:
    "Simplicity is the ultimate sophistication." - Leonardo da Vinci

Key Colors:
    - Secondary (light gray): Digits and the decimal point
    - Primary (purple): Operators
    - Danger (red): Clear and backspace
    - Success (teal): Equals
"""

from typing import Dict

# =============================================================================
# Color Palette
# =============================================================================

COLORS: Dict[str, str] = {
    # -------------------------------------------------------------------------
    # Background Colors
    # -------------------------------------------------------------------------
    'bg_main': '#f5f7fa',           # Light gray-blue - window background
    'bg_card': '#ffffff',           # Pure white - keypad and display

    # -------------------------------------------------------------------------
    # Text Colors
    # -------------------------------------------------------------------------
    'text_dark': '#2d3436',         # Near-black - display digits
    'text_light': '#636e72',        # Medium gray - secondary text
    'text_white': '#ffffff',        # White - text on colored keys

    # -------------------------------------------------------------------------
    # Accent Colors
    # -------------------------------------------------------------------------
    'primary': '#6c5ce7',
    'success': '#00b894',
    'danger': '#d63031',

    # -------------------------------------------------------------------------
    # Button States
    # -------------------------------------------------------------------------
    'btn_primary': '#6c5ce7',
    'btn_primary_hover': '#5b4cdb',
    'btn_success': '#00b894',
    'btn_success_hover': '#00a187',
    'btn_danger': '#d63031',
    'btn_danger_hover': '#c0392b',
    'btn_secondary': '#dfe6e9',
    'btn_secondary_hover': '#b2bec3',

    # -------------------------------------------------------------------------
    # Utility Colors
    # -------------------------------------------------------------------------
    'border': '#dfe6e9',
}

# =============================================================================
# Typography
# =============================================================================

FONT_FAMILY: str = "Segoe UI, Helvetica Neue, Arial, sans-serif"

# Single family name handed to QFont
FONT_NAME: str = "Arial"


# =============================================================================
# Style Helper Functions
# =============================================================================

def get_button_style(color_scheme: str, background: str = None,
                     font_size: int = 20) -> str:
    """
    Generate the stylesheet for a keypad key.

    Args:
        color_scheme: One of 'primary', 'success', 'danger', 'secondary'
        background: Background color override (used while animating)
        font_size: Label size in pixels

    Returns:
        CSS stylesheet string for QPushButton

    Example:
        >>> style = get_button_style('primary')
        >>> button.setStyleSheet(style)
    """
    bg_color = background or COLORS.get(f'btn_{color_scheme}', COLORS['btn_primary'])
    text_color = COLORS['text_white'] if color_scheme != 'secondary' else COLORS['text_dark']

    return f"""
        QPushButton {{
            background-color: {bg_color};
            color: {text_color};
            border: none;
            border-radius: 12px;
            padding: 8px;
            font-family: {FONT_FAMILY};
            font-size: {font_size}px;
        }}
    """


def get_display_style(error: bool = False) -> str:
    """
    Generate the stylesheet for the number display.

    Args:
        error: Use the danger color for an error message

    Returns:
        CSS stylesheet string for QLineEdit
    """
    text_color = COLORS['danger'] if error else COLORS['text_dark']

    return f"""
        QLineEdit {{
            background-color: {COLORS['bg_card']};
            color: {text_color};
            border: 1px solid {COLORS['border']};
            border-radius: 12px;
            padding: 8px;
        }}
    """


def get_window_style() -> str:
    """Generate the stylesheet for the main window background."""
    return f"""
        QMainWindow {{
            background-color: {COLORS['bg_main']};
        }}
    """
