"""
================================================================================
Styles Package - Visual Design System
================================================================================

This package defines the visual language of the calculator: colors,
typography and component stylesheets.

Modules:
    theme: Color palette, fonts, and stylesheet helpers
"""

try:
    from .theme import (
        # Color palette
        COLORS,
        # Typography
        FONT_FAMILY,
        FONT_NAME,
        # Helper functions
        get_button_style,
        get_display_style,
        get_window_style,
    )
except ImportError:
    from styles.theme import (
        COLORS,
        FONT_FAMILY,
        FONT_NAME,
        get_button_style,
        get_display_style,
        get_window_style,
    )

__all__ = [
    'COLORS',
    'FONT_FAMILY',
    'FONT_NAME',
    'get_button_style',
    'get_display_style',
    'get_window_style',
]
