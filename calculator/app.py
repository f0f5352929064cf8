"""
================================================================================
Application Entry Point
================================================================================

This module provides the main entry point for the calculator.

Usage:
    python -m calculator.app

Or:
    from calculator.app import main
    main()
"""

import logging
import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication
from PyQt6.QtGui import QFont

try:
    from .config import CalculatorConfig, get_default_config
    from .main_window import CalculatorWindow
    from .styles.theme import FONT_NAME
except ImportError:
    from config import CalculatorConfig, get_default_config
    from main_window import CalculatorWindow
    from styles.theme import FONT_NAME


def configure_logging(level: str) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(config: Optional[CalculatorConfig] = None) -> int:
    """
    Launch the calculator.

    Args:
        config: Settings to use (loaded from the default file when omitted)

    Returns:
        Exit code (0 for success)

    Example:
        >>> import sys
        >>> sys.exit(main())
    """
    config = config or get_default_config()
    configure_logging(config.log_level)

    # Create application
    app = QApplication.instance() or QApplication(sys.argv)
    app.setStyle('Fusion')
    app.setFont(QFont(FONT_NAME, 10))

    # Create and show main window
    window = CalculatorWindow(config)
    window.show()
    logging.getLogger(__name__).info("Calculator started")

    # Run event loop
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
