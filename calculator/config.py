"""
================================================================================
Calculator Configuration Module
================================================================================

Window and display settings for the calculator.

Features:
- Window title, size and resizability
- Display and key font sizes
- Result precision (fractional digits)
- Log level
- Configuration save/load to JSON
- Validation

The calculator's state is never saved; only these settings are.
================================================================================
"""

import json
import logging
from dataclasses import dataclass, fields
from typing import List
from pathlib import Path

try:
    from .utils.constants import (
        WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT,
        DISPLAY_FONT_SIZE, BUTTON_FONT_SIZE, MAX_FRACTION_DIGITS
    )
except ImportError:
    from utils.constants import (
        WINDOW_TITLE, WINDOW_WIDTH, WINDOW_HEIGHT,
        DISPLAY_FONT_SIZE, BUTTON_FONT_SIZE, MAX_FRACTION_DIGITS
    )

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CalculatorConfig:
    """
    Complete settings for the calculator window.

    Attributes:
        window_title: Title bar text
        window_width: Window width in pixels
        window_height: Window height in pixels
        resizable: Whether the user may resize the window
        display_font_size: Display digit size in points
        button_font_size: Key label size in points
        max_fraction_digits: Digits kept after the point in results
        log_level: Name of the logging level
    """

    window_title: str = WINDOW_TITLE
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT
    resizable: bool = False
    display_font_size: int = DISPLAY_FONT_SIZE
    button_font_size: int = BUTTON_FONT_SIZE
    max_fraction_digits: int = MAX_FRACTION_DIGITS
    log_level: str = "WARNING"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "window_title": self.window_title,
            "window_width": self.window_width,
            "window_height": self.window_height,
            "resizable": self.resizable,
            "display_font_size": self.display_font_size,
            "button_font_size": self.button_font_size,
            "max_fraction_digits": self.max_fraction_digits,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CalculatorConfig':
        """Create from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def save(self, filepath: str):
        """Save configuration to JSON file."""
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> 'CalculatorConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of issues.

        Returns:
            List of validation error messages (empty if valid)
        """
        issues = []

        if self.window_width <= 0 or self.window_height <= 0:
            issues.append(
                f"Window size must be positive: {self.window_width}x{self.window_height}"
            )

        if self.display_font_size <= 0 or self.button_font_size <= 0:
            issues.append("Font sizes must be positive")

        if not 0 <= self.max_fraction_digits <= 15:
            issues.append(
                f"max_fraction_digits {self.max_fraction_digits} out of range (0-15)"
            )

        if self.log_level.upper() not in LOG_LEVELS:
            issues.append(f"Unknown log level: {self.log_level}")

        return issues


# Default configuration file location
DEFAULT_CONFIG_PATH = Path(__file__).parent / "calculator_config.json"


def get_default_config(path: Path = None) -> CalculatorConfig:
    """Get default configuration (loads from file if exists, otherwise creates new)."""
    path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if path.exists():
        try:
            config = CalculatorConfig.load(str(path))
            issues = config.validate()
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.error("Error loading default config: %s", e)
        else:
            if not issues:
                return config
            logger.error("Ignoring invalid config: %s", "; ".join(issues))

    return CalculatorConfig()


def save_default_config(config: CalculatorConfig):
    """Save as default configuration."""
    config.save(str(DEFAULT_CONFIG_PATH))
