import os

import pytest

# Qt widgets need a platform plugin; render off screen so tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from calculator.config import CalculatorConfig
from calculator.core import INITIAL_STATE, event_from_token, reduce


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    from calculator.main_window import CalculatorWindow
    win = CalculatorWindow(CalculatorConfig())
    win.show()
    yield win
    win.close()
    win.deleteLater()


@pytest.fixture
def press_keys():
    """Feed key labels through the reducer, starting from a cleared state."""
    def _press(*tokens, state=INITIAL_STATE):
        for token in tokens:
            state = reduce(state, event_from_token(token))
        return state
    return _press
