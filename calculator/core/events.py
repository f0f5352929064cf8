"""
================================================================================
Events - Calculator Input Events
================================================================================

Every key press becomes one of six small, immutable event objects. The
keypad, the keyboard handler and the tests all speak this vocabulary, and
the state reducer matches on it.

    Digit("7"), DecimalPoint(), Clear(), Backspace(),
    ApplyOperator(Operator.ADD), Equals()

Use event_from_token() to turn a key label into its event.
"""

from dataclasses import dataclass
from typing import Union

try:
    from .arithmetic import Operator
    from ..utils.constants import (
        DIGIT_TOKENS, DECIMAL_TOKEN, CLEAR_TOKEN,
        BACKSPACE_TOKEN, EQUALS_TOKEN, OPERATOR_TOKENS
    )
except ImportError:
    from core.arithmetic import Operator
    from utils.constants import (
        DIGIT_TOKENS, DECIMAL_TOKEN, CLEAR_TOKEN,
        BACKSPACE_TOKEN, EQUALS_TOKEN, OPERATOR_TOKENS
    )


@dataclass(frozen=True)
class Digit:
    """A single digit key, ``"0"`` through ``"9"``."""

    digit: str

    def __post_init__(self):
        if len(self.digit) != 1 or self.digit not in DIGIT_TOKENS:
            raise ValueError(f"Not a digit: {self.digit!r}")


@dataclass(frozen=True)
class DecimalPoint:
    pass


@dataclass(frozen=True)
class Clear:
    pass


@dataclass(frozen=True)
class Backspace:
    pass


@dataclass(frozen=True)
class ApplyOperator:
    """An operator key; becomes the pending operator."""

    operator: Operator

    def __post_init__(self):
        # Accept the raw key label as well as the enum member
        object.__setattr__(self, 'operator', Operator(self.operator))


@dataclass(frozen=True)
class Equals:
    pass


Event = Union[Digit, DecimalPoint, Clear, Backspace, ApplyOperator, Equals]


def event_from_token(token: str) -> Event:
    """
    Map a key label to its event.

    Args:
        token: A keypad label such as ``"7"``, ``"."``, ``"←"`` or ``"="``

    Returns:
        The matching event

    Raises:
        ValueError: If the token does not name a key
    """
    if len(token) == 1 and token in DIGIT_TOKENS:
        return Digit(token)
    if token == DECIMAL_TOKEN:
        return DecimalPoint()
    if token == CLEAR_TOKEN:
        return Clear()
    if token == BACKSPACE_TOKEN:
        return Backspace()
    if len(token) == 1 and token in OPERATOR_TOKENS:
        return ApplyOperator(Operator(token))
    if token == EQUALS_TOKEN:
        return Equals()

    raise ValueError(f"Unknown key: {token!r}")
