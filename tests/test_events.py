import pytest

from calculator.core.arithmetic import Operator
from calculator.core.events import (
    ApplyOperator, Backspace, Clear, DecimalPoint, Digit, Equals, event_from_token
)


@pytest.mark.parametrize("digit", list("0123456789"))
def test_digit_tokens(digit):
    assert event_from_token(digit) == Digit(digit)

@pytest.mark.parametrize("token, expected", [
    (".", DecimalPoint()),
    ("C", Clear()),
    ("←", Backspace()),
    ("=", Equals()),
    ("+", ApplyOperator(Operator.ADD)),
    ("-", ApplyOperator(Operator.SUBTRACT)),
    ("*", ApplyOperator(Operator.MULTIPLY)),
    ("/", ApplyOperator(Operator.DIVIDE)),
])
def test_command_tokens(token, expected):
    assert event_from_token(token) == expected

@pytest.mark.parametrize("token", ["", "x", "10", "+-", "%", "c"])
def test_unknown_token(token):
    with pytest.raises(ValueError):
        event_from_token(token)

@pytest.mark.parametrize("bad", ["", "a", "12", "-1"])
def test_digit_validates(bad):
    with pytest.raises(ValueError):
        Digit(bad)

def test_apply_operator_normalizes_label():
    event = ApplyOperator("+")
    assert event.operator is Operator.ADD
    assert event == ApplyOperator(Operator.ADD)

def test_apply_operator_rejects_unknown():
    with pytest.raises(ValueError):
        ApplyOperator("^")

def test_events_are_immutable():
    event = Digit("4")
    with pytest.raises(AttributeError):
        event.digit = "5"
