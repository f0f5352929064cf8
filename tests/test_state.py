import itertools
import logging

import pytest

from calculator.core.arithmetic import Operator
from calculator.core.events import Backspace, Digit, Equals, event_from_token
from calculator.core.state import CalculatorState, INITIAL_STATE, reduce


# ---------------------------------------------------------------------------
# Number entry
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("tokens, expected", [
    (["5"], "5"),
    (["0", "5"], "5"),
    (["5", "0"], "50"),
    (["0", "0", "0"], "0"),
    (["1", "2", "3"], "123"),
    (["0", ".", "0", "5"], "0.05"),
])
def test_digits_concatenate_without_leading_zeros(press_keys, tokens, expected):
    assert press_keys(*tokens).display == expected

def assert_well_formed(display):
    assert display.count(".") <= 1
    whole = display.split(".")[0]
    assert whole == "0" or not whole.startswith("0")

@pytest.mark.parametrize("tokens", list(itertools.product("05.←", repeat=4)))
def test_typed_numbers_stay_well_formed(tokens):
    state = INITIAL_STATE
    for token in tokens:
        state = reduce(state, event_from_token(token))
        assert_well_formed(state.display)

def test_first_digit_leaves_fresh_entry(press_keys):
    assert INITIAL_STATE.fresh_entry
    assert not press_keys("7").fresh_entry

def test_decimal_point_on_fresh_entry(press_keys):
    state = press_keys(".")
    assert state.display == "0."
    assert not state.fresh_entry

def test_decimal_point_is_idempotent(press_keys):
    assert press_keys("1", ".", ".", "5").display == "1.5"
    assert press_keys("1", ".", "5", ".").display == "1.5"

def test_decimal_point_after_result_starts_new_number(press_keys):
    assert press_keys("7", "+", "3", "=", ".", "5").display == "0.5"

# ---------------------------------------------------------------------------
# Clear and backspace
# ---------------------------------------------------------------------------

def test_clear_resets_everything(press_keys):
    assert press_keys("4", "+", "2", "C") == INITIAL_STATE
    assert press_keys("5", "/", "0", "=", "C") == INITIAL_STATE

def test_backspace_on_fresh_state_is_noop(press_keys):
    assert press_keys("←") == INITIAL_STATE
    assert press_keys("←", "←").display == "0"

def test_backspace_drops_last_character(press_keys):
    state = press_keys("1", "2", "3", "←")
    assert state.display == "12"
    assert not state.fresh_entry

def test_backspace_to_empty_resets_to_fresh_zero(press_keys):
    state = press_keys("7", "←")
    assert state.display == "0"
    assert state.fresh_entry

def test_backspace_removes_decimal_point(press_keys):
    assert press_keys("2", ".", "←").display == "2"
    assert press_keys("2", ".", "←", ".", "5").display == "2.5"

def test_backspace_after_result_shows_zero(press_keys):
    state = press_keys("7", "+", "3", "=", "←")
    assert state.display == "0"
    assert state.fresh_entry

def test_backspace_keeps_pending_operator(press_keys):
    state = press_keys("5", "+", "2", "3", "←")
    assert state.display == "2"
    assert state.operator is Operator.ADD
    assert press_keys("=", state=state).display == "7"

# ---------------------------------------------------------------------------
# Operators and equals
# ---------------------------------------------------------------------------

def test_simple_addition(press_keys):
    assert press_keys("7", "+", "3", "=").display == "10"

def test_decimal_addition(press_keys):
    assert press_keys("1", ".", "5", "+", "2", ".", "5", "=").display == "4"

@pytest.mark.parametrize("tokens, expected", [
    (["9", "-", "4", "="], "5"),
    (["3", "-", "8", "="], "-5"),
    (["6", "*", "7", "="], "42"),
    (["7", "/", "2", "="], "3.5"),
    (["1", "/", "3", "="], "0.3333333333"),
    ([".", "1", "+", ".", "2", "="], "0.3"),
])
def test_operations(press_keys, tokens, expected):
    assert press_keys(*tokens).display == expected

def test_operator_stores_left_operand(press_keys):
    state = press_keys("1", "2", "+")
    assert state.stored_value == 12.0
    assert state.operator is Operator.ADD
    assert state.fresh_entry
    assert state.display == "12"

def test_chaining_applies_left_to_right(press_keys):
    state = press_keys("2", "+", "3", "*")
    assert state.display == "5"
    assert state.stored_value == 5.0
    assert state.operator is Operator.MULTIPLY
    assert press_keys("4", "=", state=state).display == "20"

def test_long_chain(press_keys):
    assert press_keys("1", "0", "-", "2", "/", "4", "+", "1", "=").display == "3"

def test_repeated_operator_reuses_display(press_keys):
    # The display still holds the stored value, so it becomes the right operand
    assert press_keys("2", "+", "*").display == "4"

def test_equals_resets_operator_and_stored_value(press_keys):
    state = press_keys("7", "+", "3", "=")
    assert state == CalculatorState(display="10")

def test_equals_without_operator_is_noop(press_keys):
    state = press_keys("4", "2")
    assert reduce(state, Equals()) is state
    assert press_keys("=") == INITIAL_STATE

def test_equals_twice_keeps_result(press_keys):
    assert press_keys("7", "+", "3", "=", "=").display == "10"

def test_digit_after_result_starts_new_number(press_keys):
    assert press_keys("7", "+", "3", "=", "5").display == "5"

def test_result_can_be_used_as_left_operand(press_keys):
    assert press_keys("7", "+", "3", "=", "*", "2", "=").display == "20"

def test_custom_precision():
    state = CalculatorState(display="3", stored_value=1.0, operator=Operator.DIVIDE,
                            fresh_entry=False)
    assert reduce(state, Equals(), max_fraction_digits=3).display == "0.333"

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

def test_divide_by_zero_on_equals(press_keys):
    state = press_keys("5", "/", "0", "=")
    assert state.display == "Error: Divide by zero"
    assert state.has_error
    assert state.operator is None
    assert state.stored_value == 0.0
    assert state.fresh_entry

def test_new_computation_after_divide_by_zero(press_keys):
    state = press_keys("5", "/", "0", "=")
    assert press_keys("7", "+", "3", "=", state=state).display == "10"

def test_divide_by_zero_while_chaining(press_keys):
    state = press_keys("5", "/", "0", "+")
    assert state.display == "Error"
    assert state.operator is None
    assert state.fresh_entry

def test_operator_on_error_display(press_keys):
    state = press_keys("5", "/", "0", "=", "+")
    assert state.display == "Error"
    assert state.operator is None

def test_malformed_display_is_an_error():
    state = CalculatorState(display="abc", stored_value=2.0, operator=Operator.ADD,
                            fresh_entry=False)
    result = reduce(state, Equals())
    assert result.display == "Error"
    assert result.operator is None
    assert result.fresh_entry

def test_errors_are_logged(press_keys, caplog):
    with caplog.at_level(logging.WARNING, logger="calculator.core.state"):
        press_keys("5", "/", "0", "=")
    assert "Divide by zero" in caplog.text

def test_backspace_on_error_shows_zero(press_keys):
    state = press_keys("5", "/", "0", "=", "←")
    assert state == INITIAL_STATE

def test_unknown_event_is_rejected():
    with pytest.raises(TypeError):
        reduce(INITIAL_STATE, "7")

def test_state_is_never_mutated(press_keys):
    before = press_keys("1", "2")
    reduce(before, Digit("3"))
    reduce(before, Backspace())
    assert before.display == "12"
