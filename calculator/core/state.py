"""
================================================================================
Calculator State - Input Accumulation and Operator Chaining
================================================================================

The whole behaviour of the calculator lives in one pure function:

    reduce(state, event) -> new state

CalculatorState is immutable; every event produces a fresh copy. The
window only has to keep the latest state and show ``state.display``.

State Machine:
    The ``fresh_entry`` flag is the only mode. While it is set the next
    digit replaces the display (FreshEntry); once a digit or point has been
    typed further input extends it (Appending). Operators, equals and clear
    always return to FreshEntry.

Operators chain strictly left to right with no precedence:

    2 + 3 *   -> display "5"
    4 =       -> display "20"
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

try:
    from .arithmetic import (
        CalculatorError, DivisionByZeroError, Operator,
        compute, format_number, parse_number
    )
    from .events import (
        ApplyOperator, Backspace, Clear, DecimalPoint, Digit, Equals, Event
    )
    from ..utils.constants import (
        DECIMAL_TOKEN, ERROR_TEXT, DIVIDE_BY_ZERO_TEXT, MAX_FRACTION_DIGITS
    )
except ImportError:
    from core.arithmetic import (
        CalculatorError, DivisionByZeroError, Operator,
        compute, format_number, parse_number
    )
    from core.events import (
        ApplyOperator, Backspace, Clear, DecimalPoint, Digit, Equals, Event
    )
    from utils.constants import (
        DECIMAL_TOKEN, ERROR_TEXT, DIVIDE_BY_ZERO_TEXT, MAX_FRACTION_DIGITS
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorState:
    """
    Snapshot of the calculator.

    Attributes:
        display: Text shown in the display (a number or an error marker)
        stored_value: Left operand of the pending operation
        operator: Pending operator, or None
        fresh_entry: True when the next digit starts a new number
    """

    display: str = "0"
    stored_value: float = 0.0
    operator: Optional[Operator] = None
    fresh_entry: bool = True

    @property
    def has_error(self) -> bool:
        """True while an error marker is on the display."""
        return self.display.startswith(ERROR_TEXT)


INITIAL_STATE = CalculatorState()


def reduce(state: CalculatorState, event: Event,
           max_fraction_digits: int = MAX_FRACTION_DIGITS) -> CalculatorState:
    """
    Apply one input event to a state.

    Args:
        state: Current state
        event: The key that was pressed
        max_fraction_digits: Fractional digits kept when rendering results

    Returns:
        The next state

    Raises:
        TypeError: If ``event`` is not a calculator event
    """
    logger.debug("Event %r on display %r", event, state.display)

    if isinstance(event, Digit):
        return _enter_digit(state, event.digit)
    if isinstance(event, DecimalPoint):
        return _enter_decimal_point(state)
    if isinstance(event, Clear):
        return INITIAL_STATE
    if isinstance(event, Backspace):
        return _backspace(state)
    if isinstance(event, ApplyOperator):
        return _apply_operator(state, event.operator, max_fraction_digits)
    if isinstance(event, Equals):
        return _evaluate(state, max_fraction_digits)

    raise TypeError(f"Unsupported event: {event!r}")


# =============================================================================
# Number Entry
# =============================================================================

def _enter_digit(state: CalculatorState, digit: str) -> CalculatorState:
    if state.fresh_entry or state.display == "0":
        return replace(state, display=digit, fresh_entry=False)
    return replace(state, display=state.display + digit)


def _enter_decimal_point(state: CalculatorState) -> CalculatorState:
    if state.fresh_entry:
        return replace(state, display="0" + DECIMAL_TOKEN, fresh_entry=False)
    if DECIMAL_TOKEN in state.display:
        return state
    return replace(state, display=state.display + DECIMAL_TOKEN)


def _backspace(state: CalculatorState) -> CalculatorState:
    if state.fresh_entry:
        return replace(state, display="0")

    remaining = state.display[:-1]
    if not remaining:
        return replace(state, display="0", fresh_entry=True)
    return replace(state, display=remaining)


# =============================================================================
# Evaluation
# =============================================================================

def _apply_operator(state: CalculatorState, op: Operator,
                    max_fraction_digits: int) -> CalculatorState:
    try:
        current = parse_number(state.display)
        if state.operator is None:
            return replace(state, stored_value=current, operator=op, fresh_entry=True)

        stored = compute(state.stored_value, current, state.operator)
        return CalculatorState(
            display=format_number(stored, max_fraction_digits),
            stored_value=stored,
            operator=op,
            fresh_entry=True,
        )
    except CalculatorError as e:
        logger.warning("Cannot apply %s: %s", op.value, e)
        return _error_state(ERROR_TEXT)


def _evaluate(state: CalculatorState, max_fraction_digits: int) -> CalculatorState:
    if state.operator is None:
        return state

    try:
        current = parse_number(state.display)
        result = compute(state.stored_value, current, state.operator)
    except DivisionByZeroError as e:
        logger.warning("Cannot evaluate: %s", e)
        return _error_state(DIVIDE_BY_ZERO_TEXT)
    except CalculatorError as e:
        logger.warning("Cannot evaluate: %s", e)
        return _error_state(ERROR_TEXT)

    return CalculatorState(display=format_number(result, max_fraction_digits))


def _error_state(message: str) -> CalculatorState:
    """Clear-equivalent state with an error marker on the display."""
    return replace(INITIAL_STATE, display=message)
