"""
================================================================================
Core Package - Calculator Logic
================================================================================

This package contains everything the calculator computes, with no Qt
imports at all: number parsing and formatting, the input events, and the
state reducer that ties them together.

Design Philosophy:
    "Simple can be harder than complex." - Steve Jobs

Modules:
    arithmetic: Parsing, compute(), formatting and calculation errors
    events: Immutable input events and the key-label mapping
    state: CalculatorState and the reduce() function
"""

try:
    from .arithmetic import (
        CalculatorError, ParseError, DivisionByZeroError, Operator,
        compute, parse_number, format_number
    )
    from .events import (
        Digit, DecimalPoint, Clear, Backspace, ApplyOperator, Equals,
        Event, event_from_token
    )
    from .state import CalculatorState, INITIAL_STATE, reduce
except ImportError:
    from core.arithmetic import (
        CalculatorError, ParseError, DivisionByZeroError, Operator,
        compute, parse_number, format_number
    )
    from core.events import (
        Digit, DecimalPoint, Clear, Backspace, ApplyOperator, Equals,
        Event, event_from_token
    )
    from core.state import CalculatorState, INITIAL_STATE, reduce

__all__ = [
    'CalculatorError',
    'ParseError',
    'DivisionByZeroError',
    'Operator',
    'compute',
    'parse_number',
    'format_number',
    'Digit',
    'DecimalPoint',
    'Clear',
    'Backspace',
    'ApplyOperator',
    'Equals',
    'Event',
    'event_from_token',
    'CalculatorState',
    'INITIAL_STATE',
    'reduce',
]
