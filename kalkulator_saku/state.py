"""Calculator states and the events that move between them.

ENTERING          typing the left operand, no operator pending
OPERATOR_PENDING  an operator was pressed, right operand not typed yet
RIGHT_ENTERED     typing the right operand
COMMITTED         "=" was pressed; the next "=" repeats the last operation
"""

from __future__ import annotations

from enum import Enum


class CalcState(Enum):
    ENTERING = "entering"
    OPERATOR_PENDING = "operator_pending"
    RIGHT_ENTERED = "right_entered"
    COMMITTED = "committed"


class Event(Enum):
    DIGIT = "digit"  # digit or decimal point
    OPERATOR = "operator"
    OPERATE = "operate"
    COMMIT = "commit"
    EDIT = "edit"  # backspace, sign toggle, percent
    CLEAR_ENTRY = "clear_entry"  # also an external set_value
    ALL_CLEAR = "all_clear"


_E = CalcState.ENTERING
_P = CalcState.OPERATOR_PENDING
_R = CalcState.RIGHT_ENTERED
_C = CalcState.COMMITTED

# Typing after "=" starts over; editing after "=" restarts from the result;
# "=" after "=" stays committed (repeat), even when asked to commit.
_TRANSITIONS: dict[Event, dict[CalcState, CalcState]] = {
    Event.DIGIT: {_E: _E, _P: _R, _R: _R, _C: _E},
    Event.OPERATOR: {_E: _P, _P: _P, _R: _P, _C: _P},
    Event.OPERATE: {_E: _C, _P: _C, _R: _C, _C: _C},
    Event.COMMIT: {_E: _E, _P: _E, _R: _E, _C: _C},
    Event.EDIT: {_E: _E, _P: _R, _R: _R, _C: _E},
    Event.CLEAR_ENTRY: {_E: _E, _P: _R, _R: _R, _C: _C},
    Event.ALL_CLEAR: {_E: _E, _P: _E, _R: _E, _C: _E},
}


def transition(state: CalcState, event: Event) -> CalcState:
    """Return the state reached from ``state`` when ``event`` is applied."""
    return _TRANSITIONS[event][state]
