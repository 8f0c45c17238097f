"""Attendance button state machine.

The button state is never stored: it is a projection of the day's event list.
`transition` is a pure reducer over (state, command) that also names the event
the caller must append.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.enums import ButtonCommand, ButtonState, EventKind
from .model import AttendanceEvent

# state -> (event appended, next state)
ADVANCE_TABLE: dict[ButtonState, tuple[EventKind, ButtonState]] = {
    ButtonState.GO_WORK: (EventKind.DEPART, ButtonState.WAITING_CHECK_IN),
    ButtonState.WAITING_CHECK_IN: (EventKind.CHECK_IN, ButtonState.WORKING),
    ButtonState.WORKING: (EventKind.CHECK_OUT, ButtonState.READY_COMPLETE),
    ButtonState.READY_COMPLETE: (EventKind.COMPLETE, ButtonState.COMPLETED),
}

# Checked in order: the furthest-reached kind wins.
_DERIVATION_ORDER: tuple[tuple[EventKind, ButtonState], ...] = (
    (EventKind.COMPLETE, ButtonState.COMPLETED),
    (EventKind.CHECK_OUT, ButtonState.READY_COMPLETE),
    (EventKind.CHECK_IN, ButtonState.WORKING),
    (EventKind.DEPART, ButtonState.WAITING_CHECK_IN),
)


@dataclass(frozen=True)
class Transition:
    state: ButtonState
    event: Optional[EventKind] = None
    clears_events: bool = False


def derive_state(events: Iterable[AttendanceEvent]) -> ButtonState:
    kinds = {e.kind for e in events}
    for kind, state in _DERIVATION_ORDER:
        if kind in kinds:
            return state
    return ButtonState.GO_WORK


def can_punch(state: ButtonState, *, show_punch: bool) -> bool:
    return show_punch and state == ButtonState.WORKING


def transition(state: ButtonState, command: ButtonCommand, *, show_punch: bool = False) -> Transition:
    """Apply `command` to `state`.

    Commands that are not valid for the current state are no-ops: the same
    state comes back with no event to append.
    """

    if command == ButtonCommand.RESET:
        return Transition(state=ButtonState.GO_WORK, clears_events=True)

    if command == ButtonCommand.PUNCH:
        if can_punch(state, show_punch=show_punch):
            return Transition(state=state, event=EventKind.PUNCH)
        return Transition(state=state)

    step = ADVANCE_TABLE.get(state)
    if step is None:
        return Transition(state=state)
    event, next_state = step
    return Transition(state=next_state, event=event)
