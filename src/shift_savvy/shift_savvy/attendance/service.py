from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import ButtonCommand, ButtonState, EventKind
from ..core.exceptions import ValidationError
from ..settings.repository import SettingsRepository
from ..shifts.repository import ShiftRepository
from .calculator.base import DailyStatusCalculator
from .calculator.standard_calculator import StandardDailyStatusCalculator
from .model import AttendanceEvent, DailyWorkStatus
from .repository import AttendanceRepository
from .state_machine import can_punch, derive_state, transition

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TodayView:
    work_date: date
    state: ButtonState
    events: tuple[AttendanceEvent, ...]
    can_punch: bool
    status: Optional[DailyWorkStatus] = None

    def to_dict(self) -> dict:
        return {
            "work_date": self.work_date.strftime("%Y-%m-%d"),
            "state": self.state.value,
            "events": [e.to_dict() for e in self.events],
            "can_punch": self.can_punch,
            "status": self.status.to_dict() if self.status else None,
        }


class AttendanceService:
    """Use cases: drive the attendance button and compute daily status."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        shifts: ShiftRepository,
        settings: SettingsRepository | None = None,
        *,
        calculator: DailyStatusCalculator | None = None,
    ):
        self._attendance = attendance
        self._shifts = shifts
        self._settings = settings
        self._calculator = calculator or StandardDailyStatusCalculator()

    def _show_punch(self) -> bool:
        shift = self._shifts.get_active()
        return bool(shift and shift.show_punch)

    def _simple_mode(self) -> bool:
        return bool(self._settings and self._settings.get().multi_button_mode == "simple")

    def current_state(self, work_date: date) -> ButtonState:
        return derive_state(self._attendance.get_events_for_date(work_date))

    def get_today(self, *, now: datetime | None = None) -> TodayView:
        today = (now or now_local()).date()
        events = tuple(self._attendance.get_events_for_date(today))
        state = derive_state(events)
        return TodayView(
            work_date=today,
            state=state,
            events=events,
            can_punch=can_punch(state, show_punch=self._show_punch()),
            status=self._attendance.get_daily_status(today),
        )

    def _apply(self, command: ButtonCommand, now: datetime) -> ButtonState:
        today = now.date()
        state = self.current_state(today)
        result = transition(state, command, show_punch=self._show_punch())

        if result.event is None:
            logger.debug("Ignored %s in state %s", command.value, state.value)
            return state

        self._attendance.append_event(today, AttendanceEvent(kind=result.event, timestamp=now))
        logger.info("Logged %s for %s (%s -> %s)", result.event.value, today, state.value, result.state.value)

        if result.event == EventKind.COMPLETE:
            self.calculate_daily_status(today, now=now)
        return result.state

    def advance(self, *, now: datetime | None = None) -> ButtonState:
        """Press the main button: log the next event for today.

        In simple button mode only the first press (depart) is accepted.
        """

        now = now or now_local()
        if self._simple_mode() and self.current_state(now.date()) != ButtonState.GO_WORK:
            return self.current_state(now.date())
        return self._apply(ButtonCommand.ADVANCE, now)

    def punch(self, *, now: datetime | None = None) -> ButtonState:
        return self._apply(ButtonCommand.PUNCH, now or now_local())

    def reset_today(self, *, confirmed: bool, now: datetime | None = None) -> ButtonState:
        """Drop all of today's events. There is no undo, so callers must confirm."""

        if not confirmed:
            raise ValidationError("Cần xác nhận trước khi đặt lại chấm công hôm nay")

        today = (now or now_local()).date()
        result = transition(self.current_state(today), ButtonCommand.RESET)
        if result.clears_events:
            self._attendance.clear_events_for_date(today)
            logger.info("Reset attendance events for %s", today)
        return result.state

    def get_events(self, work_date: date) -> Sequence[AttendanceEvent]:
        return self._attendance.get_events_for_date(work_date)

    def get_daily_status(self, work_date: date) -> Optional[DailyWorkStatus]:
        return self._attendance.get_daily_status(work_date)

    def calculate_daily_status(self, work_date: date, *, now: datetime | None = None) -> Optional[DailyWorkStatus]:
        """Recompute and store the status for `work_date`.

        Returns None and keeps any stored record when there is no active shift,
        no event, or the calculation fails.
        """

        try:
            shift = self._shifts.get_active()
            events = self._attendance.get_events_for_date(work_date)
            status = self._calculator.calculate(
                work_date=work_date,
                events=events,
                shift=shift,
                now=now or now_local(),
            )
            if status is None:
                return None
            self._attendance.put_daily_status(work_date, status)
        except Exception:
            logger.exception("Error calculating daily status for %s", work_date)
            return None

        logger.info("Daily status for %s: %s", work_date, status.status.value)
        return status
