from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ...common.datetime_utils import parse_hhmm
from ...core.enums import EventKind, WorkStatus
from ...shifts.model import ShiftDefinition
from ..factory import StatusStrategyFactory
from ..model import AttendanceEvent, DailyWorkStatus
from .base import DailyStatusCalculator

ONE_MINUTE = timedelta(minutes=1)
ONE_HOUR = timedelta(hours=1)


@dataclass(frozen=True)
class ShiftWindow:
    shift_start: datetime
    office_end: datetime
    shift_end: datetime


def anchor_shift(work_date: date, shift: ShiftDefinition) -> ShiftWindow:
    """Pin a shift's wall-clock boundaries onto `work_date`.

    A boundary whose hour is below the start hour belongs to the next day.
    Only hours are compared; shift validation rejects boundaries that wrap
    onto the start hour.
    """

    start = parse_hhmm(shift.start_time)
    office_end = parse_hhmm(shift.office_end_time)
    end = parse_hhmm(shift.end_time)

    shift_start_dt = datetime.combine(work_date, start)
    office_end_dt = datetime.combine(work_date, office_end)
    shift_end_dt = datetime.combine(work_date, end)

    if office_end.hour < start.hour:
        office_end_dt += timedelta(days=1)
    if end.hour < start.hour:
        shift_end_dt += timedelta(days=1)

    return ShiftWindow(shift_start=shift_start_dt, office_end=office_end_dt, shift_end=shift_end_dt)


def _first(events: Sequence[AttendanceEvent], kind: EventKind) -> Optional[AttendanceEvent]:
    return next((e for e in events if e.kind == kind), None)


def round_up_penalty(minutes: int, rounding: int) -> int:
    return math.ceil(minutes / rounding) * rounding


class StandardDailyStatusCalculator(DailyStatusCalculator):
    """Standard rule.

    late/early are whole minutes against shift start and office end, the sum is
    rounded up to the shift's penalty step, and payable hours are
    (out - in) - break - penalty, not below 0. Overtime counts from office end.
    """

    def __init__(self, *, strategy_factory: StatusStrategyFactory | None = None):
        self._factory = strategy_factory or StatusStrategyFactory()

    def calculate(
        self,
        *,
        work_date: date,
        events: Sequence[AttendanceEvent],
        shift: Optional[ShiftDefinition],
        now: datetime,
    ) -> Optional[DailyWorkStatus]:
        if shift is None or not events:
            return None

        events = tuple(events)
        check_in = _first(events, EventKind.CHECK_IN)
        check_out = _first(events, EventKind.CHECK_OUT)

        if check_in is None or check_out is None:
            return DailyWorkStatus(
                work_date=work_date,
                status=WorkStatus.MISSING_LOGS,
                shift_id=shift.shift_id,
                shift_name=shift.name,
                events=events,
                calculated_at=now,
            )

        window = anchor_shift(work_date, shift)
        in_time = check_in.timestamp
        out_time = check_out.timestamp

        late_minutes = max(0, (in_time - window.shift_start) // ONE_MINUTE)
        early_minutes = max(0, (window.office_end - out_time) // ONE_MINUTE)
        penalty_minutes = round_up_penalty(late_minutes + early_minutes, shift.penalty_rounding_minutes)

        # Not clamped: a check-out before check-in yields negative gross hours.
        gross_hours = (out_time - in_time) / ONE_HOUR
        total_hours = max(0.0, gross_hours - shift.break_minutes / 60 - penalty_minutes / 60)
        ot_hours = max(timedelta(0), out_time - window.office_end) / ONE_HOUR

        decision = self._factory.for_metrics(
            late_minutes=late_minutes, early_minutes=early_minutes
        ).decide(late_minutes=late_minutes, early_minutes=early_minutes)

        return DailyWorkStatus(
            work_date=work_date,
            status=decision.status,
            shift_id=shift.shift_id,
            shift_name=shift.name,
            remarks=decision.remarks,
            check_in_time=in_time,
            check_out_time=out_time,
            shift_start=window.shift_start,
            office_end=window.office_end,
            shift_end=window.shift_end,
            late_minutes=late_minutes,
            early_minutes=early_minutes,
            penalty_minutes=penalty_minutes,
            gross_hours=gross_hours,
            total_hours=total_hours,
            ot_hours=ot_hours,
            break_minutes=shift.break_minutes,
            events=events,
            calculated_at=now,
        )
