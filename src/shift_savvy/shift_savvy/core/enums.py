from __future__ import annotations

from enum import Enum


class WorkStatus(str, Enum):
    """Trạng thái công của một ngày làm việc."""

    PENDING = "pending"
    ON_THE_WAY = "on_the_way"
    WORKING = "working"
    COMPLETED = "completed"
    MISSING_LOGS = "missing_logs"
    LATE = "late"
    EARLY_LEAVE = "early_leave"
    LATE_AND_EARLY = "late_and_early"
    ABSENT = "absent"
    HOLIDAY = "holiday"
    WEEKEND = "weekend"
    VACATION = "vacation"


class EventKind(str, Enum):
    """Loại sự kiện chấm công được ghi lại trong ngày."""

    DEPART = "depart"
    CHECK_IN = "check_in"
    PUNCH = "punch"
    CHECK_OUT = "check_out"
    COMPLETE = "complete"


class ButtonState(str, Enum):
    """Trạng thái của nút đa năng (multi-function button)."""

    GO_WORK = "GO_WORK"
    WAITING_CHECK_IN = "WAITING_CHECK_IN"
    WORKING = "WORKING"
    READY_COMPLETE = "READY_COMPLETE"
    COMPLETED = "COMPLETED"


class ButtonCommand(str, Enum):
    ADVANCE = "advance"
    PUNCH = "punch"
    RESET = "reset"


class WeekDay(str, Enum):
    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"


class StatisticsPeriod(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
