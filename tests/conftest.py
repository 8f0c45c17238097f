from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime
from typing import Optional

import pytest

from src.shift_savvy.shift_savvy.attendance.model import AttendanceEvent, DailyWorkStatus
from src.shift_savvy.shift_savvy.container import assemble
from src.shift_savvy.shift_savvy.core.enums import WeekDay
from src.shift_savvy.shift_savvy.notes.model import Note
from src.shift_savvy.shift_savvy.settings.model import UserSettings
from src.shift_savvy.shift_savvy.shifts.model import ShiftDefinition

WEEKDAYS = (WeekDay.MON, WeekDay.TUE, WeekDay.WED, WeekDay.THU, WeekDay.FRI)


def build_shift(**overrides) -> ShiftDefinition:
    values = dict(
        shift_id="day",
        name="Hành chính",
        start_time="09:00",
        office_end_time="18:00",
        end_time="19:00",
        departure_time="08:30",
        days_applied=WEEKDAYS,
        break_minutes=60,
        penalty_rounding_minutes=30,
    )
    values.update(overrides)
    return ShiftDefinition(**values)


def build_note(**overrides) -> Note:
    values = dict(
        note_id="n1",
        title="Mang laptop",
        content="Mang laptop về sửa",
        reminder_time="08:00",
        explicit_reminder_days=(WeekDay.MON,),
    )
    values.update(overrides)
    return Note(**values)


class InMemoryShifts:
    def __init__(self, shifts=(), active_id: Optional[str] = None):
        self._shifts: dict[str, ShiftDefinition] = {s.shift_id: s for s in shifts}
        self._active_id = active_id

    def list_all(self):
        return list(self._shifts.values())

    def get_by_id(self, shift_id: str) -> Optional[ShiftDefinition]:
        return self._shifts.get(shift_id)

    def save(self, shift: ShiftDefinition) -> None:
        self._shifts[shift.shift_id] = shift

    def delete(self, shift_id: str) -> bool:
        return self._shifts.pop(shift_id, None) is not None

    def delete_all(self) -> None:
        self._shifts.clear()
        self._active_id = None

    def get_active_id(self) -> Optional[str]:
        return self._active_id

    def set_active_id(self, shift_id: Optional[str]) -> None:
        self._active_id = shift_id

    def get_active(self) -> Optional[ShiftDefinition]:
        return self._shifts.get(self._active_id) if self._active_id else None


class InMemoryAttendance:
    def __init__(self):
        self._events: dict[date, list[AttendanceEvent]] = defaultdict(list)
        self._statuses: dict[date, DailyWorkStatus] = {}
        self.put_calls = 0

    def get_events_for_date(self, work_date: date):
        return list(self._events.get(work_date, []))

    def append_event(self, work_date: date, event: AttendanceEvent) -> None:
        self._events[work_date].append(event)

    def clear_events_for_date(self, work_date: date) -> None:
        self._events.pop(work_date, None)

    def list_events_by_date(self):
        return {d: list(items) for d, items in self._events.items() if items}

    def get_daily_status(self, work_date: date) -> Optional[DailyWorkStatus]:
        return self._statuses.get(work_date)

    def put_daily_status(self, work_date: date, status: DailyWorkStatus) -> None:
        self.put_calls += 1
        self._statuses[work_date] = status

    def list_daily_statuses(self, *, start_date=None, end_date=None):
        return [
            s
            for d, s in sorted(self._statuses.items())
            if (start_date is None or d >= start_date) and (end_date is None or d <= end_date)
        ]

    def delete_all(self) -> None:
        self._events.clear()
        self._statuses.clear()


class InMemorySettings:
    def __init__(self, settings: Optional[UserSettings] = None):
        self._settings = settings

    def get(self) -> UserSettings:
        return self._settings or UserSettings()

    def save(self, settings: UserSettings) -> None:
        self._settings = settings

    def reset(self) -> None:
        self._settings = None


class InMemoryNotes:
    def __init__(self, notes=()):
        self._notes: dict[str, Note] = {n.note_id: n for n in notes}

    def list_all(self):
        return list(self._notes.values())

    def get_by_id(self, note_id: str) -> Optional[Note]:
        return self._notes.get(note_id)

    def save(self, note: Note) -> None:
        self._notes[note.note_id] = note

    def delete(self, note_id: str) -> bool:
        return self._notes.pop(note_id, None) is not None

    def delete_all(self) -> None:
        self._notes.clear()


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 9, 10, 0)


@pytest.fixture
def make_shift():
    return build_shift


@pytest.fixture
def make_note():
    return build_note


@pytest.fixture
def day_shift() -> ShiftDefinition:
    return build_shift()


@pytest.fixture
def shifts_repo(day_shift) -> InMemoryShifts:
    return InMemoryShifts([day_shift], active_id=day_shift.shift_id)


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def settings_repo() -> InMemorySettings:
    return InMemorySettings()


@pytest.fixture
def notes_repo() -> InMemoryNotes:
    return InMemoryNotes()


@pytest.fixture
def container(shifts_repo, attendance_repo, settings_repo, notes_repo):
    return assemble(
        shifts_repo=shifts_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
        notes_repo=notes_repo,
    )


@pytest.fixture
def empty_shifts_repo() -> InMemoryShifts:
    return InMemoryShifts()
