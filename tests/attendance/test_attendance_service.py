from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime

import pytest

from src.shift_savvy.shift_savvy.attendance.service import AttendanceService
from src.shift_savvy.shift_savvy.core.enums import ButtonState, EventKind, WorkStatus
from src.shift_savvy.shift_savvy.core.exceptions import ValidationError
from src.shift_savvy.shift_savvy.settings.model import UserSettings

TODAY = date(2026, 2, 2)


def at(hour: int, minute: int) -> datetime:
    return datetime(2026, 2, 2, hour, minute)


@pytest.fixture
def service(attendance_repo, shifts_repo, settings_repo):
    return AttendanceService(attendance_repo, shifts_repo, settings_repo)


def test_full_day_ends_with_stored_status(service, attendance_repo):
    assert service.advance(now=at(8, 30)) == ButtonState.WAITING_CHECK_IN
    assert service.advance(now=at(9, 10)) == ButtonState.WORKING
    assert service.advance(now=at(18, 5)) == ButtonState.READY_COMPLETE
    assert service.advance(now=at(18, 6)) == ButtonState.COMPLETED

    kinds = [e.kind for e in attendance_repo.get_events_for_date(TODAY)]
    assert kinds == [EventKind.DEPART, EventKind.CHECK_IN, EventKind.CHECK_OUT, EventKind.COMPLETE]

    status = service.get_daily_status(TODAY)
    assert status.status == WorkStatus.LATE
    assert status.late_minutes == 10
    assert status.calculated_at == at(18, 6)


def test_advance_after_completed_does_not_append(service, attendance_repo):
    for hm in ((8, 30), (9, 0), (18, 0), (18, 1)):
        service.advance(now=at(*hm))

    assert service.advance(now=at(19, 0)) == ButtonState.COMPLETED
    assert len(attendance_repo.get_events_for_date(TODAY)) == 4


def test_punch_requires_enabled_shift(service, shifts_repo, day_shift, attendance_repo):
    service.advance(now=at(8, 30))
    service.advance(now=at(9, 0))

    service.punch(now=at(12, 0))
    assert len(attendance_repo.get_events_for_date(TODAY)) == 2
    assert not service.get_today(now=at(12, 0)).can_punch

    shifts_repo.save(replace(day_shift, show_punch=True))
    assert service.get_today(now=at(12, 0)).can_punch
    assert service.punch(now=at(12, 1)) == ButtonState.WORKING
    assert attendance_repo.get_events_for_date(TODAY)[-1].kind == EventKind.PUNCH


def test_reset_needs_confirmation(service, attendance_repo):
    service.advance(now=at(8, 30))

    with pytest.raises(ValidationError):
        service.reset_today(confirmed=False, now=at(8, 40))
    assert service.current_state(TODAY) == ButtonState.WAITING_CHECK_IN

    assert service.reset_today(confirmed=True, now=at(8, 40)) == ButtonState.GO_WORK
    assert attendance_repo.get_events_for_date(TODAY) == []

    service.advance(now=at(8, 45))
    assert [e.kind for e in attendance_repo.get_events_for_date(TODAY)] == [EventKind.DEPART]


def test_get_today_reports_state_and_events(service):
    service.advance(now=at(8, 30))

    view = service.get_today(now=at(8, 31))

    assert view.work_date == TODAY
    assert view.state == ButtonState.WAITING_CHECK_IN
    assert len(view.events) == 1
    assert view.status is None
    assert view.to_dict()["state"] == "WAITING_CHECK_IN"


def test_missing_check_out_stores_missing_logs(service):
    service.advance(now=at(8, 30))
    service.advance(now=at(9, 0))

    status = service.calculate_daily_status(TODAY, now=at(20, 0))

    assert status.status == WorkStatus.MISSING_LOGS
    assert service.get_daily_status(TODAY) == status


def test_no_active_shift_keeps_nothing(service, shifts_repo, attendance_repo):
    shifts_repo.set_active_id(None)
    service.advance(now=at(8, 30))

    assert service.calculate_daily_status(TODAY, now=at(9, 0)) is None
    assert attendance_repo.put_calls == 0


def test_calculation_fault_keeps_prior_status(service, shifts_repo, day_shift, attendance_repo, caplog):
    for hm in ((8, 30), (9, 10), (18, 5), (18, 6)):
        service.advance(now=at(*hm))
    prior = service.get_daily_status(TODAY)
    assert attendance_repo.put_calls == 1

    shifts_repo.save(replace(day_shift, penalty_rounding_minutes=0))
    with caplog.at_level(logging.ERROR):
        assert service.calculate_daily_status(TODAY, now=at(19, 0)) is None

    assert service.get_daily_status(TODAY) == prior
    assert attendance_repo.put_calls == 1
    assert "Error calculating daily status" in caplog.text


def test_malformed_shift_time_is_logged_not_raised(service, shifts_repo, day_shift, attendance_repo, caplog):
    shifts_repo.save(replace(day_shift, start_time="9h"))

    with caplog.at_level(logging.ERROR):
        for hm in ((8, 30), (9, 0), (18, 0), (18, 1)):
            service.advance(now=at(*hm))
        assert service.current_state(TODAY) == ButtonState.COMPLETED
        assert service.calculate_daily_status(TODAY, now=at(18, 5)) is None

    assert service.get_daily_status(TODAY) is None
    assert attendance_repo.put_calls == 0
    assert "Error calculating daily status" in caplog.text


def test_reset_on_empty_day_returns_go_work(service, attendance_repo):
    assert service.reset_today(confirmed=True, now=at(7, 0)) == ButtonState.GO_WORK
    assert attendance_repo.get_events_for_date(TODAY) == []


def test_recalculation_is_idempotent(service):
    for hm in ((8, 30), (9, 10), (18, 5), (18, 6)):
        service.advance(now=at(*hm))

    first = service.calculate_daily_status(TODAY, now=at(21, 0))
    second = service.calculate_daily_status(TODAY, now=at(21, 0))

    assert first == second


def test_simple_mode_only_accepts_departure(attendance_repo, shifts_repo, settings_repo):
    settings_repo.save(UserSettings(multi_button_mode="simple"))
    service = AttendanceService(attendance_repo, shifts_repo, settings_repo)

    assert service.advance(now=at(8, 30)) == ButtonState.WAITING_CHECK_IN
    assert service.advance(now=at(9, 0)) == ButtonState.WAITING_CHECK_IN
    assert len(attendance_repo.get_events_for_date(TODAY)) == 1
