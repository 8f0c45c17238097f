from datetime import datetime

import pytest

from src.shift_savvy.shift_savvy.core.exceptions import ValidationError
from src.shift_savvy.shift_savvy.shifts.service import ShiftService

NOW = datetime(2026, 2, 1, 10, 0)


@pytest.fixture
def repo(empty_shifts_repo):
    return empty_shifts_repo


@pytest.fixture
def service(repo):
    return ShiftService(repo)


def test_add_assigns_id_and_timestamps(service, repo, make_shift):
    created = service.add(make_shift(shift_id="", name="  Ca sáng "), now=NOW)

    assert created.shift_id
    assert created.name == "Ca sáng"
    assert created.created_at == created.updated_at == NOW
    assert repo.get_by_id(created.shift_id) == created


def test_add_rejects_invalid_shift(service, repo, make_shift):
    with pytest.raises(ValidationError) as exc:
        service.add(make_shift(departure_time="09:00"), now=NOW)

    assert "departure_time" in exc.value.errors
    assert repo.list_all() == []


def test_update_keeps_created_at(service, make_shift):
    created = service.add(make_shift(), now=NOW)
    later = datetime(2026, 2, 3, 8, 0)

    updated = service.update(make_shift(shift_id=created.shift_id, end_time="20:00"), now=later)

    assert updated.created_at == NOW
    assert updated.updated_at == later
    assert updated.end_time == "20:00"


def test_update_unknown_shift(service, make_shift):
    with pytest.raises(ValidationError):
        service.update(make_shift(shift_id="missing"), now=NOW)


def test_delete_active_shift_clears_active(service, repo, make_shift):
    created = service.add(make_shift(), now=NOW)
    service.set_active(created.shift_id)
    assert service.get_active() == created

    service.delete(created.shift_id)

    assert repo.get_active_id() is None
    assert service.get_active() is None


def test_set_active_unknown_shift(service):
    with pytest.raises(ValidationError):
        service.set_active("nope")


def test_delete_unknown_shift(service):
    with pytest.raises(ValidationError):
        service.delete("nope")
