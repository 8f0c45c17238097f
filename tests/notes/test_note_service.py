from datetime import datetime

import pytest

from src.shift_savvy.shift_savvy.core.enums import WeekDay
from src.shift_savvy.shift_savvy.core.exceptions import ValidationError
from src.shift_savvy.shift_savvy.notes.model import Note
from src.shift_savvy.shift_savvy.notes.service import NoteService
from src.shift_savvy.shift_savvy.notes.validation import collect_note_errors

NOW = datetime(2026, 2, 1, 10, 0)


@pytest.fixture
def service(notes_repo):
    return NoteService(notes_repo)


def test_valid_note_has_no_errors(make_note):
    assert collect_note_errors(make_note()) == {}


def test_shift_link_is_enough_without_days(make_note):
    assert collect_note_errors(make_note(explicit_reminder_days=(), associated_shift_ids=("day",))) == {}


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"title": "  "}, "title"),
        ({"title": "x" * 101}, "title"),
        ({"content": ""}, "content"),
        ({"content": "x" * 301}, "content"),
        ({"reminder_time": ""}, "reminder_time"),
        ({"reminder_time": "25:00"}, "reminder_time"),
        ({"explicit_reminder_days": (), "associated_shift_ids": ()}, "days"),
    ],
)
def test_invalid_note_fields(make_note, overrides, field):
    assert field in collect_note_errors(make_note(**overrides))


def test_add_assigns_id_and_timestamps(service, notes_repo, make_note):
    created = service.add(make_note(note_id=""), now=NOW)

    assert created.note_id
    assert created.created_at == created.updated_at == NOW
    assert notes_repo.get_by_id(created.note_id) == created


def test_add_rejects_invalid_note(service, notes_repo, make_note):
    with pytest.raises(ValidationError) as exc:
        service.add(make_note(title=""), now=NOW)

    assert "title" in exc.value.errors
    assert notes_repo.list_all() == []


def test_update_keeps_created_at(service, make_note):
    created = service.add(make_note(), now=NOW)
    later = datetime(2026, 2, 2, 7, 0)

    updated = service.update(make_note(note_id=created.note_id, title="Mang sạc"), now=later)

    assert updated.title == "Mang sạc"
    assert updated.created_at == NOW
    assert updated.updated_at == later


def test_update_and_delete_unknown_note(service, make_note):
    with pytest.raises(ValidationError):
        service.update(make_note(note_id="missing"), now=NOW)
    with pytest.raises(ValidationError):
        service.delete("missing")


def test_notes_sorted_by_reminder_then_latest_update(notes_repo, make_note):
    notes_repo.save(make_note(note_id="a", reminder_time="09:00", updated_at=datetime(2026, 1, 1)))
    notes_repo.save(make_note(note_id="b", reminder_time="07:30", updated_at=datetime(2026, 1, 1)))
    notes_repo.save(make_note(note_id="c", reminder_time="09:00", updated_at=datetime(2026, 1, 5)))
    notes_repo.save(make_note(note_id="d", reminder_time="10:00", updated_at=datetime(2026, 1, 5)))
    service = NoteService(notes_repo)

    assert [n.note_id for n in service.list_all()] == ["b", "c", "a", "d"]
    assert [n.note_id for n in service.upcoming()] == ["b", "c", "a"]


def test_note_dict_round_trip(make_note):
    note = make_note(associated_shift_ids=("day",), explicit_reminder_days=(WeekDay.MON, WeekDay.SUN))
    assert Note.from_dict(note.to_dict()) == note


def test_from_dict_rejects_non_list_days():
    with pytest.raises(ValueError):
        Note.from_dict({"title": "t", "content": "c", "reminder_time": "08:00", "explicit_reminder_days": "Mon"})
