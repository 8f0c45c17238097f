from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import now_local
from ..core.constants import UPCOMING_NOTES_LIMIT
from ..core.exceptions import ValidationError
from .model import Note
from .repository import NoteRepository
from .validation import validate_note

logger = logging.getLogger(__name__)


def _sort_key(note: Note):
    # Earliest reminder first; same time: most recently updated first.
    updated = note.updated_at.timestamp() if note.updated_at else 0.0
    return (note.reminder_time or "99:99", -updated)


class NoteService:
    """Use cases: manage reminder notes."""

    def __init__(self, notes: NoteRepository):
        self._notes = notes

    def list_all(self) -> list[Note]:
        return sorted(self._notes.list_all(), key=_sort_key)

    def upcoming(self, limit: int = UPCOMING_NOTES_LIMIT) -> Sequence[Note]:
        return self.list_all()[:limit]

    def add(self, note: Note, *, now: datetime | None = None) -> Note:
        now = now or now_local()
        new_note = replace(note, note_id=uuid.uuid4().hex, created_at=now, updated_at=now)
        validate_note(new_note)
        self._notes.save(new_note)
        logger.info("Created note %s", new_note.note_id)
        return new_note

    def update(self, note: Note, *, now: datetime | None = None) -> Note:
        existing = self._notes.get_by_id(note.note_id)
        if not existing:
            raise ValidationError("Ghi chú không tồn tại")

        updated = replace(note, created_at=existing.created_at, updated_at=now or now_local())
        validate_note(updated)
        self._notes.save(updated)
        logger.info("Updated note %s", updated.note_id)
        return updated

    def delete(self, note_id: str) -> None:
        if not self._notes.delete(note_id):
            raise ValidationError("Xóa ghi chú thất bại")
        logger.info("Deleted note %s", note_id)
