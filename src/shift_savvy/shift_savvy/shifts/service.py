from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.exceptions import ValidationError
from .model import ShiftDefinition
from .repository import ShiftRepository
from .validation import validate_shift

logger = logging.getLogger(__name__)


class ShiftService:
    """Use cases: create/edit/delete shifts and pick the active one."""

    def __init__(self, shifts: ShiftRepository):
        self._shifts = shifts

    def list_all(self) -> Sequence[ShiftDefinition]:
        return self._shifts.list_all()

    def get_active(self) -> Optional[ShiftDefinition]:
        return self._shifts.get_active()

    def add(self, shift: ShiftDefinition, *, now: datetime | None = None) -> ShiftDefinition:
        now = now or now_local()
        new_shift = replace(
            shift,
            shift_id=uuid.uuid4().hex,
            name=shift.name.strip(),
            created_at=now,
            updated_at=now,
        )
        validate_shift(new_shift, self._shifts.list_all())
        self._shifts.save(new_shift)
        logger.info("Created shift %s (%s)", new_shift.shift_id, new_shift.name)
        return new_shift

    def update(self, shift: ShiftDefinition, *, now: datetime | None = None) -> ShiftDefinition:
        existing = self._shifts.get_by_id(shift.shift_id)
        if not existing:
            raise ValidationError("Ca làm việc không tồn tại")

        updated = replace(
            shift,
            name=shift.name.strip(),
            created_at=existing.created_at,
            updated_at=now or now_local(),
        )
        validate_shift(updated, self._shifts.list_all())
        self._shifts.save(updated)
        logger.info("Updated shift %s", updated.shift_id)
        return updated

    def delete(self, shift_id: str) -> None:
        if not self._shifts.delete(shift_id):
            raise ValidationError("Xóa ca thất bại")

        if self._shifts.get_active_id() == shift_id:
            self._shifts.set_active_id(None)
        logger.info("Deleted shift %s", shift_id)

    def set_active(self, shift_id: Optional[str]) -> None:
        if shift_id is not None and not self._shifts.get_by_id(shift_id):
            raise ValidationError("Ca làm việc không tồn tại")
        self._shifts.set_active_id(shift_id)
