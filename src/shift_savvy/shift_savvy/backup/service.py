from __future__ import annotations

import json
import logging
from datetime import datetime

from ..attendance.model import AttendanceEvent, DailyWorkStatus
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_instant, format_iso_date, now_local, parse_iso_date
from ..core.exceptions import BackupError
from ..notes.model import Note
from ..notes.repository import NoteRepository
from ..notes.validation import collect_note_errors
from ..settings.model import UserSettings
from ..settings.repository import SettingsRepository
from ..shifts.model import ShiftDefinition
from ..shifts.repository import ShiftRepository
from ..shifts.validation import collect_shift_errors

logger = logging.getLogger(__name__)


class BackupService:
    """Export/restore every piece of user data as a single JSON document."""

    def __init__(
        self,
        shifts: ShiftRepository,
        attendance: AttendanceRepository,
        settings: SettingsRepository,
        notes: NoteRepository,
    ):
        self._shifts = shifts
        self._attendance = attendance
        self._settings = settings
        self._notes = notes

    def export_json(self, *, now: datetime | None = None) -> str:
        payload = {
            "settings": self._settings.get().to_dict(),
            "shifts": [s.to_dict() for s in self._shifts.list_all()],
            "active_shift_id": self._shifts.get_active_id(),
            "notes": [n.to_dict() for n in self._notes.list_all()],
            "attendance_events": {
                format_iso_date(d): [e.to_dict() for e in events]
                for d, events in sorted(self._attendance.list_events_by_date().items())
            },
            "daily_work_status": {
                format_iso_date(s.work_date): s.to_dict() for s in self._attendance.list_daily_statuses()
            },
            "backup_date": format_instant(now or now_local()),
        }
        return json.dumps(payload, ensure_ascii=False)

    def restore_json(self, raw: str) -> None:
        """Replace all stored data with the backup's content.

        The whole payload is parsed and validated before anything is deleted,
        so a malformed backup leaves the current data untouched.
        """

        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise BackupError("Dữ liệu sao lưu không hợp lệ") from e

        if not isinstance(data, dict) or not data.get("settings") or "shifts" not in data:
            raise BackupError("Dữ liệu sao lưu không hợp lệ")

        raw_events = data.get("attendance_events") or {}
        raw_statuses = data.get("daily_work_status") or {}
        raw_notes = data.get("notes") or []
        if not (
            isinstance(data["settings"], dict)
            and isinstance(data["shifts"], list)
            and isinstance(raw_events, dict)
            and isinstance(raw_statuses, dict)
            and isinstance(raw_notes, list)
        ):
            raise BackupError("Dữ liệu sao lưu không hợp lệ")

        try:
            settings = UserSettings.from_dict(data["settings"])
            shifts = [ShiftDefinition.from_dict(s) for s in data["shifts"]]
            notes = [Note.from_dict(n) for n in raw_notes]
            events = {
                parse_iso_date(d): [AttendanceEvent.from_dict(e) for e in items]
                for d, items in raw_events.items()
            }
            statuses = [DailyWorkStatus.from_dict(s) for s in raw_statuses.values()]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise BackupError("Dữ liệu sao lưu không hợp lệ") from e

        self._check_shifts(shifts)
        for note in notes:
            if not note.note_id or collect_note_errors(note):
                raise BackupError(f"Ghi chú không hợp lệ trong bản sao lưu: {note.title or note.note_id}")

        active_id = data.get("active_shift_id")
        if active_id and active_id not in {s.shift_id for s in shifts}:
            active_id = None

        self.reset_all()
        self._settings.save(settings)
        for shift in shifts:
            self._shifts.save(shift)
        self._shifts.set_active_id(active_id)
        for note in notes:
            self._notes.save(note)
        for work_date, items in events.items():
            for event in items:
                self._attendance.append_event(work_date, event)
        for status in statuses:
            self._attendance.put_daily_status(status.work_date, status)

        logger.info(
            "Restored backup: %d shifts, %d notes, %d days of events", len(shifts), len(notes), len(events)
        )

    @staticmethod
    def _check_shifts(shifts: list[ShiftDefinition]) -> None:
        ids = [s.shift_id for s in shifts]
        if not all(ids) or len(set(ids)) != len(ids):
            raise BackupError("Mã ca trong bản sao lưu bị thiếu hoặc trùng lặp")

        for shift in shifts:
            errors = collect_shift_errors(shift, [s for s in shifts if s.shift_id != shift.shift_id])
            if errors:
                logger.warning("Rejected backup shift %s: %s", shift.shift_id, errors)
                raise BackupError(f"Ca làm việc không hợp lệ trong bản sao lưu: {shift.name or shift.shift_id}")

    def reset_all(self) -> None:
        self._attendance.delete_all()
        self._notes.delete_all()
        self._shifts.delete_all()
        self._settings.reset()
        logger.info("All stored data was reset")
