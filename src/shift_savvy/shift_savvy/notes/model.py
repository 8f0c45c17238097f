from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import format_instant, parse_instant
from ..core.enums import WeekDay


@dataclass(frozen=True)
class Note:
    """Ghi chú nhắc việc.

    A note is reminded at `reminder_time` either on the days of its linked
    shifts or on `explicit_reminder_days`.
    """

    note_id: str
    title: str
    content: str
    reminder_time: str
    associated_shift_ids: tuple[str, ...] = field(default_factory=tuple)
    explicit_reminder_days: tuple[WeekDay, ...] = field(default_factory=tuple)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "note_id": self.note_id,
            "title": self.title,
            "content": self.content,
            "reminder_time": self.reminder_time,
            "associated_shift_ids": list(self.associated_shift_ids),
            "explicit_reminder_days": [d.value for d in self.explicit_reminder_days],
            "created_at": format_instant(self.created_at) if self.created_at else None,
            "updated_at": format_instant(self.updated_at) if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Note":
        shift_ids = data.get("associated_shift_ids") or ()
        days = data.get("explicit_reminder_days") or ()
        if not isinstance(shift_ids, (list, tuple)) or not isinstance(days, (list, tuple)):
            raise ValueError("associated_shift_ids/explicit_reminder_days phải là danh sách")

        return cls(
            note_id=str(data.get("note_id") or ""),
            title=str(data.get("title") or ""),
            content=str(data.get("content") or ""),
            reminder_time=str(data.get("reminder_time") or ""),
            associated_shift_ids=tuple(str(s) for s in shift_ids),
            explicit_reminder_days=tuple(WeekDay(d) for d in days),
            created_at=parse_instant(data["created_at"]) if data.get("created_at") else None,
            updated_at=parse_instant(data["updated_at"]) if data.get("updated_at") else None,
        )
