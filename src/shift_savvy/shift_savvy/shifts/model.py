from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import format_instant, parse_instant
from ..core.constants import DEFAULT_BREAK_MINUTES, DEFAULT_PENALTY_ROUNDING_MINUTES, DEFAULT_REMIND_MINUTES
from ..core.enums import WeekDay


def _as_bool(value: Any, field_name: str) -> bool:
    # JSON booleans only; "false" must not turn into True.
    if isinstance(value, bool):
        return value
    raise ValueError(f"{field_name} phải là true hoặc false")


@dataclass(frozen=True)
class ShiftDefinition:
    """Thực thể miền (domain): Ca làm việc.

    Time boundaries are "HH:MM" wall-clock strings, local to the day the shift
    is applied on. The engine treats a shift as read-only configuration.
    """

    shift_id: str
    name: str
    start_time: str
    office_end_time: str
    end_time: str
    departure_time: str
    days_applied: tuple[WeekDay, ...] = field(default_factory=tuple)
    remind_before_start: int = DEFAULT_REMIND_MINUTES
    remind_after_end: int = DEFAULT_REMIND_MINUTES
    show_punch: bool = False
    break_minutes: int = DEFAULT_BREAK_MINUTES
    penalty_rounding_minutes: int = DEFAULT_PENALTY_ROUNDING_MINUTES
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "shift_id": self.shift_id,
            "name": self.name,
            "start_time": self.start_time,
            "office_end_time": self.office_end_time,
            "end_time": self.end_time,
            "departure_time": self.departure_time,
            "days_applied": [d.value for d in self.days_applied],
            "remind_before_start": self.remind_before_start,
            "remind_after_end": self.remind_after_end,
            "show_punch": self.show_punch,
            "break_minutes": self.break_minutes,
            "penalty_rounding_minutes": self.penalty_rounding_minutes,
            "created_at": format_instant(self.created_at) if self.created_at else None,
            "updated_at": format_instant(self.updated_at) if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShiftDefinition":
        return cls(
            shift_id=str(data.get("shift_id") or ""),
            name=str(data.get("name") or ""),
            start_time=str(data["start_time"]),
            office_end_time=str(data["office_end_time"]),
            end_time=str(data["end_time"]),
            departure_time=str(data["departure_time"]),
            days_applied=tuple(WeekDay(d) for d in data.get("days_applied") or ()),
            remind_before_start=int(data.get("remind_before_start", DEFAULT_REMIND_MINUTES)),
            remind_after_end=int(data.get("remind_after_end", DEFAULT_REMIND_MINUTES)),
            show_punch=_as_bool(data.get("show_punch", False), "show_punch"),
            break_minutes=int(data.get("break_minutes", DEFAULT_BREAK_MINUTES)),
            penalty_rounding_minutes=int(data.get("penalty_rounding_minutes", DEFAULT_PENALTY_ROUNDING_MINUTES)),
            created_at=parse_instant(data["created_at"]) if data.get("created_at") else None,
            updated_at=parse_instant(data["updated_at"]) if data.get("updated_at") else None,
        )
