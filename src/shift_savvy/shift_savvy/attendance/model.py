from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from ..common.datetime_utils import format_instant, format_iso_date, parse_instant, parse_iso_date
from ..core.enums import EventKind, WorkStatus


@dataclass(frozen=True)
class AttendanceEvent:
    """Thực thể miền (domain): Một lần bấm chấm công."""

    kind: EventKind
    timestamp: datetime

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "timestamp": format_instant(self.timestamp)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AttendanceEvent":
        return cls(kind=EventKind(data["kind"]), timestamp=parse_instant(data["timestamp"]))


def _opt_instant(value: Optional[datetime]) -> Optional[str]:
    return format_instant(value) if value is not None else None


def _parse_opt_instant(value: Any) -> Optional[datetime]:
    return parse_instant(value) if value else None


@dataclass(frozen=True)
class DailyWorkStatus:
    """Kết quả tính công của một ngày.

    The shift is referenced by id and name copied at calculation time, so the
    record stays meaningful after the shift is edited or deleted. Numeric
    fields are None for statuses computed without a check-in/check-out pair.
    """

    work_date: date
    status: WorkStatus
    shift_id: Optional[str] = None
    shift_name: Optional[str] = None
    remarks: str = ""
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    shift_start: Optional[datetime] = None
    office_end: Optional[datetime] = None
    shift_end: Optional[datetime] = None
    late_minutes: Optional[int] = None
    early_minutes: Optional[int] = None
    penalty_minutes: Optional[int] = None
    gross_hours: Optional[float] = None
    total_hours: Optional[float] = None
    ot_hours: Optional[float] = None
    break_minutes: Optional[int] = None
    events: tuple[AttendanceEvent, ...] = field(default_factory=tuple)
    calculated_at: Optional[datetime] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "work_date": format_iso_date(self.work_date),
            "status": self.status.value,
            "shift_id": self.shift_id,
            "shift_name": self.shift_name,
            "remarks": self.remarks,
            "check_in_time": _opt_instant(self.check_in_time),
            "check_out_time": _opt_instant(self.check_out_time),
            "shift_start": _opt_instant(self.shift_start),
            "office_end": _opt_instant(self.office_end),
            "shift_end": _opt_instant(self.shift_end),
            "late_minutes": self.late_minutes,
            "early_minutes": self.early_minutes,
            "penalty_minutes": self.penalty_minutes,
            "gross_hours": self.gross_hours,
            "total_hours": self.total_hours,
            "ot_hours": self.ot_hours,
            "break_minutes": self.break_minutes,
            "events": [e.to_dict() for e in self.events],
            "calculated_at": _opt_instant(self.calculated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DailyWorkStatus":
        def _opt(key: str, cast):
            value = data.get(key)
            return cast(value) if value is not None else None

        return cls(
            work_date=parse_iso_date(data["work_date"]),
            status=WorkStatus(data["status"]),
            shift_id=data.get("shift_id"),
            shift_name=data.get("shift_name"),
            remarks=data.get("remarks") or "",
            check_in_time=_parse_opt_instant(data.get("check_in_time")),
            check_out_time=_parse_opt_instant(data.get("check_out_time")),
            shift_start=_parse_opt_instant(data.get("shift_start")),
            office_end=_parse_opt_instant(data.get("office_end")),
            shift_end=_parse_opt_instant(data.get("shift_end")),
            late_minutes=_opt("late_minutes", int),
            early_minutes=_opt("early_minutes", int),
            penalty_minutes=_opt("penalty_minutes", int),
            gross_hours=_opt("gross_hours", float),
            total_hours=_opt("total_hours", float),
            ot_hours=_opt("ot_hours", float),
            break_minutes=_opt("break_minutes", int),
            events=tuple(AttendanceEvent.from_dict(e) for e in data.get("events") or ()),
            calculated_at=_parse_opt_instant(data.get("calculated_at")),
        )
