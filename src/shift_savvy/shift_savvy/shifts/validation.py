from __future__ import annotations

from typing import Iterable, Optional

from ..common.datetime_utils import minutes_of_day
from ..core.constants import (
    MAX_SHIFT_NAME_LENGTH,
    MIN_DEPARTURE_LEAD_MINUTES,
    MIN_OFFICE_HOURS,
    MIN_OVERTIME_MINUTES,
    MINUTES_PER_DAY,
)
from ..core.exceptions import ValidationError
from .model import ShiftDefinition


def _offset_after(start: int, value: int) -> int:
    """Minutes from `start` forward to `value`, wrapping across midnight."""
    return (value - start) % MINUTES_PER_DAY


def _parse_times(shift: ShiftDefinition, errors: dict[str, str]) -> Optional[dict[str, int]]:
    parsed: dict[str, int] = {}
    for field_name in ("departure_time", "start_time", "office_end_time", "end_time"):
        try:
            parsed[field_name] = minutes_of_day(getattr(shift, field_name))
        except (AttributeError, TypeError, ValueError):
            errors[field_name] = "Giờ không hợp lệ (định dạng HH:MM)"
    return parsed if len(parsed) == 4 else None


def _check_overnight_hour(field_name: str, start: int, value: int, errors: dict[str, str]) -> None:
    # Anchoring compares hours only; a boundary that wraps past midnight must
    # therefore land on an hour strictly before the start hour.
    if value < start and value // 60 >= start // 60:
        errors[field_name] = "Giờ qua đêm không được trùng giờ bắt đầu ca"


def collect_shift_errors(shift: ShiftDefinition, existing: Iterable[ShiftDefinition] = ()) -> dict[str, str]:
    errors: dict[str, str] = {}

    name = (shift.name or "").strip()
    if not name:
        errors["name"] = "Tên ca không được để trống"
    elif len(name) > MAX_SHIFT_NAME_LENGTH:
        errors["name"] = f"Tên ca quá dài (tối đa {MAX_SHIFT_NAME_LENGTH} ký tự)"
    elif any(s.name.lower() == name.lower() and s.shift_id != shift.shift_id for s in existing):
        errors["name"] = "Tên ca này đã tồn tại"

    times = _parse_times(shift, errors)
    if times:
        start = times["start_time"]
        departure_lead = _offset_after(times["departure_time"], start)
        if departure_lead < MIN_DEPARTURE_LEAD_MINUTES:
            errors["departure_time"] = (
                f"Giờ xuất phát phải trước giờ bắt đầu ít nhất {MIN_DEPARTURE_LEAD_MINUTES} phút"
            )

        office_offset = _offset_after(start, times["office_end_time"])
        if office_offset < MIN_OFFICE_HOURS * 60:
            errors["office_end_time"] = f"Thời gian làm việc HC tối thiểu phải là {MIN_OFFICE_HOURS} giờ"
        else:
            _check_overnight_hour("office_end_time", start, times["office_end_time"], errors)

        end_offset = _offset_after(start, times["end_time"])
        if end_offset < office_offset:
            errors["end_time"] = "Giờ kết thúc ca phải sau hoặc bằng giờ kết thúc HC"
        elif end_offset != office_offset and end_offset - office_offset < MIN_OVERTIME_MINUTES:
            errors["end_time"] = (
                f"Nếu có OT, giờ kết thúc ca phải sau giờ kết thúc HC ít nhất {MIN_OVERTIME_MINUTES} phút"
            )
        else:
            _check_overnight_hour("end_time", start, times["end_time"], errors)

    if not shift.days_applied:
        errors["days_applied"] = "Vui lòng chọn ít nhất một ngày áp dụng ca"

    if int(shift.break_minutes) < 0:
        errors["break_minutes"] = "Thời gian nghỉ không được âm"

    if int(shift.penalty_rounding_minutes) <= 0:
        errors["penalty_rounding_minutes"] = "Làm tròn phạt phải lớn hơn 0 phút"

    return errors


def validate_shift(shift: ShiftDefinition, existing: Iterable[ShiftDefinition] = ()) -> ShiftDefinition:
    """Reject a shift that breaks a configuration invariant.

    Raises ValidationError carrying every failing field in `errors`.
    """

    errors = collect_shift_errors(shift, existing)
    if errors:
        raise ValidationError("Ca làm việc không hợp lệ", errors)
    return shift
