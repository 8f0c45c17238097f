import pytest

from src.shift_savvy.shift_savvy.core.exceptions import ValidationError
from src.shift_savvy.shift_savvy.shifts.validation import collect_shift_errors, validate_shift


def test_valid_day_shift_passes(make_shift):
    shift = make_shift()
    assert validate_shift(shift) is shift


def test_valid_overnight_shift_passes(make_shift):
    night = make_shift(start_time="22:00", office_end_time="06:00", end_time="07:00", departure_time="21:30")
    assert collect_shift_errors(night) == {}


def test_no_overtime_window_is_allowed(make_shift):
    assert collect_shift_errors(make_shift(end_time="18:00")) == {}


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"name": "   "}, "name"),
        ({"name": "x" * 201}, "name"),
        ({"departure_time": "08:57"}, "departure_time"),
        ({"office_end_time": "10:30", "end_time": "10:30"}, "office_end_time"),
        ({"end_time": "17:00"}, "end_time"),
        ({"end_time": "18:20"}, "end_time"),
        ({"start_time": "9h"}, "start_time"),
        ({"days_applied": ()}, "days_applied"),
        ({"break_minutes": -1}, "break_minutes"),
        ({"penalty_rounding_minutes": 0}, "penalty_rounding_minutes"),
    ],
)
def test_invalid_fields_are_reported(make_shift, overrides, field):
    errors = collect_shift_errors(make_shift(**overrides))
    assert field in errors


def test_overnight_boundary_sharing_start_hour_is_rejected(make_shift):
    # 22:30 -> 22:10 next day would be anchored on the same day.
    shift = make_shift(start_time="22:30", office_end_time="22:10", end_time="22:10", departure_time="22:00")
    assert "office_end_time" in collect_shift_errors(shift)


def test_duplicate_name_is_case_insensitive(make_shift):
    existing = [make_shift(shift_id="a", name="Ca Sáng")]

    assert "name" in collect_shift_errors(make_shift(shift_id="b", name="ca sáng"), existing)
    assert "name" not in collect_shift_errors(make_shift(shift_id="a", name="ca sáng"), existing)


def test_validate_raises_with_all_errors(make_shift):
    with pytest.raises(ValidationError) as exc:
        validate_shift(make_shift(name="", break_minutes=-5))

    assert set(exc.value.errors) == {"name", "break_minutes"}
