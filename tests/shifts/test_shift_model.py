import pytest

from src.shift_savvy.shift_savvy.shifts.model import ShiftDefinition


def _payload(**overrides):
    data = {
        "name": "Ca sáng",
        "start_time": "06:00",
        "office_end_time": "14:00",
        "end_time": "14:00",
        "departure_time": "05:30",
        "days_applied": ["Mon"],
    }
    data.update(overrides)
    return data


def test_show_punch_accepts_json_booleans():
    assert ShiftDefinition.from_dict(_payload(show_punch=True)).show_punch is True
    assert ShiftDefinition.from_dict(_payload(show_punch=False)).show_punch is False
    assert ShiftDefinition.from_dict(_payload()).show_punch is False


@pytest.mark.parametrize("value", ["false", "true", 1, 0, None])
def test_show_punch_rejects_non_booleans(value):
    with pytest.raises(ValueError):
        ShiftDefinition.from_dict(_payload(show_punch=value))
