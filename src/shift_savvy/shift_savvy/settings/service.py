from __future__ import annotations

from dataclasses import replace
from typing import Any

from ..core.enums import WeekDay
from ..core.exceptions import ValidationError
from .model import BUTTON_MODES, LANGUAGES, THEMES, TIME_FORMATS, UserSettings
from .repository import SettingsRepository

_CHOICES = {
    "language": LANGUAGES,
    "theme": THEMES,
    "multi_button_mode": BUTTON_MODES,
    "time_format": TIME_FORMATS,
}


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> UserSettings:
        return self._settings.get()

    def update(self, changes: dict[str, Any]) -> UserSettings:
        if not isinstance(changes, dict):
            raise ValidationError("Dữ liệu cài đặt phải là một đối tượng JSON")

        current = self._settings.get()
        values: dict[str, Any] = {}

        for key, value in changes.items():
            if key in _CHOICES:
                if value not in _CHOICES[key]:
                    raise ValidationError(f"{key} không hợp lệ")
                values[key] = value
            elif key == "first_day_of_week":
                if value not in (WeekDay.MON.value, WeekDay.SUN.value):
                    raise ValidationError("first_day_of_week không hợp lệ")
                values[key] = WeekDay(value)
            else:
                raise ValidationError(f"Không hỗ trợ tùy chọn {key}")

        updated = replace(current, **values)
        self._settings.save(updated)
        return updated
