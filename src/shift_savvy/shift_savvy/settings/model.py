from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from ..core.enums import WeekDay

LANGUAGES = ("vi", "en")
THEMES = ("light", "dark")
BUTTON_MODES = ("full", "simple")
TIME_FORMATS = ("12h", "24h")


@dataclass(frozen=True)
class UserSettings:
    """Tùy chọn người dùng.

    `multi_button_mode="simple"` only offers the first (depart) action.
    """

    language: str = "vi"
    theme: str = "dark"
    multi_button_mode: str = "full"
    time_format: str = "24h"
    first_day_of_week: WeekDay = WeekDay.MON

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["first_day_of_week"] = self.first_day_of_week.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserSettings":
        defaults = cls()
        return cls(
            language=str(data.get("language", defaults.language)),
            theme=str(data.get("theme", defaults.theme)),
            multi_button_mode=str(data.get("multi_button_mode", defaults.multi_button_mode)),
            time_format=str(data.get("time_format", defaults.time_format)),
            first_day_of_week=WeekDay(data.get("first_day_of_week", defaults.first_day_of_week.value)),
        )
