from __future__ import annotations

from typing import Protocol

from .model import UserSettings


class SettingsRepository(Protocol):
    def get(self) -> UserSettings:
        """Stored settings, or defaults when nothing was saved yet."""

        raise NotImplementedError

    def save(self, settings: UserSettings) -> None:
        raise NotImplementedError

    def reset(self) -> None:
        raise NotImplementedError
