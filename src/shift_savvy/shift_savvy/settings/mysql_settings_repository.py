from __future__ import annotations

import json

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, delete_state, read_state, write_state
from .model import UserSettings
from .repository import SettingsRepository

SETTINGS_KEY = "user_settings"


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> UserSettings:
        with db_cursor(self._conn_factory) as (_, cur):
            raw = read_state(cur, SETTINGS_KEY)
        return UserSettings.from_dict(json.loads(raw)) if raw else UserSettings()

    def save(self, settings: UserSettings) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            write_state(cur, SETTINGS_KEY, json.dumps(settings.to_dict()))

    def reset(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            delete_state(cur, SETTINGS_KEY)
