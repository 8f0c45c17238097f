from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import WeekDay
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, mysql_time_to_hhmm
from .model import Note
from .repository import NoteRepository

_COLUMNS = """
    note_id, title, content, reminder_time, associated_shift_ids, explicit_reminder_days,
    created_at, updated_at
"""


def _split(value: Optional[str]) -> list[str]:
    return [v for v in (value or "").split(",") if v]


def _row_to_note(r: dict[str, Any]) -> Note:
    return Note(
        note_id=r["note_id"],
        title=r["title"],
        content=r["content"],
        reminder_time=mysql_time_to_hhmm(r["reminder_time"]),
        associated_shift_ids=tuple(_split(r.get("associated_shift_ids"))),
        explicit_reminder_days=tuple(WeekDay(d) for d in _split(r.get("explicit_reminder_days"))),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLNoteRepository(NoteRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Note]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM notes ORDER BY reminder_time, updated_at DESC")
            return [_row_to_note(r) for r in fetchall(cur)]

    def get_by_id(self, note_id: str) -> Optional[Note]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM notes WHERE note_id=%s", (note_id,))
            r = fetchone(cur)
            return _row_to_note(r) if r else None

    def save(self, note: Note) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO notes(
                    note_id, title, content, reminder_time, associated_shift_ids, explicit_reminder_days,
                    created_at, updated_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    title=VALUES(title),
                    content=VALUES(content),
                    reminder_time=VALUES(reminder_time),
                    associated_shift_ids=VALUES(associated_shift_ids),
                    explicit_reminder_days=VALUES(explicit_reminder_days),
                    updated_at=VALUES(updated_at)
                """,
                (
                    note.note_id,
                    note.title,
                    note.content,
                    note.reminder_time,
                    ",".join(note.associated_shift_ids),
                    ",".join(d.value for d in note.explicit_reminder_days),
                    note.created_at,
                    note.updated_at,
                ),
            )

    def delete(self, note_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM notes WHERE note_id=%s", (note_id,))
            return cur.rowcount > 0

    def delete_all(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM notes")
