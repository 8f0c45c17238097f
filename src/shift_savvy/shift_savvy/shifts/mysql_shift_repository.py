from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import WeekDay
from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    delete_state,
    fetchall,
    fetchone,
    mysql_time_to_hhmm,
    read_state,
    write_state,
)
from .model import ShiftDefinition
from .repository import ShiftRepository

ACTIVE_SHIFT_KEY = "active_shift_id"

_COLUMNS = """
    shift_id, name, start_time, office_end_time, end_time, departure_time, days_applied,
    remind_before_start, remind_after_end, show_punch, break_minutes, penalty_rounding_minutes,
    created_at, updated_at
"""


def _row_to_shift(r: dict[str, Any]) -> ShiftDefinition:
    days = [d for d in (r.get("days_applied") or "").split(",") if d]
    return ShiftDefinition(
        shift_id=r["shift_id"],
        name=r["name"],
        start_time=mysql_time_to_hhmm(r["start_time"]),
        office_end_time=mysql_time_to_hhmm(r["office_end_time"]),
        end_time=mysql_time_to_hhmm(r["end_time"]),
        departure_time=mysql_time_to_hhmm(r["departure_time"]),
        days_applied=tuple(WeekDay(d) for d in days),
        remind_before_start=int(r.get("remind_before_start") or 0),
        remind_after_end=int(r.get("remind_after_end") or 0),
        show_punch=bool(r.get("show_punch")),
        break_minutes=int(r.get("break_minutes") or 0),
        penalty_rounding_minutes=int(r["penalty_rounding_minutes"]),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ShiftDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts ORDER BY created_at, name")
            return [_row_to_shift(r) for r in fetchall(cur)]

    def get_by_id(self, shift_id: str) -> Optional[ShiftDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts WHERE shift_id=%s", (shift_id,))
            r = fetchone(cur)
            return _row_to_shift(r) if r else None

    def save(self, shift: ShiftDefinition) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shifts(
                    shift_id, name, start_time, office_end_time, end_time, departure_time, days_applied,
                    remind_before_start, remind_after_end, show_punch, break_minutes, penalty_rounding_minutes,
                    created_at, updated_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    name=VALUES(name),
                    start_time=VALUES(start_time),
                    office_end_time=VALUES(office_end_time),
                    end_time=VALUES(end_time),
                    departure_time=VALUES(departure_time),
                    days_applied=VALUES(days_applied),
                    remind_before_start=VALUES(remind_before_start),
                    remind_after_end=VALUES(remind_after_end),
                    show_punch=VALUES(show_punch),
                    break_minutes=VALUES(break_minutes),
                    penalty_rounding_minutes=VALUES(penalty_rounding_minutes),
                    updated_at=VALUES(updated_at)
                """,
                (
                    shift.shift_id,
                    shift.name,
                    shift.start_time,
                    shift.office_end_time,
                    shift.end_time,
                    shift.departure_time,
                    ",".join(d.value for d in shift.days_applied),
                    int(shift.remind_before_start),
                    int(shift.remind_after_end),
                    1 if shift.show_punch else 0,
                    int(shift.break_minutes),
                    int(shift.penalty_rounding_minutes),
                    shift.created_at,
                    shift.updated_at,
                ),
            )

    def delete(self, shift_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM shifts WHERE shift_id=%s", (shift_id,))
            return cur.rowcount > 0

    def delete_all(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM shifts")
            delete_state(cur, ACTIVE_SHIFT_KEY)

    def get_active_id(self) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            return read_state(cur, ACTIVE_SHIFT_KEY)

    def set_active_id(self, shift_id: Optional[str]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            write_state(cur, ACTIVE_SHIFT_KEY, shift_id)

    def get_active(self) -> Optional[ShiftDefinition]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM shifts
                JOIN app_state ON app_state.state_key=%s AND app_state.state_value = shifts.shift_id
                """,
                (ACTIVE_SHIFT_KEY,),
            )
            r = fetchone(cur)
            return _row_to_shift(r) if r else None
