from __future__ import annotations

import json
from collections import defaultdict
from datetime import date
from typing import Mapping, Optional, Sequence

from ..core.enums import EventKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceEvent, DailyWorkStatus
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_events_for_date(self, work_date: date) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT kind, event_time
                FROM attendance_events
                WHERE work_date=%s
                ORDER BY event_id
                """,
                (work_date,),
            )
            return [AttendanceEvent(kind=EventKind(r["kind"]), timestamp=r["event_time"]) for r in fetchall(cur)]

    def append_event(self, work_date: date, event: AttendanceEvent) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO attendance_events(work_date, kind, event_time) VALUES(%s,%s,%s)",
                (work_date, event.kind.value, event.timestamp),
            )

    def clear_events_for_date(self, work_date: date) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_events WHERE work_date=%s", (work_date,))

    def list_events_by_date(self) -> Mapping[date, Sequence[AttendanceEvent]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT work_date, kind, event_time FROM attendance_events ORDER BY work_date, event_id")
            out: dict[date, list[AttendanceEvent]] = defaultdict(list)
            for r in fetchall(cur):
                out[r["work_date"]].append(AttendanceEvent(kind=EventKind(r["kind"]), timestamp=r["event_time"]))
            return dict(out)

    def get_daily_status(self, work_date: date) -> Optional[DailyWorkStatus]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT payload FROM daily_work_status WHERE work_date=%s", (work_date,))
            r = fetchone(cur)
            return DailyWorkStatus.from_dict(json.loads(r["payload"])) if r else None

    def put_daily_status(self, work_date: date, status: DailyWorkStatus) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                REPLACE INTO daily_work_status(work_date, status, shift_id, shift_name, payload, calculated_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    work_date,
                    status.status.value,
                    status.shift_id,
                    status.shift_name,
                    json.dumps(status.to_dict(), ensure_ascii=False, sort_keys=True),
                    status.calculated_at,
                ),
            )

    def list_daily_statuses(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[DailyWorkStatus]:
        clauses: list[str] = []
        params: list[object] = []
        if start_date is not None:
            clauses.append("work_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("work_date <= %s")
            params.append(end_date)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT payload FROM daily_work_status {where} ORDER BY work_date", tuple(params))
            return [DailyWorkStatus.from_dict(json.loads(r["payload"])) for r in fetchall(cur)]

    def delete_all(self) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_events")
            cur.execute("DELETE FROM daily_work_status")
