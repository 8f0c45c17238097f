from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection per unit of work: commit on success, rollback on error."""

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


# app_state is a small key/value table (active shift id, user settings).


def read_state(cur, key: str) -> Optional[str]:
    cur.execute("SELECT state_value FROM app_state WHERE state_key=%s", (key,))
    r = fetchone(cur)
    return r["state_value"] if r and r.get("state_value") else None


def write_state(cur, key: str, value: Optional[str]) -> None:
    cur.execute(
        """
        INSERT INTO app_state(state_key, state_value)
        VALUES(%s,%s)
        ON DUPLICATE KEY UPDATE state_value=VALUES(state_value)
        """,
        (key, value),
    )


def delete_state(cur, key: str) -> None:
    cur.execute("DELETE FROM app_state WHERE state_key=%s", (key,))


def mysql_time_to_hhmm(value: Any) -> str:
    """Format a TIME column as "HH:MM".

    mysql-connector returns TIME as `timedelta`; some drivers give `time` or a
    "HH:MM:SS" string.
    """

    if value is None:
        return ""
    if isinstance(value, timedelta):
        minutes = int(value.total_seconds()) % 86400 // 60
        return f"{minutes // 60:02d}:{minutes % 60:02d}"
    if isinstance(value, time):
        return value.strftime("%H:%M")
    if isinstance(value, str):
        hours, minutes = value.strip().split(":")[:2]
        return f"{int(hours):02d}:{int(minutes):02d}"
    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
