from __future__ import annotations

from datetime import date, datetime, time


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def parse_hhmm(value: str) -> time:
    """Parse a 24h "HH:MM" wall-clock string."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def minutes_of_day(value: str) -> int:
    t = parse_hhmm(value)
    return t.hour * 60 + t.minute


def parse_instant(value: str | datetime) -> datetime:
    """Parse an ISO-8601 instant into a naive local datetime.

    Aware instants (e.g. with a trailing "Z") are converted to local wall-clock
    time so they compare with shift boundaries anchored on a local date.
    """

    if isinstance(value, datetime):
        parsed = value
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def format_instant(value: datetime) -> str:
    return value.isoformat()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
