from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol, Sequence

from .model import AttendanceEvent, DailyWorkStatus


class AttendanceRepository(Protocol):
    def get_events_for_date(self, work_date: date) -> Sequence[AttendanceEvent]:
        """Events logged for the date, in insertion order."""

        raise NotImplementedError

    def append_event(self, work_date: date, event: AttendanceEvent) -> None:
        raise NotImplementedError

    def clear_events_for_date(self, work_date: date) -> None:
        raise NotImplementedError

    def list_events_by_date(self) -> Mapping[date, Sequence[AttendanceEvent]]:
        raise NotImplementedError

    def get_daily_status(self, work_date: date) -> Optional[DailyWorkStatus]:
        raise NotImplementedError

    def put_daily_status(self, work_date: date, status: DailyWorkStatus) -> None:
        """Store the record for the date, replacing any previous one."""

        raise NotImplementedError

    def list_daily_statuses(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[DailyWorkStatus]:
        """Records ordered by date, optionally bounded (inclusive)."""

        raise NotImplementedError

    def delete_all(self) -> None:
        raise NotImplementedError
