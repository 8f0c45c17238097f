from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional, Sequence

from ...shifts.model import ShiftDefinition
from ..model import AttendanceEvent, DailyWorkStatus


class DailyStatusCalculator(ABC):
    """Calculator interface (Strategy Pattern for daily work status)."""

    @abstractmethod
    def calculate(
        self,
        *,
        work_date: date,
        events: Sequence[AttendanceEvent],
        shift: Optional[ShiftDefinition],
        now: datetime,
    ) -> Optional[DailyWorkStatus]:
        """Return the day's status, or None when there is nothing to compute."""

        raise NotImplementedError
