from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ...core.enums import WorkStatus


@dataclass(frozen=True)
class StatusDecision:
    status: WorkStatus
    remarks: str = ""


def late_remark(late_minutes: int) -> str:
    return f"Đi muộn {late_minutes} phút."


def early_remark(early_minutes: int) -> str:
    return f"Về sớm {early_minutes} phút."


class StatusStrategy(ABC):
    """Strategy Pattern: encapsulate how a day's metrics map to a status."""

    @abstractmethod
    def decide(self, *, late_minutes: int, early_minutes: int) -> StatusDecision:
        raise NotImplementedError
