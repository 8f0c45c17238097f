from __future__ import annotations

from dataclasses import dataclass

from .strategies.base import StatusStrategy
from .strategies.early_strategy import EarlyLeaveStrategy
from .strategies.late_and_early_strategy import LateAndEarlyStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class StatusStrategyFactory:
    """Factory Pattern: choose the status strategy from late/early minutes."""

    def for_metrics(self, *, late_minutes: int, early_minutes: int) -> StatusStrategy:
        if late_minutes > 0 and early_minutes > 0:
            return LateAndEarlyStrategy()
        if late_minutes > 0:
            return LateStrategy()
        if early_minutes > 0:
            return EarlyLeaveStrategy()
        return NormalStrategy()
