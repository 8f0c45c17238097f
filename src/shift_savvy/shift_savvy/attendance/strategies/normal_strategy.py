from __future__ import annotations

from ...core.enums import WorkStatus
from .base import StatusDecision, StatusStrategy


class NormalStrategy(StatusStrategy):
    """On-time check-in, no early leave."""

    def decide(self, *, late_minutes: int, early_minutes: int) -> StatusDecision:
        return StatusDecision(status=WorkStatus.COMPLETED)
