from __future__ import annotations

from ...core.enums import WorkStatus
from .base import StatusDecision, StatusStrategy, late_remark


class LateStrategy(StatusStrategy):
    """Late check-in."""

    def decide(self, *, late_minutes: int, early_minutes: int) -> StatusDecision:
        return StatusDecision(status=WorkStatus.LATE, remarks=late_remark(late_minutes))
