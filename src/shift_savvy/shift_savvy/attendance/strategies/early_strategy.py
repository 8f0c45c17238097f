from __future__ import annotations

from ...core.enums import WorkStatus
from .base import StatusDecision, StatusStrategy, early_remark


class EarlyLeaveStrategy(StatusStrategy):
    """Checked out before office-end time."""

    def decide(self, *, late_minutes: int, early_minutes: int) -> StatusDecision:
        return StatusDecision(status=WorkStatus.EARLY_LEAVE, remarks=early_remark(early_minutes))
