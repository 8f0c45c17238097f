from __future__ import annotations

from ...core.enums import WorkStatus
from .base import StatusDecision, StatusStrategy, early_remark, late_remark


class LateAndEarlyStrategy(StatusStrategy):
    """Both late in and early out."""

    def decide(self, *, late_minutes: int, early_minutes: int) -> StatusDecision:
        remarks = f"{late_remark(late_minutes)} {early_remark(early_minutes)}"
        return StatusDecision(status=WorkStatus.LATE_AND_EARLY, remarks=remarks)
