from __future__ import annotations

import calendar
import csv
import io
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Sequence

from ..attendance.model import DailyWorkStatus
from ..attendance.repository import AttendanceRepository
from ..core.enums import StatisticsPeriod, WeekDay, WorkStatus

_WEEKDAY_LABELS = ("T2", "T3", "T4", "T5", "T6", "T7", "CN")

CSV_FIELDS = [
    "work_date",
    "shift_name",
    "status",
    "check_in",
    "check_out",
    "late_minutes",
    "early_minutes",
    "penalty_minutes",
    "total_hours",
    "ot_hours",
    "remarks",
]


@dataclass(frozen=True)
class PeriodSummary:
    start: date
    end: date
    total_work_hours: float
    total_ot_hours: float
    status_counts: dict[WorkStatus, int]
    work_days: int
    rows: Sequence[DailyWorkStatus]

    def to_dict(self) -> dict:
        return {
            "start": self.start.strftime("%Y-%m-%d"),
            "end": self.end.strftime("%Y-%m-%d"),
            "total_work_hours": round(self.total_work_hours, 1),
            "total_ot_hours": round(self.total_ot_hours, 1),
            "status_counts": {k.value: v for k, v in self.status_counts.items()},
            "work_days": self.work_days,
            "rows": [r.to_dict() for r in self.rows],
        }


@dataclass(frozen=True)
class WeekCell:
    work_date: date
    label: str
    status: WorkStatus
    is_today: bool
    remarks: str = ""

    def to_dict(self) -> dict:
        return {
            "work_date": self.work_date.strftime("%Y-%m-%d"),
            "label": self.label,
            "status": self.status.value,
            "is_today": self.is_today,
            "remarks": self.remarks,
        }


def period_range(period: StatisticsPeriod, today: date) -> tuple[date, date]:
    if period == StatisticsPeriod.WEEK:
        start = today - timedelta(days=today.weekday())
        return start, start + timedelta(days=6)
    if period == StatisticsPeriod.YEAR:
        return date(today.year, 1, 1), date(today.year, 12, 31)
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)


def week_start(today: date, first_day_of_week: WeekDay = WeekDay.MON) -> date:
    first = 6 if first_day_of_week == WeekDay.SUN else 0
    return today - timedelta(days=(today.weekday() - first) % 7)


class StatisticsService:
    """Read-side reports over stored daily work statuses."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def summarize(self, *, start: date, end: date) -> PeriodSummary:
        rows = list(self._attendance.list_daily_statuses(start_date=start, end_date=end))

        counts = {status: 0 for status in WorkStatus}
        for r in rows:
            counts[r.status] += 1

        return PeriodSummary(
            start=start,
            end=end,
            total_work_hours=sum(r.total_hours or 0.0 for r in rows),
            total_ot_hours=sum(r.ot_hours or 0.0 for r in rows),
            status_counts=counts,
            work_days=len(rows),
            rows=rows,
        )

    def summarize_period(self, period: StatisticsPeriod, *, today: date) -> PeriodSummary:
        start, end = period_range(period, today)
        return self.summarize(start=start, end=end)

    def weekly_grid(self, *, today: date, first_day_of_week: WeekDay = WeekDay.MON) -> list[WeekCell]:
        start = week_start(today, first_day_of_week)
        end = start + timedelta(days=6)
        by_date = {r.work_date: r for r in self._attendance.list_daily_statuses(start_date=start, end_date=end)}

        cells: list[WeekCell] = []
        for offset in range(7):
            day = start + timedelta(days=offset)
            record: Optional[DailyWorkStatus] = by_date.get(day)
            cells.append(
                WeekCell(
                    work_date=day,
                    label=_WEEKDAY_LABELS[day.weekday()],
                    status=record.status if record else WorkStatus.PENDING,
                    is_today=day == today,
                    remarks=record.remarks if record else "",
                )
            )
        return cells

    def export_csv(self, *, start: date, end: date) -> str:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for r in self._attendance.list_daily_statuses(start_date=start, end_date=end):
            writer.writerow(
                {
                    "work_date": r.work_date.strftime("%Y-%m-%d"),
                    "shift_name": r.shift_name or "-",
                    "status": r.status.value,
                    "check_in": r.check_in_time.strftime("%H:%M") if r.check_in_time else "-",
                    "check_out": r.check_out_time.strftime("%H:%M") if r.check_out_time else "-",
                    "late_minutes": r.late_minutes if r.late_minutes is not None else "",
                    "early_minutes": r.early_minutes if r.early_minutes is not None else "",
                    "penalty_minutes": r.penalty_minutes if r.penalty_minutes is not None else "",
                    "total_hours": f"{r.total_hours:.2f}" if r.total_hours is not None else "",
                    "ot_hours": f"{r.ot_hours:.2f}" if r.ot_hours is not None else "",
                    "remarks": r.remarks,
                }
            )
        return out.getvalue()
