"""Ví dụ: dùng service layer (không qua Flask).

Mục tiêu: Controllers chỉ là lớp mỏng, nghiệp vụ nằm ở Services.
"""

import importlib

from config import get_settings_module

from src.shift_savvy.shift_savvy.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    today = container.attendance_service.get_today()
    print(today.state.value, [e.kind.value for e in today.events])

    summary = container.statistics_service.summarize(start=today.work_date.replace(day=1), end=today.work_date)
    print(f"{summary.work_days} ngày, {summary.total_work_hours:.1f}h công, {summary.total_ot_hours:.1f}h OT")


if __name__ == "__main__":
    main()
