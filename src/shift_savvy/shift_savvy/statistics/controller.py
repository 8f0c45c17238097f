from __future__ import annotations

from datetime import date, datetime

from flask import Flask, jsonify, request

from ..core.enums import StatisticsPeriod
from ..container import Container
from .service import period_range


def register(app: Flask, container: Container) -> None:
    def _parse_date(value: str) -> date:
        return datetime.strptime(value, "%Y-%m-%d").date()

    def _range_from_args() -> tuple[date, date]:
        period = StatisticsPeriod(request.args.get("period") or StatisticsPeriod.MONTH.value)
        start, end = period_range(period, date.today())
        if request.args.get("start"):
            start = _parse_date(request.args["start"])
        if request.args.get("end"):
            end = _parse_date(request.args["end"])
        return start, end

    @app.route("/api/statistics", methods=["GET"], endpoint="statistics_summary")
    def statistics_summary():
        try:
            start, end = _range_from_args()
        except ValueError:
            return jsonify({"success": False, "message": "Khoảng thời gian không hợp lệ"}), 400

        summary = container.statistics_service.summarize(start=start, end=end)
        return jsonify(summary.to_dict()), 200

    @app.route("/api/statistics/week", methods=["GET"], endpoint="statistics_week")
    def statistics_week():
        first_day = container.settings_service.get().first_day_of_week
        cells = container.statistics_service.weekly_grid(today=date.today(), first_day_of_week=first_day)
        return jsonify({"days": [c.to_dict() for c in cells]}), 200

    @app.route("/api/statistics/export.csv", methods=["GET"], endpoint="statistics_export")
    def statistics_export():
        try:
            start, end = _range_from_args()
        except ValueError:
            return jsonify({"success": False, "message": "Khoảng thời gian không hợp lệ"}), 400

        csv_bytes = container.statistics_service.export_csv(start=start, end=end).encode("utf-8-sig")
        filename = f"work_status_{start:%Y%m%d}_{end:%Y%m%d}.csv"
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
