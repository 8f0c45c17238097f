from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _today_payload(message: str):
        view = container.attendance_service.get_today()
        return jsonify({"success": True, "message": message, **view.to_dict()}), 200

    def _parse_date(value: str):
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError("Ngày không hợp lệ (YYYY-MM-DD)") from None

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    def attendance_today():
        return jsonify(container.attendance_service.get_today().to_dict()), 200

    @app.route("/api/attendance/advance", methods=["POST"], endpoint="attendance_advance")
    def attendance_advance():
        try:
            container.attendance_service.advance()
            return _today_payload("Đã ghi nhận chấm công")
        except Exception:
            logger.exception("Advance failed")
            return jsonify({"success": False, "message": "Lỗi hệ thống khi chấm công"}), 500

    @app.route("/api/attendance/punch", methods=["POST"], endpoint="attendance_punch")
    def attendance_punch():
        try:
            container.attendance_service.punch()
            return _today_payload("Đã ký công")
        except Exception:
            logger.exception("Punch failed")
            return jsonify({"success": False, "message": "Lỗi hệ thống khi ký công"}), 500

    @app.route("/api/attendance/reset", methods=["POST"], endpoint="attendance_reset")
    def attendance_reset():
        data = request.get_json(silent=True) or {}
        try:
            container.attendance_service.reset_today(confirmed=data.get("confirm") is True)
            return _today_payload("Đã đặt lại chấm công hôm nay")
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Reset failed")
            return jsonify({"success": False, "message": "Lỗi hệ thống khi đặt lại"}), 500

    @app.route("/api/status/<work_date>", methods=["GET"], endpoint="status_get")
    def status_get(work_date: str):
        try:
            status = container.attendance_service.get_daily_status(_parse_date(work_date))
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        if not status:
            return jsonify({"success": False, "message": "Chưa có dữ liệu công cho ngày này"}), 404
        return jsonify(status.to_dict()), 200

    @app.route("/api/status/<work_date>/recalculate", methods=["POST"], endpoint="status_recalculate")
    def status_recalculate(work_date: str):
        try:
            day = _parse_date(work_date)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400

        status = container.attendance_service.calculate_daily_status(day)
        if not status:
            return jsonify({"success": False, "message": "Không thể tính công cho ngày này"}), 409
        return jsonify({"success": True, "status": status.to_dict()}), 200
