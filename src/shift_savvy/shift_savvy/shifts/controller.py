from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container
from .model import ShiftDefinition

logger = logging.getLogger(__name__)


def _shift_from_json(data: dict, *, shift_id: str = "") -> ShiftDefinition:
    try:
        return ShiftDefinition.from_dict({**data, "shift_id": shift_id, "created_at": None, "updated_at": None})
    except (KeyError, TypeError, ValueError) as e:
        raise ValidationError(f"Dữ liệu ca không hợp lệ: {e}") from None


def _error(e: ValidationError):
    return jsonify({"success": False, "message": str(e), "errors": e.errors}), 400


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shifts", methods=["GET"], endpoint="shifts_list")
    def shifts_list():
        active = container.shift_service.get_active()
        return jsonify(
            {
                "shifts": [s.to_dict() for s in container.shift_service.list_all()],
                "active_shift_id": active.shift_id if active else None,
            }
        ), 200

    @app.route("/api/shifts", methods=["POST"], endpoint="shifts_create")
    def shifts_create():
        try:
            shift = container.shift_service.add(_shift_from_json(request.get_json(silent=True) or {}))
            return jsonify({"success": True, "shift": shift.to_dict()}), 201
        except ValidationError as e:
            return _error(e)
        except Exception:
            logger.exception("Create shift failed")
            return jsonify({"success": False, "message": "Lỗi hệ thống khi tạo ca"}), 500

    @app.route("/api/shifts/<shift_id>", methods=["PUT"], endpoint="shifts_update")
    def shifts_update(shift_id: str):
        try:
            shift = _shift_from_json(request.get_json(silent=True) or {}, shift_id=shift_id)
            updated = container.shift_service.update(shift)
            return jsonify({"success": True, "shift": updated.to_dict()}), 200
        except ValidationError as e:
            return _error(e)
        except Exception:
            logger.exception("Update shift failed")
            return jsonify({"success": False, "message": "Lỗi hệ thống khi cập nhật ca"}), 500

    @app.route("/api/shifts/<shift_id>", methods=["DELETE"], endpoint="shifts_delete")
    def shifts_delete(shift_id: str):
        try:
            container.shift_service.delete(shift_id)
            return jsonify({"success": True}), 200
        except ValidationError as e:
            return _error(e)

    @app.route("/api/shifts/active", methods=["POST"], endpoint="shifts_set_active")
    def shifts_set_active():
        data = request.get_json(silent=True) or {}
        try:
            container.shift_service.set_active(data.get("shift_id"))
            return jsonify({"success": True, "active_shift_id": data.get("shift_id")}), 200
        except ValidationError as e:
            return _error(e)
