from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container
from .model import Note

logger = logging.getLogger(__name__)


def _note_from_json(data, *, note_id: str = "") -> Note:
    if not isinstance(data, dict):
        raise ValidationError("Dữ liệu ghi chú không hợp lệ")
    try:
        return Note.from_dict({**data, "note_id": note_id, "created_at": None, "updated_at": None})
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Dữ liệu ghi chú không hợp lệ: {e}") from None


def _error(e: ValidationError):
    return jsonify({"success": False, "message": str(e), "errors": e.errors}), 400


def register(app: Flask, container: Container) -> None:
    @app.route("/api/notes", methods=["GET"], endpoint="notes_list")
    def notes_list():
        if request.args.get("upcoming"):
            notes = container.note_service.upcoming()
        else:
            notes = container.note_service.list_all()
        return jsonify({"notes": [n.to_dict() for n in notes]}), 200

    @app.route("/api/notes", methods=["POST"], endpoint="notes_create")
    def notes_create():
        try:
            note = container.note_service.add(_note_from_json(request.get_json(silent=True) or {}))
            return jsonify({"success": True, "note": note.to_dict()}), 201
        except ValidationError as e:
            return _error(e)
        except Exception:
            logger.exception("Create note failed")
            return jsonify({"success": False, "message": "Lỗi hệ thống khi tạo ghi chú"}), 500

    @app.route("/api/notes/<note_id>", methods=["PUT"], endpoint="notes_update")
    def notes_update(note_id: str):
        try:
            note = _note_from_json(request.get_json(silent=True) or {}, note_id=note_id)
            updated = container.note_service.update(note)
            return jsonify({"success": True, "note": updated.to_dict()}), 200
        except ValidationError as e:
            return _error(e)
        except Exception:
            logger.exception("Update note failed")
            return jsonify({"success": False, "message": "Lỗi hệ thống khi cập nhật ghi chú"}), 500

    @app.route("/api/notes/<note_id>", methods=["DELETE"], endpoint="notes_delete")
    def notes_delete(note_id: str):
        try:
            container.note_service.delete(note_id)
            return jsonify({"success": True}), 200
        except ValidationError as e:
            return _error(e)
