from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="settings_get")
    def settings_get():
        return jsonify(container.settings_service.get().to_dict()), 200

    @app.route("/api/settings", methods=["PUT"], endpoint="settings_update")
    def settings_update():
        data = request.get_json(silent=True)
        try:
            updated = container.settings_service.update({} if data is None else data)
            return jsonify({"success": True, "settings": updated.to_dict()}), 200
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Update settings failed")
            return jsonify({"success": False, "message": "Lỗi hệ thống khi lưu cài đặt"}), 500
