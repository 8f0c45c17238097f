from __future__ import annotations

import logging
from datetime import datetime

from flask import Flask, jsonify, request

from ..core.exceptions import BackupError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/backup", methods=["GET"], endpoint="backup_export")
    def backup_export():
        body = container.backup_service.export_json().encode("utf-8")
        filename = f"shift_savvy_backup_{datetime.now():%Y%m%d_%H%M%S}.json"
        return app.response_class(
            body,
            mimetype="application/json",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/backup/restore", methods=["POST"], endpoint="backup_restore")
    def backup_restore():
        try:
            container.backup_service.restore_json(request.get_data(as_text=True))
            return jsonify({"success": True, "message": "Khôi phục dữ liệu thành công"}), 200
        except BackupError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Restore failed")
            return jsonify({"success": False, "message": "Lỗi hệ thống khi khôi phục dữ liệu"}), 500

    @app.route("/api/reset-all", methods=["POST"], endpoint="reset_all")
    def reset_all():
        data = request.get_json(silent=True) or {}
        if data.get("confirm") is not True:
            return jsonify({"success": False, "message": "Cần xác nhận trước khi xóa toàn bộ dữ liệu"}), 400

        container.backup_service.reset_all()
        return jsonify({"success": True, "message": "Đã xóa toàn bộ dữ liệu"}), 200
