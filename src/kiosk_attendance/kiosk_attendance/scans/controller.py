from __future__ import annotations

import logging
from datetime import datetime

from flask import Flask, jsonify, request

from ..common.validators import optional_int
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/devices/<int:kiosk_id>/logs", methods=["GET"], endpoint="api_device_logs")
    def api_device_logs(kiosk_id: int):
        try:
            limit = optional_int(request.args.get("limit"), "limit") or container.scan_log_limit
            logs = container.scans_repo.get_logs(kiosk_id, limit)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Reading logs failed for kiosk %s", kiosk_id)
            return jsonify({"success": False, "message": "Internal error while reading logs"}), 500

        return jsonify(
            [
                {
                    "id": log.log_id,
                    "kiosk_id": log.kiosk_id,
                    "student_id": log.student_id,
                    "timestamp": (
                        log.timestamp.strftime("%Y-%m-%d %H:%M:%S")
                        if isinstance(log.timestamp, datetime)
                        else str(log.timestamp)
                    ),
                }
                for log in logs
            ]
        )
