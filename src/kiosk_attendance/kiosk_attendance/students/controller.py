from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students/sync", methods=["GET"], endpoint="api_students_sync")
    def api_students_sync():
        try:
            students = container.students_repo.list_students()
        except Exception:
            logger.exception("Student sync failed")
            return jsonify({"success": False, "message": "Internal error while syncing students"}), 500

        return jsonify(
            [{"student_id": s.student_id, "full_name": s.full_name, "rfid_uid": s.rfid_uid} for s in students]
        )
