from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.validators import optional_int
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def _time_text(value) -> str:
    return value.strftime("%H:%M:%S") if hasattr(value, "strftime") else str(value)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schedules", methods=["GET"], endpoint="api_schedules")
    def api_schedules():
        try:
            teacher_id = optional_int(request.args.get("teacher_id"), "teacher_id")
            sessions = container.sessions_repo.list_sessions(teacher_id)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Listing schedules failed")
            return jsonify({"success": False, "message": "Internal error while listing schedules"}), 500

        return jsonify(
            [
                {
                    "id": s.schedule_id,
                    "subject_code": s.subject_code,
                    "subject_name": s.subject_name,
                    "time_start": _time_text(s.time_start),
                    "time_end": _time_text(s.time_end),
                    "days": s.days_csv,
                    "grace_period": s.grace_period_minutes,
                    "teacher_id": s.teacher_id,
                    "teacher_name": s.teacher_name or "Unassigned",
                }
                for s in sessions
            ]
        )

    @app.route("/api/schedules/sync", methods=["GET"], endpoint="api_schedules_sync")
    def api_schedules_sync():
        """Minimal schedule payload a kiosk needs to validate taps offline."""
        try:
            sessions = container.sessions_repo.list_sessions()
        except Exception:
            logger.exception("Schedule sync failed")
            return jsonify({"success": False, "message": "Internal error while syncing schedules"}), 500

        return jsonify(
            [
                {
                    "subject_code": s.subject_code,
                    "time_start": _time_text(s.time_start),
                    "time_end": _time_text(s.time_end),
                    "days": s.days_csv,
                    "grace_period": s.grace_period_minutes,
                }
                for s in sessions
            ]
        )
