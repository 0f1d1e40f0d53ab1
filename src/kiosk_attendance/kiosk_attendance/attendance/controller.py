from __future__ import annotations

import csv
import io
import logging
import re
from datetime import date

from flask import Flask, jsonify, request

from ..common.validators import date_or_default, optional_int, require_int
from ..core.exceptions import MalformedSession, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)

CSV_FIELDS = ["date", "subject_code", "student_id", "full_name", "status", "time_in"]


def register(app: Flask, container: Container) -> None:
    def _load(kiosk_id: int):
        schedule_id = require_int(request.args.get("schedule_id"), "schedule_id")
        target_date = date_or_default(request.args.get("date"), "date", date.today())
        limit = optional_int(request.args.get("limit"), "limit")

        session, verdicts = container.attendance_service.get_attendance_for_kiosk(
            kiosk_id=kiosk_id,
            schedule_id=schedule_id,
            target_date=target_date,
            limit=limit,
        )
        scheduled = container.attendance_service.is_scheduled(session, target_date)
        return session, target_date, scheduled, verdicts

    @app.route("/api/devices/<int:kiosk_id>/attendance", methods=["GET"], endpoint="api_device_attendance")
    def api_device_attendance(kiosk_id: int):
        try:
            session, target_date, scheduled, verdicts = _load(kiosk_id)
        except (ValidationError, MalformedSession) as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Attendance lookup failed for kiosk %s", kiosk_id)
            return jsonify({"success": False, "message": "Internal error while computing attendance"}), 500

        service = container.attendance_service
        return jsonify(
            {
                "success": True,
                "date": target_date.strftime("%Y-%m-%d"),
                "scheduled": scheduled,
                "schedule": {
                    "id": session.schedule_id,
                    "subject_code": session.subject_code,
                    "subject_name": session.subject_name,
                    "days": session.days_csv,
                },
                "summary": service.summarize(verdicts),
                "rows": service.to_rows(verdicts),
            }
        )

    @app.route("/api/devices/<int:kiosk_id>/attendance.csv", methods=["GET"], endpoint="api_device_attendance_csv")
    def api_device_attendance_csv(kiosk_id: int):
        try:
            session, target_date, _, verdicts = _load(kiosk_id)
        except (ValidationError, MalformedSession) as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            logger.exception("Attendance export failed for kiosk %s", kiosk_id)
            return jsonify({"success": False, "message": "Internal error while exporting attendance"}), 500

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in container.attendance_service.to_rows(verdicts):
            writer.writerow({"date": target_date.strftime("%Y-%m-%d"), "subject_code": session.subject_code, **row})

        safe_code = re.sub(r"[^A-Za-z0-9._-]+", "_", session.subject_code).strip("_") or "session"
        filename = f"attendance_{safe_code}_{target_date.strftime('%Y%m%d')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )
