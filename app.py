"""WSGI entry point: `flask --app app run` or any WSGI server."""

from src.kiosk_attendance.kiosk_attendance.main import create_app

app = create_app()
