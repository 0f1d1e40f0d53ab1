import importlib

import pytest

from config import get_settings_module


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("anything", "config.development"),
    ],
)
def test_settings_module_selection(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_testing_settings_carry_attendance_policy():
    settings = importlib.import_module("config.testing")

    assert settings.TESTING is True
    assert settings.EARLY_ACCESS_MINUTES == 60
    assert settings.FIRST_SCAN_WINS is True
    assert settings.SCAN_LOG_LIMIT == 1000


def test_create_app_registers_routes_without_touching_db(monkeypatch):
    from src.kiosk_attendance.kiosk_attendance.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_INIT_DB", "0")

    app = create_app()

    endpoints = {rule.endpoint for rule in app.url_map.iter_rules()}
    assert {
        "api_schedules",
        "api_schedules_sync",
        "api_students_sync",
        "api_device_logs",
        "api_device_attendance",
        "api_device_attendance_csv",
    } <= endpoints
