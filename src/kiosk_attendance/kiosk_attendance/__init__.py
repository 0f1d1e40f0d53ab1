"""Kiosk Attendance package.

This package is organized by feature modules (sessions, students, scans,
attendance) with a thin Flask controller layer over pure service and
repository layers.
"""
