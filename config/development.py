import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "kiosk_attendance"),
}

DEBUG = True

# Attendance policy
EARLY_ACCESS_MINUTES = int(os.getenv("EARLY_ACCESS_MINUTES", "60"))
FIRST_SCAN_WINS = bool(int(os.getenv("FIRST_SCAN_WINS", "1")))
SCAN_LOG_LIMIT = int(os.getenv("SCAN_LOG_LIMIT", "1000"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
