import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "kiosk"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "kiosk_attendance"),
}

DEBUG = False

EARLY_ACCESS_MINUTES = int(os.getenv("EARLY_ACCESS_MINUTES", "60"))
FIRST_SCAN_WINS = bool(int(os.getenv("FIRST_SCAN_WINS", "1")))
SCAN_LOG_LIMIT = int(os.getenv("SCAN_LOG_LIMIT", "1000"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
