import os
import tempfile

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

STORAGE_BACKEND = "json"
DATA_DIR = os.getenv("DATA_DIR") or tempfile.mkdtemp(prefix="wage-dashboard-")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "wage_db_test"),
}

AUTO_INIT_DB = False
AUTO_SEED_DB = False

DEFAULT_LANGUAGE = "te"
DEFAULT_REPORT_DAYS = 30
PDF_FONT_PATH = None

DEMO_USERS = [
    {"username": "admin", "password": "admin123", "role": "admin"},
    {"username": "manager", "password": "manager123", "role": "user"},
]
