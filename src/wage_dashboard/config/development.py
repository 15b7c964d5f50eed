import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# "json" keeps collections under DATA_DIR, "mysql" uses DB_CONFIG
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json")
DATA_DIR = os.getenv("DATA_DIR", "instance/data")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "wage_db"),
}

# If enabled, app will apply the schema on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo employees/records on startup (only into an empty store)
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))

DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "te")
DEFAULT_REPORT_DAYS = int(os.getenv("DEFAULT_REPORT_DAYS", "30"))
PDF_FONT_PATH = os.getenv("PDF_FONT_PATH") or None

DEMO_USERS = [
    {"username": "admin", "password": os.getenv("ADMIN_PASSWORD", "admin123"), "role": "admin"},
    {"username": "manager", "password": os.getenv("MANAGER_PASSWORD", "manager123"), "role": "user"},
]
