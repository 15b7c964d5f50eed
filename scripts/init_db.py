from __future__ import annotations

from wage_dashboard.container import build_container
from wage_dashboard.database.bootstrap import apply_schema, ensure_app_users, list_tables
from wage_dashboard.main import configure_logging, load_settings


def main() -> None:
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(settings)
    if container.conn is None:
        raise SystemExit("STORAGE_BACKEND is not 'mysql', nothing to initialize.")

    apply_schema(container.conn)
    ensure_app_users(container.conn, getattr(settings, "DEMO_USERS", []))
    db = container.conn.config
    tables = list_tables(container.conn)
    print(f"OK: Applied schema -> {db.user}@{db.host}:{db.port}/{db.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
