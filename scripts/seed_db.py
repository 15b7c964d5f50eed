from __future__ import annotations

from wage_dashboard.container import build_container
from wage_dashboard.database.seed import seed_demo_data
from wage_dashboard.main import configure_logging, load_settings


def main() -> None:
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    container = build_container(settings)

    if seed_demo_data(container.employees_repo, container.records_repo):
        print(f"OK: Seeded demo employees and records ({settings.STORAGE_BACKEND})")
    else:
        print("Store already has employees, nothing seeded.")


if __name__ == "__main__":
    main()
