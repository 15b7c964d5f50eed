"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the business rules live in the services.
"""

from wage_dashboard.container import build_container
from wage_dashboard.database.seed import seed_demo_data
from wage_dashboard.main import load_settings


def main():
    settings = load_settings()
    container = build_container(settings)
    seed_demo_data(container.employees_repo, container.records_repo)

    report = container.report_service.build_report(start="2024-09-01", end="2024-09-30")
    for summary in report.summaries:
        print(summary.employee.name, summary.total_macharlu, summary.total_karchulu, summary.net_balance)
    print("TOTAL", report.totals.net_balance)


if __name__ == "__main__":
    main()
