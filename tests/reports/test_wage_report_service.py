from __future__ import annotations

from datetime import date

import pytest
from fakes import InMemoryEmployees, InMemoryRecords, make_employee, make_record

from wage_dashboard.core.exceptions import NotFoundError, ValidationError
from wage_dashboard.reports.service import ReportService


def _service():
    employees = InMemoryEmployees(
        [
            make_employee("1", name="Rajesh", code="EMP001"),
            make_employee("2", name="Sita", code="EMP002"),
            make_employee("3", name="Old", code="EMP003", is_active=False),
        ]
    )
    records = InMemoryRecords(
        [
            make_record("1", "1", "2024-09-06", 800, 150),
            make_record("2", "1", "2024-09-07", 900, 200),
            make_record("3", "2", "2024-09-06", 750, 100),
            make_record("4", "3", "2024-09-07", 100, 10),
            make_record("5", "ghost", "2024-09-07", 5000, 0),
            make_record("6", "2", "2024-10-01", 60, 6),
        ]
    )
    return ReportService(employees, records, default_days=30, today=lambda: date(2024, 9, 10))


def test_report_totals_reconcile_with_summaries():
    report = _service().build_report(start="2024-09-01", end="2024-09-30")

    by_code = {s.employee.employee_id: s for s in report.summaries}
    assert by_code["EMP001"].total_macharlu == 1700
    assert by_code["EMP001"].net_balance == 1350
    assert by_code["EMP002"].records_count == 1
    assert report.totals.total_macharlu == 800 + 900 + 750 + 100
    assert report.totals.total_karchulu == 150 + 200 + 100 + 10
    assert report.totals.net_balance == report.totals.total_macharlu - report.totals.total_karchulu
    assert report.filename_stem == "wage-report-2024-09-01-to-2024-09-30"


def test_report_includes_inactive_employees_by_default():
    svc = _service()

    assert len(svc.build_report(start="2024-09-01", end="2024-09-30").summaries) == 3
    active_only = svc.build_report(start="2024-09-01", end="2024-09-30", include_inactive=False)
    assert [s.employee.id for s in active_only.summaries] == ["1", "2"]


def test_report_for_single_employee():
    report = _service().build_report(start="2024-09-07", end="2024-09-07", employee_id="1")

    assert [s.employee.id for s in report.summaries] == ["1"]
    assert [r.id for r in report.records_by_employee["1"]] == ["2"]
    assert report.totals.total_macharlu == 900


def test_report_unknown_employee():
    with pytest.raises(NotFoundError):
        _service().build_report(employee_id="nope")


def test_report_default_window_is_last_30_days():
    report = _service().build_report()

    assert (report.start_date, report.end_date) == ("2024-08-11", "2024-09-10")


def test_report_rejects_bad_window():
    svc = _service()
    with pytest.raises(ValidationError):
        svc.build_report(start="2024-09-30", end="2024-09-01")
    with pytest.raises(ValidationError):
        svc.build_report(start="2024/09/01", end="2024-09-30")


def test_report_to_dict_shape():
    data = _service().build_report(start="2024-09-06", end="2024-09-06", employee_id="1").to_dict()

    assert data["dateRange"] == {"startDate": "2024-09-06", "endDate": "2024-09-06"}
    assert data["summaries"][0]["totalMacharlu"] == 800
    assert data["summaries"][0]["records"][0]["id"] == "1"
    assert data["totals"]["netBalance"] == 650


def test_dashboard_stats():
    stats = _service().dashboard()

    assert stats.total_employees == 3
    assert stats.active_employees == 2
    # orphan records belong to no employee, so they are not counted
    assert stats.total_macharlu == 800 + 900 + 750 + 100 + 60
    assert [s.employee.id for s in stats.summaries] == ["1", "2"]
