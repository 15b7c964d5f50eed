from __future__ import annotations

import random
from decimal import Decimal

from fakes import make_employee, make_record

from wage_dashboard.records.filters import by_employee
from wage_dashboard.reports.aggregation import fleet_totals, summarize, summarize_employees


def test_summarize_two_records_scenario():
    employee = make_employee("1")
    records = [
        make_record("1", "1", "2024-09-06", 800, 150),
        make_record("2", "1", "2024-09-07", 900, 200),
    ]

    summary = summarize(records, employee)

    assert summary.total_macharlu == 1700
    assert summary.total_karchulu == 350
    assert summary.net_balance == 1350
    assert summary.records_count == 2
    assert summary.last_entry.id == "2"


def test_summarize_empty_is_all_zero():
    summary = summarize([], make_employee())

    assert summary.total_macharlu == 0
    assert summary.total_karchulu == 0
    assert summary.net_balance == 0
    assert summary.records_count == 0
    assert summary.last_entry is None


def test_summary_matches_filtered_sum():
    records = [
        make_record("1", "1", "2024-09-06", "0.10", "0.05"),
        make_record("2", "2", "2024-09-06", "12.34", "1.01"),
        make_record("3", "1", "2024-09-07", "0.20", "0.00"),
    ]
    mine = by_employee(records, "1")

    summary = summarize(mine, make_employee("1"))

    assert summary.total_macharlu == sum((r.macharlu for r in mine), Decimal("0"))
    assert summary.total_macharlu == Decimal("0.30")


def test_many_small_amounts_do_not_drift():
    records = [make_record(str(i), "1", "2024-09-06", "0.10", "0.01") for i in range(1000)]

    summary = summarize(records, make_employee("1"))

    assert summary.total_macharlu == Decimal("100.00")
    assert summary.total_karchulu == Decimal("10.00")
    assert summary.net_balance == Decimal("90.00")


def test_fleet_totals_are_order_independent():
    employees = [make_employee(str(i), code=f"EMP{i:03d}") for i in range(1, 6)]
    records = [
        make_record(str(n), str(1 + n % 5), "2024-09-06", f"{n}.{n % 100:02d}", f"{n % 7}.33")
        for n in range(60)
    ]
    summaries = summarize_employees(employees, records)

    shuffled = list(summaries)
    random.Random(7).shuffle(shuffled)

    assert fleet_totals(summaries) == fleet_totals(shuffled)
    totals = fleet_totals(summaries)
    assert totals.records_count == 60
    assert totals.employees_count == 5
    assert totals.net_balance == totals.total_macharlu - totals.total_karchulu


def test_summarize_employees_applies_window():
    employees = [make_employee("1"), make_employee("2", code="EMP002")]
    records = [
        make_record("1", "1", "2024-09-06", 800, 150),
        make_record("2", "1", "2024-09-07", 900, 200),
        make_record("3", "2", "2024-09-06", 750, 100),
    ]

    summaries = summarize_employees(employees, records, start="2024-09-07", end="2024-09-07")

    assert [s.records_count for s in summaries] == [1, 0]
    assert summaries[0].total_macharlu == 900
    assert summaries[1].net_balance == 0
