"""Aggregation engine: per-employee and fleet-wide totals.

All sums are Decimal so the result does not depend on summation order.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional, Sequence

from ..common.money import D
from ..employees.model import Employee
from ..records.filters import DateBound, by_date_range, by_employee
from ..records.model import DailyRecord
from .model import EmployeeSummary, FleetTotals

ZERO = Decimal("0")


def _latest(records: Sequence[DailyRecord]) -> Optional[DailyRecord]:
    if not records:
        return None
    return max(records, key=lambda r: (r.date, r.created_at))


def summarize(records: Iterable[DailyRecord], employee: Employee) -> EmployeeSummary:
    """Totals over `records`, which the caller has already narrowed to `employee`."""
    records = list(records)
    total_macharlu = sum((D(r.macharlu) for r in records), ZERO)
    total_karchulu = sum((D(r.karchulu) for r in records), ZERO)
    return EmployeeSummary(
        employee=employee,
        total_macharlu=total_macharlu,
        total_karchulu=total_karchulu,
        net_balance=total_macharlu - total_karchulu,
        records_count=len(records),
        last_entry=_latest(records),
    )


def summarize_employees(
    employees: Iterable[Employee],
    records: Sequence[DailyRecord],
    *,
    start: DateBound = None,
    end: DateBound = None,
) -> list[EmployeeSummary]:
    windowed = by_date_range(records, start, end)
    return [summarize(by_employee(windowed, e.id), e) for e in employees]


def fleet_totals(summaries: Iterable[EmployeeSummary]) -> FleetTotals:
    summaries = list(summaries)
    total_macharlu = sum((s.total_macharlu for s in summaries), ZERO)
    total_karchulu = sum((s.total_karchulu for s in summaries), ZERO)
    return FleetTotals(
        total_macharlu=total_macharlu,
        total_karchulu=total_karchulu,
        net_balance=total_macharlu - total_karchulu,
        records_count=sum(s.records_count for s in summaries),
        employees_count=len(summaries),
    )
