"""Pure, stateless predicates over DailyRecord sequences.

Both filters test independent fields, so applying them in either order gives the
same subsequence. Record order is preserved.
"""
from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Union

from ..common.datetime_utils import format_iso_date
from ..core.constants import ALL_EMPLOYEES
from .model import DailyRecord

DateBound = Optional[Union[str, date]]


def _as_iso(value: DateBound) -> Optional[str]:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return format_iso_date(value)
    return str(value)


def by_employee(records: Iterable[DailyRecord], employee_id: Optional[str]) -> list[DailyRecord]:
    """Keep records of one employee; "all" (or None) keeps everything."""
    if employee_id is None or employee_id == ALL_EMPLOYEES:
        return list(records)
    return [r for r in records if r.employee_id == str(employee_id)]


def by_date_range(records: Iterable[DailyRecord], start: DateBound = None, end: DateBound = None) -> list[DailyRecord]:
    """Keep records with start <= date <= end (both inclusive, a missing bound is open)."""
    start_s = _as_iso(start)
    end_s = _as_iso(end)
    # YYYY-MM-DD is fixed-width and zero-padded, string order == calendar order.
    return [
        r
        for r in records
        if (start_s is None or start_s <= r.date) and (end_s is None or r.date <= end_s)
    ]


def by_date(records: Iterable[DailyRecord], day: DateBound) -> list[DailyRecord]:
    if _as_iso(day) is None:
        return list(records)
    return by_date_range(records, day, day)


def apply_filters(
    records: Iterable[DailyRecord],
    *,
    employee_id: Optional[str] = ALL_EMPLOYEES,
    start: DateBound = None,
    end: DateBound = None,
) -> list[DailyRecord]:
    return by_date_range(by_employee(records, employee_id), start, end)


def newest_first(records: Iterable[DailyRecord]) -> list[DailyRecord]:
    return sorted(records, key=lambda r: (r.date, r.created_at), reverse=True)
