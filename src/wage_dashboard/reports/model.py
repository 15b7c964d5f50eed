from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from ..common.money import money_to_json
from ..core.constants import REPORT_FILENAME_PREFIX
from ..employees.model import Employee
from ..records.model import DailyRecord


@dataclass(frozen=True)
class EmployeeSummary:
    """Derived (not persisted) totals of one employee over an optional date window."""

    employee: Employee
    total_macharlu: Decimal
    total_karchulu: Decimal
    net_balance: Decimal
    records_count: int
    last_entry: Optional[DailyRecord] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "employee": self.employee.to_dict(),
            "totalMacharlu": money_to_json(self.total_macharlu),
            "totalKarchulu": money_to_json(self.total_karchulu),
            "netBalance": money_to_json(self.net_balance),
            "recordsCount": self.records_count,
            "lastEntry": self.last_entry.to_dict() if self.last_entry else None,
        }


@dataclass(frozen=True)
class FleetTotals:
    total_macharlu: Decimal
    total_karchulu: Decimal
    net_balance: Decimal
    records_count: int
    employees_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalMacharlu": money_to_json(self.total_macharlu),
            "totalKarchulu": money_to_json(self.total_karchulu),
            "netBalance": money_to_json(self.net_balance),
            "recordsCount": self.records_count,
            "employeesCount": self.employees_count,
        }


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    active_employees: int
    total_macharlu: Decimal
    total_karchulu: Decimal
    summaries: list[EmployeeSummary] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalEmployees": self.total_employees,
            "activeEmployees": self.active_employees,
            "totalMacharlu": money_to_json(self.total_macharlu),
            "totalKarchulu": money_to_json(self.total_karchulu),
            "summaries": [s.to_dict() for s in self.summaries],
        }


@dataclass(frozen=True)
class ReportData:
    start_date: str
    end_date: str
    employee_filter: str
    summaries: list[EmployeeSummary]
    records_by_employee: dict[str, list[DailyRecord]]
    totals: FleetTotals

    @property
    def filename_stem(self) -> str:
        return f"{REPORT_FILENAME_PREFIX}-{self.start_date}-to-{self.end_date}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "dateRange": {"startDate": self.start_date, "endDate": self.end_date},
            "employee": self.employee_filter,
            "summaries": [
                dict(
                    s.to_dict(),
                    records=[r.to_dict() for r in self.records_by_employee.get(s.employee.id, [])],
                )
                for s in self.summaries
            ],
            "totals": self.totals.to_dict(),
        }
