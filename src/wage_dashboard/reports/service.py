from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import default_report_window
from ..common.validators import optional_iso_date, require_date_range
from ..core.constants import ALL_EMPLOYEES, DASHBOARD_SUMMARY_LIMIT, DEFAULT_REPORT_DAYS
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..records.filters import by_date_range, by_employee, newest_first
from ..records.repository import DailyRecordRepository
from .aggregation import fleet_totals, summarize_employees
from .model import DashboardStats, ReportData

logger = logging.getLogger(__name__)


class ReportService:
    def __init__(
        self,
        employees: EmployeeRepository,
        records: DailyRecordRepository,
        *,
        default_days: int = DEFAULT_REPORT_DAYS,
        today: Callable[[], date] = date.today,
    ):
        self._employees = employees
        self._records = records
        self._default_days = int(default_days)
        self._today = today

    def dashboard(self, *, limit: int = DASHBOARD_SUMMARY_LIMIT) -> DashboardStats:
        employees = list(self._employees.list())
        summaries = summarize_employees(employees, self._records.list())
        totals = fleet_totals(summaries)
        return DashboardStats(
            total_employees=len(employees),
            active_employees=sum(1 for e in employees if e.is_active),
            total_macharlu=totals.total_macharlu,
            total_karchulu=totals.total_karchulu,
            summaries=[s for s in summaries if s.employee.is_active][: max(int(limit), 0)],
        )

    def default_window(self) -> tuple[str, str]:
        return default_report_window(self._today(), self._default_days)

    def build_report(
        self,
        *,
        start=None,
        end=None,
        employee_id: Optional[str] = ALL_EMPLOYEES,
        include_inactive: bool = True,
    ) -> ReportData:
        default_start, default_end = self.default_window()
        start = optional_iso_date(start, "Start date") or default_start
        end = optional_iso_date(end, "End date") or default_end
        require_date_range(start, end)

        employee_id = employee_id or ALL_EMPLOYEES
        employees = list(self._employees.list())
        if employee_id != ALL_EMPLOYEES:
            employees = [e for e in employees if e.id == str(employee_id)]
            if not employees:
                raise NotFoundError("Employee not found")
        if not include_inactive:
            employees = [e for e in employees if e.is_active]

        records = by_date_range(self._records.list(), start, end)
        summaries = summarize_employees(employees, records)
        report = ReportData(
            start_date=start,
            end_date=end,
            employee_filter=str(employee_id),
            summaries=summaries,
            records_by_employee={e.id: newest_first(by_employee(records, e.id)) for e in employees},
            totals=fleet_totals(summaries),
        )
        logger.info(
            "Report %s built (%d employees, %d records)",
            report.filename_stem,
            report.totals.employees_count,
            report.totals.records_count,
        )
        return report
