from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import (
    optional_iso_date,
    optional_text,
    require_date_range,
    require_iso_date,
    require_non_empty,
    require_non_negative_amount,
)
from ..core.constants import ALL_EMPLOYEES, UNKNOWN_EMPLOYEE_NAME
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .filters import by_date, by_date_range, by_employee, newest_first
from .model import DailyRecord, RecordRow
from .repository import DailyRecordRepository

logger = logging.getLogger(__name__)

_UNSET = object()


class RecordService:
    """Use case: record, edit, delete and list daily earnings/expenses entries.

    Amounts and dates are validated here, before anything reaches the store.
    """

    def __init__(self, records: DailyRecordRepository, employees: EmployeeRepository):
        self._records = records
        self._employees = employees

    def _require_employee(self, employee_pk: str, *, active_only: bool = False) -> None:
        employee = self._employees.find(employee_pk)
        if not employee:
            raise NotFoundError("Employee not found")
        if active_only and not employee.is_active:
            raise ValidationError("Employee is not active")

    def add_record(
        self,
        *,
        employee_id: str,
        date,
        macharlu,
        karchulu,
        notes: Optional[str] = None,
        active_only: bool = False,
    ) -> DailyRecord:
        employee_id = require_non_empty(employee_id, "Employee")
        record_date = require_iso_date(date, "Date")
        earnings = require_non_negative_amount(macharlu, "Macharlu")
        expenses = require_non_negative_amount(karchulu, "Karchulu")
        self._require_employee(employee_id, active_only=active_only)

        record = self._records.create(
            employee_id=employee_id,
            date=record_date,
            macharlu=earnings,
            karchulu=expenses,
            notes=optional_text(notes),
        )
        logger.info("Record %s added for employee %s on %s", record.id, employee_id, record_date)
        return record

    def quick_add(self, **fields) -> DailyRecord:
        """Dashboard shortcut: only active employees can receive entries."""
        return self.add_record(active_only=True, **fields)

    def update_record(
        self,
        record_id: str,
        *,
        employee_id=_UNSET,
        date=_UNSET,
        macharlu=_UNSET,
        karchulu=_UNSET,
        notes=_UNSET,
    ) -> DailyRecord:
        changes: dict = {}
        if employee_id is not _UNSET:
            changes["employee_id"] = require_non_empty(employee_id, "Employee")
        if date is not _UNSET:
            changes["date"] = require_iso_date(date, "Date")
        if macharlu is not _UNSET:
            changes["macharlu"] = require_non_negative_amount(macharlu, "Macharlu")
        if karchulu is not _UNSET:
            changes["karchulu"] = require_non_negative_amount(karchulu, "Karchulu")
        if notes is not _UNSET:
            changes["notes"] = optional_text(notes)
        if not changes:
            raise ValidationError("Nothing to update")

        if "employee_id" in changes:
            self._require_employee(changes["employee_id"])

        record = self._records.update(record_id, **changes)
        logger.info("Record %s updated (%s)", record.id, ", ".join(sorted(changes)))
        return record

    def delete_record(self, record_id: str) -> None:
        self._records.delete(record_id)
        logger.info("Record %s deleted", record_id)

    def get(self, record_id: str) -> DailyRecord:
        return self._records.get(record_id)

    def list_records(
        self,
        *,
        employee_id: Optional[str] = ALL_EMPLOYEES,
        on_date=None,
        start=None,
        end=None,
    ) -> Sequence[DailyRecord]:
        """Records newest first, narrowed by employee, exact date and/or inclusive range."""
        on_date = optional_iso_date(on_date, "Date")
        start = optional_iso_date(start, "Start date")
        end = optional_iso_date(end, "End date")
        require_date_range(start, end)

        records = by_employee(self._records.list(), employee_id or ALL_EMPLOYEES)
        records = by_date(records, on_date)
        records = by_date_range(records, start, end)
        return newest_first(records)

    def list_rows(self, **filters) -> Sequence[RecordRow]:
        employees = {e.id: e for e in self._employees.list()}
        rows: list[RecordRow] = []
        for record in self.list_records(**filters):
            employee = employees.get(record.employee_id)
            rows.append(
                RecordRow(
                    record=record,
                    employee_name=employee.name if employee else UNKNOWN_EMPLOYEE_NAME,
                    employee_code=employee.employee_id if employee else "",
                )
            )
        return rows
