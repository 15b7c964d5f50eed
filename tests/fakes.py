from __future__ import annotations

import dataclasses
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from wage_dashboard.core.exceptions import NotFoundError
from wage_dashboard.employees.model import Employee
from wage_dashboard.records.model import DailyRecord

FIXED_NOW = datetime(2024, 9, 8, 10, 0, tzinfo=timezone.utc)


def make_employee(pk: str = "1", *, name: str = "Rajesh", code: str = "EMP001", is_active: bool = True) -> Employee:
    return Employee(
        id=pk,
        name=name,
        employee_id=code,
        contact="9876543210",
        is_active=is_active,
        created_at=FIXED_NOW,
    )


def make_record(pk: str, employee_id: str, date: str, macharlu, karchulu, notes=None) -> DailyRecord:
    return DailyRecord(
        id=pk,
        employee_id=employee_id,
        date=date,
        macharlu=Decimal(str(macharlu)),
        karchulu=Decimal(str(karchulu)),
        notes=notes,
        created_at=FIXED_NOW,
    )


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._items: dict[str, Employee] = {e.id: e for e in employees}
        self._id = 100

    def list(self):
        return list(self._items.values())

    def find(self, employee_pk: str) -> Optional[Employee]:
        return self._items.get(str(employee_pk))

    def get(self, employee_pk: str) -> Employee:
        employee = self.find(employee_pk)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create(self, *, name, employee_id, contact, is_active=True) -> Employee:
        self._id += 1
        employee = Employee(
            id=str(self._id),
            name=name,
            employee_id=employee_id,
            contact=contact,
            is_active=is_active,
            created_at=FIXED_NOW,
        )
        self._items[employee.id] = employee
        return employee

    def update(self, employee_pk: str, **changes) -> Employee:
        employee = self.get(employee_pk)
        updated = dataclasses.replace(employee, **changes)
        self._items[employee.id] = updated
        return updated


class InMemoryRecords:
    def __init__(self, records=()):
        self._items: dict[str, DailyRecord] = {r.id: r for r in records}
        self._id = 100
        self.created = 0

    def list(self):
        return list(self._items.values())

    def get(self, record_id: str) -> DailyRecord:
        record = self._items.get(str(record_id))
        if not record:
            raise NotFoundError("Record not found")
        return record

    def create(self, *, employee_id, date, macharlu, karchulu, notes=None) -> DailyRecord:
        self._id += 1
        self.created += 1
        record = DailyRecord(
            id=str(self._id),
            employee_id=employee_id,
            date=date,
            macharlu=macharlu,
            karchulu=karchulu,
            notes=notes,
            created_at=FIXED_NOW,
        )
        self._items[record.id] = record
        return record

    def update(self, record_id: str, **changes) -> DailyRecord:
        record = self.get(record_id)
        updated = dataclasses.replace(record, **changes)
        self._items[record.id] = updated
        return updated

    def delete(self, record_id: str) -> None:
        if str(record_id) not in self._items:
            raise NotFoundError("Record not found")
        del self._items[str(record_id)]
