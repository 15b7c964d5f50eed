from __future__ import annotations

import dataclasses
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.ids import IdGenerator, UUIDGenerator
from ..core.exceptions import NotFoundError
from ..database.json_store import JsonFileStore
from .model import Employee
from .repository import EmployeeRepository

STORE_KEY = "employees"
_MUTABLE_FIELDS = {"name", "employee_id", "contact", "is_active"}


class JsonEmployeeRepository(EmployeeRepository):
    def __init__(
        self,
        store: JsonFileStore,
        *,
        id_generator: Optional[IdGenerator] = None,
        clock: Callable = now_utc,
    ):
        self._store = store
        self._new_id = id_generator or UUIDGenerator()
        self._clock = clock

    def _load(self) -> list[Employee]:
        return self._store.load_as(STORE_KEY, Employee.from_dict)

    def _save(self, employees: Sequence[Employee]) -> None:
        self._store.save(STORE_KEY, [e.to_dict() for e in employees])

    def list(self) -> Sequence[Employee]:
        return self._load()

    def find(self, employee_pk: str) -> Optional[Employee]:
        for employee in self._load():
            if employee.id == str(employee_pk):
                return employee
        return None

    def get(self, employee_pk: str) -> Employee:
        employee = self.find(employee_pk)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create(self, *, name: str, employee_id: str, contact: Optional[str], is_active: bool = True) -> Employee:
        employees = self._load()
        existing_ids = {e.id for e in employees}
        new_id = self._new_id()
        while new_id in existing_ids:
            new_id = self._new_id()

        employee = Employee(
            id=new_id,
            name=name,
            employee_id=employee_id,
            contact=contact,
            is_active=is_active,
            created_at=self._clock(),
        )
        employees.append(employee)
        self._save(employees)
        return employee

    def update(self, employee_pk: str, **changes) -> Employee:
        unknown = set(changes) - _MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        employees = self._load()
        for index, employee in enumerate(employees):
            if employee.id == str(employee_pk):
                updated = dataclasses.replace(employee, **changes)
                employees[index] = updated
                self._save(employees)
                return updated
        raise NotFoundError("Employee not found")
