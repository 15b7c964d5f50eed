from __future__ import annotations

from datetime import timezone
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.ids import IdGenerator, UUIDGenerator
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = {
    "name": "name",
    "employee_id": "employee_code",
    "contact": "contact",
    "is_active": "is_active",
}

_SELECT = "SELECT id, name, employee_code, contact, is_active, created_at FROM employees"


def _row_to_employee(row: dict) -> Employee:
    return Employee(
        id=str(row["id"]),
        name=row["name"],
        employee_id=row["employee_code"],
        contact=row.get("contact") or None,
        is_active=bool(row.get("is_active", True)),
        created_at=row["created_at"].replace(tzinfo=timezone.utc),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(
        self,
        conn_factory: DatabaseConnection,
        *,
        id_generator: Optional[IdGenerator] = None,
        clock: Callable = now_utc,
    ):
        self._conn_factory = conn_factory
        self._new_id = id_generator or UUIDGenerator()
        self._clock = clock

    def list(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY created_at ASC, id ASC")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def find(self, employee_pk: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (str(employee_pk),))
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def get(self, employee_pk: str) -> Employee:
        employee = self.find(employee_pk)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create(self, *, name: str, employee_id: str, contact: Optional[str], is_active: bool = True) -> Employee:
        employee = Employee(
            id=self._new_id(),
            name=name,
            employee_id=employee_id,
            contact=contact,
            is_active=is_active,
            created_at=self._clock(),
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(id, name, employee_code, contact, is_active, created_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    employee.id,
                    employee.name,
                    employee.employee_id,
                    employee.contact,
                    1 if employee.is_active else 0,
                    employee.created_at.astimezone(timezone.utc).replace(tzinfo=None),
                ),
            )
        return employee

    def update(self, employee_pk: str, **changes) -> Employee:
        unknown = set(changes) - set(_COLUMNS)
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        if changes:
            assignments = ", ".join(f"{_COLUMNS[field]}=%s" for field in changes)
            params: list[object] = []
            for field, value in changes.items():
                params.append((1 if value else 0) if field == "is_active" else value)
            params.append(str(employee_pk))

            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT id FROM employees WHERE id=%s", (str(employee_pk),))
                if not fetchone(cur):
                    raise NotFoundError("Employee not found")
                cur.execute(f"UPDATE employees SET {assignments} WHERE id=%s", tuple(params))

        return self.get(employee_pk)
