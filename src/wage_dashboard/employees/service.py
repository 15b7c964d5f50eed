from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import optional_text, require_non_empty
from ..core.exceptions import ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_UNSET = object()


class EmployeeService:
    """Use case: manage employees (add, edit, activate/deactivate, search)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self, *, search: Optional[str] = None, active_only: bool = False) -> Sequence[Employee]:
        employees = list(self._employees.list())
        if active_only:
            employees = [e for e in employees if e.is_active]
        term = (search or "").strip()
        if term:
            lowered = term.lower()
            employees = [
                e
                for e in employees
                if lowered in e.name.lower()
                or lowered in e.employee_id.lower()
                or (e.contact is not None and term in e.contact)
            ]
        return employees

    def get(self, employee_pk: str) -> Employee:
        return self._employees.get(employee_pk)

    def add_employee(self, *, name: str, employee_id: str, contact: Optional[str] = None) -> Employee:
        name = require_non_empty(name, "Name")
        employee_id = require_non_empty(employee_id, "Employee ID")
        contact = optional_text(contact)

        if any(e.employee_id.lower() == employee_id.lower() for e in self._employees.list()):
            # Codes are meant to be unique but the store does not enforce it.
            logger.warning("Employee code %s is already in use", employee_id)

        employee = self._employees.create(name=name, employee_id=employee_id, contact=contact, is_active=True)
        logger.info("Employee %s (%s) added", employee.id, employee.employee_id)
        return employee

    def edit_employee(
        self,
        employee_pk: str,
        *,
        name=_UNSET,
        employee_id=_UNSET,
        contact=_UNSET,
    ) -> Employee:
        changes: dict = {}
        if name is not _UNSET:
            changes["name"] = require_non_empty(name, "Name")
        if employee_id is not _UNSET:
            changes["employee_id"] = require_non_empty(employee_id, "Employee ID")
        if contact is not _UNSET:
            changes["contact"] = optional_text(contact)
        if not changes:
            raise ValidationError("Nothing to update")

        employee = self._employees.update(employee_pk, **changes)
        logger.info("Employee %s updated (%s)", employee.id, ", ".join(sorted(changes)))
        return employee

    def set_active(self, employee_pk: str, *, is_active: bool) -> Employee:
        employee = self._employees.update(employee_pk, is_active=bool(is_active))
        logger.info("Employee %s %s", employee.id, "activated" if is_active else "deactivated")
        return employee

    def deactivate(self, employee_pk: str) -> Employee:
        return self.set_active(employee_pk, is_active=False)

    def activate(self, employee_pk: str) -> Employee:
        return self.set_active(employee_pk, is_active=True)
