from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    There is no delete: deactivation is `update(id, is_active=False)`.
    """

    def list(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get(self, employee_pk: str) -> Employee:
        """Raise NotFoundError when the id is absent."""

        raise NotImplementedError

    def find(self, employee_pk: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        employee_id: str,
        contact: Optional[str],
        is_active: bool = True,
    ) -> Employee:
        raise NotImplementedError

    def update(self, employee_pk: str, **changes) -> Employee:
        """Apply a partial update (name, employee_id, contact, is_active)."""

        raise NotImplementedError
