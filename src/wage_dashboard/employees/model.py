from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import format_timestamp, parse_timestamp


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object (no storage code). Employees are never hard-deleted,
    `is_active` is the soft-delete flag.
    """

    id: str
    name: str
    employee_id: str
    contact: Optional[str]
    is_active: bool
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """External JSON shape: {id, name, employeeId, contact?, isActive, createdAt}."""
        out: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "employeeId": self.employee_id,
            "isActive": self.is_active,
            "createdAt": format_timestamp(self.created_at),
        }
        if self.contact:
            out["contact"] = self.contact
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Employee":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            employee_id=data["employeeId"],
            contact=data.get("contact") or None,
            is_active=bool(data.get("isActive", True)),
            created_at=parse_timestamp(data["createdAt"]),
        )
