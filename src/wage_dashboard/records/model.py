from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import format_iso_date, format_timestamp, parse_iso_date, parse_timestamp
from ..common.money import D, money_to_json


@dataclass(frozen=True)
class DailyRecord:
    """Domain entity: one day of earnings (macharlu) and expenses (karchulu) for an employee.

    `date` stays a fixed-width YYYY-MM-DD string so range checks can compare it lexicographically.
    """

    id: str
    employee_id: str
    date: str
    macharlu: Decimal
    karchulu: Decimal
    notes: Optional[str]
    created_at: datetime

    @property
    def net(self) -> Decimal:
        return self.macharlu - self.karchulu

    def to_dict(self) -> dict[str, Any]:
        """External JSON shape: {id, employeeId, date, macharlu, karchulu, notes?, createdAt}."""
        out: dict[str, Any] = {
            "id": self.id,
            "employeeId": self.employee_id,
            "date": self.date,
            "macharlu": money_to_json(self.macharlu),
            "karchulu": money_to_json(self.karchulu),
            "createdAt": format_timestamp(self.created_at),
        }
        if self.notes:
            out["notes"] = self.notes
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DailyRecord":
        return cls(
            id=str(data["id"]),
            employee_id=str(data["employeeId"]),
            date=format_iso_date(parse_iso_date(data["date"])),
            macharlu=D(data["macharlu"]),
            karchulu=D(data["karchulu"]),
            notes=data.get("notes") or None,
            created_at=parse_timestamp(data["createdAt"]),
        )


@dataclass(frozen=True)
class RecordRow:
    """Read-model for the records list: the record plus its resolved employee label."""

    record: DailyRecord
    employee_name: str
    employee_code: str

    def to_dict(self) -> dict[str, Any]:
        out = self.record.to_dict()
        out["employeeName"] = self.employee_name
        out["employeeCode"] = self.employee_code
        return out
