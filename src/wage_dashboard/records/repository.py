from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import DailyRecord


class DailyRecordRepository(Protocol):
    def list(self) -> Sequence[DailyRecord]:
        raise NotImplementedError

    def get(self, record_id: str) -> DailyRecord:
        """Raise NotFoundError when the id is absent."""

        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        date: str,
        macharlu: Decimal,
        karchulu: Decimal,
        notes: Optional[str] = None,
    ) -> DailyRecord:
        raise NotImplementedError

    def update(self, record_id: str, **changes) -> DailyRecord:
        """Apply a partial update of any field except id/created_at."""

        raise NotImplementedError

    def delete(self, record_id: str) -> None:
        """Hard delete. Raise NotFoundError when the id is absent (store unchanged)."""

        raise NotImplementedError
