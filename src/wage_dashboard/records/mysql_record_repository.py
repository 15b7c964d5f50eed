from __future__ import annotations

from datetime import timezone
from decimal import Decimal
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import format_iso_date, now_utc
from ..common.ids import IdGenerator, UUIDGenerator
from ..common.money import D
from ..core.exceptions import NotFoundError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import DailyRecord
from .repository import DailyRecordRepository

_COLUMNS = {
    "employee_id": "employee_id",
    "date": "record_date",
    "macharlu": "macharlu",
    "karchulu": "karchulu",
    "notes": "notes",
}

_SELECT = "SELECT id, employee_id, record_date, macharlu, karchulu, notes, created_at FROM daily_records"


def _row_to_record(row: dict) -> DailyRecord:
    record_date = row["record_date"]
    return DailyRecord(
        id=str(row["id"]),
        employee_id=str(row["employee_id"]),
        date=record_date if isinstance(record_date, str) else format_iso_date(record_date),
        macharlu=D(row["macharlu"]),
        karchulu=D(row["karchulu"]),
        notes=row.get("notes") or None,
        created_at=row["created_at"].replace(tzinfo=timezone.utc),
    )


class MySQLDailyRecordRepository(DailyRecordRepository):
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

    def list(self) -> Sequence[DailyRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY record_date DESC, created_at DESC")
            return [_row_to_record(r) for r in fetchall(cur)]

    def get(self, record_id: str) -> DailyRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE id=%s", (str(record_id),))
            row = fetchone(cur)
            if not row:
                raise NotFoundError("Record not found")
            return _row_to_record(row)

    def create(
        self,
        *,
        employee_id: str,
        date: str,
        macharlu: Decimal,
        karchulu: Decimal,
        notes: Optional[str] = None,
    ) -> DailyRecord:
        record = DailyRecord(
            id=self._new_id(),
            employee_id=str(employee_id),
            date=date,
            macharlu=macharlu,
            karchulu=karchulu,
            notes=notes,
            created_at=self._clock(),
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO daily_records(id, employee_id, record_date, macharlu, karchulu, notes, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    record.id,
                    record.employee_id,
                    record.date,
                    record.macharlu,
                    record.karchulu,
                    record.notes,
                    record.created_at.astimezone(timezone.utc).replace(tzinfo=None),
                ),
            )
        return record

    def update(self, record_id: str, **changes) -> DailyRecord:
        unknown = set(changes) - set(_COLUMNS)
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        if changes:
            assignments = ", ".join(f"{_COLUMNS[field]}=%s" for field in changes)
            params = list(changes.values()) + [str(record_id)]

            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT id FROM daily_records WHERE id=%s", (str(record_id),))
                if not fetchone(cur):
                    raise NotFoundError("Record not found")
                cur.execute(f"UPDATE daily_records SET {assignments} WHERE id=%s", tuple(params))

        return self.get(record_id)

    def delete(self, record_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM daily_records WHERE id=%s", (str(record_id),))
            if cur.rowcount == 0:
                raise NotFoundError("Record not found")
