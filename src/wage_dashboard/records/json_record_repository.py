from __future__ import annotations

import dataclasses
from decimal import Decimal
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.ids import IdGenerator, UUIDGenerator
from ..core.exceptions import NotFoundError
from ..database.json_store import JsonFileStore
from .model import DailyRecord
from .repository import DailyRecordRepository

STORE_KEY = "records"
_MUTABLE_FIELDS = {"employee_id", "date", "macharlu", "karchulu", "notes"}


class JsonDailyRecordRepository(DailyRecordRepository):
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

    def _load(self) -> list[DailyRecord]:
        return self._store.load_as(STORE_KEY, DailyRecord.from_dict)

    def _save(self, records: Sequence[DailyRecord]) -> None:
        self._store.save(STORE_KEY, [r.to_dict() for r in records])

    def list(self) -> Sequence[DailyRecord]:
        return self._load()

    def get(self, record_id: str) -> DailyRecord:
        for record in self._load():
            if record.id == str(record_id):
                return record
        raise NotFoundError("Record not found")

    def create(
        self,
        *,
        employee_id: str,
        date: str,
        macharlu: Decimal,
        karchulu: Decimal,
        notes: Optional[str] = None,
    ) -> DailyRecord:
        records = self._load()
        existing_ids = {r.id for r in records}
        new_id = self._new_id()
        while new_id in existing_ids:
            new_id = self._new_id()

        record = DailyRecord(
            id=new_id,
            employee_id=str(employee_id),
            date=date,
            macharlu=macharlu,
            karchulu=karchulu,
            notes=notes,
            created_at=self._clock(),
        )
        records.append(record)
        self._save(records)
        return record

    def update(self, record_id: str, **changes) -> DailyRecord:
        unknown = set(changes) - _MUTABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {sorted(unknown)}")

        records = self._load()
        for index, record in enumerate(records):
            if record.id == str(record_id):
                updated = dataclasses.replace(record, **changes)
                records[index] = updated
                self._save(records)
                return updated
        raise NotFoundError("Record not found")

    def delete(self, record_id: str) -> None:
        records = self._load()
        remaining = [r for r in records if r.id != str(record_id)]
        if len(remaining) == len(records):
            raise NotFoundError("Record not found")
        self._save(remaining)
