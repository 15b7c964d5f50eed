from __future__ import annotations

import json
from decimal import Decimal

import pytest

from wage_dashboard.common.ids import CounterIdGenerator
from wage_dashboard.core.exceptions import LoadFailure, NotFoundError
from wage_dashboard.database.json_store import JsonFileStore
from wage_dashboard.records.json_record_repository import JsonDailyRecordRepository


def _repo(tmp_path, start=1):
    return JsonDailyRecordRepository(JsonFileStore(tmp_path), id_generator=CounterIdGenerator(start))


def test_create_persists_external_shape(tmp_path):
    repo = _repo(tmp_path)

    record = repo.create(employee_id="1", date="2024-09-06", macharlu=Decimal("800.00"), karchulu=Decimal("150.25"))

    stored = json.loads((tmp_path / "records.json").read_text(encoding="utf-8"))
    assert stored == [
        {
            "id": record.id,
            "employeeId": "1",
            "date": "2024-09-06",
            "macharlu": 800,
            "karchulu": 150.25,
            "createdAt": record.created_at.isoformat(),
        }
    ]


def test_reload_keeps_exact_decimals(tmp_path):
    _repo(tmp_path).create(employee_id="1", date="2024-09-06", macharlu=Decimal("0.10"), karchulu=Decimal("0.20"))

    record = _repo(tmp_path).list()[0]

    assert record.macharlu == Decimal("0.1")
    assert record.karchulu == Decimal("0.2")
    assert isinstance(record.macharlu, Decimal)


def test_rapid_creates_get_distinct_ids(tmp_path):
    repo = _repo(tmp_path)

    ids = {repo.create(employee_id="1", date="2024-09-06", macharlu=Decimal(1), karchulu=Decimal(0)).id for _ in range(25)}

    assert len(ids) == 25


def test_colliding_generator_does_not_reuse_ids(tmp_path):
    repo = _repo(tmp_path)
    first = repo.create(employee_id="1", date="2024-09-06", macharlu=Decimal(1), karchulu=Decimal(0))

    second = _repo(tmp_path, start=1).create(employee_id="1", date="2024-09-07", macharlu=Decimal(1), karchulu=Decimal(0))

    assert first.id != second.id


def test_update_keeps_id_and_created_at(tmp_path):
    repo = _repo(tmp_path)
    record = repo.create(employee_id="1", date="2024-09-06", macharlu=Decimal(1), karchulu=Decimal(0), notes="a")

    updated = repo.update(record.id, date="2024-09-08", notes=None)

    assert updated.id == record.id
    assert updated.created_at == record.created_at
    assert repo.get(record.id).date == "2024-09-08"
    assert "notes" not in json.loads((tmp_path / "records.json").read_text(encoding="utf-8"))[0]


def test_update_rejects_immutable_fields(tmp_path):
    repo = _repo(tmp_path)
    record = repo.create(employee_id="1", date="2024-09-06", macharlu=Decimal(1), karchulu=Decimal(0))

    with pytest.raises(ValueError):
        repo.update(record.id, created_at=None)


def test_delete_missing_raises_and_keeps_file(tmp_path):
    repo = _repo(tmp_path)
    repo.create(employee_id="1", date="2024-09-06", macharlu=Decimal(1), karchulu=Decimal(0))
    before = (tmp_path / "records.json").read_text(encoding="utf-8")

    with pytest.raises(NotFoundError):
        repo.delete("does-not-exist")

    assert (tmp_path / "records.json").read_text(encoding="utf-8") == before


def test_delete_removes_record(tmp_path):
    repo = _repo(tmp_path)
    record = repo.create(employee_id="1", date="2024-09-06", macharlu=Decimal(1), karchulu=Decimal(0))

    repo.delete(record.id)

    assert repo.list() == []
    with pytest.raises(NotFoundError):
        repo.get(record.id)


def test_corrupted_store_is_load_failure(tmp_path):
    (tmp_path / "records.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(LoadFailure):
        _repo(tmp_path).list()


@pytest.mark.parametrize(
    "rows",
    [
        [{"id": "1"}],
        [{"id": "1", "employeeId": "1", "date": "2024-09-06", "macharlu": "abc", "karchulu": 0, "createdAt": "2024-09-06T10:00:00Z"}],
        [{"id": "1", "employeeId": "1", "date": "2024-9-6", "macharlu": 1, "karchulu": 0, "createdAt": "2024-09-06T10:00:00Z"}],
        ["not a row"],
    ],
)
def test_malformed_row_is_load_failure(tmp_path, rows):
    (tmp_path / "records.json").write_text(json.dumps(rows), encoding="utf-8")

    with pytest.raises(LoadFailure):
        _repo(tmp_path).list()
