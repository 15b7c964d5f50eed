from __future__ import annotations

import json

import pytest

from wage_dashboard.common.ids import CounterIdGenerator
from wage_dashboard.core.exceptions import LoadFailure, NotFoundError
from wage_dashboard.database.json_store import JsonFileStore
from wage_dashboard.employees.json_employee_repository import JsonEmployeeRepository


def test_employee_round_trip_through_store(tmp_path):
    repo = JsonEmployeeRepository(JsonFileStore(tmp_path), id_generator=CounterIdGenerator())

    created = repo.create(name="రాజేష్ కుమార్", employee_id="EMP001", contact="9876543210")

    stored = json.loads((tmp_path / "employees.json").read_text(encoding="utf-8"))
    assert stored[0]["name"] == "రాజేష్ కుమార్"
    assert set(stored[0]) == {"id", "name", "employeeId", "contact", "isActive", "createdAt"}
    assert JsonEmployeeRepository(JsonFileStore(tmp_path)).get(created.id) == created


def test_get_missing_employee(tmp_path):
    repo = JsonEmployeeRepository(JsonFileStore(tmp_path))

    assert repo.find("x") is None
    with pytest.raises(NotFoundError):
        repo.get("x")
    with pytest.raises(NotFoundError):
        repo.update("x", is_active=False)


def test_update_is_active(tmp_path):
    repo = JsonEmployeeRepository(JsonFileStore(tmp_path), id_generator=CounterIdGenerator())
    created = repo.create(name="A", employee_id="EMP001", contact=None)

    repo.update(created.id, is_active=False)

    assert repo.get(created.id).is_active is False
    assert [e.id for e in repo.list()] == [created.id]


def test_employee_row_missing_fields_is_load_failure(tmp_path):
    (tmp_path / "employees.json").write_text(json.dumps([{"id": "1", "name": "Ravi"}]), encoding="utf-8")

    with pytest.raises(LoadFailure):
        JsonEmployeeRepository(JsonFileStore(tmp_path)).list()
