from __future__ import annotations

import logging

from flask import Flask, request

from ..common.http import fail, fail_for, login_required, ok, request_data
from ..container import Container
from ..core.constants import ALL_EMPLOYEES
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)

_FIELDS = {
    "employeeId": "employee_id",
    "date": "date",
    "macharlu": "macharlu",
    "karchulu": "karchulu",
    "notes": "notes",
}


def _record_fields(data: dict) -> dict:
    return {field: data[key] for key, field in _FIELDS.items() if key in data}


def register(app: Flask, container: Container) -> None:
    locale = container.locale_service
    service = container.record_service

    @app.route("/api/records", methods=["GET"], endpoint="list_records")
    @login_required
    def list_records():
        try:
            rows = service.list_rows(
                employee_id=request.args.get("employee") or ALL_EMPLOYEES,
                on_date=request.args.get("date"),
                start=request.args.get("start"),
                end=request.args.get("end"),
            )
            return ok(locale, records=[r.to_dict() for r in rows], count=len(rows))
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to load records")
            return fail(locale, "Failed to load records", 500)

    @app.route("/api/records", methods=["POST"], endpoint="add_record")
    @login_required
    def add_record():
        fields = _record_fields(request_data())
        try:
            record = service.add_record(
                employee_id=fields.get("employee_id", ""),
                date=fields.get("date", ""),
                macharlu=fields.get("macharlu"),
                karchulu=fields.get("karchulu"),
                notes=fields.get("notes"),
            )
            return ok(locale, "Record added successfully", 201, record=record.to_dict())
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to add record")
            return fail(locale, "Failed to save record", 500)

    @app.route("/api/records/quick", methods=["POST"], endpoint="quick_add_record")
    @login_required
    def quick_add_record():
        fields = _record_fields(request_data())
        try:
            record = service.quick_add(
                employee_id=fields.get("employee_id", ""),
                date=fields.get("date", ""),
                macharlu=fields.get("macharlu"),
                karchulu=fields.get("karchulu"),
                notes=fields.get("notes"),
            )
            return ok(locale, "Record added successfully", 201, record=record.to_dict())
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to add record from quick entry")
            return fail(locale, "Failed to add record", 500)

    @app.route("/api/records/<record_id>", methods=["GET"], endpoint="get_record")
    @login_required
    def get_record(record_id: str):
        try:
            return ok(locale, record=service.get(record_id).to_dict())
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to load record %s", record_id)
            return fail(locale, "Failed to load record", 500)

    @app.route("/api/records/<record_id>", methods=["PUT", "PATCH"], endpoint="update_record")
    @login_required
    def update_record(record_id: str):
        try:
            record = service.update_record(record_id, **_record_fields(request_data()))
            return ok(locale, "Record updated successfully", record=record.to_dict())
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to update record %s", record_id)
            return fail(locale, "Failed to save record", 500)

    @app.route("/api/records/<record_id>", methods=["DELETE"], endpoint="delete_record")
    @login_required
    def delete_record(record_id: str):
        try:
            service.delete_record(record_id)
            return ok(locale, "Record deleted successfully")
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to delete record %s", record_id)
            return fail(locale, "Failed to delete record", 500)
