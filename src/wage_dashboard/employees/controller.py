from __future__ import annotations

import logging

from flask import Flask, request

from ..common.http import fail, fail_for, login_required, ok, request_data
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)

_EDITABLE = {"name": "name", "employeeId": "employee_id", "contact": "contact"}


def register(app: Flask, container: Container) -> None:
    locale = container.locale_service
    service = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @login_required
    def list_employees():
        try:
            employees = service.list_employees(
                search=request.args.get("q"),
                active_only=request.args.get("active") in {"1", "true"},
            )
            return ok(locale, employees=[e.to_dict() for e in employees], count=len(employees))
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to load employees")
            return fail(locale, "Failed to load employees", 500)

    @app.route("/api/employees", methods=["POST"], endpoint="add_employee")
    @login_required
    def add_employee():
        data = request_data()
        try:
            employee = service.add_employee(
                name=data.get("name", ""),
                employee_id=data.get("employeeId", ""),
                contact=data.get("contact"),
            )
            return ok(locale, "Employee added successfully", 201, employee=employee.to_dict())
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to add employee")
            return fail(locale, "Failed to save employee", 500)

    @app.route("/api/employees/<employee_pk>", methods=["GET"], endpoint="get_employee")
    @login_required
    def get_employee(employee_pk: str):
        try:
            return ok(locale, employee=service.get(employee_pk).to_dict())
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to load employee %s", employee_pk)
            return fail(locale, "Failed to load employee", 500)

    @app.route("/api/employees/<employee_pk>", methods=["PUT", "PATCH"], endpoint="edit_employee")
    @login_required
    def edit_employee(employee_pk: str):
        data = request_data()
        changes = {field: data[key] for key, field in _EDITABLE.items() if key in data}
        try:
            employee = service.edit_employee(employee_pk, **changes)
            return ok(locale, "Employee updated successfully", employee=employee.to_dict())
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to update employee %s", employee_pk)
            return fail(locale, "Failed to save employee", 500)

    @app.route("/api/employees/<employee_pk>/deactivate", methods=["POST"], endpoint="deactivate_employee")
    @login_required
    def deactivate_employee(employee_pk: str):
        try:
            employee = service.deactivate(employee_pk)
            return ok(locale, "Employee deactivated", employee=employee.to_dict())
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to deactivate employee %s", employee_pk)
            return fail(locale, "Failed to update employee status", 500)

    @app.route("/api/employees/<employee_pk>/activate", methods=["POST"], endpoint="activate_employee")
    @login_required
    def activate_employee(employee_pk: str):
        try:
            employee = service.activate(employee_pk)
            return ok(locale, "Employee activated", employee=employee.to_dict())
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to activate employee %s", employee_pk)
            return fail(locale, "Failed to update employee status", 500)
