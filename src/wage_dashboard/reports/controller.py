from __future__ import annotations

import logging

from flask import Flask, request

from ..common.http import fail, fail_for, login_required, ok
from ..container import Container
from ..core.constants import ALL_EMPLOYEES
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    locale = container.locale_service
    service = container.report_service

    def _build_report():
        return service.build_report(
            start=request.args.get("start"),
            end=request.args.get("end"),
            employee_id=request.args.get("employee") or ALL_EMPLOYEES,
            include_inactive=request.args.get("inactive", "1") not in {"0", "false"},
        )

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @login_required
    def dashboard():
        try:
            return ok(locale, stats=service.dashboard().to_dict())
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to load dashboard data")
            return fail(locale, "Failed to load dashboard data", 500)

    @app.route("/api/reports", methods=["GET"], endpoint="report")
    @login_required
    def report():
        try:
            return ok(locale, "Report generated successfully", report=_build_report().to_dict())
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to generate report")
            return fail(locale, "Failed to generate report", 500)

    @app.route("/api/reports/export.<fmt>", methods=["GET"], endpoint="export_report")
    @login_required
    def export_report(fmt: str):
        try:
            exporter = container.exporters.for_format(fmt)
            exported = exporter.export(_build_report())
        except DomainError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Failed to export report as %s", fmt)
            return fail(locale, "Failed to export report", 500)

        return app.response_class(
            exported.content,
            mimetype=exported.mimetype,
            headers={"Content-Disposition": f"attachment; filename={exported.filename}"},
        )
