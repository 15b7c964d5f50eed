"""Helpers shared by the JSON controllers: session guard and notification payloads."""
from __future__ import annotations

from functools import wraps

from flask import jsonify, request, session

from ..core.exceptions import AuthenticationError, DomainError, LoadFailure, NotFoundError, ValidationError
from ..i18n.service import LocaleService

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (NotFoundError, 404),
    (LoadFailure, 503),
)


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"success": False, "message": "Please log in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def status_for(error: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 400


def request_data() -> dict:
    """JSON body, falling back to form fields."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def session_language(locale: LocaleService) -> str:
    try:
        return locale.normalize(session.get("language"))
    except ValidationError:
        return locale.default_language


def ok(locale: LocaleService, message: str = "", status: int = 200, **payload):
    t = locale.resolve(session_language(locale))
    body = {"success": True, "title": t("common.success"), "message": message}
    body.update(payload)
    return jsonify(body), status


def fail(locale: LocaleService, message: str, status: int = 400):
    t = locale.resolve(session_language(locale))
    return jsonify({"success": False, "title": t("common.error"), "message": message}), status


def fail_for(locale: LocaleService, error: DomainError):
    return fail(locale, str(error), status_for(error))
