from __future__ import annotations

import logging

from flask import Flask, session

from ..common.http import fail, fail_for, login_required, ok, request_data
from ..container import Container
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    locale = container.locale_service

    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = request_data()
        try:
            s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        except AuthenticationError as e:
            return fail_for(locale, e)
        except Exception:
            logger.exception("Login failed unexpectedly")
            return fail(locale, "System error during login", 500)

        language = session.get("language")
        session.clear()
        session["user_id"] = s_user.user_id
        session["username"] = s_user.username
        session["role"] = s_user.role.value
        if language:
            session["language"] = language
        logger.info("User %s logged in", s_user.username)
        return ok(locale, "Logged in", user={"id": s_user.user_id, "username": s_user.username, "role": s_user.role.value})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.pop("user_id", None)
        session.pop("username", None)
        session.pop("role", None)
        return ok(locale, "Logged out")

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return ok(
            locale,
            user={"id": session["user_id"], "username": session.get("username"), "role": session.get("role")},
        )
