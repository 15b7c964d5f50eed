from __future__ import annotations

from flask import Flask, session

from ..common.http import fail_for, ok, request_data, session_language
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    locale = container.locale_service

    @app.route("/api/locale", methods=["GET"], endpoint="get_locale")
    def get_locale():
        language = session_language(locale)
        return ok(
            locale,
            language=language,
            languages=locale.supported_languages(),
            translations=locale.table(language),
        )

    @app.route("/api/locale", methods=["POST"], endpoint="set_locale")
    def set_locale():
        try:
            language = locale.normalize(request_data().get("language"))
        except ValidationError as e:
            return fail_for(locale, e)
        session["language"] = language
        return ok(locale, language=language, translations=locale.table(language))

    @app.route("/api/locale/<language>/<path:key>", methods=["GET"], endpoint="translate_key")
    def translate_key(language: str, key: str):
        try:
            t = locale.resolve(language)
        except ValidationError as e:
            return fail_for(locale, e)
        return ok(locale, key=key, text=t(key))
