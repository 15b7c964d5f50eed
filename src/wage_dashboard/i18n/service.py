from __future__ import annotations

from typing import Callable, Mapping, Optional

from ..core.constants import DEFAULT_LANGUAGE
from ..core.exceptions import ValidationError
from .translations import TRANSLATIONS

Translator = Callable[[str], str]


class LocaleService:
    """Resolve a language tag into a lookup function.

    A key missing from the table translates to the key itself.
    """

    def __init__(
        self,
        translations: Mapping[str, Mapping[str, str]] = TRANSLATIONS,
        *,
        default_language: str = DEFAULT_LANGUAGE,
    ):
        if default_language not in translations:
            raise ValueError(f"Default language {default_language!r} has no translation table")
        self._translations = translations
        self._default_language = default_language

    @property
    def default_language(self) -> str:
        return self._default_language

    def supported_languages(self) -> list[str]:
        return sorted(self._translations)

    def normalize(self, language: Optional[str]) -> str:
        if not language:
            return self._default_language
        tag = str(language).strip().lower()
        if tag not in self._translations:
            raise ValidationError(f"Unsupported language: {language}")
        return tag

    def resolve(self, language: Optional[str] = None) -> Translator:
        table = self._translations[self.normalize(language)]

        def translate(key: str) -> str:
            return table.get(key, key)

        return translate

    def table(self, language: Optional[str] = None) -> dict[str, str]:
        return dict(self._translations[self.normalize(language)])
