from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account role for the login stand-in."""

    ADMIN = "admin"
    USER = "user"


class Language(str, Enum):
    """Display languages supported by the translation table."""

    TELUGU = "te"
    ENGLISH = "en"


class ExportFormat(str, Enum):
    PDF = "pdf"
    CSV = "csv"
