from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import format_iso_date, parse_iso_date
from .money import MAX_MONEY, D, format_money, to_money


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def require_iso_date(value, field_name: str) -> str:
    """Normalize a date (or YYYY-MM-DD string) into its fixed-width ISO form."""
    if isinstance(value, date):
        return format_iso_date(value)
    text = require_non_empty(value, field_name)
    try:
        return format_iso_date(parse_iso_date(text))
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")


def optional_iso_date(value, field_name: str) -> Optional[str]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return require_iso_date(value, field_name)


def require_date_range(start: Optional[str], end: Optional[str]) -> None:
    if start and end and start > end:
        raise ValidationError("Start date must not be after end date")


def require_non_negative_amount(value, field_name: str) -> Decimal:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        raw = D(value)
    except ValueError:
        raise ValidationError(f"{field_name} must be a number")
    if not raw.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    # sign is checked before rounding so -0.004 does not pass as -0.00
    if raw < 0:
        raise ValidationError(f"{field_name} must not be negative")
    if raw > MAX_MONEY or to_money(raw) > MAX_MONEY:
        raise ValidationError(f"{field_name} must not exceed {format_money(MAX_MONEY)}")
    return to_money(raw)
