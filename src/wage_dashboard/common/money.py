from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from ..core.constants import MAX_AMOUNT, MONEY_PLACES

Number = Union[Decimal, int, float, str]

_QUANT = Decimal(1).scaleb(-MONEY_PLACES)  # 0.01
MAX_MONEY = Decimal(MAX_AMOUNT)


def D(x) -> Decimal:
    """Coerce to Decimal safely (floats go through str to keep their printed value)."""
    if isinstance(x, Decimal):
        return x
    if x is None or x == "":
        return Decimal("0")
    try:
        return Decimal(str(x))
    except InvalidOperation as e:
        raise ValueError(f"Not a number: {x!r}") from e


def to_money(x: Number) -> Decimal:
    """Quantize to two decimal places (half up)."""
    value = D(x)
    if not value.is_finite():
        raise ValueError(f"Not a finite amount: {x!r}")
    try:
        return value.quantize(_QUANT, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        # more digits than the context precision allows
        raise ValueError(f"Amount out of range: {x!r}") from e


def money_to_json(value: Decimal):
    """JSON-friendly number: int when integral, float otherwise.

    Floats keep every digit of amounts up to 15 significant digits, which covers
    anything up to MAX_MONEY (the stored maximum). Sums beyond that may lose cents
    in JSON output; the Decimal values themselves stay exact.
    """
    value = D(value)
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def format_money(value: Number, *, symbol: str = "Rs.") -> str:
    amount = to_money(value)
    return f"{symbol} {amount:,.2f}"
