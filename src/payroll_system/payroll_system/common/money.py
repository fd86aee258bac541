from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable

from ..core.constants import CURRENCY_QUANTUM, HOURS_QUANTUM


def to_decimal(value: Any) -> Decimal:
    """Coerce a DB/JSON value to Decimal without going through binary float."""
    if value is None or value == "":
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        value = repr(value)
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Not a decimal value: {value!r}")


def money(value: Any) -> Decimal:
    return to_decimal(value).quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)


def hours(value: Any) -> Decimal:
    return to_decimal(value).quantize(HOURS_QUANTUM, rounding=ROUND_HALF_UP)


def money_sum(values: Iterable[Any]) -> Decimal:
    total = Decimal("0")
    for v in values:
        total += money(v)
    return money(total)


def format_php(value: Any) -> str:
    """Format an amount as Philippine peso, e.g. ``₱1,234.50``."""
    amount = money(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}₱{abs(amount):,.2f}"
