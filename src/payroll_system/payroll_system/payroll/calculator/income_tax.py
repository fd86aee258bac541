"""Progressive monthly withholding tax on compensation.

Brackets are ``(upper_bound, base_tax, rate, excess_over)``; the last bracket
has no upper bound.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ...common.money import money, to_decimal

TAX_BRACKETS: list[tuple[Optional[Decimal], Decimal, Decimal, Decimal]] = [
    (Decimal("20833"), Decimal("0"), Decimal("0"), Decimal("0")),
    (Decimal("33333"), Decimal("0"), Decimal("0.15"), Decimal("20833")),
    (Decimal("66667"), Decimal("1875"), Decimal("0.20"), Decimal("33333")),
    (Decimal("166667"), Decimal("8541.67"), Decimal("0.25"), Decimal("66667")),
    (Decimal("666667"), Decimal("33541.67"), Decimal("0.30"), Decimal("166667")),
    (None, Decimal("183541.67"), Decimal("0.35"), Decimal("666667")),
]


def taxable_income(gross_pay, sss, philhealth, pag_ibig) -> Decimal:
    """Gross pay less statutory contributions, never below zero."""
    value = money(gross_pay) - money(sss) - money(philhealth) - money(pag_ibig)
    return max(money(value), Decimal("0.00"))


def compute_income_tax(taxable) -> Decimal:
    amount = to_decimal(taxable)
    if amount <= 0:
        return Decimal("0.00")
    for upper, base_tax, rate, excess_over in TAX_BRACKETS:
        if upper is None or amount <= upper:
            return money(base_tax + (amount - excess_over) * rate)
    raise AssertionError("unreachable: last bracket is open-ended")
