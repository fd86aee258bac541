from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.exceptions import InputError

_PAY_PERIOD_RE = re.compile(r"^([0-9]{4})-(0[1-9]|1[0-2])$")


@dataclass(frozen=True)
class PayPeriod:
    """A calendar month identified by its ``YYYY-MM`` token."""

    year: int
    month: int

    @property
    def token(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def end(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    def contains(self, value: date) -> bool:
        return self.start <= value <= self.end

    def __str__(self) -> str:
        return self.token


def _match(value: str) -> Optional[re.Match]:
    m = _PAY_PERIOD_RE.match(value.strip())
    if m is None or int(m.group(1)) < 1:
        return None
    return m


def is_pay_period(value: Optional[str]) -> bool:
    return bool(value) and _match(value) is not None


def parse_pay_period(value: Optional[str]) -> PayPeriod:
    """Parse a ``YYYY-MM`` token; raises InputError when missing or malformed."""
    if value is None or not str(value).strip():
        raise InputError("Pay period is required")
    m = _match(str(value))
    if not m:
        raise InputError(f"Invalid pay period {value!r}, expected YYYY-MM")
    return PayPeriod(year=int(m.group(1)), month=int(m.group(2)))


def current_pay_period(today: Optional[date] = None) -> PayPeriod:
    today = today or now_local().date()
    return PayPeriod(year=today.year, month=today.month)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
