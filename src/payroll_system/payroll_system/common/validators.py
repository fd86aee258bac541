from __future__ import annotations

import re
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from ..core.exceptions import FieldViolation, ValidationError
from .datetime_utils import is_pay_period, parse_iso_date
from .money import to_decimal

E = TypeVar("E", bound=Enum)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_RATE_RE = re.compile(r"^[0-9]+(\.[0-9]{1,2})?$")
_CLOCK_RE = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])(?::[0-5][0-9])?$")


class Violations:
    """Collects field violations so a payload reports every problem at once."""

    def __init__(self, prefix: str = ""):
        self._prefix = prefix
        self._items: list[FieldViolation] = []

    def add(self, field: str, message: str) -> None:
        self._items.append(FieldViolation(field=f"{self._prefix}{field}", message=message))

    def extend(self, other: "Violations") -> None:
        self._items.extend(other.items)

    @property
    def items(self) -> list[FieldViolation]:
        return list(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def raise_if_any(self, message: str = "Validation error") -> None:
        if self._items:
            raise ValidationError(message, self._items)

    # Field readers: return the parsed value or None after recording a violation.

    def text(self, data: dict, field: str, *, required: bool = True, max_len: int = 255) -> Optional[str]:
        raw = data.get(field)
        if raw is None or not str(raw).strip():
            if required:
                self.add(field, "is required")
            return None
        value = str(raw).strip()
        if len(value) > max_len:
            self.add(field, f"must be at most {max_len} characters")
            return None
        return value

    def email(self, data: dict, field: str = "email") -> Optional[str]:
        value = self.text(data, field)
        if value is not None and not _EMAIL_RE.match(value):
            self.add(field, "is not a valid email address")
            return None
        return value

    def decimal(
        self,
        data: dict,
        field: str,
        *,
        required: bool = True,
        minimum: Optional[Decimal] = None,
        maximum: Optional[Decimal] = None,
        exclusive_minimum: bool = False,
        default: Optional[Decimal] = None,
    ) -> Optional[Decimal]:
        raw = data.get(field)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            if required:
                self.add(field, "is required")
            return default
        if isinstance(raw, bool):
            self.add(field, "must be a number")
            return None
        try:
            value = to_decimal(raw)
        except ValueError:
            self.add(field, "must be a number")
            return None
        if not value.is_finite():
            self.add(field, "must be a number")
            return None
        if minimum is not None:
            if exclusive_minimum and value <= minimum:
                self.add(field, f"must be greater than {minimum}")
                return None
            if not exclusive_minimum and value < minimum:
                self.add(field, f"must be at least {minimum}")
                return None
        if maximum is not None and value > maximum:
            self.add(field, f"must be at most {maximum}")
            return None
        return value

    def rate(self, data: dict, field: str) -> Optional[Decimal]:
        """Non-negative amount with at most two fraction digits."""
        raw = data.get(field)
        if raw not in (None, "") and not isinstance(raw, bool) and not _RATE_RE.match(str(raw).strip()):
            self.add(field, "must be a non-negative amount with at most 2 decimals")
            return None
        return self.decimal(data, field, minimum=Decimal("0"))

    def iso_date(self, data: dict, field: str, *, required: bool = True) -> Optional[date]:
        raw = data.get(field)
        if isinstance(raw, date):
            return raw
        if raw is None or not str(raw).strip():
            if required:
                self.add(field, "is required")
            return None
        try:
            return parse_iso_date(str(raw).strip())
        except ValueError:
            self.add(field, "must be a date in YYYY-MM-DD format")
            return None

    def clock(self, data: dict, field: str, *, required: bool = False) -> Optional[str]:
        """Time of day as ``HH:MM``; seconds are accepted and dropped."""
        raw = data.get(field)
        if raw is None or not str(raw).strip():
            if required:
                self.add(field, "is required")
            return None
        m = _CLOCK_RE.match(str(raw).strip())
        if not m:
            self.add(field, "must be a time in HH:MM format")
            return None
        return f"{m.group(1)}:{m.group(2)}"

    def pay_period(self, data: dict, field: str) -> Optional[str]:
        raw = data.get(field)
        if raw is None or not str(raw).strip():
            self.add(field, "is required")
            return None
        if not is_pay_period(str(raw)):
            self.add(field, "must be a pay period in YYYY-MM format")
            return None
        return str(raw).strip()

    def choice(self, data: dict, field: str, enum_cls: Type[E], *, required: bool = True) -> Optional[E]:
        raw = data.get(field)
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            if required:
                self.add(field, "is required")
            return None
        try:
            return enum_cls(raw)
        except ValueError:
            allowed = ", ".join(m.value for m in enum_cls)
            self.add(field, f"must be one of: {allowed}")
            return None

    def boolean(self, data: dict, field: str, *, default: bool = False) -> bool:
        raw = data.get(field)
        if raw is None:
            return default
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, str) and raw.strip().lower() in {"true", "1", "yes"}:
            return True
        if isinstance(raw, str) and raw.strip().lower() in {"false", "0", "no"}:
            return False
        if isinstance(raw, int):
            return bool(raw)
        self.add(field, "must be a boolean")
        return default

    def integer(self, data: dict, field: str, *, required: bool = True) -> Optional[int]:
        raw = data.get(field)
        if raw is None or raw == "":
            if required:
                self.add(field, "is required")
            return None
        if isinstance(raw, bool):
            self.add(field, "must be an integer")
            return None
        try:
            return int(raw)
        except (TypeError, ValueError):
            self.add(field, "must be an integer")
            return None


def require_payload(data: Any) -> dict:
    if not isinstance(data, dict):
        raise ValidationError("Validation error", [FieldViolation(field="body", message="must be a JSON object")])
    return data
