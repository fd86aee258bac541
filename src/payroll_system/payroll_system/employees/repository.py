from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Employee, EmployeeStats


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this interface, not on a concrete database.
    """

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, *, fields: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def update(self, employee_id: int, *, fields: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        raise NotImplementedError

    def list_with_stats(self, *, pay_period: str, start: date, end: date) -> Sequence[EmployeeStats]:
        raise NotImplementedError
