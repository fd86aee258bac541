from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import AttendanceRecord, AttendanceTotals


class AttendanceRepository(Protocol):
    def get_totals(self, *, employee_id: int, start: date, end: date) -> AttendanceTotals:
        """Sum hours_worked and overtime over rows dated within [start, end]."""

        raise NotImplementedError

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(
        self,
        *,
        employee_id: int,
        start: Optional[date] = None,
        end: Optional[date] = None,
        limit: int = 500,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(self, *, employee_id: int, work_date: date, hours_worked: Decimal, overtime: Decimal) -> int:
        raise NotImplementedError

    def bulk_create(self, *, rows: Sequence[Mapping[str, Any]]) -> list[int]:
        """Insert every row in one transaction; nothing is kept if any insert fails."""

        raise NotImplementedError

    def update(self, attendance_id: int, *, fields: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, attendance_id: int) -> bool:
        raise NotImplementedError
