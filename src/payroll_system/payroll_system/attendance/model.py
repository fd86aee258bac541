from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: hours an employee worked on one day."""

    attendance_id: int
    employee_id: int
    work_date: date
    hours_worked: Decimal
    overtime: Decimal = Decimal("0")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employee_id": self.employee_id,
            "date": self.work_date.isoformat(),
            "hours_worked": str(self.hours_worked),
            "overtime": str(self.overtime),
        }


@dataclass(frozen=True)
class AttendanceTotals:
    """Read-model: summed hours for one employee over a pay period."""

    total_hours: Decimal = Decimal("0")
    overtime_hours: Decimal = Decimal("0")

    def to_dict(self) -> dict:
        return {"total_hours": str(self.total_hours), "overtime_hours": str(self.overtime_hours)}
