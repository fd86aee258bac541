from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import SalaryType


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee on the payroll.

    Deleting an employee only clears ``is_active`` so historical payroll and
    attendance rows keep their reference.
    """

    employee_id: int
    name: str
    email: str
    position: str
    salary_rate: Decimal
    salary_type: SalaryType
    hire_date: date
    department: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "email": self.email,
            "position": self.position,
            "department": self.department,
            "salary_rate": str(self.salary_rate),
            "salary_type": self.salary_type.value,
            "hire_date": self.hire_date.isoformat(),
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class EmployeeStats:
    """Read-model for the employee list with current-period figures."""

    employee: Employee
    total_hours: Decimal
    gross_pay: Decimal
    net_pay: Decimal
    last_payroll: Optional[str] = None

    def to_dict(self) -> dict:
        out = self.employee.to_dict()
        out.update(
            {
                "total_hours": str(self.total_hours),
                "gross_pay": str(self.gross_pay),
                "net_pay": str(self.net_pay),
                "last_payroll": self.last_payroll,
            }
        )
        return out
