from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..common.money import format_php

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class PayrollComputation:
    """Every figure of one employee's pay for one period, already rounded.

    gross_pay, total_deductions and net_pay are sums of the rounded components,
    so ``gross - total_deductions == net`` holds exactly.
    """

    hours_worked: Decimal = ZERO
    overtime_hours: Decimal = ZERO
    base_pay: Decimal = ZERO
    overtime_pay: Decimal = ZERO
    allowances: Decimal = ZERO
    bonuses: Decimal = ZERO
    gross_pay: Decimal = ZERO
    sss_deduction: Decimal = ZERO
    philhealth_deduction: Decimal = ZERO
    pag_ibig_deduction: Decimal = ZERO
    tax_deduction: Decimal = ZERO
    other_deductions: Decimal = ZERO
    total_deductions: Decimal = ZERO
    net_pay: Decimal = ZERO

    def to_dict(self) -> dict:
        return {f.name: str(getattr(self, f.name)) for f in fields(self)}


@dataclass(frozen=True)
class PayrollRecord:
    """Persisted payroll row, optionally joined with the employee's name/position."""

    payroll_id: int
    employee_id: int
    pay_period: str
    computation: PayrollComputation
    generated_at: Optional[datetime] = None
    employee_name: Optional[str] = None
    position: Optional[str] = None

    def to_dict(self) -> dict:
        out = {
            "id": self.payroll_id,
            "employee_id": self.employee_id,
            "employee_name": self.employee_name,
            "position": self.position,
            "pay_period": self.pay_period,
            "generated_at": self.generated_at.isoformat() if self.generated_at else None,
        }
        out.update(self.computation.to_dict())
        return out


@dataclass(frozen=True)
class PayrollSummary:
    pay_period: str
    total_employees: int = 0
    total_gross_pay: Decimal = ZERO
    total_deductions: Decimal = ZERO
    total_net_pay: Decimal = ZERO

    def to_dict(self) -> dict:
        return {
            "pay_period": self.pay_period,
            "total_employees": self.total_employees,
            "total_gross_pay": str(self.total_gross_pay),
            "total_deductions": str(self.total_deductions),
            "total_net_pay": str(self.total_net_pay),
        }


@dataclass(frozen=True)
class PayslipLine:
    label: str
    amount: Decimal
    kind: str  # earning | deduction | total

    def to_dict(self) -> dict:
        return {"label": self.label, "amount": str(self.amount), "value": format_php(self.amount), "type": self.kind}


@dataclass(frozen=True)
class Payslip:
    record: PayrollRecord
    lines: list[PayslipLine] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"payroll": self.record.to_dict(), "lines": [line.to_dict() for line in self.lines]}
