from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from ...attendance.model import AttendanceTotals
from ...benefits.model import Benefit
from ...common.money import hours, money, money_sum
from ...core.constants import (
    OVERTIME_MULTIPLIER,
    PAG_IBIG_CAP,
    PAG_IBIG_RATE,
    PHILHEALTH_RATE,
    SSS_RATE,
)
from ...core.enums import PayComponent, SalaryType
from ...employees.model import Employee
from ..model import PayrollComputation
from .base import PayrollCalculator
from .income_tax import compute_income_tax, taxable_income


def sss_contribution(gross_pay) -> Decimal:
    return money(money(gross_pay) * SSS_RATE)


def philhealth_contribution(gross_pay) -> Decimal:
    return money(money(gross_pay) * PHILHEALTH_RATE)


def pag_ibig_contribution(gross_pay) -> Decimal:
    return money(min(money(gross_pay) * PAG_IBIG_RATE, PAG_IBIG_CAP))


def benefit_totals(benefits: Sequence[Benefit]) -> dict[PayComponent, Decimal]:
    """Sum benefit amounts into their pay components (statutory entries are dropped)."""
    buckets: dict[PayComponent, list[Decimal]] = {c: [] for c in PayComponent}
    for b in benefits:
        buckets[b.component].append(b.amount)
    return {c: money_sum(amounts) for c, amounts in buckets.items()}


def settle(
    *,
    hours_worked,
    overtime_hours,
    base_pay,
    overtime_pay,
    allowances,
    bonuses,
    other_deductions,
    withhold_tax: bool,
) -> PayrollComputation:
    """Gross, contributions, tax and net from already known earnings."""
    base_pay = money(base_pay)
    overtime_pay = money(overtime_pay)
    allowances = money(allowances)
    bonuses = money(bonuses)
    other_deductions = money(other_deductions)

    gross = base_pay + overtime_pay + allowances + bonuses
    sss = sss_contribution(gross)
    philhealth = philhealth_contribution(gross)
    pag_ibig = pag_ibig_contribution(gross)
    tax = compute_income_tax(taxable_income(gross, sss, philhealth, pag_ibig)) if withhold_tax else money(0)
    total_deductions = sss + philhealth + pag_ibig + tax + other_deductions

    return PayrollComputation(
        hours_worked=hours(hours_worked),
        overtime_hours=hours(overtime_hours),
        base_pay=base_pay,
        overtime_pay=overtime_pay,
        allowances=allowances,
        bonuses=bonuses,
        gross_pay=gross,
        sss_deduction=sss,
        philhealth_deduction=philhealth,
        pag_ibig_deduction=pag_ibig,
        tax_deduction=tax,
        other_deductions=other_deductions,
        total_deductions=total_deductions,
        net_pay=gross - total_deductions,
    )


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: hourly staff are paid per hour plus 1.5x overtime, monthly staff a flat rate.

    Income tax is withheld only when ``withhold_tax`` is set.
    """

    def __init__(self, *, withhold_tax: bool = False):
        self.withhold_tax = withhold_tax

    def compute(
        self,
        employee: Employee,
        totals: AttendanceTotals,
        benefits: Sequence[Benefit],
    ) -> PayrollComputation:
        rate = employee.salary_rate
        if employee.salary_type == SalaryType.HOURLY:
            base_pay = rate * totals.total_hours
            overtime_pay = rate * OVERTIME_MULTIPLIER * totals.overtime_hours
        else:
            base_pay = rate
            overtime_pay = Decimal("0")

        extras = benefit_totals(benefits)
        return settle(
            hours_worked=totals.total_hours,
            overtime_hours=totals.overtime_hours,
            base_pay=base_pay,
            overtime_pay=overtime_pay,
            allowances=extras[PayComponent.ALLOWANCES],
            bonuses=extras[PayComponent.BONUSES],
            other_deductions=extras[PayComponent.OTHER_DEDUCTIONS],
            withhold_tax=self.withhold_tax,
        )
