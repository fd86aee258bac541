from __future__ import annotations

import csv
import io
import logging
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..benefits.repository import BenefitRepository
from ..common.datetime_utils import current_pay_period, now_local, parse_pay_period
from ..common.money import money_sum
from ..common.validators import Violations, require_payload
from ..core.enums import SalaryType
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator, settle
from .model import PayrollComputation, PayrollRecord, PayrollSummary, Payslip, PayslipLine
from .repository import PayrollRepository

logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "Employee Name",
    "Position",
    "Hours Worked",
    "Gross Pay",
    "SSS Deduction",
    "PhilHealth Deduction",
    "Pag-IBIG Deduction",
    "Total Deductions",
    "Net Pay",
]

MAX_MONTHLY_HOURS = Decimal("168")


class PayrollGenerator:
    """Use case: compute and store one payroll record per active employee."""

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        benefits: BenefitRepository,
        payroll: PayrollRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._benefits = benefits
        self._payroll = payroll
        self._calculator = calculator or StandardPayrollCalculator()

    def generate(self, pay_period: Optional[str], *, actor: Optional[str] = None) -> list[PayrollRecord]:
        """Generate (or regenerate) payroll for ``YYYY-MM``.

        Regenerating a period replaces each employee's existing record.
        """
        period = parse_pay_period(pay_period)
        employees = self._employees.list_active()
        logger.info("Generating payroll for %s (%d active employees, actor=%s)", period, len(employees), actor or "-")

        records: list[PayrollRecord] = []
        for employee in employees:
            totals = self._attendance.get_totals(employee_id=employee.employee_id, start=period.start, end=period.end)
            benefits = self._benefits.list_for_period(employee_id=employee.employee_id, pay_period=period.token)
            computation = self._calculator.compute(employee, totals, benefits)

            generated_at = now_local()
            payroll_id = self._payroll.upsert(
                employee_id=employee.employee_id,
                pay_period=period.token,
                computation=computation,
                generated_at=generated_at,
            )
            logger.debug(
                "Payroll %s employee=%s gross=%s net=%s",
                period, employee.employee_id, computation.gross_pay, computation.net_pay,
            )
            records.append(
                PayrollRecord(
                    payroll_id=payroll_id,
                    employee_id=employee.employee_id,
                    pay_period=period.token,
                    computation=computation,
                    generated_at=generated_at,
                    employee_name=employee.name,
                    position=employee.position,
                )
            )
        return records


class PayrollReportService:
    """Read side: period listings, totals, CSV export and payslips."""

    def __init__(self, payroll: PayrollRepository):
        self._payroll = payroll

    def list_records(self, pay_period: Optional[str]) -> Sequence[PayrollRecord]:
        period = parse_pay_period(pay_period)
        return self._payroll.list_for_period(pay_period=period.token)

    def summary(self, pay_period: Optional[str]) -> PayrollSummary:
        period = parse_pay_period(pay_period)
        records = self._payroll.list_for_period(pay_period=period.token)
        return PayrollSummary(
            pay_period=period.token,
            total_employees=len(records),
            total_gross_pay=money_sum(r.computation.gross_pay for r in records),
            total_deductions=money_sum(r.computation.total_deductions for r in records),
            total_net_pay=money_sum(r.computation.net_pay for r in records),
        )

    def dashboard(self, pay_period: Optional[str] = None) -> PayrollSummary:
        return self.summary(pay_period or current_pay_period().token)

    def export_csv(self, pay_period: Optional[str]) -> tuple[str, str]:
        """Return ``(filename, csv_text)``; every field is quoted."""
        period = parse_pay_period(pay_period)
        records = self._payroll.list_for_period(pay_period=period.token)

        out = io.StringIO()
        writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(CSV_HEADERS)
        for r in records:
            c = r.computation
            writer.writerow(
                [
                    r.employee_name or "",
                    r.position or "",
                    c.hours_worked,
                    c.gross_pay,
                    c.sss_deduction,
                    c.philhealth_deduction,
                    c.pag_ibig_deduction,
                    c.total_deductions,
                    c.net_pay,
                ]
            )
        return f"payroll-{period.token}.csv", out.getvalue()

    def payslip(self, payroll_id: int) -> Payslip:
        record = self._payroll.get_by_id(int(payroll_id))
        if not record:
            raise NotFoundError("Payroll record not found")
        return Payslip(record=record, lines=payslip_lines(record.computation))

    def preview(self, payload: Any) -> tuple[PayrollComputation, list[PayslipLine]]:
        """Stand-alone calculation with income tax withheld, nothing is stored."""
        data = require_payload(payload)
        v = Violations()
        zero = Decimal("0")
        base_pay = v.decimal(data, "base_pay", minimum=zero)
        hours_worked = v.decimal(data, "hours_worked", required=False, minimum=zero, maximum=MAX_MONTHLY_HOURS, default=zero)
        overtime_hours = v.decimal(data, "overtime_hours", required=False, minimum=zero, default=zero)
        overtime_rate = v.decimal(data, "overtime_rate", required=False, minimum=zero, default=zero)
        allowances = v.decimal(data, "allowances", required=False, minimum=zero, default=zero)
        bonuses = v.decimal(data, "bonuses", required=False, minimum=zero, default=zero)
        other_deductions = v.decimal(data, "other_deductions", required=False, minimum=zero, default=zero)
        if data.get("salary_type") not in (None, ""):
            v.choice(data, "salary_type", SalaryType)
        v.raise_if_any()

        computation = settle(
            hours_worked=hours_worked,
            overtime_hours=overtime_hours,
            base_pay=base_pay,
            overtime_pay=overtime_hours * overtime_rate,
            allowances=allowances,
            bonuses=bonuses,
            other_deductions=other_deductions,
            withhold_tax=True,
        )
        return computation, payslip_lines(computation)


def payslip_lines(c: PayrollComputation) -> list[PayslipLine]:
    lines = [
        PayslipLine("Gross Pay", c.gross_pay, "earning"),
        PayslipLine("SSS Contribution", c.sss_deduction, "deduction"),
        PayslipLine("PhilHealth Contribution", c.philhealth_deduction, "deduction"),
        PayslipLine("Pag-IBIG Contribution", c.pag_ibig_deduction, "deduction"),
        PayslipLine("Income Tax", c.tax_deduction, "deduction"),
    ]
    if c.other_deductions:
        lines.append(PayslipLine("Other Deductions", c.other_deductions, "deduction"))
    lines.append(PayslipLine("Total Deductions", c.total_deductions, "deduction"))
    lines.append(PayslipLine("Net Pay", c.net_pay, "total"))
    return lines
