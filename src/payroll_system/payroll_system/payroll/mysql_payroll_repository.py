from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.money import to_decimal
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import PayrollComputation, PayrollRecord
from .repository import PayrollRepository

_AMOUNT_COLUMNS = (
    "hours_worked",
    "overtime_hours",
    "base_pay",
    "overtime_pay",
    "allowances",
    "bonuses",
    "gross_pay",
    "sss_deduction",
    "philhealth_deduction",
    "pag_ibig_deduction",
    "tax_deduction",
    "other_deductions",
    "total_deductions",
    "net_pay",
)

_SELECT = f"""
    SELECT p.payroll_id, p.employee_id, p.pay_period, p.generated_at,
           {', '.join('p.' + c for c in _AMOUNT_COLUMNS)},
           e.name AS employee_name, e.position
    FROM payroll p
    JOIN employees e ON e.employee_id = p.employee_id
"""


def _row_to_record(r: dict) -> PayrollRecord:
    return PayrollRecord(
        payroll_id=int(r["payroll_id"]),
        employee_id=int(r["employee_id"]),
        pay_period=r["pay_period"],
        computation=PayrollComputation(**{c: to_decimal(r[c]) for c in _AMOUNT_COLUMNS}),
        generated_at=r.get("generated_at"),
        employee_name=r.get("employee_name"),
        position=r.get("position"),
    )


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(
        self,
        *,
        employee_id: int,
        pay_period: str,
        computation: PayrollComputation,
        generated_at: datetime,
    ) -> int:
        columns = ("employee_id", "pay_period") + _AMOUNT_COLUMNS + ("generated_at",)
        values = (
            (int(employee_id), pay_period)
            + tuple(getattr(computation, c) for c in _AMOUNT_COLUMNS)
            + (generated_at,)
        )
        updates = ", ".join(f"{c}=VALUES({c})" for c in _AMOUNT_COLUMNS + ("generated_at",))

        with db_cursor(self._conn_factory) as (_, cur):
            # LAST_INSERT_ID(expr) makes lastrowid the existing id on the update path.
            cur.execute(
                f"""
                INSERT INTO payroll({', '.join(columns)})
                VALUES({', '.join(['%s'] * len(columns))})
                ON DUPLICATE KEY UPDATE payroll_id=LAST_INSERT_ID(payroll_id), {updates}
                """,
                values,
            )
            return int(cur.lastrowid)

    def list_for_period(self, *, pay_period: str) -> Sequence[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE p.pay_period=%s ORDER BY e.name, p.employee_id", (pay_period,))
            return [_row_to_record(r) for r in fetchall(cur)]

    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE p.payroll_id=%s", (int(payroll_id),))
            r = fetchone(cur)
            return _row_to_record(r) if r else None
