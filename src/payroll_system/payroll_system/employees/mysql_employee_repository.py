from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..common.money import to_decimal
from ..core.enums import SalaryType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, EmployeeStats
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, name, email, position, department, salary_rate, salary_type,
    hire_date, is_active, created_at, updated_at
"""

# Columns a caller may write; guards the dynamic SET clause.
_WRITABLE = ("name", "email", "position", "department", "salary_rate", "salary_type", "hire_date", "is_active")


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        name=r["name"],
        email=r["email"],
        position=r["position"],
        department=r.get("department"),
        salary_rate=to_decimal(r["salary_rate"]),
        salary_type=SalaryType(r["salary_type"]),
        hire_date=r["hire_date"],
        is_active=bool(r.get("is_active", True)),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


def _db_value(value: Any) -> Any:
    if isinstance(value, SalaryType):
        return value.value
    if isinstance(value, bool):
        return int(value)
    return value


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE is_active=1 ORDER BY name")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE email=%s", (email,))
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def create(self, *, fields: Mapping[str, Any]) -> int:
        cols = [c for c in _WRITABLE if c in fields]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO employees({', '.join(cols)}) VALUES({', '.join(['%s'] * len(cols))})",
                tuple(_db_value(fields[c]) for c in cols),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, *, fields: Mapping[str, Any]) -> bool:
        cols = [c for c in _WRITABLE if c in fields]
        if not cols:
            return True
        assignments = ", ".join(f"{c}=%s" for c in cols)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE employees SET {assignments}, updated_at=CURRENT_TIMESTAMP WHERE employee_id=%s",
                tuple(_db_value(fields[c]) for c in cols) + (int(employee_id),),
            )
            return cur.rowcount > 0

    def set_active(self, employee_id: int, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET is_active=%s, updated_at=CURRENT_TIMESTAMP WHERE employee_id=%s",
                (int(is_active), int(employee_id)),
            )
            return cur.rowcount > 0

    def list_with_stats(self, *, pay_period: str, start: date, end: date) -> Sequence[EmployeeStats]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    e.employee_id, e.name, e.email, e.position, e.department, e.salary_rate,
                    e.salary_type, e.hire_date, e.is_active, e.created_at, e.updated_at,
                    COALESCE(a.total_hours, 0) AS total_hours,
                    COALESCE(p.gross_pay, 0) AS gross_pay,
                    COALESCE(p.net_pay, 0) AS net_pay,
                    p.pay_period AS last_payroll
                FROM employees e
                LEFT JOIN (
                    SELECT employee_id, SUM(hours_worked) AS total_hours
                    FROM attendance
                    WHERE work_date BETWEEN %s AND %s
                    GROUP BY employee_id
                ) a ON a.employee_id = e.employee_id
                LEFT JOIN payroll p ON p.employee_id = e.employee_id AND p.pay_period = %s
                WHERE e.is_active = 1
                ORDER BY e.name
                """,
                (start, end, pay_period),
            )
            return [
                EmployeeStats(
                    employee=_row_to_employee(r),
                    total_hours=to_decimal(r["total_hours"]),
                    gross_pay=to_decimal(r["gross_pay"]),
                    net_pay=to_decimal(r["net_pay"]),
                    last_payroll=r.get("last_payroll"),
                )
                for r in fetchall(cur)
            ]
