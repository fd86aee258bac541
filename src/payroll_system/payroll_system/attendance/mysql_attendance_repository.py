from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from ..common.money import hours, to_decimal
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord, AttendanceTotals
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, employee_id, work_date, hours_worked, overtime, created_at, updated_at"
_WRITABLE = ("employee_id", "work_date", "hours_worked", "overtime")

_INSERT = "INSERT INTO attendance(employee_id, work_date, hours_worked, overtime) VALUES(%s,%s,%s,%s)"


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        hours_worked=to_decimal(r["hours_worked"]),
        overtime=to_decimal(r.get("overtime")),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_totals(self, *, employee_id: int, start: date, end: date) -> AttendanceTotals:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COALESCE(SUM(hours_worked), 0) AS total_hours,
                       COALESCE(SUM(overtime), 0) AS overtime_hours
                FROM attendance
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                """,
                (int(employee_id), start, end),
            )
            r = fetchone(cur) or {}
            return AttendanceTotals(
                total_hours=hours(r.get("total_hours")),
                overtime_hours=hours(r.get("overtime_hours")),
            )

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance WHERE attendance_id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def list_for_employee(
        self,
        *,
        employee_id: int,
        start: Optional[date] = None,
        end: Optional[date] = None,
        limit: int = 500,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["employee_id=%s"]
        params: list[object] = [int(employee_id)]
        if start is not None:
            clauses.append("work_date >= %s")
            params.append(start)
        if end is not None:
            clauses.append("work_date <= %s")
            params.append(end)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance
                WHERE {' AND '.join(clauses)}
                ORDER BY work_date DESC, attendance_id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def create(self, *, employee_id: int, work_date: date, hours_worked: Decimal, overtime: Decimal) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_INSERT, (int(employee_id), work_date, hours_worked, overtime))
            return int(cur.lastrowid)

    def bulk_create(self, *, rows: Sequence[Mapping[str, Any]]) -> list[int]:
        ids: list[int] = []
        # One cursor/transaction: db_cursor rolls back everything on the first failure.
        with db_cursor(self._conn_factory) as (_, cur):
            for row in rows:
                cur.execute(
                    _INSERT,
                    (int(row["employee_id"]), row["work_date"], row["hours_worked"], row.get("overtime", Decimal("0"))),
                )
                ids.append(int(cur.lastrowid))
        return ids

    def update(self, attendance_id: int, *, fields: Mapping[str, Any]) -> bool:
        cols = [c for c in _WRITABLE if c in fields]
        if not cols:
            return True
        assignments = ", ".join(f"{c}=%s" for c in cols)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE attendance SET {assignments}, updated_at=CURRENT_TIMESTAMP WHERE attendance_id=%s",
                tuple(fields[c] for c in cols) + (int(attendance_id),),
            )
            return cur.rowcount > 0

    def delete(self, attendance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance WHERE attendance_id=%s", (int(attendance_id),))
            return cur.rowcount > 0
