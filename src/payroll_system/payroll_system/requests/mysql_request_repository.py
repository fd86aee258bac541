from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable, Optional, Sequence

from ..common.money import to_decimal
from ..core.enums import CorrectionType, LeaveType, RequestKind, RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceCorrection, HrisRequest, LeaveRequest, OvertimeRequest
from .repository import RequestRepository

_REVIEW_COLUMNS = "r.status, r.reason, r.reviewed_by, r.reviewed_at, r.review_comments, r.created_at"

_TABLES = {
    RequestKind.LEAVE: ("leave_requests", "r.start_date, r.end_date, r.leave_type"),
    RequestKind.OVERTIME: ("overtime_requests", "r.work_date, r.hours"),
    RequestKind.CORRECTION: ("attendance_corrections", "r.work_date, r.time_in, r.time_out, r.correction_type"),
}


def _review_fields(r: dict) -> dict:
    return {
        "request_id": int(r["request_id"]),
        "employee_id": int(r["employee_id"]),
        "reason": r["reason"],
        "status": RequestStatus(r["status"]),
        "created_at": r.get("created_at"),
        "reviewed_by": r.get("reviewed_by"),
        "reviewed_at": r.get("reviewed_at"),
        "review_comments": r.get("review_comments"),
        "employee_name": r.get("employee_name"),
    }


def _row_to_leave(r: dict) -> LeaveRequest:
    return LeaveRequest(
        start_date=r["start_date"],
        end_date=r["end_date"],
        leave_type=LeaveType(r["leave_type"]),
        **_review_fields(r),
    )


def _row_to_overtime(r: dict) -> OvertimeRequest:
    return OvertimeRequest(work_date=r["work_date"], hours=to_decimal(r["hours"]), **_review_fields(r))


def _row_to_correction(r: dict) -> AttendanceCorrection:
    return AttendanceCorrection(
        work_date=r["work_date"],
        correction_type=CorrectionType(r["correction_type"]),
        time_in=r.get("time_in"),
        time_out=r.get("time_out"),
        **_review_fields(r),
    )


_MAPPERS: dict[RequestKind, Callable[[dict], HrisRequest]] = {
    RequestKind.LEAVE: _row_to_leave,
    RequestKind.OVERTIME: _row_to_overtime,
    RequestKind.CORRECTION: _row_to_correction,
}


def _select(kind: RequestKind) -> str:
    table, columns = _TABLES[kind]
    return f"""
        SELECT r.request_id, r.employee_id, e.name AS employee_name, {columns}, {_REVIEW_COLUMNS}
        FROM {table} r
        JOIN employees e ON e.employee_id = r.employee_id
    """


class MySQLRequestRepository(RequestRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_leave(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        leave_type: LeaveType,
        reason: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(employee_id, start_date, end_date, leave_type, reason, status)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(employee_id), start_date, end_date, leave_type.value, reason, RequestStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def create_overtime(self, *, employee_id: int, work_date: date, hours: Decimal, reason: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO overtime_requests(employee_id, work_date, hours, reason, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(employee_id), work_date, hours, reason, RequestStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def create_correction(
        self,
        *,
        employee_id: int,
        work_date: date,
        time_in: Optional[str],
        time_out: Optional[str],
        correction_type: CorrectionType,
        reason: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_corrections(
                    employee_id, work_date, time_in, time_out, correction_type, reason, status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    int(employee_id),
                    work_date,
                    time_in,
                    time_out,
                    correction_type.value,
                    reason,
                    RequestStatus.PENDING.value,
                ),
            )
            return int(cur.lastrowid)

    def get(self, *, kind: RequestKind, request_id: int) -> Optional[HrisRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_select(kind) + " WHERE r.request_id=%s", (int(request_id),))
            r = fetchone(cur)
            return _MAPPERS[kind](r) if r else None

    def list(
        self,
        *,
        kind: RequestKind,
        employee_id: Optional[int] = None,
        status: Optional[RequestStatus] = None,
        limit: int = 200,
    ) -> Sequence[HrisRequest]:
        clauses = ["1=1"]
        params: list[object] = []
        if employee_id is not None:
            clauses.append("r.employee_id=%s")
            params.append(int(employee_id))
        if status is not None:
            clauses.append("r.status=%s")
            params.append(status.value)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _select(kind) + f" WHERE {' AND '.join(clauses)} ORDER BY r.created_at DESC, r.request_id DESC LIMIT %s",
                tuple(params + [int(limit)]),
            )
            return [_MAPPERS[kind](r) for r in fetchall(cur)]

    def decide(
        self,
        *,
        kind: RequestKind,
        request_id: int,
        status: RequestStatus,
        reviewed_by: Optional[str],
        comments: Optional[str] = None,
    ) -> bool:
        table, _ = _TABLES[kind]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE {table}
                SET status=%s, reviewed_by=%s, reviewed_at=CURRENT_TIMESTAMP,
                    review_comments=%s, updated_at=CURRENT_TIMESTAMP
                WHERE request_id=%s AND status=%s
                """,
                (status.value, reviewed_by, comments, int(request_id), RequestStatus.PENDING.value),
            )
            return cur.rowcount > 0
