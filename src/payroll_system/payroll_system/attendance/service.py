from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..common.datetime_utils import parse_pay_period
from ..common.validators import Violations, require_payload
from ..core.constants import DEFAULT_LIST_LIMIT, MAX_DAILY_HOURS
from ..core.exceptions import InputError, NotFoundError
from ..employees.repository import EmployeeRepository
from .model import AttendanceRecord, AttendanceTotals
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: record daily hours and total them per pay period."""

    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def list_for_employee(self, employee_id: Optional[int], month: Optional[str] = None) -> Sequence[AttendanceRecord]:
        if employee_id is None:
            raise InputError("Employee ID is required")
        start = end = None
        if month:
            period = parse_pay_period(month)
            start, end = period.start, period.end
        return self._attendance.list_for_employee(
            employee_id=int(employee_id), start=start, end=end, limit=DEFAULT_LIST_LIMIT
        )

    def create(self, payload: Any) -> AttendanceRecord:
        row = self._clean(require_payload(payload), Violations())
        attendance_id = self._attendance.create(**row)
        return self._get(attendance_id)

    def bulk_create(self, payloads: Any) -> Sequence[AttendanceRecord]:
        """Validate every row first; persist only when all rows are valid."""
        if not isinstance(payloads, list) or not payloads:
            v = Violations()
            v.add("records", "must be a non-empty list")
            v.raise_if_any()

        errors = Violations()
        rows: list[dict] = []
        for index, payload in enumerate(payloads):
            v = Violations(prefix=f"records[{index}].")
            if not isinstance(payload, dict):
                v.add("body", "must be a JSON object")
                errors.extend(v)
                continue
            row = self._clean(payload, v, raise_errors=False)
            errors.extend(v)
            rows.append(row)
        errors.raise_if_any()

        ids = self._attendance.bulk_create(rows=rows)
        logger.info("Imported %d attendance rows", len(ids))
        return [self._get(i) for i in ids]

    def update(self, attendance_id: int, payload: Any) -> AttendanceRecord:
        data = require_payload(payload)
        current = self._get(attendance_id)

        v = Violations()
        fields: dict[str, Any] = {}
        if "employee_id" in data:
            fields["employee_id"] = self._employee_ref(data, v)
        if "date" in data:
            fields["work_date"] = v.iso_date(data, "date")
        if "hours_worked" in data:
            fields["hours_worked"] = v.decimal(data, "hours_worked", minimum=Decimal("0"), maximum=MAX_DAILY_HOURS)
        if "overtime" in data:
            fields["overtime"] = v.decimal(
                data, "overtime", minimum=Decimal("0"), maximum=MAX_DAILY_HOURS, default=Decimal("0")
            )
        v.raise_if_any()

        if fields and not self._attendance.update(current.attendance_id, fields=fields):
            raise NotFoundError("Attendance record not found")
        return self._get(current.attendance_id)

    def delete(self, attendance_id: int) -> None:
        if not self._attendance.delete(int(attendance_id)):
            raise NotFoundError("Attendance record not found")

    def monthly_totals(self, employee_id: Optional[int], pay_period: Optional[str]) -> AttendanceTotals:
        if employee_id is None:
            raise InputError("Employee ID is required")
        period = parse_pay_period(pay_period)
        if not self._employees.get_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")
        return self._attendance.get_totals(employee_id=int(employee_id), start=period.start, end=period.end)

    def _get(self, attendance_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(int(attendance_id))
        if not record:
            raise NotFoundError("Attendance record not found")
        return record

    def _employee_ref(self, data: dict, v: Violations) -> Optional[int]:
        employee_id = v.integer(data, "employee_id")
        if employee_id is not None and not self._employees.get_by_id(employee_id):
            v.add("employee_id", "does not reference an existing employee")
            return None
        return employee_id

    def _clean(self, data: dict, v: Violations, *, raise_errors: bool = True) -> dict:
        row = {
            "employee_id": self._employee_ref(data, v),
            "work_date": v.iso_date(data, "date"),
            "hours_worked": v.decimal(data, "hours_worked", minimum=Decimal("0"), maximum=MAX_DAILY_HOURS),
            "overtime": v.decimal(
                data, "overtime", required=False, minimum=Decimal("0"), maximum=MAX_DAILY_HOURS, default=Decimal("0")
            ),
        }
        if raise_errors:
            v.raise_if_any()
        return row
