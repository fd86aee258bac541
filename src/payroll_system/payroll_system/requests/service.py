from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..common.validators import Violations, require_payload
from ..core.constants import MAX_DAILY_HOURS
from ..core.enums import CorrectionType, LeaveType, RequestKind, RequestStatus
from ..core.exceptions import InputError, NotFoundError
from ..employees.repository import EmployeeRepository
from .model import HrisRequest
from .repository import RequestRepository

logger = logging.getLogger(__name__)


def parse_kind(value: str) -> RequestKind:
    try:
        return RequestKind(value)
    except ValueError:
        raise NotFoundError(f"Unknown request kind {value!r}")


class RequestService:
    """HRIS requests (leave, overtime, attendance corrections) and their review."""

    def __init__(self, requests: RequestRepository, employees: EmployeeRepository):
        self._requests = requests
        self._employees = employees

    def create(self, kind: RequestKind, payload: Any) -> HrisRequest:
        handlers = {
            RequestKind.LEAVE: self.create_leave,
            RequestKind.OVERTIME: self.create_overtime,
            RequestKind.CORRECTION: self.create_correction,
        }
        return handlers[kind](payload)

    def create_leave(self, payload: Any) -> HrisRequest:
        data = require_payload(payload)
        v = Violations()
        employee_id = self._employee_ref(data, v)
        start = v.iso_date(data, "start_date")
        end = v.iso_date(data, "end_date")
        leave_type = v.choice(data, "leave_type", LeaveType)
        reason = v.text(data, "reason", max_len=2000)
        if start and end and end < start:
            v.add("end_date", "must be on or after start_date")
        v.raise_if_any()

        request_id = self._requests.create_leave(
            employee_id=employee_id,
            start_date=start,
            end_date=end,
            leave_type=leave_type,
            reason=reason,
        )
        return self.get(RequestKind.LEAVE, request_id)

    def create_overtime(self, payload: Any) -> HrisRequest:
        data = require_payload(payload)
        v = Violations()
        employee_id = self._employee_ref(data, v)
        work_date = v.iso_date(data, "date")
        hours = v.decimal(data, "hours", minimum=Decimal("0"), exclusive_minimum=True, maximum=MAX_DAILY_HOURS)
        reason = v.text(data, "reason", max_len=2000)
        v.raise_if_any()

        request_id = self._requests.create_overtime(
            employee_id=employee_id, work_date=work_date, hours=hours, reason=reason
        )
        return self.get(RequestKind.OVERTIME, request_id)

    def create_correction(self, payload: Any) -> HrisRequest:
        data = require_payload(payload)
        v = Violations()
        employee_id = self._employee_ref(data, v)
        work_date = v.iso_date(data, "date")
        correction_type = v.choice(data, "correction_type", CorrectionType)
        time_in = v.clock(data, "time_in", required=correction_type in (CorrectionType.TIME_IN, CorrectionType.HOURS))
        time_out = v.clock(data, "time_out", required=correction_type in (CorrectionType.TIME_OUT, CorrectionType.HOURS))
        reason = v.text(data, "reason", max_len=2000)
        if time_in and time_out and time_out <= time_in:
            v.add("time_out", "must be later than time_in")
        v.raise_if_any()

        request_id = self._requests.create_correction(
            employee_id=employee_id,
            work_date=work_date,
            time_in=time_in,
            time_out=time_out,
            correction_type=correction_type,
            reason=reason,
        )
        return self.get(RequestKind.CORRECTION, request_id)

    def get(self, kind: RequestKind, request_id: int) -> HrisRequest:
        req = self._requests.get(kind=kind, request_id=int(request_id))
        if not req:
            raise NotFoundError("Request not found")
        return req

    def list(
        self,
        kind: RequestKind,
        employee_id: Optional[int] = None,
        status: Optional[str] = None,
    ) -> Sequence[HrisRequest]:
        status_filter = None
        if status:
            v = Violations()
            status_filter = v.choice({"status": status}, "status", RequestStatus)
            v.raise_if_any()
        return self._requests.list(kind=kind, employee_id=employee_id, status=status_filter)

    def review(
        self,
        kind: RequestKind,
        request_id: int,
        *,
        status: Any,
        reviewer: Optional[str] = None,
        comments: Optional[str] = None,
    ) -> HrisRequest:
        """Approve or deny a pending request."""
        v = Violations()
        decision = v.choice({"status": status}, "status", RequestStatus)
        if decision == RequestStatus.PENDING:
            v.add("status", "must be approved or denied")
        v.raise_if_any()

        current = self.get(kind, request_id)
        if current.status != RequestStatus.PENDING:
            raise InputError(f"Request has already been {current.status.value}")

        decided = self._requests.decide(
            kind=kind,
            request_id=current.request_id,
            status=decision,
            reviewed_by=reviewer,
            comments=str(comments or "").strip() or None,
        )
        if not decided:
            raise InputError("Request is no longer pending")
        logger.info("%s request %s %s by %s", kind.value, current.request_id, decision.value, reviewer or "-")
        return self.get(kind, current.request_id)

    def _employee_ref(self, data: dict, v: Violations) -> Optional[int]:
        employee_id = v.integer(data, "employee_id")
        if employee_id is not None and not self._employees.get_by_id(employee_id):
            v.add("employee_id", "does not reference an existing employee")
            return None
        return employee_id
