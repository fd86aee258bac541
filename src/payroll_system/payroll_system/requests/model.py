from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar, Optional, Union

from ..core.enums import CorrectionType, LeaveType, RequestKind, RequestStatus


def _review_dict(req) -> dict:
    return {
        "id": req.request_id,
        "kind": req.kind.value,
        "employee_id": req.employee_id,
        "employee_name": req.employee_name,
        "reason": req.reason,
        "status": req.status.value,
        "reviewed_by": req.reviewed_by,
        "reviewed_at": req.reviewed_at.isoformat() if req.reviewed_at else None,
        "review_comments": req.review_comments,
        "created_at": req.created_at.isoformat() if req.created_at else None,
    }


@dataclass(frozen=True)
class LeaveRequest:
    kind: ClassVar[RequestKind] = RequestKind.LEAVE

    request_id: int
    employee_id: int
    start_date: date
    end_date: date
    leave_type: LeaveType
    reason: str
    status: RequestStatus = RequestStatus.PENDING
    created_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    review_comments: Optional[str] = None
    employee_name: Optional[str] = None

    def to_dict(self) -> dict:
        out = _review_dict(self)
        out.update(
            {
                "start_date": self.start_date.isoformat(),
                "end_date": self.end_date.isoformat(),
                "leave_type": self.leave_type.value,
            }
        )
        return out


@dataclass(frozen=True)
class OvertimeRequest:
    kind: ClassVar[RequestKind] = RequestKind.OVERTIME

    request_id: int
    employee_id: int
    work_date: date
    hours: Decimal
    reason: str
    status: RequestStatus = RequestStatus.PENDING
    created_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    review_comments: Optional[str] = None
    employee_name: Optional[str] = None

    def to_dict(self) -> dict:
        out = _review_dict(self)
        out.update({"date": self.work_date.isoformat(), "hours": str(self.hours)})
        return out


@dataclass(frozen=True)
class AttendanceCorrection:
    """Request to fix a clock-in/clock-out time (``HH:MM``) or the hours of a day."""

    kind: ClassVar[RequestKind] = RequestKind.CORRECTION

    request_id: int
    employee_id: int
    work_date: date
    correction_type: CorrectionType
    reason: str
    time_in: Optional[str] = None
    time_out: Optional[str] = None
    status: RequestStatus = RequestStatus.PENDING
    created_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    review_comments: Optional[str] = None
    employee_name: Optional[str] = None

    def to_dict(self) -> dict:
        out = _review_dict(self)
        out.update(
            {
                "date": self.work_date.isoformat(),
                "correction_type": self.correction_type.value,
                "time_in": self.time_in,
                "time_out": self.time_out,
            }
        )
        return out


HrisRequest = Union[LeaveRequest, OvertimeRequest, AttendanceCorrection]
