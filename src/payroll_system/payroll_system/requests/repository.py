from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import CorrectionType, LeaveType, RequestKind, RequestStatus
from .model import HrisRequest


class RequestRepository(Protocol):
    def create_leave(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        leave_type: LeaveType,
        reason: str,
    ) -> int:
        raise NotImplementedError

    def create_overtime(self, *, employee_id: int, work_date: date, hours: Decimal, reason: str) -> int:
        raise NotImplementedError

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
        raise NotImplementedError

    def get(self, *, kind: RequestKind, request_id: int) -> Optional[HrisRequest]:
        raise NotImplementedError

    def list(
        self,
        *,
        kind: RequestKind,
        employee_id: Optional[int] = None,
        status: Optional[RequestStatus] = None,
        limit: int = 200,
    ) -> Sequence[HrisRequest]:
        """Newest first, joined with the employee name."""

        raise NotImplementedError

    def decide(
        self,
        *,
        kind: RequestKind,
        request_id: int,
        status: RequestStatus,
        reviewed_by: Optional[str],
        comments: Optional[str] = None,
    ) -> bool:
        """Set the review outcome; only touches requests still pending."""

        raise NotImplementedError
