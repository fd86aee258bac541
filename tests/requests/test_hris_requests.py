from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.core.enums import LeaveType, RequestKind, RequestStatus
from src.payroll_system.payroll_system.core.exceptions import InputError, NotFoundError, ValidationError


@pytest.fixture
def employee(repos):
    return repos["employees"].add(name="Andrea Bautista")


def test_leave_request_lifecycle(container, employee):
    service = container.request_service
    req = service.create_leave(
        {
            "employee_id": employee.employee_id,
            "start_date": "2025-02-10",
            "end_date": "2025-02-12",
            "leave_type": "vacation",
            "reason": "Family trip",
        }
    )
    assert req.status == RequestStatus.PENDING
    assert req.leave_type == LeaveType.VACATION

    reviewed = service.review(RequestKind.LEAVE, req.request_id, status="approved", reviewer="hr-1", comments=" ok ")

    assert reviewed.status == RequestStatus.APPROVED
    assert reviewed.reviewed_by == "hr-1"
    assert reviewed.review_comments == "ok"


def test_leave_end_before_start(container, employee):
    with pytest.raises(ValidationError) as exc:
        container.request_service.create_leave(
            {
                "employee_id": employee.employee_id,
                "start_date": "2025-02-12",
                "end_date": "2025-02-10",
                "leave_type": "sick",
                "reason": "Flu",
            }
        )
    assert [v.field for v in exc.value.violations] == ["end_date"]


def test_overtime_hours_must_be_positive(container, employee):
    with pytest.raises(ValidationError) as exc:
        container.request_service.create_overtime(
            {"employee_id": employee.employee_id, "date": "2025-02-10", "hours": "0", "reason": "Inventory"}
        )
    assert [v.field for v in exc.value.violations] == ["hours"]

    req = container.request_service.create_overtime(
        {"employee_id": employee.employee_id, "date": "2025-02-10", "hours": "2.5", "reason": "Inventory"}
    )
    assert req.hours == Decimal("2.5")


def test_correction_requires_time_for_its_type(container, employee):
    with pytest.raises(ValidationError) as exc:
        container.request_service.create_correction(
            {"employee_id": employee.employee_id, "date": "2025-02-10", "correction_type": "time_out", "reason": "Forgot"}
        )
    assert [v.field for v in exc.value.violations] == ["time_out"]

    req = container.request_service.create_correction(
        {
            "employee_id": employee.employee_id,
            "date": "2025-02-10",
            "correction_type": "hours",
            "time_in": "08:00",
            "time_out": "17:30:00",
            "reason": "Badge reader offline",
        }
    )
    assert (req.time_in, req.time_out) == ("08:00", "17:30")


def test_only_pending_requests_can_be_reviewed(container, employee):
    service = container.request_service
    req = service.create_overtime(
        {"employee_id": employee.employee_id, "date": "2025-02-10", "hours": "1", "reason": "Close books"}
    )
    service.review(RequestKind.OVERTIME, req.request_id, status="denied", reviewer="hr-1")

    with pytest.raises(InputError):
        service.review(RequestKind.OVERTIME, req.request_id, status="approved", reviewer="hr-2")


def test_review_rejects_pending_as_outcome(container, employee):
    with pytest.raises(ValidationError):
        container.request_service.review(RequestKind.LEAVE, 1, status="pending")


def test_review_unknown_request(container):
    with pytest.raises(NotFoundError):
        container.request_service.review(RequestKind.CORRECTION, 99, status="approved")


def test_list_filters_by_status(container, employee):
    service = container.request_service
    for reason in ("a", "b"):
        service.create_overtime({"employee_id": employee.employee_id, "date": "2025-02-10", "hours": "1", "reason": reason})
    service.review(RequestKind.OVERTIME, 1, status="approved")

    pending = service.list(RequestKind.OVERTIME, status="pending")

    assert [r.reason for r in pending] == ["b"]
    with pytest.raises(ValidationError):
        service.list(RequestKind.OVERTIME, status="lost")
