from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.attendance.model import AttendanceRecord, AttendanceTotals
from src.payroll_system.payroll_system.benefits.model import Benefit
from src.payroll_system.payroll_system.common.money import hours
from src.payroll_system.payroll_system.container import wire
from src.payroll_system.payroll_system.core.enums import RequestKind, RequestStatus, SalaryType
from src.payroll_system.payroll_system.employees.model import Employee, EmployeeStats
from src.payroll_system.payroll_system.payroll.model import PayrollRecord
from src.payroll_system.payroll_system.requests.model import AttendanceCorrection, LeaveRequest, OvertimeRequest


class FakeEmployeesRepo:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[int, Employee] = {}
        self.attendance = None
        self.payroll = None

    def add(self, **kwargs) -> Employee:
        fields = {
            "name": "Juan Dela Cruz",
            "email": f"employee{self._next_id}@example.ph",
            "position": "Clerk",
            "salary_rate": Decimal("500.00"),
            "salary_type": SalaryType.HOURLY,
            "hire_date": date(2024, 1, 15),
        }
        fields.update(kwargs)
        return self.rows[self.create(fields=fields)]

    def list_active(self):
        return sorted((e for e in self.rows.values() if e.is_active), key=lambda e: e.name)

    def get_by_id(self, employee_id):
        return self.rows.get(int(employee_id))

    def get_by_email(self, email):
        return next((e for e in self.rows.values() if e.email == email), None)

    def create(self, *, fields):
        eid = self._next_id
        self._next_id += 1
        data = dict(fields)
        data.setdefault("salary_type", SalaryType.MONTHLY)
        data.setdefault("is_active", True)
        self.rows[eid] = Employee(employee_id=eid, **data)
        return eid

    def update(self, employee_id, *, fields):
        current = self.rows.get(int(employee_id))
        if not current:
            return False
        self.rows[current.employee_id] = replace(current, **fields)
        return True

    def set_active(self, employee_id, *, is_active):
        return self.update(employee_id, fields={"is_active": is_active})

    def list_with_stats(self, *, pay_period, start, end):
        out = []
        for e in self.list_active():
            totals = self.attendance.get_totals(employee_id=e.employee_id, start=start, end=end)
            record = next(
                (r for r in self.payroll.rows.values() if r.employee_id == e.employee_id and r.pay_period == pay_period),
                None,
            )
            out.append(
                EmployeeStats(
                    employee=e,
                    total_hours=totals.total_hours,
                    gross_pay=record.computation.gross_pay if record else Decimal("0"),
                    net_pay=record.computation.net_pay if record else Decimal("0"),
                    last_payroll=record.pay_period if record else None,
                )
            )
        return out


class FakeAttendanceRepo:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[int, AttendanceRecord] = {}
        self.fail_bulk = False

    def add(self, employee_id, work_date, hours_worked, overtime="0"):
        return self.create(
            employee_id=employee_id,
            work_date=work_date,
            hours_worked=Decimal(str(hours_worked)),
            overtime=Decimal(str(overtime)),
        )

    def get_totals(self, *, employee_id, start, end):
        rows = [r for r in self.rows.values() if r.employee_id == int(employee_id) and start <= r.work_date <= end]
        return AttendanceTotals(
            total_hours=hours(sum((r.hours_worked for r in rows), Decimal("0"))),
            overtime_hours=hours(sum((r.overtime for r in rows), Decimal("0"))),
        )

    def get_by_id(self, attendance_id):
        return self.rows.get(int(attendance_id))

    def list_for_employee(self, *, employee_id, start=None, end=None, limit=500):
        rows = [
            r
            for r in self.rows.values()
            if r.employee_id == int(employee_id)
            and (start is None or r.work_date >= start)
            and (end is None or r.work_date <= end)
        ]
        return sorted(rows, key=lambda r: (r.work_date, r.attendance_id), reverse=True)[:limit]

    def create(self, *, employee_id, work_date, hours_worked, overtime):
        aid = self._next_id
        self._next_id += 1
        self.rows[aid] = AttendanceRecord(
            attendance_id=aid,
            employee_id=int(employee_id),
            work_date=work_date,
            hours_worked=hours_worked,
            overtime=overtime,
        )
        return aid

    def bulk_create(self, *, rows):
        return [self.create(**row) for row in rows]

    def update(self, attendance_id, *, fields):
        current = self.rows.get(int(attendance_id))
        if not current:
            return False
        self.rows[current.attendance_id] = replace(current, **fields)
        return True

    def delete(self, attendance_id):
        return self.rows.pop(int(attendance_id), None) is not None


class FakeBenefitsRepo:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[int, Benefit] = {}

    def add(self, employee_id, benefit_type, amount, applies_to):
        return self.create(
            fields={
                "employee_id": employee_id,
                "benefit_type": benefit_type,
                "amount": Decimal(str(amount)),
                "applies_to": applies_to,
            }
        )

    def list(self, *, employee_id=None, pay_period=None, limit=500):
        rows = [
            b
            for b in self.rows.values()
            if (employee_id is None or b.employee_id == employee_id)
            and (pay_period is None or b.applies_to == pay_period)
        ]
        return sorted(rows, key=lambda b: b.benefit_id, reverse=True)[:limit]

    def list_for_period(self, *, employee_id, pay_period):
        return [b for b in self.rows.values() if b.employee_id == employee_id and b.applies_to == pay_period]

    def get_by_id(self, benefit_id):
        return self.rows.get(int(benefit_id))

    def create(self, *, fields):
        bid = self._next_id
        self._next_id += 1
        self.rows[bid] = Benefit(benefit_id=bid, **fields)
        return bid

    def update(self, benefit_id, *, fields):
        current = self.rows.get(int(benefit_id))
        if not current:
            return False
        self.rows[current.benefit_id] = replace(current, **fields)
        return True

    def delete(self, benefit_id):
        return self.rows.pop(int(benefit_id), None) is not None


class FakePayrollRepo:
    def __init__(self, employees: FakeEmployeesRepo):
        self._next_id = 1
        self._employees = employees
        self.rows: dict[int, PayrollRecord] = {}

    def upsert(self, *, employee_id, pay_period, computation, generated_at):
        existing = next(
            (r for r in self.rows.values() if r.employee_id == employee_id and r.pay_period == pay_period),
            None,
        )
        pid = existing.payroll_id if existing else self._next_id
        if not existing:
            self._next_id += 1
        self.rows[pid] = PayrollRecord(
            payroll_id=pid,
            employee_id=employee_id,
            pay_period=pay_period,
            computation=computation,
            generated_at=generated_at,
        )
        return pid

    def _joined(self, record):
        e = self._employees.get_by_id(record.employee_id)
        return replace(record, employee_name=e.name, position=e.position)

    def list_for_period(self, *, pay_period):
        rows = [self._joined(r) for r in self.rows.values() if r.pay_period == pay_period]
        return sorted(rows, key=lambda r: (r.employee_name, r.employee_id))

    def get_by_id(self, payroll_id):
        r = self.rows.get(int(payroll_id))
        return self._joined(r) if r else None


class FakeRequestsRepo:
    def __init__(self):
        self._next_id = 1
        self.rows: dict[tuple[RequestKind, int], object] = {}

    def _store(self, kind, factory, **fields):
        rid = self._next_id
        self._next_id += 1
        self.rows[(kind, rid)] = factory(request_id=rid, created_at=datetime(2025, 1, 10, 9, 0), **fields)
        return rid

    def create_leave(self, *, employee_id, start_date, end_date, leave_type, reason):
        return self._store(
            RequestKind.LEAVE,
            LeaveRequest,
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            leave_type=leave_type,
            reason=reason,
        )

    def create_overtime(self, *, employee_id, work_date, hours, reason):
        return self._store(
            RequestKind.OVERTIME, OvertimeRequest, employee_id=employee_id, work_date=work_date, hours=hours, reason=reason
        )

    def create_correction(self, *, employee_id, work_date, time_in, time_out, correction_type, reason):
        return self._store(
            RequestKind.CORRECTION,
            AttendanceCorrection,
            employee_id=employee_id,
            work_date=work_date,
            time_in=time_in,
            time_out=time_out,
            correction_type=correction_type,
            reason=reason,
        )

    def get(self, *, kind, request_id):
        return self.rows.get((kind, int(request_id)))

    def list(self, *, kind, employee_id=None, status=None, limit=200):
        rows = [
            r
            for (k, _), r in self.rows.items()
            if k == kind
            and (employee_id is None or r.employee_id == employee_id)
            and (status is None or r.status == status)
        ]
        return sorted(rows, key=lambda r: r.request_id, reverse=True)[:limit]

    def decide(self, *, kind, request_id, status, reviewed_by, comments=None):
        req = self.rows.get((kind, int(request_id)))
        if not req or req.status != RequestStatus.PENDING:
            return False
        self.rows[(kind, int(request_id))] = replace(
            req,
            status=status,
            reviewed_by=reviewed_by,
            reviewed_at=datetime(2025, 1, 11, 9, 0),
            review_comments=comments,
        )
        return True


@pytest.fixture
def repos():
    employees = FakeEmployeesRepo()
    attendance = FakeAttendanceRepo()
    payroll = FakePayrollRepo(employees)
    employees.attendance = attendance
    employees.payroll = payroll
    return {
        "employees": employees,
        "attendance": attendance,
        "benefits": FakeBenefitsRepo(),
        "payroll": payroll,
        "requests": FakeRequestsRepo(),
    }


@pytest.fixture
def container(repos):
    return wire(
        employees_repo=repos["employees"],
        attendance_repo=repos["attendance"],
        benefits_repo=repos["benefits"],
        payroll_repo=repos["payroll"],
        requests_repo=repos["requests"],
    )


@pytest.fixture
def client(container, monkeypatch):
    from src.payroll_system.payroll_system.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()
