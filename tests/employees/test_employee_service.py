from datetime import date
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.core.enums import SalaryType
from src.payroll_system.payroll_system.core.exceptions import InputError, NotFoundError, ValidationError


def _payload(**overrides):
    data = {
        "name": "Maria Santos",
        "email": "maria.santos@example.ph",
        "position": "Accountant",
        "department": "Finance",
        "salary_rate": "35000.00",
        "salary_type": "monthly",
        "hire_date": "2023-04-03",
    }
    data.update(overrides)
    return data


def test_create_employee(container):
    employee = container.employee_service.create(_payload())

    assert employee.employee_id > 0
    assert employee.salary_rate == Decimal("35000.00")
    assert employee.salary_type == SalaryType.MONTHLY
    assert employee.is_active is True


def test_create_reports_every_violation(container):
    with pytest.raises(ValidationError) as exc:
        container.employee_service.create(
            _payload(name="", email="not-an-email", salary_rate="12.345", salary_type="weekly", hire_date="03/04/2023")
        )

    fields = sorted(v.field for v in exc.value.violations)
    assert fields == ["email", "hire_date", "name", "salary_rate", "salary_type"]


def test_negative_rate_is_rejected(container):
    with pytest.raises(ValidationError) as exc:
        container.employee_service.create(_payload(salary_rate="-1"))
    assert [v.field for v in exc.value.violations] == ["salary_rate"]


def test_duplicate_email_is_rejected(container):
    container.employee_service.create(_payload())

    with pytest.raises(ValidationError) as exc:
        container.employee_service.create(_payload(name="Other"))
    assert [v.field for v in exc.value.violations] == ["email"]


def test_partial_update_only_touches_supplied_fields(container):
    employee = container.employee_service.create(_payload())

    updated = container.employee_service.update(employee.employee_id, {"position": "Senior Accountant"})

    assert updated.position == "Senior Accountant"
    assert updated.email == employee.email
    assert updated.salary_rate == employee.salary_rate


def test_update_may_keep_own_email(container):
    employee = container.employee_service.create(_payload())

    updated = container.employee_service.update(employee.employee_id, {"email": employee.email, "salary_rate": "36000"})

    assert updated.salary_rate == Decimal("36000")


def test_update_unknown_employee(container):
    with pytest.raises(NotFoundError):
        container.employee_service.update(999, {"name": "Nobody"})


def test_deactivate_hides_employee_from_active_list(container):
    keep = container.employee_service.create(_payload(name="Bea", email="bea@example.ph"))
    gone = container.employee_service.create(_payload(name="Abe", email="abe@example.ph"))

    container.employee_service.deactivate(gone.employee_id)

    assert [e.employee_id for e in container.employee_service.list_active()] == [keep.employee_id]
    assert container.employee_service.get(gone.employee_id).is_active is False


def test_list_active_is_ordered_by_name(container):
    for name in ("Carla", "Ana", "Bong"):
        container.employee_service.create(_payload(name=name, email=f"{name.lower()}@example.ph"))

    assert [e.name for e in container.employee_service.list_active()] == ["Ana", "Bong", "Carla"]


def test_stats_require_valid_period(container):
    with pytest.raises(InputError):
        container.employee_service.list_with_stats("2025-1")


def test_stats_include_period_hours_and_payroll(container, repos):
    employee = container.employee_service.create(_payload(salary_type="hourly", salary_rate="100"))
    idle = container.employee_service.create(_payload(name="Idle", email="idle@example.ph"))
    repos["attendance"].add(employee.employee_id, date(2025, 1, 3), "8")
    container.payroll_generator.generate("2025-01")

    stats = {s.employee.employee_id: s for s in container.employee_service.list_with_stats("2025-01")}

    assert stats[employee.employee_id].total_hours == Decimal("8.00")
    assert stats[employee.employee_id].gross_pay == Decimal("800.00")
    assert stats[employee.employee_id].last_payroll == "2025-01"
    assert stats[idle.employee_id].total_hours == Decimal("0.00")
    assert container.employee_service.list_with_stats("2025-02")[0].gross_pay == Decimal("0")
