from datetime import date
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.core.exceptions import InputError, NotFoundError, ValidationError


@pytest.fixture
def employee(repos):
    return repos["employees"].add(name="Carlo Mendoza")


def test_create_attendance(container, employee):
    record = container.attendance_service.create(
        {"employee_id": employee.employee_id, "date": "2025-01-06", "hours_worked": "8", "overtime": "1.5"}
    )

    assert record.work_date == date(2025, 1, 6)
    assert record.hours_worked == Decimal("8")
    assert record.overtime == Decimal("1.5")


def test_overtime_defaults_to_zero(container, employee):
    record = container.attendance_service.create(
        {"employee_id": employee.employee_id, "date": "2025-01-06", "hours_worked": 7.5}
    )

    assert record.overtime == Decimal("0")
    assert record.hours_worked == Decimal("7.5")


def test_create_validates_all_fields(container):
    with pytest.raises(ValidationError) as exc:
        container.attendance_service.create({"employee_id": 77, "date": "2025-02-30", "hours_worked": "25", "overtime": "-1"})

    assert sorted(v.field for v in exc.value.violations) == ["date", "employee_id", "hours_worked", "overtime"]


def test_bulk_create_is_all_or_nothing(container, repos, employee):
    rows = [
        {"employee_id": employee.employee_id, "date": "2025-01-06", "hours_worked": "8"},
        {"employee_id": employee.employee_id, "date": "bad", "hours_worked": "8"},
        {"employee_id": employee.employee_id, "date": "2025-01-08", "hours_worked": "-2"},
    ]

    with pytest.raises(ValidationError) as exc:
        container.attendance_service.bulk_create(rows)

    assert [v.field for v in exc.value.violations] == ["records[1].date", "records[2].hours_worked"]
    assert repos["attendance"].rows == {}


def test_overtime_beyond_a_day_is_rejected(container, repos, employee):
    with pytest.raises(ValidationError) as exc:
        container.attendance_service.create(
            {"employee_id": employee.employee_id, "date": "2025-01-06", "hours_worked": "8", "overtime": "1000"}
        )
    assert [v.field for v in exc.value.violations] == ["overtime"]

    attendance_id = repos["attendance"].add(employee.employee_id, date(2025, 1, 6), "8")
    with pytest.raises(ValidationError) as exc:
        container.attendance_service.update(attendance_id, {"overtime": "24.01"})
    assert [v.field for v in exc.value.violations] == ["overtime"]
    assert repos["attendance"].rows[attendance_id].overtime == Decimal("0")


def test_bulk_create_rejects_overtime_beyond_a_day(container, repos, employee):
    rows = [
        {"employee_id": employee.employee_id, "date": "2025-01-06", "hours_worked": "8", "overtime": "2"},
        {"employee_id": employee.employee_id, "date": "2025-01-07", "hours_worked": "8", "overtime": "1000"},
    ]

    with pytest.raises(ValidationError) as exc:
        container.attendance_service.bulk_create(rows)

    assert [v.field for v in exc.value.violations] == ["records[1].overtime"]
    assert repos["attendance"].rows == {}


def test_bulk_create_persists_valid_rows(container, employee):
    rows = [
        {"employee_id": employee.employee_id, "date": f"2025-01-0{day}", "hours_worked": "8"} for day in range(6, 9)
    ]

    records = container.attendance_service.bulk_create(rows)

    assert len(records) == 3


def test_bulk_create_rejects_empty_list(container):
    with pytest.raises(ValidationError):
        container.attendance_service.bulk_create([])


def test_list_requires_employee_id(container):
    with pytest.raises(InputError):
        container.attendance_service.list_for_employee(None)


def test_list_filters_by_month_newest_first(container, repos, employee):
    repos["attendance"].add(employee.employee_id, date(2025, 1, 6), "8")
    repos["attendance"].add(employee.employee_id, date(2025, 1, 20), "8")
    repos["attendance"].add(employee.employee_id, date(2025, 2, 3), "8")

    records = container.attendance_service.list_for_employee(employee.employee_id, "2025-01")

    assert [r.work_date.day for r in records] == [20, 6]


def test_monthly_totals(container, repos, employee):
    repos["attendance"].add(employee.employee_id, date(2025, 1, 6), "8", "1.25")
    repos["attendance"].add(employee.employee_id, date(2025, 1, 31), "6.5", "0")
    repos["attendance"].add(employee.employee_id, date(2025, 2, 1), "8", "3")

    totals = container.attendance_service.monthly_totals(employee.employee_id, "2025-01")

    assert totals.total_hours == Decimal("14.50")
    assert totals.overtime_hours == Decimal("1.25")


def test_partial_update_and_delete(container, repos, employee):
    attendance_id = repos["attendance"].add(employee.employee_id, date(2025, 1, 6), "8")

    updated = container.attendance_service.update(attendance_id, {"overtime": "2"})
    assert updated.overtime == Decimal("2")
    assert updated.hours_worked == Decimal("8")

    container.attendance_service.delete(attendance_id)
    with pytest.raises(NotFoundError):
        container.attendance_service.delete(attendance_id)
