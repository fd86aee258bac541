from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.core.enums import BenefitType, PayComponent
from src.payroll_system.payroll_system.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def employee(repos):
    return repos["employees"].add(name="Liza Ramos")


def test_create_benefit(container, employee):
    benefit = container.benefit_service.create(
        {"employee_id": employee.employee_id, "type": "13th_month", "amount": "25000", "applies_to": "2025-12", "is_taxable": True}
    )

    assert benefit.benefit_type == BenefitType.THIRTEENTH_MONTH
    assert benefit.component == PayComponent.BONUSES
    assert benefit.is_taxable is True
    assert benefit.amount == Decimal("25000")


def test_create_validates_all_fields(container):
    with pytest.raises(ValidationError) as exc:
        container.benefit_service.create(
            {"employee_id": 404, "type": "Commission", "amount": "-1", "applies_to": "2025-13", "is_taxable": "maybe"}
        )

    assert sorted(v.field for v in exc.value.violations) == ["amount", "applies_to", "employee_id", "is_taxable", "type"]


def test_list_filters_by_employee_and_period(container, repos, employee):
    other = repos["employees"].add(name="Other")
    repos["benefits"].add(employee.employee_id, BenefitType.ALLOWANCE, "1000", "2025-01")
    repos["benefits"].add(employee.employee_id, BenefitType.ALLOWANCE, "1000", "2025-02")
    repos["benefits"].add(other.employee_id, BenefitType.BONUS, "500", "2025-01")

    rows = container.benefit_service.list(employee.employee_id, "2025-01")

    assert [(b.employee_id, b.applies_to) for b in rows] == [(employee.employee_id, "2025-01")]
    assert len(container.benefit_service.list()) == 3


def test_update_and_delete(container, repos, employee):
    benefit_id = repos["benefits"].add(employee.employee_id, BenefitType.DEDUCTION, "300", "2025-01")

    updated = container.benefit_service.update(benefit_id, {"amount": "450.50"})
    assert updated.amount == Decimal("450.50")
    assert updated.benefit_type == BenefitType.DEDUCTION

    container.benefit_service.delete(benefit_id)
    with pytest.raises(NotFoundError):
        container.benefit_service.get(benefit_id)


def test_every_benefit_type_has_a_component():
    assert {t.component for t in BenefitType} == set(PayComponent)
