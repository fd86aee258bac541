from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.payroll.calculator.income_tax import compute_income_tax, taxable_income


@pytest.mark.parametrize(
    "taxable,expected",
    [
        ("0", "0.00"),
        ("20833", "0.00"),
        ("25000", "625.05"),
        ("33333", "1875.00"),
        ("50000", "5208.40"),
        ("100000", "16874.92"),
        ("200000", "43541.57"),
        ("1000000", "300208.22"),
    ],
)
def test_progressive_brackets(taxable, expected):
    assert compute_income_tax(Decimal(taxable)) == Decimal(expected)


def test_negative_taxable_income_is_untaxed():
    assert compute_income_tax(Decimal("-10")) == Decimal("0.00")


def test_taxable_income_subtracts_contributions():
    assert taxable_income(Decimal("50000"), Decimal("2250"), Decimal("2250"), Decimal("100")) == Decimal("45400.00")
    assert taxable_income(Decimal("10"), Decimal("20"), Decimal("0"), Decimal("0")) == Decimal("0.00")
