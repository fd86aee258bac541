from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import BenefitType, PayComponent


@dataclass(frozen=True)
class Benefit:
    """Domain entity: a one-off earning or deduction applied to one pay period."""

    benefit_id: int
    employee_id: int
    benefit_type: BenefitType
    amount: Decimal
    applies_to: str
    is_taxable: bool = False
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def component(self) -> PayComponent:
        return self.benefit_type.component

    def to_dict(self) -> dict:
        return {
            "id": self.benefit_id,
            "employee_id": self.employee_id,
            "type": self.benefit_type.value,
            "amount": str(self.amount),
            "is_taxable": self.is_taxable,
            "applies_to": self.applies_to,
            "description": self.description,
        }
