from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional, Sequence

from ..common.datetime_utils import parse_pay_period
from ..common.validators import Violations, require_payload
from ..core.constants import DEFAULT_LIST_LIMIT, MAX_SALARY_RATE
from ..core.enums import BenefitType
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from .model import Benefit
from .repository import BenefitRepository

# Payload key -> domain field.
_PAYLOAD_FIELDS = {
    "employee_id": "employee_id",
    "type": "benefit_type",
    "amount": "amount",
    "is_taxable": "is_taxable",
    "applies_to": "applies_to",
    "description": "description",
}


class BenefitService:
    def __init__(self, benefits: BenefitRepository, employees: EmployeeRepository):
        self._benefits = benefits
        self._employees = employees

    def list(self, employee_id: Optional[int] = None, pay_period: Optional[str] = None) -> Sequence[Benefit]:
        if pay_period:
            pay_period = parse_pay_period(pay_period).token
        return self._benefits.list(employee_id=employee_id, pay_period=pay_period or None, limit=DEFAULT_LIST_LIMIT)

    def get(self, benefit_id: int) -> Benefit:
        benefit = self._benefits.get_by_id(int(benefit_id))
        if not benefit:
            raise NotFoundError("Benefit not found")
        return benefit

    def create(self, payload: Any) -> Benefit:
        fields = self._clean(require_payload(payload), partial=False)
        return self.get(self._benefits.create(fields=fields))

    def update(self, benefit_id: int, payload: Any) -> Benefit:
        data = require_payload(payload)
        current = self.get(benefit_id)
        fields = self._clean(data, partial=True)
        if fields and not self._benefits.update(current.benefit_id, fields=fields):
            raise NotFoundError("Benefit not found")
        return self.get(current.benefit_id)

    def delete(self, benefit_id: int) -> None:
        if not self._benefits.delete(int(benefit_id)):
            raise NotFoundError("Benefit not found")

    def _clean(self, data: dict, *, partial: bool) -> dict:
        v = Violations()
        keys = [k for k in _PAYLOAD_FIELDS if k in data] if partial else list(_PAYLOAD_FIELDS)
        out: dict[str, Any] = {}

        for key in keys:
            if key == "employee_id":
                employee_id = v.integer(data, key)
                if employee_id is not None and not self._employees.get_by_id(employee_id):
                    v.add(key, "does not reference an existing employee")
                out["employee_id"] = employee_id
            elif key == "type":
                out["benefit_type"] = v.choice(data, key, BenefitType)
            elif key == "amount":
                out["amount"] = v.decimal(data, key, minimum=Decimal("0"), maximum=MAX_SALARY_RATE)
            elif key == "is_taxable":
                out["is_taxable"] = v.boolean(data, key, default=False)
            elif key == "applies_to":
                out["applies_to"] = v.pay_period(data, key)
            elif key == "description":
                out["description"] = v.text(data, key, required=False, max_len=1000)

        v.raise_if_any()
        return out
