from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.datetime_utils import parse_pay_period
from ..common.validators import Violations, require_payload
from ..core.constants import MAX_SALARY_RATE
from ..core.enums import SalaryType
from ..core.exceptions import NotFoundError
from .model import Employee, EmployeeStats
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

EMPLOYEE_FIELDS = ("name", "email", "position", "department", "salary_rate", "salary_type", "hire_date", "is_active")


class EmployeeService:
    """Use case: maintain employee records (create, edit, deactivate)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_active(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create(self, payload: Any) -> Employee:
        data = require_payload(payload)
        fields = self._clean(data, partial=False)
        employee_id = self._employees.create(fields=fields)
        logger.info("Created employee %s (%s)", employee_id, fields["email"])
        return self.get(employee_id)

    def update(self, employee_id: int, payload: Any) -> Employee:
        data = require_payload(payload)
        current = self.get(employee_id)
        fields = self._clean(data, partial=True, current=current)
        if fields and not self._employees.update(current.employee_id, fields=fields):
            raise NotFoundError("Employee not found")
        return self.get(current.employee_id)

    def deactivate(self, employee_id: int) -> None:
        """Soft delete: history rows keep pointing at the employee."""
        employee = self.get(employee_id)
        if not self._employees.set_active(employee.employee_id, is_active=False):
            raise NotFoundError("Employee not found")
        logger.info("Deactivated employee %s", employee.employee_id)

    def list_with_stats(self, pay_period: Optional[str]) -> Sequence[EmployeeStats]:
        period = parse_pay_period(pay_period)
        return self._employees.list_with_stats(pay_period=period.token, start=period.start, end=period.end)

    def _clean(self, data: dict, *, partial: bool, current: Optional[Employee] = None) -> dict:
        """Validate the payload; on partial updates only supplied fields are checked."""
        v = Violations()
        present = [f for f in EMPLOYEE_FIELDS if f in data] if partial else list(EMPLOYEE_FIELDS)
        out: dict[str, Any] = {}

        for field in present:
            if field in ("name", "position"):
                out[field] = v.text(data, field)
            elif field == "email":
                out[field] = v.email(data, field)
            elif field == "department":
                out[field] = v.text(data, field, required=False)
            elif field == "salary_rate":
                rate = v.rate(data, field)
                if rate is not None and rate > MAX_SALARY_RATE:
                    v.add(field, f"must be at most {MAX_SALARY_RATE}")
                out[field] = rate
            elif field == "salary_type":
                if not partial and data.get(field) in (None, ""):
                    out[field] = SalaryType.MONTHLY
                else:
                    out[field] = v.choice(data, field, SalaryType)
            elif field == "hire_date":
                out[field] = v.iso_date(data, field)
            elif field == "is_active":
                out[field] = v.boolean(data, field, default=True)

        email = out.get("email")
        if email:
            existing = self._employees.get_by_email(email)
            if existing and (current is None or existing.employee_id != current.employee_id):
                v.add("email", "is already used by another employee")

        v.raise_if_any()
        return out
