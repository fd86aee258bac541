from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import PayrollComputation, PayrollRecord


class PayrollRepository(Protocol):
    def upsert(
        self,
        *,
        employee_id: int,
        pay_period: str,
        computation: PayrollComputation,
        generated_at: datetime,
    ) -> int:
        """Insert or replace the record for (employee_id, pay_period); returns its id."""

        raise NotImplementedError

    def list_for_period(self, *, pay_period: str) -> Sequence[PayrollRecord]:
        """Records joined with employee name/position, ordered by employee name."""

        raise NotImplementedError

    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        raise NotImplementedError
