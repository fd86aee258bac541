from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import AttendanceTotals
from ...benefits.model import Benefit
from ...employees.model import Employee
from ..model import PayrollComputation


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(
        self,
        employee: Employee,
        totals: AttendanceTotals,
        benefits: Sequence[Benefit],
    ) -> PayrollComputation:
        """Pure function of its inputs; must not mutate them."""

        raise NotImplementedError
