from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Benefit


class BenefitRepository(Protocol):
    def list(
        self,
        *,
        employee_id: Optional[int] = None,
        pay_period: Optional[str] = None,
        limit: int = 500,
    ) -> Sequence[Benefit]:
        raise NotImplementedError

    def list_for_period(self, *, employee_id: int, pay_period: str) -> Sequence[Benefit]:
        """Every benefit of one employee that applies to the period (no limit)."""

        raise NotImplementedError

    def get_by_id(self, benefit_id: int) -> Optional[Benefit]:
        raise NotImplementedError

    def create(self, *, fields: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def update(self, benefit_id: int, *, fields: Mapping[str, Any]) -> bool:
        raise NotImplementedError

    def delete(self, benefit_id: int) -> bool:
        raise NotImplementedError
