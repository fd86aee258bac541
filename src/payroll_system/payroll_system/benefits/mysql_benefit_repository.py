from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.money import to_decimal
from ..core.enums import BenefitType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Benefit
from .repository import BenefitRepository

_COLUMNS = "benefit_id, employee_id, type, amount, is_taxable, applies_to, description, created_at, updated_at"

# Domain field name -> column name.
_WRITABLE = {
    "employee_id": "employee_id",
    "benefit_type": "type",
    "amount": "amount",
    "is_taxable": "is_taxable",
    "applies_to": "applies_to",
    "description": "description",
}


def _row_to_benefit(r: dict) -> Benefit:
    return Benefit(
        benefit_id=int(r["benefit_id"]),
        employee_id=int(r["employee_id"]),
        benefit_type=BenefitType(r["type"]),
        amount=to_decimal(r["amount"]),
        applies_to=r["applies_to"],
        is_taxable=bool(r.get("is_taxable")),
        description=r.get("description"),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


def _db_value(value: Any) -> Any:
    if isinstance(value, BenefitType):
        return value.value
    if isinstance(value, bool):
        return int(value)
    return value


class MySQLBenefitRepository(BenefitRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list(
        self,
        *,
        employee_id: Optional[int] = None,
        pay_period: Optional[str] = None,
        limit: int = 500,
    ) -> Sequence[Benefit]:
        clauses = ["1=1"]
        params: list[object] = []
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))
        if pay_period is not None:
            clauses.append("applies_to=%s")
            params.append(pay_period)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM benefits
                WHERE {' AND '.join(clauses)}
                ORDER BY created_at DESC, benefit_id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            return [_row_to_benefit(r) for r in fetchall(cur)]

    def list_for_period(self, *, employee_id: int, pay_period: str) -> Sequence[Benefit]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM benefits WHERE employee_id=%s AND applies_to=%s ORDER BY benefit_id",
                (int(employee_id), pay_period),
            )
            return [_row_to_benefit(r) for r in fetchall(cur)]

    def get_by_id(self, benefit_id: int) -> Optional[Benefit]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM benefits WHERE benefit_id=%s", (int(benefit_id),))
            r = fetchone(cur)
            return _row_to_benefit(r) if r else None

    def create(self, *, fields: Mapping[str, Any]) -> int:
        keys = [k for k in _WRITABLE if k in fields]
        cols = ", ".join(_WRITABLE[k] for k in keys)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO benefits({cols}) VALUES({', '.join(['%s'] * len(keys))})",
                tuple(_db_value(fields[k]) for k in keys),
            )
            return int(cur.lastrowid)

    def update(self, benefit_id: int, *, fields: Mapping[str, Any]) -> bool:
        keys = [k for k in _WRITABLE if k in fields]
        if not keys:
            return True
        assignments = ", ".join(f"{_WRITABLE[k]}=%s" for k in keys)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE benefits SET {assignments}, updated_at=CURRENT_TIMESTAMP WHERE benefit_id=%s",
                tuple(_db_value(fields[k]) for k in keys) + (int(benefit_id),),
            )
            return cur.rowcount > 0

    def delete(self, benefit_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM benefits WHERE benefit_id=%s", (int(benefit_id),))
            return cur.rowcount > 0
