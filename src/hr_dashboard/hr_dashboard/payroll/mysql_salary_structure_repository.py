from __future__ import annotations

from decimal import Decimal
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import now_iso
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AMOUNT_FIELDS, SalaryStructure
from .repository import SalaryStructureRepository

_COLUMNS = ", ".join(("structure_id", "employee_id") + AMOUNT_FIELDS + ("created_at", "updated_at"))


def _row_to_structure(r: dict) -> SalaryStructure:
    return SalaryStructure(
        structure_id=int(r["structure_id"]),
        employee_id=int(r["employee_id"]),
        created_at=str(r["created_at"]) if r.get("created_at") else None,
        updated_at=str(r["updated_at"]) if r.get("updated_at") else None,
        **{name: r.get(name) for name in AMOUNT_FIELDS},
    )


class MySQLSalaryStructureRepository(SalaryStructureRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, tenant: str):
        self._conn_factory = conn_factory
        self._tenant = tenant

    def list_all(self) -> Sequence[SalaryStructure]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM salary_structures WHERE tenant=%s ORDER BY structure_id ASC",
                (self._tenant,),
            )
            return [_row_to_structure(r) for r in fetchall(cur)]

    def get_by_id(self, structure_id: int) -> Optional[SalaryStructure]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM salary_structures WHERE tenant=%s AND structure_id=%s",
                (self._tenant, int(structure_id)),
            )
            r = fetchone(cur)
            return _row_to_structure(r) if r else None

    def read_salary_structure(self, employee_id: int) -> Optional[SalaryStructure]:
        # Duplicates are possible; the oldest structure wins.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM salary_structures
                WHERE tenant=%s AND employee_id=%s
                ORDER BY structure_id ASC
                LIMIT 1
                """,
                (self._tenant, int(employee_id)),
            )
            r = fetchone(cur)
            return _row_to_structure(r) if r else None

    def create(self, *, employee_id: int, amounts: Mapping[str, Decimal]) -> int:
        stamp = now_iso()
        columns = ("tenant", "employee_id") + AMOUNT_FIELDS + ("created_at", "updated_at")
        values = (self._tenant, int(employee_id)) + tuple(amounts.get(n, Decimal("0")) for n in AMOUNT_FIELDS) + (stamp, stamp)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO salary_structures({', '.join(columns)}) VALUES({', '.join(['%s'] * len(columns))})",
                values,
            )
            return int(cur.lastrowid)

    def update(self, *, structure_id: int, amounts: Mapping[str, Decimal]) -> bool:
        names = [n for n in AMOUNT_FIELDS if n in amounts]
        assignments = ", ".join(f"{n}=%s" for n in names + ["updated_at"])
        params = tuple(amounts[n] for n in names) + (now_iso(), self._tenant, int(structure_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE salary_structures SET {assignments} WHERE tenant=%s AND structure_id=%s",
                params,
            )
            return cur.rowcount > 0

    def delete_by_id(self, structure_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM salary_structures WHERE tenant=%s AND structure_id=%s",
                (self._tenant, int(structure_id)),
            )
            return cur.rowcount > 0
