from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date_str, db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "employee_id, name, employee_code, department, position, join_date, email, status"


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        id=int(r["employee_id"]),
        name=r["name"],
        employee_code=r.get("employee_code") or "",
        department=r.get("department") or "",
        position=r.get("position") or "",
        join_date=as_date_str(r.get("join_date")) or None,
        email=r.get("email"),
        status=r.get("status") or "active",
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, tenant: str):
        self._conn_factory = conn_factory
        self._tenant = tenant

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE tenant=%s AND employee_id=%s",
                (self._tenant, int(employee_id)),
            )
            r = fetchone(cur)
            return _row_to_employee(r) if r else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE tenant=%s
                ORDER BY join_date DESC, employee_id ASC
                """,
                (self._tenant,),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        name: str,
        employee_code: str,
        department: str,
        position: str,
        join_date: Optional[str] = None,
        email: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(tenant, name, employee_code, department, position, join_date, email)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (self._tenant, name, employee_code, department, position, join_date, email),
            )
            return int(cur.lastrowid)

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM employees WHERE tenant=%s AND employee_id=%s",
                (self._tenant, int(employee_id)),
            )
            return cur.rowcount > 0
