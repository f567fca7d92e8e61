from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import LeaveStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date_str, db_cursor, fetchall, fetchone, month_prefix_pattern
from .model import LeaveRecord
from .repository import LeaveRepository

_COLUMNS = "leave_id, employee_id, start_date, end_date, status, leave_type, reason"


def _row_to_leave(r: dict) -> LeaveRecord:
    return LeaveRecord(
        leave_id=int(r["leave_id"]),
        employee_id=int(r["employee_id"]),
        start_date=as_date_str(r["start_date"]),
        end_date=as_date_str(r["end_date"]),
        status=LeaveStatus(r["status"]),
        leave_type=r.get("leave_type"),
        reason=r.get("reason"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, tenant: str):
        self._conn_factory = conn_factory
        self._tenant = tenant

    def read_approved_leaves(self, employee_id: int, month_prefix: str) -> Sequence[LeaveRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM leave_records
                WHERE tenant=%s AND employee_id=%s AND status=%s AND start_date LIKE %s
                ORDER BY start_date ASC
                """,
                (self._tenant, int(employee_id), LeaveStatus.APPROVED.value, month_prefix_pattern(month_prefix)),
            )
            return [_row_to_leave(r) for r in fetchall(cur)]

    def get_by_id(self, leave_id: int) -> Optional[LeaveRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM leave_records WHERE tenant=%s AND leave_id=%s",
                (self._tenant, int(leave_id)),
            )
            r = fetchone(cur)
            return _row_to_leave(r) if r else None

    def create(
        self,
        *,
        employee_id: int,
        start_date: str,
        end_date: str,
        leave_type: Optional[str],
        reason: str,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_records(tenant, employee_id, start_date, end_date, status, leave_type, reason)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (self._tenant, int(employee_id), start_date, end_date, LeaveStatus.PENDING.value, leave_type, reason),
            )
            return int(cur.lastrowid)

    def decide(self, *, leave_id: int, status: LeaveStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_records
                SET status=%s
                WHERE tenant=%s AND leave_id=%s AND status=%s
                """,
                (status.value, self._tenant, int(leave_id), LeaveStatus.PENDING.value),
            )
            return cur.rowcount > 0

    def list_by_status(self, *, status: Optional[LeaveStatus] = None, limit: int = DEFAULT_LIST_LIMIT) -> Sequence[LeaveRecord]:
        clauses = ["tenant=%s"]
        params: list[object] = [self._tenant]
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM leave_records
                WHERE {" AND ".join(clauses)}
                ORDER BY start_date DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [_row_to_leave(r) for r in fetchall(cur)]
