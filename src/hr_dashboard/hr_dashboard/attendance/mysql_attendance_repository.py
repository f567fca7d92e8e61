from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date_str, db_cursor, fetchall, fetchone, month_prefix_pattern
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _row_to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        date=as_date_str(r["work_date"]),
        status=AttendanceStatus(r["status"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, tenant: str):
        self._conn_factory = conn_factory
        self._tenant = tenant

    def read_attendance(self, employee_id: int, month_prefix: str) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, employee_id, work_date, status
                FROM attendance_records
                WHERE tenant=%s AND employee_id=%s AND work_date LIKE %s
                ORDER BY work_date ASC
                """,
                (self._tenant, int(employee_id), month_prefix_pattern(month_prefix)),
            )
            return [_row_to_record(r) for r in fetchall(cur)]

    def get_for_employee_and_date(self, employee_id: int, day: str) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, employee_id, work_date, status
                FROM attendance_records
                WHERE tenant=%s AND employee_id=%s AND work_date=%s
                """,
                (self._tenant, int(employee_id), day),
            )
            r = fetchone(cur)
            return _row_to_record(r) if r else None

    def create(self, *, employee_id: int, day: str, status: AttendanceStatus) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(tenant, employee_id, work_date, status)
                VALUES(%s,%s,%s,%s)
                """,
                (self._tenant, int(employee_id), day, status.value),
            )
            return int(cur.lastrowid)

    def update_status(self, *, attendance_id: int, status: AttendanceStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance_records SET status=%s WHERE tenant=%s AND attendance_id=%s",
                (status.value, self._tenant, int(attendance_id)),
            )
            return cur.rowcount > 0
