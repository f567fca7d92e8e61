from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def read_attendance(self, employee_id: int, month_prefix: str) -> Sequence[AttendanceRecord]:
        """Records of one employee whose date starts with the YYYY-MM prefix."""

        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, day: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(self, *, employee_id: int, day: str, status: AttendanceStatus) -> int:
        raise NotImplementedError

    def update_status(self, *, attendance_id: int, status: AttendanceStatus) -> bool:
        raise NotImplementedError
