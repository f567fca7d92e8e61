from __future__ import annotations

import logging

from ..common.datetime_utils import parse_iso_date, parse_month_token
from ..common.validators import require_positive_id
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .model import MonthTally
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def mark(self, *, employee_id: int, day: str, status: str) -> int:
        """Record a status for an employee/date; re-marking the same date replaces it."""

        try:
            parse_iso_date(day)
        except (TypeError, ValueError):
            raise ValidationError("Invalid date (YYYY-MM-DD)")
        try:
            new_status = AttendanceStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown attendance status {status!r}")

        employee_id = require_positive_id(employee_id, "Employee")
        if not self._employees.get_by_id(employee_id):
            raise ValidationError("Employee does not exist")

        existing = self._attendance.get_for_employee_and_date(employee_id, day)
        if existing:
            self._attendance.update_status(attendance_id=existing.attendance_id, status=new_status)
            logger.info("Attendance %s for employee %s re-marked %s", day, employee_id, new_status.value)
            return existing.attendance_id

        return self._attendance.create(employee_id=employee_id, day=day, status=new_status)

    def month_tally(self, *, employee_id: int, month: str) -> MonthTally:
        month = parse_month_token(month)
        records = self._attendance.read_attendance(int(employee_id), month)
        statuses = [r.status for r in records]
        return MonthTally(
            present=statuses.count(AttendanceStatus.PRESENT),
            absent=statuses.count(AttendanceStatus.ABSENT),
            late=statuses.count(AttendanceStatus.LATE),
            half_day=statuses.count(AttendanceStatus.HALF_DAY),
            total=len(statuses),
        )
