from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's status on one calendar date (YYYY-MM-DD)."""

    attendance_id: int
    employee_id: int
    date: str
    status: AttendanceStatus


@dataclass(frozen=True)
class MonthTally:
    """Dashboard counters for a month, including late days."""

    present: int
    absent: int
    late: int
    half_day: int
    total: int
