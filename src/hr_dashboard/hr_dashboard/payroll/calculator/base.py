from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...leaves.model import LeaveRecord
from ..model import AttendanceSummary, SalaryBreakdown, SalaryStructure


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def summarize_attendance(self, records: Sequence[AttendanceRecord]) -> AttendanceSummary:
        raise NotImplementedError

    @abstractmethod
    def count_leave_days(self, leaves: Sequence[LeaveRecord], month: str) -> int:
        raise NotImplementedError

    @abstractmethod
    def breakdown(self, structure: SalaryStructure, attendance: AttendanceSummary, leave_days: int) -> SalaryBreakdown:
        raise NotImplementedError
