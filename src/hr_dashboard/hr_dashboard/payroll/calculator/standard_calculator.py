from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import in_month
from ...common.money import ZERO
from ...core.constants import DEFAULT_WORKING_DAYS
from ...core.enums import AttendanceStatus, LeaveStatus
from ...leaves.model import LeaveRecord
from ..model import AttendanceSummary, SalaryBreakdown, SalaryStructure
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: only basic salary is prorated by attendance.

    daily_rate = basic / working_days, half days earn half a day, every absent
    day and every approved leave costs one day. Allowances and deductions are
    applied in full. Net basic and net salary never go below 0.

    Known quirks kept as-is: a "late" record counts toward working days but
    earns nothing, and an approved leave costs one day whatever its length.
    """

    def __init__(self, *, default_working_days: int = DEFAULT_WORKING_DAYS):
        self._default_working_days = int(default_working_days)

    @property
    def default_working_days(self) -> int:
        return self._default_working_days

    def summarize_attendance(self, records: Sequence[AttendanceRecord]) -> AttendanceSummary:
        statuses = [r.status for r in records]
        return AttendanceSummary(
            present_days=statuses.count(AttendanceStatus.PRESENT),
            absent_days=statuses.count(AttendanceStatus.ABSENT),
            half_days=statuses.count(AttendanceStatus.HALF_DAY),
            total_working_days=len(statuses) or self._default_working_days,
        )

    def count_leave_days(self, leaves: Sequence[LeaveRecord], month: str) -> int:
        return sum(1 for lv in leaves if lv.status == LeaveStatus.APPROVED and in_month(lv.start_date, month))

    def breakdown(self, structure: SalaryStructure, attendance: AttendanceSummary, leave_days: int) -> SalaryBreakdown:
        total_allowances = structure.total_allowances
        total_deductions = structure.total_deductions

        if not structure.basic_salary or attendance.total_working_days == 0:
            return SalaryBreakdown(
                daily_rate=ZERO,
                earned_basic=ZERO,
                salary_loss=ZERO,
                net_basic=ZERO,
                total_allowances=total_allowances,
                total_deductions=total_deductions,
                net_salary=ZERO,
            )

        daily_rate = structure.basic_salary / Decimal(attendance.total_working_days)
        half_day_rate = daily_rate / 2

        earned_basic = attendance.present_days * daily_rate + attendance.half_days * half_day_rate
        salary_loss = attendance.absent_days * daily_rate + int(leave_days) * daily_rate
        net_basic = max(ZERO, earned_basic - salary_loss)

        return SalaryBreakdown(
            daily_rate=daily_rate,
            earned_basic=earned_basic,
            salary_loss=salary_loss,
            net_basic=net_basic,
            total_allowances=total_allowances,
            total_deductions=total_deductions,
            net_salary=max(ZERO, net_basic + total_allowances - total_deductions),
        )
