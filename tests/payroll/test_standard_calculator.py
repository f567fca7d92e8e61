from decimal import Decimal

import pytest

from hr_dashboard.attendance.model import AttendanceRecord
from hr_dashboard.core.enums import AttendanceStatus, LeaveStatus
from hr_dashboard.leaves.model import LeaveRecord
from hr_dashboard.payroll.calculator.standard_calculator import StandardPayrollCalculator
from hr_dashboard.payroll.model import AttendanceSummary, SalaryStructure


def _structure(**amounts):
    base = dict(
        basic_salary=26000,
        hra=3000,
        da=2000,
        provident_fund=1000,
        professional_tax=500,
    )
    base.update(amounts)
    return SalaryStructure(structure_id=1, employee_id=1, **base)


def _records(*statuses):
    return [
        AttendanceRecord(attendance_id=i, employee_id=1, date=f"2025-01-{i:02d}", status=AttendanceStatus(s))
        for i, s in enumerate(statuses, start=1)
    ]


def test_partial_attendance_prorates_basic_only():
    calc = StandardPayrollCalculator()
    summary = AttendanceSummary(present_days=24, absent_days=2, half_days=0, total_working_days=26)

    b = calc.breakdown(_structure(), summary, leave_days=0)

    assert b.daily_rate == Decimal("1000")
    assert b.earned_basic == 24000
    assert b.salary_loss == 2000
    assert b.net_basic == 22000
    assert b.total_allowances == 5000
    assert b.total_deductions == 1500
    assert b.net_salary == 25500


def test_full_attendance_earns_full_basic():
    calc = StandardPayrollCalculator()
    summary = AttendanceSummary(present_days=26, absent_days=0, half_days=0, total_working_days=26)

    assert calc.breakdown(_structure(), summary, leave_days=0).net_salary == 29500


def test_full_month_over_assumed_working_days():
    calc = StandardPayrollCalculator()
    summary = AttendanceSummary(present_days=22, absent_days=0, half_days=0, total_working_days=22)

    b = calc.breakdown(_structure(), summary, leave_days=0)

    assert float(b.daily_rate) == pytest.approx(1181.82, abs=0.01)
    assert float(b.net_basic) == pytest.approx(26000)
    assert float(b.net_salary) == pytest.approx(29500)


def test_half_days_earn_half_and_leaves_cost_a_full_day():
    calc = StandardPayrollCalculator()
    summary = AttendanceSummary(present_days=20, absent_days=0, half_days=2, total_working_days=26)

    b = calc.breakdown(_structure(), summary, leave_days=3)

    assert b.earned_basic == 21000
    assert b.salary_loss == 3000
    assert b.net_basic == 18000


def test_net_basic_and_net_salary_never_negative():
    calc = StandardPayrollCalculator()
    summary = AttendanceSummary(present_days=1, absent_days=20, half_days=0, total_working_days=21)

    b = calc.breakdown(_structure(hra=0, da=0, income_tax=9000), summary, leave_days=5)

    assert b.net_basic == 0
    assert b.net_salary == 0


def test_zero_basic_salary_yields_zero_even_with_allowances():
    calc = StandardPayrollCalculator()
    summary = AttendanceSummary(present_days=26, absent_days=0, half_days=0, total_working_days=26)

    b = calc.breakdown(_structure(basic_salary=0), summary, leave_days=0)

    assert b.net_salary == 0
    assert b.total_allowances == 5000


def test_allowances_and_deductions_do_not_depend_on_attendance():
    calc = StandardPayrollCalculator()
    good = calc.breakdown(_structure(), AttendanceSummary(26, 0, 0, 26), leave_days=0)
    poor = calc.breakdown(_structure(), AttendanceSummary(10, 16, 0, 26), leave_days=2)

    assert good.total_allowances == poor.total_allowances
    assert good.total_deductions == poor.total_deductions
    assert good.net_basic > poor.net_basic


def test_summary_counts_late_only_toward_working_days():
    calc = StandardPayrollCalculator()

    s = calc.summarize_attendance(_records("present", "late", "absent", "half-day", "late"))

    assert (s.present_days, s.absent_days, s.half_days) == (1, 1, 1)
    assert s.total_working_days == 5


def test_summary_falls_back_to_default_working_days():
    assert StandardPayrollCalculator().summarize_attendance([]).total_working_days == 22
    assert StandardPayrollCalculator(default_working_days=26).summarize_attendance([]).total_working_days == 26


def test_each_approved_leave_starting_in_month_counts_one_day():
    leaves = [
        LeaveRecord(1, 1, "2025-01-10", "2025-01-14", LeaveStatus.APPROVED),
        LeaveRecord(2, 1, "2025-01-20", "2025-01-20", LeaveStatus.APPROVED),
        LeaveRecord(3, 1, "2025-01-25", "2025-01-26", LeaveStatus.PENDING),
        LeaveRecord(4, 1, "2024-12-30", "2025-01-03", LeaveStatus.APPROVED),
    ]

    assert StandardPayrollCalculator().count_leave_days(leaves, "2025-01") == 2
