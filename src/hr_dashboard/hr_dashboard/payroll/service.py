from __future__ import annotations

import logging
import warnings
from dataclasses import replace
from decimal import Decimal
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_month_token, today_iso
from ..common.money import ZERO, quantize
from ..core.enums import PayrollStatus
from ..core.exceptions import (
    DegenerateInputWarning,
    InvalidStateError,
    NotConfiguredError,
    NotFoundError,
)
from ..employees.repository import EmployeeRepository
from ..leaves.repository import LeaveRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import (
    AttendanceSummary,
    CalculationDetails,
    PayrollRecord,
    PayrollSummary,
    SalarySlip,
    SalaryStructure,
)
from .repository import PayrollRepository, SalarySlipRepository, SalaryStructureRepository

logger = logging.getLogger(__name__)


class PayrollEngine:
    """Monthly salary computation and payroll record lifecycle for one tenant.

    Every operation re-reads structure, attendance and leaves from the
    repositories right before computing; nothing is cached between calls.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        structures: SalaryStructureRepository,
        payroll: PayrollRepository,
        slips: SalarySlipRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._leaves = leaves
        self._structures = structures
        self._payroll = payroll
        self._slips = slips
        self._calculator = calculator or StandardPayrollCalculator()

    # ---- computation ----

    def get_attendance_summary(self, employee_id: int, month: str) -> AttendanceSummary:
        month = parse_month_token(month)
        records = self._attendance.read_attendance(int(employee_id), month)
        records = [r for r in records if r.employee_id == int(employee_id) and r.date.startswith(month)]

        summary = self._calculator.summarize_attendance(records)
        if not records:
            logger.warning(
                "No attendance for employee %s in %s; assuming %d working days",
                employee_id,
                month,
                summary.total_working_days,
            )
            warnings.warn(
                f"no attendance for employee {employee_id} in {month}",
                DegenerateInputWarning,
                stacklevel=2,
            )
        return summary

    def get_approved_leave_days(self, employee_id: int, month: str) -> int:
        month = parse_month_token(month)
        leaves = [lv for lv in self._leaves.read_approved_leaves(int(employee_id), month) if lv.employee_id == int(employee_id)]
        return self._calculator.count_leave_days(leaves, month)

    def calculate_net_salary(self, employee_id: int, structure: Optional[SalaryStructure], month: str) -> Decimal:
        if structure is None or not structure.basic_salary:
            return ZERO
        return self.get_calculation_details(employee_id, month, structure=structure).breakdown.net_salary

    def compute_salary(self, employee_id: int, month: str) -> Decimal:
        structure = self._require_structure(employee_id)
        return self.calculate_net_salary(employee_id, structure, month)

    def get_calculation_details(
        self,
        employee_id: int,
        month: str,
        *,
        structure: Optional[SalaryStructure] = None,
    ) -> CalculationDetails:
        """Full breakdown shown before processing an employee's salary."""

        month = parse_month_token(month)
        structure = structure or self._require_structure(employee_id)
        attendance = self.get_attendance_summary(employee_id, month)
        leave_days = self.get_approved_leave_days(employee_id, month)
        return CalculationDetails(
            employee_id=int(employee_id),
            month=month,
            structure=structure,
            attendance=attendance,
            leave_days=leave_days,
            breakdown=self._calculator.breakdown(structure, attendance, leave_days),
        )

    # ---- lifecycle ----

    def process_payroll(self, employee_id: int, month: str) -> PayrollRecord:
        """Compute and store the month's record; a paid record is final."""

        month = parse_month_token(month)
        existing = self._payroll.read_payroll_record(int(employee_id), month)
        if existing and existing.status == PayrollStatus.PAID:
            raise InvalidStateError(f"Payroll for employee {employee_id} in {month} is already paid")

        details = self.get_calculation_details(employee_id, month)
        structure = details.structure
        breakdown = details.breakdown

        record = PayrollRecord(
            payroll_id=0,
            employee_id=int(employee_id),
            month=details.month,
            basic_salary=quantize(structure.basic_salary),
            allowances=quantize(breakdown.total_allowances),
            deductions=quantize(breakdown.total_deductions),
            net_salary=quantize(breakdown.net_salary),
            status=PayrollStatus.PROCESSED,
            payment_date="",
            present_days=details.attendance.present_days,
            absent_days=details.attendance.absent_days,
            half_days=details.attendance.half_days,
            leaves=details.leave_days,
        )

        payroll_id = self._payroll.upsert_payroll_record(int(employee_id), details.month, record)
        logger.info(
            "Payroll processed for employee %s, %s: net %s (record %s)",
            employee_id,
            details.month,
            record.net_salary,
            payroll_id,
        )
        return replace(record, payroll_id=int(payroll_id))

    def process_all_payroll(self, month: str) -> int:
        """Process every employee with a salary structure; others are skipped,
        as are employees already paid for the month.

        Not transactional: a failure part-way leaves earlier employees processed.
        """

        month = parse_month_token(month)
        configured = {s.employee_id for s in self._structures.list_all()}
        paid = {r.employee_id for r in self._payroll.list_for_month(month) if r.status == PayrollStatus.PAID}

        count = 0
        for employee in self._employees.list_all():
            if employee.id not in configured or employee.id in paid:
                continue
            self.process_payroll(employee.id, month)
            count += 1

        logger.info("Payroll processed for %d employees in %s", count, month)
        return count

    def mark_paid(self, payroll_id: int, *, today: Optional[str] = None) -> PayrollRecord:
        record = self._payroll.get_by_id(int(payroll_id))
        if not record:
            raise NotFoundError("Payroll record not found")
        if record.status != PayrollStatus.PROCESSED:
            raise InvalidStateError(f"Payroll record is {record.status.value}; only processed records can be paid")

        payment_date = today or today_iso()
        ok = self._payroll.update_status(
            payroll_id=record.payroll_id,
            status=PayrollStatus.PAID,
            payment_date=payment_date,
            expected=PayrollStatus.PROCESSED,
        )
        if not ok:
            raise InvalidStateError("Payroll record changed state before it could be paid")

        logger.info("Payroll record %s marked paid on %s", record.payroll_id, payment_date)
        return replace(record, status=PayrollStatus.PAID, payment_date=payment_date)

    def generate_salary_slip(self, payroll_id: int, *, today: Optional[str] = None) -> SalarySlip:
        record = self._payroll.get_by_id(int(payroll_id))
        if not record:
            raise NotFoundError("Payroll record not found")
        if not self._employees.get_by_id(record.employee_id):
            raise NotFoundError("Employee not found for this payroll record")
        if not self._structures.read_salary_structure(record.employee_id):
            raise NotFoundError("Salary structure not found for this employee")

        slip = SalarySlip(
            slip_id=0,
            payroll_id=record.payroll_id,
            employee_id=record.employee_id,
            month=record.month,
            basic_salary=record.basic_salary,
            allowances=record.allowances,
            deductions=record.deductions,
            net_salary=record.net_salary,
            generated_date=today or today_iso(),
            present_days=record.present_days,
            absent_days=record.absent_days,
            half_days=record.half_days,
            leaves=record.leaves,
        )
        slip_id = self._slips.append_salary_slip(slip)
        logger.info("Salary slip %s generated for payroll record %s", slip_id, record.payroll_id)
        return replace(slip, slip_id=int(slip_id))

    def list_salary_slips(self, payroll_id: int) -> Sequence[SalarySlip]:
        if not self._payroll.get_by_id(int(payroll_id)):
            raise NotFoundError("Payroll record not found")
        return self._slips.list_for_payroll(int(payroll_id))

    def summarize_month(self, month: str) -> PayrollSummary:
        month = parse_month_token(month)
        records = self._payroll.list_for_month(month)
        statuses = [r.status for r in records]
        return PayrollSummary(
            month=month,
            total_net_salary=sum((r.net_salary for r in records), ZERO),
            pending=statuses.count(PayrollStatus.PENDING),
            processed=statuses.count(PayrollStatus.PROCESSED),
            paid=statuses.count(PayrollStatus.PAID),
        )

    def _require_structure(self, employee_id: int) -> SalaryStructure:
        structure = self._structures.read_salary_structure(int(employee_id))
        if not structure:
            raise NotConfiguredError("Salary structure not found for this employee")
        return structure
