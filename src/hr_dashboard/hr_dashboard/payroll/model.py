from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..common.money import ZERO, to_money
from ..core.enums import PayrollStatus

ALLOWANCE_FIELDS = (
    "hra",
    "da",
    "special_allowance",
    "conveyance",
    "medical_allowance",
    "other_allowances",
)
DEDUCTION_FIELDS = (
    "provident_fund",
    "professional_tax",
    "income_tax",
    "other_deductions",
)
AMOUNT_FIELDS = ("basic_salary",) + ALLOWANCE_FIELDS + DEDUCTION_FIELDS


@dataclass(frozen=True)
class SalaryStructure:
    """Fixed monthly pay configuration of one employee.

    Every amount defaults to 0 and is coerced to Decimal on construction.
    """

    structure_id: int
    employee_id: int
    basic_salary: Decimal = ZERO
    hra: Decimal = ZERO
    da: Decimal = ZERO
    special_allowance: Decimal = ZERO
    conveyance: Decimal = ZERO
    medical_allowance: Decimal = ZERO
    other_allowances: Decimal = ZERO
    provident_fund: Decimal = ZERO
    professional_tax: Decimal = ZERO
    income_tax: Decimal = ZERO
    other_deductions: Decimal = ZERO
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __post_init__(self):
        for name in AMOUNT_FIELDS:
            object.__setattr__(self, name, to_money(getattr(self, name)))

    @property
    def total_allowances(self) -> Decimal:
        return sum((getattr(self, n) for n in ALLOWANCE_FIELDS), ZERO)

    @property
    def total_deductions(self) -> Decimal:
        return sum((getattr(self, n) for n in DEDUCTION_FIELDS), ZERO)

    @property
    def total_ctc(self) -> Decimal:
        return self.basic_salary + self.total_allowances


@dataclass(frozen=True)
class AttendanceSummary:
    present_days: int
    absent_days: int
    half_days: int
    total_working_days: int


@dataclass(frozen=True)
class SalaryBreakdown:
    """Intermediate values of one salary computation."""

    daily_rate: Decimal
    earned_basic: Decimal
    salary_loss: Decimal
    net_basic: Decimal
    total_allowances: Decimal
    total_deductions: Decimal
    net_salary: Decimal


@dataclass(frozen=True)
class CalculationDetails:
    """Preview shown before processing an employee's salary."""

    employee_id: int
    month: str
    structure: SalaryStructure
    attendance: AttendanceSummary
    leave_days: int
    breakdown: SalaryBreakdown


@dataclass(frozen=True)
class PayrollRecord:
    """Computed pay of one employee for one month; unique per (employee_id, month)."""

    payroll_id: int
    employee_id: int
    month: str
    basic_salary: Decimal
    allowances: Decimal
    deductions: Decimal
    net_salary: Decimal
    status: PayrollStatus
    payment_date: str = ""
    present_days: int = 0
    absent_days: int = 0
    half_days: int = 0
    leaves: int = 0


@dataclass(frozen=True)
class SalarySlip:
    """Immutable snapshot of a payroll record at generation time."""

    slip_id: int
    payroll_id: int
    employee_id: int
    month: str
    basic_salary: Decimal
    allowances: Decimal
    deductions: Decimal
    net_salary: Decimal
    generated_date: str
    present_days: int = 0
    absent_days: int = 0
    half_days: int = 0
    leaves: int = 0

    @property
    def gross_earnings(self) -> Decimal:
        return self.basic_salary + self.allowances


@dataclass(frozen=True)
class PayrollSummary:
    month: str
    total_net_salary: Decimal = ZERO
    pending: int = 0
    processed: int = 0
    paid: int = 0
