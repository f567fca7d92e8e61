from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta
from decimal import Decimal
from types import SimpleNamespace
from typing import Optional

import pytest

from hr_dashboard.attendance.model import AttendanceRecord
from hr_dashboard.core.enums import AttendanceStatus, LeaveStatus, PayrollStatus
from hr_dashboard.employees.model import Employee
from hr_dashboard.leaves.model import LeaveRecord
from hr_dashboard.payroll.model import AMOUNT_FIELDS, PayrollRecord, SalarySlip, SalaryStructure
from hr_dashboard.payroll.service import PayrollEngine


class InMemoryEmployees:
    def __init__(self):
        self.items: dict[int, Employee] = {}

    def add(self, employee_id: int, name: str = "Asha", department: str = "Housekeeping") -> Employee:
        emp = Employee(
            id=employee_id,
            name=name,
            employee_code=f"EMP{employee_id:03d}",
            department=department,
            position="Supervisor",
            join_date="2024-04-01",
        )
        self.items[employee_id] = emp
        return emp

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.items.get(employee_id)

    def list_all(self):
        return list(self.items.values())


class InMemoryAttendance:
    def __init__(self):
        self.records: list[AttendanceRecord] = []

    def add(self, employee_id: int, day: str, status: AttendanceStatus) -> None:
        self.records.append(
            AttendanceRecord(attendance_id=len(self.records) + 1, employee_id=employee_id, date=day, status=status)
        )

    def add_month(self, employee_id: int, month: str, **counts: int) -> None:
        """Add consecutive days from the 1st: e.g. present=24, absent=2."""

        day = date.fromisoformat(f"{month}-01")
        for key, n in counts.items():
            status = AttendanceStatus(key.replace("_", "-"))
            for _ in range(n):
                self.add(employee_id, day.isoformat(), status)
                day += timedelta(days=1)

    def read_attendance(self, employee_id: int, month_prefix: str):
        return [r for r in self.records if r.employee_id == employee_id and r.date.startswith(month_prefix)]


class InMemoryLeaves:
    def __init__(self):
        self.items: list[LeaveRecord] = []

    def add(self, employee_id: int, start: str, end: str, status: LeaveStatus = LeaveStatus.APPROVED) -> None:
        self.items.append(
            LeaveRecord(
                leave_id=len(self.items) + 1,
                employee_id=employee_id,
                start_date=start,
                end_date=end,
                status=status,
            )
        )

    def read_approved_leaves(self, employee_id: int, month_prefix: str):
        return [
            lv
            for lv in self.items
            if lv.employee_id == employee_id and lv.status == LeaveStatus.APPROVED and lv.start_date.startswith(month_prefix)
        ]


class InMemoryStructures:
    def __init__(self):
        self.items: dict[int, SalaryStructure] = {}
        self._next_id = 1

    def list_all(self):
        return list(self.items.values())

    def get_by_id(self, structure_id: int):
        return self.items.get(structure_id)

    def read_salary_structure(self, employee_id: int):
        for s in self.items.values():
            if s.employee_id == employee_id:
                return s
        return None

    def create(self, *, employee_id: int, amounts) -> int:
        sid = self._next_id
        self._next_id += 1
        self.items[sid] = SalaryStructure(structure_id=sid, employee_id=employee_id, **dict(amounts))
        return sid

    def update(self, *, structure_id: int, amounts) -> bool:
        current = self.items.get(structure_id)
        if not current:
            return False
        self.items[structure_id] = replace(current, **dict(amounts))
        return True

    def delete_by_id(self, structure_id: int) -> bool:
        return self.items.pop(structure_id, None) is not None


class InMemoryPayroll:
    def __init__(self):
        self.items: dict[int, PayrollRecord] = {}
        self._next_id = 100
        self.upserts = 0

    def upsert_payroll_record(self, employee_id: int, month: str, record: PayrollRecord) -> int:
        self.upserts += 1
        existing = self.read_payroll_record(employee_id, month)
        pid = existing.payroll_id if existing else self._next_id
        if not existing:
            self._next_id += 1
        if existing and existing.status == PayrollStatus.PAID:
            return pid
        self.items[pid] = replace(record, payroll_id=pid)
        return pid

    def read_payroll_record(self, employee_id: int, month: str):
        for r in self.items.values():
            if r.employee_id == employee_id and r.month == month:
                return r
        return None

    def get_by_id(self, payroll_id: int):
        return self.items.get(payroll_id)

    def update_status(self, *, payroll_id, status, payment_date, expected) -> bool:
        r = self.items.get(payroll_id)
        if not r or r.status != expected:
            return False
        self.items[payroll_id] = replace(r, status=status, payment_date=payment_date)
        return True

    def list_for_month(self, month: str):
        return [r for r in self.items.values() if r.month == month]

    def put(self, record: PayrollRecord) -> PayrollRecord:
        self.items[record.payroll_id] = record
        return record


class InMemorySlips:
    def __init__(self):
        self.items: list[SalarySlip] = []

    def append_salary_slip(self, slip: SalarySlip) -> int:
        sid = len(self.items) + 1
        self.items.append(replace(slip, slip_id=sid))
        return sid

    def list_for_payroll(self, payroll_id: int):
        return [s for s in self.items if s.payroll_id == payroll_id]


def standard_amounts(**overrides):
    """basic 26000, allowances 5000, deductions 1500."""

    amounts = {name: 0 for name in AMOUNT_FIELDS}
    amounts.update(
        basic_salary=26000,
        hra=2000,
        da=1000,
        special_allowance=800,
        conveyance=600,
        medical_allowance=400,
        other_allowances=200,
        provident_fund=1000,
        professional_tax=200,
        income_tax=300,
        other_deductions=0,
    )
    amounts.update(overrides)
    return amounts


@pytest.fixture
def repos():
    return SimpleNamespace(
        employees=InMemoryEmployees(),
        attendance=InMemoryAttendance(),
        leaves=InMemoryLeaves(),
        structures=InMemoryStructures(),
        payroll=InMemoryPayroll(),
        slips=InMemorySlips(),
    )


@pytest.fixture
def engine(repos):
    return PayrollEngine(
        repos.employees,
        repos.attendance,
        repos.leaves,
        repos.structures,
        repos.payroll,
        repos.slips,
    )


@pytest.fixture
def configured(repos):
    """Employee 1 with the standard structure."""

    repos.employees.add(1)
    repos.structures.create(employee_id=1, amounts=standard_amounts())
    return repos


def _processed_record(payroll_id: int = 7, status: PayrollStatus = PayrollStatus.PROCESSED) -> PayrollRecord:
    return PayrollRecord(
        payroll_id=payroll_id,
        employee_id=1,
        month="2025-01",
        basic_salary=Decimal("26000.00"),
        allowances=Decimal("5000.00"),
        deductions=Decimal("1500.00"),
        net_salary=Decimal("25500.00"),
        status=status,
        present_days=24,
        absent_days=2,
    )


@pytest.fixture
def make_record():
    return _processed_record


@pytest.fixture
def amounts():
    return standard_amounts
