from __future__ import annotations

from decimal import Decimal
from typing import Mapping, Optional, Protocol, Sequence

from ..core.enums import PayrollStatus
from .model import PayrollRecord, SalarySlip, SalaryStructure


class SalaryStructureRepository(Protocol):
    """Salary structures of one tenant.

    Note: nothing here stops two structures for the same employee; readers take the first.
    """

    def list_all(self) -> Sequence[SalaryStructure]:
        raise NotImplementedError

    def get_by_id(self, structure_id: int) -> Optional[SalaryStructure]:
        raise NotImplementedError

    def read_salary_structure(self, employee_id: int) -> Optional[SalaryStructure]:
        raise NotImplementedError

    def create(self, *, employee_id: int, amounts: Mapping[str, Decimal]) -> int:
        raise NotImplementedError

    def update(self, *, structure_id: int, amounts: Mapping[str, Decimal]) -> bool:
        raise NotImplementedError

    def delete_by_id(self, structure_id: int) -> bool:
        raise NotImplementedError


class PayrollRepository(Protocol):
    def upsert_payroll_record(self, employee_id: int, month: str, record: PayrollRecord) -> int:
        """Replace-by-key write: at most one record per (employee_id, month). Returns its id."""

        raise NotImplementedError

    def read_payroll_record(self, employee_id: int, month: str) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def update_status(
        self,
        *,
        payroll_id: int,
        status: PayrollStatus,
        payment_date: str,
        expected: PayrollStatus,
    ) -> bool:
        """Conditional transition; False when the record is not in `expected` state."""

        raise NotImplementedError

    def list_for_month(self, month: str) -> Sequence[PayrollRecord]:
        raise NotImplementedError


class SalarySlipRepository(Protocol):
    def append_salary_slip(self, slip: SalarySlip) -> int:
        raise NotImplementedError

    def list_for_payroll(self, payroll_id: int) -> Sequence[SalarySlip]:
        raise NotImplementedError
