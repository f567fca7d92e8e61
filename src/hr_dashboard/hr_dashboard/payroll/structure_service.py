from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Mapping, Optional, Sequence

from ..common.money import to_money
from ..core.enums import ADMIN_ROLES
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..tenancy.context import AuthContext
from .model import AMOUNT_FIELDS, SalaryStructure
from .repository import SalaryStructureRepository

logger = logging.getLogger(__name__)


def _parse_amounts(data: Mapping[str, Any], *, partial: bool) -> dict[str, Decimal]:
    """Form values to Decimal amounts; blank or unparsable values become 0."""

    if partial:
        return {name: to_money(data[name]) for name in AMOUNT_FIELDS if name in data}
    return {name: to_money(data.get(name)) for name in AMOUNT_FIELDS}


class SalaryStructureService:
    """CRUD over salary structures of the authenticated tenant.

    Duplicate structures for one employee are allowed unless
    `enforce_unique` is set.
    """

    def __init__(
        self,
        structures: SalaryStructureRepository,
        employees: EmployeeRepository,
        *,
        enforce_unique: bool = False,
    ):
        self._structures = structures
        self._employees = employees
        self._enforce_unique = bool(enforce_unique)

    def list_structures(self) -> Sequence[SalaryStructure]:
        return self._structures.list_all()

    def find_for_employee(self, employee_id: int) -> Optional[SalaryStructure]:
        return self._structures.read_salary_structure(int(employee_id))

    def create(self, *, auth: AuthContext, data: Mapping[str, Any]) -> int:
        auth.require_role(ADMIN_ROLES)

        raw_employee = data.get("employee_id")
        if raw_employee in (None, ""):
            raise ValidationError("Please select an employee")
        try:
            employee_id = int(raw_employee)
        except (TypeError, ValueError):
            raise ValidationError("Please select an employee")

        if not self._employees.get_by_id(employee_id):
            raise ValidationError("Employee does not exist")
        if self._enforce_unique and self._structures.read_salary_structure(employee_id):
            raise ValidationError("This employee already has a salary structure")

        structure_id = self._structures.create(employee_id=employee_id, amounts=_parse_amounts(data, partial=False))
        logger.info("Salary structure %s created for employee %s by %s", structure_id, employee_id, auth.email)
        return structure_id

    def update(self, *, auth: AuthContext, structure_id: int, data: Mapping[str, Any]) -> SalaryStructure:
        auth.require_role(ADMIN_ROLES)

        if not self._structures.get_by_id(int(structure_id)):
            raise NotFoundError("Salary structure not found")

        amounts = _parse_amounts(data, partial=True)
        if amounts:
            self._structures.update(structure_id=int(structure_id), amounts=amounts)
            logger.info("Salary structure %s updated (%s) by %s", structure_id, ", ".join(sorted(amounts)), auth.email)

        updated = self._structures.get_by_id(int(structure_id))
        if not updated:
            raise NotFoundError("Salary structure not found")
        return updated

    def delete(self, *, auth: AuthContext, structure_id: int) -> None:
        auth.require_role(ADMIN_ROLES)

        if not self._structures.delete_by_id(int(structure_id)):
            raise NotFoundError("Salary structure not found")
        logger.info("Salary structure %s deleted by %s", structure_id, auth.email)

    def employees_with_structure(self) -> list[Employee]:
        configured = {s.employee_id for s in self._structures.list_all()}
        return [e for e in self._employees.list_all() if e.id in configured]

    def employees_without_structure(self) -> list[Employee]:
        configured = {s.employee_id for s in self._structures.list_all()}
        return [e for e in self._employees.list_all() if e.id not in configured]
