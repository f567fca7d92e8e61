from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty, require_positive_id
from ..core.enums import ADMIN_ROLES, LEAVE_FILER_ROLES, LeaveStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..tenancy.context import AuthContext
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


class LeaveService:
    def __init__(self, leaves: LeaveRepository, employees: EmployeeRepository):
        self._leaves = leaves
        self._employees = employees

    def create_leave(
        self,
        *,
        auth: AuthContext,
        employee_id: int,
        start_date: str,
        end_date: str,
        reason: str,
        leave_type: Optional[str] = None,
    ) -> int:
        auth.require_role(LEAVE_FILER_ROLES)

        try:
            start = parse_iso_date(start_date)
            end = parse_iso_date(end_date)
        except (TypeError, ValueError):
            raise ValidationError("Invalid date (YYYY-MM-DD)")
        if end < start:
            raise ValidationError("End date must be on or after start date")

        reason = require_non_empty(reason, "Reason")
        employee_id = require_positive_id(employee_id, "Employee")
        if not self._employees.get_by_id(employee_id):
            raise ValidationError("Employee does not exist")

        return self._leaves.create(
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            leave_type=(leave_type or "").strip() or None,
            reason=reason,
        )

    def approve(self, *, auth: AuthContext, leave_id: int) -> None:
        self._decide(auth=auth, leave_id=leave_id, status=LeaveStatus.APPROVED)

    def reject(self, *, auth: AuthContext, leave_id: int) -> None:
        self._decide(auth=auth, leave_id=leave_id, status=LeaveStatus.REJECTED)

    def list_pending(self):
        return self._leaves.list_by_status(status=LeaveStatus.PENDING)

    def _decide(self, *, auth: AuthContext, leave_id: int, status: LeaveStatus) -> None:
        auth.require_role(ADMIN_ROLES)

        leave = self._leaves.get_by_id(int(leave_id))
        if not leave:
            raise NotFoundError("Leave request not found")
        if leave.status != LeaveStatus.PENDING:
            raise ValidationError("Leave request has already been decided")

        if not self._leaves.decide(leave_id=int(leave_id), status=status):
            raise ValidationError("Leave request has already been decided")
        logger.info("Leave %s %s by %s", leave_id, status.value, auth.email)
