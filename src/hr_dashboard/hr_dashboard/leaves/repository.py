from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.constants import DEFAULT_LIST_LIMIT
from ..core.enums import LeaveStatus
from .model import LeaveRecord


class LeaveRepository(Protocol):
    def read_approved_leaves(self, employee_id: int, month_prefix: str) -> Sequence[LeaveRecord]:
        """Approved leaves of one employee whose start date starts with the YYYY-MM prefix."""

        raise NotImplementedError

    def get_by_id(self, leave_id: int) -> Optional[LeaveRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        start_date: str,
        end_date: str,
        leave_type: Optional[str],
        reason: str,
    ) -> int:
        raise NotImplementedError

    def decide(self, *, leave_id: int, status: LeaveStatus) -> bool:
        """Move a pending leave to approved/rejected; False when it is not pending."""

        raise NotImplementedError

    def list_by_status(self, *, status: Optional[LeaveStatus] = None, limit: int = DEFAULT_LIST_LIMIT) -> Sequence[LeaveRecord]:
        raise NotImplementedError
