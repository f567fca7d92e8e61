from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRecord:
    leave_id: int
    employee_id: int
    start_date: str
    end_date: str
    status: LeaveStatus
    leave_type: Optional[str] = None
    reason: Optional[str] = None
