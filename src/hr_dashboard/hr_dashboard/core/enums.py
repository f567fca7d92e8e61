from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles of the dashboard accounts."""

    SUPERADMIN = "superadmin"
    ADMIN = "admin"
    MANAGER = "manager"
    SUPERVISOR = "supervisor"
    EMPLOYEE = "employee"


ADMIN_ROLES = frozenset({Role.SUPERADMIN, Role.ADMIN})
VIEWER_ROLES = frozenset({Role.SUPERADMIN, Role.ADMIN, Role.MANAGER})
LEAVE_FILER_ROLES = VIEWER_ROLES | {Role.SUPERVISOR}


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored in the database."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half-day"


class LeaveStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PayrollStatus(str, Enum):
    """Lifecycle of a payroll record: pending -> processed -> paid.

    PENDING is reserved for a scheduled-but-not-run state; nothing creates it yet.
    """

    PENDING = "pending"
    PROCESSED = "processed"
    PAID = "paid"
