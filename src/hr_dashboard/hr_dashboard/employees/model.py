from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object (no DB access). `id` is the storage id referenced by
    attendance, leaves and payroll; `employee_code` is the human-facing number.
    """

    id: int
    name: str
    employee_code: str
    department: str
    position: str
    join_date: Optional[str] = None
    email: Optional[str] = None
    status: str = "active"
