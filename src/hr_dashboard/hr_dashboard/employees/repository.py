from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee, bound to one tenant.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """Newest joiners first."""

        raise NotImplementedError

    def create(
        self,
        *,
        name: str,
        employee_code: str,
        department: str,
        position: str,
        join_date: Optional[str] = None,
        email: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError
