from __future__ import annotations

import pytest

from hr_dashboard.core.enums import LeaveStatus, Role
from hr_dashboard.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from hr_dashboard.employees.model import Employee
from hr_dashboard.leaves.model import LeaveRecord
from hr_dashboard.leaves.service import LeaveService
from hr_dashboard.tenancy.context import AuthContext


class FakeEmployees:
    def __init__(self, *ids):
        self._ids = set(ids)

    def get_by_id(self, employee_id):
        if employee_id not in self._ids:
            return None
        return Employee(id=employee_id, name="Asha", employee_code="EMP001", department="Front Office", position="Clerk")

    def list_all(self):
        return [self.get_by_id(i) for i in sorted(self._ids)]


class FakeLeavesRepo:
    def __init__(self):
        self._next_id = 1
        self.items: dict[int, LeaveRecord] = {}

    def create(self, *, employee_id, start_date, end_date, leave_type, reason):
        lid = self._next_id
        self._next_id += 1
        self.items[lid] = LeaveRecord(
            leave_id=lid,
            employee_id=employee_id,
            start_date=start_date,
            end_date=end_date,
            status=LeaveStatus.PENDING,
            leave_type=leave_type,
            reason=reason,
        )
        return lid

    def get_by_id(self, leave_id):
        return self.items.get(int(leave_id))

    def decide(self, *, leave_id, status):
        lv = self.items.get(int(leave_id))
        if not lv or lv.status != LeaveStatus.PENDING:
            return False
        self.items[int(leave_id)] = LeaveRecord(
            leave_id=lv.leave_id,
            employee_id=lv.employee_id,
            start_date=lv.start_date,
            end_date=lv.end_date,
            status=status,
            leave_type=lv.leave_type,
            reason=lv.reason,
        )
        return True

    def list_by_status(self, *, status=None, limit=500):
        return [lv for lv in self.items.values() if status is None or lv.status == status][:limit]


@pytest.fixture
def repo():
    return FakeLeavesRepo()


@pytest.fixture
def svc(repo):
    return LeaveService(repo, FakeEmployees(1))


def _admin():
    return AuthContext(email="owner@example.com", role=Role.ADMIN)


def test_create_leave_starts_pending(svc, repo):
    lid = svc.create_leave(auth=_admin(), employee_id=1, start_date="2025-01-10", end_date="2025-01-12", reason=" family ", leave_type="casual")

    lv = repo.get_by_id(lid)
    assert lv.status == LeaveStatus.PENDING
    assert lv.reason == "family"
    assert [p.leave_id for p in svc.list_pending()] == [lid]


def test_create_leave_validation(svc):
    with pytest.raises(ValidationError):
        svc.create_leave(auth=_admin(), employee_id=1, start_date="2025-01-12", end_date="2025-01-10", reason="x")
    with pytest.raises(ValidationError):
        svc.create_leave(auth=_admin(), employee_id=1, start_date="10/01/2025", end_date="2025-01-12", reason="x")
    with pytest.raises(ValidationError):
        svc.create_leave(auth=_admin(), employee_id=1, start_date="2025-01-10", end_date="2025-01-10", reason="   ")
    with pytest.raises(ValidationError):
        svc.create_leave(auth=_admin(), employee_id=9, start_date="2025-01-10", end_date="2025-01-10", reason="x")


def test_approve_then_decide_again_is_rejected(svc, repo):
    lid = svc.create_leave(auth=_admin(), employee_id=1, start_date="2025-01-10", end_date="2025-01-10", reason="x")

    svc.approve(auth=_admin(), leave_id=lid)
    assert repo.get_by_id(lid).status == LeaveStatus.APPROVED
    assert list(svc.list_pending()) == []

    with pytest.raises(ValidationError):
        svc.reject(auth=_admin(), leave_id=lid)


def test_reject_missing_leave(svc):
    with pytest.raises(NotFoundError):
        svc.reject(auth=_admin(), leave_id=404)


def test_only_admins_decide(svc, repo):
    lid = svc.create_leave(auth=_admin(), employee_id=1, start_date="2025-01-10", end_date="2025-01-10", reason="x")

    for role in (Role.MANAGER, Role.SUPERVISOR, Role.EMPLOYEE):
        with pytest.raises(AuthorizationError):
            svc.approve(auth=AuthContext(email="owner@example.com", role=role), leave_id=lid)

    assert repo.get_by_id(lid).status == LeaveStatus.PENDING


def test_filing_a_leave_requires_a_staff_role(svc, repo):
    svc.create_leave(
        auth=AuthContext(email="owner@example.com", role=Role.SUPERVISOR),
        employee_id=1,
        start_date="2025-01-10",
        end_date="2025-01-10",
        reason="x",
    )

    with pytest.raises(AuthorizationError):
        svc.create_leave(
            auth=AuthContext(email="owner@example.com", role=Role.EMPLOYEE),
            employee_id=1,
            start_date="2025-01-11",
            end_date="2025-01-11",
            reason="x",
        )
    assert len(repo.items) == 1
