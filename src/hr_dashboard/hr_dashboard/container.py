from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_WORKING_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.service import LeaveService
from .payroll.calculator.standard_calculator import StandardPayrollCalculator
from .payroll.mysql_payroll_repository import MySQLPayrollRepository, MySQLSalarySlipRepository
from .payroll.mysql_salary_structure_repository import MySQLSalaryStructureRepository
from .payroll.service import PayrollEngine
from .payroll.structure_service import SalaryStructureService


@dataclass(frozen=True)
class TenantServices:
    """Services bound to one tenant's data."""

    tenant: str

    attendance_service: AttendanceService
    leave_service: LeaveService
    structure_service: SalaryStructureService
    payroll_engine: PayrollEngine


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    default_working_days: int = DEFAULT_WORKING_DAYS
    enforce_unique_structures: bool = False

    def for_tenant(self, tenant: str) -> TenantServices:
        employees_repo = MySQLEmployeeRepository(self.conn, tenant=tenant)
        attendance_repo = MySQLAttendanceRepository(self.conn, tenant=tenant)
        leaves_repo = MySQLLeaveRepository(self.conn, tenant=tenant)
        structures_repo = MySQLSalaryStructureRepository(self.conn, tenant=tenant)
        payroll_repo = MySQLPayrollRepository(self.conn, tenant=tenant)
        slips_repo = MySQLSalarySlipRepository(self.conn, tenant=tenant)

        return TenantServices(
            tenant=tenant,
            attendance_service=AttendanceService(attendance_repo, employees_repo),
            leave_service=LeaveService(leaves_repo, employees_repo),
            structure_service=SalaryStructureService(
                structures_repo,
                employees_repo,
                enforce_unique=self.enforce_unique_structures,
            ),
            payroll_engine=PayrollEngine(
                employees_repo,
                attendance_repo,
                leaves_repo,
                structures_repo,
                payroll_repo,
                slips_repo,
                calculator=StandardPayrollCalculator(default_working_days=self.default_working_days),
            ),
        )


def build_container(
    *,
    db_config: dict,
    default_working_days: int = DEFAULT_WORKING_DAYS,
    enforce_unique_structures: bool = False,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return Container(
        conn=conn,
        default_working_days=int(default_working_days),
        enforce_unique_structures=bool(enforce_unique_structures),
    )
