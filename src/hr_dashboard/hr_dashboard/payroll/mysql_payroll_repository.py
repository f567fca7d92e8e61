from __future__ import annotations

from typing import Optional, Sequence

from ..common.money import to_money
from ..core.enums import PayrollStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date_str, db_cursor, fetchall, fetchone
from .model import PayrollRecord, SalarySlip
from .repository import PayrollRepository, SalarySlipRepository

_PAYROLL_COLUMNS = (
    "payroll_id, employee_id, month, basic_salary, allowances, deductions, net_salary, "
    "status, payment_date, present_days, absent_days, half_days, leaves"
)
_SLIP_COLUMNS = (
    "slip_id, payroll_id, employee_id, month, basic_salary, allowances, deductions, net_salary, "
    "generated_date, present_days, absent_days, half_days, leaves"
)


def _row_to_payroll(r: dict) -> PayrollRecord:
    return PayrollRecord(
        payroll_id=int(r["payroll_id"]),
        employee_id=int(r["employee_id"]),
        month=r["month"],
        basic_salary=to_money(r["basic_salary"]),
        allowances=to_money(r["allowances"]),
        deductions=to_money(r["deductions"]),
        net_salary=to_money(r["net_salary"]),
        status=PayrollStatus(r["status"]),
        payment_date=as_date_str(r.get("payment_date")),
        present_days=int(r.get("present_days") or 0),
        absent_days=int(r.get("absent_days") or 0),
        half_days=int(r.get("half_days") or 0),
        leaves=int(r.get("leaves") or 0),
    )


def _row_to_slip(r: dict) -> SalarySlip:
    return SalarySlip(
        slip_id=int(r["slip_id"]),
        payroll_id=int(r["payroll_id"]),
        employee_id=int(r["employee_id"]),
        month=r["month"],
        basic_salary=to_money(r["basic_salary"]),
        allowances=to_money(r["allowances"]),
        deductions=to_money(r["deductions"]),
        net_salary=to_money(r["net_salary"]),
        generated_date=as_date_str(r["generated_date"]),
        present_days=int(r.get("present_days") or 0),
        absent_days=int(r.get("absent_days") or 0),
        half_days=int(r.get("half_days") or 0),
        leaves=int(r.get("leaves") or 0),
    )


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, tenant: str):
        self._conn_factory = conn_factory
        self._tenant = tenant

    def upsert_payroll_record(self, employee_id: int, month: str, record: PayrollRecord) -> int:
        # UNIQUE (tenant, employee_id, month) turns the insert into a replace that keeps the id.
        # A paid row is left untouched; status is assigned last so the guards read the old value.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payroll_records(
                    tenant, employee_id, month, basic_salary, allowances, deductions, net_salary,
                    status, payment_date, present_days, absent_days, half_days, leaves
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,NULL,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    payroll_id=LAST_INSERT_ID(payroll_id),
                    basic_salary=IF(status='paid', basic_salary, VALUES(basic_salary)),
                    allowances=IF(status='paid', allowances, VALUES(allowances)),
                    deductions=IF(status='paid', deductions, VALUES(deductions)),
                    net_salary=IF(status='paid', net_salary, VALUES(net_salary)),
                    payment_date=IF(status='paid', payment_date, NULL),
                    present_days=IF(status='paid', present_days, VALUES(present_days)),
                    absent_days=IF(status='paid', absent_days, VALUES(absent_days)),
                    half_days=IF(status='paid', half_days, VALUES(half_days)),
                    leaves=IF(status='paid', leaves, VALUES(leaves)),
                    status=IF(status='paid', status, VALUES(status))
                """,
                (
                    self._tenant,
                    int(employee_id),
                    month,
                    record.basic_salary,
                    record.allowances,
                    record.deductions,
                    record.net_salary,
                    record.status.value,
                    record.present_days,
                    record.absent_days,
                    record.half_days,
                    record.leaves,
                ),
            )
            return int(cur.lastrowid)

    def read_payroll_record(self, employee_id: int, month: str) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_PAYROLL_COLUMNS} FROM payroll_records WHERE tenant=%s AND employee_id=%s AND month=%s",
                (self._tenant, int(employee_id), month),
            )
            r = fetchone(cur)
            return _row_to_payroll(r) if r else None

    def get_by_id(self, payroll_id: int) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_PAYROLL_COLUMNS} FROM payroll_records WHERE tenant=%s AND payroll_id=%s",
                (self._tenant, int(payroll_id)),
            )
            r = fetchone(cur)
            return _row_to_payroll(r) if r else None

    def update_status(
        self,
        *,
        payroll_id: int,
        status: PayrollStatus,
        payment_date: str,
        expected: PayrollStatus,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE payroll_records
                SET status=%s, payment_date=%s
                WHERE tenant=%s AND payroll_id=%s AND status=%s
                """,
                (status.value, payment_date or None, self._tenant, int(payroll_id), expected.value),
            )
            return cur.rowcount > 0

    def list_for_month(self, month: str) -> Sequence[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_PAYROLL_COLUMNS}
                FROM payroll_records
                WHERE tenant=%s AND month=%s
                ORDER BY employee_id ASC
                """,
                (self._tenant, month),
            )
            return [_row_to_payroll(r) for r in fetchall(cur)]


class MySQLSalarySlipRepository(SalarySlipRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, tenant: str):
        self._conn_factory = conn_factory
        self._tenant = tenant

    def append_salary_slip(self, slip: SalarySlip) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_slips(
                    tenant, payroll_id, employee_id, month, basic_salary, allowances, deductions,
                    net_salary, generated_date, present_days, absent_days, half_days, leaves
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    self._tenant,
                    slip.payroll_id,
                    slip.employee_id,
                    slip.month,
                    slip.basic_salary,
                    slip.allowances,
                    slip.deductions,
                    slip.net_salary,
                    slip.generated_date,
                    slip.present_days,
                    slip.absent_days,
                    slip.half_days,
                    slip.leaves,
                ),
            )
            return int(cur.lastrowid)

    def list_for_payroll(self, payroll_id: int) -> Sequence[SalarySlip]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SLIP_COLUMNS}
                FROM salary_slips
                WHERE tenant=%s AND payroll_id=%s
                ORDER BY slip_id ASC
                """,
                (self._tenant, int(payroll_id)),
            )
            return [_row_to_slip(r) for r in fetchall(cur)]
