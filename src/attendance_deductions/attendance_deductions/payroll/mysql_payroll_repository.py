from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import PayrollRecord
from .repository import PayrollRepository


def _to_record(r: Dict[str, Any]) -> PayrollRecord:
    net_salary = r.get("net_salary")
    return PayrollRecord(
        employee_id=str(r["employee_id"]),
        employee_name=r.get("employee_name"),
        period=r.get("pay_period"),
        base_salary=float(r.get("base_salary") or 0),
        net_salary=float(net_salary) if net_salary is not None else None,
    )


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_period(self, *, period: str) -> Sequence[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payroll_id, employee_id, employee_name, pay_period, base_salary, net_salary
                FROM payroll_records
                WHERE pay_period=%s
                ORDER BY payroll_id ASC
                """,
                (period,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_for_employee(self, *, employee_id: str, period: str) -> Optional[PayrollRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payroll_id, employee_id, employee_name, pay_period, base_salary, net_salary
                FROM payroll_records
                WHERE employee_id=%s AND pay_period=%s
                ORDER BY payroll_id ASC
                LIMIT 1
                """,
                (str(employee_id), period),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None
