from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_period(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]

        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(str(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT attendance_id, employee_id, employee_name, work_date, check_in_time, status
                FROM attendance_records
                WHERE {where}
                ORDER BY work_date ASC, attendance_id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)

            out: list[AttendanceRecord] = []
            for r in rows:
                check_in = normalize_mysql_time(r.get("check_in_time"))
                out.append(
                    AttendanceRecord(
                        employee_id=str(r["employee_id"]),
                        employee_name=r.get("employee_name") or "",
                        date=r["work_date"].strftime("%Y-%m-%d"),
                        # Missing check-in keeps the legacy "midnight" meaning.
                        check_in_time=check_in.strftime("%H:%M") if check_in else "",
                        status=AttendanceStatus(r["status"]),
                    )
                )
            return out
