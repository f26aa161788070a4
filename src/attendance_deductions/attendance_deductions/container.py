from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .core.constants import DEFAULT_OFFICIAL_CHECK_IN_TIME
from .database.connection import DatabaseConnection, DBConfig
from .deductions.service import LateDeductionService
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.repository import PayrollRepository
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import DeductionSettingsService


@dataclass(frozen=True)
class Container:
    attendance_repo: AttendanceRepository
    payroll_repo: PayrollRepository
    settings_repo: SettingsRepository

    settings_service: DeductionSettingsService
    deduction_service: LateDeductionService


def build_services(
    *,
    attendance_repo: AttendanceRepository,
    payroll_repo: PayrollRepository,
    settings_repo: SettingsRepository,
    official_check_in_time: str = DEFAULT_OFFICIAL_CHECK_IN_TIME,
) -> Container:
    settings_service = DeductionSettingsService(settings_repo)
    deduction_service = LateDeductionService(
        attendance_repo,
        payroll_repo,
        settings_service,
        official_check_in_time=official_check_in_time,
    )
    return Container(
        attendance_repo=attendance_repo,
        payroll_repo=payroll_repo,
        settings_repo=settings_repo,
        settings_service=settings_service,
        deduction_service=deduction_service,
    )


def build_container(
    *,
    db_config: Mapping[str, Any],
    official_check_in_time: str = DEFAULT_OFFICIAL_CHECK_IN_TIME,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return build_services(
        attendance_repo=MySQLAttendanceRepository(conn),
        payroll_repo=MySQLPayrollRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        official_check_in_time=official_check_in_time,
    )
