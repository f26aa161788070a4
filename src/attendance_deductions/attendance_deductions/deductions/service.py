from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_period, month_bounds, parse_period
from ..core.constants import DEFAULT_OFFICIAL_CHECK_IN_TIME
from ..payroll.model import PayrollRecord
from ..payroll.repository import PayrollRepository
from ..settings.repository import DeductionSettingsProvider
from .calculator import calculate_day_deduction, calculate_monthly_deductions, get_deduction_summary
from .model import DayDeduction, DeductionDetail, DeductionSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeductionReport:
    period: str
    details: dict[str, DeductionDetail]
    summary: DeductionSummary
    payroll: tuple[PayrollRecord, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": self.period,
            "deductions": [d.to_dict() for d in self.details.values()],
            "summary": self.summary.to_dict(),
        }


@dataclass(frozen=True)
class NetPayRow:
    employee_id: str
    employee_name: str
    net_salary: float
    late_deduction: float
    net_after_deductions: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "netSalary": self.net_salary,
            "lateDeduction": self.late_deduction,
            "netAfterDeductions": self.net_after_deductions,
        }


class LateDeductionService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        payroll: PayrollRepository,
        settings: DeductionSettingsProvider,
        *,
        official_check_in_time: str = DEFAULT_OFFICIAL_CHECK_IN_TIME,
    ):
        self._attendance = attendance
        self._payroll = payroll
        self._settings = settings
        self._official_check_in_time = official_check_in_time

    @property
    def official_check_in_time(self) -> str:
        return self._official_check_in_time

    def monthly_report(self, *, year: int, month: int) -> DeductionReport:
        start, end = month_bounds(year, month)
        period = format_period(year, month)

        settings = self._settings.get_settings()
        records = self._attendance.list_for_period(start_date=start, end_date=end)
        payroll = self._payroll.list_for_period(period=period)

        details = calculate_monthly_deductions(records, payroll, settings, self._official_check_in_time)
        summary = get_deduction_summary(details)

        logger.info(
            "Late deductions computed",
            extra={
                "period": period,
                "attendance_records": len(records),
                "employees_with_deductions": summary.total_employees_with_deductions,
            },
        )
        return DeductionReport(period=period, details=details, summary=summary, payroll=tuple(payroll))

    def day_deduction(self, *, employee_id: str, check_in_time: str, period: str) -> DayDeduction:
        year, month = parse_period(period)
        payroll = self._payroll.get_for_employee(employee_id=employee_id, period=format_period(year, month))
        daily_salary = payroll.daily_salary if payroll else 0
        return calculate_day_deduction(
            check_in_time,
            daily_salary,
            self._settings.get_settings(),
            self._official_check_in_time,
        )

    def net_pay(self, *, year: int, month: int) -> list[NetPayRow]:
        report = self.monthly_report(year=year, month=month)

        rows: list[NetPayRow] = []
        for p in report.payroll:
            detail = report.details.get(p.employee_id)
            late_deduction = detail.deduction_amount if detail else 0
            net_salary = p.net_salary if p.net_salary is not None else p.base_salary
            rows.append(
                NetPayRow(
                    employee_id=p.employee_id,
                    employee_name=p.employee_name or (detail.employee_name if detail else ""),
                    net_salary=net_salary,
                    late_deduction=late_deduction,
                    net_after_deductions=net_salary - late_deduction,
                )
            )
        return rows
