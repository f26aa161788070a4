"""Late-attendance deduction engine.

Pure functions over attendance records, payroll records and the active
policy. Nothing here performs I/O or raises for malformed data: unparsable
times count as midnight, missing payroll means a daily salary of 0 and an
unknown deduction type deducts nothing.
"""

from __future__ import annotations

import math
from typing import Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.time_utils import time_to_minutes
from ..core.constants import DEFAULT_OFFICIAL_CHECK_IN_TIME
from ..core.enums import AttendanceStatus
from ..payroll.model import PayrollRecord
from ..settings.model import LateDeductionSettings
from .factory import DeductionStrategyFactory
from .model import DayDeduction, DeductionDetail, DeductionSummary, LateDayEntry

_EVALUATED_STATUSES = (AttendanceStatus.LATE, AttendanceStatus.PRESENT)

_default_factory = DeductionStrategyFactory()


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def is_employee_exempt(employee_id: str, settings: LateDeductionSettings) -> bool:
    return employee_id in (settings.exclude_employee_ids or ())


def calculate_deduction(
    late_minutes: int,
    daily_salary: float,
    settings: LateDeductionSettings,
    *,
    factory: Optional[DeductionStrategyFactory] = None,
) -> float:
    """Deduction for a single late day under the given policy."""

    if not settings.enabled or late_minutes < settings.late_threshold_minutes:
        return 0

    strategy = (factory or _default_factory).for_settings(settings)
    return strategy.amount(late_minutes=late_minutes, daily_salary=daily_salary, settings=settings)


def _late_minutes(check_in_time: str, official_minutes: int) -> int:
    return max(0, time_to_minutes(check_in_time) - official_minutes)


def calculate_monthly_deductions(
    attendance_records: Iterable[AttendanceRecord],
    payroll_records: Sequence[PayrollRecord],
    settings: LateDeductionSettings,
    official_check_in_time: str = DEFAULT_OFFICIAL_CHECK_IN_TIME,
) -> dict[str, DeductionDetail]:
    """Per-employee late deductions for one evaluation run (usually a pay period).

    Only employees that reach ``apply_after_days`` late days with some actual
    lateness appear in the result.
    """

    deductions: dict[str, DeductionDetail] = {}
    if not settings.enabled:
        return deductions

    official_minutes = time_to_minutes(official_check_in_time)

    by_employee: dict[str, list[AttendanceRecord]] = {}
    for record in attendance_records:
        by_employee.setdefault(record.employee_id, []).append(record)

    # First payroll record per employee wins.
    payroll_by_employee: dict[str, PayrollRecord] = {}
    for payroll in payroll_records:
        payroll_by_employee.setdefault(payroll.employee_id, payroll)

    min_late_days = settings.apply_after_days or 1

    for employee_id, records in by_employee.items():
        if is_employee_exempt(employee_id, settings):
            continue

        employee_name = records[0].employee_name or "Unknown"
        late_days = 0
        total_late_minutes = 0
        breakdown: list[LateDayEntry] = []

        for record in records:
            if record.status not in _EVALUATED_STATUSES:
                continue

            late_minutes = _late_minutes(record.check_in_time, official_minutes)
            if late_minutes < settings.late_threshold_minutes:
                continue

            late_days += 1
            total_late_minutes += late_minutes

            payroll = payroll_by_employee.get(employee_id)
            daily_salary = payroll.daily_salary if payroll else 0
            breakdown.append(
                LateDayEntry(
                    date=record.date,
                    late_minutes=late_minutes,
                    day_deduction=calculate_deduction(late_minutes, daily_salary, settings),
                )
            )

        if late_days < min_late_days or total_late_minutes <= 0:
            continue

        deductions[employee_id] = DeductionDetail(
            employee_id=employee_id,
            employee_name=employee_name,
            late_days=late_days,
            total_late_minutes=total_late_minutes,
            average_late_minutes=_round_half_up(total_late_minutes / late_days) if late_days else 0,
            deduction_amount=sum(entry.day_deduction for entry in breakdown),
            breakdown=tuple(breakdown),
        )

    return deductions


def calculate_day_deduction(
    check_in_time: str,
    daily_salary: float,
    settings: LateDeductionSettings,
    official_check_in_time: str = DEFAULT_OFFICIAL_CHECK_IN_TIME,
) -> DayDeduction:
    """Evaluate one check-in outside the monthly batch (no late-day gating)."""

    late_minutes = _late_minutes(check_in_time, time_to_minutes(official_check_in_time))
    return DayDeduction(
        late_minutes=late_minutes,
        deduction=calculate_deduction(late_minutes, daily_salary, settings),
    )


def get_deduction_summary(deductions: Mapping[str, DeductionDetail]) -> DeductionSummary:
    total_employees = len(deductions)
    total_amount = sum(d.deduction_amount for d in deductions.values())
    total_late_days = sum(d.late_days for d in deductions.values())

    return DeductionSummary(
        total_employees_with_deductions=total_employees,
        total_deduction_amount=total_amount,
        total_late_days=total_late_days,
        average_deduction_per_employee=total_amount / total_employees if total_employees else 0,
    )
