import pytest

from src.attendance_deductions.attendance_deductions.core.enums import DeductionType
from src.attendance_deductions.attendance_deductions.deductions.calculator import (
    calculate_day_deduction,
    get_deduction_summary,
    is_employee_exempt,
)
from src.attendance_deductions.attendance_deductions.deductions.model import DeductionDetail, DeductionSummary
from src.attendance_deductions.attendance_deductions.settings.model import LateDeductionSettings


def _detail(employee_id: str, amount: float, late_days: int) -> DeductionDetail:
    return DeductionDetail(
        employee_id=employee_id,
        employee_name=employee_id,
        late_days=late_days,
        total_late_minutes=late_days * 20,
        average_late_minutes=20,
        deduction_amount=amount,
    )


def test_day_deduction_ignores_apply_after_days():
    settings = LateDeductionSettings(enabled=True, apply_after_days=5, fixed_deduction_amount=40)
    result = calculate_day_deduction("09:00 AM", 1000, settings)

    assert result.late_minutes == 30
    assert result.deduction == 40


def test_day_deduction_below_threshold_reports_minutes():
    result = calculate_day_deduction("08:40 AM", 1000, LateDeductionSettings(enabled=True))
    assert result.late_minutes == 10
    assert result.deduction == 0


def test_day_deduction_early_arrival_is_not_negative():
    result = calculate_day_deduction("07:55 AM", 1000, LateDeductionSettings(enabled=True))
    assert result.late_minutes == 0


def test_day_deduction_percentage_with_custom_official_time():
    settings = LateDeductionSettings(
        enabled=True, deduction_type=DeductionType.PERCENTAGE, percentage_deduction=5
    )
    result = calculate_day_deduction("10:30", 800, settings, official_check_in_time="10:00")

    assert result.to_dict() == {"lateMinutes": 30, "deduction": pytest.approx(40)}


def test_summary_of_empty_mapping():
    assert get_deduction_summary({}) == DeductionSummary(0, 0, 0, 0)


def test_summary_of_single_employee():
    summary = get_deduction_summary({"E1": _detail("E1", 100, 2)})

    assert summary.total_employees_with_deductions == 1
    assert summary.total_deduction_amount == 100
    assert summary.total_late_days == 2
    assert summary.average_deduction_per_employee == 100


def test_summary_of_several_employees():
    summary = get_deduction_summary({"E1": _detail("E1", 100, 2), "E2": _detail("E2", 50, 3)})

    assert summary.to_dict() == {
        "totalEmployeesWithDeductions": 2,
        "totalDeductionAmount": 150,
        "totalLateDays": 5,
        "averageDeductionPerEmployee": 75,
    }


def test_is_employee_exempt():
    settings = LateDeductionSettings(exclude_employee_ids=frozenset({"E1"}))
    assert is_employee_exempt("E1", settings)
    assert not is_employee_exempt("E2", settings)
    assert not is_employee_exempt("E1", LateDeductionSettings())
