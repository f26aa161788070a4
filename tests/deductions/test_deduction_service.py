from __future__ import annotations

from datetime import date

import pytest

from src.attendance_deductions.attendance_deductions.attendance.model import AttendanceRecord
from src.attendance_deductions.attendance_deductions.core.enums import AttendanceStatus, DeductionType
from src.attendance_deductions.attendance_deductions.core.exceptions import ValidationError
from src.attendance_deductions.attendance_deductions.deductions.service import LateDeductionService
from src.attendance_deductions.attendance_deductions.payroll.model import PayrollRecord
from src.attendance_deductions.attendance_deductions.settings.model import LateDeductionSettings


class FakeAttendanceRepo:
    def __init__(self, records):
        self._records = records
        self.last_args = None

    def list_for_period(self, *, start_date: date, end_date: date, employee_id=None):
        self.last_args = {"start_date": start_date, "end_date": end_date, "employee_id": employee_id}
        return [
            r
            for r in self._records
            if start_date.isoformat() <= r.date <= end_date.isoformat()
            and (employee_id is None or r.employee_id == employee_id)
        ]


class FakePayrollRepo:
    def __init__(self, records):
        self._records = records

    def list_for_period(self, *, period: str):
        return [p for p in self._records if p.period == period]

    def get_for_employee(self, *, employee_id: str, period: str):
        for p in self.list_for_period(period=period):
            if p.employee_id == employee_id:
                return p
        return None


class StaticSettings:
    def __init__(self, settings: LateDeductionSettings):
        self.settings = settings

    def get_settings(self) -> LateDeductionSettings:
        return self.settings


ATTENDANCE = [
    AttendanceRecord("E1", "Alice", "2026-01-05", "08:50 AM", AttendanceStatus.LATE),
    AttendanceRecord("E1", "Alice", "2026-01-06", "09:30 AM", AttendanceStatus.LATE),
    AttendanceRecord("E2", "Bob", "2026-01-05", "08:20 AM", AttendanceStatus.PRESENT),
    AttendanceRecord("E1", "Alice", "2026-02-02", "10:30 AM", AttendanceStatus.LATE),
]

PAYROLL = [
    PayrollRecord("E1", 30000, employee_name="Alice", period="2026-01", net_salary=28000),
    PayrollRecord("E2", 24000, employee_name="Bob", period="2026-01"),
    PayrollRecord("E1", 31000, employee_name="Alice", period="2026-02"),
]


def _service(settings: LateDeductionSettings, *, attendance=None) -> LateDeductionService:
    return LateDeductionService(
        attendance or FakeAttendanceRepo(ATTENDANCE),
        FakePayrollRepo(PAYROLL),
        StaticSettings(settings),
    )


def test_monthly_report_uses_month_bounds_and_period():
    attendance = FakeAttendanceRepo(ATTENDANCE)
    svc = _service(LateDeductionSettings(enabled=True), attendance=attendance)

    report = svc.monthly_report(year=2026, month=1)

    assert attendance.last_args["start_date"] == date(2026, 1, 1)
    assert attendance.last_args["end_date"] == date(2026, 1, 31)
    assert report.period == "2026-01"
    assert list(report.details) == ["E1"]
    assert report.details["E1"].late_days == 2
    assert report.summary.total_deduction_amount == 100


def test_monthly_report_percentage_uses_period_payroll():
    settings = LateDeductionSettings(
        enabled=True, deduction_type=DeductionType.PERCENTAGE, percentage_deduction=10
    )
    report = _service(settings).monthly_report(year=2026, month=2)

    assert report.details["E1"].deduction_amount == pytest.approx(31000 / 30 * 0.1)


def test_monthly_report_serializes():
    data = _service(LateDeductionSettings(enabled=True)).monthly_report(year=2026, month=1).to_dict()

    assert data["period"] == "2026-01"
    assert data["deductions"][0]["employeeId"] == "E1"
    assert data["summary"]["totalLateDays"] == 2


def test_monthly_report_rejects_bad_month():
    with pytest.raises(ValidationError):
        _service(LateDeductionSettings(enabled=True)).monthly_report(year=2026, month=13)


def test_day_deduction_uses_employee_daily_salary():
    settings = LateDeductionSettings(
        enabled=True, deduction_type=DeductionType.PERCENTAGE, percentage_deduction=5
    )
    svc = _service(settings)

    result = svc.day_deduction(employee_id="E1", check_in_time="09:00 AM", period="2026-01")
    assert result.late_minutes == 30
    assert result.deduction == pytest.approx(50)

    unknown = svc.day_deduction(employee_id="E404", check_in_time="09:00 AM", period="2026-01")
    assert unknown.deduction == 0


def test_net_pay_subtracts_late_deductions():
    rows = _service(LateDeductionSettings(enabled=True)).net_pay(year=2026, month=1)
    by_id = {r.employee_id: r for r in rows}

    assert by_id["E1"].net_salary == 28000
    assert by_id["E1"].late_deduction == 100
    assert by_id["E1"].net_after_deductions == 27900
    assert by_id["E2"].net_salary == 24000
    assert by_id["E2"].late_deduction == 0
    assert by_id["E2"].to_dict()["netAfterDeductions"] == 24000


def test_disabled_policy_leaves_net_pay_untouched():
    rows = _service(LateDeductionSettings(enabled=False)).net_pay(year=2026, month=1)
    assert all(r.late_deduction == 0 for r in rows)


@pytest.mark.parametrize("period", ["", "2026-13", "January"])
def test_day_deduction_rejects_bad_period(period):
    with pytest.raises(ValidationError):
        _service(LateDeductionSettings(enabled=True)).day_deduction(
            employee_id="E1", check_in_time="09:00 AM", period=period
        )


class CountingPayrollRepo(FakePayrollRepo):
    def __init__(self, records):
        super().__init__(records)
        self.period_queries = 0

    def list_for_period(self, *, period: str):
        self.period_queries += 1
        return super().list_for_period(period=period)


def test_net_pay_queries_payroll_once():
    payroll = CountingPayrollRepo(PAYROLL)
    svc = LateDeductionService(
        FakeAttendanceRepo(ATTENDANCE), payroll, StaticSettings(LateDeductionSettings(enabled=True))
    )

    rows = svc.net_pay(year=2026, month=1)

    assert payroll.period_queries == 1
    assert [r.employee_id for r in rows] == ["E1", "E2"]
