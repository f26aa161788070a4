"""Ví dụ: gọi engine khấu trừ trực tiếp (không qua Flask, không cần MySQL).

Mục tiêu: minh hoạ engine là hàm thuần, nhận dữ liệu chấm công, bảng lương và cấu hình.
"""

from src.attendance_deductions.attendance_deductions.attendance.model import AttendanceRecord
from src.attendance_deductions.attendance_deductions.core.enums import AttendanceStatus, DeductionType
from src.attendance_deductions.attendance_deductions.deductions.calculator import (
    calculate_monthly_deductions,
    get_deduction_summary,
)
from src.attendance_deductions.attendance_deductions.payroll.model import PayrollRecord
from src.attendance_deductions.attendance_deductions.settings.model import LateDeductionSettings


def main():
    records = [
        AttendanceRecord("E1", "Alice", "2026-01-05", "08:50 AM", AttendanceStatus.LATE),
        AttendanceRecord("E1", "Alice", "2026-01-06", "09:45 AM", AttendanceStatus.LATE),
        AttendanceRecord("E2", "Bob", "2026-01-05", "08:31 AM", AttendanceStatus.PRESENT),
    ]
    payroll = [PayrollRecord("E1", 30000), PayrollRecord("E2", 24000)]
    settings = LateDeductionSettings(enabled=True, deduction_type=DeductionType.SCALED)

    deductions = calculate_monthly_deductions(records, payroll, settings)
    for detail in deductions.values():
        print(detail.to_dict())
    print(get_deduction_summary(deductions).to_dict())


if __name__ == "__main__":
    main()
