from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công của một nhân viên trong một ngày."""

    employee_id: str
    employee_name: str
    date: str
    check_in_time: str
    status: Union[AttendanceStatus, str]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AttendanceRecord":
        raw_id = data.get("employeeId")
        employee_id = str(raw_id).strip() if raw_id is not None else ""
        if not employee_id:
            raise ValidationError("employeeId không hợp lệ")

        raw_status = str(data.get("status") or "").strip().lower()
        try:
            status = AttendanceStatus(raw_status)
        except ValueError:
            raise ValidationError(f"Trạng thái chấm công không hợp lệ: {raw_status!r}")

        return cls(
            employee_id=employee_id,
            employee_name=str(data.get("employeeName") or ""),
            date=str(data.get("date") or ""),
            check_in_time=str(data.get("checkInTime") or ""),
            status=status,
        )

    def to_dict(self) -> dict[str, Any]:
        status = self.status.value if isinstance(self.status, AttendanceStatus) else self.status
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "date": self.date,
            "checkInTime": self.check_in_time,
            "status": status,
        }
