from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import parse_period
from ..common.validators import require_non_empty
from ..container import Container
from ..core.exceptions import SettingsStorageError, ValidationError
from ..payroll.model import PayrollRecord
from ..settings.model import LateDeductionSettings
from .calculator import calculate_monthly_deductions, get_deduction_summary

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def json_endpoint(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except SettingsStorageError as e:
                return jsonify({"success": False, "message": str(e)}), 500
            except Exception:
                logger.exception("Unhandled error in %s", request.path)
                return jsonify({"success": False, "message": "Lỗi hệ thống"}), 500

        return wrapper

    def _json_body() -> dict:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Dữ liệu JSON không hợp lệ")
        return data

    def _object_list(data: dict, key: str) -> list[dict]:
        items = data.get(key) or []
        if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
            raise ValidationError(f"{key} phải là danh sách đối tượng")
        return items

    def _month_arg() -> tuple[int, int]:
        return parse_period(request.args.get("month") or "")

    @app.route("/api/deductions/settings", methods=["GET"], endpoint="deduction_settings_get")
    @json_endpoint
    def deduction_settings_get():
        return jsonify(container.settings_service.get_settings().to_dict())

    @app.route("/api/deductions/settings", methods=["PUT"], endpoint="deduction_settings_save")
    @json_endpoint
    def deduction_settings_save():
        saved = container.settings_service.save_settings(_json_body())
        return jsonify(saved.to_dict())

    @app.route("/api/deductions/settings/reset", methods=["POST"], endpoint="deduction_settings_reset")
    @json_endpoint
    def deduction_settings_reset():
        return jsonify(container.settings_service.reset_settings().to_dict())

    @app.route("/api/deductions/monthly", methods=["GET"], endpoint="deductions_monthly")
    @json_endpoint
    def deductions_monthly():
        year, month = _month_arg()
        report = container.deduction_service.monthly_report(year=year, month=month)
        return jsonify(report.to_dict())

    @app.route("/api/deductions/net-pay", methods=["GET"], endpoint="deductions_net_pay")
    @json_endpoint
    def deductions_net_pay():
        year, month = _month_arg()
        rows = container.deduction_service.net_pay(year=year, month=month)
        return jsonify({"rows": [r.to_dict() for r in rows]})

    @app.route("/api/deductions/day", methods=["POST"], endpoint="deductions_day")
    @json_endpoint
    def deductions_day():
        data = _json_body()
        raw_id = data.get("employeeId")
        employee_id = require_non_empty(str(raw_id) if raw_id is not None else "", "employeeId")
        check_in_time = require_non_empty(str(data.get("checkInTime") or ""), "checkInTime")

        result = container.deduction_service.day_deduction(
            employee_id=employee_id,
            check_in_time=check_in_time,
            period=str(data.get("month") or ""),
        )
        return jsonify(result.to_dict())

    @app.route("/api/deductions/calculate", methods=["POST"], endpoint="deductions_calculate")
    @json_endpoint
    def deductions_calculate():
        """Stateless evaluation over records posted by the caller."""

        data = _json_body()
        attendance = [AttendanceRecord.from_dict(r) for r in _object_list(data, "attendanceRecords")]
        payroll = [PayrollRecord.from_dict(r) for r in _object_list(data, "payrollRecords")]

        raw_settings = data.get("settings")
        if raw_settings is not None:
            if not isinstance(raw_settings, dict):
                raise ValidationError("settings không hợp lệ")
            settings = LateDeductionSettings.from_dict(raw_settings)
        else:
            settings = container.settings_service.get_settings()

        official = data.get("officialCheckInTime") or container.deduction_service.official_check_in_time

        details = calculate_monthly_deductions(attendance, payroll, settings, official)
        return jsonify(
            {
                "deductions": [d.to_dict() for d in details.values()],
                "summary": get_deduction_summary(details).to_dict(),
            }
        )
