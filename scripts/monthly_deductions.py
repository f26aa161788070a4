"""In bảng khấu trừ đi muộn của một kỳ lương.

Usage: python scripts/monthly_deductions.py 2026-01 [--json]
"""

from __future__ import annotations

import argparse
import importlib
import json
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.attendance_deductions.attendance_deductions.common.datetime_utils import parse_period
from src.attendance_deductions.attendance_deductions.container import build_container


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Compute late-attendance deductions for a pay period")
    parser.add_argument("month", help="pay period, YYYY-MM")
    parser.add_argument("--json", action="store_true", help="print the raw JSON report")
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        official_check_in_time=getattr(settings, "OFFICIAL_CHECK_IN_TIME", "08:30 AM"),
    )

    year, month = parse_period(args.month)
    report = container.deduction_service.monthly_report(year=year, month=month)

    if args.json:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
        return

    print(f"Kỳ lương {report.period}")
    for d in report.details.values():
        print(
            f"  {d.employee_id:<10} {d.employee_name:<25} "
            f"late_days={d.late_days:<3} avg_late={d.average_late_minutes:<4} deduction={d.deduction_amount:,.2f}"
        )
    s = report.summary
    print(
        f"Tổng: {s.total_employees_with_deductions} nhân viên, {s.total_late_days} ngày muộn, "
        f"{s.total_deduction_amount:,.2f} (TB {s.average_deduction_per_employee:,.2f}/người)"
    )


if __name__ == "__main__":
    main()
