from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_period(value: str) -> tuple[int, int]:
    """Parse a YYYY-MM pay period into (year, month)."""
    try:
        parsed = datetime.strptime((value or "").strip(), "%Y-%m")
    except ValueError:
        raise ValidationError("Kỳ lương không hợp lệ (YYYY-MM)")
    return parsed.year, parsed.month


def format_period(year: int, month: int) -> str:
    return f"{int(year):04d}-{int(month):02d}"


def month_bounds(year: int, month: int) -> tuple[date, date]:
    if not 1 <= int(month) <= 12:
        raise ValidationError("Tháng không hợp lệ")
    last_day = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), 1), date(int(year), int(month), last_day)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
