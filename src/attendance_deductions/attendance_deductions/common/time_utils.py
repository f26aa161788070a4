from __future__ import annotations

import re
from typing import Any, Optional

_TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})\s*(AM|PM)?", re.IGNORECASE | re.ASCII)


def parse_time_minutes(value: Any) -> Optional[int]:
    """Parse a time-of-day string into minutes since midnight.

    Accepts ``H:MM`` / ``HH:MM`` anywhere in the string, optionally followed
    by AM/PM. Without a meridiem the hour is taken as 24-hour time.
    Returns None when nothing time-like is found.
    """

    if not isinstance(value, str):
        return None

    match = _TIME_PATTERN.search(value)
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    meridiem = (match.group(3) or "").upper()

    if meridiem == "PM" and hours != 12:
        hours += 12
    if meridiem == "AM" and hours == 12:
        hours = 0

    return hours * 60 + minutes


def time_to_minutes(value: Any) -> int:
    """Legacy parser: unparsable input counts as midnight (0)."""
    minutes = parse_time_minutes(value)
    return minutes if minutes is not None else 0

