"""Weekday tables, style tags and shared date types."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, timedelta, timezone
from typing import Literal

KST_OFFSET_HOURS = 9
KST = timezone(timedelta(hours=KST_OFFSET_HOURS), name="KST")

# Values above this are epoch milliseconds, otherwise epoch seconds.
EPOCH_MILLISECONDS_THRESHOLD = 1_000_000_000_000

PLACEHOLDER = "-"

WeekdayStyle = Literal[
    "ko-short",
    "ko-long",
    "en-short",
    "en-short-caps",
    "en-long",
    "en-long-caps",
]

# Sunday first (index 0). Lookup order follows declaration order.
WEEKDAY_TABLES: dict[str, tuple[str, ...]] = {
    "ko-short": ("일", "월", "화", "수", "목", "금", "토"),
    "ko-long": ("일요일", "월요일", "화요일", "수요일", "목요일", "금요일", "토요일"),
    "en-short": ("sun", "mon", "tue", "wed", "thu", "fri", "sat"),
    "en-short-caps": ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"),
    "en-long": ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"),
    "en-long-caps": ("SUNDAY", "MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY"),
}

WEEKDAY_STYLES: tuple[str, ...] = tuple(WEEKDAY_TABLES)

DateLike = date | datetime
Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current host-local time as an aware datetime."""
    return datetime.now().astimezone()


def resolve_style(style: str) -> tuple[str, ...]:
    table = WEEKDAY_TABLES.get(style)
    if table is None:
        raise ValueError(f"style must be one of: {', '.join(WEEKDAY_STYLES)} (got {style!r})")
    return table


__all__ = [
    "EPOCH_MILLISECONDS_THRESHOLD",
    "KST",
    "KST_OFFSET_HOURS",
    "PLACEHOLDER",
    "WEEKDAY_STYLES",
    "WEEKDAY_TABLES",
    "Clock",
    "DateLike",
    "WeekdayStyle",
    "resolve_style",
    "system_clock",
]
