"""Week-of-month numbering and date picker range helpers."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta

from .models import KST, Clock, DateLike, system_clock
from .weekdays import weekday_index


def _as_day(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _resolve_today(today: DateLike | None, clock: Clock | None) -> date:
    if today is not None:
        return _as_day(today)
    now = (clock or system_clock)()
    if now.tzinfo is not None:
        now = now.astimezone(KST)
    return now.date()


def _parse_range_day(raw: str | None, today: date) -> date:
    text = (raw or "").strip()
    if not text:
        return today
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"range date must be YYYY-MM-DD (got {raw!r})") from e


def week_of_month(value: DateLike) -> int:
    """Return the 1-based week of the month containing ``value``.

    Week 1 runs from the 1st to the first Saturday; later weeks start on Sunday.
    """
    first_of_month = value.replace(day=1)
    days_in_first_week = 7 - weekday_index(first_of_month)
    if value.day <= days_in_first_week:
        return 1
    return math.ceil((value.day - days_in_first_week) / 7) + 1


def korean_week_label(value: DateLike) -> str:
    return f"{value.year}년 {value.month}월 {week_of_month(value)}주차"


def week_dates(value: DateLike, start_from_sunday: bool = True) -> list[DateLike]:
    """Return the 7 days of the week containing ``value``.

    The week starts on Sunday, or on Monday when ``start_from_sunday`` is False.
    """
    start_index = 0 if start_from_sunday else 1
    offset = (weekday_index(value) - start_index) % 7
    week_start = value - timedelta(days=offset)
    return [week_start + timedelta(days=i) for i in range(7)]


def is_same_day(first: DateLike, second: DateLike) -> bool:
    return _as_day(first) == _as_day(second)


def is_date_selectable(
    value: DateLike,
    range_start: str | None,
    range_end: str | None,
    today: DateLike | None = None,
    *,
    clock: Clock | None = None,
) -> bool:
    """Check whether a date picker should allow ``value``.

    Missing range ends fall back to today (the KST date when read from the
    clock). Rules, first match wins:
    a one-day range allows only that day; a range ending today allows only
    today; otherwise the day must lie inside the range and not before
    yesterday.
    """
    reference = _resolve_today(today, clock)
    start = _parse_range_day(range_start, reference)
    end = _parse_range_day(range_end, reference)
    day = _as_day(value)

    if start == end:
        return day == start
    if end == reference:
        return day == reference
    return start <= day <= end and day >= reference - timedelta(days=1)


def is_date_disabled(
    value: DateLike,
    range_start: str | None,
    range_end: str | None,
    today: DateLike | None = None,
    *,
    clock: Clock | None = None,
) -> bool:
    return not is_date_selectable(value, range_start, range_end, today, clock=clock)


def default_open_month(
    range_start: str | None,
    range_end: str | None,
    today: DateLike | None = None,
    *,
    clock: Clock | None = None,
) -> date:
    """Pick the date whose month a date picker should show first."""
    reference = _resolve_today(today, clock)
    start = _parse_range_day(range_start, reference)
    end = _parse_range_day(range_end, reference)

    # A range starting today opens on its start month.
    if start <= reference:
        return start
    if end > reference:
        return end
    return reference


__all__ = [
    "default_open_month",
    "is_date_disabled",
    "is_date_selectable",
    "is_same_day",
    "korean_week_label",
    "week_dates",
    "week_of_month",
]
