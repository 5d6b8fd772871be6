"""Weekday lookup and conversion between Korean/English styles."""

from __future__ import annotations

from datetime import timedelta

from .models import WEEKDAY_TABLES, Clock, DateLike, WeekdayStyle, resolve_style, system_clock


def weekday_index(value: DateLike) -> int:
    """Return the weekday index of a date (0 = Sunday ... 6 = Saturday)."""
    return value.isoweekday() % 7


def weekday_name(index: int, style: WeekdayStyle) -> str:
    table = resolve_style(style)
    if not 0 <= index <= 6:
        raise ValueError(f"weekday index must be between 0 and 6 (got {index})")
    return table[index]


def date_to_weekday_name(value: DateLike, style: WeekdayStyle = "ko-short") -> str:
    """Weekday name of ``value`` in the given style (2025-04-21 -> '월')."""
    return weekday_name(weekday_index(value), style)


def weekday_index_of(text: str) -> int | None:
    """Resolve a weekday name in any style to its index, or None."""
    for table in WEEKDAY_TABLES.values():
        if text in table:
            return table.index(text)
    return None


def convert_weekday_format(text: str, target_style: WeekdayStyle) -> str | None:
    """Convert a weekday name to ``target_style``.

    Returns None when ``text`` is not a weekday name in any style.
    """
    table = resolve_style(target_style)
    index = weekday_index_of(text)
    if index is None:
        return None
    return table[index]


def is_same_weekday(first: DateLike, second: DateLike) -> bool:
    return weekday_index(first) == weekday_index(second)


def nearest_weekday(
    target: str,
    base_date: DateLike | None = None,
    search_forward: bool = True,
    *,
    clock: Clock | None = None,
) -> DateLike | None:
    """Find the closest date falling on ``target`` weekday.

    The base date itself is never returned: when it already falls on the
    target weekday the result is one full week away.
    """
    target_index = weekday_index_of(target)
    if target_index is None:
        return None

    base = base_date if base_date is not None else (clock or system_clock)()
    current_index = weekday_index(base)

    if search_forward:
        offset = (target_index - current_index) % 7 or 7
    else:
        offset = -((current_index - target_index) % 7 or 7)
    return base + timedelta(days=offset)


def is_weekend(value: DateLike) -> bool:
    return weekday_index(value) in (0, 6)


def is_weekday(value: DateLike) -> bool:
    return not is_weekend(value)


__all__ = [
    "convert_weekday_format",
    "date_to_weekday_name",
    "is_same_weekday",
    "is_weekday",
    "is_weekend",
    "nearest_weekday",
    "weekday_index",
    "weekday_index_of",
    "weekday_name",
]
