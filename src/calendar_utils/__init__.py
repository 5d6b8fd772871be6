"""Weekday, week-of-month and date formatting utilities."""

from .formatting import (
    epoch_milliseconds_to_date,
    epoch_seconds_to_date,
    epoch_seconds_to_milliseconds,
    format_epoch_milliseconds,
    format_korean_date,
    format_pattern,
    kst_today_string,
    safe_format_date,
    to_unix_epoch_seconds,
)
from .models import (
    EPOCH_MILLISECONDS_THRESHOLD,
    KST,
    PLACEHOLDER,
    WEEKDAY_STYLES,
    WEEKDAY_TABLES,
    Clock,
    WeekdayStyle,
    system_clock,
)
from .week_utils import (
    default_open_month,
    is_date_disabled,
    is_date_selectable,
    is_same_day,
    korean_week_label,
    week_dates,
    week_of_month,
)
from .weekdays import (
    convert_weekday_format,
    date_to_weekday_name,
    is_same_weekday,
    is_weekday,
    is_weekend,
    nearest_weekday,
    weekday_index,
    weekday_index_of,
    weekday_name,
)

__all__ = [
    "EPOCH_MILLISECONDS_THRESHOLD",
    "KST",
    "PLACEHOLDER",
    "WEEKDAY_STYLES",
    "WEEKDAY_TABLES",
    "Clock",
    "WeekdayStyle",
    "convert_weekday_format",
    "date_to_weekday_name",
    "default_open_month",
    "epoch_milliseconds_to_date",
    "epoch_seconds_to_date",
    "epoch_seconds_to_milliseconds",
    "format_epoch_milliseconds",
    "format_korean_date",
    "format_pattern",
    "is_date_disabled",
    "is_date_selectable",
    "is_same_day",
    "is_same_weekday",
    "is_weekday",
    "is_weekend",
    "korean_week_label",
    "kst_today_string",
    "nearest_weekday",
    "safe_format_date",
    "system_clock",
    "to_unix_epoch_seconds",
    "week_dates",
    "week_of_month",
    "weekday_index",
    "weekday_index_of",
    "weekday_name",
]
