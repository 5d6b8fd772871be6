"""Date string formatting, lenient parsing and Unix epoch conversions."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime, time, timedelta, timezone, tzinfo

from dateutil import parser as date_parser

from .models import (
    EPOCH_MILLISECONDS_THRESHOLD,
    KST,
    KST_OFFSET_HOURS,
    PLACEHOLDER,
    Clock,
    DateLike,
    system_clock,
)

logger = logging.getLogger(__name__)

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Two-letter tokens must be replaced before their one-letter forms.
_PATTERN_TOKENS = (
    (re.compile("yyyy"), lambda d: str(d.year)),
    (re.compile("MM"), lambda d: f"{d.month:02d}"),
    (re.compile("M"), lambda d: str(d.month)),
    (re.compile("dd"), lambda d: f"{d.day:02d}"),
    (re.compile("d"), lambda d: str(d.day)),
)

_EPOCH_PATTERN_TOKENS = _PATTERN_TOKENS[0], _PATTERN_TOKENS[1], _PATTERN_TOKENS[3]


def _apply_tokens(value: DateLike, pattern: str, tokens) -> str:
    text = pattern
    for regex, render in tokens:
        text = regex.sub(render(value), text)
    return text


def format_pattern(value: DateLike, pattern: str) -> str:
    """Format a date with ``yyyy``, ``MM``, ``M``, ``dd`` and ``d`` tokens."""
    return _apply_tokens(value, pattern, _PATTERN_TOKENS)


def format_korean_date(value: DateLike, tz: tzinfo = KST) -> str:
    """Korean numeric date, e.g. ``2025. 4. 8.``; aware datetimes are read in ``tz``."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(tz)
    return f"{value.year}. {value.month}. {value.day}."


def epoch_seconds_to_date(seconds: float, tz: tzinfo = KST) -> datetime:
    return (UNIX_EPOCH + timedelta(seconds=seconds)).astimezone(tz)


def epoch_milliseconds_to_date(milliseconds: float, tz: tzinfo = KST) -> datetime:
    return (UNIX_EPOCH + timedelta(milliseconds=milliseconds)).astimezone(tz)


def epoch_seconds_to_milliseconds(seconds: int) -> int:
    return seconds * 1000


def to_unix_epoch_seconds(value: DateLike) -> int:
    """Whole seconds since the Unix epoch, rounded down.

    Naive datetimes and plain dates are read as UTC.
    """
    if isinstance(value, datetime):
        moment = value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
    else:
        moment = datetime.combine(value, time(), tzinfo=timezone.utc)
    return (moment - UNIX_EPOCH) // timedelta(seconds=1)


def format_epoch_milliseconds(milliseconds: float, pattern: str = "yyyy-MM-dd", tz: tzinfo = KST) -> str:
    """Format epoch milliseconds; only ``yyyy``, ``MM`` and ``dd`` are replaced."""
    return _apply_tokens(epoch_milliseconds_to_date(milliseconds, tz), pattern, _EPOCH_PATTERN_TOKENS)


def kst_today_string(*, clock: Clock | None = None) -> str:
    """Today's date in UTC+9 as ``YYYY-MM-DD``, independent of host timezone."""
    now = (clock or system_clock)().astimezone(timezone.utc)
    return (now + timedelta(hours=KST_OFFSET_HOURS)).date().isoformat()


def _parse_number(text: str) -> float | None:
    stripped = text.strip()
    if not stripped:
        return None
    try:
        return float(stripped)
    except ValueError:
        return None


def _from_epoch_value(number: float, tz: tzinfo) -> datetime:
    if number > EPOCH_MILLISECONDS_THRESHOLD:
        return epoch_milliseconds_to_date(number, tz)
    return epoch_seconds_to_date(number, tz)


def _coerce_date(value: object, tz: tzinfo) -> DateLike:
    if isinstance(value, datetime):
        return value.astimezone(tz) if value.tzinfo is not None else value
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _from_epoch_value(value, tz)
    if isinstance(value, str):
        number = _parse_number(value)
        if number is not None:
            return _from_epoch_value(number, tz)
        parsed = _parse_full_date(value)
        return parsed.astimezone(tz) if parsed.tzinfo is not None else parsed
    raise TypeError(f"Unsupported date value type: {type(value).__name__}")


# Parts missing from the text are filled from these; a full date ignores both.
_PARSE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _parse_full_date(text: str) -> datetime:
    first, second = (date_parser.parse(text, default=default) for default in _PARSE_DEFAULTS)
    if first.date() != second.date():
        raise ValueError(f"Incomplete date: {text!r}")
    return first


def safe_format_date(
    value: object,
    pattern: str,
    *,
    tz: tzinfo = KST,
    log: logging.Logger | None = None,
) -> str:
    """Format a loosely typed date value for display, falling back to ``"-"``.

    Accepts ``date``/``datetime`` objects, epoch seconds or milliseconds (as
    numbers or numeric strings) and free-form date strings. Never raises.
    """
    if not value:
        return PLACEHOLDER

    log = log or logger
    try:
        parsed = _coerce_date(value, tz)
    except (ValueError, OverflowError, OSError) as e:
        log.debug(f"Unparseable date value {value!r}: {e}")
        return PLACEHOLDER
    except Exception as e:
        log.error(f"Date formatting error for {value!r}: {e}")
        return PLACEHOLDER

    try:
        return format_pattern(parsed, pattern)
    except Exception as e:
        log.error(f"Date formatting error for {value!r}: {e}")
        return PLACEHOLDER


__all__ = [
    "UNIX_EPOCH",
    "epoch_milliseconds_to_date",
    "epoch_seconds_to_date",
    "epoch_seconds_to_milliseconds",
    "format_epoch_milliseconds",
    "format_korean_date",
    "format_pattern",
    "kst_today_string",
    "safe_format_date",
    "to_unix_epoch_seconds",
]
