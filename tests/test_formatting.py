"""Tests for date formatting and epoch conversions."""

from datetime import date, datetime, timedelta, timezone
from unittest.mock import Mock

from calendar_utils.formatting import (
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
from calendar_utils.models import KST

# 2025-04-24T00:00:00Z
APRIL_24_SECONDS = 1745452800


class TestFormatPattern:
    """Tests for format_pattern."""

    def test_padded_tokens(self):
        assert format_pattern(date(2025, 4, 8), "yyyy-MM-dd") == "2025-04-08"

    def test_unpadded_tokens(self):
        assert format_pattern(date(2025, 4, 8), "yyyy-M-d") == "2025-4-8"

    def test_korean_pattern(self):
        assert format_pattern(date(2025, 12, 31), "yyyy년 M월 d일") == "2025년 12월 31일"

    def test_repeated_tokens(self):
        assert format_pattern(date(2025, 4, 8), "dd/MM dd/MM") == "08/04 08/04"

    def test_single_letter_tokens_match_inside_words(self):
        assert format_pattern(date(2025, 4, 8), "today") == "to8ay"


class TestSafeFormatDate:
    """Tests for safe_format_date."""

    def test_empty_values(self):
        assert safe_format_date(None, "yyyy-MM-dd") == "-"
        assert safe_format_date("", "yyyy-MM-dd") == "-"
        assert safe_format_date(0, "yyyy-MM-dd") == "-"

    def test_date_string(self):
        assert safe_format_date("2025-04-24", "yyyy년 MM월 dd일") == "2025년 04월 24일"

    def test_epoch_seconds(self):
        assert safe_format_date(1714022400, "yyyy/MM/dd") == "2024/04/25"

    def test_epoch_milliseconds(self):
        assert safe_format_date(1714022400000, "yyyy/MM/dd") == "2024/04/25"

    def test_numeric_string(self):
        assert safe_format_date("1714022400", "yyyy/MM/dd") == "2024/04/25"
        assert safe_format_date(" 1714022400000 ", "yyyy/MM/dd") == "2024/04/25"

    def test_aware_string_converted_to_kst(self):
        assert safe_format_date("2025-04-23T20:00:00Z", "yyyy-MM-dd") == "2025-04-24"

    def test_custom_timezone(self):
        assert safe_format_date("2025-04-23T20:00:00Z", "yyyy-MM-dd", tz=timezone.utc) == "2025-04-23"

    def test_date_objects(self):
        assert safe_format_date(date(2025, 4, 8), "yyyy.M.d") == "2025.4.8"
        moment = datetime(2025, 4, 23, 20, 0, tzinfo=timezone.utc)
        assert safe_format_date(moment, "yyyy-MM-dd") == "2025-04-24"

    def test_unparseable_string(self):
        log = Mock()
        assert safe_format_date("garbage", "yyyy-MM-dd", log=log) == "-"
        log.error.assert_not_called()

    def test_out_of_range_epoch(self):
        assert safe_format_date(10**20, "yyyy-MM-dd") == "-"

    def test_unexpected_failure_is_logged(self):
        log = Mock()
        assert safe_format_date(object(), "yyyy-MM-dd", log=log) == "-"
        log.error.assert_called_once()

    def test_bad_pattern_is_logged(self):
        log = Mock()
        assert safe_format_date("2025-04-24", None, log=log) == "-"
        log.error.assert_called_once()


class TestEpochConversions:
    """Tests for epoch helpers."""

    def test_to_unix_epoch_seconds(self):
        assert to_unix_epoch_seconds(datetime(2025, 4, 24, tzinfo=timezone.utc)) == APRIL_24_SECONDS
        assert to_unix_epoch_seconds(datetime(2025, 4, 24, 9, 0, tzinfo=KST)) == APRIL_24_SECONDS

    def test_naive_values_are_utc(self):
        assert to_unix_epoch_seconds(date(2025, 4, 24)) == APRIL_24_SECONDS
        assert to_unix_epoch_seconds(datetime(2025, 4, 24)) == APRIL_24_SECONDS

    def test_rounds_down(self):
        assert to_unix_epoch_seconds(datetime(1970, 1, 1, 0, 0, 0, 500000, tzinfo=timezone.utc)) == 0
        assert to_unix_epoch_seconds(datetime(1969, 12, 31, 23, 59, 59, 500000, tzinfo=timezone.utc)) == -1

    def test_round_trip(self):
        for seconds in (0, 1, -86400, 1714022400, APRIL_24_SECONDS, 4102444800):
            assert to_unix_epoch_seconds(epoch_seconds_to_date(seconds)) == seconds

    def test_seconds_to_milliseconds(self):
        assert epoch_seconds_to_milliseconds(APRIL_24_SECONDS) == 1745452800000

    def test_epoch_to_date_uses_kst(self):
        moment = epoch_seconds_to_date(0)
        assert moment == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert moment.hour == 9
        assert epoch_milliseconds_to_date(1745452800000) == datetime(2025, 4, 24, 9, 0, tzinfo=KST)

    def test_format_epoch_milliseconds(self):
        assert format_epoch_milliseconds(1745452800000) == "2025-04-24"
        assert format_epoch_milliseconds(1745452800000, "yyyy년 MM월 dd일") == "2025년 04월 24일"

    def test_format_epoch_milliseconds_ignores_unpadded_tokens(self):
        assert format_epoch_milliseconds(1745452800000, "yyyy-M-d") == "2025-M-d"


class TestKstTodayString:
    """Tests for kst_today_string."""

    def test_before_midnight_kst(self):
        clock = lambda: datetime(2025, 4, 23, 14, 59, tzinfo=timezone.utc)  # noqa: E731
        assert kst_today_string(clock=clock) == "2025-04-23"

    def test_after_midnight_kst(self):
        clock = lambda: datetime(2025, 4, 23, 15, 0, tzinfo=timezone.utc)  # noqa: E731
        assert kst_today_string(clock=clock) == "2025-04-24"

    def test_independent_of_clock_offset(self):
        pst = timezone(timedelta(hours=-8))
        clock = lambda: datetime(2025, 4, 23, 8, 0, tzinfo=pst)  # noqa: E731
        assert kst_today_string(clock=clock) == "2025-04-24"


class TestPartialDateStrings:
    """Strings without a full year/month/day are not completed from the clock."""

    def test_time_only(self):
        assert safe_format_date("10:30", "yyyy-MM-dd") == "-"

    def test_weekday_only(self):
        assert safe_format_date("Monday", "yyyy-MM-dd") == "-"

    def test_month_only(self):
        assert safe_format_date("April", "yyyy-MM-dd") == "-"
        assert safe_format_date("2025-04", "yyyy-MM-dd") == "-"

    def test_not_logged_as_error(self):
        log = Mock()
        assert safe_format_date("April", "yyyy-MM-dd", log=log) == "-"
        log.error.assert_not_called()

    def test_full_written_date(self):
        assert safe_format_date("April 8, 2025", "yyyy-MM-dd") == "2025-04-08"
        assert safe_format_date("2025-04-08 10:30", "yyyy.M.d") == "2025.4.8"


class TestFormatKoreanDate:
    """Tests for format_korean_date."""

    def test_numeric_korean_format(self):
        assert format_korean_date(date(2025, 4, 8)) == "2025. 4. 8."
        assert format_korean_date(date(2025, 12, 31)) == "2025. 12. 31."

    def test_aware_datetime_read_in_kst(self):
        moment = datetime(2025, 4, 7, 15, 0, tzinfo=timezone.utc)
        assert format_korean_date(moment) == "2025. 4. 8."
        assert format_korean_date(moment, tz=timezone.utc) == "2025. 4. 7."

    def test_naive_datetime(self):
        assert format_korean_date(datetime(2025, 4, 8, 23, 59)) == "2025. 4. 8."
