"""Tests for DateTimeUtils variants, relative formatting and expiry."""

from __future__ import annotations

import re
from datetime import datetime, timedelta

import pytest

from datefmt import DateTimeFormatConfig, DateTimeUtils, DateTimeVariant, format_datetime, is_expired
from datefmt.intl import InvalidFormatOptionError

SAMPLE_DATE = "2023-08-28T23:57:23Z"
EN_US_UTC = DateTimeFormatConfig(language_code="en-US", time_zone="UTC")


@pytest.mark.unit
class TestFormat:
    """Tests for DateTimeUtils.format()."""

    def test_date_variant(self, utils: DateTimeUtils) -> None:
        assert utils.format(SAMPLE_DATE, "date", EN_US_UTC) == "08/28/2023"

    def test_datetime_short_variant(self, utils: DateTimeUtils) -> None:
        result = utils.format(SAMPLE_DATE, "datetime-short", EN_US_UTC)
        assert re.fullmatch(r"\d{2}/\d{2}/\d{4}, \d{1,2}:\d{2}\s[AP]M", result)
        assert result.startswith("08/28/2023, 11:57")

    def test_datetime_short_is_default(self, utils: DateTimeUtils) -> None:
        assert utils.format(SAMPLE_DATE, config=EN_US_UTC) == utils.format(
            SAMPLE_DATE, DateTimeVariant.DATETIME_SHORT, EN_US_UTC
        )

    def test_datetime_long_variant(self, utils: DateTimeUtils) -> None:
        result = utils.format(SAMPLE_DATE, "datetime-long", EN_US_UTC)
        assert len(result) > 10
        assert "Monday" in result
        assert "August 28, 2023" in result
        assert "11:57:23" in result
        assert result.startswith("Monday, August 28, 2023, 11:57:23")

    def test_custom_variant_with_weekday(self, utils: DateTimeUtils) -> None:
        config = DateTimeFormatConfig(language_code="en-GB", time_zone="UTC")
        result = utils.format(SAMPLE_DATE, "custom", config, {"weekday": "long"})
        assert result in ["Monday", "Tuesday"]

    def test_custom_weekday_follows_time_zone(self, utils: DateTimeUtils) -> None:
        config = DateTimeFormatConfig(language_code="en-GB", time_zone="Asia/Tokyo")
        assert utils.format(SAMPLE_DATE, "custom", config, {"weekday": "long"}) == "Tuesday"

    def test_custom_without_options_is_numeric_date(self, utils: DateTimeUtils) -> None:
        assert utils.format(SAMPLE_DATE, "custom", EN_US_UTC) == "8/28/2023"

    def test_unrecognized_variant_behaves_like_custom(self, utils: DateTimeUtils) -> None:
        assert utils.format(SAMPLE_DATE, "fancy", EN_US_UTC) == utils.format(
            SAMPLE_DATE, "custom", EN_US_UTC
        )

    def test_string_without_offset_is_utc(self, utils: DateTimeUtils) -> None:
        for variant in ("date", "datetime-short", "datetime-long"):
            assert utils.format("2023-08-28T23:57:23", variant, EN_US_UTC) == utils.format(
                SAMPLE_DATE, variant, EN_US_UTC
            )

    def test_offset_string(self, utils: DateTimeUtils) -> None:
        result = utils.format("2023-08-29T01:57:23+02:00", "datetime-short", EN_US_UTC)
        assert result.startswith("08/28/2023, 11:57")

    def test_accepts_canonical_datetime(self, utils: DateTimeUtils) -> None:
        aware = datetime.fromisoformat("2023-08-28T23:57:23+00:00")
        assert utils.format(aware, "date", EN_US_UTC) == "08/28/2023"

    def test_config_time_zone_applied(self, utils: DateTimeUtils) -> None:
        config = DateTimeFormatConfig(language_code="en-US", time_zone="America/New_York")
        assert utils.format(SAMPLE_DATE, "date", config) == "08/28/2023"
        config = DateTimeFormatConfig(language_code="en-US", time_zone="Asia/Tokyo")
        assert utils.format(SAMPLE_DATE, "date", config) == "08/29/2023"

    def test_override_options_win(self, utils: DateTimeUtils) -> None:
        result = utils.format(SAMPLE_DATE, "date", EN_US_UTC, {"month": "numeric", "day": "numeric"})
        assert result == "8/28/2023"

    def test_override_time_zone_wins(self, utils: DateTimeUtils) -> None:
        result = utils.format(SAMPLE_DATE, "date", EN_US_UTC, {"time_zone": "Asia/Tokyo"})
        assert result == "08/29/2023"

    def test_default_language(self, clock) -> None:
        utils = DateTimeUtils(default_language="de-DE", default_time_zone="UTC", now=clock)
        assert utils.format(SAMPLE_DATE, "date") == "28.08.2023"

    def test_default_time_zone_is_detected(self, clock, monkeypatch: pytest.MonkeyPatch) -> None:
        from datefmt import formatter

        monkeypatch.setattr(formatter, "detect_time_zone", lambda: "Asia/Tokyo")
        utils = DateTimeUtils(now=clock)
        assert utils.format(SAMPLE_DATE, "date", DateTimeFormatConfig(language_code="en-US")) == (
            "08/29/2023"
        )

    @pytest.mark.parametrize("variant", list(DateTimeVariant))
    @pytest.mark.parametrize("empty", ["", None])
    def test_empty_input(self, utils: DateTimeUtils, variant: DateTimeVariant, empty) -> None:
        assert utils.format(empty, variant, EN_US_UTC) == ""

    def test_malformed_input_propagates(self, utils: DateTimeUtils) -> None:
        with pytest.raises(ValueError):
            utils.format("definitely not a date", "date", EN_US_UTC)

    def test_style_variant_rejects_field_overrides(self, utils: DateTimeUtils) -> None:
        with pytest.raises(InvalidFormatOptionError):
            utils.format(SAMPLE_DATE, "datetime-long", EN_US_UTC, {"weekday": "long"})

    def test_unknown_time_zone_fails_at_format(self, utils: DateTimeUtils) -> None:
        config = DateTimeFormatConfig(language_code="en-US", time_zone="Not/AZone")
        with pytest.raises(LookupError):
            utils.format(SAMPLE_DATE, "date", config)


@pytest.mark.unit
class TestFormatRelative:
    """Tests for the relative variant, with a frozen clock."""

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [
            (timedelta(seconds=-30), "30 seconds ago"),
            (timedelta(seconds=90), "in 2 minutes"),
            (timedelta(minutes=-59), "59 minutes ago"),
            (timedelta(hours=5), "in 5 hours"),
            (timedelta(days=-2), "2 days ago"),
            (timedelta(hours=36), "in 2 days"),
            (timedelta(days=29), "in 29 days"),
            (timedelta(days=-45), "2 months ago"),
            (timedelta(days=200), "in 7 months"),
            (timedelta(days=-400), "1 year ago"),
            (timedelta(days=365 * 3), "in 3 years"),
        ],
    )
    def test_ladder(self, utils: DateTimeUtils, fixed_now: datetime, offset: timedelta, expected: str) -> None:
        result = utils.format(fixed_now + offset, "relative", DateTimeFormatConfig(language_code="en-US"))
        assert result == expected

    def test_exactly_now_reads_as_past(self, utils: DateTimeUtils, fixed_now: datetime) -> None:
        assert utils.format(fixed_now, "relative", EN_US_UTC) == "0 seconds ago"

    def test_sub_second_past_reads_as_past(self, utils: DateTimeUtils, fixed_now: datetime) -> None:
        past = fixed_now - timedelta(milliseconds=300)
        assert utils.format(past, "relative", EN_US_UTC) == "0 seconds ago"

    def test_past_contains_ago(self, utils: DateTimeUtils, fixed_now: datetime) -> None:
        past = fixed_now - timedelta(days=2)
        assert "ago" in utils.format(past, "relative", DateTimeFormatConfig(language_code="en-US"))

    def test_future_has_no_ago(self, utils: DateTimeUtils, fixed_now: datetime) -> None:
        future = fixed_now + timedelta(days=1)
        assert "ago" not in utils.format(future, "relative", DateTimeFormatConfig(language_code="en-US"))

    def test_thirty_day_month_boundary(self, utils: DateTimeUtils, fixed_now: datetime) -> None:
        # 30 days is already a month; calendar length is ignored
        result = utils.format(fixed_now - timedelta(days=30), "relative", EN_US_UTC)
        assert result == "1 month ago"

    def test_ignores_options_and_time_zone(self, utils: DateTimeUtils, fixed_now: datetime) -> None:
        config = DateTimeFormatConfig(language_code="en-US", time_zone="Not/AZone")
        result = utils.format(fixed_now - timedelta(hours=3), "relative", config, {"bogus": True})
        assert result == "3 hours ago"

    def test_real_clock(self) -> None:
        past = datetime.now().astimezone() - timedelta(days=2)
        assert "ago" in DateTimeUtils().format(past, "relative", DateTimeFormatConfig(language_code="en-US"))


@pytest.mark.unit
class TestIsExpired:
    def test_past_is_expired(self, utils: DateTimeUtils, fixed_now: datetime) -> None:
        assert utils.is_expired(fixed_now - timedelta(days=1)) is True

    def test_future_is_not_expired(self, utils: DateTimeUtils, fixed_now: datetime) -> None:
        assert utils.is_expired(fixed_now + timedelta(days=1)) is False

    def test_now_is_not_expired(self, utils: DateTimeUtils, fixed_now: datetime) -> None:
        assert utils.is_expired(fixed_now) is False

    def test_string_input(self, utils: DateTimeUtils) -> None:
        assert utils.is_expired(SAMPLE_DATE) is True
        assert utils.is_expired("2999-01-01T00:00:00") is False


@pytest.mark.unit
class TestModuleFunctions:
    def test_format_datetime(self) -> None:
        assert format_datetime(SAMPLE_DATE, "date", EN_US_UTC) == "08/28/2023"
        assert format_datetime("", "date") == ""

    def test_is_expired(self) -> None:
        assert is_expired(SAMPLE_DATE) is True
        assert is_expired(datetime.now().astimezone() + timedelta(days=1)) is False
