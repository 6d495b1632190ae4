# ABOUTME: Tests for daily challenge seed derivation
# ABOUTME: Validates reference timezone day boundaries, hashing and the reset countdown

from datetime import datetime, timedelta, timezone

import pytest

from paintingguessr.sampling.daily import (
    daily_seed,
    reference_date,
    string_hash,
    time_until_next_daily,
    today_date_string,
)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestStringHash:
    """Tests for the 31-multiplier string hash"""

    def test_known_values(self):
        assert string_hash("") == 0
        assert string_hash("a") == 97
        assert string_hash("ab") == 3105

    def test_wraps_to_signed_32_bit(self):
        value = string_hash("2025-03-10_v2" * 4)
        assert -2 ** 31 <= value < 2 ** 31


class TestReferenceDate:
    """Daily boundaries follow midnight at UTC-5"""

    def test_early_utc_morning_is_previous_day(self):
        assert today_date_string(utc(2025, 1, 1, 3, 0)) == "2024-12-31"

    def test_boundary_at_five_utc(self):
        assert reference_date(utc(2025, 3, 11, 4, 59, 59)).isoformat() == "2025-03-10"
        assert reference_date(utc(2025, 3, 11, 5, 0, 0)).isoformat() == "2025-03-11"

    def test_other_timezones_are_converted(self):
        tokyo = timezone(timedelta(hours=9))
        assert today_date_string(datetime(2025, 3, 11, 9, 0, tzinfo=tokyo)) == "2025-03-10"

    def test_naive_datetime_is_rejected(self):
        with pytest.raises(ValueError):
            today_date_string(datetime(2025, 3, 10, 12, 0))

    def test_non_datetime_is_rejected(self):
        with pytest.raises(TypeError):
            reference_date("2025-03-10")


class TestDailySeed:
    """Tests for daily_seed"""

    def test_stable_within_reference_day(self):
        assert daily_seed(utc(2025, 3, 10, 6, 0)) == daily_seed(utc(2025, 3, 11, 4, 59))

    def test_changes_at_reference_midnight(self):
        assert daily_seed(utc(2025, 3, 11, 4, 59)) != daily_seed(utc(2025, 3, 11, 5, 0))

    def test_matches_hash_of_date_and_version(self):
        assert daily_seed(utc(2025, 3, 10, 12, 0)) == abs(string_hash("2025-03-10_v2"))

    def test_version_changes_seed(self):
        now = utc(2025, 3, 10, 12, 0)
        assert daily_seed(now, version="_v3") != daily_seed(now)

    def test_seed_is_never_negative(self):
        start = utc(2025, 1, 1, 12, 0)
        seeds = [daily_seed(start + timedelta(days=n)) for n in range(366)]
        assert all(seed >= 0 for seed in seeds)
        assert len(set(seeds)) > 360


class TestCountdown:
    """Tests for time until the next daily challenge"""

    def test_countdown_mid_day(self):
        """17:30:15 UTC is 12:30:15 at UTC-5, so 11:29:45 remain"""
        assert time_until_next_daily(utc(2025, 3, 10, 17, 30, 15)) == {
            "hours": 11,
            "minutes": 29,
            "seconds": 45,
        }

    def test_countdown_right_after_reset(self):
        assert time_until_next_daily(utc(2025, 3, 11, 5, 0, 0)) == {
            "hours": 24,
            "minutes": 0,
            "seconds": 0,
        }

    def test_countdown_one_second_before_reset(self):
        assert time_until_next_daily(utc(2025, 3, 11, 4, 59, 59)) == {
            "hours": 0,
            "minutes": 0,
            "seconds": 1,
        }
