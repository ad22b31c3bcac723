"""Tests for hamlog_adif/timeconv.py"""

from datetime import timezone

import pytest

from hamlog_adif.errors import FormatError
from hamlog_adif.timeconv import LOCAL_TZ, expand_year, normalize_time, zone_for_suffix


class TestNormalizeTime:
    @pytest.mark.parametrize("date_text,time_text,expected", [
        ("2000/01/01", "08:00J", ("19991231", "2300")),
        ("00/01/01", "08:00J", ("19991231", "2300")),
        ("78/01/01", "08:00J", ("19771231", "2300")),
        ("2024/03/01", "08:00J", ("20240229", "2300")),
        ("2024/02/29", "23:00U", ("20240229", "2300")),
        ("2024/02/29", "23:00Z", ("20240229", "2300")),
    ])
    def test_known_conversions(self, date_text, time_text, expected):
        assert normalize_time(date_text, time_text) == expected

    def test_lowercase_utc_suffix(self):
        assert normalize_time("2024/05/04", "12:34z") == ("20240504", "1234")
        assert normalize_time("2024/05/04", "12:34u") == ("20240504", "1234")

    def test_local_time_same_day(self):
        assert normalize_time("2024/05/04", "19:15J") == ("20240504", "1015")

    def test_local_time_crosses_midnight(self):
        assert normalize_time("2024/05/04", "00:05J") == ("20240503", "1505")

    def test_crosses_year_boundary(self):
        assert normalize_time("2025/01/01", "00:00J") == ("20241231", "1500")

    def test_single_digit_month_and_day(self):
        assert normalize_time("2024/5/4", "12:00Z") == ("20240504", "1200")

    def test_surrounding_whitespace_ignored(self):
        assert normalize_time(" 24/05/04 ", " 12:00Z ") == ("20240504", "1200")

    @pytest.mark.parametrize("date_text", ["2024/0A/29", "2024-02-29", "", "2024/02", "12345/01/01"])
    def test_invalid_date(self, date_text):
        with pytest.raises(FormatError, match="invalid date format"):
            normalize_time(date_text, "23:00Z")

    @pytest.mark.parametrize("time_text", ["23:0AZ", "23:00", "2300Z", "23:00ZZ", "3:00Z"])
    def test_invalid_time(self, time_text):
        with pytest.raises(FormatError, match="invalid time format"):
            normalize_time("2024/09/29", time_text)

    @pytest.mark.parametrize("date_text,time_text", [
        ("2023/02/29", "12:00Z"),
        ("2024/13/01", "12:00Z"),
        ("2024/04/31", "12:00Z"),
        ("2024/05/04", "24:00Z"),
        ("2024/05/04", "12:60J"),
    ])
    def test_impossible_date_or_time(self, date_text, time_text):
        with pytest.raises(FormatError):
            normalize_time(date_text, time_text)


class TestExpandYear:
    @pytest.mark.parametrize("year,expected", [
        (0, 2000),
        (24, 2024),
        (65, 2065),
        (66, 1966),
        (99, 1999),
        (100, 100),
        (2024, 2024),
    ])
    def test_pivot(self, year, expected):
        assert expand_year(year) == expected


class TestZoneForSuffix:
    @pytest.mark.parametrize("suffix", ["Z", "z", "U", "u"])
    def test_utc(self, suffix):
        assert zone_for_suffix(suffix) is timezone.utc

    @pytest.mark.parametrize("suffix", ["J", "j", "L", "A"])
    def test_local(self, suffix):
        assert zone_for_suffix(suffix) is LOCAL_TZ
