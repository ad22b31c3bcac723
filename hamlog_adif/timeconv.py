"""Hamlog date/time text → ADIF QSO_DATE / TIME_ON in UTC.

Hamlog writes dates as ``YY/MM/DD`` or ``YYYY/MM/DD`` and times as ``HH:MM``
followed by a zone letter: ``Z``/``U`` for UTC, anything else (usually ``J``)
for Japan Standard Time.
"""

import re
from datetime import datetime, timedelta, timezone

from hamlog_adif.errors import FormatError

DATE_PATTERN = re.compile(r"(\d{1,4})/(\d{1,2})/(\d{1,2})")
TIME_PATTERN = re.compile(r"(\d{2}):(\d{2})([A-Za-z])")

UTC_SUFFIXES = ("Z", "U")
LOCAL_TZ = timezone(timedelta(hours=9))

# Two-digit years above the pivot are 19xx, the rest 20xx.
YEAR_PIVOT = 65

ADIF_DATE_FORMAT = "%Y%m%d"
ADIF_TIME_FORMAT = "%H%M"


def expand_year(year: int) -> int:
    if year >= 100:
        return year
    if year > YEAR_PIVOT:
        return 1900 + year
    return 2000 + year


def zone_for_suffix(suffix: str) -> timezone:
    if suffix.upper() in UTC_SUFFIXES:
        return timezone.utc
    return LOCAL_TZ


def normalize_time(date_text: str, time_text: str) -> tuple[str, str]:
    """Convert a Hamlog date and time+zone pair to ADIF (date, time) in UTC.

    Raises FormatError when either string does not match its pattern or
    names an impossible calendar date or clock time.
    """
    date_match = DATE_PATTERN.fullmatch(date_text.strip())
    if not date_match:
        raise FormatError(f"invalid date format: {date_text!r}")

    time_match = TIME_PATTERN.fullmatch(time_text.strip())
    if not time_match:
        raise FormatError(f"invalid time format: {time_text!r}")

    year, month, day = (int(g) for g in date_match.groups())
    hour, minute = int(time_match.group(1)), int(time_match.group(2))
    tz = zone_for_suffix(time_match.group(3))

    try:
        logged = datetime(expand_year(year), month, day, hour, minute, tzinfo=tz)
        utc = logged.astimezone(timezone.utc)
    except (ValueError, OverflowError) as exc:
        raise FormatError(f"invalid date/time {date_text!r} {time_text!r}: {exc}") from exc

    return utc.strftime(ADIF_DATE_FORMAT), utc.strftime(ADIF_TIME_FORMAT)
