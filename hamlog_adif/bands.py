"""Frequency (MHz) → ADIF band designator."""

import math

from hamlog_adif.errors import FormatError, RangeError
from hamlog_adif.lookup import find_interval

# (lower MHz, upper MHz, band), inclusive on both ends, scanned in order.
# 3cm appears twice: the two gazetted sub-allocations of the same band.
BAND_TABLE: tuple[tuple[float, float, str], ...] = (
    (0.1357, 0.1378, "2190m"),
    (0.472, 0.479, "630m"),
    (1.8, 1.9125, "160m"),
    (3.5, 3.805, "80m"),
    (7.0, 7.2, "40m"),
    (10.0, 10.15, "30m"),
    (14.0, 14.35, "20m"),
    (18.0, 18.168, "17m"),
    (21.0, 21.45, "15m"),
    (24.0, 24.99, "12m"),
    (28.0, 29.7, "10m"),
    (50.0, 54.0, "6m"),
    (144.0, 146.0, "2m"),
    (430.0, 440.0, "70cm"),
    (1200.0, 1300.0, "23cm"),
    (2400.0, 2450.0, "13cm"),
    (5650.0, 5850.0, "6cm"),
    (10000.0, 10250.0, "3cm"),
    (10450.0, 10500.0, "3cm"),
)


def parse_frequency(frequency_mhz_text: str) -> float:
    try:
        freq = float(frequency_mhz_text.strip())
    except ValueError as exc:
        raise FormatError(f"invalid frequency: {frequency_mhz_text!r}") from exc
    if not math.isfinite(freq):
        raise FormatError(f"invalid frequency: {frequency_mhz_text!r}")
    return freq


def classify_band(frequency_mhz_text: str) -> str:
    """Return the band designator for a frequency in MHz.

    Raises FormatError if the text is not a number and RangeError if the
    frequency falls outside every known allocation.
    """
    freq = parse_frequency(frequency_mhz_text)
    band = find_interval(freq, BAND_TABLE)
    if band is None:
        raise RangeError(f"unknown band: {frequency_mhz_text!r}")
    return band
