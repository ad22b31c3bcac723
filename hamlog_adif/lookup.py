"""Generic lookups over declarative tables; declaration order is the tie-break."""

from typing import Iterable, TypeVar

T = TypeVar("T")


def substitute(text: str, pairs: Iterable[tuple[str, str]]) -> str:
    """Apply each (token, replacement) pair in order, replacing every occurrence.

    Earlier entries rewrite the string before later entries are tested.
    """
    for token, replacement in pairs:
        text = text.replace(token, replacement)
    return text


def find_interval(value: float, intervals: Iterable[tuple[float, float, T]]) -> T | None:
    """Return the label of the first (lower, upper, label) interval containing value.

    Both bounds are inclusive. Returns None when nothing matches.
    """
    for lower, upper, label in intervals:
        if lower <= value <= upper:
            return label
    return None
