"""Activation reference codes → SignatureTag sequences."""

import re

from hamlog_adif.errors import FormatError
from hamlog_adif.models import SignatureTag

# Checked in order: WWFF codes also look like POTA codes.
REFERENCE_PATTERNS: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r"[A-Z0-9]{1,4}/[A-Z0-9]{2}-\d{3}"), "SOTA"),
    (re.compile(r"[A-Z0-9]{1,4}FF-\d{4}"), "WWFF"),
    (re.compile(r"[A-Z0-9]{1,4}-\d{4,5}"), "POTA"),
)

_SEPARATORS = re.compile(r"[\s,]+")


def program_for(reference: str) -> str:
    for pattern, program in REFERENCE_PATTERNS:
        if pattern.fullmatch(reference):
            return program
    raise FormatError(f"unknown reference: {reference!r}")


def parse_references(text: str | None) -> tuple[SignatureTag, ...]:
    """Split a comma/space separated list of reference codes into tags.

    Order is preserved and duplicates are dropped. An empty or blank string
    yields an empty tuple; an unrecognized code raises FormatError.
    """
    if not text:
        return ()
    tags = []
    seen = set()
    for code in _SEPARATORS.split(text.strip().upper()):
        if not code or code in seen:
            continue
        seen.add(code)
        tags.append(SignatureTag(program=program_for(code), reference=code))
    return tuple(tags)
