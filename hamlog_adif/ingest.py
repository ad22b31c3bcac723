"""Raw Hamlog CSV text → LogRow values.

Turbo HAMLOG CSV column order:
  call, date, time, his RST, my RST, frequency, mode, code, grid/locality,
  QSL, name, QTH, remarks 1, remarks 2, flag
"""

import csv
import logging

from hamlog_adif.errors import ScopeMismatch
from hamlog_adif.models import LogRow, RowError

logger = logging.getLogger(__name__)

ADIF_MARKER = "<ADIF_VER"

MIN_FIELDS = 7   # up to and including mode
MAX_FIELDS = 15


def is_adif(raw_text: str) -> bool:
    """True when the text is already an ADIF export.

    A plain substring test: a CSV whose free-text column happens to contain
    the marker is rejected too.
    """
    return ADIF_MARKER in raw_text


def _row_from_fields(line: int, fields: list[str]) -> LogRow:
    fields = [f.strip() for f in fields]
    return LogRow(
        line=line,
        call=fields[0].upper(),
        date=fields[1],
        time=fields[2],
        his_rst=fields[3],
        my_rst=fields[4],
        frequency=fields[5],
        mode=fields[6],
        extras=tuple(fields[MIN_FIELDS:]),
    )


def ingest(raw_text: str) -> tuple[list[LogRow], list[RowError]]:
    """Split raw log text into rows.

    Returns (rows, errors) in document order. Raises ScopeMismatch when the
    text is already ADIF. Malformed rows become RowErrors and do not stop
    the remaining rows from being read.
    """
    if is_adif(raw_text):
        raise ScopeMismatch("input is already in ADIF format")

    rows: list[LogRow] = []
    errors: list[RowError] = []
    # Each physical line is parsed on its own; quoted fields never span lines.
    for line, text in enumerate(raw_text.splitlines(), 1):
        reader = csv.reader([text], delimiter=",", skipinitialspace=True, strict=True)
        try:
            fields = next(reader, [])
        except csv.Error as exc:
            errors.append(RowError(line=line, kind="FormatError",
                                   message=f"unparsable row: {exc}"))
            continue

        if not fields or all(not f.strip() for f in fields):
            continue
        if not MIN_FIELDS <= len(fields) <= MAX_FIELDS:
            errors.append(RowError(
                line=line,
                kind="FormatError",
                message=f"expected {MIN_FIELDS}-{MAX_FIELDS} fields, got {len(fields)}",
            ))
            continue
        rows.append(_row_from_fields(line, fields))

    logger.debug("Ingested %d rows, %d malformed", len(rows), len(errors))
    return rows, errors
