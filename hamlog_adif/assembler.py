"""Per-row normalization and batch assembly."""

import logging
from concurrent.futures import ThreadPoolExecutor

from hamlog_adif.bands import classify_band
from hamlog_adif.errors import ConversionError, FormatError
from hamlog_adif.ingest import ingest
from hamlog_adif.models import (
    STATUS_NG,
    STATUS_OK,
    ADIFRecord,
    BatchResult,
    LogRow,
    NormalizedContact,
    RequestContext,
    RowError,
)
from hamlog_adif.modes import normalize_mode
from hamlog_adif.references import parse_references
from hamlog_adif.timeconv import normalize_time

logger = logging.getLogger(__name__)


def normalize_row(row: LogRow) -> NormalizedContact:
    """Run the three normalizers over a row. Raises FormatError / RangeError."""
    qso_date, time_on = normalize_time(row.date, row.time)
    band = classify_band(row.frequency)
    mode = normalize_mode(row.mode)
    if not mode:
        raise FormatError("empty mode")
    return NormalizedContact(qso_date=qso_date, time_on=time_on, band=band, mode=mode)


def _try_normalize(row: LogRow) -> NormalizedContact | RowError:
    try:
        return normalize_row(row)
    except ConversionError as exc:
        logger.debug("Line %d rejected: %s", row.line, exc)
        return RowError(line=row.line, kind=type(exc).__name__, message=str(exc))


def assemble(rows, context: RequestContext, workers: int = 1,
             ingest_errors=()) -> BatchResult:
    """Merge normalized rows with request context into a BatchResult.

    Failed rows are left out of ``records`` and reported in ``errors``; the
    status stays OK. Raises FormatError if the "my" references are missing
    or any reference code is unrecognized.
    """
    my_sig = parse_references(context.my_references)
    if not my_sig:
        raise FormatError("no activation reference given")
    his_sig = parse_references(context.his_references) or None

    rows = list(rows)
    if workers > 1 and len(rows) > 1:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            outcomes = list(executor.map(_try_normalize, rows))
    else:
        outcomes = [_try_normalize(row) for row in rows]

    records = []
    errors = list(ingest_errors)
    for row, outcome in zip(rows, outcomes):
        if isinstance(outcome, RowError):
            errors.append(outcome)
            continue
        records.append(ADIFRecord(
            qso_date=outcome.qso_date,
            time_on=outcome.time_on,
            band=outcome.band,
            mode=outcome.mode,
            call=row.call,
            station=context.station.upper(),
            operator=context.operator.upper(),
            my_sig=my_sig,
            his_sig=his_sig,
            freq=row.frequency,
            rst_sent=row.his_rst,
            rst_rcvd=row.my_rst,
            my_qth=context.my_qth,
        ))

    errors.sort(key=lambda e: e.line)
    return BatchResult(status=STATUS_OK, records=tuple(records), errors=tuple(errors))


def convert(raw_text: str, context: RequestContext, workers: int = 1) -> BatchResult:
    """Full pipeline: ingest raw log text and assemble the batch.

    Whole-batch failures (already-ADIF input, unusable references) come back
    as an NG result with no records instead of raising.
    """
    try:
        rows, ingest_errors = ingest(raw_text)
        result = assemble(rows, context, workers=workers, ingest_errors=ingest_errors)
    except ConversionError as exc:
        logger.warning("Cannot convert log for %s: %s", context.station, exc)
        return BatchResult(status=STATUS_NG, message=str(exc))

    logger.info(
        "Converted log for %s on %s: %d records, %d rejected rows",
        context.station, context.my_references, len(result.records), len(result.errors),
    )
    return result
