"""Frozen dataclasses passed between pipeline stages, plus JSON-friendly dict helpers."""

from dataclasses import dataclass, field
from typing import Any

STATUS_OK = "OK"
STATUS_NG = "NG"


@dataclass(frozen=True)
class LogRow:
    line: int
    call: str
    date: str
    time: str
    his_rst: str
    my_rst: str
    frequency: str
    mode: str
    extras: tuple[str, ...] = ()


@dataclass(frozen=True)
class NormalizedContact:
    qso_date: str  # YYYYMMDD, UTC
    time_on: str   # HHMM, UTC
    band: str
    mode: str


@dataclass(frozen=True)
class SignatureTag:
    program: str    # "SOTA", "POTA", "WWFF"
    reference: str  # "JA/TK-001", "JA-0001", "JAFF-0001"


@dataclass(frozen=True)
class ADIFRecord:
    qso_date: str
    time_on: str
    band: str
    mode: str
    call: str
    station: str
    operator: str
    my_sig: tuple[SignatureTag, ...]
    his_sig: tuple[SignatureTag, ...] | None = None
    freq: str = ""
    rst_sent: str = ""
    rst_rcvd: str = ""
    my_qth: str = ""


@dataclass(frozen=True)
class RowError:
    line: int
    kind: str  # "FormatError" or "RangeError"
    message: str


@dataclass(frozen=True)
class RequestContext:
    station: str
    operator: str
    my_references: str
    his_references: str = ""
    my_qth: str = ""


@dataclass(frozen=True)
class BatchResult:
    status: str
    records: tuple[ADIFRecord, ...] = field(default_factory=tuple)
    errors: tuple[RowError, ...] = field(default_factory=tuple)
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


def _sig_to_list(tags: tuple[SignatureTag, ...] | None) -> list[list[str]] | None:
    if tags is None:
        return None
    return [[t.program, t.reference] for t in tags]


def record_to_dict(record: ADIFRecord) -> dict[str, Any]:
    return {
        "qso_date": record.qso_date,
        "time_on": record.time_on,
        "band": record.band,
        "mode": record.mode,
        "call": record.call,
        "station": record.station,
        "operator": record.operator,
        "my_sig": _sig_to_list(record.my_sig),
        "his_sig": _sig_to_list(record.his_sig),
        "freq": record.freq,
        "rst_sent": record.rst_sent,
        "rst_rcvd": record.rst_rcvd,
        "my_qth": record.my_qth,
    }


def batch_to_dict(result: BatchResult) -> dict[str, Any]:
    """Convert a BatchResult to a dict ready for json.dumps / jsonify."""
    data: dict[str, Any] = {
        "status": result.status,
        "records": [record_to_dict(r) for r in result.records],
        "errors": [
            {"line": e.line, "kind": e.kind, "message": e.message}
            for e in result.errors
        ],
    }
    if result.message is not None:
        data["message"] = result.message
    return data
