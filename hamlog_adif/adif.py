"""Render a BatchResult as an ADIF (.adi) document."""

from datetime import datetime, timezone

from hamlog_adif.models import ADIFRecord, BatchResult, SignatureTag

ADIF_VERSION = "3.1.4"
PROGRAM_ID = "hamlog-adif"

# Program-specific reference fields, own side and worked side.
MY_REF_FIELDS = {"SOTA": "MY_SOTA_REF", "POTA": "MY_POTA_REF", "WWFF": "MY_WWFF_REF"}
HIS_REF_FIELDS = {"SOTA": "SOTA_REF", "POTA": "POTA_REF", "WWFF": "WWFF_REF"}


def format_field(name: str, value: str) -> str:
    """'<NAME:len>value', or '' for an empty value."""
    if not value:
        return ""
    return f"<{name.upper()}:{len(value)}>{value}"


def _sig_fields(tags: tuple[SignatureTag, ...], sig_name: str,
                ref_fields: dict[str, str]) -> list[tuple[str, str]]:
    # ADIF carries a single SIG/SIG_INFO pair; the first tag takes it and
    # every tag also lands in its program-specific *_REF field.
    fields = [(sig_name, tags[0].program), (f"{sig_name}_INFO", tags[0].reference)]
    refs: dict[str, list[str]] = {}
    for tag in tags:
        if tag.program in ref_fields:
            refs.setdefault(ref_fields[tag.program], []).append(tag.reference)
    fields.extend((name, ",".join(values)) for name, values in refs.items())
    return fields


def format_record(record: ADIFRecord) -> str:
    fields = [
        ("QSO_DATE", record.qso_date),
        ("TIME_ON", record.time_on),
        ("CALL", record.call),
        ("BAND", record.band),
        ("MODE", record.mode),
        ("FREQ", record.freq),
        ("RST_SENT", record.rst_sent),
        ("RST_RCVD", record.rst_rcvd),
        ("STATION_CALLSIGN", record.station),
        ("OPERATOR", record.operator),
    ]
    fields.extend(_sig_fields(record.my_sig, "MY_SIG", MY_REF_FIELDS))
    if record.his_sig:
        fields.extend(_sig_fields(record.his_sig, "SIG", HIS_REF_FIELDS))

    parts = [format_field(name, value) for name, value in fields]
    return " ".join(p for p in parts if p) + " <EOR>"


def write_adif(result: BatchResult, created: datetime | None = None) -> str:
    """Return the full ADIF document for the records in result."""
    created = created or datetime.now(timezone.utc)
    header = " ".join([
        f"Generated by {PROGRAM_ID}",
        format_field("ADIF_VER", ADIF_VERSION),
        format_field("PROGRAMID", PROGRAM_ID),
        format_field("CREATED_TIMESTAMP", created.strftime("%Y%m%d %H%M%S")),
        "<EOH>",
    ])
    lines = [header]
    lines.extend(format_record(r) for r in result.records)
    return "\n".join(lines) + "\n"
