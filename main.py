"""hamlog-adif — convert a Hamlog CSV export into ADIF records."""

import json
import logging
import sys
from argparse import ArgumentParser

from hamlog_adif.adif import write_adif
from hamlog_adif.assembler import convert
from hamlog_adif.models import RequestContext, batch_to_dict
from hamlog_adif.web import decode_upload


def build_parser() -> ArgumentParser:
    """Build the CLI argument parser."""
    parser = ArgumentParser(
        prog="hamlog-adif",
        description="Convert a Hamlog CSV export into ADIF QSO records.",
    )
    parser.add_argument("file", help="Hamlog CSV file, or '-' for stdin")
    parser.add_argument("--call", required=True, help="Station (activator) call sign")
    parser.add_argument("--operator", help="Operator call sign (default: --call)")
    parser.add_argument(
        "--references",
        required=True,
        help="Own activation reference(s), e.g. JA/TK-001 or 'JA-0001,JAFF-0001'",
    )
    parser.add_argument("--his-references", default="", help="Worked station's reference(s)")
    parser.add_argument("--my-qth", default="", help="Own grid/locality, passed through as-is")
    parser.add_argument("--encoding", default="cp932", help="Input encoding (default: cp932)")
    parser.add_argument(
        "--output",
        choices=["json", "adif"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument("--workers", type=int, default=1, help="Normalization threads")
    parser.add_argument("--verbose", action="store_true", help="Log rejected rows")
    return parser


def read_input(path: str, encoding: str) -> str:
    if path == "-":
        return decode_upload(sys.stdin.buffer.read(), encoding)
    with open(path, "rb") as f:
        return decode_upload(f.read(), encoding)


def run(args) -> int:
    """Convert the file named in args and print the result. Returns the exit code."""
    try:
        text = read_input(args.file, args.encoding)
    except (OSError, LookupError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    context = RequestContext(
        station=args.call,
        operator=args.operator or args.call,
        my_references=args.references,
        his_references=args.his_references,
        my_qth=args.my_qth,
    )
    result = convert(text, context, workers=args.workers)

    if not result.ok:
        print(f"Error: {result.message}", file=sys.stderr)
        return 1

    for error in result.errors:
        print(f"line {error.line}: {error.kind}: {error.message}", file=sys.stderr)

    if args.output == "adif":
        sys.stdout.write(write_adif(result))
    else:
        print(json.dumps(batch_to_dict(result), indent=2))
    return 0


def main():
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [ADIFGEN] %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    sys.exit(run(args))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
    except BrokenPipeError:
        sys.exit(0)
