import json
import threading
from collections import defaultdict

import jsonschema

from hamlog_adif.errors import FormatError
from hamlog_adif.references import parse_references

REQUIRED_FILES = ("filename",)
REFERENCE_FIELDS = ("references", "his_qth")


class RequestValidator:
    """Validates conversion request form fields against a JSON schema.

    Beyond the schema, reference fields must hold recognizable activation
    codes and the uploaded log file must be present.
    """

    def __init__(self, schema_path):
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        self._validator = jsonschema.Draft202012Validator(schema)
        self._lock = threading.Lock()
        self.reset_stats()

    def _check(self, form, files):
        """Yield (error_type, message) for every problem in the request."""
        for error in sorted(self._validator.iter_errors(form), key=lambda e: list(e.path)):
            yield error.validator, error.message

        for name in REFERENCE_FIELDS:
            value = form.get(name)
            if not isinstance(value, str):
                continue
            try:
                parse_references(value)
            except FormatError as exc:
                yield "reference", f"'{name}': {exc}"

        if files is not None:
            for name in REQUIRED_FILES:
                if name not in files:
                    yield "file", f"'{name}' is a required file"

    def validate(self, form, files=None):
        """Validate form fields, and uploaded file names when files is given.

        Returns:
            tuple: (is_valid: bool, errors: list[str])
        """
        problems = list(self._check(form, files))

        with self._lock:
            self._stats["total"] += 1
            if not problems:
                self._stats["valid"] += 1
                return True, []

            self._stats["invalid"] += 1
            for error_type, _ in problems:
                self._stats["error_types"][error_type] += 1

        return False, [message for _, message in problems]

    def get_stats(self):
        """Return a copy of the stats dict."""
        with self._lock:
            stats = dict(self._stats)
            stats["error_types"] = dict(stats["error_types"])
        return stats

    def reset_stats(self):
        """Reset all stat counters."""
        self._stats = {
            "total": 0,
            "valid": 0,
            "invalid": 0,
            "error_types": defaultdict(int),
        }
