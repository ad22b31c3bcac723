"""Thread-safe running totals of conversion outcomes, reported by /health."""

import threading

from hamlog_adif.models import BatchResult


class ConversionStats:
    def __init__(self):
        self._lock = threading.Lock()
        self._batches = {"OK": 0, "NG": 0}
        self._records = 0
        self._rejected_rows = 0

    def record(self, result: BatchResult):
        """Count one finished batch."""
        with self._lock:
            self._batches[result.status] = self._batches.get(result.status, 0) + 1
            self._records += len(result.records)
            self._rejected_rows += len(result.errors)

    def get_stats(self) -> dict:
        with self._lock:
            return {
                "batches": sum(self._batches.values()),
                "batches_ok": self._batches.get("OK", 0),
                "batches_ng": self._batches.get("NG", 0),
                "records": self._records,
                "rejected_rows": self._rejected_rows,
            }
