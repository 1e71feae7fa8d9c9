"""Logic for summarizing a sort run as a JSON report."""

import hashlib
import json
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any

from member_sorter.sort_options import SortOptions
from member_sorter.sort_result import SortResult


class SortReport:
    """Collects per-file sort outcomes and writes them as JSON."""

    def __init__(self, options: SortOptions) -> None:
        """Initialize the report with the options the run uses."""
        self.options = options
        self.results: list[tuple[str, SortResult]] = []
        self.start_time = time.time()

    def add_result(self, path: str, result: SortResult) -> None:
        """Record the outcome for one file."""
        self.results.append((path, result))

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        options = asdict(self.options)
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "options": options,
                "options_hash": _options_hash(options),
                "total_files": len(self.results),
            },
            "results": [
                {
                    "path": file_path,
                    "status": r.status.value,
                    "message": r.message,
                    "members": [
                        {"name": m.name, "kind": m.kind, "visibility": m.visibility}
                        for m in r.members
                    ],
                }
                for file_path, r in self.results
            ],
            "stats": self._compute_stats(),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        status_counts: dict[str, int] = {}
        kind_counts: dict[str, int] = {}
        for _, r in self.results:
            status_counts[r.status.value] = status_counts.get(r.status.value, 0) + 1
            for m in r.members:
                kind_counts[m.kind] = kind_counts.get(m.kind, 0) + 1
        return {"status_counts": status_counts, "kind_counts": kind_counts}


def _options_hash(options: dict[str, Any]) -> str:
    # Canonical JSON so the hash ignores key order.
    canonical = json.dumps(options, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
