"""Logic for generating reports on an annotation run."""

import json
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any

from semantic_codemod.annotation_stats import AnnotationStats, FileResult


class AnnotationReport:
    """Collects and summarizes the per-file results of an annotation run."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.results: list[FileResult] = []
        self.start_time = time.time()

    def add_result(self, result: FileResult) -> None:
        """Add a single file result to the report."""
        self.results.append(result)

    @property
    def changed(self) -> list[FileResult]:
        """Return results whose text changed."""
        return [r for r in self.results if r.changed]

    @property
    def failed(self) -> list[FileResult]:
        """Return results that could not be processed."""
        return [r for r in self.results if r.error is not None]

    def totals(self) -> dict[str, Any]:
        """Aggregate node counts and file outcomes across all results."""
        stats = AnnotationStats()
        for r in self.results:
            stats.merge(r.stats)
        return {
            "files": len(self.results),
            "changed": len(self.changed),
            "failed": len(self.failed),
            **asdict(stats),
        }

    def generate_report(self, path: str | Path) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_files": len(self.results),
            },
            "results": [r.to_dict() for r in self.results],
            "totals": self.totals(),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")
