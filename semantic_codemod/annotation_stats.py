"""Data models for per-file annotation outcomes."""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class AnnotationStats:
    """Counts what the annotator did with each visited node."""

    visited: int = 0
    annotated: int = 0
    skipped_unnamed: int = 0
    skipped_foreign: int = 0
    skipped_structural: int = 0
    skipped_existing: int = 0

    def merge(self, other: "AnnotationStats") -> None:
        """Add another file's counts into this one."""
        for key, value in asdict(other).items():
            setattr(self, key, getattr(self, key) + value)


@dataclass
class FileResult:
    """Represents the outcome of annotating a single source file."""

    path: str
    changed: bool = False
    error: str | None = None
    stats: AnnotationStats = field(default_factory=AnnotationStats)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the JSON report."""
        return {
            "path": self.path,
            "changed": self.changed,
            "error": self.error,
            "stats": asdict(self.stats),
        }
