from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

"""Processing result models for the properties <-> workbook converter.

These aggregate per-file and per-run metrics and feed the SUMMARY line.
"""

__all__ = [
    "FileStat",
    "ExportStats",
    "ImportStats",
    "ConversionResult",
]


@dataclass(frozen=True)
class FileStat:
    """Per-file statistics (one .properties file read or written)."""
    file_name: str  # path relative to the working directory
    status: str  # success/failed
    entries: int  # key/value pairs read or written
    elapsed_seconds: float = 0.0
    error: str | None = None


@dataclass
class ExportStats:
    """What one export_all() pass did to the sink."""
    rows: int = 0  # distinct (file, key) rows appended
    entries: int = 0  # key/value lines fed to the sink
    file_stats: list[FileStat] = field(default_factory=list)


@dataclass
class ImportStats:
    """What one import_all() pass wrote."""
    rows: int = 0  # workbook data rows consumed
    entries: int = 0  # key/value lines written
    file_stats: list[FileStat] = field(default_factory=list)

    @property
    def success_files(self) -> int:
        return sum(1 for s in self.file_stats if s.status == "success")

    @property
    def failed_files(self) -> int:
        return sum(1 for s in self.file_stats if s.status == "failed")


@dataclass(frozen=True)
class ConversionResult:
    """Aggregated result of one CLI run, rendered into the SUMMARY line."""
    operation: str  # export/import
    success_files: int
    failed_files: int
    total_rows: int
    total_entries: int
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    file_stats: list[FileStat] | None = None

    @property
    def total_files(self) -> int:
        return self.success_files + self.failed_files
