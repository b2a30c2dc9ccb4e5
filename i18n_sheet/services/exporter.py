from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from pathlib import Path

from ..models.processing_result import ExportStats, FileStat
from ..models.tabular import TabularSink
from ..properties.parser import read_entries
from .file_identity import resolve
from .progress import ProgressTracker
from .row_index import RowIndex

logger = logging.getLogger(__name__)

"""Export engine: .properties files -> tabular sink.

Files are processed sorted by file name. ``messages.properties`` sorts before
``messages_de.properties`` ('.' < '_'), so the default-language file of each
group establishes row order and the variants fill in their columns.
"""

__all__ = [
    "sort_for_export",
    "export_all",
]


def sort_for_export(files: Iterable[Path]) -> list[Path]:
    """Deterministic processing order: file name first, full path as tie-breaker."""
    return sorted(files, key=lambda p: (p.name, p.as_posix()))


def export_all(
    files: Iterable[Path],
    languages: Sequence[str],
    sink: TabularSink,
    working_root: Path,
) -> ExportStats:
    """Feed every entry of ``files`` into ``sink``, one row per (canonical file, key).

    The first occurrence of a (canonical path, key) pair appends a row; later
    occurrences (other languages, or a duplicated key) only update the cell of
    their own language. ``sink.finalize()`` runs once all files were read, also
    for an empty file list.

    Raises:
        FileAccessError: when a file cannot be read (nothing is finalized).
        FormatError: on the first unparseable line (nothing is finalized).
    """
    ordered = sort_for_export(files)
    index = RowIndex()
    stats = ExportStats()

    with ProgressTracker(len(ordered), description="Exporting") as progress:
        for path in ordered:
            progress.start_file(path)
            file_start = datetime.now(UTC)
            record = resolve(path, languages, working_root)
            logger.debug(f"export {path} -> {record.canonical_path} lang={record.language or 'default'}")

            entries = 0
            for entry in read_entries(path, display_name=str(path)):
                row_number = index.lookup(record.canonical_path, entry.key)
                if row_number is None:
                    row_number = sink.append_row(record.canonical_path, entry.key, record.language, entry.value)
                    index.bind(record.canonical_path, entry.key, row_number)
                else:
                    sink.update_cell(row_number, record.language, entry.value)
                entries += 1

            stats.entries += entries
            stats.file_stats.append(
                FileStat(
                    file_name=path.name,
                    status="success",
                    entries=entries,
                    elapsed_seconds=(datetime.now(UTC) - file_start).total_seconds(),
                )
            )
            progress.set_postfix(rows=len(index))
            progress.finish_file(success=True)

    stats.rows = len(index)
    sink.finalize()
    return stats
