from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..errors import FileAccessError
from ..logging.error_log import ErrorLogBuffer
from ..models.error_record import ErrorRecord
from ..models.processing_result import FileStat, ImportStats
from ..models.tabular import TabularSource
from ..properties.writer import write_properties
from .file_identity import synthesize
from .progress import ProgressTracker

logger = logging.getLogger(__name__)

"""Import engine: tabular source -> one .properties file per (canonical file, language).

Default values are always written, even when blank. Language values are
written only when non-blank after trimming (the trimmed text is stored), so a
missing translation simply leaves the key out of that language file and the
application falls back to the default.

Each output file is written independently: a failure on one file is logged,
recorded in the error log and counted, and the remaining files are still
written.
"""

__all__ = [
    "build_buffers",
    "import_all",
]

Buffers = dict[tuple[str, str], dict[str, str]]


def build_buffers(source: TabularSource) -> Buffers:
    """Consume every row of ``source`` into per-(canonical path, language) key/value buffers."""
    languages = source.languages()
    buffers: Buffers = {}
    for path in sorted(source.canonical_paths()):
        for lang in ["", *languages]:
            buffers[(path, lang)] = {}

    for _ in range(source.row_count()):
        row = source.next_row()
        buffers.setdefault((row.canonical_path, ""), {})[row.key] = row.default_value
        for lang in languages:
            value = row.language_values.get(lang)
            if value is None:
                continue
            value = value.strip()
            if value:
                buffers.setdefault((row.canonical_path, lang), {})[row.key] = value
    return buffers


def import_all(
    source: TabularSource,
    working_root: Path,
    error_log: ErrorLogBuffer | None = None,
) -> ImportStats:
    """Rebuild the .properties files described by ``source`` under ``working_root``.

    Raises:
        FormatError: if a canonical path has no extension for a language
            variant; raised before any file is written.
    """
    stats = ImportStats(rows=source.row_count())
    buffers = build_buffers(source)

    # resolve all targets first so a naming problem aborts before any write
    targets: list[tuple[str, dict[str, str]]] = [
        (synthesize(path, lang), entries)
        for (path, lang), entries in buffers.items()
        if entries
    ]

    with ProgressTracker(len(targets), description="Importing") as progress:
        for relative, entries in targets:
            target = working_root / relative
            progress.start_file(target)
            file_start = datetime.now(UTC)
            try:
                written = write_properties(target, entries)
            except FileAccessError as e:
                logger.error(f"import: {e}")
                if error_log is not None:
                    error_log.append(
                        ErrorRecord.create(file=relative, row=-1, error_type="FILE_WRITE_ERROR", message=str(e))
                    )
                stats.file_stats.append(FileStat(file_name=relative, status="failed", entries=0, error=str(e)))
                progress.finish_file(success=False)
                continue

            logger.debug(f"wrote {written} entries to {relative}")
            stats.entries += written
            stats.file_stats.append(
                FileStat(
                    file_name=relative,
                    status="success",
                    entries=written,
                    elapsed_seconds=(datetime.now(UTC) - file_start).total_seconds(),
                )
            )
            progress.finish_file(success=True)
    return stats
