from __future__ import annotations

import logging
import os
import re
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import ConverterConfig
from ..errors import FileAccessError
from ..excel.reader import WorkbookReader
from ..excel.writer import WorkbookWriter
from ..logging.error_log import ErrorLogBuffer
from ..models.processing_result import ConversionResult, FileStat
from .exporter import export_all
from .importer import import_all
from .validation import validate_export_parameters, validate_import_parameters, validate_workbook_exists

logger = logging.getLogger(__name__)

"""Service orchestration for the properties <-> workbook converter.

Ties the pieces together for one CLI run: validate parameters, scan the
working directory, run the export or import engine, flush the error log and
aggregate everything into a ConversionResult for the SUMMARY line.
"""

__all__ = [
    "scan_property_files",
    "process_export",
    "process_import",
    "inspect_workbook",
]


def scan_property_files(directory: Path, pattern: re.Pattern[str] | str) -> list[Path]:
    """Recursively collect files whose name fully matches ``pattern``.

    Raises:
        FileAccessError: if the directory tree cannot be listed.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    found: list[Path] = []

    def _on_error(e: OSError) -> None:
        raise FileAccessError(f"error reading directory {e.filename}: {e}") from e

    for root, dirs, files in os.walk(directory, onerror=_on_error):
        dirs.sort()
        for name in sorted(files):
            if regex.fullmatch(name):
                found.append(Path(root) / name)
    return found


def _result(
    operation: str,
    start_time: datetime,
    file_stats: list[FileStat],
    rows: int,
    entries: int,
) -> ConversionResult:
    end_time = datetime.now(UTC)
    return ConversionResult(
        operation=operation,
        success_files=sum(1 for s in file_stats if s.status == "success"),
        failed_files=sum(1 for s in file_stats if s.status == "failed"),
        total_rows=rows,
        total_entries=entries,
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        file_stats=file_stats,
    )


def process_export(config: ConverterConfig) -> ConversionResult:
    """Export every matching .properties file under the working directory into the workbook.

    Raises:
        ValidationError: on invalid parameters (nothing read).
        FormatError / FileAccessError: the run is aborted, no workbook written.
    """
    start_time = datetime.now(UTC)
    pattern = validate_export_parameters(
        config.workbook, config.working_directory, config.file_regex, config.languages
    )
    working_root = Path(config.working_directory)  # type: ignore[arg-type]
    files = scan_property_files(working_root, pattern)
    logger.info(f"Exporting {len(files)} file(s) from: {working_root}")

    sink = WorkbookWriter(Path(config.workbook), config.languages)  # type: ignore[arg-type]
    stats = export_all(files, config.languages, sink, working_root)
    logger.info(f"workbook written: {config.workbook} rows={stats.rows}")
    return _result("export", start_time, stats.file_stats, stats.rows, stats.entries)


def process_import(config: ConverterConfig, error_log: ErrorLogBuffer | None = None) -> ConversionResult:
    """Rebuild the .properties files under the working directory from the workbook.

    Per-file write failures are counted (and recorded in ``error_log``)
    without stopping the run.
    """
    start_time = datetime.now(UTC)
    validate_import_parameters(config.workbook, config.working_directory)
    working_root = Path(config.working_directory)  # type: ignore[arg-type]
    if error_log is None:
        error_log = ErrorLogBuffer(Path(config.error_log_dir))

    source = WorkbookReader(Path(config.workbook))  # type: ignore[arg-type]
    logger.info(f"Importing {source.row_count()} row(s) from: {config.workbook}")
    stats = import_all(source, working_root, error_log)

    # the files are already written; an unwritable log directory must not fail the run
    try:
        log_path = error_log.flush()
    except OSError as e:
        logger.warning(f"error log not written to {error_log.log_dir}: {e}")
    else:
        if log_path is not None:
            logger.warning(f"error log written: {log_path}")
    return _result("import", start_time, stats.file_stats, stats.rows, stats.entries)


def inspect_workbook(workbook: str | Path | None, sample_rows: int = 3) -> list[str]:
    """Describe a workbook: languages, row count, files and the first rows."""
    path = validate_workbook_exists(workbook)
    source = WorkbookReader(path)
    lines = [
        f"WORKBOOK: {path}",
        f"  languages={source.languages()}",
        f"  rows={source.row_count()}",
        f"  files={sorted(source.canonical_paths())}",
    ]
    for _ in range(min(sample_rows, source.row_count())):
        row = source.next_row()
        lines.append(
            f"  ROW: file={row.canonical_path} key={row.key} default={row.default_value!r} "
            f"translations={row.language_values}"
        )
    return lines
