from __future__ import annotations

from ..models.processing_result import ConversionResult

"""SUMMARY line rendering."""


def _format_seconds(value: float) -> str:
    if value == 0:
        return "0"
    if value == int(value):
        return str(int(value))
    if value < 0.01:
        # avoid scientific notation for very fast runs
        return f"{value:.6f}".rstrip("0").rstrip(".")
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_summary_line(result: ConversionResult) -> str:
    """Render the SUMMARY line of a run.

    Format:
    SUMMARY op={export|import} files={total} success={success} failed={failed}
    rows={rows} entries={entries} elapsed_sec={elapsed}

    Examples:
        >>> from datetime import datetime, timezone
        >>> start = datetime(2023, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2023, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ConversionResult(
        ...     operation="export", success_files=2, failed_files=0, total_rows=10,
        ...     total_entries=18, start_time=start, end_time=end, elapsed_seconds=2.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY op=export files=2 success=2 failed=0 rows=10 entries=18 elapsed_sec=2'
    """
    return (
        f"SUMMARY op={result.operation} "
        f"files={result.total_files} "
        f"success={result.success_files} "
        f"failed={result.failed_files} "
        f"rows={result.total_rows} "
        f"entries={result.total_entries} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
