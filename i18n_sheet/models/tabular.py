from __future__ import annotations

from typing import Protocol

from .workbook_row import TabularRow

"""Interfaces the export/import engines need from the spreadsheet layer.

The engines never touch pandas or openpyxl directly; ``excel.writer`` and
``excel.reader`` provide the workbook-backed implementations and tests may
substitute in-memory ones.
"""

__all__ = [
    "TabularSink",
    "TabularSource",
]


class TabularSink(Protocol):
    def append_row(self, canonical_path: str, key: str, language: str, value: str) -> int:
        """Append a row and return its row number. ``language`` "" targets the default column."""
        ...

    def update_cell(self, row_number: int, language: str, value: str) -> None:
        ...

    def finalize(self) -> None:
        """Persist everything appended so far."""
        ...


class TabularSource(Protocol):
    def row_count(self) -> int:
        ...

    def languages(self) -> list[str]:
        ...

    def canonical_paths(self) -> set[str]:
        ...

    def next_row(self) -> TabularRow:
        """Return the next data row (forward-only, single pass)."""
        ...
