from __future__ import annotations

import zipfile
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pandas as pd

from ..errors import FileAccessError, FormatError, WorkbookHeaderError
from ..models.workbook_row import TabularRow
from ..services.file_identity import normalize_separators
from .cell_text import decode_cell_text
from .writer import DEFAULT_COLUMN, FILE_COLUMN, FIXED_COLUMNS, KEY_COLUMN, SHEET_NAME

"""Workbook source: reads the translation sheet written by WorkbookWriter.

Cells are read as text with pandas' default NA conversion disabled, so
translations such as "NA" or "null" survive verbatim. Entirely blank rows are
skipped (translators often leave gaps). Cell text is decoded with
decode_cell_text, the inverse of what WorkbookWriter stores.
"""

__all__ = [
    "read_workbook",
    "WorkbookReader",
]


def read_workbook(path: Path) -> pd.DataFrame:
    """Read the translation sheet (or the first sheet if it was renamed) as strings."""
    try:
        xls = pd.ExcelFile(path, engine="openpyxl")
        sheet = SHEET_NAME if SHEET_NAME in xls.sheet_names else xls.sheet_names[0]
        return xls.parse(sheet, header=0, dtype=str, keep_default_na=False, na_values=[])
    except OSError as e:
        raise FileAccessError(f"cannot read workbook {path}: {e}") from e
    except (ValueError, zipfile.BadZipFile) as e:
        raise FormatError(f"not a readable xlsx workbook: {e}", file=str(path)) from e


def _cell_text(value: Any) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return str(value)


class WorkbookReader:
    """TabularSource backed by an .xlsx file.

    The row count, languages and file set are known upfront; rows are handed
    out once, in sheet order, through next_row().
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        df = read_workbook(path)
        header = [str(c).strip() for c in df.columns]
        if tuple(header[: len(FIXED_COLUMNS)]) != FIXED_COLUMNS:
            raise WorkbookHeaderError(
                f"expected header columns {list(FIXED_COLUMNS)}, got {header[: len(FIXED_COLUMNS)]}",
                file=str(path),
            )
        df.columns = header
        self._languages = [c for c in header[len(FIXED_COLUMNS):] if c and not c.startswith("Unnamed:")]
        self._rows = self._normalize(df)
        self._cursor = 0

    def _normalize(self, df: pd.DataFrame) -> list[TabularRow]:
        rows: list[TabularRow] = []
        for offset, raw in enumerate(df.to_dict(orient="records")):
            cells = {col: decode_cell_text(_cell_text(val)) for col, val in raw.items()}
            if all(v.strip() == "" for v in cells.values()):
                continue
            sheet_row = offset + 2  # header is sheet row 1
            key = cells[KEY_COLUMN].strip()
            file = normalize_separators(cells[FILE_COLUMN].strip())
            if not key or not file:
                raise FormatError("row has no key or no file", file=str(self.path), line_number=sheet_row)
            rows.append(
                TabularRow(
                    canonical_path=file,
                    key=key,
                    default_value=cells[DEFAULT_COLUMN],
                    language_values={lang: cells.get(lang, "") for lang in self._languages},
                )
            )
        return rows

    def row_count(self) -> int:
        return len(self._rows)

    def languages(self) -> list[str]:
        return list(self._languages)

    def canonical_paths(self) -> set[str]:
        return {r.canonical_path for r in self._rows}

    def next_row(self) -> TabularRow:
        if self._cursor >= len(self._rows):
            raise FormatError("no more rows in workbook", file=str(self.path))
        row = self._rows[self._cursor]
        self._cursor += 1
        return row

    def __iter__(self) -> Iterator[TabularRow]:
        while self._cursor < len(self._rows):
            yield self.next_row()
