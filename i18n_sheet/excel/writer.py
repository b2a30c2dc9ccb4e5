from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pandas as pd
from openpyxl.cell.cell import TYPE_STRING
from openpyxl.utils.exceptions import IllegalCharacterError
from openpyxl.worksheet.worksheet import Worksheet

from ..errors import FileAccessError, FormatError
from ..models.workbook_row import TabularRow
from .cell_text import encode_cell_text

"""Workbook sink: collects translation rows and writes them as one .xlsx sheet.

Layout (header row + one row per (file, key)):

    key | file | default | <lang1> | <lang2> | ...

Rows are kept in memory and only written on finalize(), so an aborted export
never leaves a half-written workbook.
"""

__all__ = [
    "SHEET_NAME",
    "KEY_COLUMN",
    "FILE_COLUMN",
    "DEFAULT_COLUMN",
    "FIXED_COLUMNS",
    "WorkbookWriter",
]

SHEET_NAME = "translations"
KEY_COLUMN = "key"
FILE_COLUMN = "file"
DEFAULT_COLUMN = "default"
FIXED_COLUMNS = (KEY_COLUMN, FILE_COLUMN, DEFAULT_COLUMN)

# Row 1 is the header, so the first data row is sheet row 2.
FIRST_DATA_ROW = 2


class WorkbookWriter:
    """TabularSink backed by an .xlsx file (pandas + openpyxl)."""

    def __init__(self, path: Path, languages: Sequence[str]) -> None:
        self.path = path
        self.languages = list(languages)
        self._rows: list[TabularRow] = []

    @property
    def rows(self) -> list[TabularRow]:
        return list(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def _row(self, row_number: int) -> TabularRow:
        idx = row_number - FIRST_DATA_ROW
        if idx < 0 or idx >= len(self._rows):
            raise IndexError(f"no workbook row {row_number}")
        return self._rows[idx]

    def _set(self, row: TabularRow, language: str, value: str) -> None:
        if language == "":
            row.default_value = value
        elif language in self.languages:
            row.language_values[language] = value
        else:
            raise KeyError(f"language '{language}' has no column in {self.path.name}")

    def append_row(self, canonical_path: str, key: str, language: str, value: str) -> int:
        row = TabularRow(canonical_path=canonical_path, key=key)
        self._set(row, language, value)
        self._rows.append(row)
        return len(self._rows) - 1 + FIRST_DATA_ROW

    def update_cell(self, row_number: int, language: str, value: str) -> None:
        self._set(self._row(row_number), language, value)

    def to_dataframe(self) -> pd.DataFrame:
        columns = [*FIXED_COLUMNS, *self.languages]
        records = [
            [r.key, r.canonical_path, r.default_value, *(r.value_for(lang) for lang in self.languages)]
            for r in self._rows
        ]
        return pd.DataFrame(records, columns=columns, dtype=object)

    def finalize(self) -> None:
        """Write the workbook (header only when no rows were appended).

        Every cell is stored as text: values are encoded with encode_cell_text
        and cells openpyxl would type as formulas or error codes (``=SUM(A1)``,
        ``#N/A``) are forced back to strings.

        Raises:
            FileAccessError: if the file cannot be written.
            FormatError: if openpyxl rejects a cell value.
        """
        df = self.to_dataframe()
        for column in df.columns:
            df[column] = df[column].map(encode_cell_text)
        try:
            with pd.ExcelWriter(self.path, engine="openpyxl") as writer:
                df.to_excel(writer, sheet_name=SHEET_NAME, index=False)
                _force_text_cells(writer.sheets[SHEET_NAME])
        except OSError as e:
            raise FileAccessError(f"cannot write workbook {self.path}: {e}") from e
        except (IllegalCharacterError, ValueError) as e:
            raise FormatError(f"cannot store value in workbook: {e}", file=str(self.path)) from e


def _force_text_cells(sheet: Worksheet) -> None:
    for row in sheet.iter_rows(min_row=FIRST_DATA_ROW):
        for cell in row:
            if isinstance(cell.value, str) and cell.data_type != TYPE_STRING:
                cell.data_type = TYPE_STRING
