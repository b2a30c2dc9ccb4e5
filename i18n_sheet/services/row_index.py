from __future__ import annotations

from collections.abc import Iterator

from ..models.workbook_row import RowBinding

"""Row index: (canonical path, key) -> workbook row number, for one export run."""

__all__ = [
    "RowIndex",
]


class RowIndex:
    """Bindings created during a single export pass.

    A fresh instance is created per export_all() call and dropped afterwards;
    the workbook itself is the persistent store of row order.
    """

    def __init__(self) -> None:
        self._rows: dict[tuple[str, str], int] = {}

    def lookup(self, canonical_path: str, key: str) -> int | None:
        return self._rows.get((canonical_path, key))

    def bind(self, canonical_path: str, key: str, row_number: int) -> RowBinding:
        pair = (canonical_path, key)
        if pair in self._rows:
            raise ValueError(f"row already bound for {canonical_path} / {key}")
        self._rows[pair] = row_number
        return RowBinding(canonical_path=canonical_path, key=key, row_number=row_number)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[RowBinding]:
        for (path, key), row in self._rows.items():
            yield RowBinding(canonical_path=path, key=key, row_number=row)
