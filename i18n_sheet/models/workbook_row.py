from __future__ import annotations

from dataclasses import dataclass, field

"""Row-level models for the translation workbook.

TabularRow is the persisted shape of one sheet row; RowBinding is the
transient association an export run keeps between a (file, key) pair and the
row it was appended to.
"""

__all__ = [
    "TabularRow",
    "RowBinding",
]


@dataclass
class TabularRow:
    """One workbook row: a key of one canonical file with all its translations."""
    canonical_path: str
    key: str
    default_value: str = ""
    language_values: dict[str, str] = field(default_factory=dict)  # language -> value (may be blank)

    def value_for(self, language: str) -> str:
        if language == "":
            return self.default_value
        return self.language_values.get(language, "")


@dataclass(frozen=True)
class RowBinding:
    canonical_path: str
    key: str
    row_number: int
