from __future__ import annotations

from dataclasses import dataclass

"""PropertyEntry model: one parsed key/value line."""

__all__ = [
    "PropertyEntry",
]


@dataclass(frozen=True)
class PropertyEntry:
    key: str
    value: str  # already unescaped
    line_number: int = -1  # 1-based source line; -1 when parsed outside a file
