from __future__ import annotations

import re

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

"""Reversible cell text encoding for characters a worksheet cannot hold.

Unescaped property values may contain control characters (``\\f``, ``\\b``,
``\\u0001`` ...) that openpyxl refuses. They are stored in the OOXML
``_xHHHH_`` form; a literal ``_xHHHH_`` already present in the text gets its
underscore escaped as ``_x005F_`` so decoding gives back the original.
"""

__all__ = [
    "encode_cell_text",
    "decode_cell_text",
]

_ESCAPED_RE = re.compile(r"_x([0-9A-Fa-f]{4})_")
# an underscore that would otherwise start an escape sequence
_LITERAL_UNDERSCORE_RE = re.compile(r"_(?=x[0-9A-Fa-f]{4}_)")


def _encode_char(match: re.Match[str]) -> str:
    return f"_x{ord(match.group(0)):04X}_"


def _decode_escape(match: re.Match[str]) -> str:
    return chr(int(match.group(1), 16))


def encode_cell_text(value: str) -> str:
    """Text safe to store in a worksheet cell."""
    if "_x" in value:
        value = _LITERAL_UNDERSCORE_RE.sub("_x005F_", value)
    return ILLEGAL_CHARACTERS_RE.sub(_encode_char, value)


def decode_cell_text(value: str) -> str:
    """Inverse of encode_cell_text."""
    if "_x" not in value:
        return value
    return _ESCAPED_RE.sub(_decode_escape, value)
