from __future__ import annotations

import re
from collections.abc import Iterator
from pathlib import Path

from ..errors import FileAccessError, FormatError
from ..models.property_entry import PropertyEntry

"""Forgiving .properties line parser.

Each raw line is classified as skippable (empty / ``#`` comment) or data.
Data lines are Java-unescaped, then matched against a strict
``key = value`` pattern; lines that do not match fall back to a separator
heuristic (earliest of ``=``, space, ``:``, tab, form-feed).
"""

__all__ = [
    "SEPARATORS",
    "unescape_java",
    "find_separator_index",
    "parse_line",
    "read_entries",
]

# Declared priority order; only matters when two candidates share an index.
SEPARATORS: tuple[str, ...] = ("=", " ", ":", "\t", "\f")

# The value stops at line terminators, so a line whose value holds an escaped
# newline does not match and is split by the heuristic instead.
_STRICT_PATTERN = re.compile(r"([A-Za-z0-9._-]+) ?= ?([^\n\r\u0085\u2028\u2029]*)")
_ESCAPE_PATTERN = re.compile(r"\\(u[0-9A-Fa-f]{4}|.)", re.DOTALL)
_SIMPLE_ESCAPES = {
    "t": "\t",
    "b": "\b",
    "n": "\n",
    "r": "\r",
    "f": "\f",
}


def _replace_escape(match: re.Match[str]) -> str:
    seq = match.group(1)
    if len(seq) == 5:
        return chr(int(seq[1:], 16))
    # unknown escapes (\\, \', \", \=, \:, ...) collapse to the escaped char
    return _SIMPLE_ESCAPES.get(seq, seq)


def unescape_java(text: str) -> str:
    """Resolve Java string escapes. A trailing lone backslash is kept."""
    if "\\" not in text:
        return text
    return _ESCAPE_PATTERN.sub(_replace_escape, text)


def find_separator_index(line: str) -> int | None:
    """Index of the earliest separator character in ``line``, or None if there is none."""
    best: int | None = None
    for sep in SEPARATORS:
        idx = line.find(sep)
        # strict '<' keeps the earlier-declared separator on ties
        if idx != -1 and (best is None or idx < best):
            best = idx
    return best


def parse_line(raw_line: str, *, line_number: int = -1, file: str | None = None) -> PropertyEntry | None:
    """Parse one raw line into a PropertyEntry.

    Returns None for empty and comment lines.

    Raises:
        FormatError: if the line holds no separator at all.
    """
    if raw_line == "" or raw_line.startswith("#"):
        return None
    line = unescape_java(raw_line)
    m = _STRICT_PATTERN.fullmatch(line)
    if m is not None:
        return PropertyEntry(key=m.group(1), value=m.group(2), line_number=line_number)
    idx = find_separator_index(line)
    if idx is None:
        raise FormatError(f"no separator found in line [{line}]", file=file, line_number=line_number)
    return PropertyEntry(key=line[:idx], value=line[idx + 1:], line_number=line_number)


def read_entries(path: Path, *, display_name: str | None = None) -> Iterator[PropertyEntry]:
    """Yield the entries of a UTF-8 .properties file in file order.

    Raises:
        FileAccessError: if the file cannot be opened or decoded.
        FormatError: on the first line without a separator.
    """
    name = display_name or str(path)
    try:
        with path.open("r", encoding="utf-8-sig", newline=None) as f:
            for number, line in enumerate(f, start=1):
                entry = parse_line(line.rstrip("\r\n"), line_number=number, file=name)
                if entry is not None:
                    yield entry
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(f"cannot read properties file {name}: {e}") from e
