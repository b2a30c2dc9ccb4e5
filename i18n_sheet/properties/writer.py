from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from ..errors import FileAccessError

"""Serialize a key/value mapping as a .properties file.

Output is ``key=value`` per line, sorted by key, UTF-8, ``\\n`` line endings.
Values are written verbatim (no escaping, no comment header).
"""

__all__ = [
    "render_properties",
    "write_properties",
]


def render_properties(entries: Mapping[str, str]) -> str:
    return "".join(f"{key}={entries[key]}\n" for key in sorted(entries))


def write_properties(path: Path, entries: Mapping[str, str]) -> int:
    """Write ``entries`` to ``path``, creating parent directories. Returns the entry count.

    Raises:
        FileAccessError: if the directory or the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as f:
            f.write(render_properties(entries))
    except OSError as e:
        raise FileAccessError(f"cannot write properties file {path}: {e}") from e
    return len(entries)
