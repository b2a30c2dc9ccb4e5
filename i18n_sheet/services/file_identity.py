from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path, PurePosixPath

from ..errors import FormatError
from ..models.file_record import FileRecord

"""File identity resolution: language variant <-> canonical (default-language) path.

A language variant carries a ``_<code>`` infix before its extension
(``messages_de.properties``). Detection is substring based, so a language code
must never appear as ``_<code>`` inside an ordinary file name token
(``my_device.properties`` with language ``de`` is misread). This ambiguity is
a known limitation, not something resolved here.
"""

__all__ = [
    "INFIX",
    "normalize_separators",
    "detect_language",
    "canonical_name",
    "resolve",
    "synthesize",
]

INFIX = "_"


def normalize_separators(path: str) -> str:
    """Express a relative path with ``/`` whatever separator it was written with."""
    return path.replace("\\", "/")


def detect_language(file_name: str, languages: Sequence[str]) -> str:
    """First configured language whose ``_<code>`` occurs in ``file_name``; "" if none."""
    for lang in languages:
        if INFIX + lang in file_name:
            return lang
    return ""


def canonical_name(file_name: str, languages: Sequence[str]) -> str:
    """Strip every recognized language infix from ``file_name``.

    Stripping repeats until no ``_<code>`` remains, so names carrying several
    infixes collapse to the same default-language name. Longer codes are
    probed first so that ``_pt`` does not eat the head of ``_ptbr``.
    """
    probes = sorted(languages, key=len, reverse=True)
    name = file_name
    changed = True
    while changed:
        changed = False
        for lang in probes:
            infix = INFIX + lang
            idx = name.rfind(infix)
            if idx > -1:
                name = name[:idx] + name[idx + len(infix):]
                changed = True
                break
    return name


def _relative_posix(path: Path, working_root: Path) -> str:
    abs_path = Path(os.path.abspath(path))
    abs_root = Path(os.path.abspath(working_root))
    try:
        rel = abs_path.relative_to(abs_root)
    except ValueError:
        rel = Path(os.path.relpath(abs_path, abs_root))
    return normalize_separators(rel.as_posix())


def resolve(path: Path, languages: Sequence[str], working_root: Path) -> FileRecord:
    """Determine the language and canonical relative path of a .properties file."""
    file_name = path.name
    language = detect_language(file_name, languages)
    default_path = path.with_name(canonical_name(file_name, languages))
    return FileRecord(canonical_path=_relative_posix(default_path, working_root), language=language)


def synthesize(canonical_path: str, language: str) -> str:
    """Relative path of the ``language`` variant of ``canonical_path``.

    Raises:
        FormatError: if the file name has no extension to insert the infix before.
    """
    canonical_path = normalize_separators(canonical_path)
    if language == "":
        return canonical_path
    posix = PurePosixPath(canonical_path)
    dot = posix.name.rfind(".")
    if dot == -1:
        raise FormatError(f"file name has no extension, cannot add language '{language}'", file=canonical_path)
    name = posix.name[:dot] + INFIX + language + posix.name[dot:]
    return str(posix.with_name(name))
