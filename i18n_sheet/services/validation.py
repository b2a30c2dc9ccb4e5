from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

from ..errors import ValidationError
from .file_identity import INFIX

"""Up-front parameter checks for export / import / inspect.

Nothing is read or written when one of these raises.
"""

__all__ = [
    "validate_languages",
    "validate_export_parameters",
    "validate_import_parameters",
    "validate_workbook_exists",
]


def _require_text(value: str | Path | None, name: str) -> str:
    if value is None:
        raise ValidationError(f"{name} is required")
    text = str(value)
    if not text.strip():
        raise ValidationError(f"{name} is empty. Cannot be empty.")
    return text


def _require_directory(value: str | Path | None, name: str) -> Path:
    path = Path(_require_text(value, name))
    if not path.is_dir():
        raise ValidationError(f"{name} is not a directory: {path}")
    return path


def validate_languages(languages: Sequence[str] | None) -> list[str]:
    """Languages must be distinct, non-empty and free of the ``_`` infix separator."""
    if languages is None:
        raise ValidationError("languages is required")
    seen: list[str] = []
    for lang in languages:
        if not isinstance(lang, str) or not lang.strip():
            raise ValidationError(f"invalid language code: {lang!r}")
        if INFIX in lang:
            raise ValidationError(f"language code must not contain '{INFIX}': {lang}")
        if lang in seen:
            raise ValidationError(f"duplicate language code: {lang}")
        seen.append(lang)
    return seen


def validate_export_parameters(
    workbook: str | Path | None,
    working_directory: str | Path | None,
    file_regex: str | None,
    languages: Sequence[str] | None,
) -> re.Pattern[str]:
    """Validate export parameters and return the compiled file name pattern.

    Raises:
        ValidationError: on a missing/blank parameter, a working directory that
            is not a directory, an invalid regular expression or language set.
    """
    _require_text(workbook, "workbook")
    _require_directory(working_directory, "working directory")
    pattern = _require_text(file_regex, "file regex")
    validate_languages(languages)
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValidationError(f"invalid file regex {pattern!r}: {e}") from e


def validate_workbook_exists(workbook: str | Path | None) -> Path:
    path = Path(_require_text(workbook, "workbook"))
    if not path.is_file():
        raise ValidationError(f"workbook not found: {path}")
    return path


def validate_import_parameters(
    workbook: str | Path | None,
    working_directory: str | Path | None,
) -> None:
    validate_workbook_exists(workbook)
    _require_directory(working_directory, "working directory")
