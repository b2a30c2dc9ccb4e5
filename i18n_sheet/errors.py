from __future__ import annotations

"""Exception hierarchy shared by the converter services.

All errors are terminal for the current run; the CLI maps them to exit code 1.
"""

__all__ = [
    "ConverterError",
    "ValidationError",
    "FormatError",
    "WorkbookHeaderError",
    "FileAccessError",
]


class ConverterError(Exception):
    """Base class for every error raised by the converter."""


class ValidationError(ConverterError):
    """Raised when a required parameter is missing or invalid (nothing attempted yet)."""


class FormatError(ConverterError):
    """Raised when a property line, file name or workbook row cannot be interpreted."""

    def __init__(self, message: str, *, file: str | None = None, line_number: int | None = None) -> None:
        self.file = file
        self.line_number = line_number
        location = ""
        if file is not None:
            location = f"{file}:{line_number}: " if line_number is not None else f"{file}: "
        super().__init__(f"{location}{message}")


class WorkbookHeaderError(FormatError):
    """Raised when the workbook header row lacks the fixed key/file/default columns."""


class FileAccessError(ConverterError):
    """Raised when opening, reading, writing or creating a file or directory fails."""
