"""Domain models for the properties <-> workbook converter."""

from .error_record import ErrorRecord
from .file_record import FileRecord
from .processing_result import ConversionResult, ExportStats, FileStat, ImportStats
from .property_entry import PropertyEntry
from .tabular import TabularSink, TabularSource
from .workbook_row import RowBinding, TabularRow

__all__ = [
    # Identity / parsing
    "FileRecord",
    "PropertyEntry",
    # Workbook rows
    "RowBinding",
    "TabularRow",
    "TabularSink",
    "TabularSource",
    # Results
    "ConversionResult",
    "ErrorRecord",
    "ExportStats",
    "FileStat",
    "ImportStats",
]
