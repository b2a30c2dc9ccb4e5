"""Synchronize per-language .properties files with a single translation workbook."""

__version__ = "0.1.0"
