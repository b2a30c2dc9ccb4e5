"""Reading and writing of flat key=value .properties files."""

from .parser import find_separator_index, parse_line, read_entries, unescape_java
from .writer import render_properties, write_properties

__all__ = [
    "find_separator_index",
    "parse_line",
    "read_entries",
    "render_properties",
    "unescape_java",
    "write_properties",
]
