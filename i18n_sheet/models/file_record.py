from __future__ import annotations

from dataclasses import dataclass

"""FileRecord model: identity of one language variant of a translatable file."""

__all__ = [
    "FileRecord",
]


@dataclass(frozen=True)
class FileRecord:
    """Language variant of a .properties file, keyed by its default-language path.

    ``canonical_path`` is relative to the working directory and always uses ``/``.
    All variants of one file (``messages.properties``, ``messages_de.properties``,
    ...) share the same canonical path.
    """
    canonical_path: str
    language: str = ""  # "" = default language

    @property
    def is_default(self) -> bool:
        return self.language == ""
