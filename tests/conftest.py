# Shared pytest fixtures
from __future__ import annotations

from pathlib import Path

import pytest

from i18n_sheet.logging.init import reset_logging
from i18n_sheet.models.workbook_row import TabularRow


@pytest.fixture(autouse=True)
def _clean_logging():
    # handlers bind sys.stdout at setup time; rebuild them against capsys
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(tmp_path: Path, monkeypatch) -> Path:
    (tmp_path / "config").mkdir()
    (tmp_path / "resources").mkdir()
    (tmp_path / "logs").mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("I18N_SHEET_CONFIG", raising=False)
    return tmp_path


def write_props(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture()
def sample_resources(temp_workdir: Path) -> Path:
    """messages (default/de/hu) plus a nested errors file without translations."""
    root = temp_workdir / "resources"
    write_props(root / "messages.properties", "# greetings\ngreeting=Hello\nfarewell = Bye\nempty.value=\n")
    write_props(root / "messages_de.properties", "greeting=Hallo\n")
    write_props(root / "messages_hu.properties", "greeting=Szia\nfarewell=Viszlát\n")
    write_props(root / "sub" / "errors.properties", "error.404:Not found\n")
    return root


@pytest.fixture()
def sample_config_yaml() -> str:
    return """workbook: ./translations.xlsx
working_directory: ./resources
file_regex: '.*\\.properties$'
languages: [de, hu]
error_log_dir: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "i18n_sheet.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


class MemorySink:
    """In-memory TabularSink; row numbers start at 1."""

    def __init__(self, languages: list[str]) -> None:
        self.languages = list(languages)
        self.rows: list[TabularRow] = []
        self.finalized = 0
        self.updates: list[tuple[int, str, str]] = []

    def _set(self, row: TabularRow, language: str, value: str) -> None:
        if language == "":
            row.default_value = value
        else:
            row.language_values[language] = value

    def append_row(self, canonical_path: str, key: str, language: str, value: str) -> int:
        row = TabularRow(canonical_path=canonical_path, key=key)
        self._set(row, language, value)
        self.rows.append(row)
        return len(self.rows)

    def update_cell(self, row_number: int, language: str, value: str) -> None:
        self.updates.append((row_number, language, value))
        self._set(self.rows[row_number - 1], language, value)

    def finalize(self) -> None:
        self.finalized += 1


class MemorySource:
    """In-memory TabularSource over a fixed row list."""

    def __init__(self, rows: list[TabularRow], languages: list[str]) -> None:
        self._rows = list(rows)
        self._languages = list(languages)
        self._cursor = 0

    def row_count(self) -> int:
        return len(self._rows)

    def languages(self) -> list[str]:
        return list(self._languages)

    def canonical_paths(self) -> set[str]:
        return {r.canonical_path for r in self._rows}

    def next_row(self) -> TabularRow:
        row = self._rows[self._cursor]
        self._cursor += 1
        return row


@pytest.fixture()
def memory_sink():
    return MemorySink


@pytest.fixture()
def memory_source():
    return MemorySource


@pytest.fixture()
def props_writer():
    return write_props
