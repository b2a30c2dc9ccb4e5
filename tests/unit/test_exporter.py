from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from i18n_sheet.errors import FileAccessError, FormatError
from i18n_sheet.services.exporter import export_all, sort_for_export

LANGS = ["de", "hu"]


def _export(root: Path, sink, files: list[Path] | None = None):
    if files is None:
        files = [p for p in root.rglob("*.properties")]
    return export_all(files, LANGS, sink, root)


def test_default_file_establishes_rows_and_variants_fill_columns(sample_resources: Path, memory_sink):
    sink = memory_sink(LANGS)
    stats = _export(sample_resources, sink)

    assert sink.finalized == 1
    assert [(r.canonical_path, r.key) for r in sink.rows] == [
        ("sub/errors.properties", "error.404"),
        ("messages.properties", "greeting"),
        ("messages.properties", "farewell"),
        ("messages.properties", "empty.value"),
    ]
    greeting = sink.rows[1]
    assert greeting.default_value == "Hello"
    assert greeting.language_values == {"de": "Hallo", "hu": "Szia"}
    farewell = sink.rows[2]
    assert farewell.default_value == "Bye"
    assert farewell.language_values == {"hu": "Viszlát"}
    assert stats.rows == 4
    assert stats.entries == 7
    assert len(stats.file_stats) == 4


def test_export_is_idempotent(sample_resources: Path, memory_sink):
    first = memory_sink(LANGS)
    second = memory_sink(LANGS)
    _export(sample_resources, first)
    _export(sample_resources, second)
    assert [(r.canonical_path, r.key) for r in first.rows] == [(r.canonical_path, r.key) for r in second.rows]


def test_input_order_does_not_matter(sample_resources: Path, memory_sink):
    files = sorted(sample_resources.rglob("*.properties"))
    forward = memory_sink(LANGS)
    backward = memory_sink(LANGS)
    _export(sample_resources, forward, files)
    _export(sample_resources, backward, list(reversed(files)))
    assert forward.rows == backward.rows


def test_variant_without_default_file_leaves_default_blank(tmp_path: Path, memory_sink, props_writer):
    props_writer(tmp_path / "only_de.properties", "k=v\n")
    sink = memory_sink(LANGS)
    _export(tmp_path, sink)
    assert len(sink.rows) == 1
    row = sink.rows[0]
    assert row.canonical_path == "only.properties"
    assert row.default_value == ""
    assert row.language_values == {"de": "v"}


def test_duplicate_key_last_occurrence_wins(tmp_path: Path, memory_sink, props_writer):
    props_writer(tmp_path / "m.properties", "k=first\nk=second\n")
    sink = memory_sink(LANGS)
    stats = _export(tmp_path, sink)
    assert len(sink.rows) == 1
    assert sink.rows[0].default_value == "second"
    assert sink.updates == [(1, "", "second")]
    assert stats.rows == 1
    assert stats.entries == 2


def test_empty_file_set_still_finalizes(tmp_path: Path, memory_sink):
    sink = memory_sink(LANGS)
    stats = export_all([], LANGS, sink, tmp_path)
    assert sink.finalized == 1
    assert sink.rows == []
    assert stats.rows == 0


def test_format_error_aborts_before_finalize(tmp_path: Path, memory_sink, props_writer):
    props_writer(tmp_path / "a.properties", "ok=1\n")
    props_writer(tmp_path / "b.properties", "broken\n")
    sink = memory_sink(LANGS)
    with pytest.raises(FormatError):
        _export(tmp_path, sink)
    assert sink.finalized == 0
    # rows of the earlier file were already handed to the sink
    assert [r.key for r in sink.rows] == ["ok"]


def test_read_error_aborts_before_finalize(tmp_path: Path, memory_sink, props_writer):
    props_writer(tmp_path / "a.properties", "ok=1\n")
    sink = memory_sink(LANGS)
    with patch("i18n_sheet.services.exporter.read_entries", side_effect=FileAccessError("boom")):
        with pytest.raises(FileAccessError):
            _export(tmp_path, sink)
    assert sink.finalized == 0


def test_sort_for_export_orders_by_file_name():
    files = [Path("z/messages_de.properties"), Path("a/messages.properties"), Path("b/abc.properties")]
    assert [p.name for p in sort_for_export(files)] == [
        "abc.properties",
        "messages.properties",
        "messages_de.properties",
    ]
