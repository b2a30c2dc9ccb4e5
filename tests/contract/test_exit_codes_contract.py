from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

from i18n_sheet.cli import EXIT_FATAL, EXIT_PARTIAL_FAILURE, EXIT_SUCCESS_ALL
from i18n_sheet.cli import main as cli_main
from i18n_sheet.errors import FileAccessError
from i18n_sheet.properties import writer as props_writer_module

"""Exit code contract: 0 success, 1 fatal, 2 partial import failure."""


def test_exit_code_fatal_missing_explicit_config(temp_workdir: Path, capsys):
    code = cli_main(["--config", "config/nope.yml", "export"])
    out = capsys.readouterr().out
    assert code == EXIT_FATAL
    assert "ERROR config: config file not found" in out


def test_exit_code_fatal_invalid_config(write_config: Path, capsys):
    write_config.write_text("unknown: 1\n", encoding="utf-8")
    code = cli_main(["export"])
    assert code == EXIT_FATAL
    assert "ERROR config: config validation failed" in capsys.readouterr().out


def test_exit_code_fatal_missing_working_directory(write_config: Path, capsys):
    code = cli_main(["export", "--working-dir", "./missing_dir"])
    out = capsys.readouterr().out
    assert code == EXIT_FATAL
    assert "ERROR validation: working directory is not a directory" in out
    assert not Path("translations.xlsx").exists()


def test_exit_code_fatal_format_error(write_config: Path, sample_resources: Path, capsys):
    (sample_resources / "broken.properties").write_text("no_separator_here\n", encoding="utf-8")
    code = cli_main(["export"])
    out = capsys.readouterr().out
    assert code == EXIT_FATAL
    assert "ERROR format:" in out
    assert "broken.properties:1" in out
    # aborted export leaves no workbook behind
    assert not Path("translations.xlsx").exists()


def test_exit_code_fatal_import_without_workbook(write_config: Path, capsys):
    code = cli_main(["import"])
    assert code == EXIT_FATAL
    assert "ERROR validation: workbook not found" in capsys.readouterr().out


def test_exit_code_all_success(write_config: Path, sample_resources: Path, capsys):
    assert cli_main(["export"]) == EXIT_SUCCESS_ALL
    assert cli_main(["import"]) == EXIT_SUCCESS_ALL


def test_exit_code_partial_failure(write_config: Path, sample_resources: Path, temp_workdir: Path, capsys):
    assert cli_main(["export"]) == EXIT_SUCCESS_ALL
    real_write = props_writer_module.write_properties

    def flaky(path: Path, entries):
        if path.name == "messages_hu.properties":
            raise FileAccessError(f"cannot write properties file {path}: read-only")
        return real_write(path, entries)

    with patch("i18n_sheet.services.importer.write_properties", side_effect=flaky):
        code = cli_main(["import"])
    out = capsys.readouterr().out
    assert code == EXIT_PARTIAL_FAILURE
    assert "ERROR import: cannot write properties file" in out
    assert "failed=1" in out
    logs = list((temp_workdir / "logs").glob("errors-*.log"))
    assert len(logs) == 1
    assert "messages_hu.properties" in logs[0].read_text(encoding="utf-8")
