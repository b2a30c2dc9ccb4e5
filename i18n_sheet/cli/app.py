from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from ..config.loader import ConfigError, find_config_path, load_config
from ..errors import ConverterError, FileAccessError, FormatError, ValidationError
from ..logging.init import log_summary, set_debug, setup_logging
from ..services.orchestrator import inspect_workbook, process_export, process_import
from ..services.summary import render_summary_line

"""CLI entrypoint.

    i18n-sheet [--config PATH] [--debug] export --workbook X --working-dir D --languages de,hu
    i18n-sheet [--config PATH] [--debug] import --workbook X --working-dir D
    i18n-sheet [--config PATH] inspect --workbook X

Values not given on the command line come from the config file.
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_FAILURE = 2

_ERROR_LABELS: tuple[tuple[type[ConverterError], str], ...] = (
    (ValidationError, "validation"),
    (FormatError, "format"),
    (FileAccessError, "io"),
)


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env (e.g. I18N_SHEET_CONFIG) with python-dotenv; a missing file is fine."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _split_languages(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="i18n-sheet", description="Synchronize .properties files with one translation workbook")
    p.add_argument("--config", type=Path, default=None, help="YAML config file (default: config/i18n_sheet.yml)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    exp = sub.add_parser("export", help="Write all matching .properties files into the workbook")
    exp.add_argument("--workbook", help="Target .xlsx file")
    exp.add_argument("--working-dir", dest="working_directory", help="Root directory of the .properties files")
    exp.add_argument("--file-regex", dest="file_regex", help=r"Regex matched against file names (default: .*\.properties$)")
    exp.add_argument("--languages", type=_split_languages, help="Comma separated language codes, e.g. de,hu")

    imp = sub.add_parser("import", help="Rebuild the .properties files from the workbook")
    imp.add_argument("--workbook", help="Source .xlsx file")
    imp.add_argument("--working-dir", dest="working_directory", help="Root directory for the written files")

    ins = sub.add_parser("inspect", help="Print workbook languages, files and first rows then exit")
    ins.add_argument("--workbook", help="Workbook to inspect")
    ins.add_argument("--rows", type=int, default=3, help="Number of sample rows")
    return p.parse_args(argv)


def _error_label(e: ConverterError) -> str:
    for cls, label in _ERROR_LABELS:
        if isinstance(e, cls):
            return label
    return "processing"


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None only: an explicit [] must not pick up pytest's own arguments
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    if args.debug:
        set_debug(logger)

    try:
        config_path = find_config_path(args.config)
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    if config_path is not None:
        logger.debug(f"config loaded from {config_path}")

    overrides = {k: getattr(args, k, None) for k in ("workbook", "working_directory", "file_regex", "languages")}
    cfg = cfg.merged(**overrides)

    try:
        if args.command == "inspect":
            for line in inspect_workbook(cfg.workbook, sample_rows=args.rows):
                print(line)
            return EXIT_SUCCESS_ALL
        if args.command == "export":
            result = process_export(cfg)
        else:
            result = process_import(cfg)
    except ConverterError as e:
        logger.error(f"{_error_label(e)}: {e}")
        return EXIT_FATAL

    log_summary(render_summary_line(result)[len("SUMMARY "):])

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL
