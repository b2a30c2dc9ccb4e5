from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError as SchemaValidationError

"""Config loader.

Responsibilities:
- Load the YAML config (default ``config/i18n_sheet.yml``)
- Validate it against the bundled JSON schema
- Apply defaults (file_regex, error_log_dir)
- Merge command line overrides on top
"""

__all__ = [
    "ConfigError",
    "ConverterConfig",
    "CONFIG_ENV_VAR",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_FILE_REGEX",
    "SCHEMA_PATH",
    "find_config_path",
    "load_config",
]

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config/i18n_sheet.yml")
CONFIG_ENV_VAR = "I18N_SHEET_CONFIG"
DEFAULT_FILE_REGEX = r".*\.properties$"
DEFAULT_ERROR_LOG_DIR = "./logs"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class ConverterConfig:
    workbook: str | None = None
    working_directory: str | None = None
    file_regex: str = DEFAULT_FILE_REGEX
    languages: list[str] = field(default_factory=list)
    error_log_dir: str = DEFAULT_ERROR_LOG_DIR

    def merged(self, **overrides: Any) -> ConverterConfig:
        """Copy with every non-None override applied (command line wins over the file)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: if the schema is missing or invalid, or the data violates it.
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")
    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except SchemaValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def find_config_path(explicit: Path | None = None) -> Path | None:
    """Pick the config file to load: flag, then $I18N_SHEET_CONFIG, then the default if present.

    An explicitly requested path is returned even when missing so that
    load_config() reports it.
    """
    if explicit is not None:
        return explicit
    env = os.getenv(CONFIG_ENV_VAR)
    if env:
        return Path(env)
    if DEFAULT_CONFIG_PATH.exists():
        return DEFAULT_CONFIG_PATH
    return None


def load_config(path: Path | None) -> ConverterConfig:
    """Load and validate ``path``; None yields the defaults."""
    if path is None:
        return ConverterConfig()
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    return ConverterConfig(
        workbook=data.get("workbook"),
        working_directory=data.get("working_directory"),
        file_regex=data.get("file_regex", DEFAULT_FILE_REGEX),
        languages=list(data.get("languages", [])),
        error_log_dir=data.get("error_log_dir", DEFAULT_ERROR_LOG_DIR),
    )
