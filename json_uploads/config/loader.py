from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from json_uploads.models.config_models import DEFAULT_CONTENT_TYPES, AppConfig

"""Config loader.

Responsibilities:
- Load the YAML config file (default: config/uploads.yml)
- Validate it against the packaged JSON schema (config_schema.json)
- Apply defaults for every missing key
"""

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "ConfigError",
    "load_config",
    "load_config_or_default",
]

DEFAULT_CONFIG_PATH = Path("config/uploads.yml")
SCHEMA_PATH = Path(__file__).with_name("config_schema.json")


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the
            config data fails validation (unknown keys, wrong types, ...).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> AppConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    defaults = AppConfig()
    return AppConfig(
        output_directory=Path(data.get("output_directory", defaults.output_directory)),
        accepted_content_types=tuple(data.get("accepted_content_types", DEFAULT_CONTENT_TYPES)),
        max_concurrent_reads=data.get("max_concurrent_reads", defaults.max_concurrent_reads),
        lock_rows_while_editing=data.get("lock_rows_while_editing", defaults.lock_rows_while_editing),
    )


def load_config_or_default(path: Path | None) -> AppConfig:
    """Load ``path`` if given; otherwise the default file if present, else defaults.

    An explicitly requested file that does not exist is an error; a missing
    default file is not.
    """
    if path is not None:
        return load_config(path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return AppConfig()
