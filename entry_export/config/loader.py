from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import DEFAULT_GLUE, ExportConfig, GlueConfig

"""Export config loader.

Responsibilities:
- Load the YAML export config (default config/export.yml)
- Validate it against export_schema.json
- Apply defaults (glue.default = "\\n---\\n", all fields enabled)
"""

__all__ = [
    "ConfigError",
    "SCHEMA_PATH",
    "load_config",
    "parse_config",
]

SCHEMA_PATH = Path(__file__).parent / "export_schema.json"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or invalid, or the config
            data fails schema validation (missing required keys, wrong types,
            unknown keys).
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


def _ids(values: list[Any] | None) -> set[str]:
    # YAML では数値 ID が int になるため文字列へ正規化
    return {str(v) for v in (values or [])}


def parse_config(data: dict[str, Any]) -> ExportConfig:
    """Validate an already parsed config mapping and build ExportConfig."""
    if not isinstance(data, dict):
        raise ConfigError(f"config must be a mapping, got {type(data).__name__}")
    _validate_config_schema(data)

    glue_raw = data.get("glue") or {}
    glue = GlueConfig(
        default=glue_raw.get("default", DEFAULT_GLUE),
        by_type=dict(glue_raw.get("by_type") or {}),
        by_field={str(k): v for k, v in (glue_raw.get("by_field") or {}).items()},
    )
    enabled = data.get("enabled_fields")
    return ExportConfig(
        form_id=str(data["form_id"]),
        enabled_fields=[str(v) for v in enabled] if enabled is not None else None,
        disabled_fields=_ids(data.get("disabled_fields")),
        separated_fields=_ids(data.get("separated_fields")),
        likert_score_fields=_ids(data.get("likert_score_fields")),
        glue=glue,
    )


def load_config(path: Path) -> ExportConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    return parse_config(data)
