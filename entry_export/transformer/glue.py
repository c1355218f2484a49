from __future__ import annotations

from ..models.config_models import ExportConfig
from ..models.value import BaseValue
from .combiner import GlueHook

__all__ = [
    "glue_from_config",
]


def glue_from_config(config: ExportConfig) -> GlueHook:
    """Build a glue hook from the export config (by_field -> by_type -> default)."""
    glue = config.glue

    def _hook(field_type: str, field_id: str, value: BaseValue) -> str:
        if field_id in glue.by_field:
            return glue.by_field[field_id]
        if field_type in glue.by_type:
            return glue.by_type[field_type]
        return glue.default

    return _hook
