from __future__ import annotations

import logging

from ..models.config_models import ExportConfig
from ..models.form import Form, FormField
from .base import BaseField, FieldTransformer
from .likert import SurveyLikertField
from .list_field import ListField
from .number import NumberField
from .separable import SeparableField

"""Field transformer factory.

Resolves the ordered transformer catalogue for one export pass. Each
transformer receives its FieldSettings here, once; nothing downstream reads the
export config again.
"""

__all__ = [
    "TRANSFORMER_TYPES",
    "create_transformer",
    "build_transformers",
]

logger = logging.getLogger(__name__)

TRANSFORMER_TYPES: dict[str, type[FieldTransformer]] = {
    "number": NumberField,
    "list": ListField,
    "likert": SurveyLikertField,
    "checkbox": SeparableField,
    "multiselect": SeparableField,
    "name": SeparableField,
    "address": SeparableField,
}


def create_transformer(field: FormField, config: ExportConfig) -> FieldTransformer:
    cls = TRANSFORMER_TYPES.get(field.type, BaseField)
    return cls(field, config.settings_for(field.id))


def build_transformers(form: Form, config: ExportConfig) -> tuple[list[FieldTransformer], list[str]]:
    """Build transformers in export order.

    Args:
        form: Form definition (field catalogue)
        config: Export configuration

    Returns:
        (transformers, skipped) where skipped lists enabled field ids that the
        form does not define
    """
    if config.enabled_fields is None:
        selected = list(form.fields)
        skipped: list[str] = []
    else:
        selected = []
        skipped = []
        for field_id in config.enabled_fields:
            f = form.get_field(field_id)
            if f is None:
                skipped.append(field_id)
                continue
            selected.append(f)

    transformers = [
        create_transformer(f, config) for f in selected if f.id not in config.disabled_fields
    ]
    if skipped:
        logger.warning(f"enabled fields not in form {form.id}: {skipped}")
    logger.debug(f"transformers={transformers}")
    return transformers, skipped
