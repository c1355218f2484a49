"""Field transformers: one per logical form field."""

from .base import BaseField, Capability, Column, Entry, FieldTransformer, column_labels
from .factory import build_transformers, create_transformer
from .likert import SurveyLikertField
from .list_field import ListField
from .number import NumberField
from .separable import SeparableField

__all__ = [
    "Entry",
    "Capability",
    "Column",
    "FieldTransformer",
    "BaseField",
    "NumberField",
    "SeparableField",
    "SurveyLikertField",
    "ListField",
    "build_transformers",
    "create_transformer",
    "column_labels",
]
