"""Domain models for the entry export.

This package contains the value, form definition, configuration and result
models shared by the transformers, the combiner and the export service.
"""

from .config_models import DEFAULT_GLUE, ExportConfig, FieldSettings, GlueConfig
from .error_record import ErrorRecord
from .export_result import ExportResult
from .form import Choice, FieldInput, Form, FormField
from .value import BaseValue, BooleanValue, NumericValue, StringValue

__all__ = [
    # Values
    "BaseValue",
    "StringValue",
    "NumericValue",
    "BooleanValue",
    # Form definition
    "Choice",
    "FieldInput",
    "FormField",
    "Form",
    # Configuration models
    "DEFAULT_GLUE",
    "ExportConfig",
    "FieldSettings",
    "GlueConfig",
    # Results
    "ErrorRecord",
    "ExportResult",
]
