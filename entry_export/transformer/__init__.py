"""Row combination: bucket and fold transformer output into one row per entry."""

from .combiner import (
    ColumnCountMismatchError,
    Combiner,
    CombinerError,
    GlueHook,
    InvalidColumnCountError,
    check_column_counts,
    default_glue,
)
from .glue import glue_from_config

__all__ = [
    "Combiner",
    "CombinerError",
    "ColumnCountMismatchError",
    "InvalidColumnCountError",
    "check_column_counts",
    "GlueHook",
    "default_glue",
    "glue_from_config",
]
