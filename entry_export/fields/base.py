from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..models.config_models import FieldSettings
from ..models.form import FormField
from ..models.value import BaseValue

"""Field transformer base classes.

A field transformer turns one logical form field into a fixed number of output
columns. Every transformer declares a capability:

- SCALAR: exactly one row per entry (``get_cells``)
- MULTI_ROW: zero or more rows per entry (``get_rows``), each row as wide as
  the transformer's column count

The combiner dispatches on ``capability``; it never inspects transformer types.
"""

__all__ = [
    "Entry",
    "Capability",
    "Column",
    "FieldTransformer",
    "BaseField",
    "column_labels",
]

# input key ("5" or "5.1") -> raw value
Entry = Mapping[str, Any]


class Capability(Enum):
    """Row cardinality of a field transformer."""
    SCALAR = "scalar"
    MULTI_ROW = "multi_row"


@dataclass(frozen=True)
class Column:
    """Output column header."""
    label: str
    field_id: str


class FieldTransformer(ABC):
    """Common interface of all field transformers."""

    def __init__(self, field: FormField, settings: FieldSettings | None = None) -> None:
        self.field = field
        self.settings = settings or FieldSettings()

    @property
    def capability(self) -> Capability:
        return Capability.SCALAR

    @abstractmethod
    def get_columns(self) -> list[Column]:
        """Columns this transformer occupies (fixed for its lifetime)."""

    def get_column_count(self) -> int:
        return len(self.get_columns())

    @abstractmethod
    def get_cells(self, entry: Entry) -> list[BaseValue]:
        """Single row of values, one per column."""

    def get_rows(self, entry: Entry) -> Iterator[list[BaseValue]]:
        """Rows of values. Scalar transformers yield their single row."""
        yield self.get_cells(entry)

    def wrap(self, raw: Any) -> BaseValue:
        """Wrap a raw payload in a typed value owned by this field."""
        return BaseValue.create(raw, self.field.id, self.field.type)

    def empty_row(self) -> list[BaseValue]:
        return [self.wrap("") for _ in range(self.get_column_count())]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(field_id={self.field.id!r}, type={self.field.type!r})"


class BaseField(FieldTransformer):
    """Default transformer: one column, value taken from ``entry[field.id]``."""

    def get_columns(self) -> list[Column]:
        return [Column(label=self.field.label or self.field.id, field_id=self.field.id)]

    def get_field_value(self, entry: Entry, input_id: str = "") -> Any:
        """Raw value for the field (or one of its inputs). Missing -> empty string."""
        value = entry.get(input_id or self.field.id)
        if value is None:
            return ""
        return value

    def get_cells(self, entry: Entry) -> list[BaseValue]:
        return [self.wrap(self.get_field_value(entry))]


def column_labels(fields: Iterable[FieldTransformer]) -> list[str]:
    """Header labels of all columns, in catalogue order."""
    return [column.label for f in fields for column in f.get_columns()]
