from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any

from ..models.value import BaseValue
from .base import Capability, Column, Entry, FieldTransformer
from .separable import SUB_ITEM_GLUE

"""Transformer for ``list`` (repeater) fields.

The entry value is a list of rows, or its JSON encoded string. With columns
enabled each row is a dict keyed by column label (a positional list is
accepted as well); a plain list holds scalars.
"""

__all__ = [
    "ListField",
]


class ListField(FieldTransformer):
    """Multi-row transformer: one output row per list row."""

    @property
    def capability(self) -> Capability:
        return Capability.MULTI_ROW

    def get_columns(self) -> list[Column]:
        label = self.field.label or self.field.id
        if not self.field.list_columns:
            return [Column(label=label, field_id=self.field.id)]
        return [
            Column(label=f"{label} ({name})", field_id=self.field.id)
            for name in self.field.list_columns
        ]

    def get_rows(self, entry: Entry) -> Iterator[list[BaseValue]]:
        for item in self._load_items(entry):
            yield [self.wrap(v) for v in self._row_values(item)]

    def get_cells(self, entry: Entry) -> list[BaseValue]:
        """Single row variant: every column joins its list values."""
        columns: list[list[str]] = [[] for _ in range(self.get_column_count())]
        for row in self.get_rows(entry):
            for i, value in enumerate(row):
                if not value.is_empty:
                    columns[i].append(value.text)
        return [self.wrap(SUB_ITEM_GLUE.join(texts)) for texts in columns]

    def _load_items(self, entry: Entry) -> list[Any]:
        raw = entry.get(self.field.id)
        if raw in (None, ""):
            return []
        if isinstance(raw, str):
            try:
                decoded = json.loads(raw)
            except json.JSONDecodeError:
                decoded = None
            # "true" や "123" は文字列のまま単一行として扱う
            if not isinstance(decoded, (list, tuple, dict)):
                return [raw]
            raw = decoded
        if isinstance(raw, (list, tuple)):
            return list(raw)
        return [raw]

    def _row_values(self, item: Any) -> list[Any]:
        width = self.get_column_count()
        if isinstance(item, dict):
            if not self.field.list_columns:
                return [next(iter(item.values()), "")]
            return [item.get(name, "") for name in self.field.list_columns]
        if isinstance(item, (list, tuple)):
            return [item[i] if i < len(item) else "" for i in range(width)]
        return [item] + [""] * (width - 1)
