from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ..models.value import BaseValue
from .base import BaseField, Capability, Entry

"""Separable field transformer.

A separable field has several sub-items (the field's inputs: checkbox choices,
name parts, likert rows, ...). By default all answered sub-items are rendered
into one cell. With separation enabled the transformer becomes multi-row and
emits one row per answered sub-item; the combiner then folds those rows back
into the field's column with the configured glue.
"""

__all__ = [
    "SeparableField",
    "SUB_ITEM_GLUE",
]

SUB_ITEM_GLUE = ", "


class SeparableField(BaseField):
    """Field whose row cardinality depends on its own settings."""

    @property
    def capability(self) -> Capability:
        return Capability.MULTI_ROW if self.is_separation_enabled() else Capability.SCALAR

    def is_separation_enabled(self) -> bool:
        return self.settings.separated

    def get_sub_item_ids(self) -> list[str]:
        if self.field.has_inputs:
            return [i.id for i in self.field.inputs]
        return [self.field.id]

    def get_sub_values(self, entry: Entry) -> list[Any]:
        """Values of every answered sub-item, in input order.

        Answered is decided on the raw entry value, so derived values (e.g. a
        zero score) never turn an unanswered sub-item into a row.
        """
        values = []
        for input_id in self.get_sub_item_ids():
            if entry.get(input_id) in (None, ""):
                continue
            values.append(self.get_field_value(entry, input_id))
        return values

    def get_cells(self, entry: Entry) -> list[BaseValue]:
        if not self.field.has_inputs:
            return super().get_cells(entry)
        values = self.get_sub_values(entry)
        if len(values) == 1:
            return [self.wrap(values[0])]
        return [self.wrap(SUB_ITEM_GLUE.join(self.wrap(v).text for v in values))]

    def get_rows(self, entry: Entry) -> Iterator[list[BaseValue]]:
        if not self.is_separation_enabled():
            yield self.get_cells(entry)
            return
        for value in self.get_sub_values(entry):
            yield [self.wrap(value)]
