from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence

from ..fields.base import Capability, Entry, FieldTransformer
from ..models.config_models import DEFAULT_GLUE
from ..models.value import BaseValue, StringValue

"""Combiner: folds the rows of all field transformers into one row per entry.

For every entry the combiner collects each transformer's row(s) into buckets
keyed by absolute column index. A transformer's first column is the sum of the
declared column counts of all transformers before it; nothing else decides
alignment. Buckets with a single value keep that value (and its type). Buckets
with several values are joined into one StringValue in emission order.
"""

__all__ = [
    "GlueHook",
    "default_glue",
    "CombinerError",
    "ColumnCountMismatchError",
    "InvalidColumnCountError",
    "Combiner",
    "check_column_counts",
]

# (field_type, field_id, value) -> join string placed before ``value``
GlueHook = Callable[[str, str, BaseValue], str]


def default_glue(field_type: str, field_id: str, value: BaseValue) -> str:
    return DEFAULT_GLUE


class CombinerError(Exception):
    """Base exception for catalogue inconsistencies detected while combining."""
    error_type = "CATALOGUE_INCONSISTENCY"

    def __init__(self, message: str, field_id: str = "") -> None:
        super().__init__(message)
        self.field_id = field_id


class InvalidColumnCountError(CombinerError):
    """A transformer declares fewer than one column."""
    error_type = "INVALID_COLUMN_COUNT"


class ColumnCountMismatchError(CombinerError):
    """A transformer produced a row whose width differs from its declared column count."""
    error_type = "COLUMN_COUNT_MISMATCH"


def check_column_counts(fields: Sequence[FieldTransformer]) -> int:
    """Validate the declared column counts of a catalogue.

    Returns:
        Total column count of the catalogue

    Raises:
        InvalidColumnCountError: a transformer declares a column count < 1
    """
    total = 0
    for field in fields:
        count = field.get_column_count()
        if count < 1:
            raise InvalidColumnCountError(
                f"field {field.field.id} declares {count} columns", field.field.id
            )
        total += count
    return total


class Combiner:
    """Combines multiple field transformers into one row per entry.

    Single use: one instance per export pass. Rows are appended in the order
    ``parse_entry`` is called and never removed.
    """

    def __init__(self, glue: GlueHook | None = None) -> None:
        self._glue: GlueHook = glue or default_glue
        self._rows: list[list[BaseValue]] = []

    def parse_entry(self, fields: Sequence[FieldTransformer], entry: Entry) -> None:
        """Combine the rows of all ``fields`` for ``entry`` and store the result.

        Raises:
            InvalidColumnCountError: a transformer declares a column count < 1
            ColumnCountMismatchError: a produced row is wider or narrower than declared
        """
        check_column_counts(fields)
        column_index = 0
        buckets: dict[int, list[BaseValue]] = {}
        owners: list[FieldTransformer] = []

        for field in fields:
            count = field.get_column_count()
            for cells in self._get_field_rows(field, entry):
                cells = list(cells)
                if len(cells) != count:
                    raise ColumnCountMismatchError(
                        f"field {field.field.id} produced {len(cells)} cells, "
                        f"expected {count}",
                        field.field.id,
                    )
                for i, cell in enumerate(cells):
                    buckets.setdefault(column_index + i, []).append(cell)
            owners.extend([field] * count)
            column_index += count

        combined_row = [
            self._fold(buckets.get(column, []), owners[column]) for column in range(column_index)
        ]
        self._rows.append(combined_row)

    def get_rows(self) -> Iterator[list[BaseValue]]:
        """Yield every combined row in ``parse_entry`` order."""
        yield from self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def _get_field_rows(self, field: FieldTransformer, entry: Entry) -> Iterable[Sequence[BaseValue]]:
        if field.capability is Capability.MULTI_ROW:
            return field.get_rows(entry)
        return (field.get_cells(entry),)

    def _fold(self, values: list[BaseValue], owner: FieldTransformer) -> BaseValue:
        # 単一値は型を保持したまま
        if len(values) == 1:
            return values[0]
        if not values:
            return StringValue("", owner.field.id, owner.field.type)

        output = ""
        for value in values:
            if output:
                output += self._glue(value.field_type, value.field_id, value)
            output += value.text

        first = values[0]
        return StringValue(output, first.field_id, first.field_type)
