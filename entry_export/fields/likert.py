from __future__ import annotations

from typing import Any

from ..models.value import BaseValue
from .base import BaseField, Entry
from .separable import SeparableField

"""Transformer for the survey ``likert`` field.

Entry values of a likert field are ``"<row key>:<column key>"`` for multi row
likerts (one input per row) and a plain ``"<column key>"`` for single row ones.
The exported value is either the matched choice text or the choice score.
"""

__all__ = [
    "SurveyLikertField",
    "ROW_SEPARATOR",
]

ROW_SEPARATOR = ":"


class SurveyLikertField(SeparableField):
    """Likert field with optional score output."""

    def use_score_output(self) -> bool:
        return self.settings.use_score

    def has_multiple_rows(self) -> bool:
        return self.field.likert_multiple_rows

    def is_separation_enabled(self) -> bool:
        # 単一行 likert は分離対象のサブ項目を持たない
        return super().is_separation_enabled() and self.has_multiple_rows()

    def get_field_value(self, entry: Entry, input_id: str = "") -> Any:
        if not self.use_score_output():
            return self._get_text_value(entry, input_id)

        _, column_key = self._split(entry.get(input_id or self.field.id) or ROW_SEPARATOR)
        for choice in self.field.choices:
            if choice.value == column_key:
                return choice.score
        return 0  # 該当選択肢なし

    def get_cells(self, entry: Entry) -> list[BaseValue]:
        if self.has_multiple_rows():
            return super().get_cells(entry)
        return BaseField.get_cells(self, entry)

    def _get_text_value(self, entry: Entry, input_id: str) -> str:
        raw = entry.get(input_id or self.field.id)
        if raw in (None, ""):
            return ""
        row_key, column_key = self._split(raw)
        text = column_key
        for choice in self.field.choices:
            if choice.value == column_key:
                text = choice.text
                break
        if not self.has_multiple_rows():
            return text
        for row in self.field.likert_rows:
            if row.value == row_key:
                return f"{row.text}: {text}"
        return text

    @staticmethod
    def _split(value: Any) -> tuple[str, str]:
        """Split into (row key, column key); a value without separator is a single implicit row."""
        value = str(value)
        if ROW_SEPARATOR not in value:
            value = ROW_SEPARATOR + value
        parts = value.split(ROW_SEPARATOR)
        return parts[0], parts[1]
