from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

"""Form definition models.

These mirror the field catalogue handed over by the host form platform. Only
the attributes the transformers need are kept; everything else in the source
JSON is ignored.
"""

__all__ = [
    "Choice",
    "FieldInput",
    "FormField",
    "Form",
]


@dataclass(frozen=True)
class Choice:
    """Selectable option of a choice based field (radio, likert, list columns)."""
    text: str
    value: str
    score: int | float = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Choice:
        text = str(data.get("text", ""))
        value = data.get("value")
        return cls(
            text=text,
            value=text if value is None else str(value),
            score=_to_score(data.get("score")),
        )


def _to_score(raw: Any) -> int | float:
    """Scores arrive as numbers or numeric strings; anything else counts as 0."""
    if isinstance(raw, bool) or raw is None:
        return 0
    if isinstance(raw, (int, float)):
        return raw
    try:
        number = float(str(raw).strip())
    except ValueError:
        return 0
    return int(number) if number.is_integer() else number


@dataclass(frozen=True)
class FieldInput:
    """Sub input of a multi input field. ``id`` is the full entry key (e.g. ``"5.1"``)."""
    id: str
    label: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FieldInput:
        return cls(id=str(data["id"]), label=str(data.get("label", "")))


@dataclass(frozen=True)
class FormField:
    """A single logical form field."""
    id: str
    type: str
    label: str
    inputs: tuple[FieldInput, ...] = ()
    choices: tuple[Choice, ...] = ()
    likert_multiple_rows: bool = False
    likert_rows: tuple[Choice, ...] = ()
    list_columns: tuple[str, ...] = ()

    @property
    def has_inputs(self) -> bool:
        return len(self.inputs) > 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FormField:
        """Build a field from the platform JSON shape.

        Accepts both snake_case keys and the platform's own camelCase aliases
        (``gsurveyLikertEnableMultipleRows``, ``gsurveyLikertRows``,
        ``enableColumns``).
        """
        field_type = str(data.get("type", "text"))
        inputs = tuple(FieldInput.from_dict(i) for i in (data.get("inputs") or []))
        choices = tuple(Choice.from_dict(c) for c in (data.get("choices") or []))

        multiple_rows = data.get(
            "likert_multiple_rows", data.get("gsurveyLikertEnableMultipleRows", False)
        )
        likert_rows_raw = data.get("likert_rows", data.get("gsurveyLikertRows")) or []
        likert_rows = tuple(Choice.from_dict(r) for r in likert_rows_raw)

        list_columns: tuple[str, ...] = tuple(str(c) for c in (data.get("list_columns") or []))
        # list フィールド: enableColumns 指定時は choices が列定義
        if field_type == "list" and not list_columns and data.get("enableColumns"):
            list_columns = tuple(c.text for c in choices)

        return cls(
            id=str(data["id"]),
            type=field_type,
            label=str(data.get("label", "")),
            inputs=inputs,
            choices=choices,
            likert_multiple_rows=bool(multiple_rows),
            likert_rows=likert_rows,
            list_columns=list_columns,
        )


@dataclass(frozen=True)
class Form:
    """Ordered field catalogue of one form."""
    id: str
    title: str
    fields: list[FormField] = field(default_factory=list)

    def get_field(self, field_id: str) -> FormField | None:
        for f in self.fields:
            if f.id == field_id:
                return f
        return None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Form:
        return cls(
            id=str(data.get("id", "")),
            title=str(data.get("title", "")),
            fields=[FormField.from_dict(f) for f in (data.get("fields") or [])],
        )
