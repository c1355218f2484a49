from __future__ import annotations

from typing import Any

from .base import BaseField, Entry

__all__ = [
    "NumberField",
]


class NumberField(BaseField):
    """Numeric field; numeric strings are exported as numbers."""

    def get_field_value(self, entry: Entry, input_id: str = "") -> Any:
        value = super().get_field_value(entry, input_id)
        if not isinstance(value, str):
            return value
        stripped = value.strip()
        if stripped == "":
            return ""
        try:
            number = float(stripped)
        except ValueError:
            # 数値でない入力はテキストのまま出力
            return value
        if number.is_integer() and "." not in stripped and "e" not in stripped.lower():
            return int(stripped)
        return number
