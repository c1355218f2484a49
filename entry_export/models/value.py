from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

"""Typed cell values for the entry export.

A value keeps the raw payload of a single cell together with the field it
belongs to. Values stay typed while they own a column alone; once the combiner
folds several values into one cell the result is always a StringValue.
"""

__all__ = [
    "BaseValue",
    "StringValue",
    "NumericValue",
    "BooleanValue",
]


@dataclass(frozen=True)
class BaseValue:
    """Immutable cell value.

    Attributes:
        raw: Raw payload (str, int, float, Decimal, bool or None)
        field_id: Identity of the owning form field
        field_type: Field type of the owning form field (used for glue lookup)
    """
    raw: Any
    field_id: str = ""
    field_type: str = ""

    @property
    def text(self) -> str:
        """Locale independent text form used when values are folded."""
        if self.raw is None:
            return ""
        return str(self.raw)

    @property
    def is_empty(self) -> bool:
        return self.text == ""

    @staticmethod
    def create(raw: Any, field_id: str = "", field_type: str = "") -> BaseValue:
        """Create the typed value matching the Python type of ``raw``.

        bool は int のサブクラスなので先に判定する。
        """
        if isinstance(raw, bool):
            return BooleanValue(raw, field_id, field_type)
        if isinstance(raw, (int, float, Decimal)):
            return NumericValue(raw, field_id, field_type)
        if raw is None:
            return StringValue("", field_id, field_type)
        return StringValue(str(raw), field_id, field_type)


@dataclass(frozen=True)
class StringValue(BaseValue):
    """Plain text cell."""


@dataclass(frozen=True)
class NumericValue(BaseValue):
    """Numeric cell (int, float or Decimal)."""

    @property
    def text(self) -> str:
        raw = self.raw
        if raw is None:
            return ""
        # 2.0 -> "2" (整数値は小数点なしで出力)
        if isinstance(raw, float) and raw.is_integer():
            return str(int(raw))
        if isinstance(raw, Decimal):
            if not raw.is_finite():
                return str(raw)
            if raw == raw.to_integral_value():
                # 1E+30 -> "1000...0" (指数表記にしない)
                return format(raw.to_integral_value(), "f")
        return str(raw)


@dataclass(frozen=True)
class BooleanValue(BaseValue):
    """Boolean cell rendered as ``1`` / ``0``."""

    @property
    def text(self) -> str:
        return "1" if self.raw else "0"
