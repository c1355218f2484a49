from __future__ import annotations

from dataclasses import dataclass, field

"""Config dataclasses for the entry export.

ExportConfig is the resolved form of config/export.yml. FieldSettings is the
per-field slice of it that a transformer receives at construction time, so no
transformer has to consult the export config while entries are processed.
"""

__all__ = [
    "DEFAULT_GLUE",
    "GlueConfig",
    "ExportConfig",
    "FieldSettings",
]

DEFAULT_GLUE = "\n---\n"


@dataclass(frozen=True)
class GlueConfig:
    """Join strings used when several values end up in one cell.

    Lookup order: by_field -> by_type -> default.
    """
    default: str = DEFAULT_GLUE
    by_type: dict[str, str] = field(default_factory=dict)
    by_field: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class FieldSettings:
    """Behaviour switches for a single field transformer."""
    separated: bool = False  # 複数サブ項目を行ごとに分離する
    use_score: bool = False  # likert: 選択肢テキストの代わりにスコアを出力


@dataclass(frozen=True)
class ExportConfig:
    """Root configuration object for one export pass."""
    form_id: str
    enabled_fields: list[str] | None = None  # None = フォーム定義順で全フィールド
    disabled_fields: set[str] = field(default_factory=set)
    separated_fields: set[str] = field(default_factory=set)
    likert_score_fields: set[str] = field(default_factory=set)
    glue: GlueConfig = field(default_factory=GlueConfig)

    def settings_for(self, field_id: str) -> FieldSettings:
        return FieldSettings(
            separated=field_id in self.separated_fields,
            use_score=field_id in self.likert_score_fields,
        )
