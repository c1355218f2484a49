from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .value import BaseValue

"""Export result model.

Holds the combined rows of one export pass together with the metrics used for
the SUMMARY line.
"""

__all__ = [
    "ExportResult",
]


@dataclass(frozen=True)
class ExportResult:
    """Aggregated output of one export pass."""
    headers: list[str]  # 列ラベル (全フィールドの列数合計と同じ長さ)
    rows: list[list[BaseValue]]  # エントリごとに 1 行
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    throughput_entries_per_sec: float
    skipped_fields: list[str] = field(default_factory=list)

    @property
    def entry_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.headers)
