from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ErrorRecord model for error logging.

This module defines the ErrorRecord dataclass used for structured error logging
during an export pass. It supports entry_id=-1 as a sentinel value for
catalogue-level errors where no specific entry is involved.
"""

__all__ = [
    "ErrorRecord",
]


@dataclass(frozen=True)
class ErrorRecord:
    """Structured error record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        form_id: Form being exported
        entry_id: Entry identifier. Use -1 when the entry is unknown
        field_id: Field whose transformer failed ("" when not field specific)
        error_type: Error classification in UPPER_SNAKE_CASE format
        message: Error description
    """
    timestamp: str  # ISO8601 UTC
    form_id: str
    entry_id: int | str  # 不明な場合 -1 許容
    field_id: str
    error_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(
        form_id: str, entry_id: int | str, field_id: str, error_type: str, message: str
    ) -> ErrorRecord:
        """Create a new ErrorRecord with current UTC timestamp."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ErrorRecord(
            timestamp=ts,
            form_id=form_id,
            entry_id=entry_id,
            field_id=field_id,
            error_type=error_type,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize ErrorRecord to JSON Lines format (no extra keys)."""
        return json.dumps(asdict(self), ensure_ascii=False)
