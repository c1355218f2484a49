from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..models.error_record import ErrorRecord

"""Abort records of export passes, kept as JSON Lines.

Records are held in memory until ``flush``; the first flush of a buffer fixes
its file, ``<logs_dir>/errors-YYYYMMDD-HHMMSS.log`` (UTC), and later flushes
append to it.
"""

__all__ = [
    "ErrorRecord",
    "ErrorLogBuffer",
]

DEFAULT_LOGS_DIR = Path("logs")


class ErrorLogBuffer:
    def __init__(self, logs_dir: Path | None = None) -> None:
        self.logs_dir = Path(logs_dir) if logs_dir is not None else DEFAULT_LOGS_DIR
        self.pending: list[ErrorRecord] = []
        self._path: Path | None = None

    def log_path(self) -> Path:
        if self._path is None:
            stamp = datetime.now(UTC).strftime("%Y%m%d-%H%M%S")
            self._path = self.logs_dir / f"errors-{stamp}.log"
        return self._path

    def append(self, record: ErrorRecord) -> None:
        self.pending.append(record)

    def flush(self) -> Path:
        """Append pending records to the log file and return its path."""
        path = self.log_path()
        if self.pending:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("a", encoding="utf-8") as f:
                f.writelines(f"{r.to_json_line()}\n" for r in self.pending)
            self.pending.clear()
        return path
