from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd

from ..models.form import Form

"""Readers for the form definition and the entries of one export pass.

Entry retrieval from the form platform is not part of this package; these
readers load the files a platform dump (or a test fixture) produces:

- form definition: JSON object ``{"id", "title", "fields": [...]}``
- entries: JSON list of objects, or a CSV file whose header holds the input
  keys (``"1"``, ``"5.1"``, ...). CSV cells are read as text; empty cells stay
  empty strings.
"""

__all__ = [
    "FormDefinitionError",
    "read_form",
    "read_entries",
]


class FormDefinitionError(Exception):
    """Raised when a form definition or entry file cannot be used."""


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FormDefinitionError(f"file not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise FormDefinitionError(f"invalid json in {path}: {e}") from e


def read_form(path: Path) -> Form:
    data = _read_json(path)
    if not isinstance(data, dict):
        raise FormDefinitionError(f"form definition must be an object: {path}")
    try:
        return Form.from_dict(data)
    except (KeyError, TypeError) as e:
        raise FormDefinitionError(f"invalid form definition {path}: {e!r}") from e


def read_entries(path: Path) -> list[dict[str, Any]]:
    """Read entries in file order (JSON list or CSV)."""
    if path.suffix.lower() == ".csv":
        if not path.exists():
            raise FormDefinitionError(f"file not found: {path}")
        # 全列を文字列として読み込み、pandas の NaN 変換を無効化
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        df.columns = [str(c).strip() for c in df.columns]
        return df.to_dict(orient="records")

    data = _read_json(path)
    if not isinstance(data, list):
        raise FormDefinitionError(f"entries must be a list: {path}")
    entries = []
    for i, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise FormDefinitionError(f"entry #{i} is not an object: {path}")
        entries.append({str(k): v for k, v in raw.items()})
    return entries
