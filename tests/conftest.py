# Shared pytest fixtures
from __future__ import annotations
import json
import tempfile
from pathlib import Path
from typing import Any

import pytest

from entry_export.models.config_models import ExportConfig
from entry_export.models.form import Form


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """form_id: 1
enabled_fields: ["1", "2", "3", "4", "5"]
disabled_fields: []
separated_fields: ["3", "4"]
likert_score_fields: []
glue:
  by_type:
    list: " | "
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "export.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def sample_form_dict() -> dict[str, Any]:
    """Contact form with one field per transformer kind."""
    return {
        "id": 1,
        "title": "Customer survey",
        "fields": [
            {"id": 1, "type": "text", "label": "Name"},
            {"id": 2, "type": "number", "label": "Age"},
            {
                "id": 3,
                "type": "checkbox",
                "label": "Colors",
                "inputs": [
                    {"id": "3.1", "label": "Red"},
                    {"id": "3.2", "label": "Green"},
                    {"id": "3.3", "label": "Blue"},
                ],
            },
            {
                "id": 4,
                "type": "likert",
                "label": "Service",
                "gsurveyLikertEnableMultipleRows": True,
                "gsurveyLikertRows": [
                    {"text": "Speed", "value": "r1"},
                    {"text": "Quality", "value": "r2"},
                ],
                "inputs": [
                    {"id": "4.1", "label": "Speed"},
                    {"id": "4.2", "label": "Quality"},
                ],
                "choices": [
                    {"text": "Bad", "value": "c1", "score": 1},
                    {"text": "Good", "value": "c2", "score": 2},
                ],
            },
            {
                "id": 5,
                "type": "list",
                "label": "Children",
                "enableColumns": True,
                "choices": [{"text": "First"}, {"text": "Age"}],
            },
        ],
    }


@pytest.fixture()
def sample_form(sample_form_dict: dict[str, Any]) -> Form:
    return Form.from_dict(sample_form_dict)


@pytest.fixture()
def sample_entries() -> list[dict[str, Any]]:
    return [
        {
            "id": 101,
            "1": "Alice",
            "2": "34",
            "3.1": "Red",
            "3.3": "Blue",
            "4.1": "r1:c2",
            "4.2": "r2:c1",
            "5": [{"First": "Tom", "Age": 4}, {"First": "Ann", "Age": 7}],
        },
        {
            "id": 102,
            "1": "Bob",
            "2": "",
            "3.2": "Green",
        },
    ]


@pytest.fixture()
def sample_config() -> ExportConfig:
    return ExportConfig(form_id="1", separated_fields={"3", "4"})


@pytest.fixture()
def write_inputs(
    temp_workdir: Path, sample_form_dict: dict[str, Any], sample_entries: list[dict[str, Any]]
) -> tuple[Path, Path]:
    form_path = temp_workdir / "data" / "form.json"
    entries_path = temp_workdir / "data" / "entries.json"
    form_path.write_text(json.dumps(sample_form_dict), encoding="utf-8")
    entries_path.write_text(json.dumps(sample_entries), encoding="utf-8")
    return form_path, entries_path
