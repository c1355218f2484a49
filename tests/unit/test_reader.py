from __future__ import annotations

import json
from pathlib import Path

import pytest

from entry_export.source.reader import FormDefinitionError, read_entries, read_form


def test_read_form(write_inputs: tuple[Path, Path]):
    form_path, _ = write_inputs
    form = read_form(form_path)
    assert form.id == "1"
    assert len(form.fields) == 5


def test_read_form_missing_file(temp_workdir: Path):
    with pytest.raises(FormDefinitionError):
        read_form(temp_workdir / "nope.json")


def test_read_form_invalid_json(temp_workdir: Path):
    path = temp_workdir / "data" / "form.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(FormDefinitionError) as e:
        read_form(path)
    assert "invalid json" in str(e.value)


def test_read_form_field_without_id(temp_workdir: Path):
    path = temp_workdir / "data" / "form.json"
    path.write_text(json.dumps({"id": 1, "fields": [{"type": "text"}]}), encoding="utf-8")
    with pytest.raises(FormDefinitionError):
        read_form(path)


def test_read_entries_json(write_inputs: tuple[Path, Path]):
    _, entries_path = write_inputs
    entries = read_entries(entries_path)
    assert [e["id"] for e in entries] == [101, 102]
    assert entries[0]["3.1"] == "Red"


def test_read_entries_rejects_non_list(temp_workdir: Path):
    path = temp_workdir / "data" / "entries.json"
    path.write_text(json.dumps({"1": "a"}), encoding="utf-8")
    with pytest.raises(FormDefinitionError):
        read_entries(path)


def test_read_entries_csv_keeps_text(temp_workdir: Path):
    path = temp_workdir / "data" / "entries.csv"
    path.write_text("id,1,2,3.1\n7,NA,0042,\n8,Bob,5,Red\n", encoding="utf-8")
    entries = read_entries(path)
    assert entries == [
        {"id": "7", "1": "NA", "2": "0042", "3.1": ""},
        {"id": "8", "1": "Bob", "2": "5", "3.1": "Red"},
    ]
