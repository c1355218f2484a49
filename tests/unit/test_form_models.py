from __future__ import annotations

from entry_export.models.form import Choice, Form, FormField


def test_form_from_dict_keeps_field_order(sample_form: Form):
    assert [f.id for f in sample_form.fields] == ["1", "2", "3", "4", "5"]
    assert sample_form.id == "1"
    assert sample_form.title == "Customer survey"


def test_form_get_field(sample_form: Form):
    assert sample_form.get_field("3").label == "Colors"
    assert sample_form.get_field("99") is None


def test_field_inputs_are_parsed(sample_form: Form):
    colors = sample_form.get_field("3")
    assert colors.has_inputs
    assert [i.id for i in colors.inputs] == ["3.1", "3.2", "3.3"]
    assert colors.inputs[1].label == "Green"


def test_likert_platform_aliases(sample_form: Form):
    likert = sample_form.get_field("4")
    assert likert.likert_multiple_rows is True
    assert [r.value for r in likert.likert_rows] == ["r1", "r2"]
    assert likert.choices[1] == Choice(text="Good", value="c2", score=2)


def test_list_columns_from_enable_columns(sample_form: Form):
    children = sample_form.get_field("5")
    assert children.list_columns == ("First", "Age")


def test_choice_value_defaults_to_text():
    assert Choice.from_dict({"text": "Yes"}).value == "Yes"


def test_choice_score_coercion():
    assert Choice.from_dict({"text": "a", "score": "3"}).score == 3
    assert Choice.from_dict({"text": "a", "score": "1.5"}).score == 1.5
    assert Choice.from_dict({"text": "a", "score": "n/a"}).score == 0
    assert Choice.from_dict({"text": "a"}).score == 0


def test_field_defaults():
    field = FormField.from_dict({"id": 9})
    assert field.type == "text"
    assert field.label == ""
    assert field.inputs == ()
    assert field.likert_multiple_rows is False
