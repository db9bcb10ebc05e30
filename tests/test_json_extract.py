import pytest

from aushadh_ai.services.llm.json_extract import ParseError, extract_json


def test_direct_json():
    assert extract_json('{"a": 1}') == {"a": 1}


def test_fenced_json():
    assert extract_json('```json\n{"a":1}\n```') == {"a": 1}


def test_fenced_without_language_tag():
    assert extract_json('```\n{"a":1}\n```') == {"a": 1}


def test_embedded_json():
    assert extract_json('noise {"a":1} noise') == {"a": 1}


def test_embedded_nested_json_uses_outer_braces():
    text = 'Here you go: {"metadata": {"doctor": "Dr. Rao"}, "medications": []} Thanks!'
    assert extract_json(text)["metadata"] == {"doctor": "Dr. Rao"}


@pytest.mark.parametrize("text", ["no braces here", "", "} backwards {", "{not: json}", "[1, 2]"])
def test_unrecoverable_raises(text):
    with pytest.raises(ParseError):
        extract_json(text)
