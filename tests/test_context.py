"""Tests for context loading."""

import json

import pytest

from template_engine.context import (
    SAMPLE_CONTEXT,
    build_context,
    load_context_file,
    parse_pairs,
)
from template_engine.exceptions import ContextValidationError


def test_parse_pairs():
    assert parse_pairs(["name=Bob", "city=Oskemen"]) == {"name": "Bob", "city": "Oskemen"}


def test_parse_pairs_splits_on_first_equals():
    assert parse_pairs(["expr=a=b"]) == {"expr": "a=b"}


def test_parse_pairs_allows_empty_value():
    assert parse_pairs(["name="]) == {"name": ""}


@pytest.mark.parametrize("pair", ["name", "=Bob"])
def test_parse_pairs_rejects_invalid(pair):
    with pytest.raises(ContextValidationError):
        parse_pairs([pair])


def test_load_yaml_context_file(tmp_path):
    context_file = tmp_path / "context.yaml"
    context_file.write_text("name: Bob\nage: 30\nadmin: true\n")

    assert load_context_file(context_file) == {"name": "Bob", "age": 30, "admin": True}


def test_load_json_context_file(tmp_path):
    context_file = tmp_path / "context.json"
    context_file.write_text(json.dumps({"name": "Bob", "tags": ["a", "b"]}))

    assert load_context_file(context_file) == {"name": "Bob", "tags": ["a", "b"]}


def test_load_empty_context_file(tmp_path):
    context_file = tmp_path / "empty.yaml"
    context_file.write_text("")
    assert load_context_file(context_file) == {}


def test_load_context_file_must_be_mapping(tmp_path):
    context_file = tmp_path / "list.yaml"
    context_file.write_text("- name\n- city\n")

    with pytest.raises(ContextValidationError) as exc_info:
        load_context_file(context_file)
    assert "mapping" in str(exc_info.value)


def test_load_context_file_parse_error(tmp_path):
    context_file = tmp_path / "broken.yaml"
    context_file.write_text("name: [unclosed\n")

    with pytest.raises(ContextValidationError):
        load_context_file(context_file)


def test_load_missing_context_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_context_file(tmp_path / "missing.yaml")


def test_build_context_precedence(tmp_path):
    context_file = tmp_path / "context.yaml"
    context_file.write_text("name: Alice\ncountry: KZ\n")

    context = build_context(
        pairs=["country=Kazakhstan"],
        context_file=context_file,
        sample=True
    )

    assert context == {"name": "Alice", "city": "Oskemen", "country": "Kazakhstan"}


def test_build_context_defaults_to_empty():
    assert build_context() == {}


def test_sample_context_not_shared():
    context = build_context(sample=True)
    context["name"] = "Changed"
    assert SAMPLE_CONTEXT["name"] == "Bob"


def test_load_context_file_invalid_utf8(tmp_path):
    context_file = tmp_path / "context.yaml"
    context_file.write_bytes(b"name: \xff\n")

    with pytest.raises(ContextValidationError) as exc_info:
        load_context_file(context_file)
    assert "UTF-8" in str(exc_info.value)
