"""Tests for delimiter pair matching."""

import pytest

from template_engine.grammar.delimiters import INTERPOLATION, TAG, matches_pair, payload_span


def test_matching_pair_with_payload():
    assert matches_pair("{{Hello}}", "{{", "}}") is True
    assert matches_pair("{{x}}", "{{", "}}") is True


def test_matching_pair_empty_payload():
    """Adjacent markers leave no payload and do not match."""
    assert matches_pair("{{}}", "{{", "}}") is False


def test_matching_pair_wrong_order():
    assert matches_pair("}}{{", "{{", "}}") is False


@pytest.mark.parametrize("line", [
    "<h1>Hello world</h1>",
    "only {{ opening",
    "only }} closing",
    "",
])
def test_matching_pair_missing_marker(line):
    assert matches_pair(line, "{{", "}}") is False


def test_matching_pair_uses_first_occurrences():
    # First '}}' comes before the first '{{'
    assert matches_pair("}} {{name}}", "{{", "}}") is False
    assert matches_pair("{{a}} and {{b}}", "{{", "}}") is True


def test_matching_pair_tag_markers():
    assert matches_pair("{% if x %}", TAG.open, TAG.close) is True
    assert matches_pair("{%%}", TAG.open, TAG.close) is False


def test_payload_span_finds_close_after_open():
    line = "}} {{name}}"
    start, end = payload_span(line, INTERPOLATION)
    assert line[start:end] == "name"


def test_payload_span_missing_marker():
    assert payload_span("Hi {{name", INTERPOLATION) is None
    assert payload_span("Hi name}}", INTERPOLATION) is None
