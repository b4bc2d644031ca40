"""Tests for line classification."""

import pytest

from template_engine.exceptions import MalformedTag, UnknownTag
from template_engine.grammar import (
    Expression,
    Interpolation,
    Literal,
    Tag,
    TagKind,
    classify,
)


def test_literal_line():
    line = "<h1>Hello world</h1>"
    assert classify(line) == Literal(line)


@pytest.mark.parametrize("line", [
    "",
    "   ",
    "<div class=\"box\">",
    "{{}} empty interpolation",
    "}} reversed {{",
    "{ single braces }",
    "{%%}",
])
def test_lines_without_valid_pair_are_literal(line):
    assert classify(line) == Literal(line)


def test_interpolation_line():
    assert classify("Hi {{name}} ,welcome") == Interpolation(
        Expression(head="Hi ", variable="name", tail=" ,welcome")
    )


def test_for_tag_line():
    assert classify("{% for name in names %}, welcome") == Tag(TagKind.FOR)


def test_if_tag_line():
    assert classify("{% if name == 'Bob' %}") == Tag(TagKind.IF)


def test_interpolation_takes_precedence_over_tag():
    line = "{% if ready %} Hello {{ name }}"
    kind = classify(line)
    assert isinstance(kind, Interpolation)
    assert kind.expression.variable == "name"
    assert kind.expression.head == "{% if ready %} Hello "


def test_tag_errors_propagate_instead_of_literal_fallback():
    with pytest.raises(UnknownTag):
        classify("{% block body %}")
    with pytest.raises(MalformedTag):
        classify("{% if %}")
