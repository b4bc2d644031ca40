"""
Template line grammar.
Classifies lines into literal, interpolation and tag content.
"""

from .classifier import classify
from .delimiters import INTERPOLATION, TAG, DelimiterPair, matches_pair
from .expressions import extract_expression
from .tags import classify_tag
from .types import (
    ContentKind,
    Expression,
    Interpolation,
    Literal,
    Tag,
    TagKind,
    Unrecognized,
)

__all__ = [
    "classify",
    "matches_pair",
    "extract_expression",
    "classify_tag",
    "DelimiterPair",
    "INTERPOLATION",
    "TAG",
    "ContentKind",
    "Expression",
    "Interpolation",
    "Literal",
    "Tag",
    "TagKind",
    "Unrecognized",
]
