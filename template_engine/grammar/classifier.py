"""Line classification entry point."""

from .delimiters import INTERPOLATION, TAG, matches_pair
from .expressions import extract_expression
from .tags import classify_tag
from .types import ContentKind, Interpolation, Literal, Tag


def classify(line: str) -> ContentKind:
    """
    Classify a single template line.

    Interpolation is checked before tag, so a line satisfying both delimiter
    pairs is always an Interpolation. Errors from the extractor or the tag
    classifier propagate; a marked line never falls back to Literal.

    Raises:
        MalformedExpression, MalformedTag, UnknownTag
    """
    if matches_pair(line, INTERPOLATION.open, INTERPOLATION.close):
        return Interpolation(extract_expression(line))
    if matches_pair(line, TAG.open, TAG.close):
        return Tag(classify_tag(line))
    return Literal(line)
