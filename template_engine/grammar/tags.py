"""
Tag keyword classification.

The keyword is found by a containment test on the first four characters of
the trimmed payload, not by a leading-token match. A payload such as
"elif x" therefore classifies as IF. This looseness is kept for
compatibility with existing templates.
"""

from ..exceptions import MalformedTag, UnknownTag
from .delimiters import TAG, payload_span
from .types import TagKind

KEYWORD_WINDOW = 4

# Checked in order, first hit wins
KEYWORDS = (
    ("if", TagKind.IF),
    ("for", TagKind.FOR),
)


def classify_tag(line: str) -> TagKind:
    """
    Map a tag line to its TagKind.

    Args:
        line: Line containing a {% ... %} pair

    Returns:
        TagKind of the tag

    Raises:
        MalformedTag: If the markers are missing or the payload is too short
        UnknownTag: If no known keyword appears in the keyword window
    """
    span = payload_span(line, TAG)
    if span is None:
        raise MalformedTag(
            f"No tag found between '{TAG.open}' and '{TAG.close}'",
            context={"line": line}
        )

    start, end = span
    payload = line[start:end].strip()
    if len(payload) < KEYWORD_WINDOW:
        raise MalformedTag(
            f"Tag payload too short to classify: '{payload}'",
            context={"payload": payload}
        )

    window = payload[:KEYWORD_WINDOW]
    for keyword, kind in KEYWORDS:
        if keyword in window:
            return kind

    raise UnknownTag(
        f"Unknown tag keyword in '{payload}'",
        context={"payload": payload, "known": [keyword for keyword, _ in KEYWORDS]}
    )
