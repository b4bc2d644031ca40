"""
Delimiter matching for template lines.

Only the first occurrence of each marker in a line is ever considered.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class DelimiterPair:
    """Opening and closing markers bounding a template construct."""
    open: str
    close: str


INTERPOLATION = DelimiterPair("{{", "}}")
TAG = DelimiterPair("{%", "%}")


def matches_pair(line: str, open: str, close: str) -> bool:
    """
    Check whether a line holds a well-formed delimiter pair.

    The end of the first opening marker must come strictly before the start
    of the first closing marker, leaving at least one character of payload.

    Args:
        line: Line of template text
        open: Opening marker
        close: Closing marker

    Returns:
        True if both markers are present, ordered, and not adjacent
    """
    open_index = line.find(open)
    close_index = line.find(close)
    if open_index < 0 or close_index < 0:
        return False
    return open_index + len(open) < close_index


def payload_span(line: str, pair: DelimiterPair) -> Optional[Tuple[int, int]]:
    """
    Locate the payload between the first opening marker and the first
    closing marker that follows it.

    Returns:
        (start, end) slice bounds of the payload, or None if either
        marker cannot be found
    """
    open_index = line.find(pair.open)
    if open_index < 0:
        return None

    start = open_index + len(pair.open)
    end = line.find(pair.close, start)
    if end < 0:
        return None

    return start, end
