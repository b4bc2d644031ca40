"""
Content kind definitions for template lines.

Every line of a template is described by exactly one ContentKind variant:
Literal, Interpolation, Tag or Unrecognized.
"""

from dataclasses import dataclass
from enum import Enum


class TagKind(str, Enum):
    """Control tag keywords recognized by the grammar."""
    FOR = "for"
    IF = "if"


@dataclass(frozen=True)
class Expression:
    """
    Variable interpolation split out of a line.

    Attributes:
        head: Text preceding the opening marker (may be empty)
        variable: Trimmed name of the context key
        tail: Text following the closing marker (may be empty)
    """
    head: str
    variable: str
    tail: str


class ContentKind:
    """Base class of the line content variants."""
    __slots__ = ()


@dataclass(frozen=True)
class Literal(ContentKind):
    """Plain text line, passed through unchanged."""
    text: str


@dataclass(frozen=True)
class Interpolation(ContentKind):
    """Line carrying a single variable interpolation."""
    expression: Expression


@dataclass(frozen=True)
class Tag(ContentKind):
    """Line carrying a control tag. Classified, never executed."""
    kind: TagKind


@dataclass(frozen=True)
class Unrecognized(ContentKind):
    """Line the grammar could not place in any other variant."""
