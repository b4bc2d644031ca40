"""Expression extraction for interpolation lines."""

from ..exceptions import MalformedExpression
from .delimiters import INTERPOLATION, payload_span
from .types import Expression


def extract_expression(line: str) -> Expression:
    """
    Split an interpolation line into head, variable and tail.

    The caller is expected to have checked the line with matches_pair first;
    the payload gap is not re-validated here.

    Args:
        line: Line containing a {{ ... }} pair

    Returns:
        Expression with the markers removed and the variable trimmed

    Raises:
        MalformedExpression: If either marker cannot be located
    """
    span = payload_span(line, INTERPOLATION)
    if span is None:
        raise MalformedExpression(
            f"No expression found between '{INTERPOLATION.open}' and '{INTERPOLATION.close}'",
            context={"line": line}
        )

    start, end = span
    # Only the first closing marker is removed; anything after it stays in tail
    head = line[:start - len(INTERPOLATION.open)]
    variable = line[start:end].strip()
    tail = line[end + len(INTERPOLATION.close):]

    return Expression(head=head, variable=variable, tail=tail)
