"""
Interpolation rendering.
Substitutes a context value into an extracted expression.
"""

import json
from typing import Any, Mapping

from ..exceptions import MissingVariable
from ..grammar.types import Expression


def stringify(value: Any) -> str:
    """
    Convert a context value to its rendered text.

    Strings are used verbatim, booleans become 'true'/'false', numbers use
    str(), and anything else gets its JSON representation.
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    elif isinstance(value, (int, float)):
        return str(value)
    elif isinstance(value, str):
        return value
    else:
        return json.dumps(value)


def render(expression: Expression, context: Mapping[str, Any]) -> str:
    """
    Render an expression against a context.

    Args:
        expression: Expression extracted from an interpolation line
        context: Mapping of variable names to values (not modified)

    Returns:
        head + value + tail

    Raises:
        MissingVariable: If the variable is not a key of the context
    """
    if expression.variable not in context:
        raise MissingVariable(expression.variable)

    value = stringify(context[expression.variable])
    return f"{expression.head}{value}{expression.tail}"

