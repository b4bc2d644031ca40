"""Context loading from KEY=VALUE pairs and YAML/JSON files."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from template_engine.exceptions import ContextValidationError


logger = logging.getLogger(__name__)

# Demo context of the original index.html example
SAMPLE_CONTEXT: Dict[str, str] = {
    "name": "Bob",
    "city": "Oskemen",
}


def parse_pairs(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Parse KEY=VALUE pairs. The value may itself contain '='."""
    context: Dict[str, str] = {}
    for item in pairs or []:
        if '=' not in item:
            raise ContextValidationError(f"Invalid context format: {item}. Expected KEY=VALUE")
        key, value = item.split('=', 1)
        if not key:
            raise ContextValidationError(f"Invalid KEY in pair: {item}")
        context[key] = value
    return context


def load_context_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load context variables from a YAML or JSON file.

    JSON is read through the YAML loader as well. Keys are converted to
    strings; values keep their loaded type and are stringified at render time.

    Raises:
        FileNotFoundError: If the file does not exist
        ContextValidationError: If the file is not a mapping or fails to parse
    """
    context_file = Path(path)
    if not context_file.exists():
        raise FileNotFoundError(f"Context file not found: {context_file}")

    try:
        with open(context_file, 'r', encoding='utf-8') as f:
            file_context = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ContextValidationError(f"Failed to parse context file {context_file}: {e}")
    except UnicodeDecodeError as e:
        raise ContextValidationError(f"Context file {context_file} is not valid UTF-8: {e}")

    if file_context is None:
        return {}
    if not isinstance(file_context, dict):
        raise ContextValidationError(
            f"Context file must contain a mapping, got {type(file_context).__name__}"
        )

    return {str(key): value for key, value in file_context.items()}


def build_context(
    pairs: Optional[List[str]] = None,
    context_file: Optional[Union[str, Path]] = None,
    sample: bool = False
) -> Dict[str, Any]:
    """
    Build the render context.

    Later sources override earlier ones: sample context, then the context
    file, then KEY=VALUE pairs.
    """
    context: Dict[str, Any] = {}

    if sample:
        context.update(SAMPLE_CONTEXT)

    if context_file:
        context.update(load_context_file(context_file))

    context.update(parse_pairs(pairs))

    logger.debug(f"Built context with keys: {sorted(context)}")
    return context
