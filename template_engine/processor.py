"""
Template processing loop.

Classifies each line, renders interpolations and applies the error policy:
- stop: raise TemplateRenderError on the first failing line
- continue: emit the original line unchanged and record the error
- skip: drop the line from the output and record the error
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .exceptions import LineError, TemplateError, TemplateRenderError, UnrecognizedLine
from .grammar import ContentKind, Interpolation, Literal, Tag, Unrecognized, classify
from .variables import render


logger = logging.getLogger(__name__)

ERROR_POLICIES = ('stop', 'continue', 'skip')


def split_lines(text: str) -> List[str]:
    r"""
    Split text on "\n" and "\r\n" only.

    Other characters str.splitlines() treats as boundaries (form feed, lone
    "\r", "\u2028", ...) stay inside the line. A trailing newline does not
    produce an empty final line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


@dataclass
class LineResult:
    """Result of processing a single line."""
    line_number: int
    source: str
    kind: Optional[ContentKind] = None
    output: Optional[str] = None
    error: Optional[LineError] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dict, omitting None values."""
        result: Dict[str, Any] = {
            "line_number": self.line_number,
            "source": self.source,
        }
        if self.kind is not None:
            result["kind"] = type(self.kind).__name__
        if self.output is not None:
            result["output"] = self.output
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result


@dataclass
class ProcessResult:
    """Result of processing a whole template."""
    lines: List[LineResult] = field(default_factory=list)
    errors: List[LineError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def output_lines(self) -> List[str]:
        return [r.output for r in self.lines if r.output is not None]

    def to_text(self) -> str:
        """Join output lines, each terminated by a newline."""
        return "".join(f"{line}\n" for line in self.output_lines)


class TemplateProcessor:
    """
    Drives classification and rendering over template lines.
    Lines are independent; no state is carried from one line to the next.
    """

    def __init__(self, on_error: str = 'stop'):
        """
        Initialize the processor.

        Args:
            on_error: Error policy, one of 'stop', 'continue', 'skip'
        """
        if on_error not in ERROR_POLICIES:
            raise ValueError(f"Invalid error policy '{on_error}'. Expected one of: {ERROR_POLICIES}")
        self.on_error = on_error

    def process_line(self, line: str, context: Mapping[str, Any], line_number: int = 1) -> LineResult:
        """
        Classify and render one line. Never raises for template errors;
        failures are returned in LineResult.error.
        """
        result = LineResult(line_number=line_number, source=line)

        try:
            kind = classify(line)
            result.kind = kind
            result.output = self._dispatch(kind, line, context)
        except TemplateError as e:
            result.error = LineError.from_exception(e, line_number, line)

        return result

    def _dispatch(self, kind: ContentKind, line: str, context: Mapping[str, Any]) -> str:
        if isinstance(kind, Literal):
            return kind.text
        elif isinstance(kind, Interpolation):
            return render(kind.expression, context)
        elif isinstance(kind, Tag):
            # Tags are passed through; control flow is not executed
            return line
        elif isinstance(kind, Unrecognized):
            raise UnrecognizedLine(line)
        raise TypeError(f"Unsupported content kind: {type(kind).__name__}")

    def process_lines(self, lines: Iterable[str], context: Mapping[str, Any]) -> ProcessResult:
        """
        Process a sequence of lines.

        Raises:
            TemplateRenderError: On the first failing line when on_error is 'stop'
        """
        process_result = ProcessResult()

        for line_number, line in enumerate(lines, start=1):
            line_result = self.process_line(line, context, line_number)

            if line_result.error is not None:
                error = line_result.error
                process_result.errors.append(error)

                if self.on_error == 'stop':
                    logger.error(f"Line {line_number}: {error.message}")
                    raise TemplateRenderError(process_result.errors)

                logger.warning(f"Line {line_number}: {error.message} ({self.on_error})")
                if self.on_error == 'continue':
                    line_result.output = line

            process_result.lines.append(line_result)

        logger.debug(
            f"Processed {len(process_result.lines)} lines with {len(process_result.errors)} errors"
        )
        return process_result

    def process_text(self, text: str, context: Mapping[str, Any]) -> ProcessResult:
        """Process template text, splitting it with split_lines()."""
        return self.process_lines(split_lines(text), context)

