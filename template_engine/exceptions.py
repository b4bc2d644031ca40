"""Template engine exceptions."""

from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field


class TemplateError(Exception):
    """Base class for recoverable per-line template errors.

    Each subclass carries an ``error_type`` used as the ``type`` field of the
    error record reported back to the caller.
    """

    error_type = "template_error"

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)


class MalformedExpression(TemplateError):
    """Raised when an interpolation line has no extractable expression."""

    error_type = "malformed_expression"


class MalformedTag(TemplateError):
    """Raised when a tag payload is missing or too short to classify."""

    error_type = "malformed_tag"


class UnknownTag(TemplateError):
    """Raised when a tag keyword is neither 'if' nor 'for'."""

    error_type = "unknown_tag"


class MissingVariable(TemplateError):
    """Raised when an interpolated variable has no value in the context."""

    error_type = "missing_variable"

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(
            f"Undefined variable: {variable}",
            context={"variable": variable}
        )


class UnrecognizedLine(TemplateError):
    """Raised by the processor for lines classified as Unrecognized."""

    error_type = "unrecognized_line"

    def __init__(self, line: str):
        super().__init__("Unrecognized line", context={"line": line})


@dataclass
class LineError:
    """Single line failure."""
    line_number: int
    error_type: str
    message: str
    line: str = ""
    context: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: TemplateError, line_number: int, line: str) -> "LineError":
        return cls(
            line_number=line_number,
            error_type=exc.error_type,
            message=exc.message,
            line=line,
            context=dict(exc.context)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the error record format."""
        return {
            "type": self.error_type,
            "message": self.message,
            "context": {"line_number": self.line_number, "line": self.line, **self.context}
        }


class TemplateRenderError(Exception):
    """Raised when rendering stops on line errors.

    The CLI catches it and maps it to exit code 2.
    """

    def __init__(self, errors: List[LineError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            messages.append(f"Line {error.line_number}: {error.message}")

        super().__init__("\n".join(messages))


class ContextValidationError(Exception):
    """Raised when context variables cannot be parsed."""

    def __init__(self, message: str):
        self.exit_code = 2
        super().__init__(message)
