"""
Errors raised while parsing a Java stack trace.

Lines the grammar does not recognise are dropped rather than reported (unless
strict mode is on). Anything that looks like a frame but cannot be
reproduced exactly aborts the whole parse.
"""

from typing import Any, Dict, Optional


class StackTraceParseError(Exception):
    """Base class for stack trace parse failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class EmptyInputError(StackTraceParseError):
    """No header line is available (zero lines supplied)."""

    def __init__(self, message: str = "Stack trace has no lines", **kwargs):
        super().__init__(message, **kwargs)


class RoundTripMismatchError(StackTraceParseError):
    """A frame line matched the grammar but rendered back to different text."""

    def __init__(self, original_line: str, rendered_line: str,
                 line_index: Optional[int] = None, **kwargs):
        message = (
            "Stack trace line could not be parsed to a stack frame:\n"
            f"\tOriginal stack trace line:\t{original_line}\n"
            f"\tParsed stack frame:\t{rendered_line}"
        )
        super().__init__(message, **kwargs)
        self.original_line = original_line
        self.rendered_line = rendered_line
        self.line_index = line_index


class UnrecognizedLineError(StackTraceParseError):
    """Strict mode only: a line after the header is not a frame line."""

    def __init__(self, line: str, line_index: int, **kwargs):
        super().__init__(
            f"Line {line_index} is not a stack frame: {line!r}", **kwargs
        )
        self.line = line
        self.line_index = line_index
