from typing import Optional, Sequence, Union

from .base import BaseExtractor, StackFrame, StackTrace
from .capability import RenderingCapability, detect_capability
from .config import ParserSettings
from .errors import EmptyInputError, UnrecognizedLineError
from .frame_builder import FrameBuilder
from .grammar import match_frame_line
from .logging_config import get_logger

logger = get_logger(__name__)


class JavaStackExtractor(BaseExtractor):
    """
    Parses a Java stack trace into a header line and its frames.

    The first line (the exception header) is kept verbatim. Every following
    line that matches the frame grammar must print back to exactly the same
    text, otherwise the whole parse fails. Lines that are not frames at all,
    such as "\\t... 5 more" or blank lines, are dropped unless `strict` is set.
    """

    def __init__(self, capability: Optional[RenderingCapability] = None, strict: bool = False):
        self.capability = capability or detect_capability()
        self.strict = strict
        self.builder = FrameBuilder(self.capability)

    def can_parse(self, error_text: str) -> bool:
        lines = error_text.split("\n")
        return any(match_frame_line(line) for line in lines[1:])

    def extract(self, error_text: str) -> StackTrace:
        lines = error_text.split("\n")
        header = lines[0]

        frames: list[StackFrame] = []
        for index, line in enumerate(lines[1:], start=1):
            frame = self.builder.build_line(line, line_index=index)
            if frame is not None:
                frames.append(frame)
            elif self.strict and line:
                raise UnrecognizedLineError(line, index)
            else:
                logger.debug("skipped_line", line_index=index, line=line)

        logger.debug("parsed_stack_trace", header=header, frame_count=len(frames))
        return StackTrace(header=header, frames=tuple(frames))

    def extract_lines(self, lines: Sequence[str]) -> StackTrace:
        if not lines:
            raise EmptyInputError()
        return self.extract("\n".join(lines))


def parse(
    stack_trace: Union[str, Sequence[str]],
    capability: Optional[RenderingCapability] = None,
    strict: Optional[bool] = None,
) -> StackTrace:
    """
    Parse a Java stack trace given as one string or as a sequence of lines.

    Args:
        stack_trace: Trace text, or its lines without line terminators
        capability: Module rendering capability; probed once per process if omitted
        strict: Report lines that are not frames instead of dropping them;
            defaults to STACKTRACE_STRICT

    Raises:
        EmptyInputError: An empty sequence of lines was given
        RoundTripMismatchError: A frame line could not be reproduced exactly
        UnrecognizedLineError: Strict mode only, a non-frame line was found
    """
    if strict is None:
        strict = ParserSettings.from_env().strict
    extractor = JavaStackExtractor(capability=capability, strict=strict)
    if isinstance(stack_trace, str):
        return extractor.extract(stack_trace)
    return extractor.extract_lines(stack_trace)
