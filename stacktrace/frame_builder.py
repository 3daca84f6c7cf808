from typing import Optional

from .base import (
    FRAME_PREFIX,
    NATIVE_METHOD,
    NATIVE_METHOD_LINE,
    UNKNOWN_LINE,
    FileLocation,
    FreeFormLocation,
    StackFrame,
)
from .capability import RenderingCapability
from .errors import RoundTripMismatchError
from .grammar import FrameMatch, match_frame_line
from .logging_config import get_logger

logger = get_logger(__name__)

MAX_LINE_NUMBER = 2**31 - 1


class FrameBuilder:
    """Turns grammar matches into StackFrames and proves they print back identically."""

    def __init__(self, capability: RenderingCapability):
        self.capability = capability

    def build(self, match: FrameMatch) -> StackFrame:
        file_name = None
        line_number = UNKNOWN_LINE

        location = match.location
        if isinstance(location, FileLocation):
            file_name = location.file
            # "File.java:" has no digits and larger values overflow the int line
            # number; both render without a line and are rejected
            digits = location.line_digits
            if digits and len(digits) <= 10 and int(digits) <= MAX_LINE_NUMBER:
                line_number = int(digits)
        elif isinstance(location, FreeFormLocation) and location.text == NATIVE_METHOD:
            line_number = NATIVE_METHOD_LINE

        return StackFrame(
            declaring_class=match.declaring_class,
            method=match.method,
            file=file_name,
            line=line_number,
            module=match.module,
        )

    def render_line(self, frame: StackFrame) -> str:
        return FRAME_PREFIX + frame.render(self.capability)

    def validate(self, frame: StackFrame, original_line: str,
                 line_index: Optional[int] = None) -> None:
        """Raise RoundTripMismatchError unless `frame` renders to exactly `original_line`."""
        rendered = self.render_line(frame)
        if rendered != original_line:
            logger.warning(
                "round_trip_mismatch",
                line_index=line_index,
                original_line=original_line,
                rendered_line=rendered,
                module_frames=self.capability.module_frames,
            )
            raise RoundTripMismatchError(
                original_line,
                rendered,
                line_index=line_index,
                context={"module_frames": self.capability.module_frames},
            )

    def build_line(self, line: str, line_index: Optional[int] = None) -> Optional[StackFrame]:
        """
        Parse one candidate frame line.

        Returns None when the line is not a frame line at all. Raises
        RoundTripMismatchError when it looks like a frame but the parsed
        frame does not print back to the same text.
        """
        match = match_frame_line(line)
        if match is None:
            return None

        frame = self.build(match)
        self.validate(frame, line, line_index)
        return frame
