from .base import (
    NATIVE_METHOD_LINE, UNKNOWN_LINE, FileLocation, FreeFormLocation, StackFrame, StackTrace,
)
from .capability import LEGACY, MODULE_AWARE, RenderingCapability, detect_capability
from .config import ParserSettings
from .errors import (
    EmptyInputError, RoundTripMismatchError, StackTraceParseError, UnrecognizedLineError,
)
from .frame_builder import FrameBuilder
from .grammar import FrameMatch, match_frame_line
from .java_extractor import JavaStackExtractor, parse
from .logging_config import configure_logging, get_logger

__all__ = [
    "parse", "JavaStackExtractor", "FrameBuilder", "match_frame_line", "FrameMatch",
    "StackFrame", "StackTrace", "FileLocation", "FreeFormLocation",
    "UNKNOWN_LINE", "NATIVE_METHOD_LINE",
    "RenderingCapability", "MODULE_AWARE", "LEGACY", "detect_capability",
    "StackTraceParseError", "EmptyInputError", "RoundTripMismatchError", "UnrecognizedLineError",
    "ParserSettings", "configure_logging", "get_logger",
]
