from dataclasses import dataclass
from typing import Optional, Union
from abc import ABC, abstractmethod

from .capability import RenderingCapability

# Line number sentinels used by java.lang.StackTraceElement
UNKNOWN_LINE = -1
NATIVE_METHOD_LINE = -2

NATIVE_METHOD = "Native Method"
UNKNOWN_SOURCE = "Unknown Source"

FRAME_PREFIX = "\tat "


@dataclass(frozen=True)
class FileLocation:
    """`(File.java:42)`: file name plus the raw line digits."""
    file: str
    line_digits: str


@dataclass(frozen=True)
class FreeFormLocation:
    """`(Native Method)`, `(Unknown Source)` and other non-file locations."""
    text: str


Location = Union[FileLocation, FreeFormLocation, None]


@dataclass(frozen=True)
class StackFrame:
    declaring_class: str
    method: str
    file: Optional[str] = None
    line: int = UNKNOWN_LINE
    module: Optional[str] = None

    @property
    def package(self) -> str:
        return self.declaring_class.rpartition(".")[0]

    @property
    def class_name(self) -> str:
        return self.declaring_class.rpartition(".")[2]

    @property
    def full_method(self) -> str:
        return f"{self.declaring_class}.{self.method}"

    @property
    def is_native_method(self) -> bool:
        return self.line == NATIVE_METHOD_LINE

    def render(self, capability: RenderingCapability) -> str:
        """
        Render the frame the way StackTraceElement.toString() does.

        The module prefix is only emitted when it is non-empty and the
        capability supports module-qualified frames.
        """
        if self.is_native_method:
            location = NATIVE_METHOD
        elif self.file is not None and self.line >= 0:
            location = f"{self.file}:{self.line}"
        elif self.file is not None:
            location = self.file
        else:
            location = UNKNOWN_SOURCE

        prefix = ""
        if self.module and capability.module_frames:
            prefix = f"{self.module}/"
        return f"{prefix}{self.full_method}({location})"

    def to_dict(self) -> dict:
        return {
            "module": self.module,
            "declaringClass": self.declaring_class,
            "method": self.method,
            "file": self.file,
            "line": self.line,
        }


@dataclass(frozen=True)
class StackTrace:
    header: str
    frames: tuple[StackFrame, ...] = ()

    @property
    def exception_type(self) -> str:
        return self.header.partition(": ")[0].strip()

    @property
    def message(self) -> str:
        return self.header.partition(": ")[2]

    @property
    def file_paths(self) -> list[str]:
        return list(dict.fromkeys(f.file for f in self.frames if f.file is not None))

    @property
    def method_names(self) -> list[str]:
        return [f.full_method for f in self.frames]

    def render(self, capability: RenderingCapability) -> str:
        """Header followed by one tab-indented `at` line per frame."""
        lines = [self.header]
        lines.extend(FRAME_PREFIX + f.render(capability) for f in self.frames)
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "header": self.header,
            "exceptionType": self.exception_type,
            "message": self.message,
            "frames": [f.to_dict() for f in self.frames],
        }


class BaseExtractor(ABC):
    @abstractmethod
    def extract(self, error_text: str) -> StackTrace:
        pass

    @abstractmethod
    def can_parse(self, error_text: str) -> bool:
        pass
