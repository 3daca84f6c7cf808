r"""
Grammar for a single Java stack trace frame line.

A typical frame line, as printed by Throwable.printStackTrace(), looks like:

    \tat com.myPackage.myClass.myMethod(myClass.java:1)

component       example         allowed characters
--------------- --------------- ------------------------------------------------
module name     java.base       letters / digits / underscore, dot separated
package name    com.myPackage   letters / digits / underscore, dot separated
class name      myClass         letters / digits / underscore / `$` for
                                anonymous and inner classes
method name     myMethod        letters / digits / underscore / `$` for lambdas,
                                `<init>` for constructors, `<clinit>` for
                                static initializers
file name       myClass.java    letters / digits / underscore plus extension
line number     1               digits

Examples:

    \tat org.junit.Assert.fail(Assert.java:86)
    \tat java.base/sun.reflect.NativeMethodAccessorImpl.invoke0(Native Method)
    \tat org.junit.runners.ParentRunner$1.schedule(ParentRunner.java:71)
    \tat org.junit.runners.ParentRunner.access$000(ParentRunner.java:58)
    \tat org.apache.maven.surefire.junit4.JUnit4TestSet.execute(JUnit4TestSet.java:53)

Matching is purely structural; whether the captured parts describe a frame
that prints back to the same text is checked by the frame builder.
"""

import re
from dataclasses import dataclass
from typing import Optional

from .base import FileLocation, FreeFormLocation, Location

# Character classes are ASCII only, like java.util.regex defaults.
FRAME_PATTERN = re.compile(
    r"""
    \tat[ ]
    (?:(?P<module>(?:\w*\.)*\w*)/)?
    (?P<package>(?:\w*\.)*\w*)
    \.(?P<class_name>[\w$]*)
    \.(?P<method>[\w$]*|<init>|<clinit>)
    \(
    (?:
        (?P<file>\w*\.\w+):(?P<line>\d*)
      | (?P<text>[\w\s]*)
    )
    \)
    """,
    re.VERBOSE | re.ASCII,
)


@dataclass(frozen=True)
class FrameMatch:
    module: Optional[str]
    package: str
    class_name: str
    method: str
    location: Location

    @property
    def declaring_class(self) -> str:
        # An empty package still keeps the separator: ".Foo" prints as ".Foo"
        return f"{self.package}.{self.class_name}"


def match_frame_line(line: str) -> Optional[FrameMatch]:
    """Match one whole line against the frame grammar; None if it is not a frame."""
    m = FRAME_PATTERN.fullmatch(line)
    if not m:
        return None

    if m.group("file") is not None:
        location: Location = FileLocation(m.group("file"), m.group("line"))
    elif m.group("text") is not None:
        location = FreeFormLocation(m.group("text"))
    else:
        location = None

    return FrameMatch(
        module=m.group("module"),
        package=m.group("package"),
        class_name=m.group("class_name"),
        method=m.group("method"),
        location=location,
    )
