"""
Module-qualified frame rendering support.

Java 9 added module names to stack trace elements
(`java.base/java.lang.Thread.run(Thread.java:829)`). Runtimes without a
module system (Android, Java 8) print frames without that prefix, so a
module-qualified line can only be reproduced when the capability is on.
"""

import functools
from dataclasses import dataclass

from .config import ParserSettings
from .logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RenderingCapability:
    module_frames: bool = True


MODULE_AWARE = RenderingCapability(module_frames=True)
LEGACY = RenderingCapability(module_frames=False)


@functools.lru_cache(maxsize=None)
def detect_capability() -> RenderingCapability:
    """
    Probe the process-wide rendering capability.

    Computed on first use and cached for the lifetime of the process.
    """
    settings = ParserSettings.from_env()
    capability = MODULE_AWARE if settings.module_frames else LEGACY
    logger.debug("rendering_capability_detected", module_frames=capability.module_frames)
    return capability
