"""Environment-driven settings for the stack trace parser."""

import os

from pydantic import BaseModel, ConfigDict


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class ParserSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    module_frames: bool = True
    strict: bool = False
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_env(cls) -> "ParserSettings":
        return cls(
            module_frames=_env_flag("STACKTRACE_MODULE_FRAMES", "true"),
            strict=_env_flag("STACKTRACE_STRICT", "false"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_json=_env_flag("LOG_JSON", "false"),
        )
