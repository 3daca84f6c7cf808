"""Tests for settings and the rendering capability probe."""

import pytest
from pydantic import ValidationError
from stacktrace import LEGACY, MODULE_AWARE, ParserSettings, detect_capability


class TestParserSettings:
    def test_defaults(self, monkeypatch):
        for name in ("STACKTRACE_MODULE_FRAMES", "STACKTRACE_STRICT", "LOG_LEVEL", "LOG_JSON"):
            monkeypatch.delenv(name, raising=False)

        settings = ParserSettings.from_env()

        assert settings.module_frames is True
        assert settings.strict is False
        assert settings.log_level == "INFO"
        assert settings.log_json is False

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("STACKTRACE_MODULE_FRAMES", "False")
        monkeypatch.setenv("STACKTRACE_STRICT", "TRUE")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_JSON", "yes")

        settings = ParserSettings.from_env()

        assert settings.module_frames is False
        assert settings.strict is True
        assert settings.log_level == "DEBUG"
        # Only "true" enables a flag
        assert settings.log_json is False

    def test_settings_are_frozen(self):
        settings = ParserSettings()
        with pytest.raises(ValidationError):
            settings.strict = True


class TestDetectCapability:
    def test_module_aware_by_default(self, monkeypatch):
        monkeypatch.delenv("STACKTRACE_MODULE_FRAMES", raising=False)
        assert detect_capability() == MODULE_AWARE

    def test_legacy_when_disabled(self, monkeypatch):
        monkeypatch.setenv("STACKTRACE_MODULE_FRAMES", "false")
        assert detect_capability() == LEGACY

    def test_probed_once(self, monkeypatch):
        monkeypatch.setenv("STACKTRACE_MODULE_FRAMES", "false")
        first = detect_capability()

        monkeypatch.setenv("STACKTRACE_MODULE_FRAMES", "true")

        assert detect_capability() is first
