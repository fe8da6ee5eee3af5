"""Tests for spananchor.config -- Settings and sub-models.

Every test constructs Settings(_env_file=None, ...) to avoid reading real .env files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from spananchor.config import (
    LoggingConfig,
    PolicyConfig,
    Settings,
    WrapperConfig,
    get_settings,
)


class TestDefaults:
    """Defaults match the annotation wrapper conventions."""

    def test_defaults(self) -> None:
        s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.wrapper == WrapperConfig(
            tag="span", class_name="annotation", id_attribute="data-id"
        )
        assert s.policy == PolicyConfig(strict=False, skip_degenerate_spans=False)
        assert s.log == LoggingConfig(level="INFO", log_dir=None)


class TestValidation:
    """Pydantic type validation on Settings construction."""

    def test_blank_wrapper_tag_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not be blank"):
            WrapperConfig(tag="  ")

    def test_wrapper_values_stripped(self) -> None:
        assert WrapperConfig(class_name=" note ").class_name == "note"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")  # type: ignore[arg-type]


class TestEnvironment:
    """Nested environment variables with the SPANANCHOR_ prefix."""

    def test_nested_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPANANCHOR_WRAPPER__TAG", "mark")
        monkeypatch.setenv("SPANANCHOR_POLICY__SKIP_DEGENERATE_SPANS", "1")
        monkeypatch.setenv("SPANANCHOR_LOG__LOG_DIR", "/tmp/spananchor-logs")
        s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.wrapper.tag == "mark"
        assert s.policy.skip_degenerate_spans is True
        assert s.log.log_dir == Path("/tmp/spananchor-logs")

    def test_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SPANANCHOR_WRAPPER__CLASS_NAME=highlight\n")
        s = Settings(_env_file=env_file)  # type: ignore[call-arg]
        assert s.wrapper.class_name == "highlight"


class TestGetSettings:
    """Cached singleton access."""

    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("SPANANCHOR_POLICY__STRICT", "true")
        get_settings.cache_clear()
        second = get_settings()
        assert first is not second
        assert second.policy.strict is True

    def test_logs_env_source(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="spananchor.config"):
            get_settings()
        assert "Settings" in caplog.text
