"""Centralised configuration using pydantic-settings.

All environment variables are read through the Settings class.
Consumers call ``get_settings()`` to obtain a cached, validated instance.
Tests construct ``Settings(_env_file=None, ...)`` directly for isolation.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# src/spananchor/config.py  ->  parent x3  ->  project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# ---------------------------------------------------------------------------
# Sub-models (one per configuration domain)
# ---------------------------------------------------------------------------
class WrapperConfig(BaseModel):
    """How annotation wrapper nodes are marked."""

    tag: str = "span"
    class_name: str = "annotation"
    id_attribute: str = "data-id"

    @field_validator("tag", "class_name", "id_attribute")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "wrapper settings must not be blank"
            raise ValueError(msg)
        return value.strip()


class PolicyConfig(BaseModel):
    """What the binder does with spans it cannot (or should not) place."""

    strict: bool = False
    skip_degenerate_spans: bool = False


class LoggingConfig(BaseModel):
    """Logging bootstrap configuration."""

    level: LogLevel = "INFO"
    log_dir: Path | None = None


# ---------------------------------------------------------------------------
# Root settings
# ---------------------------------------------------------------------------
class Settings(BaseSettings):
    """Settings with automatic .env loading and type validation.

    Environment variables use the ``SPANANCHOR_`` prefix and a
    double-underscore delimiter for nesting: ``SPANANCHOR_WRAPPER__TAG``,
    ``SPANANCHOR_POLICY__STRICT``, ``SPANANCHOR_LOG__LEVEL``.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_prefix="SPANANCHOR_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    wrapper: WrapperConfig = WrapperConfig()
    policy: PolicyConfig = PolicyConfig()
    log: LoggingConfig = LoggingConfig()


# ---------------------------------------------------------------------------
# Singleton access
# ---------------------------------------------------------------------------
@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance.

    Call ``get_settings.cache_clear()`` in tests to reset.
    """
    settings = Settings()

    env_file = settings.model_config.get("env_file")
    if env_file is not None and Path(str(env_file)).is_file():
        logger.info("Settings loaded .env from: %s", env_file)
    else:
        logger.info("Settings: no .env file found, using env vars and defaults")

    return settings
