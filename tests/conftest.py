"""Shared pytest fixtures for spananchor tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from spananchor.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Iterator[None]:
    """Each test sees freshly resolved settings."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
