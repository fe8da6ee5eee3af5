"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from spananchor.config import Settings
from spananchor.tree.memory import Element, MemoryTree, Text


@pytest.fixture
def tree() -> MemoryTree:
    """Default memory tree adapter (``span.annotation`` wrappers)."""
    return MemoryTree()


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from .env files and the environment defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def fox() -> Element:
    """A single-leaf container: ``<div>The quick brown fox</div>``."""
    return Element("div", children=["The quick brown fox"])


@pytest.fixture
def nested_doc() -> Element:
    """A multi-leaf container with nesting.

    Flattened text ``"Hello brave new world!"``::

        <div>
          <p>"Hello " <b>"brave"</b></p>
          <p>" new " <i><u>"world"</u></i> "!"</p>
        </div>

    Leaf bounds: "Hello " 0-6, "brave" 6-11, " new " 11-16,
    "world" 16-21, "!" 21-22.
    """
    return Element(
        "div",
        children=[
            Element("p", children=["Hello ", Element("b", children=["brave"])]),
            Element(
                "p",
                children=[
                    " new ",
                    Element("i", children=[Element("u", children=["world"])]),
                    Text("!"),
                ],
            ),
        ],
    )
