"""Shared pytest fixtures for the webstarter test suite.

Provides reusable fixtures for:
- Scripted prompters that answer questions without a terminal
- Mocked network fetchers
- Configurations and project descriptors rooted in ``tmp_path``
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock

import pytest

from webstarter.config import Config
from webstarter.errors import NetworkFetchError
from webstarter.models import ProjectDescriptor
from webstarter.registry import BOOTSTRAP_CSS_URL, BOOTSTRAP_JS_URL, TAILWIND_URL


# ---------------------------------------------------------------------------
# Scripted prompter
# ---------------------------------------------------------------------------

class ScriptedPrompter:
    """Answers questions from a ``{prompt: answer}`` mapping.

    Single-choice questions default to 0 (skip) and multi-choice questions
    to an empty selection.  Every question asked is recorded in ``asked``.
    """

    def __init__(self, answers: dict[str, Any] | None = None) -> None:
        self.answers = answers or {}
        self.asked: list[str] = []

    def ask_single_with_skip(
        self, prompt: str, skip_label: str, labels: Sequence[str]
    ) -> int:
        self.asked.append(prompt)
        return self.answers.get(prompt, 0)

    def ask_multiple(self, prompt: str, labels: Sequence[str]) -> list[int]:
        self.asked.append(prompt)
        return list(self.answers.get(prompt, []))


@pytest.fixture
def scripted_prompter():
    """Factory for ``ScriptedPrompter`` instances.

    Usage:
        def test_something(scripted_prompter):
            prompter = scripted_prompter({"Use php": 1})
    """
    return ScriptedPrompter


# ---------------------------------------------------------------------------
# Mock network
# ---------------------------------------------------------------------------

FAKE_DOWNLOADS: dict[str, bytes] = {
    BOOTSTRAP_CSS_URL: b"/* bootstrap css */",
    BOOTSTRAP_JS_URL: b"/* bootstrap js */",
    TAILWIND_URL: b"/* tailwind */",
}


@pytest.fixture
def mock_fetcher() -> AsyncMock:
    """A fetcher returning canned bodies for the CDN URLs used by the registry.

    Unknown URLs raise ``NetworkFetchError``.
    """
    async def fetch(url: str) -> bytes:
        if url not in FAKE_DOWNLOADS:
            raise NetworkFetchError(url, "HTTP 404")
        return FAKE_DOWNLOADS[url]

    fetcher = AsyncMock()
    fetcher.fetch = AsyncMock(side_effect=fetch)
    return fetcher


# ---------------------------------------------------------------------------
# Config & project
# ---------------------------------------------------------------------------

@pytest.fixture
def config(tmp_path: Path) -> Config:
    """Config writing projects into ``tmp_path``."""
    return Config(output_dir=tmp_path)


@pytest.fixture
def project(tmp_path: Path) -> ProjectDescriptor:
    """A descriptor for ``tmp_path/demo`` whose root already exists."""
    root = tmp_path / "demo"
    root.mkdir()
    return ProjectDescriptor(name="demo", root=root)
