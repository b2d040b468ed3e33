"""Shared pytest fixtures and test doubles.

This module provides fake agents for testing the JSON-mode wrapper without a
model backend, and keeps jsonsalvage environment variables out of tests.
"""

from collections.abc import Iterable

import pytest


class FakeAgent:
    """In-memory agent returning a canned response.

    Records every prompt it receives so tests can verify delegation.
    """

    def __init__(self, response: str = "", chunks: list[str] | None = None) -> None:
        self.response = response
        self.chunks = chunks or []
        self.prompts: list[str] = []

    def prompt(self, prompt: str) -> str:
        """Record the prompt and return the canned response."""
        self.prompts.append(prompt)
        return self.response

    def stream(self, prompt: str) -> Iterable[str]:
        """Record the prompt and yield the canned chunks."""
        self.prompts.append(prompt)
        yield from self.chunks


class BrokenAgent:
    """Agent whose backend always fails."""

    def prompt(self, prompt: str) -> str:
        raise RuntimeError("backend unavailable")

    def stream(self, prompt: str) -> Iterable[str]:
        raise RuntimeError("backend unavailable")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove jsonsalvage settings from the environment for every test."""
    for var in ("JSONSALVAGE_LOG_LEVEL", "JSONSALVAGE_LOG_FILE", "JSONSALVAGE_MAX_INPUT_CHARS"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def agent_factory():
    """Factory fixture for creating fake agents.

    Returns:
        Callable: Factory taking a response and optional chunks, returning a FakeAgent.
    """

    def _create(response: str = "", chunks: list[str] | None = None) -> FakeAgent:
        return FakeAgent(response, chunks)
    return _create


@pytest.fixture
def broken_agent():
    """Provide an agent whose backend raises on every call."""
    return BrokenAgent()
