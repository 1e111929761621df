"""Shared pytest fixtures for unbiased-randint tests.

Provides reusable configuration objects and byte sources used across
multiple test modules.
"""

from __future__ import annotations

import pytest

from unbiased_randint.config import RandintConfig
from unbiased_randint.entropy.mock import MockUniformSource
from unbiased_randint.entropy.system import SystemEntropySource


@pytest.fixture
def default_config() -> RandintConfig:
    """Return a RandintConfig with all default values."""
    return RandintConfig()


@pytest.fixture
def diagnostic_config() -> RandintConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return RandintConfig(log_level="full", diagnostic_mode=True)


@pytest.fixture
def mock_source() -> MockUniformSource:
    """Return a seeded MockUniformSource for reproducible draws."""
    return MockUniformSource(seed=42)


@pytest.fixture
def system_source() -> SystemEntropySource:
    """Return the OS CSPRNG source."""
    return SystemEntropySource()


class CountingGenerator:
    """Generator double that replays fixed chunks and records each request."""

    def __init__(self, *chunks: bytes) -> None:
        self._chunks = list(chunks)
        self.requests: list[int] = []

    def __call__(self, n: int) -> bytes:
        self.requests.append(n)
        return self._chunks.pop(0)


@pytest.fixture
def counting_generator() -> type[CountingGenerator]:
    """Return the CountingGenerator class for building per-test doubles."""
    return CountingGenerator
