"""Seeded uniform byte source for tests and reproducible runs.

Not cryptographically secure. Draws from numpy's PCG64 generator, so a
given seed always yields the same byte stream.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from unbiased_randint.entropy.base import EntropySource
from unbiased_randint.entropy.registry import register_entropy_source

if TYPE_CHECKING:
    from unbiased_randint.config import RandintConfig


@register_entropy_source("mock_uniform")
class MockUniformSource(EntropySource):
    """Uniform bytes from ``numpy.random.default_rng(seed)``.

    Args:
        seed: Optional RNG seed for reproducible output.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = np.random.default_rng(seed)

    @classmethod
    def from_config(cls, config: RandintConfig) -> MockUniformSource:
        return cls(seed=config.mock_seed)

    @property
    def name(self) -> str:
        """Return ``'mock_uniform'``."""
        return "mock_uniform"

    @property
    def is_available(self) -> bool:
        """Always ``True``."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes drawn uniformly from ``[0, 255]``."""
        return self._rng.integers(0, 256, size=n, dtype=np.uint8).tobytes()

    def close(self) -> None:
        """No-op: nothing to release."""
