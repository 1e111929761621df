"""System entropy source using ``os.urandom()``.

This is the default source: the host's cryptographically secure random
facility, always available on all supported platforms.
"""

from __future__ import annotations

import os

from unbiased_randint.entropy.base import EntropySource
from unbiased_randint.entropy.registry import register_entropy_source


@register_entropy_source("system")
class SystemEntropySource(EntropySource):
    """``os.urandom()`` wrapper, always available and cryptographically secure."""

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    @property
    def is_available(self) -> bool:
        """Always ``True``."""
        return True

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes from the OS CSPRNG."""
        return os.urandom(n)

    def close(self) -> None:
        """No-op: nothing to release."""


def secure_random_bytes(n: int) -> bytes:
    """Default generator for the sampling functions: *n* bytes of OS entropy."""
    return os.urandom(n)
