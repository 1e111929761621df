"""Abstract base class for all entropy sources.

Every byte source the sampler can draw from (the OS CSPRNG, a seeded mock,
a replayed buffer) implements this interface. Instances are callable with a
byte count, so any source can be passed wherever a generator function is
expected. Subclasses must implement the four abstract members: ``name``,
``is_available``, ``get_random_bytes()``, and ``close()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from unbiased_randint.config import RandintConfig


class EntropySource(ABC):
    """Abstract base for all entropy sources.

    Implementations must provide fresh random bytes on every call; the
    sampler never reuses bytes across attempts.
    """

    @classmethod
    def from_config(cls, config: RandintConfig) -> EntropySource:
        """Build an instance from configuration.

        The default ignores *config*; sources with settings override this.
        """
        return cls()

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'system'``)."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the source can currently provide entropy."""

    @abstractmethod
    def get_random_bytes(self, n: int) -> bytes:
        """Return exactly *n* random bytes.

        Args:
            n: Number of random bytes to generate.

        Returns:
            Exactly *n* bytes of entropy.

        Raises:
            EntropyUnavailableError: If the source cannot provide bytes.
        """

    def __call__(self, n: int) -> bytes:
        return self.get_random_bytes(n)

    @abstractmethod
    def close(self) -> None:
        """Release resources (file handles, connections)."""

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": self.is_available}
