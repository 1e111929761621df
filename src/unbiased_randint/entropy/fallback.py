"""Failover between two byte sources, with per-source accounting.

Each request goes to the primary first. If the primary raises
:class:`~unbiased_randint.exceptions.EntropyUnavailableError` the same
request is served by the fallback and counted as a failover; any other
exception propagates. Byte totals per source and the failover count feed
the sampler's :class:`~unbiased_randint.logging.types.DrawRecord`, so
diagnostics show how much of a run was drawn from the backup source.
"""

from __future__ import annotations

import logging
from typing import Any

from unbiased_randint.entropy.base import EntropySource
from unbiased_randint.exceptions import EntropyUnavailableError

logger = logging.getLogger("unbiased_randint")


class FallbackEntropySource(EntropySource):
    """Serves bytes from *primary*, or from *fallback* when the primary is dry.

    Args:
        primary: The preferred entropy source.
        fallback: The source used for requests the primary cannot serve.
    """

    def __init__(self, primary: EntropySource, fallback: EntropySource) -> None:
        self._primary = primary
        self._fallback = fallback
        self._last_source_used = primary.name
        self._failovers = 0
        self._bytes_served = {"primary": 0, "fallback": 0}

    @property
    def name(self) -> str:
        """Compound name ``'<primary>+<fallback>'``."""
        return f"{self._primary.name}+{self._fallback.name}"

    @property
    def is_available(self) -> bool:
        return self._primary.is_available or self._fallback.is_available

    @property
    def last_source_used(self) -> str:
        """Name of the source that served the most recent request."""
        return self._last_source_used

    @property
    def failovers(self) -> int:
        """Requests the primary could not serve."""
        return self._failovers

    @property
    def bytes_served(self) -> dict[str, int]:
        """Bytes handed out so far, keyed ``'primary'`` / ``'fallback'``."""
        return dict(self._bytes_served)

    def get_random_bytes(self, n: int) -> bytes:
        """Return *n* bytes, failing over for this request if needed.

        Raises:
            EntropyUnavailableError: If neither source can serve the request.
        """
        role, source = "primary", self._primary
        try:
            data = source.get_random_bytes(n)
        except EntropyUnavailableError as exc:
            self._failovers += 1
            logger.warning(
                "Byte source %r unavailable (%s); serving %d bytes from %r",
                self._primary.name,
                exc,
                n,
                self._fallback.name,
            )
            role, source = "fallback", self._fallback
            data = source.get_random_bytes(n)

        self._bytes_served[role] += len(data)
        self._last_source_used = source.name
        return data

    def close(self) -> None:
        self._primary.close()
        self._fallback.close()

    def health_check(self) -> dict[str, Any]:
        """Health of both sources plus the failover accounting."""
        return {
            "source": self.name,
            "healthy": self.is_available,
            "primary": self._primary.health_check(),
            "fallback": self._fallback.health_check(),
            "last_source_used": self._last_source_used,
            "failovers": self._failovers,
            "bytes_served": self.bytes_served,
        }
