"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DrawRecord:
    """Immutable record of one completed bounded-integer draw.

    Attributes:
        timestamp_ns: Wall-clock time the draw finished (ns since epoch).
        minimum: Inclusive lower bound requested.
        maximum: Inclusive upper bound requested.
        bytes_per_attempt: Entropy bytes requested on each attempt.
        attempts: Number of byte requests made (rejections + 1).
        value: The returned integer.
        entropy_source: Name of the byte source used.
        total_ms: Time spent in the draw, including byte fetches (ms).
        fallback_attempts: Attempts whose bytes came from a fallback source.
    """

    timestamp_ns: int
    minimum: int
    maximum: int
    bytes_per_attempt: int
    attempts: int
    value: int
    entropy_source: str
    total_ms: float
    fallback_attempts: int = 0

    @property
    def rejections(self) -> int:
        """Attempts that produced an out-of-range candidate."""
        return self.attempts - 1
