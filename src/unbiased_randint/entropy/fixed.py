"""Replay source that hands out a caller-supplied buffer chunk by chunk.

Useful for driving the sampler from pre-recorded entropy (a hardware RNG
dump, a test vector) and for exercising the rejection loop with known
bytes. Every byte is handed out at most once.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from unbiased_randint.buffers import to_bytes
from unbiased_randint.entropy.base import EntropySource
from unbiased_randint.entropy.registry import register_entropy_source
from unbiased_randint.exceptions import EntropyUnavailableError

if TYPE_CHECKING:
    from unbiased_randint.config import RandintConfig


@register_entropy_source("fixed")
class FixedBytesSource(EntropySource):
    """Serves consecutive slices of *data*; fails once it runs dry.

    Args:
        data: Any buffer accepted by :func:`~unbiased_randint.buffers.to_bytes`.
    """

    def __init__(self, data: Any = b"") -> None:
        self._data = to_bytes(data)
        self._offset = 0

    @classmethod
    def from_config(cls, config: RandintConfig) -> FixedBytesSource:
        """Replay the bytes in ``config.fixed_bytes_hex``."""
        return cls(bytes.fromhex(config.fixed_bytes_hex))

    @property
    def name(self) -> str:
        return "fixed"

    @property
    def is_available(self) -> bool:
        return self._offset < len(self._data)

    @property
    def remaining(self) -> int:
        """Number of bytes not yet handed out."""
        return len(self._data) - self._offset

    def get_random_bytes(self, n: int) -> bytes:
        """Return the next *n* bytes of the buffer.

        Raises:
            EntropyUnavailableError: If fewer than *n* bytes remain.
        """
        if n > self.remaining:
            raise EntropyUnavailableError(
                f"Fixed buffer exhausted: requested {n} bytes, {self.remaining} remaining"
            )
        chunk = self._data[self._offset : self._offset + n]
        self._offset += n
        return chunk

    def close(self) -> None:
        """Drop the unread remainder of the buffer."""
        self._offset = len(self._data)
