"""Byte sources for unbiased-randint.

Re-exports the ABC, registry, and all built-in source implementations::

    from unbiased_randint.entropy import EntropySource, SystemEntropySource
"""

from unbiased_randint.entropy.base import EntropySource
from unbiased_randint.entropy.fallback import FallbackEntropySource
from unbiased_randint.entropy.fixed import FixedBytesSource
from unbiased_randint.entropy.mock import MockUniformSource
from unbiased_randint.entropy.registry import EntropySourceRegistry, register_entropy_source
from unbiased_randint.entropy.system import SystemEntropySource, secure_random_bytes

__all__ = [
    "EntropySource",
    "EntropySourceRegistry",
    "FallbackEntropySource",
    "FixedBytesSource",
    "MockUniformSource",
    "SystemEntropySource",
    "register_entropy_source",
    "secure_random_bytes",
]
