"""Diagnostic logging subsystem for unbiased-randint.

Provides immutable per-draw records and a configurable logger that
supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from unbiased_randint.logging.logger import SamplingLogger
from unbiased_randint.logging.types import DrawRecord

__all__ = [
    "DrawRecord",
    "SamplingLogger",
]
