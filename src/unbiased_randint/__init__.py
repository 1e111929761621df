"""unbiased-randint: uniform integers in a closed range from raw random bytes.

Draws use a minimal bitmask plus rejection sampling, so no value is favoured
(no modulo bias). Bytes come from the OS CSPRNG by default or from any
callable / :class:`~unbiased_randint.entropy.EntropySource` you supply::

    from unbiased_randint import random_number

    roll = random_number(1, 6)
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("unbiased-randint")
except PackageNotFoundError:
    __version__ = "0.0.0"

from unbiased_randint.buffers import to_bytes
from unbiased_randint.config import RandintConfig
from unbiased_randint.exceptions import (
    BoundOutOfRangeError,
    ConfigValidationError,
    EntropyUnavailableError,
    GeneratorExhaustedError,
    InvalidGeneratorError,
    MaxNotIntegerError,
    MinHigherThanMaxError,
    MinNotIntegerError,
    NotABufferError,
    RandintError,
    SeedTooShortError,
)
from unbiased_randint.params import RangeParameters, calculate_parameters
from unbiased_randint.sampler import (
    BIASED,
    RandintSampler,
    async_random_number,
    bytes_needed,
    random_number,
    random_seed_number,
)

__all__ = [
    "BIASED",
    "BoundOutOfRangeError",
    "ConfigValidationError",
    "EntropyUnavailableError",
    "GeneratorExhaustedError",
    "InvalidGeneratorError",
    "MaxNotIntegerError",
    "MinHigherThanMaxError",
    "MinNotIntegerError",
    "NotABufferError",
    "RandintConfig",
    "RandintError",
    "RandintSampler",
    "RangeParameters",
    "SeedTooShortError",
    "__version__",
    "async_random_number",
    "bytes_needed",
    "calculate_parameters",
    "random_number",
    "random_seed_number",
    "to_bytes",
]
