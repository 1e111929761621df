"""Exception hierarchy for unbiased-randint.

All exceptions derive from RandintError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
Validation errors are raised before any entropy is consumed.
"""


class RandintError(Exception):
    """Base exception for all unbiased-randint errors."""


class InvalidGeneratorError(RandintError):
    """The byte generator cannot be used.

    Raised when the generator is not callable, or when the blocking
    variant receives an awaitable from it.
    """


class MinNotIntegerError(RandintError):
    """The lower bound is not an integer (floats are never coerced)."""


class MaxNotIntegerError(RandintError):
    """The upper bound is not an integer (floats are never coerced)."""


class BoundOutOfRangeError(RandintError):
    """A bound is outside the supported integer range.

    Raised for negative bounds, and for bounds whose bit length exceeds the
    configured cap (``RandintConfig.max_bound_bits``).
    """


class MinHigherThanMaxError(RandintError):
    """The range is empty or inverted.

    Raised for ``minimum > maximum`` and also for ``minimum == maximum``:
    a range must contain at least two values.
    """


class SeedTooShortError(RandintError):
    """The seed holds fewer bytes than the range requires.

    Distinct from a biased draw, which is signalled by ``-1``.
    """


class NotABufferError(RandintError, TypeError):
    """A value handed to the buffer adapter is not a binary buffer."""


class GeneratorExhaustedError(RandintError):
    """Too many consecutive draws were rejected.

    With a uniform byte source each attempt is rejected with probability
    below one half, so hitting the cap means the source is broken.
    """


class EntropyUnavailableError(RandintError):
    """No entropy source can provide bytes.

    Raised when the primary entropy source fails and either no fallback
    is configured or the fallback also fails.
    """


class ConfigValidationError(RandintError):
    """Configuration field validation failed."""
