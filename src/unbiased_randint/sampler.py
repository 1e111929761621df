"""Unbiased bounded-integer sampling by masked rejection.

A draw over ``[minimum, maximum]`` requests just enough random bytes to
cover the span, composes them little-endian into an integer, masks off the
surplus high bits and accepts the result only if it does not exceed the
span. Out-of-range candidates are thrown away and fresh bytes requested,
which keeps every value equally likely (no modulo bias).

Three entry points share that procedure:

- :func:`random_seed_number` is one-shot over caller-supplied bytes and
  returns ``-1`` when the seed is biased.
- :func:`random_number` loops over a blocking byte generator.
- :func:`async_random_number` loops over a generator that may return an
  awaitable; the await is the only suspension point.

:class:`RandintSampler` bundles a configured byte source, limits and the
diagnostic logger for repeated use.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import operator
import time
from typing import TYPE_CHECKING, Any

from unbiased_randint.buffers import to_bytes
from unbiased_randint.config import RandintConfig
from unbiased_randint.entropy.fallback import FallbackEntropySource
from unbiased_randint.entropy.registry import EntropySourceRegistry
from unbiased_randint.entropy.system import secure_random_bytes
from unbiased_randint.exceptions import (
    BoundOutOfRangeError,
    GeneratorExhaustedError,
    InvalidGeneratorError,
    MaxNotIntegerError,
    MinHigherThanMaxError,
    MinNotIntegerError,
    SeedTooShortError,
)
from unbiased_randint.logging.logger import SamplingLogger
from unbiased_randint.logging.types import DrawRecord
from unbiased_randint.params import RangeParameters, calculate_parameters

if TYPE_CHECKING:
    from collections.abc import Callable

    from unbiased_randint.entropy.base import EntropySource

logger = logging.getLogger("unbiased_randint")

BIASED = -1
"""Returned by :func:`random_seed_number` when the seed must be replaced."""

DEFAULT_MAX_REJECTIONS = 1000


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _as_bound(value: Any, error_cls: type[Exception], label: str, max_bits: int) -> int:
    """Return *value* as an ``int`` or raise the matching bound error.

    Only true integers are accepted (``int`` and types implementing
    ``__index__``, such as numpy integers). ``bool`` and floats are rejected
    even when integral-valued.
    """
    if isinstance(value, bool):
        raise error_cls(f"{label} must be an integer, got bool")
    try:
        as_int = operator.index(value)
    except TypeError:
        raise error_cls(f"{label} must be an integer, got {value!r}") from None
    if as_int < 0:
        raise BoundOutOfRangeError(f"{label} must be non-negative, got {as_int}")
    if max_bits and as_int.bit_length() > max_bits:
        raise BoundOutOfRangeError(f"{label} {as_int} does not fit in {max_bits} bits")
    return as_int


def _validate_range(minimum: Any, maximum: Any, max_bound_bits: int = 0) -> tuple[int, int]:
    low = _as_bound(minimum, MinNotIntegerError, "minimum", max_bound_bits)
    high = _as_bound(maximum, MaxNotIntegerError, "maximum", max_bound_bits)
    if not high > low:
        raise MinHigherThanMaxError(f"maximum ({high}) must be greater than minimum ({low})")
    return low, high


def _validate_generator(generator: Any) -> Callable[[int], Any]:
    if generator is None:
        return secure_random_bytes
    if not callable(generator):
        raise InvalidGeneratorError(
            f"Expected generator to be callable, got {type(generator).__name__}"
        )
    return generator


def _reduce(seed: Any, minimum: int, size: int, params: RangeParameters) -> int | None:
    """Turn *seed* into ``minimum + candidate``, or ``None`` if out of range."""
    data = to_bytes(seed)
    if len(data) < params.bytes_needed:
        raise SeedTooShortError(
            f"Seed holds {len(data)} bytes, {params.bytes_needed} needed"
        )
    candidate = int.from_bytes(data[: params.bytes_needed], "little") & params.mask
    if candidate <= size:
        return minimum + candidate
    return None


# ---------------------------------------------------------------------------
# Rejection loop state
# ---------------------------------------------------------------------------


class _Draw:
    """Validated inputs and attempt bookkeeping for one looping draw."""

    __slots__ = ("attempts", "generator", "max_rejections", "minimum", "params", "size")

    def __init__(
        self,
        minimum: Any,
        maximum: Any,
        generator: Any,
        max_rejections: int,
        max_bound_bits: int = 0,
    ) -> None:
        self.generator = _validate_generator(generator)
        self.minimum, maximum = _validate_range(minimum, maximum, max_bound_bits)
        self.size = maximum - self.minimum
        self.params = calculate_parameters(self.size)
        if max_rejections < 0:
            raise ValueError(f"max_rejections must be >= 0 (0 = unlimited), got {max_rejections}")
        self.max_rejections = max_rejections
        self.attempts = 0

    @property
    def bytes_needed(self) -> int:
        return self.params.bytes_needed

    def offer(self, data: Any) -> int | None:
        """Consume one buffer from the generator.

        Returns:
            The sampled value, or ``None`` if the draw was rejected.

        Raises:
            GeneratorExhaustedError: If the rejection cap has been reached.
        """
        self.attempts += 1
        value = _reduce(data, self.minimum, self.size, self.params)
        if value is not None:
            return value

        rejections = self.attempts
        logger.debug(
            "Rejected draw %d for span %d (mask %#x)", rejections, self.size, self.params.mask
        )
        if self.max_rejections and rejections >= self.max_rejections:
            raise GeneratorExhaustedError(
                f"{rejections} consecutive draws rejected for span {self.size}; "
                f"the byte source is not producing uniform bytes"
            )
        return None


# ---------------------------------------------------------------------------
# Public functional API
# ---------------------------------------------------------------------------


def bytes_needed(minimum: Any, maximum: Any) -> int:
    """Number of random bytes one attempt over ``[minimum, maximum]`` consumes.

    Use it to size seeds for :func:`random_seed_number`.
    """
    low, high = _validate_range(minimum, maximum)
    return calculate_parameters(high - low).bytes_needed


def random_seed_number(seed: Any, minimum: Any = 1, maximum: Any = 6) -> int:
    """Extract an integer in ``[minimum, maximum]`` from *seed*, without retrying.

    Only the first :func:`bytes_needed` bytes of *seed* are read. The result
    is a pure function of the arguments.

    Args:
        seed: Random bytes, in any form :func:`~unbiased_randint.buffers.to_bytes`
            accepts.
        minimum: Inclusive lower bound.
        maximum: Inclusive upper bound, strictly greater than *minimum*.

    Returns:
        The sampled integer, or :data:`BIASED` (``-1``) when the seed maps
        outside the range; draw a new seed and call again.

    Raises:
        SeedTooShortError: If *seed* is shorter than :func:`bytes_needed`.
    """
    low, high = _validate_range(minimum, maximum)
    size = high - low
    value = _reduce(seed, low, size, calculate_parameters(size))
    return BIASED if value is None else value


def random_number(
    minimum: Any = 1,
    maximum: Any = 6,
    generator: Callable[[int], Any] | None = None,
    *,
    max_rejections: int = DEFAULT_MAX_REJECTIONS,
) -> int:
    """Draw an unbiased integer in ``[minimum, maximum]``, blocking on *generator*.

    Args:
        minimum: Inclusive lower bound.
        maximum: Inclusive upper bound, strictly greater than *minimum*.
        generator: ``generator(n)`` returns at least *n* fresh random bytes.
            Defaults to the OS CSPRNG. Any
            :class:`~unbiased_randint.entropy.base.EntropySource` works here.
        max_rejections: Consecutive rejections tolerated before
            :class:`GeneratorExhaustedError` (``0`` for no limit).

    Returns:
        An integer in ``[minimum, maximum]``.

    Raises:
        InvalidGeneratorError: If *generator* is not callable or returns an
            awaitable (use :func:`async_random_number` instead).
        ValueError: If *max_rejections* is negative.
    """
    draw = _Draw(minimum, maximum, generator, max_rejections)
    while True:
        data = draw.generator(draw.bytes_needed)
        if inspect.isawaitable(data):
            if inspect.iscoroutine(data):
                data.close()
            raise InvalidGeneratorError(
                "Generator returned an awaitable; use async_random_number()"
            )
        value = draw.offer(data)
        if value is not None:
            return value


async def async_random_number(
    minimum: Any = 1,
    maximum: Any = 6,
    generator: Callable[[int], Any] | None = None,
    *,
    max_rejections: int = DEFAULT_MAX_REJECTIONS,
) -> int:
    """Coroutine variant of :func:`random_number`.

    *generator* may return bytes directly or an awaitable resolving to
    bytes. Cancelling the coroutine while it awaits the generator abandons
    the draw; no bytes are kept.
    """
    draw = _Draw(minimum, maximum, generator, max_rejections)
    while True:
        data = draw.generator(draw.bytes_needed)
        if inspect.isawaitable(data):
            data = await data
        value = draw.offer(data)
        if value is not None:
            return value


# ---------------------------------------------------------------------------
# Configured sampler
# ---------------------------------------------------------------------------


class RandintSampler:
    """Reusable sampler bound to a byte source and configuration.

    Args:
        config: Settings; loaded from the environment when omitted.
        source: Byte source; built from *config* when omitted.
        sampling_logger: Diagnostic logger; built from *config* when omitted.

    Example::

        with RandintSampler() as sampler:
            roll = sampler.randint(1, 6)
    """

    def __init__(
        self,
        config: RandintConfig | None = None,
        source: EntropySource | None = None,
        sampling_logger: SamplingLogger | None = None,
    ) -> None:
        self._config = config if config is not None else RandintConfig()
        self._source = source if source is not None else EntropySourceRegistry.build(self._config)
        self._sampling_logger = (
            sampling_logger if sampling_logger is not None else SamplingLogger(self._config)
        )
        logger.debug(
            "RandintSampler ready: source=%s max_rejections=%d",
            self._source.name,
            self._config.max_rejections,
        )

    @property
    def config(self) -> RandintConfig:
        return self._config

    @property
    def source(self) -> EntropySource:
        return self._source

    @property
    def sampling_logger(self) -> SamplingLogger:
        return self._sampling_logger

    def _start(self, minimum: Any, maximum: Any) -> _Draw:
        return _Draw(
            minimum,
            maximum,
            self._source,
            self._config.max_rejections,
            self._config.max_bound_bits,
        )

    def _failovers(self) -> int:
        if isinstance(self._source, FallbackEntropySource):
            return self._source.failovers
        return 0

    def _record(self, draw: _Draw, value: int, started_ns: int, failovers_before: int) -> None:
        elapsed_ns = time.perf_counter_ns() - started_ns
        if isinstance(self._source, FallbackEntropySource):
            source_name = self._source.last_source_used
        else:
            source_name = self._source.name
        self._sampling_logger.log_draw(
            DrawRecord(
                timestamp_ns=time.time_ns(),
                minimum=draw.minimum,
                maximum=draw.minimum + draw.size,
                bytes_per_attempt=draw.bytes_needed,
                attempts=draw.attempts,
                value=value,
                entropy_source=source_name,
                total_ms=elapsed_ns / 1e6,
                fallback_attempts=self._failovers() - failovers_before,
            )
        )

    def randint(self, minimum: Any, maximum: Any) -> int:
        """Draw an integer in ``[minimum, maximum]`` from the configured source.

        Raises:
            InvalidGeneratorError: If the source returns an awaitable; use
                :meth:`arandint` for asynchronous sources.
        """
        started_ns = time.perf_counter_ns()
        failovers_before = self._failovers()
        draw = self._start(minimum, maximum)
        while True:
            data = self._source.get_random_bytes(draw.bytes_needed)
            if inspect.isawaitable(data):
                if inspect.iscoroutine(data):
                    data.close()
                raise InvalidGeneratorError(
                    f"Source {self._source.name!r} returned an awaitable; use arandint()"
                )
            value = draw.offer(data)
            if value is not None:
                self._record(draw, value, started_ns, failovers_before)
                return value

    async def arandint(self, minimum: Any, maximum: Any) -> int:
        """Like :meth:`randint`, without blocking the event loop.

        A source whose ``get_random_bytes`` is a coroutine function is awaited
        directly; a blocking source is run in a worker thread.
        """
        started_ns = time.perf_counter_ns()
        failovers_before = self._failovers()
        draw = self._start(minimum, maximum)
        fetch = self._source.get_random_bytes
        native_async = inspect.iscoroutinefunction(fetch)
        while True:
            if native_async:
                data = await fetch(draw.bytes_needed)
            else:
                data = await asyncio.to_thread(fetch, draw.bytes_needed)
            value = draw.offer(data)
            if value is not None:
                self._record(draw, value, started_ns, failovers_before)
                return value

    def seed_randint(self, seed: Any, minimum: Any, maximum: Any) -> int:
        """:func:`random_seed_number` under this sampler's bound limits."""
        low, high = _validate_range(minimum, maximum, self._config.max_bound_bits)
        size = high - low
        value = _reduce(seed, low, size, calculate_parameters(size))
        return BIASED if value is None else value

    def bytes_needed(self, minimum: Any, maximum: Any) -> int:
        low, high = _validate_range(minimum, maximum, self._config.max_bound_bits)
        return calculate_parameters(high - low).bytes_needed

    def health_check(self) -> dict[str, Any]:
        return self._source.health_check()

    def close(self) -> None:
        """Release the byte source."""
        self._source.close()

    def __enter__(self) -> RandintSampler:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
