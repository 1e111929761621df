"""Entropy parameters for a bounded integer range.

Given the span of a range, computes how many random bits and bytes a draw
needs and the mask that truncates a byte-derived integer to that width.
Everything is done with integer shifts; no floating point is involved, so
spans of any size are handled exactly.
"""

from __future__ import annotations

from dataclasses import dataclass

from unbiased_randint.exceptions import MinHigherThanMaxError


@dataclass(frozen=True, slots=True)
class RangeParameters:
    """Entropy requirements for a span.

    Attributes:
        bits_needed: Smallest ``k`` such that ``2**k - 1 >= size``.
        bytes_needed: ``ceil(bits_needed / 8)``.
        mask: ``2**bits_needed - 1``.
    """

    bits_needed: int
    bytes_needed: int
    mask: int


def calculate_parameters(size: int) -> RangeParameters:
    """Compute the bit count, byte count and mask covering ``[0, size]``.

    Equivalent to ``bits = ceil(log2(size + 1))``, ``bytes = ceil(bits / 8)``,
    ``mask = 2**bits - 1`` but computed bit by bit. The mask is the smallest
    all-ones value ``>= size``, so fewer than half of all masked candidates
    are rejected.

    A ``size`` of 0 needs no entropy at all: the only candidate is 0.

    Args:
        size: The span ``maximum - minimum``; must be non-negative.

    Returns:
        The frozen :class:`RangeParameters` for *size*.

    Raises:
        MinHigherThanMaxError: If *size* is negative.
    """
    if size < 0:
        raise MinHigherThanMaxError(f"Span must be non-negative, got {size}")

    bits_needed = 0
    bytes_needed = 0
    mask = 0
    while size > 0:
        if bits_needed % 8 == 0:
            bytes_needed += 1
        bits_needed += 1
        mask = (mask << 1) | 1
        size >>= 1
    return RangeParameters(bits_needed=bits_needed, bytes_needed=bytes_needed, mask=mask)
