"""Normalization of binary buffers handed in by byte sources and callers."""

from __future__ import annotations

import array
from typing import Any

import numpy as np

from unbiased_randint.exceptions import NotABufferError

_BYTE_DTYPES = (np.dtype(np.uint8), np.dtype(np.int8))


def to_bytes(obj: Any) -> bytes:
    """Return *obj* as an immutable ``bytes`` object.

    Accepted types are ``bytes``, ``bytearray``, ``memoryview``,
    ``array.array`` and one-byte numpy arrays (``uint8`` or ``int8``,
    any shape or stride; elements are read in C order). ``int8`` values
    are reinterpreted as their unsigned bit patterns.

    Args:
        obj: The buffer to normalize.

    Returns:
        A ``bytes`` copy (or *obj* itself when it already is ``bytes``).

    Raises:
        NotABufferError: If *obj* is not one of the accepted buffer types.
    """
    if isinstance(obj, bytes):
        return obj
    if isinstance(obj, (bytearray, memoryview, array.array)):
        return memoryview(obj).tobytes()
    if isinstance(obj, np.ndarray):
        if obj.dtype not in _BYTE_DTYPES:
            raise NotABufferError(f"Expected a uint8 array, got dtype {obj.dtype}")
        return obj.tobytes(order="C")
    raise NotABufferError(f"Expected a bytes-like buffer, got {type(obj).__name__}")
