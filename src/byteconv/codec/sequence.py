"""Encoding of float sequences into contiguous buffers.

Each element goes through the scalar codec to produce one fixed-size group,
and the groups are joined with flatten(). Decoding splits the buffer with
unflatten() and decodes every group in order.
"""

from __future__ import annotations

from typing import Iterable, List

from ..options import OptionsLike, resolve_options
from .flatten import (
    BytesLike,
    flatten_bytes32,
    flatten_bytes64,
    unflatten_bytes32,
    unflatten_bytes64,
)
from .scalar import bytes_to_float32, bytes_to_float64, float32_to_bytes, float64_to_bytes


def float32s_to_bytes(xs: Iterable[float], options: OptionsLike = None) -> bytes:
    """Encode floats as consecutive 4-byte binary32 values.

    Args:
        xs: Values to encode, in order
        options: Byte order options (default big-endian)

    Returns:
        Buffer of ``4 * len(xs)`` bytes; empty for an empty sequence

    Example:
        >>> float32s_to_bytes([1.0, -2.0]).hex()
        '3f800000c0000000'
    """
    opts = resolve_options(options)
    return flatten_bytes32(float32_to_bytes(x, opts) for x in xs)


def bytes_to_float32s(buf: BytesLike, options: OptionsLike = None) -> List[float]:
    """Decode a buffer of consecutive binary32 values.

    Args:
        buf: Buffer whose length is a multiple of 4
        options: Byte order options (default big-endian)

    Returns:
        Decoded values in buffer order

    Raises:
        MisalignedLengthError: If len(buf) is not a multiple of 4
    """
    opts = resolve_options(options)
    return [bytes_to_float32(group, opts) for group in unflatten_bytes32(buf)]


def float64s_to_bytes(xs: Iterable[float], options: OptionsLike = None) -> bytes:
    """Encode floats as consecutive 8-byte binary64 values."""
    opts = resolve_options(options)
    return flatten_bytes64(float64_to_bytes(x, opts) for x in xs)


def bytes_to_float64s(buf: BytesLike, options: OptionsLike = None) -> List[float]:
    """Decode a buffer of consecutive binary64 values.

    Raises:
        MisalignedLengthError: If len(buf) is not a multiple of 8
    """
    opts = resolve_options(options)
    return [bytes_to_float64(group, opts) for group in unflatten_bytes64(buf)]
