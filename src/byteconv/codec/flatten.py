"""Packing of fixed-size byte groups into one contiguous buffer and back.

A sequence of 32-bit values encodes to a list of 4-byte groups; flatten()
concatenates those groups and unflatten() undoes it. No numeric
interpretation happens here.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Union

from ..exceptions import MisalignedLengthError, ShapeMismatchError

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

FLOAT32_SIZE = 4
FLOAT64_SIZE = 8
SUPPORTED_SIZES = (FLOAT32_SIZE, FLOAT64_SIZE)


def byte_view(buf: BytesLike) -> memoryview:
    """Return a flat view of ``buf`` addressed in bytes.

    A memoryview over an array of floats counts items, not bytes; casting to
    unsigned bytes makes ``len()`` the byte length for every input type.
    """
    return memoryview(buf).cast("B")


def _check_size(size: int) -> None:
    if size not in SUPPORTED_SIZES:
        raise ValueError(f"size must be one of {SUPPORTED_SIZES}, got {size}")


def flatten(groups: Iterable[BytesLike], size: int) -> bytes:
    """Concatenate byte groups of exactly ``size`` bytes each.

    Byte ``j`` of group ``i`` ends up at offset ``i * size + j``.

    Args:
        groups: Byte groups in output order
        size: Required length of every group (4 or 8)

    Returns:
        Flat buffer of ``len(groups) * size`` bytes

    Raises:
        ShapeMismatchError: If any group is not ``size`` bytes long
        ValueError: If size is not supported

    Example:
        >>> flatten([b"\\x01\\x02\\x03\\x04", b"\\x05\\x06\\x07\\x08"], 4)
        b'\\x01\\x02\\x03\\x04\\x05\\x06\\x07\\x08'
    """
    _check_size(size)

    result = bytearray()
    for group in groups:
        view = byte_view(group)
        if len(view) != size:
            logger.debug("flatten: group of %d bytes where %d expected", len(view), size)
            raise ShapeMismatchError(expected=size, actual=len(view))
        result.extend(view)

    return bytes(result)


def unflatten(buffer: BytesLike, size: int) -> List[bytes]:
    """Split a flat buffer into ``size``-byte groups.

    Args:
        buffer: Flat buffer, length must be a multiple of ``size``
        size: Group length (4 or 8)

    Returns:
        List of ``len(buffer) // size`` groups in buffer order

    Raises:
        MisalignedLengthError: If the buffer length is not a multiple of size
        ValueError: If size is not supported
    """
    _check_size(size)

    data = byte_view(buffer).tobytes()
    if len(data) % size != 0:
        logger.debug("unflatten: %d-byte buffer is not a multiple of %d", len(data), size)
        raise MisalignedLengthError(size=size, length=len(data))

    return [data[i : i + size] for i in range(0, len(data), size)]


def flatten_bytes32(groups: Iterable[BytesLike]) -> bytes:
    """Flatten 4-byte groups."""
    return flatten(groups, FLOAT32_SIZE)


def flatten_bytes64(groups: Iterable[BytesLike]) -> bytes:
    """Flatten 8-byte groups."""
    return flatten(groups, FLOAT64_SIZE)


def unflatten_bytes32(buffer: BytesLike) -> List[bytes]:
    """Split a buffer into 4-byte groups."""
    return unflatten(buffer, FLOAT32_SIZE)


def unflatten_bytes64(buffer: BytesLike) -> List[bytes]:
    """Split a buffer into 8-byte groups."""
    return unflatten(buffer, FLOAT64_SIZE)
