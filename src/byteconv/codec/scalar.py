"""IEEE-754 encoding of single float values.

Values are converted bit-for-bit with the ``struct`` module. Byte order comes
from the ``options`` argument and defaults to big-endian. Decoders read only
the leading 4 or 8 bytes and refuse shorter buffers.
"""

from __future__ import annotations

import logging
import math
import operator
import struct

from ..exceptions import InsufficientLengthError
from ..options import OptionsLike, resolve_options
from .flatten import FLOAT32_SIZE, FLOAT64_SIZE, BytesLike, byte_view

logger = logging.getLogger(__name__)

# Significand width of a binary32 value, including the implicit leading bit
FLOAT32_MANTISSA_BITS = 24
FLOAT32_MAX = float((1 << FLOAT32_MANTISSA_BITS) - 1) * 2.0**104


def _format(options: OptionsLike, code: str) -> str:
    return resolve_options(options).byte_order.struct_prefix + code


def float32_to_bytes(x: float, options: OptionsLike = None) -> bytes:
    """Encode a float as 4 IEEE-754 binary32 bytes.

    Values outside the float32 range become a signed infinity, the same
    result a native float64 to float32 conversion gives.

    Args:
        x: Value to encode
        options: Byte order options (default big-endian)

    Returns:
        4 bytes

    Example:
        >>> float32_to_bytes(-561.2863).hex()
        'c40c5253'
    """
    fmt = _format(options, "f")
    try:
        return struct.pack(fmt, x)
    except OverflowError:
        return struct.pack(fmt, -math.inf if x < 0 else math.inf)


def bytes_to_float32(buf: BytesLike, options: OptionsLike = None) -> float:
    """Decode the leading 4 bytes of ``buf`` as an IEEE-754 binary32 value.

    Args:
        buf: At least 4 bytes; anything past the fourth byte is ignored
        options: Byte order options (default big-endian)

    Returns:
        Decoded value

    Raises:
        InsufficientLengthError: If buf holds fewer than 4 bytes
    """
    view = byte_view(buf)
    if len(view) < FLOAT32_SIZE:
        logger.debug("bytes_to_float32: only %d bytes available", len(view))
        raise InsufficientLengthError(size=FLOAT32_SIZE, length=len(view))

    value: float = struct.unpack_from(_format(options, "f"), view)[0]
    return value


def float64_to_bytes(x: float, options: OptionsLike = None) -> bytes:
    """Encode a float as 8 IEEE-754 binary64 bytes.

    Integers too large for a float64 become a signed infinity.

    Example:
        >>> float64_to_bytes(-561.2863).hex()
        'c0818a4a57a786c2'
    """
    fmt = _format(options, "d")
    try:
        return struct.pack(fmt, x)
    except OverflowError:
        return struct.pack(fmt, -math.inf if x < 0 else math.inf)


def bytes_to_float64(buf: BytesLike, options: OptionsLike = None) -> float:
    """Decode the leading 8 bytes of ``buf`` as an IEEE-754 binary64 value.

    Raises:
        InsufficientLengthError: If buf holds fewer than 8 bytes
    """
    view = byte_view(buf)
    if len(view) < FLOAT64_SIZE:
        logger.debug("bytes_to_float64: only %d bytes available", len(view))
        raise InsufficientLengthError(size=FLOAT64_SIZE, length=len(view))

    value: float = struct.unpack_from(_format(options, "d"), view)[0]
    return value


def to_float32(x: float) -> float:
    """Round a float to the nearest value representable as float32."""
    return bytes_to_float32(float32_to_bytes(x))


def int_to_float32(x: int) -> float:
    """Convert an integer to the nearest float32 value.

    Rounds half to even on the 24-bit significand. Large magnitudes lose
    precision and anything past the float32 range becomes a signed infinity;
    neither is an error.

    Args:
        x: Integer of any size

    Returns:
        float holding a float32-representable value

    Example:
        >>> int_to_float32(3)
        3.0
        >>> int_to_float32(2**24 + 1)
        16777216.0
    """
    x = operator.index(x)
    magnitude = abs(x)

    shift = magnitude.bit_length() - FLOAT32_MANTISSA_BITS
    if shift > 0:
        quotient, remainder = divmod(magnitude, 1 << shift)
        half = 1 << (shift - 1)
        if remainder > half or (remainder == half and quotient & 1):
            quotient += 1
        magnitude = quotient << shift

    if magnitude > FLOAT32_MAX:
        result = math.inf
    else:
        result = float(magnitude)

    return -result if x < 0 else result
