"""byteconv: Fixed-width numeric byte conversion

A small Python library that converts 32-bit and 64-bit floats, and sequences
of them, to and from fixed-width IEEE-754 byte buffers with a selectable byte
order. Intended as a building block for higher-level binary formats.

Quick Start:
    >>> from byteconv import ByteOrder, float32s_to_bytes, bytes_to_float32s
    >>>
    >>> data = float32s_to_bytes([1.5, -2.0], ByteOrder.LITTLE_ENDIAN)
    >>> bytes_to_float32s(data, ByteOrder.LITTLE_ENDIAN)
    [1.5, -2.0]
"""

from __future__ import annotations

import logging

from .codec import (
    FLOAT32_SIZE,
    FLOAT64_SIZE,
    SUPPORTED_SIZES,
    bytes_to_float32,
    bytes_to_float32s,
    bytes_to_float64,
    bytes_to_float64s,
    flatten,
    flatten_bytes32,
    flatten_bytes64,
    float32_to_bytes,
    float32s_to_bytes,
    float64_to_bytes,
    float64s_to_bytes,
    int_to_float32,
    to_float32,
    unflatten,
    unflatten_bytes32,
    unflatten_bytes64,
)
from .exceptions import (
    ByteconvError,
    DecodeError,
    EncodeError,
    InsufficientLengthError,
    MisalignedLengthError,
    ShapeMismatchError,
)
from .options import DEFAULT_OPTIONS, ByteOrder, EncodingOptions, resolve_options

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Options
    "ByteOrder",
    "EncodingOptions",
    "DEFAULT_OPTIONS",
    "resolve_options",
    # Scalar codec
    "int_to_float32",
    "to_float32",
    "float32_to_bytes",
    "bytes_to_float32",
    "float64_to_bytes",
    "bytes_to_float64",
    # Sequence codec
    "float32s_to_bytes",
    "bytes_to_float32s",
    "float64s_to_bytes",
    "bytes_to_float64s",
    # Flatten / unflatten
    "FLOAT32_SIZE",
    "FLOAT64_SIZE",
    "SUPPORTED_SIZES",
    "flatten",
    "unflatten",
    "flatten_bytes32",
    "flatten_bytes64",
    "unflatten_bytes32",
    "unflatten_bytes64",
    # Exceptions
    "ByteconvError",
    "EncodeError",
    "DecodeError",
    "ShapeMismatchError",
    "MisalignedLengthError",
    "InsufficientLengthError",
    # Version
    "__version__",
]
