"""Fixed-width float codec for byteconv.

This module provides byte-group flattening, scalar IEEE-754 conversion, and
the sequence codec built from the two.
"""

from __future__ import annotations

from .flatten import (
    FLOAT32_SIZE,
    FLOAT64_SIZE,
    SUPPORTED_SIZES,
    flatten,
    flatten_bytes32,
    flatten_bytes64,
    unflatten,
    unflatten_bytes32,
    unflatten_bytes64,
)
from .scalar import (
    bytes_to_float32,
    bytes_to_float64,
    float32_to_bytes,
    float64_to_bytes,
    int_to_float32,
    to_float32,
)
from .sequence import bytes_to_float32s, bytes_to_float64s, float32s_to_bytes, float64s_to_bytes

__all__ = [
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
    # Scalar
    "float32_to_bytes",
    "bytes_to_float32",
    "float64_to_bytes",
    "bytes_to_float64",
    "to_float32",
    "int_to_float32",
    # Sequence
    "float32s_to_bytes",
    "bytes_to_float32s",
    "float64s_to_bytes",
    "bytes_to_float64s",
]
