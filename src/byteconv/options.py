"""Byte order selection and encoding options.

Every encode/decode function in byteconv accepts an ``options`` argument that
may be an EncodingOptions instance, a bare ByteOrder or its name ("big",
"little"), or None. None always means big-endian.
"""

from __future__ import annotations

import enum
from typing import Union

from pydantic import BaseModel, ConfigDict


class ByteOrder(str, enum.Enum):
    """Which end of a multi-byte value is stored first.

    The values match the ``byteorder`` names used by ``int.to_bytes``.
    """

    BIG_ENDIAN = "big"
    LITTLE_ENDIAN = "little"

    @property
    def struct_prefix(self) -> str:
        """Return the ``struct`` format prefix for this byte order."""
        return ">" if self is ByteOrder.BIG_ENDIAN else "<"


class EncodingOptions(BaseModel):
    """Immutable options shared by all encoders and decoders.

    Example:
        >>> opts = EncodingOptions(byte_order="little")
        >>> opts.byte_order
        <ByteOrder.LITTLE_ENDIAN: 'little'>
    """

    model_config = ConfigDict(
        # Options are plain values and safe to share
        frozen=True,
        extra="forbid",
    )

    byte_order: ByteOrder = ByteOrder.BIG_ENDIAN


DEFAULT_OPTIONS = EncodingOptions()

OptionsLike = Union[EncodingOptions, ByteOrder, str, None]


def resolve_options(options: OptionsLike = None) -> EncodingOptions:
    """Normalize an ``options`` argument into an EncodingOptions instance.

    Args:
        options: EncodingOptions, ByteOrder, a byte order name ("big" or
            "little"), or None (big-endian)

    Returns:
        EncodingOptions to encode or decode with

    Raises:
        ValueError: If options is a string naming no byte order
        TypeError: If options is of any other type
    """
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, EncodingOptions):
        return options
    if isinstance(options, str):
        return EncodingOptions(byte_order=ByteOrder(options))
    raise TypeError(
        f"options must be EncodingOptions, ByteOrder, str or None, got {type(options).__name__}"
    )
