"""Exception hierarchy for byteconv.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from ByteconvError for easy catching of any byteconv-specific error.
"""

from __future__ import annotations


class ByteconvError(Exception):
    """Base exception for all byteconv errors."""

    pass


class EncodeError(ByteconvError):
    """Raised when values or byte groups cannot be packed into a buffer."""

    pass


class DecodeError(ByteconvError):
    """Raised when a buffer cannot be decoded.

    Examples:
        - Buffer length not a multiple of the group size
        - Buffer shorter than a single value
    """

    pass


class ShapeMismatchError(EncodeError):
    """Raised when a byte group handed to flatten() has the wrong length.

    Attributes:
        expected: Required group size in bytes
        actual: Length of the first offending group
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"expected groups of {expected} bytes, but received a group of {actual} bytes"
        )


class MisalignedLengthError(DecodeError):
    """Raised when a buffer length is not a multiple of the group size.

    Attributes:
        size: Required group size in bytes
        length: Actual buffer length
    """

    def __init__(self, size: int, length: int) -> None:
        self.size = size
        self.length = length
        super().__init__(
            f"expected the buffer length to be a multiple of {size}, but its length is {length}"
        )


class InsufficientLengthError(DecodeError):
    """Raised when a scalar decoder receives fewer bytes than one value needs.

    Attributes:
        size: Number of bytes a single value requires
        length: Actual buffer length
    """

    def __init__(self, size: int, length: int) -> None:
        self.size = size
        self.length = length
        super().__init__(f"need at least {size} bytes to decode a value, got {length}")
