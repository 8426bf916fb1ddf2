"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from byteconv import ByteOrder, EncodingOptions


@pytest.fixture
def big_endian() -> EncodingOptions:
    """Explicit big-endian options."""
    return EncodingOptions(byte_order=ByteOrder.BIG_ENDIAN)


@pytest.fixture
def little_endian() -> EncodingOptions:
    """Explicit little-endian options."""
    return EncodingOptions(byte_order=ByteOrder.LITTLE_ENDIAN)


@pytest.fixture
def sample_value() -> float:
    """Sample value with known float32 and float64 encodings."""
    return -561.2863


@pytest.fixture
def sample_float32_bytes() -> bytes:
    """Big-endian binary32 encoding of the sample value."""
    return bytes([0xC4, 0x0C, 0x52, 0x53])


@pytest.fixture
def sample_float64_bytes() -> bytes:
    """Big-endian binary64 encoding of the sample value."""
    return bytes([0xC0, 0x81, 0x8A, 0x4A, 0x57, 0xA7, 0x86, 0xC2])
