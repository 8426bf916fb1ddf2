#!/usr/bin/env python3
"""Basic usage example for byteconv.

This example demonstrates:
1. Encoding single floats in both byte orders
2. Encoding and decoding float sequences
3. Splitting a buffer into fixed-size groups
4. Handling decode errors
"""

from __future__ import annotations

from byteconv import (
    ByteOrder,
    DecodeError,
    EncodingOptions,
    bytes_to_float32s,
    bytes_to_float64,
    float32_to_bytes,
    float32s_to_bytes,
    float64_to_bytes,
    int_to_float32,
    unflatten_bytes32,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("byteconv Basic Usage Example")
    print("=" * 60)
    print()

    value = -561.2863

    print("1. Encoding a single value...")
    print(f"   float32 big-endian:    {float32_to_bytes(value).hex()}")
    print(f"   float32 little-endian: {float32_to_bytes(value, ByteOrder.LITTLE_ENDIAN).hex()}")
    print(f"   float64 big-endian:    {float64_to_bytes(value).hex()}")
    print()

    print("2. Encoding a sequence of readings...")
    opts = EncodingOptions(byte_order="little")
    readings = [12.5, 13.0, int_to_float32(14)]
    data = float32s_to_bytes(readings, opts)

    print(f"   Encoded size: {len(data)} bytes")
    print(f"   Hex: {data.hex()}")
    print(f"   Decoded: {bytes_to_float32s(data, opts)}")
    print()

    print("3. Splitting into 4-byte groups...")
    for i, group in enumerate(unflatten_bytes32(data)):
        print(f"   [{i}] {group.hex()}")
    print()

    print("4. Decoding a truncated buffer...")
    try:
        bytes_to_float64(float64_to_bytes(value)[:5])
    except DecodeError as e:
        print(f"   Error: {e}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
