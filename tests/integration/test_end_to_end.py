"""End-to-end integration tests."""

from __future__ import annotations

import array
import logging
import struct
import sys

import pytest

import byteconv
from byteconv import (
    ByteconvError,
    ByteOrder,
    EncodingOptions,
    bytes_to_float32,
    bytes_to_float32s,
    bytes_to_float64s,
    flatten_bytes64,
    float32s_to_bytes,
    float64_to_bytes,
    float64s_to_bytes,
    int_to_float32,
    unflatten_bytes32,
)


class TestInterop:
    """Test buffers agree with other producers of IEEE-754 arrays."""

    def test_float32s_match_struct(self) -> None:
        """Test a float32 buffer matches struct's packed array."""
        readings = [20.5, 21.25, -3.0, 0.0]

        assert float32s_to_bytes(readings) == struct.pack(">4f", *readings)
        assert float32s_to_bytes(readings, ByteOrder.LITTLE_ENDIAN) == struct.pack(
            "<4f", *readings
        )

    def test_native_array_decodes(self) -> None:
        """Test a native-order array.array buffer decodes with the host byte order."""
        samples = array.array("d", [0.25, -1.5, 3.75])
        host_order = ByteOrder(sys.byteorder)

        assert bytes_to_float64s(samples.tobytes(), host_order) == samples.tolist()

    def test_array_buffer_accepted(self) -> None:
        """Test a memoryview over a float array is decoded by its bytes."""
        samples = array.array("f", [1.0, 2.0])
        host_order = ByteOrder(sys.byteorder)

        assert bytes_to_float32s(memoryview(samples), host_order) == [1.0, 2.0]


class TestRecordLayout:
    """Test building a small fixed layout from the public API."""

    def test_sensor_record(self) -> None:
        """Test a header of float64s followed by float32 samples."""
        opts = EncodingOptions(byte_order="little")
        header = float64s_to_bytes([1700000000.5, -561.2863], opts)
        samples = [int_to_float32(n) for n in (1, 2, 3, 2**25 + 1)]
        body = float32s_to_bytes(samples, opts)
        record = header + body

        assert len(record) == 2 * 8 + 4 * 4

        decoded_header = bytes_to_float64s(record[:16], opts)
        decoded_samples = bytes_to_float32s(record[16:], opts)

        assert decoded_header == [1700000000.5, -561.2863]
        assert decoded_samples == [1.0, 2.0, 3.0, float(2**25)]

    def test_regroup_values(self) -> None:
        """Test groups can be split and recombined independently of decoding."""
        data = float32s_to_bytes([1.0, 2.0, 3.0, 4.0])
        groups = unflatten_bytes32(data)

        assert [bytes_to_float32(g) for g in reversed(groups)] == [4.0, 3.0, 2.0, 1.0]
        assert flatten_bytes64([groups[0] + groups[1], groups[2] + groups[3]]) == data

    def test_single_except_clause(self) -> None:
        """Test every data error is catchable through the base class."""
        failures = [
            lambda: bytes_to_float32(b"\x00"),
            lambda: bytes_to_float32s(b"\x00" * 5),
            lambda: flatten_bytes64([b"\x00" * 4]),
        ]

        for failure in failures:
            with pytest.raises(ByteconvError):
                failure()


class TestLogging:
    """Test the library's logging behavior."""

    def test_failure_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test decode failures are logged before raising."""
        with caplog.at_level(logging.DEBUG, logger="byteconv"):
            with pytest.raises(ByteconvError):
                bytes_to_float64s(bytes(3))

        assert any("not a multiple of 8" in record.getMessage() for record in caplog.records)

    def test_success_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test the success path stays quiet."""
        with caplog.at_level(logging.DEBUG, logger="byteconv"):
            float64_to_bytes(1.0)
            bytes_to_float32s(float32s_to_bytes([1.0]))

        assert not caplog.records

    def test_version(self) -> None:
        """Test the package exposes a version string."""
        assert isinstance(byteconv.__version__, str)
