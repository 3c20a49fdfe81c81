"""
msbcodec - IoBuffer Tests

Typed reads/writes, assertions, strings and deferred (reserve/fill) writes.

Can be run standalone: python test_binary.py
Or via main runner: python tests.py
"""

import struct
import sys

import harness
from harness import expect_raises
from msbcodec.utils.binary import IoBuffer, ByteOrder, BinaryFormatError


def test_reserve_and_fill():
    io = IoBuffer.for_writing()
    io.write_int32(7)
    io.reserve_int32("End")
    io.write_bytes(b"ab")
    io.fill_int32("End", io.position)
    assert io.to_bytes() == struct.pack("<ii", 7, 10) + b"ab"


def test_reserve_int64_big_endian():
    io = IoBuffer.for_writing(ByteOrder.BIG_ENDIAN)
    io.reserve_int64("Offset")
    io.fill_int64("Offset", 0x1234)
    assert io.to_bytes() == b"\0\0\0\0\0\0\x12\x34"


def test_unfilled_reservation_blocks_output():
    io = IoBuffer.for_writing()
    io.reserve_int32("Never")
    err = expect_raises(BinaryFormatError, io.to_bytes)
    assert "Never" in str(err)
    assert io.pending_reservations == ["Never"]


def test_reservation_keys():
    io = IoBuffer.for_writing()
    io.reserve_int32("Key")
    expect_raises(KeyError, io.reserve_int32, "Key")
    expect_raises(KeyError, io.fill_int32, "Other", 0)
    expect_raises(KeyError, io.fill_int64, "Key", 0)
    io.fill_int32("Key", 1)
    # Filled keys can be reserved again
    io.reserve_int32("Key")
    io.fill_int32("Key", 2)
    assert io.to_bytes() == struct.pack("<ii", 1, 2)


def test_short_read():
    io = IoBuffer.from_bytes(b"\x01\x02")
    expect_raises(BinaryFormatError, io.read_int32)


def test_assertions():
    io = IoBuffer.from_bytes(struct.pack("<i", 5) + b"MSB \x02")
    assert io.assert_int32(4, 5) == 5
    assert io.assert_ascii("MSB ") == "MSB "
    expect_raises(BinaryFormatError, io.assert_bool, False)

    io = IoBuffer.from_bytes(struct.pack("<i", 3))
    err = expect_raises(BinaryFormatError, io.assert_int32, 0)
    assert "expected" in str(err)


def test_null_terminated_strings():
    io = IoBuffer.for_writing()
    io.write_string("Ab", "utf-16-le")
    io.write_string("cd", "shift_jis")
    data = io.to_bytes()
    assert data == b"A\0b\0\0\0cd\0"

    reader = IoBuffer.from_bytes(data)
    reader.position = 3
    assert reader.get_string(0, "utf-16-le") == "Ab"
    assert reader.get_string(6, "shift_jis") == "cd"
    assert reader.position == 3


def test_unterminated_string():
    io = IoBuffer.from_bytes(b"abc")
    expect_raises(BinaryFormatError, io.get_string, 0)
    expect_raises(BinaryFormatError, io.get_string, -1)


def test_pad():
    io = IoBuffer.for_writing()
    io.write_bytes(b"abc")
    io.pad(4)
    assert io.position == 4
    io.pad(4)
    assert io.position == 4
    io.pad(8)
    assert io.to_bytes() == b"abc" + b"\0" * 5


def test_get_int32_keeps_position():
    io = IoBuffer.from_bytes(struct.pack(">ii", 1, 2), ByteOrder.BIG_ENDIAN)
    assert io.get_int32(4) == 2
    assert io.read_int32() == 1


def test_vector_reads():
    io = IoBuffer.from_bytes(struct.pack("<3h2i", -1, 2, 3, 4, 5))
    assert io.read_int16s(3) == [-1, 2, 3]
    assert io.read_int32s(2) == [4, 5]
    expect_raises(BinaryFormatError, io.read_int32s, -1)


def run_all_tests(results):
    harness.run_module_tests(sys.modules[__name__], results, "BINARY I/O")


if __name__ == "__main__":
    results = harness.TestResults()
    run_all_tests(results)
    sys.exit(0 if results.summary() else 1)
