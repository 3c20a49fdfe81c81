"""Binary I/O utilities for MSB parsing and writing."""

import struct
from enum import Enum
from typing import BinaryIO
from io import BytesIO


class ByteOrder(Enum):
    """Byte order enum for struct packing/unpacking."""
    BIG_ENDIAN = ">"
    LITTLE_ENDIAN = "<"


class BinaryFormatError(ValueError):
    """Raised when data does not have the expected binary shape."""


def _is_wide(encoding: str) -> bool:
    return encoding.lower().replace("_", "-").startswith("utf-16")


class IoBuffer:
    """
    Binary reader/writer with endian support.

    Writes can reserve a named slot with reserve_int32()/reserve_int64() and
    patch it later with the matching fill call, once the value is known.
    """

    RESERVED_BYTE = 0xFE

    def __init__(self, stream: BinaryIO, byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN):
        self.stream = stream
        self.byte_order = byte_order
        self._reservations: dict[str, tuple[int, str]] = {}

    @classmethod
    def from_bytes(cls, data: bytes, byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN) -> 'IoBuffer':
        """Create from bytes."""
        return cls(BytesIO(data), byte_order)

    @classmethod
    def from_file(cls, filepath: str, byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN) -> 'IoBuffer':
        """Create from file path."""
        with open(filepath, 'rb') as f:
            data = f.read()
        return cls.from_bytes(data, byte_order)

    @classmethod
    def for_writing(cls, byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN) -> 'IoBuffer':
        """Create an empty buffer to write into."""
        return cls(BytesIO(), byte_order)

    @property
    def position(self) -> int:
        """Current position in stream."""
        return self.stream.tell()

    @position.setter
    def position(self, value: int):
        """Seek to position."""
        self.stream.seek(value)

    @property
    def length(self) -> int:
        """Total length of the stream."""
        current = self.stream.tell()
        self.stream.seek(0, 2)
        end = self.stream.tell()
        self.stream.seek(current)
        return end

    def has_bytes(self, num_bytes: int) -> bool:
        """Check if there are at least num_bytes remaining."""
        return (self.length - self.position) >= num_bytes

    def seek(self, offset: int, whence: int = 0):
        """Seek in stream (whence: 0=start, 1=current, 2=end)."""
        if whence == 0 and offset < 0:
            raise BinaryFormatError(f"Cannot seek to negative offset {offset}")
        self.stream.seek(offset, whence)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def read_bytes(self, count: int) -> bytes:
        """Read exactly count raw bytes."""
        start = self.position
        data = self.stream.read(count)
        if len(data) != count:
            raise BinaryFormatError(
                f"Unexpected end of data at 0x{start:X}: wanted {count} bytes, got {len(data)}"
            )
        return data

    def _unpack(self, code: str, size: int):
        return struct.unpack(f"{self.byte_order.value}{code}", self.read_bytes(size))[0]

    def _unpack_many(self, code: str, size: int, count: int) -> list:
        if count < 0:
            raise BinaryFormatError(f"Cannot read a negative number of values ({count})")
        data = self.read_bytes(size * count)
        return list(struct.unpack(f"{self.byte_order.value}{count}{code}", data))

    def read_byte(self) -> int:
        """Read single byte (0-255)."""
        return self.read_bytes(1)[0]

    def read_bool(self) -> bool:
        """Read a one-byte boolean; anything but 0 or 1 is rejected."""
        value = self.read_byte()
        if value > 1:
            raise BinaryFormatError(f"Invalid boolean value 0x{value:02X} at 0x{self.position - 1:X}")
        return value == 1

    def read_int16(self) -> int:
        """Read signed 16-bit integer."""
        return self._unpack('h', 2)

    def read_uint32(self) -> int:
        """Read unsigned 32-bit integer."""
        return self._unpack('I', 4)

    def read_int32(self) -> int:
        """Read signed 32-bit integer."""
        return self._unpack('i', 4)

    def read_int64(self) -> int:
        """Read signed 64-bit integer."""
        return self._unpack('q', 8)

    def read_float(self) -> float:
        """Read 32-bit float."""
        return self._unpack('f', 4)

    def read_sbytes(self, count: int) -> list[int]:
        return self._unpack_many('b', 1, count)

    def read_int16s(self, count: int) -> list[int]:
        return self._unpack_many('h', 2, count)

    def read_int32s(self, count: int) -> list[int]:
        return self._unpack_many('i', 4, count)

    def read_int64s(self, count: int) -> list[int]:
        return self._unpack_many('q', 8, count)

    def read_floats(self, count: int) -> list[float]:
        return self._unpack_many('f', 4, count)

    def read_null_terminated_string(self, encoding: str = 'ascii') -> str:
        """
        Read a null-terminated string.

        UTF-16 strings end on a two-byte null aligned to the string start,
        everything else on a single zero byte.
        """
        start = self.position
        width = 2 if _is_wide(encoding) else 1
        terminator = b"\0" * width
        chunks = []
        while True:
            unit = self.stream.read(width)
            if len(unit) != width:
                raise BinaryFormatError(f"Unterminated string starting at 0x{start:X}")
            if unit == terminator:
                break
            chunks.append(unit)
        try:
            return b"".join(chunks).decode(encoding)
        except UnicodeDecodeError as e:
            raise BinaryFormatError(f"Cannot decode {encoding} string at 0x{start:X}: {e}") from e

    def get_string(self, offset: int, encoding: str = 'ascii') -> str:
        """Read a null-terminated string at offset without moving the cursor."""
        current = self.position
        self.seek(offset)
        try:
            return self.read_null_terminated_string(encoding)
        finally:
            self.stream.seek(current)

    def get_int32(self, offset: int) -> int:
        """Read a signed 32-bit integer at offset without moving the cursor."""
        current = self.position
        self.seek(offset)
        try:
            return self.read_int32()
        finally:
            self.stream.seek(current)

    def get_uint32(self, offset: int) -> int:
        """Read an unsigned 32-bit integer at offset without moving the cursor."""
        current = self.position
        self.seek(offset)
        try:
            return self.read_uint32()
        finally:
            self.stream.seek(current)

    # ------------------------------------------------------------------
    # Assertions
    # ------------------------------------------------------------------

    def _assert_value(self, kind: str, value, options: tuple):
        if value not in options:
            expected = ", ".join(repr(o) for o in options)
            raise BinaryFormatError(
                f"Read {kind} {value!r} at 0x{self.position:X}; expected one of: {expected}"
            )
        return value

    def assert_byte(self, *options: int) -> int:
        return self._assert_value("byte", self.read_byte(), options)

    def assert_bool(self, expected: bool) -> bool:
        return self._assert_value("bool", self.read_bool(), (expected,))

    def assert_int32(self, *options: int) -> int:
        return self._assert_value("int32", self.read_int32(), options)

    def assert_ascii(self, *options: str) -> str:
        length = len(options[0])
        value = self.read_bytes(length).decode('ascii', errors='replace')
        return self._assert_value("string", value, options)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def write_bytes(self, data: bytes):
        """Write raw bytes."""
        self.stream.write(data)

    def _pack(self, code: str, value):
        self.stream.write(struct.pack(f"{self.byte_order.value}{code}", value))

    def write_byte(self, value: int):
        """Write single byte."""
        self.stream.write(struct.pack('B', value))

    def write_sbyte(self, value: int):
        self.stream.write(struct.pack('b', value))

    def write_bool(self, value: bool):
        self.write_byte(1 if value else 0)

    def write_int16(self, value: int):
        """Write signed 16-bit integer."""
        self._pack('h', value)

    def write_uint32(self, value: int):
        """Write unsigned 32-bit integer."""
        self._pack('I', value)

    def write_int32(self, value: int):
        """Write signed 32-bit integer."""
        self._pack('i', value)

    def write_float(self, value: float):
        """Write 32-bit float."""
        self._pack('f', value)

    def write_sbytes(self, values):
        for value in values:
            self.write_sbyte(value)

    def write_int16s(self, values):
        for value in values:
            self.write_int16(value)

    def write_int32s(self, values):
        for value in values:
            self.write_int32(value)

    def write_floats(self, values):
        for value in values:
            self.write_float(value)

    def write_ascii(self, value: str, terminate: bool = False):
        self.write_string(value, 'ascii', terminate)

    def write_string(self, value: str, encoding: str = 'ascii', terminate: bool = True):
        """Write a string, optionally null-terminated in the encoding's unit width."""
        self.stream.write(value.encode(encoding))
        if terminate:
            self.stream.write(b"\0" * (2 if _is_wide(encoding) else 1))

    def pad(self, alignment: int):
        """Write zero bytes until the position is a multiple of alignment."""
        remainder = self.position % alignment
        if remainder:
            self.stream.write(b"\0" * (alignment - remainder))

    # ------------------------------------------------------------------
    # Deferred writes
    # ------------------------------------------------------------------

    def _reserve(self, name: str, code: str, size: int):
        if name in self._reservations:
            raise KeyError(f"Key already reserved: {name}")
        self._reservations[name] = (self.position, code)
        self.stream.write(bytes([self.RESERVED_BYTE]) * size)

    def _fill(self, name: str, code: str, value: int):
        if name not in self._reservations:
            raise KeyError(f"Key was not reserved: {name}")
        position, reserved_code = self._reservations[name]
        if reserved_code != code:
            raise KeyError(f"Key {name} was reserved as {reserved_code}, filled as {code}")
        del self._reservations[name]
        current = self.position
        self.stream.seek(position)
        self._pack(code, value)
        self.stream.seek(current)

    def reserve_int32(self, name: str):
        self._reserve(name, 'i', 4)

    def fill_int32(self, name: str, value: int):
        self._fill(name, 'i', value)

    def reserve_int64(self, name: str):
        self._reserve(name, 'q', 8)

    def fill_int64(self, name: str, value: int):
        self._fill(name, 'q', value)

    @property
    def pending_reservations(self) -> list[str]:
        return list(self._reservations)

    def to_bytes(self) -> bytes:
        """Return everything written so far; every reservation must be filled."""
        if self._reservations:
            names = ", ".join(self._reservations)
            raise BinaryFormatError(f"Reserved values were never filled: {names}")
        return self.stream.getvalue()
