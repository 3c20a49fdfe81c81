"""
MSB format variants.

The param protocol is the same across games; what changes is the offset
width, the string encodings, the alignment of param names, the byte order
and whether params carry a version. File headers belong to the per-game
container classes (msb1.py, msbe.py).
"""

from dataclasses import dataclass

from ...utils.binary import IoBuffer, ByteOrder


@dataclass(frozen=True)
class MsbVariant:
    """Per-game parameters of the MSB layout."""
    name: str
    offset_size: int = 4            # 4 or 8 bytes
    param_name_encoding: str = "ascii"
    name_encoding: str = "shift_jis"
    alignment: int = 4
    versioned_params: bool = False
    byte_order: ByteOrder = ByteOrder.LITTLE_ENDIAN

    def __post_init__(self):
        if self.offset_size not in (4, 8):
            raise ValueError(f"Offset size must be 4 or 8, got {self.offset_size}")

    @property
    def big_endian(self) -> bool:
        return self.byte_order == ByteOrder.BIG_ENDIAN

    def read_offset(self, io: IoBuffer) -> int:
        return io.read_int64() if self.offset_size == 8 else io.read_int32()

    def read_offsets(self, io: IoBuffer, count: int) -> list[int]:
        return io.read_int64s(count) if self.offset_size == 8 else io.read_int32s(count)

    def reserve_offset(self, io: IoBuffer, key: str):
        if self.offset_size == 8:
            io.reserve_int64(key)
        else:
            io.reserve_int32(key)

    def fill_offset(self, io: IoBuffer, key: str, value: int):
        if self.offset_size == 8:
            io.fill_int64(key, value)
        else:
            io.fill_int32(key, value)

    def __str__(self) -> str:
        return self.name


# DS1 PC: little endian, 32-bit offsets, Shift-JIS names
MSB1_PC = MsbVariant(name="MSB1 (PC)")

# DS1 PS3/X360: same layout, big endian
MSB1_CONSOLE = MsbVariant(name="MSB1 (console)", byte_order=ByteOrder.BIG_ENDIAN)

# Elden Ring: "MSB " header, 64-bit offsets, UTF-16 names, versioned params
MSBE = MsbVariant(
    name="MSBE",
    offset_size=8,
    param_name_encoding="utf-16-le",
    name_encoding="utf-16-le",
    alignment=8,
    versioned_params=True,
)
