"""
MSB1 - map layout format with 32-bit offsets and no file header.

Params: MODEL_PARAM_ST, EVENT_PARAM_ST, POINT_PARAM_ST, PARTS_PARAM_ST.
PC files are little endian, PS3/X360 files big endian.
"""

from ...utils.binary import IoBuffer, ByteOrder
from .base import MsbFormatError
from .msb_file import MsbFile
from .param import ModelParam, Param
from .variant import MSB1_CONSOLE, MSB1_PC


class MSB1(MsbFile):
    """A headerless, 32-bit MSB."""

    DEFAULT_VARIANT = MSB1_PC

    def __init__(self, filename: str = "", big_endian: bool = False):
        super().__init__(filename)
        self.big_endian = big_endian

    @property
    def big_endian(self) -> bool:
        return self.variant.big_endian

    @big_endian.setter
    def big_endian(self, value: bool):
        self.variant = MSB1_CONSOLE if value else MSB1_PC

    @property
    def params(self) -> list[Param]:
        return [self.models, self.events, self.regions, self.parts]

    @staticmethod
    def _detect_big_endian(io: IoBuffer) -> bool:
        # The first param's name offset is small; read with the wrong byte order it is not.
        if io.length < 12:
            raise MsbFormatError(f"Data is too short to be an MSB1 ({io.length} bytes)")
        io.byte_order = ByteOrder.LITTLE_ENDIAN
        return io.get_uint32(4) > 0xFFFF

    @classmethod
    def is_msb(cls, data: bytes) -> bool:
        io = IoBuffer.from_bytes(data)
        try:
            io.byte_order = ByteOrder.BIG_ENDIAN if cls._detect_big_endian(io) else ByteOrder.LITTLE_ENDIAN
            return io.get_string(io.get_uint32(4)) == ModelParam.name
        except ValueError:
            return False

    def _read_header(self, io: IoBuffer):
        self.big_endian = self._detect_big_endian(io)
