"""
MSBE - map layout format with an "MSB " header and 64-bit offsets.

Params: MODEL_PARAM_ST, EVENT_PARAM_ST, POINT_PARAM_ST, ROUTE_PARAM_ST,
LAYER_PARAM_ST (always empty), PARTS_PARAM_ST. Every param carries a
version and its name is stored as UTF-16.
"""

from ...utils.binary import IoBuffer, BinaryFormatError
from .base import MsbFormatError
from .msb_file import MsbFile
from .param import EmptyParam, EventParam, ModelParam, Param, PartsParam, PointParam, RouteParam
from .variant import MSBE as MSBE_VARIANT


class MSBE(MsbFile):
    """A 64-bit MSB with a file header."""

    DEFAULT_VARIANT = MSBE_VARIANT
    MAGIC = "MSB "
    PARAM_VERSION = 0x49

    def __init__(self, filename: str = ""):
        super().__init__(filename)
        self.models = ModelParam(version=self.PARAM_VERSION)
        self.events = EventParam(version=self.PARAM_VERSION)
        self.regions = PointParam(version=self.PARAM_VERSION)
        self.routes = RouteParam(version=self.PARAM_VERSION)
        self.layers = EmptyParam("LAYER_PARAM_ST", version=self.PARAM_VERSION)
        self.parts = PartsParam(version=self.PARAM_VERSION)

    @property
    def params(self) -> list[Param]:
        return [self.models, self.events, self.regions, self.routes, self.layers, self.parts]

    @classmethod
    def is_msb(cls, data: bytes) -> bool:
        return len(data) >= 4 and data[:4] == cls.MAGIC.encode('ascii')

    def _read_header(self, io: IoBuffer):
        try:
            io.assert_ascii(self.MAGIC)
            io.assert_int32(1)
            io.assert_int32(0x10)
            io.assert_bool(False)   # big endian
            io.assert_bool(False)   # bit big endian
            io.assert_byte(1)       # UTF-16 text
            io.assert_byte(0xFF)    # 64-bit offsets
        except BinaryFormatError as e:
            raise MsbFormatError(f"Invalid MSBE header: {e}") from e

    def _write_header(self, io: IoBuffer):
        io.write_ascii(self.MAGIC)
        io.write_int32(1)
        io.write_int32(0x10)
        io.write_bool(False)
        io.write_bool(False)
        io.write_byte(1)
        io.write_byte(0xFF)
