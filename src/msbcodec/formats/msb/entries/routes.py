"""
ROUTE_PARAM_ST entries - links between muffling regions.

Layout after the common header:
    int32 unk08, int32 unk0c
    name, pad
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from ..base import MsbEntry, register_entry
from ..param import RouteParam
from .common import read_entry_header, read_name, write_entry_header, write_name

if TYPE_CHECKING:
    from ....utils.binary import IoBuffer
    from ..variant import MsbVariant


class RouteType(IntEnum):
    MUFFLING_PORTAL_LINK = 3
    MUFFLING_BOX_LINK = 4


@dataclass
class Route(MsbEntry):
    unk08: int = 0
    unk0c: int = 0

    def read(self, io: 'IoBuffer', variant: 'MsbVariant'):
        start = io.position
        name_offset = read_entry_header(self, io, variant)
        self.unk08 = io.read_int32()
        self.unk0c = io.read_int32()
        self.name = read_name(io, variant, start, name_offset)

    def write(self, io: 'IoBuffer', variant: 'MsbVariant', local_id: int):
        start = io.position
        write_entry_header(self, io, variant, local_id)
        io.write_int32(self.unk08)
        io.write_int32(self.unk0c)
        variant.fill_offset(io, "NameOffset", io.position - start)
        write_name(io, variant, self)
        io.pad(variant.alignment)


@register_entry(RouteParam.name, RouteType.MUFFLING_PORTAL_LINK)
@dataclass
class MufflingPortalLink(Route):
    pass


@register_entry(RouteParam.name, RouteType.MUFFLING_BOX_LINK)
@dataclass
class MufflingBoxLink(Route):
    pass
