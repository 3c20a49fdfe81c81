"""
POINT_PARAM_ST entries - points and volumes in the map.

Layout after the common header:
    float32[3] position, float32[3] rotation,
    int32 activation_part_index, int32 entity_id, W shape_offset
    name, pad
    shape data, pad (shape_offset is 0 for plain points)
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, ClassVar, Optional

from ..base import MsbEntry, MsbFormatError, register_entry
from ..names import find_index, find_name
from ..param import PointParam
from .common import read_entry_header, read_name, write_entry_header, write_name

if TYPE_CHECKING:
    from ....utils.binary import IoBuffer
    from ..msb_file import MsbEntries
    from ..variant import MsbVariant


class RegionType(IntEnum):
    POINT = 0
    SPHERE = 2
    CYLINDER = 3
    BOX = 5


@dataclass
class Region(MsbEntry):
    position: tuple = (0.0, 0.0, 0.0)
    rotation: tuple = (0.0, 0.0, 0.0)
    activation_part_name: Optional[str] = None
    entity_id: int = -1

    HAS_SHAPE: ClassVar[bool] = True

    _activation_part_index: int = field(default=-1, init=False, repr=False, compare=False)

    def read(self, io: 'IoBuffer', variant: 'MsbVariant'):
        start = io.position
        name_offset = read_entry_header(self, io, variant)
        self.position = tuple(io.read_floats(3))
        self.rotation = tuple(io.read_floats(3))
        self._activation_part_index = io.read_int32()
        self.entity_id = io.read_int32()
        shape_offset = variant.read_offset(io)

        self.name = read_name(io, variant, start, name_offset)
        if self.HAS_SHAPE != (shape_offset != 0):
            raise MsbFormatError(f"{self} has unexpected shape offset {shape_offset}")
        if self.HAS_SHAPE:
            io.seek(start + shape_offset)
            self._read_shape(io)

    def write(self, io: 'IoBuffer', variant: 'MsbVariant', local_id: int):
        start = io.position
        write_entry_header(self, io, variant, local_id)
        io.write_floats(self.position)
        io.write_floats(self.rotation)
        io.write_int32(self._activation_part_index)
        io.write_int32(self.entity_id)
        variant.reserve_offset(io, "ShapeOffset")

        variant.fill_offset(io, "NameOffset", io.position - start)
        write_name(io, variant, self)
        io.pad(variant.alignment)

        if self.HAS_SHAPE:
            variant.fill_offset(io, "ShapeOffset", io.position - start)
            self._write_shape(io)
            io.pad(variant.alignment)
        else:
            variant.fill_offset(io, "ShapeOffset", 0)

    def _read_shape(self, io: 'IoBuffer'):
        pass

    def _write_shape(self, io: 'IoBuffer'):
        pass

    def resolve_names(self, entries: 'MsbEntries'):
        self.activation_part_name = find_name(entries.parts.names, self._activation_part_index)

    def resolve_indices(self, entries: 'MsbEntries'):
        self._activation_part_index = find_index(self, entries.parts, self.activation_part_name)


@register_entry(PointParam.name, RegionType.POINT)
@dataclass
class PointRegion(Region):
    HAS_SHAPE: ClassVar[bool] = False


@register_entry(PointParam.name, RegionType.SPHERE)
@dataclass
class SphereRegion(Region):
    radius: float = 1.0

    def _read_shape(self, io: 'IoBuffer'):
        self.radius = io.read_float()

    def _write_shape(self, io: 'IoBuffer'):
        io.write_float(self.radius)


@register_entry(PointParam.name, RegionType.CYLINDER)
@dataclass
class CylinderRegion(Region):
    radius: float = 1.0
    height: float = 1.0

    def _read_shape(self, io: 'IoBuffer'):
        self.radius = io.read_float()
        self.height = io.read_float()

    def _write_shape(self, io: 'IoBuffer'):
        io.write_float(self.radius)
        io.write_float(self.height)


@register_entry(PointParam.name, RegionType.BOX)
@dataclass
class BoxRegion(Region):
    width: float = 1.0
    depth: float = 1.0
    height: float = 1.0

    def _read_shape(self, io: 'IoBuffer'):
        self.width, self.depth, self.height = io.read_floats(3)

    def _write_shape(self, io: 'IoBuffer'):
        io.write_floats((self.width, self.depth, self.height))
