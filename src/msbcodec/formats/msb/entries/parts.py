"""
PARTS_PARAM_ST entries - instances of models placed in the map.

Layout after the common header:
    int32 model_index, W sib_offset,
    float32[3] position, float32[3] rotation, float32[3] scale,
    int32 entity_id, W type_data_offset
    name, sib path, pad
    type data, pad

Object, enemy and connect-collision parts point at collisions by their
index among the collision parts only, not among all parts.
"""

from abc import abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

from ..base import MsbEntry, MsbFormatError, register_entry
from ..names import find_index, find_name, find_names, find_short_index, find_short_indices
from ..param import PartsParam
from .common import fixed_length, read_entry_header, read_name, write_entry_header, write_name

if TYPE_CHECKING:
    from ....utils.binary import IoBuffer
    from ..msb_file import MsbEntries
    from ..variant import MsbVariant


class PartType(IntEnum):
    MAP_PIECE = 0
    OBJECT = 1
    ENEMY = 2
    PLAYER = 4
    COLLISION = 5
    CONNECT_COLLISION = 11


@dataclass
class Part(MsbEntry):
    model_name: Optional[str] = None
    sib_path: str = ""
    position: tuple = (0.0, 0.0, 0.0)
    rotation: tuple = (0.0, 0.0, 0.0)
    scale: tuple = (1.0, 1.0, 1.0)
    entity_id: int = -1

    _model_index: int = field(default=-1, init=False, repr=False, compare=False)

    def read(self, io: 'IoBuffer', variant: 'MsbVariant'):
        start = io.position
        name_offset = read_entry_header(self, io, variant)
        self._model_index = io.read_int32()
        sib_offset = variant.read_offset(io)
        self.position = tuple(io.read_floats(3))
        self.rotation = tuple(io.read_floats(3))
        self.scale = tuple(io.read_floats(3))
        self.entity_id = io.read_int32()
        type_data_offset = variant.read_offset(io)

        self.name = read_name(io, variant, start, name_offset)
        self.sib_path = read_name(io, variant, start, sib_offset)
        if type_data_offset <= 0:
            raise MsbFormatError(f"{self} has no type data")
        io.seek(start + type_data_offset)
        self._read_type_data(io)

    def write(self, io: 'IoBuffer', variant: 'MsbVariant', local_id: int):
        start = io.position
        write_entry_header(self, io, variant, local_id)
        io.write_int32(self._model_index)
        variant.reserve_offset(io, "SibOffset")
        io.write_floats(self.position)
        io.write_floats(self.rotation)
        io.write_floats(self.scale)
        io.write_int32(self.entity_id)
        variant.reserve_offset(io, "TypeDataOffset")

        variant.fill_offset(io, "NameOffset", io.position - start)
        write_name(io, variant, self)
        variant.fill_offset(io, "SibOffset", io.position - start)
        io.write_string(self.sib_path, variant.name_encoding)
        io.pad(variant.alignment)

        variant.fill_offset(io, "TypeDataOffset", io.position - start)
        self._write_type_data(io)
        io.pad(variant.alignment)

    @abstractmethod
    def _read_type_data(self, io: 'IoBuffer'):
        """Read the fields that follow the type data offset."""

    @abstractmethod
    def _write_type_data(self, io: 'IoBuffer'):
        """Write the fields that follow the type data offset."""

    def resolve_names(self, entries: 'MsbEntries'):
        self.model_name = find_name(entries.models.names, self._model_index)

    def resolve_indices(self, entries: 'MsbEntries'):
        self._model_index = find_index(self, entries.models, self.model_name)


@register_entry(PartsParam.name, PartType.MAP_PIECE)
@dataclass
class MapPiecePart(Part):
    draw_group: int = 0
    disp_group: int = 0

    def _read_type_data(self, io: 'IoBuffer'):
        self.draw_group = io.read_uint32()
        self.disp_group = io.read_uint32()

    def _write_type_data(self, io: 'IoBuffer'):
        io.write_uint32(self.draw_group)
        io.write_uint32(self.disp_group)


@register_entry(PartsParam.name, PartType.OBJECT)
@dataclass
class ObjectPart(Part):
    collision_name: Optional[str] = None
    break_term: int = 0

    _collision_index: int = field(default=-1, init=False, repr=False, compare=False)

    def _read_type_data(self, io: 'IoBuffer'):
        self._collision_index = io.read_int32()
        self.break_term = io.read_int32()

    def _write_type_data(self, io: 'IoBuffer'):
        io.write_int32(self._collision_index)
        io.write_int32(self.break_term)

    def resolve_names(self, entries: 'MsbEntries'):
        super().resolve_names(entries)
        self.collision_name = find_name(entries.collisions.names, self._collision_index)

    def resolve_indices(self, entries: 'MsbEntries'):
        super().resolve_indices(entries)
        self._collision_index = find_index(self, entries.collisions, self.collision_name)


@register_entry(PartsParam.name, PartType.ENEMY)
@dataclass
class EnemyPart(Part):
    """An enemy; movement points are regions stored as 16-bit indices."""
    MOVEMENT_SLOTS = 8

    think_param_id: int = -1
    npc_param_id: int = -1
    talk_id: int = -1
    collision_name: Optional[str] = None
    movement_point_names: list = field(default_factory=list)

    _collision_index: int = field(default=-1, init=False, repr=False, compare=False)
    _movement_point_indices: list = field(default_factory=lambda: [-1] * 8, init=False, repr=False, compare=False)

    def _read_type_data(self, io: 'IoBuffer'):
        self.think_param_id = io.read_int32()
        self.npc_param_id = io.read_int32()
        self.talk_id = io.read_int32()
        self._collision_index = io.read_int32()
        self._movement_point_indices = io.read_int16s(self.MOVEMENT_SLOTS)

    def _write_type_data(self, io: 'IoBuffer'):
        io.write_int32(self.think_param_id)
        io.write_int32(self.npc_param_id)
        io.write_int32(self.talk_id)
        io.write_int32(self._collision_index)
        io.write_int16s(self._movement_point_indices)

    def resolve_names(self, entries: 'MsbEntries'):
        super().resolve_names(entries)
        self.collision_name = find_name(entries.collisions.names, self._collision_index)
        self.movement_point_names = find_names(entries.regions.names, self._movement_point_indices)

    def resolve_indices(self, entries: 'MsbEntries'):
        super().resolve_indices(entries)
        self._collision_index = find_index(self, entries.collisions, self.collision_name)
        self._movement_point_indices = find_short_indices(
            self, entries.regions,
            fixed_length(self, self.movement_point_names, self.MOVEMENT_SLOTS, "movement_point_names"))


@register_entry(PartsParam.name, PartType.PLAYER)
@dataclass
class PlayerPart(Part):
    unk00: int = 0

    def _read_type_data(self, io: 'IoBuffer'):
        self.unk00 = io.read_int32()

    def _write_type_data(self, io: 'IoBuffer'):
        io.write_int32(self.unk00)


@register_entry(PartsParam.name, PartType.COLLISION)
@dataclass
class CollisionPart(Part):
    """Collision geometry; environment refers to an environment event."""
    hit_filter_id: int = 8
    sound_space_type: int = 0
    environment_name: Optional[str] = None
    play_region_id: int = 0

    _environment_index: int = field(default=-1, init=False, repr=False, compare=False)

    def _read_type_data(self, io: 'IoBuffer'):
        self.hit_filter_id = io.read_int32()
        self.sound_space_type = io.read_int16()
        self._environment_index = io.read_int16()
        self.play_region_id = io.read_int32()

    def _write_type_data(self, io: 'IoBuffer'):
        io.write_int32(self.hit_filter_id)
        io.write_int16(self.sound_space_type)
        io.write_int16(self._environment_index)
        io.write_int32(self.play_region_id)

    def resolve_names(self, entries: 'MsbEntries'):
        super().resolve_names(entries)
        self.environment_name = find_name(entries.environments.names, self._environment_index)

    def resolve_indices(self, entries: 'MsbEntries'):
        super().resolve_indices(entries)
        self._environment_index = find_short_index(self, entries.environments, self.environment_name)


@register_entry(PartsParam.name, PartType.CONNECT_COLLISION)
@dataclass
class ConnectCollisionPart(Part):
    """Loads another map while the player stands on a collision."""
    collision_name: Optional[str] = None
    map_id: tuple = (0, 0, 0, 0)

    _collision_index: int = field(default=-1, init=False, repr=False, compare=False)

    def _read_type_data(self, io: 'IoBuffer'):
        self._collision_index = io.read_int32()
        self.map_id = tuple(io.read_sbytes(4))

    def _write_type_data(self, io: 'IoBuffer'):
        io.write_int32(self._collision_index)
        io.write_sbytes(self.map_id)

    def resolve_names(self, entries: 'MsbEntries'):
        super().resolve_names(entries)
        self.collision_name = find_name(entries.collisions.names, self._collision_index)

    def resolve_indices(self, entries: 'MsbEntries'):
        super().resolve_indices(entries)
        self._collision_index = find_index(self, entries.collisions, self.collision_name)
