"""
EVENT_PARAM_ST entries - treasures, generators and other map systems.

Layout after the common header:
    int32 part_index, int32 region_index, int32 entity_id, W type_data_offset
    name, pad
    type data, pad
"""

from abc import abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

from ..base import MsbEntry, MsbFormatError, register_entry
from ..names import find_index, find_indices, find_name, find_names, find_short_indices
from ..param import EventParam
from .common import fixed_length, read_entry_header, read_name, write_entry_header, write_name

if TYPE_CHECKING:
    from ....utils.binary import IoBuffer
    from ..msb_file import MsbEntries
    from ..variant import MsbVariant


class EventType(IntEnum):
    TREASURE = 4
    GENERATOR = 5
    OBJ_ACT = 7
    ENVIRONMENT = 11
    PATROL_INFO = 20


@dataclass
class Event(MsbEntry):
    """
    Base event. Every event may point at a part and a region; the fields
    that follow depend on the event type.
    """
    part_name: Optional[str] = None
    region_name: Optional[str] = None
    entity_id: int = -1

    _part_index: int = field(default=-1, init=False, repr=False, compare=False)
    _region_index: int = field(default=-1, init=False, repr=False, compare=False)

    def read(self, io: 'IoBuffer', variant: 'MsbVariant'):
        start = io.position
        name_offset = read_entry_header(self, io, variant)
        self._part_index = io.read_int32()
        self._region_index = io.read_int32()
        self.entity_id = io.read_int32()
        type_data_offset = variant.read_offset(io)

        self.name = read_name(io, variant, start, name_offset)
        if type_data_offset <= 0:
            raise MsbFormatError(f"{self} has no type data")
        io.seek(start + type_data_offset)
        self._read_type_data(io)

    def write(self, io: 'IoBuffer', variant: 'MsbVariant', local_id: int):
        start = io.position
        write_entry_header(self, io, variant, local_id)
        io.write_int32(self._part_index)
        io.write_int32(self._region_index)
        io.write_int32(self.entity_id)
        variant.reserve_offset(io, "TypeDataOffset")

        variant.fill_offset(io, "NameOffset", io.position - start)
        write_name(io, variant, self)
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
        self.part_name = find_name(entries.parts.names, self._part_index)
        self.region_name = find_name(entries.regions.names, self._region_index)

    def resolve_indices(self, entries: 'MsbEntries'):
        self._part_index = find_index(self, entries.parts, self.part_name)
        self._region_index = find_index(self, entries.regions, self.region_name)


@register_entry(EventParam.name, EventType.TREASURE)
@dataclass
class TreasureEvent(Event):
    """An item pickup attached to a part."""
    treasure_part_name: Optional[str] = None
    item_lot: int = -1

    _treasure_part_index: int = field(default=-1, init=False, repr=False, compare=False)

    def _read_type_data(self, io: 'IoBuffer'):
        self._treasure_part_index = io.read_int32()
        self.item_lot = io.read_int32()

    def _write_type_data(self, io: 'IoBuffer'):
        io.write_int32(self._treasure_part_index)
        io.write_int32(self.item_lot)

    def resolve_names(self, entries: 'MsbEntries'):
        super().resolve_names(entries)
        self.treasure_part_name = find_name(entries.parts.names, self._treasure_part_index)

    def resolve_indices(self, entries: 'MsbEntries'):
        super().resolve_indices(entries)
        self._treasure_part_index = find_index(self, entries.parts, self.treasure_part_name)


@register_entry(EventParam.name, EventType.GENERATOR)
@dataclass
class GeneratorEvent(Event):
    """Spawns enemies from a set of parts at a set of regions."""
    SPAWN_SLOTS = 4

    max_num: int = 0
    limit_num: int = 0
    spawn_region_names: list = field(default_factory=list)
    spawn_part_names: list = field(default_factory=list)

    _spawn_region_indices: list = field(default_factory=lambda: [-1] * 4, init=False, repr=False, compare=False)
    _spawn_part_indices: list = field(default_factory=lambda: [-1] * 4, init=False, repr=False, compare=False)

    def _read_type_data(self, io: 'IoBuffer'):
        self.max_num = io.read_int16()
        self.limit_num = io.read_int16()
        self._spawn_region_indices = io.read_int32s(self.SPAWN_SLOTS)
        self._spawn_part_indices = io.read_int32s(self.SPAWN_SLOTS)

    def _write_type_data(self, io: 'IoBuffer'):
        io.write_int16(self.max_num)
        io.write_int16(self.limit_num)
        io.write_int32s(self._spawn_region_indices)
        io.write_int32s(self._spawn_part_indices)

    def resolve_names(self, entries: 'MsbEntries'):
        super().resolve_names(entries)
        self.spawn_region_names = find_names(entries.regions.names, self._spawn_region_indices)
        self.spawn_part_names = find_names(entries.parts.names, self._spawn_part_indices)

    def resolve_indices(self, entries: 'MsbEntries'):
        super().resolve_indices(entries)
        self._spawn_region_indices = find_indices(
            self, entries.regions,
            fixed_length(self, self.spawn_region_names, self.SPAWN_SLOTS, "spawn_region_names"))
        self._spawn_part_indices = find_indices(
            self, entries.parts,
            fixed_length(self, self.spawn_part_names, self.SPAWN_SLOTS, "spawn_part_names"))


@register_entry(EventParam.name, EventType.OBJ_ACT)
@dataclass
class ObjActEvent(Event):
    """An object interaction such as a lever or door."""
    obj_act_entity_id: int = -1
    obj_act_part_name: Optional[str] = None
    obj_act_param_id: int = -1
    obj_act_state: int = 0

    _obj_act_part_index: int = field(default=-1, init=False, repr=False, compare=False)

    def _read_type_data(self, io: 'IoBuffer'):
        self.obj_act_entity_id = io.read_int32()
        self._obj_act_part_index = io.read_int32()
        self.obj_act_param_id = io.read_int32()
        self.obj_act_state = io.read_int32()

    def _write_type_data(self, io: 'IoBuffer'):
        io.write_int32(self.obj_act_entity_id)
        io.write_int32(self._obj_act_part_index)
        io.write_int32(self.obj_act_param_id)
        io.write_int32(self.obj_act_state)

    def resolve_names(self, entries: 'MsbEntries'):
        super().resolve_names(entries)
        self.obj_act_part_name = find_name(entries.parts.names, self._obj_act_part_index)

    def resolve_indices(self, entries: 'MsbEntries'):
        super().resolve_indices(entries)
        self._obj_act_part_index = find_index(self, entries.parts, self.obj_act_part_name)


@register_entry(EventParam.name, EventType.ENVIRONMENT)
@dataclass
class EnvironmentEvent(Event):
    """Environment map settings; collision parts refer to these."""
    unk00: int = 0
    unk04: float = 0.0
    unk08: float = 0.0
    unk0c: float = 0.0

    def _read_type_data(self, io: 'IoBuffer'):
        self.unk00 = io.read_int32()
        self.unk04 = io.read_float()
        self.unk08 = io.read_float()
        self.unk0c = io.read_float()

    def _write_type_data(self, io: 'IoBuffer'):
        io.write_int32(self.unk00)
        io.write_float(self.unk04)
        io.write_float(self.unk08)
        io.write_float(self.unk0c)


@register_entry(EventParam.name, EventType.PATROL_INFO)
@dataclass
class PatrolInfoEvent(Event):
    """A patrol route through up to eight regions (16-bit indices)."""
    WALK_SLOTS = 8

    unk00: int = 0
    walk_region_names: list = field(default_factory=list)

    _walk_region_indices: list = field(default_factory=lambda: [-1] * 8, init=False, repr=False, compare=False)

    def _read_type_data(self, io: 'IoBuffer'):
        self.unk00 = io.read_int32()
        self._walk_region_indices = io.read_int16s(self.WALK_SLOTS)

    def _write_type_data(self, io: 'IoBuffer'):
        io.write_int32(self.unk00)
        io.write_int16s(self._walk_region_indices)

    def resolve_names(self, entries: 'MsbEntries'):
        super().resolve_names(entries)
        self.walk_region_names = find_names(entries.regions.names, self._walk_region_indices)

    def resolve_indices(self, entries: 'MsbEntries'):
        super().resolve_indices(entries)
        self._walk_region_indices = find_short_indices(
            self, entries.regions,
            fixed_length(self, self.walk_region_names, self.WALK_SLOTS, "walk_region_names"))
