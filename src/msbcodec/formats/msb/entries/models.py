"""
MODEL_PARAM_ST entries - model files available for parts to use.

Layout after the common header:
    W sib_offset, int32 instance_count, int32 unk1
    name, sib path, pad
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from ..base import MsbEntry, register_entry
from ..param import ModelParam
from .common import read_entry_header, read_name, write_entry_header, write_name

if TYPE_CHECKING:
    from ....utils.binary import IoBuffer
    from ..variant import MsbVariant


class ModelType(IntEnum):
    MAP_PIECE = 0
    OBJECT = 1
    ENEMY = 2
    PLAYER = 4
    COLLISION = 5


@dataclass
class Model(MsbEntry):
    """A model file; instance_count is refreshed from the parts on every write."""
    sib_path: str = ""
    instance_count: int = 0
    unk1: int = 0

    def read(self, io: 'IoBuffer', variant: 'MsbVariant'):
        start = io.position
        name_offset = read_entry_header(self, io, variant)
        sib_offset = variant.read_offset(io)
        self.instance_count = io.read_int32()
        self.unk1 = io.read_int32()

        self.name = read_name(io, variant, start, name_offset)
        self.sib_path = read_name(io, variant, start, sib_offset)

    def write(self, io: 'IoBuffer', variant: 'MsbVariant', local_id: int):
        start = io.position
        write_entry_header(self, io, variant, local_id)
        variant.reserve_offset(io, "SibOffset")
        io.write_int32(self.instance_count)
        io.write_int32(self.unk1)

        variant.fill_offset(io, "NameOffset", io.position - start)
        write_name(io, variant, self)
        variant.fill_offset(io, "SibOffset", io.position - start)
        io.write_string(self.sib_path, variant.name_encoding)
        io.pad(variant.alignment)

    def count_instances(self, model_counts: dict[str, int]):
        self.instance_count = model_counts.get(self.name, 0)


@register_entry(ModelParam.name, ModelType.MAP_PIECE)
@dataclass
class MapPieceModel(Model):
    pass


@register_entry(ModelParam.name, ModelType.OBJECT)
@dataclass
class ObjectModel(Model):
    pass


@register_entry(ModelParam.name, ModelType.ENEMY)
@dataclass
class EnemyModel(Model):
    pass


@register_entry(ModelParam.name, ModelType.PLAYER)
@dataclass
class PlayerModel(Model):
    pass


@register_entry(ModelParam.name, ModelType.COLLISION)
@dataclass
class CollisionModel(Model):
    pass
