"""
MSB Params - offset-table framed groups of entries.

Layout of one param (W = offset width of the variant):

    unversioned:  int32 0, W name_offset, int32 offset_count
    versioned:    int32 version, int32 offset_count, W name_offset
    W entry_offset * (offset_count - 1)
    W next_param_offset
    param name string, padded to the variant alignment
    entry bodies

offset_count is the number of entries plus one; the extra slot is the
param name. The final param of a file has a next_param_offset of 0.
"""

import logging
from typing import TYPE_CHECKING, Iterator, Optional, Type, TypeVar

from .base import MsbEntry, MsbFormatError, get_entry_class

if TYPE_CHECKING:
    from ...utils.binary import IoBuffer
    from .variant import MsbVariant


logger = logging.getLogger(__name__)

E = TypeVar('E', bound=MsbEntry)


class Param:
    """
    A generic group of entries in an MSB.

    entries holds the entries in file order after reading; get_entries()
    gives the order they will be written in.
    """

    name: str = ""

    def __init__(self, entries: Optional[list[MsbEntry]] = None, version: Optional[int] = None):
        self.entries: list[MsbEntry] = list(entries) if entries else []
        self.version = version

    def read(self, io: 'IoBuffer', variant: 'MsbVariant') -> list[MsbEntry]:
        """Read the param at the current position and leave the cursor at the next one."""
        start = io.position

        if variant.versioned_params:
            self.version = io.read_int32()
            offset_count = io.read_int32()
            name_offset = variant.read_offset(io)
        else:
            io.assert_int32(0)
            name_offset = variant.read_offset(io)
            offset_count = io.read_int32()

        if offset_count < 1:
            raise MsbFormatError(f"Param at 0x{start:X} has invalid offset count {offset_count}")
        if not io.has_bytes(offset_count * variant.offset_size):
            raise MsbFormatError(
                f"Param at 0x{start:X} claims {offset_count} offsets, more than the data holds"
            )
        entry_offsets = variant.read_offsets(io, offset_count - 1)
        next_param_offset = variant.read_offset(io)
        table_end = io.position

        name = io.get_string(name_offset, variant.param_name_encoding)
        if name != self.name:
            raise MsbFormatError(f"Expected param \"{self.name}\", got param \"{name}\"")

        if next_param_offset != 0 and not table_end <= next_param_offset <= io.length:
            raise MsbFormatError(
                f"{self.name}: next param offset 0x{next_param_offset:X} is outside the data"
            )
        limit = next_param_offset if next_param_offset else io.length
        for i, offset in enumerate(entry_offsets):
            if not table_end <= offset < limit:
                raise MsbFormatError(
                    f"{self.name}: entry {i} offset 0x{offset:X} is outside "
                    f"0x{table_end:X}-0x{limit:X}"
                )

        entries = []
        for offset in entry_offsets:
            io.seek(offset)
            entries.append(self.read_entry(io, variant))

        logger.debug(f"Read {self.name}: {len(entries)} entries")
        self.entries = entries
        io.seek(next_param_offset)
        return entries

    def read_entry(self, io: 'IoBuffer', variant: 'MsbVariant') -> MsbEntry:
        """Read one entry, picking its class from the type code after the name offset."""
        start = io.position
        type_code = io.get_int32(start + variant.offset_size)
        entry_class = get_entry_class(self.name, type_code)
        if entry_class is None:
            raise MsbFormatError(f"{self.name}: unknown entry type {type_code} at 0x{start:X}")
        entry = entry_class()
        entry.read(io, variant)
        return entry

    def write(self, io: 'IoBuffer', variant: 'MsbVariant', entries: list[MsbEntry]):
        """
        Write the param header, name and entries.

        NextParamOffset is left reserved; the file fills it in once it knows
        where the next param starts.
        """
        if variant.versioned_params:
            if self.version is None:
                raise ValueError(f"{self.name} needs a version to be written as {variant}")
            io.write_int32(self.version)
            io.write_int32(len(entries) + 1)
            variant.reserve_offset(io, "ParamNameOffset")
        else:
            io.write_int32(0)
            variant.reserve_offset(io, "ParamNameOffset")
            io.write_int32(len(entries) + 1)
        for i in range(len(entries)):
            variant.reserve_offset(io, f"EntryOffset{i}")
        variant.reserve_offset(io, "NextParamOffset")

        variant.fill_offset(io, "ParamNameOffset", io.position)
        io.write_string(self.name, variant.param_name_encoding)
        io.pad(variant.alignment)

        # IDs count up within each run of the same entry type
        local_id = 0
        entry_type = None
        for i, entry in enumerate(entries):
            if type(entry) is not entry_type:
                entry_type = type(entry)
                local_id = 0
            variant.fill_offset(io, f"EntryOffset{i}", io.position)
            entry.write(io, variant, local_id)
            local_id += 1

        logger.debug(f"Wrote {self.name}: {len(entries)} entries")

    def get_entries(self) -> list[MsbEntry]:
        """All entries, grouped by type in type-code order, as they will be written."""
        return sorted(self.entries, key=lambda entry: entry.type_code & 0xFFFFFFFF)

    def of_type(self, entry_type: Type[E]) -> list[E]:
        return [entry for entry in self.get_entries() if isinstance(entry, entry_type)]

    def add(self, entry: MsbEntry) -> MsbEntry:
        if entry.param_name != self.name:
            raise TypeError(f"{type(entry).__name__} does not belong in {self.name}")
        self.entries.append(entry)
        return entry

    def __iter__(self) -> Iterator[MsbEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        if self.version is None:
            return self.name
        return f"0x{self.version:02X} {self.name}"


class EmptyParam(Param):
    """A param that must never hold entries."""

    def __init__(self, name: str, version: Optional[int] = None):
        super().__init__(version=version)
        self.name = name

    def read_entry(self, io: 'IoBuffer', variant: 'MsbVariant') -> MsbEntry:
        raise MsbFormatError(f"Expected param \"{self.name}\" to be empty, but it wasn't.")

    def get_entries(self) -> list[MsbEntry]:
        return []

    def add(self, entry: MsbEntry) -> MsbEntry:
        raise TypeError(f"{self.name} cannot hold entries")


class ModelParam(Param):
    """Model files that are available for parts to use."""
    name = "MODEL_PARAM_ST"


class EventParam(Param):
    """Dynamic or interactive systems such as treasures and enemy generators."""
    name = "EVENT_PARAM_ST"


class PointParam(Param):
    """Points or volumes that trigger some sort of behavior."""
    name = "POINT_PARAM_ST"


class RouteParam(Param):
    """Links between muffling regions."""
    name = "ROUTE_PARAM_ST"


class PartsParam(Param):
    """Instances of actual things in the map."""
    name = "PARTS_PARAM_ST"
