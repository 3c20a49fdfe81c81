"""Helpers shared by the entry body readers and writers."""

from typing import TYPE_CHECKING, Optional, Sequence

from ..base import MsbFormatError

if TYPE_CHECKING:
    from ....utils.binary import IoBuffer
    from ..base import MsbEntry
    from ..variant import MsbVariant


def read_entry_header(entry: 'MsbEntry', io: 'IoBuffer', variant: 'MsbVariant') -> int:
    """Read the name offset, type and ID that start every entry; returns the name offset."""
    name_offset = variant.read_offset(io)
    type_code = io.read_int32()
    if type_code != entry.type_code:
        raise MsbFormatError(
            f"{type(entry).__name__} expected type {entry.type_code}, got {type_code}"
        )
    io.read_int32()  # ID, recomputed on write
    return name_offset


def write_entry_header(entry: 'MsbEntry', io: 'IoBuffer', variant: 'MsbVariant', local_id: int):
    variant.reserve_offset(io, "NameOffset")
    io.write_int32(entry.type_code)
    io.write_int32(local_id)


def read_name(io: 'IoBuffer', variant: 'MsbVariant', start: int, offset: int) -> str:
    if offset <= 0:
        raise MsbFormatError(f"Entry at 0x{start:X} has invalid string offset {offset}")
    return io.get_string(start + offset, variant.name_encoding)


def write_name(io: 'IoBuffer', variant: 'MsbVariant', entry: 'MsbEntry'):
    """Write an entry name as it was stored in the file, or as renamed since."""
    io.write_string(entry.file_name(), variant.name_encoding)


def fixed_length(entry: 'MsbEntry', values: Sequence[Optional[str]], count: int, field_name: str) -> list[Optional[str]]:
    """Pad a reference list with None up to count; longer lists cannot be written."""
    values = list(values)
    if len(values) > count:
        raise ValueError(f"{entry}: {field_name} holds {len(values)} names, at most {count} allowed")
    return values + [None] * (count - len(values))
