"""
Entry names - disambiguation and reference resolution.

MSB entries refer to each other by name in memory and by index in the file.
Names in a file may be duplicated or blank, so they are made unique right
after reading (disambiguate_names); entries keep the stored name and write
it back unless renamed. Conversions between names and indices go through an
EntryCollection built for the current state of the entry list.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Sequence, Union

from .base import MissingReferenceError

if TYPE_CHECKING:
    from .base import MsbEntry
    from .collection import EntryCollection


logger = logging.getLogger(__name__)

# Signed 16-bit index fields
SHORT_INDEX_MIN = -0x8000
SHORT_INDEX_MAX = 0x7FFF


def disambiguate_names(entries: Sequence['MsbEntry'], category: str = "") -> int:
    """
    Rename entries until every name is unique and non-blank.

    A repeated (or blank) name becomes "{category}{name} {N}" with N in
    braces, where N counts occurrences of that name so far in the pass.
    Passes repeat until one makes no changes, since a new name can clash
    with one further down the list. Returns the number of renames.
    """
    renamed = 0
    passes = 0
    ambiguous = True
    while ambiguous:
        ambiguous = False
        passes += 1
        # Blank names are never valid targets, so even a single one is renamed.
        name_counts: dict[str, int] = {"": 0}
        for entry in entries:
            name = entry.name
            if name not in name_counts and name != "":
                name_counts[name] = 1
            else:
                ambiguous = True
                name_counts[name] += 1
                entry.name = f"{category}{name} {{{name_counts[name]}}}"
                renamed += 1

    if renamed:
        logger.debug(f"Disambiguated {renamed} names in {passes} passes")
    return renamed


# ----------------------------------------------------------------------
# Index -> name (reading)
# ----------------------------------------------------------------------

def find_name(names: Sequence[str], index: int) -> Optional[str]:
    """Name at index, or None for -1 and any other out-of-range index."""
    if index < 0 or index >= len(names):
        return None
    return names[index]


def find_names(names: Sequence[str], indices: Sequence[int]) -> list[Optional[str]]:
    return [find_name(names, index) for index in indices]


# ----------------------------------------------------------------------
# Name -> index (writing)
# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Resolved:
    index: int


@dataclass(frozen=True)
class Absent:
    """Blank name: no reference."""
    index: int = -1


@dataclass(frozen=True)
class Missing:
    name: str


IndexLookup = Union[Resolved, Absent, Missing]


def lookup_index(collection: 'EntryCollection', name: Optional[str]) -> IndexLookup:
    """
    Look a name up in a collection.

    Exact match first; failing that, the lowercased name is tried against
    the collection's lowercased names, since map data is not consistent
    about casing.
    """
    if not name:
        return Absent()

    index = collection.indices.get(name)
    if index is not None:
        return Resolved(index)

    index = collection.lower_indices.get(name.lower())
    if index is not None:
        logger.warning(
            f"Reference \"{name}\" matched \"{collection.names[index]}\" only case-insensitively"
        )
        return Resolved(index)

    return Missing(name)


def find_index(referrer: 'MsbEntry', collection: 'EntryCollection', name: Optional[str]) -> int:
    """Index of name in collection, -1 for a blank name; raises MissingReferenceError."""
    result = lookup_index(collection, name)
    if isinstance(result, Missing):
        raise MissingReferenceError(referrer, result.name)
    return result.index


def find_indices(referrer: 'MsbEntry', collection: 'EntryCollection',
                 names: Sequence[Optional[str]]) -> list[int]:
    return [find_index(referrer, collection, name) for name in names]


def find_short_index(referrer: 'MsbEntry', collection: 'EntryCollection', name: Optional[str]) -> int:
    """Like find_index, for 16-bit index fields."""
    index = find_index(referrer, collection, name)
    if not SHORT_INDEX_MIN <= index <= SHORT_INDEX_MAX:
        raise ValueError(f"\"{referrer}\" reference \"{name}\" has index {index}, too large for a 16-bit field")
    return index


def find_short_indices(referrer: 'MsbEntry', collection: 'EntryCollection',
                       names: Sequence[Optional[str]]) -> list[int]:
    return [find_short_index(referrer, collection, name) for name in names]
