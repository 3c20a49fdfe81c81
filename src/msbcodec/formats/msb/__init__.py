"""MSB format package - map layout files."""
from .base import MsbEntry, MsbFormatError, MissingReferenceError, register_entry, get_entry_class, ENTRY_TYPES
from .variant import MsbVariant, MSB1_PC, MSB1_CONSOLE
from .collection import EntryCollection
from .names import (
    disambiguate_names,
    find_name, find_names, find_index, find_indices, find_short_index, find_short_indices,
    lookup_index, Resolved, Absent, Missing,
)
from .param import Param, EmptyParam, ModelParam, EventParam, PointParam, RouteParam, PartsParam
from .entries import *  # noqa: F401,F403
from .entries import __all__ as _entries_all
from .msb_file import MsbFile, MsbEntries
from .msb1 import MSB1
from .msbe import MSBE

__all__ = [
    'MsbEntry', 'MsbFormatError', 'MissingReferenceError', 'register_entry', 'get_entry_class', 'ENTRY_TYPES',
    'MsbVariant', 'MSB1_PC', 'MSB1_CONSOLE',
    'EntryCollection',
    'disambiguate_names',
    'find_name', 'find_names', 'find_index', 'find_indices', 'find_short_index', 'find_short_indices',
    'lookup_index', 'Resolved', 'Absent', 'Missing',
    'Param', 'EmptyParam', 'ModelParam', 'EventParam', 'PointParam', 'RouteParam', 'PartsParam',
    'MsbFile', 'MsbEntries', 'MSB1', 'MSBE',
] + list(_entries_all)
