"""
MSB Entry Base Class

Every concrete entry kind (a model, an event, a part, ...) implements the
same four hooks: read/write its body and convert its reference fields
between names and indices. Params and the reference resolver only ever
talk to entries through this interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Optional

from ...utils.binary import BinaryFormatError

if TYPE_CHECKING:
    from ...utils.binary import IoBuffer
    from .msb_file import MsbEntries
    from .variant import MsbVariant


class MsbFormatError(BinaryFormatError):
    """Structural problem in MSB data (wrong param, bad offsets, ...)."""


class MissingReferenceError(KeyError):
    """An entry refers to a name that no entry in the target collection has."""

    def __init__(self, referrer: 'MsbEntry', referee_name: str):
        self.referrer = referrer
        self.referee_name = referee_name
        super().__init__(f"\"{referrer}\" references \"{referee_name}\", which does not exist")

    def __str__(self) -> str:
        return self.args[0]


@dataclass
class MsbEntry(ABC):
    """
    Base class for all MSB entries.

    The name is the entry's identity for references; it may be blank in a
    file and is made unique by disambiguation after reading. The name as
    stored in the file is kept so it can be written back unchanged.
    """
    name: str = ""

    _stored_name: Optional[str] = field(default=None, init=False, repr=False, compare=False)
    _read_name: Optional[str] = field(default=None, init=False, repr=False, compare=False)

    # Set by @register_entry
    type_code: ClassVar[int] = -1
    param_name: ClassVar[str] = ""

    def remember_file_name(self, stored_name: str):
        """Record the name read from the file, once self.name holds its disambiguated form."""
        self._stored_name = stored_name
        self._read_name = self.name

    def file_name(self) -> str:
        """Name to write: the stored one until the entry is renamed."""
        if self._stored_name is not None and self.name == self._read_name:
            return self._stored_name
        return self.name

    @abstractmethod
    def read(self, io: 'IoBuffer', variant: 'MsbVariant'):
        """Read the entry body starting at the current position."""

    @abstractmethod
    def write(self, io: 'IoBuffer', variant: 'MsbVariant', local_id: int):
        """Write the entry body at the current position."""

    def resolve_names(self, entries: 'MsbEntries'):
        """Turn indices read from the file into names."""

    def resolve_indices(self, entries: 'MsbEntries'):
        """Turn names into indices before writing."""

    def __str__(self) -> str:
        return f"{type(self).__name__} {self.name}"


# Entry type registry - param name -> type code -> entry class
ENTRY_TYPES: dict[str, dict[int, type]] = {}


def register_entry(param_name: str, type_code: int):
    """Decorator to register an entry kind for a param."""
    def decorator(cls):
        by_code = ENTRY_TYPES.setdefault(param_name, {})
        if type_code in by_code:
            raise ValueError(
                f"{param_name} type {type_code} already registered to {by_code[type_code].__name__}"
            )
        cls.type_code = int(type_code)
        cls.param_name = param_name
        by_code[int(type_code)] = cls
        return cls
    return decorator


def get_entry_class(param_name: str, type_code: int) -> Optional[type]:
    """Get the entry class for a param and type code, or None if unknown."""
    return ENTRY_TYPES.get(param_name, {}).get(type_code)
