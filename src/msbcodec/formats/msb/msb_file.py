"""
MSB File - map layout container.

An MSB is a fixed sequence of params, each pointing at the next. Entries
refer to each other by name in memory and by index on disk:

    read:   params in order -> disambiguate names (remembering the stored
            ones) -> build MsbEntries
            -> every entry turns its stored indices into names
    write:  build MsbEntries from the current entries -> every entry turns
            its names into indices -> params in order, chaining offsets,
            with the final next-param offset written as 0
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional

from ...utils.binary import IoBuffer
from .base import MsbEntry, MsbFormatError
from .collection import EntryCollection
from .entries import CollisionPart, EnvironmentEvent, Model, PatrolInfoEvent
from .names import disambiguate_names
from .param import EventParam, ModelParam, Param, PartsParam, PointParam, RouteParam
from .variant import MsbVariant


logger = logging.getLogger(__name__)


@dataclass
class MsbEntries:
    """Name lookups for every category an entry can refer to."""
    models: EntryCollection
    events: EntryCollection
    environments: EntryCollection
    patrol_infos: EntryCollection
    regions: EntryCollection
    routes: EntryCollection
    parts: EntryCollection
    collisions: EntryCollection

    @classmethod
    def from_lists(cls, models: list, events: list, regions: list,
                   routes: list, parts: list) -> 'MsbEntries':
        return cls(
            models=EntryCollection(models),
            events=EntryCollection(events),
            environments=EntryCollection([e for e in events if isinstance(e, EnvironmentEvent)]),
            patrol_infos=EntryCollection([e for e in events if isinstance(e, PatrolInfoEvent)]),
            regions=EntryCollection(regions),
            routes=EntryCollection(routes),
            parts=EntryCollection(parts),
            collisions=EntryCollection([p for p in parts if isinstance(p, CollisionPart)]),
        )

    def count_model_instances(self) -> dict[str, int]:
        """Number of parts using each model name."""
        model_counts: dict[str, int] = {}
        for part in self.parts:
            if part.model_name:
                model_counts[part.model_name] = model_counts.get(part.model_name, 0) + 1
        return model_counts

    def __iter__(self) -> Iterator[MsbEntry]:
        for collection in (self.models, self.events, self.regions, self.routes, self.parts):
            yield from collection


class MsbFile(ABC):
    """
    Base class for the per-game MSB formats.

    Subclasses create their params, list them in file order in `params`
    and read/write whatever comes before the first param.
    """

    DEFAULT_VARIANT: MsbVariant

    def __init__(self, filename: str = ""):
        self.filename = filename
        self.variant = self.DEFAULT_VARIANT
        self.models = ModelParam()
        self.events = EventParam()
        self.regions = PointParam()
        self.routes: Optional[RouteParam] = None
        self.parts = PartsParam()

    @property
    @abstractmethod
    def params(self) -> list[Param]:
        """All params in file order."""

    @classmethod
    @abstractmethod
    def is_msb(cls, data: bytes) -> bool:
        """Check whether data looks like this format."""

    def _read_header(self, io: IoBuffer):
        pass

    def _write_header(self, io: IoBuffer):
        pass

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    @classmethod
    def read(cls, path: str) -> 'MsbFile':
        """Read an MSB file from disk."""
        msb = cls(filename=str(path))
        msb._read_from_stream(IoBuffer.from_file(str(path)))
        return msb

    @classmethod
    def from_bytes(cls, data: bytes, filename: str = "") -> 'MsbFile':
        """Read an MSB from bytes."""
        msb = cls(filename=filename)
        msb._read_from_stream(IoBuffer.from_bytes(data))
        return msb

    def _read_from_stream(self, io: IoBuffer):
        self._read_header(io)
        io.byte_order = self.variant.byte_order

        for param in self.params:
            param.read(io, self.variant)

        if io.position != 0:
            raise MsbFormatError("The next param offset of the final param should be 0, but it wasn't.")

        for param in self.params:
            stored_names = [entry.name for entry in param.entries]
            disambiguate_names(param.entries)
            for entry, stored_name in zip(param.entries, stored_names):
                entry.remember_file_name(stored_name)

        entries = self._build_entries(for_write=False)
        for entry in entries:
            entry.resolve_names(entries)

        logger.info(f"Read {self.variant} {self.filename or '<bytes>'}: "
                    f"{sum(len(p) for p in self.params)} entries in {len(self.params)} params")

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def _param_entries(self, for_write: bool) -> list[tuple[Param, list[MsbEntry]]]:
        return [
            (param, param.get_entries() if for_write else param.entries)
            for param in self.params
        ]

    def _build_entries(self, for_write: bool,
                       param_entries: Optional[list[tuple[Param, list[MsbEntry]]]] = None) -> MsbEntries:
        if param_entries is None:
            param_entries = self._param_entries(for_write)
        lists = {id(param): items for param, items in param_entries}

        def entries_of(param: Optional[Param]) -> list[MsbEntry]:
            return lists[id(param)] if param is not None else []

        return MsbEntries.from_lists(
            models=entries_of(self.models),
            events=entries_of(self.events),
            regions=entries_of(self.regions),
            routes=entries_of(self.routes),
            parts=entries_of(self.parts),
        )

    def to_bytes(self) -> bytes:
        """Serialize to bytes."""
        param_entries = self._param_entries(for_write=True)
        entries = self._build_entries(for_write=True, param_entries=param_entries)

        model_counts = entries.count_model_instances()
        for model in entries.models:
            if isinstance(model, Model):
                model.count_instances(model_counts)
        for entry in entries:
            entry.resolve_indices(entries)

        io = IoBuffer.for_writing(self.variant.byte_order)
        self._write_header(io)
        for i, (param, items) in enumerate(param_entries):
            if i > 0:
                self.variant.fill_offset(io, "NextParamOffset", io.position)
            param.write(io, self.variant, items)
        self.variant.fill_offset(io, "NextParamOffset", 0)

        data = io.to_bytes()
        logger.info(f"Wrote {self.variant} {self.filename or '<bytes>'}: {len(data)} bytes")
        return data

    def write(self, path: Optional[str] = None):
        """Write to disk, by default over the file this was read from."""
        path = path or self.filename
        if not path:
            raise ValueError("No path to write to")
        Path(path).write_bytes(self.to_bytes())

    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[MsbEntry]:
        for param in self.params:
            yield from param.entries

    def __len__(self) -> int:
        return sum(len(param) for param in self.params)

    def summary(self) -> str:
        """Get a summary of params and entry types in this file."""
        lines = [f"{type(self).__name__}: {self.filename}", f"Variant: {self.variant}"]
        for param in self.params:
            lines.append(f"  {param}: {len(param)}")
            type_counts: dict[str, int] = {}
            for entry in param.entries:
                type_name = type(entry).__name__
                type_counts[type_name] = type_counts.get(type_name, 0) + 1
            for type_name, count in sorted(type_counts.items()):
                lines.append(f"    {type_name}: {count}")
        return "\n".join(lines)
