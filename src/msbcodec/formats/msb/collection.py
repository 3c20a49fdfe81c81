"""
Entry collections - name lookup over a list of MSB entries.

A collection is a snapshot: build a new one whenever the names or order of
the underlying list change.
"""

from typing import Generic, Iterator, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .base import MsbEntry


T = TypeVar('T', bound='MsbEntry')


class EntryCollection(Generic[T]):
    """
    Index of an ordered entry list.

    items          - the caller's list (aliased, not copied)
    names          - names, index-aligned with items
    indices        - name -> last index with that name
    lower_indices  - lowercased name -> last index with that name
    """

    def __init__(self, items: list[T]):
        self.items = items
        self.names: list[str] = []
        self.indices: dict[str, int] = {}
        self.lower_indices: dict[str, int] = {}

        for i, item in enumerate(items):
            name = item.name
            self.names.append(name)
            self.indices[name] = i
            self.lower_indices[name.lower()] = i

    def index_of(self, name: str) -> int:
        """Exact-name lookup; raises KeyError on a miss."""
        return self.indices[name]

    def __getitem__(self, index: int) -> T:
        return self.items[index]

    def __contains__(self, name: str) -> bool:
        return name in self.indices

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"EntryCollection({len(self.items)} entries)"
