"""Stable item -> integer index mapping."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterator, List, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)


class HashIndexer(Generic[T]):
    """Assigns 0, 1, 2, ... to items in first-seen order.

    Once assigned, an item's index never changes, so a caller can pass the
    same indexer to several transforms and get aligned vertex ids.
    """

    def __init__(self, items=None) -> None:
        self._index: Dict[T, int] = {}
        self._items: List[T] = []
        for item in items or ():
            self.index(item)

    def index(self, item: T) -> int:
        """Index of ``item``, assigning the next free one on first lookup."""
        idx = self._index.get(item)
        if idx is None:
            idx = len(self._items)
            self._index[item] = idx
            self._items.append(item)
        return idx

    def find(self, item: T) -> int:
        """Index of ``item`` or -1; never assigns."""
        return self._index.get(item, -1)

    def lookup(self, idx: int) -> T:
        return self._items[idx]

    def items(self) -> List[Tuple[T, int]]:
        return list(self._index.items())

    def clear(self) -> None:
        self._index.clear()
        self._items.clear()

    def __contains__(self, item: object) -> bool:
        return item in self._index

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)
