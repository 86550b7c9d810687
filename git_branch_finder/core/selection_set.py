"""Branches marked for batch deletion"""
from typing import Dict, Iterable, Iterator, Tuple


class SelectionSet:
    """Insertion-ordered set of branch names.

    Independent of the filter and cursor, so marks survive filter changes.
    """

    def __init__(self):
        self._names: Dict[str, None] = {}

    def add(self, name: str) -> bool:
        """Mark a branch. Returns False if it was already marked."""
        if name in self._names:
            return False
        self._names[name] = None
        return True

    def discard(self, name: str) -> None:
        self._names.pop(name, None)

    def remove_all(self, names: Iterable[str]) -> None:
        for name in names:
            self.discard(name)

    def clear(self) -> None:
        self._names.clear()

    def names(self) -> Tuple[str, ...]:
        return tuple(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._names))
