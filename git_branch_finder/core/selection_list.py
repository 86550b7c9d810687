"""Filterable branch list with a circular cursor"""
from typing import Iterable, List, Optional, Tuple


class FilterableSelectionList:
    """Full branch set, a live substring filter and a cursor into the filtered view.

    The filtered view is re-derived from the full set on every filter change.
    The cursor is None exactly when the view is empty; otherwise it always
    points at a valid index.
    """

    def __init__(self, items: Optional[Iterable[str]] = None):
        self._all_items: List[str] = []
        self._items: List[str] = []
        self._filter_text = ""
        self._cursor: Optional[int] = None
        if items is not None:
            self.load(items)

    @property
    def filter_text(self) -> str:
        return self._filter_text

    @property
    def items(self) -> Tuple[str, ...]:
        """The filtered view."""
        return tuple(self._items)

    @property
    def all_items(self) -> Tuple[str, ...]:
        return tuple(self._all_items)

    @property
    def cursor(self) -> Optional[int]:
        return self._cursor

    def __len__(self) -> int:
        return len(self._items)

    def load(self, items: Iterable[str]) -> None:
        """Replace the full set and show all of it."""
        self._all_items = list(items)
        self._filter_text = ""
        self._refresh()

    def set_filter(self, text: str) -> None:
        """Restrict the view to names containing text (case-sensitive)."""
        self._filter_text = text
        self._refresh()

    def push_char(self, char: str) -> None:
        self.set_filter(self._filter_text + char)

    def pop_char(self) -> None:
        """Remove the last filter character; nothing changes on an empty filter."""
        if self._filter_text:
            self.set_filter(self._filter_text[:-1])

    def remove(self, names: Iterable[str]) -> None:
        """Drop names from the full set and re-derive the view."""
        removed = set(names)
        self._all_items = [item for item in self._all_items if item not in removed]
        self._refresh()

    def _refresh(self) -> None:
        self._items = [item for item in self._all_items if self._filter_text in item]
        self._cursor = 0 if self._items else None

    def select(self, index: int) -> None:
        """Move the cursor to index.

        Raises:
            IndexError: If index is outside the filtered view
        """
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for {len(self._items)} items")
        self._cursor = index

    def next(self) -> None:
        """Move down, wrapping from the last item to the first."""
        if self._cursor is None:
            return
        self._cursor = 0 if self._cursor >= len(self._items) - 1 else self._cursor + 1

    def previous(self) -> None:
        """Move up, wrapping from the first item to the last."""
        if self._cursor is None:
            return
        self._cursor = len(self._items) - 1 if self._cursor == 0 else self._cursor - 1

    def selected(self) -> Optional[str]:
        """Branch under the cursor, or None when the view is empty."""
        if self._cursor is None:
            return None
        return self._items[self._cursor]
