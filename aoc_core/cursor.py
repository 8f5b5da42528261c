"""
Circular selection over an ordered sequence.

StatefulTable knows nothing about what it indexes; the controller uses it
over the catalog and the renderer reads `selected` for highlighting.

Empty sequences: next()/previous() leave the selection at None and
current_item() returns None.
"""

from typing import Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


class StatefulTable(Generic[T]):
    """
    Items plus an optional selected index in [0, len(items)).

    Examples:
        >>> table = StatefulTable.with_rows(["a", "b"])
        >>> table.next(); table.selected
        0
        >>> table.previous(); table.selected
        1
    """

    def __init__(self, items: Sequence[T]) -> None:
        self.items = items
        self.selected: Optional[int] = None

    @classmethod
    def with_rows(cls, items: Sequence[T]) -> "StatefulTable[T]":
        return cls(items)

    def __len__(self) -> int:
        return len(self.items)

    def select(self, index: Optional[int]) -> None:
        if index is not None and not 0 <= index < len(self.items):
            raise IndexError(f"Selection {index} out of range for {len(self.items)} items")
        self.selected = index

    def next(self) -> None:
        if not self.items:
            return
        if self.selected is None:
            i = 0
        elif self.selected >= len(self.items) - 1:
            i = 0
        else:
            i = self.selected + 1
        self.select(i)

    def previous(self) -> None:
        if not self.items:
            return
        if self.selected is None:
            i = 0
        elif self.selected == 0:
            i = len(self.items) - 1
        else:
            i = self.selected - 1
        self.select(i)

    def current_item(self) -> Optional[T]:
        if not self.items:
            return None
        i = self.selected if self.selected is not None else 0
        return self.items[i]
