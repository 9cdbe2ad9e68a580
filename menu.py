# Cursor over a fixed list of menu choices.
from __future__ import annotations

from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class ItemList(Generic[T]):
    """Forward/back navigation that stops at either end instead of wrapping."""

    def __init__(self, items: Iterable[T], index: int = 0) -> None:
        self.items: list[T] = list(items)
        if not self.items:
            raise ValueError("ItemList needs at least one item.")
        if not 0 <= index < len(self.items):
            raise ValueError(f"index must be between 0 and {len(self.items) - 1}.")
        self.index = index

    def move_forward(self) -> None:
        self.index = min(self.index + 1, len(self.items) - 1)

    def move_back(self) -> None:
        self.index = max(self.index - 1, 0)

    def current_item(self) -> T:
        return self.items[self.index]
