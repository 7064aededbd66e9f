"""
Pagination cursor over an in-memory, already filtered list.
"""
from dataclasses import dataclass
from typing import Sequence, TypeVar
import math

T = TypeVar("T")


@dataclass
class Pagination:
    page_size: int
    page: int = 0
    total_items: int = 0

    @property
    def total_pages(self) -> int:
        """Never less than one, even for an empty list."""
        return max(1, math.ceil(self.total_items / self.page_size))

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages - 1

    def clamp(self) -> None:
        if self.total_items == 0:
            self.page = 0
            return
        self.page = min(max(self.page, 0), self.total_pages - 1)

    def resize(self, total_items: int) -> None:
        """Track a new filtered-set size and keep the cursor in range."""
        self.total_items = total_items
        self.clamp()

    def reset(self, total_items: int) -> None:
        self.page = 0
        self.resize(total_items)

    def go_to(self, page: int) -> None:
        self.page = page
        self.clamp()

    def next(self) -> None:
        self.go_to(self.page + 1)

    def previous(self) -> None:
        self.go_to(self.page - 1)

    def slice(self, items: Sequence[T]) -> list[T]:
        start = self.page * self.page_size
        return list(items[start:start + self.page_size])
