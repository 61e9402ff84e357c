"""Generic page envelope for list queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Pagination(Generic[T]):
    """One page of results.

    ``page`` is 0-based and ``offset`` is the page size (items per page).
    ``total`` counts matching items across all pages.
    """

    page: int
    offset: int
    total: int
    data: list[T] = field(default_factory=list)

    @property
    def skip(self) -> int:
        return self.page * self.offset

    @property
    def total_pages(self) -> int:
        if self.offset <= 0:
            return 0
        return -(-self.total // self.offset)

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    def __len__(self) -> int:
        return len(self.data)
