"""Split ordered results into fixed-size pages for display."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """A contiguous slice of the paginated items."""

    items: tuple[T, ...]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "".join(str(item) for item in self.items)


class Paginator(Generic[T]):
    """Sized, iterable sequence of pages; the last page may be short."""

    def __init__(self, items: Sequence[T], page_size: int) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self.page_size = page_size
        self._pages = [Page(tuple(items[start : start + page_size])) for start in range(0, len(items), page_size)]

    def __iter__(self) -> Iterator[Page[T]]:
        return iter(self._pages)

    def __len__(self) -> int:
        return len(self._pages)

    def __getitem__(self, index: int) -> Page[T]:
        return self._pages[index]


def paginate(items: Sequence[T], page_size: int) -> Paginator[T]:
    return Paginator(items, page_size)
