"""Ordered, append-only collection that refuses items equal to one already held."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

Match = Callable[[T], bool]
Equal = Callable[[T, T], bool]


def equality_matcher(equal: Equal[T], item: T) -> Match[T]:
    """Turn an equality predicate into a match predicate for ``item``."""

    def match(other: T) -> bool:
        return equal(item, other)

    return match


class DedupList(Generic[T]):
    """Insertion-ordered list deduplicated by a caller-supplied equality predicate.

    Lookups are linear scans; the expected cardinality (tables per schema,
    foreign keys per table) is small.
    """

    def __init__(self, equal: Equal[T]) -> None:
        self._items: list[T] = []
        self._equal = equal

    def index_where(self, match: Match[T]) -> int | None:
        for position, item in enumerate(self._items):
            if match(item):
                return position
        return None

    def index(self, item: T) -> int | None:
        return self.index_where(equality_matcher(self._equal, item))

    def find(self, match: Match[T]) -> T | None:
        position = self.index_where(match)
        if position is None:
            return None
        return self._items[position]

    def add(self, item: T) -> bool:
        """Append ``item`` unless an equal item is present. Returns False if skipped."""
        if self.index(item) is not None:
            return False
        self._items.append(item)
        return True

    def each(self, fn: Callable[[T], bool]) -> None:
        """Call ``fn`` on every item in order; stop as soon as it returns False."""
        for item in self._items:
            if not fn(item):
                break

    def __contains__(self, item: object) -> bool:
        return self.index(item) is not None  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"DedupList({self._items!r})"
