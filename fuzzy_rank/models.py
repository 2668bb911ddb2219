from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")

Candidate = str | bytes


@dataclass(slots=True)
class Match:
    """A candidate aligned against a pattern.

    ``matched_indexes`` holds one character offset into ``text`` per pattern
    character, in ascending order, and is only meaningful for a successful
    alignment.
    """

    text: str
    index: int = 0
    matched_indexes: list[int] = field(default_factory=list)
    score: int = 0


class Source(Protocol):
    """Read-only, ordered collection of candidates."""

    def __len__(self) -> int: ...

    def string_at(self, index: int) -> Candidate: ...


class StringSource:
    def __init__(self, strings: Sequence[Candidate]) -> None:
        self._strings = strings

    def __len__(self) -> int:
        return len(self._strings)

    def string_at(self, index: int) -> Candidate:
        return self._strings[index]


class ProjectedSource(Generic[T]):
    """Expose arbitrary items to the matcher through a text projection.

    ``Match.index`` points back into ``items``.
    """

    def __init__(self, items: Sequence[T], key: Callable[[T], Candidate]) -> None:
        self._items = items
        self._key = key

    def __len__(self) -> int:
        return len(self._items)

    def string_at(self, index: int) -> Candidate:
        return self._key(self._items[index])

    def item_at(self, index: int) -> T:
        return self._items[index]
