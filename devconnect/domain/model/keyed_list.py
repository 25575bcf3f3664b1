"""Ordered, id-keyed embedded lists.

Profiles and posts embed ordered lists of sub-records (experience, education,
likes, comments). ``KeyedList`` wraps such a list so that lookups and removals
go through an explicit key instead of index arithmetic, and so that the
behaviour for a missing key is chosen by the caller.
"""

from enum import Enum
from operator import attrgetter
from typing import Any, Callable, Generic, Hashable, Iterable, Iterator, TypeVar

E = TypeVar("E")


class MissingKeyPolicy(str, Enum):
    """What ``KeyedList.remove`` does when the key isn't present."""

    IGNORE = "ignore"  # Return the list unchanged
    RAISE = "raise"  # Raise KeyError


class KeyedList(Generic[E]):
    """Immutable ordered list of entries with unique keys.

    Every mutating operation returns a new ``KeyedList``; the entries themselves
    are never modified.
    """

    def __init__(
        self,
        entries: Iterable[E] = (),
        key: Callable[[E], Hashable] = attrgetter("id"),
    ) -> None:
        self._entries: tuple[E, ...] = tuple(entries)
        self._key = key

    def __iter__(self) -> Iterator[E]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: Any) -> bool:
        return self.index(key) is not None

    def __repr__(self) -> str:
        return f"KeyedList({list(self._entries)!r})"

    def index(self, key: Hashable) -> int | None:
        """Position of the entry with ``key``, or None."""
        for position, entry in enumerate(self._entries):
            if self._key(entry) == key:
                return position
        return None

    def get(self, key: Hashable) -> E | None:
        """Entry with ``key``, or None."""
        position = self.index(key)
        return None if position is None else self._entries[position]

    def prepend(self, entry: E) -> "KeyedList[E]":
        """Insert an entry at the front.

        Raises:
            ValueError: If an entry with the same key is already present
        """
        if self._key(entry) in self:
            raise ValueError(f"Duplicate key: {self._key(entry)}")
        return KeyedList((entry, *self._entries), key=self._key)

    def remove(
        self,
        key: Hashable,
        missing: MissingKeyPolicy = MissingKeyPolicy.RAISE,
    ) -> "KeyedList[E]":
        """Remove the entry with ``key``.

        Args:
            key: Key of the entry to remove
            missing: Behaviour when no entry has that key

        Returns:
            New list without the entry (or this list, when ignored)

        Raises:
            KeyError: If the key is missing and the policy is RAISE
        """
        position = self.index(key)
        if position is None:
            if missing == MissingKeyPolicy.IGNORE:
                return self
            raise KeyError(key)
        return KeyedList(
            self._entries[:position] + self._entries[position + 1 :], key=self._key
        )

    def to_list(self) -> list[E]:
        """Entries as a plain list, for storing back on a document."""
        return list(self._entries)
