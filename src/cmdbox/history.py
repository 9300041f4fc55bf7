"""Navigable input history for the command box."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class HistoryBuffer(Generic[T]):
    """Ordered history of entries with a cursor over them.

    The buffer always holds at least one entry, and the cursor always
    addresses one of them. The entry under the cursor is the one being shown
    or edited (the draft), whether or not it was ever submitted.

    Boundary operations (popping the last remaining entry, moving past either
    end) are no-ops rather than errors, so callers never need to catch
    anything.

    Args:
        default: Initial entry, typically the empty draft.
    """

    def __init__(self, default: T) -> None:
        self._entries: list[T] = [default]
        self._cursor: int = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"HistoryBuffer(entries={self._entries!r}, cursor={self._cursor})"

    @property
    def cursor(self) -> int:
        """Index of the entry currently addressed."""
        return self._cursor

    @property
    def current(self) -> T:
        """Entry under the cursor."""
        return self._entries[self._cursor]

    @property
    def entries(self) -> tuple[T, ...]:
        """Snapshot of all entries, oldest first."""
        return tuple(self._entries)

    def push(self, item: T) -> None:
        """Append an entry and move the cursor onto it."""
        self._entries.append(item)
        self._cursor = len(self._entries) - 1

    def pop(self) -> None:
        """Remove the last entry. Keeps the final remaining entry."""
        if len(self._entries) == 1:
            logger.debug("pop() on single-entry history ignored")
            return
        self._entries.pop()
        if self._cursor > len(self._entries) - 1:
            self._cursor = len(self._entries) - 1

    def restore(self) -> None:
        """Move the cursor back to the newest entry, abandoning navigation."""
        self._cursor = len(self._entries) - 1

    def back(self) -> T:
        """Step to the previous entry and return it. Stays put at the oldest."""
        if self._cursor > 0:
            self._cursor -= 1
        return self._entries[self._cursor]

    def forward(self) -> T:
        """Step to the next entry and return it. Stays put at the newest."""
        if self._cursor < len(self._entries) - 1:
            self._cursor += 1
        return self._entries[self._cursor]

    def set_current_state(self, item: T) -> None:
        """Overwrite the entry under the cursor in place.

        This does not append and does not move the cursor. When the cursor is
        on an older entry (the user is browsing), that entry itself is
        rewritten.
        """
        self._entries[self._cursor] = item
