"""
In-memory, index-addressed store of user names.

``UserStore`` keeps an ordered list of plain strings.  Entries are
addressed by their position, so removing an entry shifts every later
entry down by one.  Index lookups never raise: they answer with
``Found`` or ``NotFound`` and leave it to the caller to decide how an
out-of-range index is reported.

Every operation holds the store's lock, which makes each single call
atomic when handlers run concurrently.  A sequence of calls is not.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Iterable, List, Union

from fastapi import Request


@dataclass(frozen=True)
class Found:
    """A successful index lookup carrying the entry at that index."""

    value: str


@dataclass(frozen=True)
class NotFound:
    """An index lookup outside ``0 .. size - 1``."""

    index: int
    size: int


Lookup = Union[Found, NotFound]


class UserStore:
    """Ordered collection of user names guarded by a lock."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        self._entries: List[str] = list(entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _in_range(self, index: int) -> bool:
        # Negative indices are rejected rather than counted from the end.
        return 0 <= index < len(self._entries)

    def list_all(self) -> List[str]:
        """Return a copy of all entries in order."""
        with self._lock:
            return list(self._entries)

    def get(self, index: int) -> Lookup:
        with self._lock:
            if not self._in_range(index):
                return NotFound(index, len(self._entries))
            return Found(self._entries[index])

    def append(self, name: str) -> int:
        """Add ``name`` to the end and return the new size."""
        with self._lock:
            self._entries.append(name)
            return len(self._entries)

    def replace(self, index: int, name: str) -> Lookup:
        """Overwrite the entry at ``index``; ``Found`` holds the old value."""
        with self._lock:
            if not self._in_range(index):
                return NotFound(index, len(self._entries))
            previous = self._entries[index]
            self._entries[index] = name
            return Found(previous)

    def remove(self, index: int) -> Lookup:
        """Delete the entry at ``index``; ``Found`` holds the removed value."""
        with self._lock:
            if not self._in_range(index):
                return NotFound(index, len(self._entries))
            return Found(self._entries.pop(index))

    def reset(self, entries: Iterable[str]) -> None:
        """Replace the whole contents with ``entries``."""
        with self._lock:
            self._entries = list(entries)


def get_user_store(request: Request) -> UserStore:
    """FastAPI dependency returning the store attached to the running app."""
    return request.app.state.user_store
