# flagparser — (c) 2025 rtj.dev LLC — MIT Licensed
"""deque.py

Minimal double-ended queue used to stage tokens and parsed values."""
from __future__ import annotations

from collections import deque as _deque
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class Deque(Generic[T]):
    """Ordered buffer consumed from the front and appended at the back."""

    def __init__(self, values: Iterable[T] | None = None) -> None:
        self._values: _deque[T] = _deque(values or ())

    @property
    def values(self) -> list[T]:
        """Return a snapshot of the buffered values in order."""
        return list(self._values)

    def empty(self) -> bool:
        return not self._values

    def front(self) -> tuple[T | None, bool]:
        """Return the front value and whether one exists."""
        if self.empty():
            return None, False
        return self._values[0], True

    def pop_front(self) -> None:
        """Remove the front value, if any."""
        if not self.empty():
            self._values.popleft()

    def push_back(self, value: T) -> None:
        self._values.append(value)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"Deque({list(self._values)!r})"
