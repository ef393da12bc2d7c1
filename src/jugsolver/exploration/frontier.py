"""Frontier - Holds discovered states that have not been expanded yet.

The solver only needs first-in first-out order: expanding states in the
order they were discovered is what makes the first path to reach the
target a shortest one.
"""

from __future__ import annotations

from collections import deque

from jugsolver.core.state import JugState


class QueueFrontier:
    """FIFO frontier for breadth-first exploration."""

    def __init__(self, initial: JugState | None = None) -> None:
        self._queue: deque[JugState] = deque()
        if initial is not None:
            self._queue.append(initial)

    def add(self, state: JugState) -> None:
        self._queue.append(state)

    def pop(self) -> JugState | None:
        if not self._queue:
            return None
        return self._queue.popleft()

    def is_empty(self) -> bool:
        return len(self._queue) == 0

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return not self.is_empty()
