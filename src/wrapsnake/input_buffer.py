# input_buffer.py
from collections import deque
from typing import Iterable, List, Tuple

from .config import CFG
from .geometry import Direction, is_opposite


def resolve_direction(
    current: Direction, queue: Iterable[Direction]
) -> Tuple[Direction, List[Direction]]:
    """
    Pick the direction for the next tick.

    Leading entries that repeat `current` or reverse it are dropped. The first
    entry that is neither wins, and everything before it (itself included) is
    consumed. If nothing qualifies, `current` is kept and the queue empties.
    """
    pending = list(queue)
    for i, cand in enumerate(pending):
        if cand is current or is_opposite(cand, current):
            continue
        return cand, pending[i + 1:]
    return current, []


class InputBuffer:
    """Key presses waiting to be applied, oldest first. Bounded; the oldest entry is evicted when full."""

    def __init__(self, capacity: int = CFG.input_queue_size, items: Iterable[Direction] = ()):
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._queue: deque = deque(items, maxlen=capacity)

    def push(self, direction: Direction) -> None:
        self._queue.append(direction)

    def resolve(self, current: Direction) -> Direction:
        new_direction, remaining = resolve_direction(current, self._queue)
        self._queue = deque(remaining, maxlen=self.capacity)
        return new_direction

    def __iter__(self):
        return iter(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self):
        return f"InputBuffer({[d.name for d in self._queue]}, capacity={self.capacity})"
