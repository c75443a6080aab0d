"""
Pathstar Core Frontier (open set)
"""

import heapq
import itertools
from typing import Hashable, Optional

from Pathstar.core.path_state import PathState


class Frontier:
    """
    Open set of the search: exactly one PathState per open node, ordered by score.

    Replacing a node's state pushes a fresh heap entry; the old entry is left in the heap
    and skipped when it surfaces, since it no longer matches the state mapped for its node.
    Equal scores pop in insertion order.
    """

    def __init__(self):
        self._states: dict[Hashable, PathState] = {}
        self._heap: list[tuple] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._states)

    def __bool__(self) -> bool:
        return bool(self._states)

    def __contains__(self, node: Hashable) -> bool:
        return node in self._states

    def get(self, node: Hashable) -> Optional[PathState]:
        return self._states.get(node)

    def push(self, state: PathState) -> None:
        if state.node in self._states:
            raise KeyError(f"{state.node!r} is already open; use replace()")
        self._insert(state)

    def replace(self, state: PathState) -> PathState:
        """Swap in a better state for an already open node and return the old one."""
        old = self._states[state.node]
        self._insert(state)
        return old

    def remove(self, node: Hashable) -> PathState:
        # heap entry goes stale and is dropped lazily
        return self._states.pop(node)

    def peek(self) -> PathState:
        self._drop_stale()
        if not self._heap:
            raise IndexError("peek from an empty frontier")
        return self._heap[0][2]

    def pop(self) -> PathState:
        self._drop_stale()
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        _, _, state = heapq.heappop(self._heap)
        del self._states[state.node]
        return state

    def clear(self) -> None:
        self._states.clear()
        self._heap.clear()
        self._counter = itertools.count()

    def _insert(self, state: PathState) -> None:
        self._states[state.node] = state
        heapq.heappush(self._heap, (state.score, next(self._counter), state))

    def _drop_stale(self) -> None:
        heap = self._heap
        while heap and self._states.get(heap[0][2].node) is not heap[0][2]:
            heapq.heappop(heap)
