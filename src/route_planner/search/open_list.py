# search/open_list.py
import heapq
from typing import Literal

from route_planner.search.errors import EmptyOpenListError

TieBreak = Literal["insertion", "lowest_h"]


class OpenList:
    """
    Min-heap of discovered, not yet expanded node ids ordered by f = g + h.

    Total order of entries:
      insertion: (f, seq)
      lowest_h:  (f, h, seq)
    seq is a per-list push counter, so equal keys pop first-in first-out.
    A node may be pushed again with a better cost; the caller drops stale entries.
    """

    def __init__(self, tie_break: TieBreak = "insertion"):
        if tie_break not in ("insertion", "lowest_h"):
            raise ValueError(f"Unknown tie_break {tie_break!r}")
        self.tie_break = tie_break
        self._q: list[tuple] = []
        self._seq = 0

    def __len__(self) -> int:
        return len(self._q)

    def __bool__(self) -> bool:
        return bool(self._q)

    def push(self, node_id: int, g: float, h: float) -> None:
        self._seq += 1
        f = g + h
        if self.tie_break == "lowest_h":
            entry = (f, h, self._seq, node_id, g)
        else:
            entry = (f, self._seq, node_id, g)
        heapq.heappush(self._q, entry)

    def peek(self) -> tuple[int, float]:
        if not self._q:
            raise EmptyOpenListError("peek at an empty open list")
        entry = self._q[0]
        return entry[-2], entry[-1]

    def pop(self) -> tuple[int, float]:
        """Remove the minimum entry and return (node_id, g it was pushed with)."""
        if not self._q:
            raise EmptyOpenListError("pop from an empty open list")
        entry = heapq.heappop(self._q)
        return entry[-2], entry[-1]
