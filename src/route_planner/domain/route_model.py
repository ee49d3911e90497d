# route_planner/domain/route_model.py
import math
from collections.abc import Iterable, Iterator, Sequence

import numpy as np

from route_planner.domain.entities.geography import Node, Segment, Way
from route_planner.search.errors import MapDataError


class RouteModel:
    """
    Road graph in normalized map coordinates (0.0 .. 1.0 on both axes).

    Nodes are immutable values; adjacency comes from the routable ways and is
    discovered lazily per node, then cached, so find_neighbors is idempotent.
    No search state lives here: any number of planners may share one model.
    """

    def __init__(
        self,
        nodes: Iterable[Node],
        ways: Iterable[Way] = (),
        metric_scale: float = 1.0,
        *,
        excluded_kinds: Iterable[str] = ("footway",),
    ):
        if not (math.isfinite(metric_scale) and metric_scale > 0):
            raise MapDataError(f"metric_scale must be a positive number, got {metric_scale!r}")
        self.metric_scale = float(metric_scale)
        self.excluded_kinds = frozenset(excluded_kinds)

        self._nodes: dict[int, Node] = {}
        for n in nodes:
            if n.id in self._nodes:
                raise MapDataError(f"duplicate node id {n.id}")
            self._nodes[n.id] = n

        self.ways: list[Way] = list(ways)
        for w in self.ways:
            missing = [nid for nid in w.nodes if nid not in self._nodes]
            if missing:
                raise MapDataError(f"way references unknown node ids {missing}")

        # node id -> routable ways passing through it
        self._node_ways: dict[int, list[Way]] = {}
        for w in self.ways:
            if w.kind in self.excluded_kinds:
                continue
            for nid in dict.fromkeys(w.nodes):
                self._node_ways.setdefault(nid, []).append(w)

        self._neighbors: dict[int, tuple[int, ...]] = {}

        # Endpoints snap to road nodes; isolated nodes only count when there are no roads
        ids = [nid for nid in self._nodes if nid in self._node_ways] or list(self._nodes)
        self._snap_ids = np.asarray(ids, dtype=np.int64)
        self._snap_xy = np.asarray(
            [(self._nodes[i].x, self._nodes[i].y) for i in ids], dtype=float
        ).reshape(-1, 2)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: int) -> bool:
        return node_id in self._nodes

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes.values())

    def node(self, node_id: int) -> Node:
        return self._nodes[node_id]

    def find_closest_node(self, x: float, y: float) -> Node | None:
        if self._snap_ids.size == 0:
            return None
        d2 = np.sum((self._snap_xy - np.array([x, y])) ** 2, axis=1)
        # argmin returns the first minimum: ties go to the earliest node
        return self._nodes[int(self._snap_ids[int(np.argmin(d2))])]

    def find_neighbors(self, node_id: int) -> tuple[int, ...]:
        cached = self._neighbors.get(node_id)
        if cached is not None:
            return cached
        if node_id not in self._nodes:
            raise KeyError(node_id)

        found: dict[int, None] = {}
        for w in self._node_ways.get(node_id, ()):
            seq = w.nodes
            for k, nid in enumerate(seq):
                if nid != node_id:
                    continue
                if k > 0:
                    found[seq[k - 1]] = None
                if k + 1 < len(seq):
                    found[seq[k + 1]] = None
        found.pop(node_id, None)

        neighbors = tuple(found)
        self._neighbors[node_id] = neighbors
        return neighbors

    def distance(self, a: Node, b: Node) -> float:
        return math.hypot(b.x - a.x, b.y - a.y)

    def iter_edges(self, path: Sequence[Node]) -> Iterator[Segment]:
        for u, v in zip(path, path[1:]):
            yield Segment(u, v, self.distance(u, v))
