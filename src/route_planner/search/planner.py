# search/planner.py
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from route_planner.app.protocols import Heuristic, RouteGraph
from route_planner.domain.entities.geography import Node
from route_planner.policy.heuristics import EuclideanHeuristic
from route_planner.search.errors import (
    InvalidEndpointError,
    PathReconstructionError,
    SearchAlreadyRunError,
)
from route_planner.search.hooks import NoopHooks, SearchHooks
from route_planner.search.open_list import OpenList, TieBreak

Expansion = Literal["relaxed", "first_discovery"]


class SearchStatus(Enum):
    SEARCHING = "searching"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class NodeRecord:
    """Per-search annotations for one node, keyed by node id in the planner's side table."""

    g: float = 0.0
    h: float = 0.0
    parent: int | None = None  # node id, never a node reference
    visited: bool = False  # discovered
    closed: bool = False  # expanded


@dataclass
class RouteResult:
    status: SearchStatus
    start: Node
    goal: Node
    path: list[Node] = field(default_factory=list)
    distance_m: float = 0.0  # raw path length * metric_scale
    expanded: int = 0

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND


class RoutePlanner:
    """
    One A* search session over a shared route model.

    Endpoints are given in percent of the map extent and snapped to the closest
    nodes once, at construction. All g/h/parent/visited state is kept in
    `records`, so sessions never see each other's annotations. A session runs once.

    expansion:
      relaxed          re-open a discovered node when a strictly cheaper path
                       reaches it (optimal with a consistent heuristic)
      first_discovery  annotate a node only the first time it is discovered
    """

    def __init__(
        self,
        model: RouteGraph,
        start_x: float,
        start_y: float,
        end_x: float,
        end_y: float,
        *,
        heuristic: Heuristic | None = None,
        expansion: Expansion = "relaxed",
        tie_break: TieBreak = "insertion",
        hooks: SearchHooks | None = None,
    ):
        if expansion not in ("relaxed", "first_discovery"):
            raise ValueError(f"Unknown expansion {expansion!r}")

        # percent -> map fraction
        start_x *= 0.01
        start_y *= 0.01
        end_x *= 0.01
        end_y *= 0.01

        start = model.find_closest_node(start_x, start_y)
        end = model.find_closest_node(end_x, end_y)
        if start is None or end is None:
            raise InvalidEndpointError("route model has no nodes to snap the endpoints to")

        self.model = model
        self._start, self._end = start, end
        self.heuristic = heuristic or EuclideanHeuristic()
        self.expansion = expansion
        self.open_list = OpenList(tie_break)
        self.records: dict[int, NodeRecord] = {}
        self.status = SearchStatus.SEARCHING
        self.path: list[Node] = []
        self.distance = 0.0
        self.expanded = 0
        self._hooks = hooks or NoopHooks()
        self._ran = False

    @property
    def start_node(self) -> Node:
        return self._start

    @property
    def end_node(self) -> Node:
        return self._end

    def calculate_h_value(self, node: Node) -> float:
        return self.heuristic.estimate(self.model, node, self._end)

    def add_neighbors(self, current: Node) -> None:
        rec = self.records[current.id]
        neighbor_ids = self.model.find_neighbors(current.id)
        rec.visited = True
        rec.closed = True
        self.expanded += 1

        for nid in neighbor_ids:
            neighbor = self.model.node(nid)
            g = rec.g + self.model.distance(current, neighbor)
            nrec = self.records.get(nid)
            if nrec is None:
                nrec = self.records[nid] = NodeRecord(h=self.calculate_h_value(neighbor))
            if nrec.closed:
                continue
            # a discovered node keeps its parent unless relaxation finds a cheaper path
            if nrec.visited and (self.expansion == "first_discovery" or g >= nrec.g):
                continue
            nrec.parent = current.id
            nrec.g = g
            nrec.visited = True
            self.open_list.push(nid, nrec.g, nrec.h)

        self._hooks.expand(
            current, g=rec.g, h=rec.h, open_size=len(self.open_list), expanded=self.expanded
        )

    def _is_stale(self, node_id: int, g: float) -> bool:
        rec = self.records[node_id]
        return rec.closed or g > rec.g

    def _has_open(self) -> bool:
        # drop entries superseded by a cheaper push before testing for emptiness
        while self.open_list and self._is_stale(*self.open_list.peek()):
            self.open_list.pop()
        return bool(self.open_list)

    def next_node(self) -> Node:
        """Remove and return the open node with the lowest f. Raises EmptyOpenListError."""
        while True:
            nid, g = self.open_list.pop()
            if not self._is_stale(nid, g):
                return self.model.node(nid)

    def construct_final_path(self, current: Node) -> list[Node]:
        distance = 0.0
        path = [current]
        # a valid chain never holds more nodes than were annotated
        limit = len(self.records)

        while current.id != self._start.id:
            rec = self.records.get(current.id)
            if rec is None or rec.parent is None:
                self._hooks.error(reason="broken_parent_chain", node_id=current.id)
                raise PathReconstructionError(
                    f"node {current.id} has no parent before reaching start {self._start.id}"
                )
            if len(path) > limit:
                self._hooks.error(reason="cyclic_parent_chain", node_id=current.id)
                raise PathReconstructionError(
                    f"parent chain from {path[0].id} does not reach start {self._start.id}"
                )
            parent = self.model.node(rec.parent)
            distance += self.model.distance(current, parent)
            path.append(parent)
            current = parent

        path.reverse()
        self.distance = distance * self.model.metric_scale
        return path

    def a_star_search(self) -> RouteResult:
        if self._ran:
            raise SearchAlreadyRunError("a RoutePlanner session can only search once")
        self._ran = True

        t0 = time.perf_counter()
        self._hooks.search_start(start=self._start, goal=self._end)

        self.records[self._start.id] = NodeRecord(
            g=0.0, h=self.calculate_h_value(self._start), visited=True
        )
        self.open_list.push(self._start.id, 0.0, self.records[self._start.id].h)

        while self._has_open():
            current = self.next_node()
            if current.id == self._end.id:
                self.path = self.construct_final_path(current)
                self.status = SearchStatus.FOUND
                break
            self.add_neighbors(current)
        else:
            self.status = SearchStatus.EXHAUSTED
            self.distance = 0.0

        self._hooks.search_end(
            status=self.status.value,
            expanded=self.expanded,
            path_nodes=len(self.path),
            distance_m=self.distance,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return RouteResult(
            status=self.status,
            start=self._start,
            goal=self._end,
            path=self.path,
            distance_m=self.distance,
            expanded=self.expanded,
        )
