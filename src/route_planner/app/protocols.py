from typing import Protocol, runtime_checkable

from route_planner.domain.entities.geography import Node


# ------------- Map model --------------------
@runtime_checkable
class RouteGraph(Protocol):
    """
    What the search engine needs from a map model.
    Coordinates are map fractions; metric_scale converts distances to meters.
    """

    metric_scale: float

    def find_closest_node(self, x: float, y: float) -> Node | None: ...
    def find_neighbors(self, node_id: int) -> tuple[int, ...]:
        """Adjacent node ids. Must be safe to call more than once per node."""

    def node(self, node_id: int) -> Node: ...
    def distance(self, a: Node, b: Node) -> float: ...


# ------------- Search policies --------------------
@runtime_checkable
class Heuristic(Protocol):
    """Estimate of the remaining cost from node to goal. Must not overestimate."""

    def estimate(self, graph: RouteGraph, node: Node, goal: Node) -> float: ...
