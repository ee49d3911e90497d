# route_planner/policy/heuristics.py

from route_planner.app.protocols import Heuristic, RouteGraph
from route_planner.domain.entities.geography import Node


class EuclideanHeuristic(Heuristic):
    """Straight-line distance, same metric as the edge costs: admissible and consistent."""

    def estimate(self, graph: RouteGraph, node: Node, goal: Node) -> float:
        return graph.distance(node, goal)


class ZeroHeuristic(Heuristic):
    # A* with h == 0 expands like Dijkstra
    def estimate(self, graph: RouteGraph, node: Node, goal: Node) -> float:
        return 0.0
