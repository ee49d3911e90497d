# tests/conftest.py
import pytest

from route_planner.domain.entities.geography import Node, Way
from route_planner.domain.route_model import RouteModel


def make_grid(n: int, spacing: float = 1.0, metric_scale: float = 1.0) -> RouteModel:
    """n x n grid, node id = row * n + col, one way per row and per column."""
    nodes = [Node(r * n + c, c * spacing, r * spacing) for r in range(n) for c in range(n)]
    ways = [Way(tuple(r * n + c for c in range(n))) for r in range(n)]
    ways += [Way(tuple(r * n + c for r in range(n))) for c in range(n)]
    return RouteModel(nodes, ways, metric_scale)


@pytest.fixture
def grid3() -> RouteModel:
    # spans 0..2 map units; percent coordinates reach the far corner at 200
    return make_grid(3, spacing=1.0, metric_scale=10.0)


@pytest.fixture
def detour_model() -> RouteModel:
    # S(0) -> A(1) -> Y(4) is short to enter but long overall;
    # S(0) -> B(2) -> C(3) -> Y(4) is the shortest route.
    nodes = [
        Node(0, 0.0, 0.0),
        Node(1, 0.0, 0.15),
        Node(2, 0.1, 0.0),
        Node(3, 0.3, 0.0),
        Node(4, 0.4, 0.0),
    ]
    ways = [Way((0, 1, 4)), Way((0, 2, 3, 4))]
    return RouteModel(nodes, ways, metric_scale=100.0)


@pytest.fixture
def two_islands() -> RouteModel:
    # two road segments that never touch
    nodes = [Node(0, 0.0, 0.0), Node(1, 0.2, 0.0), Node(2, 0.8, 1.0), Node(3, 1.0, 1.0)]
    return RouteModel(nodes, [Way((0, 1)), Way((2, 3))], metric_scale=500.0)


@pytest.fixture
def grid_factory():
    return make_grid
