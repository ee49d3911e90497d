from dataclasses import dataclass


# Core geometry types shared by the route model and the search engine
@dataclass(frozen=True)
class Node:
    id: int
    x: float  # map fraction, 0.0 .. 1.0
    y: float


@dataclass(frozen=True)
class Way:
    nodes: tuple[int, ...]
    kind: str = "road"  # "footway" ways are not routable by default


@dataclass(frozen=True)
class Segment:
    start: Node
    end: Node
    length: float  # normalized units, multiply by metric_scale for meters
