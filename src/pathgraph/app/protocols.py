from collections.abc import Hashable, Iterable
from typing import Protocol, runtime_checkable

from pathgraph.domain.entities.geography import Position, Waypoint


# ------------- Search --------------------
@runtime_checkable
class CostModel(Protocol):
    """
    Responsibilities:
      • Traversal cost between two adjacent points (accumulated as g-score).
      • Estimate of the remaining cost from a point to the target (orders the frontier).
    Both must return a non-negative real and must not mutate the graph.
    """

    def distance(self, a: Waypoint, b: Waypoint) -> float: ...
    def heuristic(self, a: Waypoint, b: Waypoint) -> float: ...


@runtime_checkable
class GraphView(Protocol):
    """Read-only surface the path finder needs; never mutated during a search."""

    def has_point(self, point_id: Hashable) -> bool: ...
    def waypoint(self, point_id: Hashable) -> Waypoint: ...
    def neighbours(self, point_id: Hashable) -> Iterable[Hashable]: ...
    def get_point_position(self, point_id: Hashable) -> Position: ...
    def __len__(self) -> int: ...
