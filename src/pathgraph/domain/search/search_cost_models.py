from collections.abc import Callable

from pathgraph.app.protocols import CostModel
from pathgraph.domain.entities.geography import Waypoint

CostFn = Callable[[Waypoint, Waypoint], float]


class SquaredEuclideanCost(CostModel):
    def distance(self, a, b):
        return a.position.distance_squared_to(b.position)

    def heuristic(self, a, b):
        return a.position.distance_squared_to(b.position)


class EuclideanCost(CostModel):
    def distance(self, a, b):
        return a.position.distance_to(b.position)

    def heuristic(self, a, b):
        return a.position.distance_to(b.position)


class ManhattanCost(CostModel):
    def distance(self, a, b):
        return a.position.manhattan_to(b.position)

    def heuristic(self, a, b):
        return a.position.manhattan_to(b.position)


class WeightScaledCost(CostModel):
    """Entering a point costs the base traversal cost times that point's weight_scale."""

    def __init__(self, base: CostModel):
        self.base = base

    def distance(self, a, b):
        return self.base.distance(a, b) * b.weight_scale

    def heuristic(self, a, b):
        return self.base.heuristic(a, b)


def _zero(a, b) -> float:
    return 0.0


class FunctionCost(CostModel):
    """Adapts a plain function pair. Without a heuristic the search degrades to Dijkstra."""

    def __init__(self, distance_fn: CostFn, heuristic_fn: CostFn | None = None):
        self.distance_fn, self.heuristic_fn = distance_fn, heuristic_fn or _zero

    def distance(self, a, b):
        return self.distance_fn(a, b)

    def heuristic(self, a, b):
        return self.heuristic_fn(a, b)


DEFAULT_COST_MODEL = SquaredEuclideanCost()
