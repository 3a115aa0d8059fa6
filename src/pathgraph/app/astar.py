# pathgraph/app/astar.py
from collections.abc import Hashable

from pathgraph.app.protocols import CostModel
from pathgraph.domain.entities.geography import Position, Pt
from pathgraph.domain.graph import Graph
from pathgraph.domain.search.search_core import PathFinder, SearchResult


class AStar:
    """
    Editable point graph plus the path finder that searches it.

    Edits and queries can be interleaved freely; every find_path call starts
    from a fresh search state. Not thread-safe: serialize mutations against
    in-flight searches.
    """

    def __init__(self, graph: Graph | None = None, finder: PathFinder | None = None):
        self.graph = graph if graph is not None else Graph()
        self.finder = finder if finder is not None else PathFinder()

    @property
    def cost_model(self) -> CostModel:
        return self.finder.cost_model

    # --------------- graph editing -----------------------

    def add_point(self, point_id, weight_scale: float = 1.0, *, position: Pt | None = None):
        self.graph.add_point(point_id, weight_scale, position=position)

    def remove_point(self, point_id) -> None:
        self.graph.remove_point(point_id)

    def get_weight_scale(self, point_id) -> float:
        return self.graph.get_weight_scale(point_id)

    def set_weight_scale(self, point_id, weight_scale: float) -> None:
        self.graph.set_weight_scale(point_id, weight_scale)

    def get_point_position(self, point_id) -> Position:
        return self.graph.get_point_position(point_id)

    def set_point_position(self, point_id, position: Pt) -> None:
        self.graph.set_point_position(point_id, position)

    def connect_points(self, from_id, to_id, bidirectional: bool = True) -> None:
        self.graph.connect_points(from_id, to_id, bidirectional)

    def disconnect_points(self, from_id, to_id) -> None:
        self.graph.disconnect_points(from_id, to_id)

    def are_points_connected(self, from_id, to_id) -> bool:
        return self.graph.are_points_connected(from_id, to_id)

    def get_point_connections(self, point_id) -> list[Hashable]:
        return self.graph.get_point_connections(point_id)

    def has_point(self, point_id) -> bool:
        return self.graph.has_point(point_id)

    def get_points(self) -> list[Hashable]:
        return self.graph.get_points()

    def get_closest_point(self, position: Pt) -> Hashable | None:
        return self.graph.get_closest_point(position)

    def clear(self) -> None:
        self.graph.clear()

    def __len__(self) -> int:
        return len(self.graph)

    def __contains__(self, point_id) -> bool:
        return point_id in self.graph

    # --------------- search ------------------------------

    def search(self, from_id, to_id, *, cost_model: CostModel | None = None) -> SearchResult:
        return self.finder.search(self.graph, from_id, to_id, cost_model=cost_model)

    def find_path(self, from_id, to_id, *, cost_model: CostModel | None = None) -> list[Hashable]:
        """Point ids from start to end inclusive; [] if unreachable or from_id == to_id."""
        if from_id == to_id and self.graph.has_point(from_id):
            return []
        return self.search(from_id, to_id, cost_model=cost_model).path

    def find_point_path(
        self, from_id, to_id, *, cost_model: CostModel | None = None
    ) -> list[Position]:
        return [
            self.graph.get_point_position(pid)
            for pid in self.find_path(from_id, to_id, cost_model=cost_model)
        ]
