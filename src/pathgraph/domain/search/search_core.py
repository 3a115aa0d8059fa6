# domain/search/search_core.py
import heapq
import math
import time
from collections.abc import Hashable
from dataclasses import dataclass

from pathgraph.app.protocols import CostModel, GraphView
from pathgraph.domain.errors import (
    IdenticalEndpoints,
    PathGraphError,
    PointNotFound,
    SearchBudgetExceeded,
)
from pathgraph.domain.search.search_cost_models import DEFAULT_COST_MODEL
from pathgraph.domain.search.search_hooks import NoopHooks, SearchHooks


@dataclass(frozen=True)
class SearchResult:
    path: list[Hashable]
    cost: float  # accumulated g-score of path[-1]; inf when unreachable
    expanded: int  # points settled before the search stopped

    @property
    def found(self) -> bool:
        return bool(self.path)


class PathFinder:
    """
    A* over a GraphView, ordered by f = g + heuristic.

    The frontier is a binary heap of (f, point_id) entries. An improved score
    pushes a fresh entry; superseded entries are skipped when popped. Equal f
    scores pop the lowest point id first, so results are reproducible.

    Settled points are never reopened: with a heuristic that overestimates, the
    returned path may not be the cheapest one.
    """

    def __init__(
        self,
        cost_model: CostModel | None = None,
        *,
        max_expansions: int | None = None,
        hooks: SearchHooks | None = None,
    ):
        if max_expansions is not None and max_expansions < 1:
            raise ValueError(f"max_expansions must be >= 1, got {max_expansions}")
        self.cost_model = cost_model or DEFAULT_COST_MODEL
        self.max_expansions = max_expansions
        self._hooks = hooks or NoopHooks()

    def find_path(self, graph: GraphView, from_id, to_id, *, cost_model=None) -> list[Hashable]:
        return self.search(graph, from_id, to_id, cost_model=cost_model).path

    def search(self, graph: GraphView, from_id, to_id, *, cost_model=None) -> SearchResult:
        try:
            for pid in (from_id, to_id):
                if not graph.has_point(pid):
                    raise PointNotFound(pid)
            if from_id == to_id:
                raise IdenticalEndpoints(from_id)
            return self._run(graph, from_id, to_id, cost_model or self.cost_model)
        except PathGraphError as exc:
            self._hooks.error("search", exc=exc, from_id=from_id, to_id=to_id)
            raise

    def _run(self, graph: GraphView, from_id, to_id, cm: CostModel) -> SearchResult:
        t0 = time.perf_counter()
        self._hooks.search_start(from_id=from_id, to_id=to_id, points=len(graph))

        target = graph.waypoint(to_id)
        g: dict[Hashable, float] = {from_id: 0.0}
        f: dict[Hashable, float] = {from_id: cm.heuristic(graph.waypoint(from_id), target)}
        came_from: dict[Hashable, Hashable] = {}
        closed: set[Hashable] = set()
        heap: list[tuple[float, Hashable]] = [(f[from_id], from_id)]
        path: list[Hashable] = []
        cost = math.inf
        found = False

        # search_end fires even when the budget or a cost model aborts the loop
        try:
            while heap:
                f_cur, cur = heapq.heappop(heap)
                if cur in closed or f_cur > f[cur]:
                    continue  # stale entry
                if cur == to_id:
                    found = True
                    break
                if self.max_expansions is not None and len(closed) >= self.max_expansions:
                    raise SearchBudgetExceeded(from_id, to_id, self.max_expansions)

                closed.add(cur)
                self._hooks.expand(cur, g=g[cur], f=f_cur, qsize=len(heap))

                cur_wp = graph.waypoint(cur)
                for nb in graph.neighbours(cur):
                    if nb in closed:
                        continue
                    nb_wp = graph.waypoint(nb)
                    tentative = g[cur] + cm.distance(cur_wp, nb_wp)
                    if tentative >= g.get(nb, math.inf):
                        continue
                    came_from[nb] = cur
                    g[nb] = tentative
                    f[nb] = tentative + cm.heuristic(nb_wp, target)
                    heapq.heappush(heap, (f[nb], nb))

            if found:
                path = self._reconstruct(came_from, from_id, to_id)
                cost = g[to_id]
        finally:
            self._hooks.search_end(
                from_id=from_id,
                to_id=to_id,
                found=bool(path),
                expanded=len(closed),
                cost=cost,
                path_len=len(path),
                wall_ms=(time.perf_counter() - t0) * 1000,
            )
        return SearchResult(path, cost, len(closed))

    @staticmethod
    def _reconstruct(came_from, from_id, to_id) -> list[Hashable]:
        path = [to_id]
        while path[-1] != from_id:
            path.append(came_from[path[-1]])
        path.reverse()
        return path
