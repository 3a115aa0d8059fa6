# pathgraph/domain/graph.py
from collections.abc import Hashable
from contextlib import contextmanager

import numpy as np

from pathgraph.domain.entities.geography import Position, Pt, Waypoint, is_coordinate, to_position
from pathgraph.domain.errors import (
    DuplicatePoint,
    InvalidPosition,
    PathGraphError,
    SelfConnection,
)
from pathgraph.domain.point_store import PointStore
from pathgraph.domain.search.search_hooks import NoopHooks, SearchHooks


def _resolve_position(point_id, position: Pt | None) -> Position:
    if position is None:
        if not is_coordinate(point_id):
            raise InvalidPosition(point_id)
        return to_position(point_id)
    if not is_coordinate(position):
        raise InvalidPosition(point_id, position)
    return to_position(position)


class Graph:
    """
    Mutable set of points joined by directed edges.

    Point ids are any hashable, mutually orderable keys. When an id is itself a
    coordinate (a Position or a 2/3-tuple of numbers) it doubles as the point's
    position, so ``add_point((0, 0))`` works without an explicit position.

    Edge queries are symmetric on purpose: connect_points may create a one-way
    edge, but disconnect_points removes both directions and are_points_connected
    reports an edge in either direction.
    """

    def __init__(self, hooks: SearchHooks | None = None):
        self._store = PointStore()
        self._hooks = hooks or NoopHooks()

    @contextmanager
    def _mutating(self, op: str, **kw):
        try:
            yield
        except PathGraphError as exc:
            self._hooks.error(op, exc=exc, **kw)
            raise
        self._hooks.mutation(op, points=len(self._store), **kw)

    # --------------- points -----------------------------

    def add_point(self, point_id, weight_scale: float = 1.0, *, position: Pt | None = None) -> None:
        with self._mutating("add_point", point_id=point_id, weight_scale=weight_scale):
            if point_id in self._store:
                raise DuplicatePoint(point_id)
            pos = _resolve_position(point_id, position)
            self._store.add(point_id, pos, weight_scale)

    def remove_point(self, point_id) -> None:
        with self._mutating("remove_point", point_id=point_id):
            self._store.remove(point_id)

    def get_weight_scale(self, point_id) -> float:
        return self._store.weight_scale(point_id)

    def set_weight_scale(self, point_id, weight_scale: float) -> None:
        with self._mutating("set_weight_scale", point_id=point_id, weight_scale=weight_scale):
            self._store.set_weight_scale(point_id, weight_scale)

    def get_point_position(self, point_id) -> Position:
        return self._store.get(point_id).info.position

    def set_point_position(self, point_id, position: Pt) -> None:
        with self._mutating("set_point_position", point_id=point_id):
            self._store.get(point_id)
            self._store.set_position(point_id, _resolve_position(point_id, position))

    def has_point(self, point_id) -> bool:
        return point_id in self._store

    def get_points(self) -> list[Hashable]:
        return list(self._store)

    def clear(self) -> None:
        self._store.clear()
        self._hooks.mutation("clear", points=0)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, point_id) -> bool:
        return point_id in self._store

    # --------------- edges ------------------------------

    def connect_points(self, from_id, to_id, bidirectional: bool = True) -> None:
        with self._mutating(
            "connect_points", from_id=from_id, to_id=to_id, bidirectional=bidirectional
        ):
            self._store.get(from_id)
            self._store.get(to_id)
            if from_id == to_id:
                raise SelfConnection(from_id)
            self._store.link(from_id, to_id)
            if bidirectional:
                self._store.link(to_id, from_id)

    def disconnect_points(self, from_id, to_id) -> None:
        with self._mutating("disconnect_points", from_id=from_id, to_id=to_id):
            self._store.get(from_id)
            self._store.get(to_id)
            self._store.unlink(from_id, to_id)
            self._store.unlink(to_id, from_id)

    def are_points_connected(self, from_id, to_id) -> bool:
        self._store.get(from_id)
        self._store.get(to_id)
        return self._store.has_link(from_id, to_id) or self._store.has_link(to_id, from_id)

    def get_point_connections(self, point_id) -> list[Hashable]:
        """Outgoing neighbours, in the order they were connected."""
        return list(self._store.get(point_id).out)

    # --------------- read-only view for the path finder ---------

    def waypoint(self, point_id) -> Waypoint:
        return self._store.get(point_id).info

    def neighbours(self, point_id):
        return self._store.get(point_id).out.keys()

    # --------------- spatial queries -----------------------------

    def get_closest_point(self, position: Pt) -> Hashable | None:
        """Id of the point nearest to ``position``; lowest id wins a tie."""
        if not is_coordinate(position):
            raise InvalidPosition(None, position)
        if not self._store:
            return None
        ids = self.get_points()
        coords = np.array([self.get_point_position(i).as_tuple() for i in ids], dtype=float)
        d2 = ((coords - np.array(to_position(position).as_tuple())) ** 2).sum(axis=1)
        nearest = np.flatnonzero(d2 == d2.min())
        return min(ids[i] for i in nearest)
