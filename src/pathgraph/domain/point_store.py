# pathgraph/domain/point_store.py
import math
from collections.abc import Hashable, Iterator
from dataclasses import dataclass, field, replace
from numbers import Real

from pathgraph.domain.entities.geography import Position, Waypoint
from pathgraph.domain.errors import DuplicatePoint, InvalidWeightScale, PointNotFound


def check_weight_scale(v) -> float:
    if isinstance(v, bool) or not isinstance(v, Real) or not math.isfinite(v) or v <= 0:
        raise InvalidWeightScale(v)
    return float(v)


@dataclass
class PointRecord:
    info: Waypoint
    # dicts used as insertion-ordered sets
    out: dict[Hashable, None] = field(default_factory=dict)
    inc: dict[Hashable, None] = field(default_factory=dict)


class PointStore:
    """
    Owns point identity -> point data.

    Every edge a->b is recorded twice: b in a.out, and a in b.inc. The reverse
    index lets remove() scrub incoming edges in O(degree).
    """

    def __init__(self):
        self._points: dict[Hashable, PointRecord] = {}

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, point_id) -> bool:
        return point_id in self._points

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._points)

    def get(self, point_id) -> PointRecord:
        try:
            return self._points[point_id]
        except KeyError:
            raise PointNotFound(point_id) from None

    def add(self, point_id, position: Position, weight_scale: float = 1.0) -> PointRecord:
        if point_id in self._points:
            raise DuplicatePoint(point_id)
        scale = check_weight_scale(weight_scale)
        rec = PointRecord(Waypoint(point_id, position, scale))
        self._points[point_id] = rec
        return rec

    def remove(self, point_id) -> PointRecord:
        rec = self.get(point_id)
        for nb in rec.out:
            self._points[nb].inc.pop(point_id, None)
        for nb in rec.inc:
            self._points[nb].out.pop(point_id, None)
        del self._points[point_id]
        return rec

    def weight_scale(self, point_id) -> float:
        return self.get(point_id).info.weight_scale

    def set_weight_scale(self, point_id, weight_scale: float) -> None:
        rec = self.get(point_id)
        rec.info = replace(rec.info, weight_scale=check_weight_scale(weight_scale))

    def set_position(self, point_id, position: Position) -> None:
        rec = self.get(point_id)
        rec.info = replace(rec.info, position=position)

    # edges; callers validate ids first

    def link(self, a, b) -> None:
        self._points[a].out[b] = None
        self._points[b].inc[a] = None

    def unlink(self, a, b) -> None:
        self._points[a].out.pop(b, None)
        self._points[b].inc.pop(a, None)

    def has_link(self, a, b) -> bool:
        return b in self._points[a].out

    def clear(self) -> None:
        self._points.clear()
