from collections.abc import Hashable
from dataclasses import dataclass
from numbers import Real


# Core geometry types used by the graph and the cost models
@dataclass(frozen=True, order=True)
class Position:
    x: float
    y: float
    z: float = 0.0

    def distance_squared_to(self, other: "Position") -> float:
        dx, dy, dz = other.x - self.x, other.y - self.y, other.z - self.z
        return dx * dx + dy * dy + dz * dz

    def distance_to(self, other: "Position") -> float:
        return self.distance_squared_to(other) ** 0.5

    def manhattan_to(self, other: "Position") -> float:
        return abs(other.x - self.x) + abs(other.y - self.y) + abs(other.z - self.z)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


Pt = Position | tuple[float, float] | tuple[float, float, float]


def is_coordinate(p) -> bool:
    if isinstance(p, Position):
        return True
    return (
        isinstance(p, tuple)
        and len(p) in (2, 3)
        and all(isinstance(c, Real) and not isinstance(c, bool) for c in p)
    )


def to_position(p: Pt) -> Position:
    """Coerce a Position or a 2/3-tuple of numbers; raise TypeError otherwise."""
    if isinstance(p, Position):
        return p
    if not is_coordinate(p):
        raise TypeError(f"not a coordinate: {p!r}")
    return Position(*(float(c) for c in p))


@dataclass(frozen=True)
class Waypoint:
    """Read-only view of a stored point, handed to cost models."""

    point_id: Hashable
    position: Position
    weight_scale: float = 1.0
