# pathgraph/domain/errors.py


class PathGraphError(Exception):
    """Base class for every precondition failure raised by pathgraph."""


class DuplicatePoint(PathGraphError, ValueError):
    def __init__(self, point_id):
        self.point_id = point_id
        super().__init__(f"point {point_id!r} already exists")


class PointNotFound(PathGraphError, KeyError):
    def __init__(self, point_id):
        self.point_id = point_id
        super().__init__(point_id)

    def __str__(self) -> str:
        return f"point {self.point_id!r} not found"


class InvalidWeightScale(PathGraphError, ValueError):
    def __init__(self, weight_scale):
        self.weight_scale = weight_scale
        super().__init__(f"weight_scale must be a finite value > 0, got {weight_scale!r}")


class InvalidPosition(PathGraphError, ValueError):
    def __init__(self, point_id, position=None):
        self.point_id, self.position = point_id, position
        if position is None:
            msg = f"point {point_id!r} is not a coordinate and no position was given"
        else:
            msg = f"invalid position {position!r} for point {point_id!r}"
        super().__init__(msg)


class SelfConnection(PathGraphError, ValueError):
    def __init__(self, point_id):
        self.point_id = point_id
        super().__init__(f"cannot connect point {point_id!r} to itself")


class IdenticalEndpoints(PathGraphError, ValueError):
    def __init__(self, point_id):
        self.point_id = point_id
        super().__init__(f"path start and end are the same point {point_id!r}")


class SearchBudgetExceeded(PathGraphError, RuntimeError):
    def __init__(self, from_id, to_id, max_expansions: int):
        self.from_id, self.to_id, self.max_expansions = from_id, to_id, max_expansions
        super().__init__(
            f"search {from_id!r} -> {to_id!r} exceeded {max_expansions} expansions"
        )


class UnknownCostModel(PathGraphError, ValueError):
    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown cost model kind {kind!r}")


class UnknownCostFunction(PathGraphError, ValueError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No cost function registered as {name!r}")
