# runtime/registries.py
from collections.abc import Callable

from pathgraph.app.protocols import CostModel
from pathgraph.config.models import (
    CostModelEuclideanModel,
    CostModelFunctionModel,
    CostModelManhattanModel,
    CostModelSquaredEuclideanModel,
    CostModelUnion,
)
from pathgraph.domain.errors import UnknownCostFunction, UnknownCostModel
from pathgraph.domain.search.search_cost_models import (
    CostFn,
    EuclideanCost,
    FunctionCost,
    ManhattanCost,
    SquaredEuclideanCost,
    WeightScaledCost,
)

CostModelFactory = Callable[[CostModelUnion, dict], CostModel]

_cost_model_registry: dict[str, CostModelFactory] = {}
_cost_fn_registry: dict[str, CostFn] = {}


# ------------------- Cost model registries ---------------------------


def register_cost_model(kind: str):
    def deco(fn: CostModelFactory):
        _cost_model_registry[kind] = fn
        return fn

    return deco


def register_cost_fn(name: str):
    def deco(fn: CostFn):
        _cost_fn_registry[name] = fn
        return fn

    return deco


def resolve_cost_fn(name: str, *, deps: dict) -> CostFn:
    """
    deps can include:
      - 'cost_fns': dict[str, CostFn]  # per-build functions, shadow the global registry
    """
    fns = {**_cost_fn_registry, **deps.get("cost_fns", {})}
    try:
        return fns[name]
    except KeyError:
        raise UnknownCostFunction(name) from None


def make_cost_model(cfg: CostModelUnion, *, deps: dict | None = None) -> CostModel:
    try:
        factory = _cost_model_registry[cfg.kind]
    except KeyError:
        raise UnknownCostModel(cfg.kind) from None
    cm = factory(cfg, deps or {})
    return WeightScaledCost(cm) if cfg.weighted else cm


@register_cost_model("squared_euclidean")
def _make_squared_euclidean(cfg: CostModelSquaredEuclideanModel, deps):
    return SquaredEuclideanCost()


@register_cost_model("euclidean")
def _make_euclidean(cfg: CostModelEuclideanModel, deps):
    return EuclideanCost()


@register_cost_model("manhattan")
def _make_manhattan(cfg: CostModelManhattanModel, deps):
    return ManhattanCost()


@register_cost_model("function")
def _make_function(cfg: CostModelFunctionModel, deps):
    distance = resolve_cost_fn(cfg.distance, deps=deps)
    heuristic = resolve_cost_fn(cfg.heuristic, deps=deps) if cfg.heuristic else None
    return FunctionCost(distance, heuristic)
