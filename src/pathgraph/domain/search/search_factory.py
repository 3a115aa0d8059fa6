# pathgraph/domain/search/search_factory.py

from pathgraph.config.models import SearchModel
from pathgraph.domain.search.search_core import PathFinder
from pathgraph.domain.search.search_hooks import SearchHooks
from pathgraph.runtime.registries import make_cost_model


def build_path_finder(
    cfg: SearchModel, *, hooks: SearchHooks | None = None, deps: dict | None = None
) -> PathFinder:
    cost_model = make_cost_model(cfg.cost_model, deps=deps)
    return PathFinder(cost_model, max_expansions=cfg.max_expansions, hooks=hooks)
