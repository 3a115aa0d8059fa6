# pathgraph/app/build.py
from collections.abc import Mapping

from pathgraph.app.astar import AStar
from pathgraph.config.models import AStarModel
from pathgraph.domain.graph import Graph
from pathgraph.domain.search.search_factory import build_path_finder
from pathgraph.domain.search.search_hooks import NoopHooks, SearchHooks
from pathgraph.io.search_logging import SearchLogging  # JSON logs


def build(
    cfg: AStarModel | Mapping | None = None,
    *,
    use_logging: bool = True,
    hooks: SearchHooks | None = None,
    deps: dict | None = None,
) -> AStar:
    # 0) Validate config
    if cfg is None:
        model = AStarModel()
    else:
        model = cfg if isinstance(cfg, AStarModel) else AStarModel.model_validate(cfg)

    # 1) Hooks; an explicit hooks object wins over the configured logger
    if hooks is None:
        hooks = (
            SearchLogging(
                run_id=model.run_id,
                level=model.log.level,
                debug=model.log.debug,
                sample_every=model.log.sample_every,
            )
            if use_logging
            else NoopHooks()
        )

    # 2) Graph & path finder share the hooks
    graph = Graph(hooks=hooks)
    finder = build_path_finder(model.search, hooks=hooks, deps=deps)

    return AStar(graph=graph, finder=finder)
