# domain/search/search_hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def search_start(self, *, from_id, to_id, points): ...
    def expand(self, point_id, *, g, f, qsize): ...
    def search_end(self, *, from_id, to_id, found, expanded, cost, path_len, wall_ms): ...
    def mutation(self, op: str, **kw): ...
    def error(self, op: str, *, exc: BaseException, **kw): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def search_end(self, **_):
        pass

    def mutation(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
