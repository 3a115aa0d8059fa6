# io/search_logging.py
import json
import logging
import sys

from pathgraph.domain.search.search_hooks import NoopHooks


def _default_json_logger(name="pathgraph", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                # point ids may be tuples or Positions
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured logs for searches and graph edits.

    search_start/search_end go out at INFO, errors at ERROR. Per-expansion and
    per-mutation records are DEBUG only, and only when debug=True, sampled
    every `sample_every` events.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._searches = 0
        self._expanded = 0
        self._mutations = 0

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def search_start(self, *, from_id, to_id, points):
        self._searches += 1
        self._emit(
            "INFO",
            "search_start",
            search=self._searches,
            from_id=from_id,
            to_id=to_id,
            points=points,
        )

    def expand(self, point_id, *, g, f, qsize):
        self._expanded += 1
        if self.debug and (self._expanded % self.sample_every) == 0:
            self._emit("DEBUG", "expand", point_id=point_id, g=g, f=f, qsize=qsize)

    def search_end(self, *, found, **extra):
        self._emit("INFO", "search_end", search=self._searches, found=found, **extra)

    def mutation(self, op, **extra):
        self._mutations += 1
        if self.debug and (self._mutations % self.sample_every) == 0:
            self._emit("DEBUG", op, **extra)

    def error(self, op, *, exc: BaseException, **extra):
        msg = "search_error" if op == "search" else "graph_error"
        self._emit("ERROR", msg, op=op, error_type=type(exc).__name__, error=str(exc), **extra)
