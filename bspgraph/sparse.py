"""Push-style BFS, SSSP and connected components over a sparse frontier list."""

from __future__ import annotations

import functools
import itertools
import logging
from collections.abc import Callable, MutableSequence, Sequence
from concurrent.futures import Executor, ThreadPoolExecutor

from .dense import _UNREACHED, _Slots, _all_neighbors, _check_threads, _out_targets, _reported
from .graph import CsrGraph

logger = logging.getLogger(__name__)

_Step = Callable[[Sequence[int]], list[int]]
_Advance = Callable[[Executor, list[int]], list[int]]


def _expand(pool: Executor, items: Sequence[int], nthreads: int, step: _Step) -> list[int]:
    """Run ``step`` on contiguous chunks of ``items`` and join the results in chunk order."""
    if not items:
        return []
    chunk = -(-len(items) // nthreads)
    futures = [pool.submit(step, items[start : start + chunk]) for start in range(0, len(items), chunk)]
    return [v for future in futures for v in future.result()]


def _run_rounds(
    nthreads: int, frontier: list[int], advance: _Advance, label: str | None = None
) -> None:
    """Replace the frontier with ``advance(pool, frontier)`` until it is empty."""
    with ThreadPoolExecutor(max_workers=nthreads) as pool:
        for round_no in itertools.count():
            if not frontier:
                return
            if label:
                logger.info("%s sparse round %d |F|=%d", label, round_no, len(frontier))
            frontier = advance(pool, frontier)


def _chunked(
    nthreads: int, step: _Step, queued: MutableSequence[bool] | None = None
) -> _Advance:
    """Advance by running ``step`` over frontier chunks, then clear the queued flags."""

    def advance(pool: Executor, frontier: list[int]) -> list[int]:
        found = _expand(pool, frontier, nthreads, step)
        if queued is not None:
            for v in found:
                queued[v] = False
        return found

    return advance


def _push_levels(graph: CsrGraph, dist: _Slots, frontier: Sequence[int]) -> list[int]:
    """Claim unvisited out-neighbours of ``frontier`` one hop further away."""
    found: list[int] = []
    for u in frontier:
        candidate = dist[u] + 1
        for v in _out_targets(graph, u):
            if dist.claim(v, candidate):
                found.append(v)
    return found


class BfsPushSparse:
    """Breadth-first hop distances from ``src`` driven by an explicit frontier list."""

    def __init__(self, n: int, src: int, nthreads: int) -> None:
        _check_threads(nthreads)
        self._nthreads = nthreads
        self._src = src
        dist = [-1] * n
        dist[src] = 0
        self._dist = _Slots(dist)

    def run(self, graph: CsrGraph) -> None:
        """Expand the frontier level by level until it is empty."""
        step = functools.partial(_push_levels, graph, self._dist)
        _run_rounds(self._nthreads, [self._src], _chunked(self._nthreads, step), "BFS")

    def distance(self, v: int) -> int:
        return self._dist[v]


class SsspPushSparse:
    """Shortest path lengths from ``src``; vertices re-enter the frontier when lowered."""

    def __init__(self, n: int, src: int, nthreads: int) -> None:
        _check_threads(nthreads)
        self._nthreads = nthreads
        self._src = src
        dist: list[float] = [_UNREACHED] * n
        dist[src] = 0
        self._dist = _Slots(dist)
        self._in_next = [False] * n

    def run(self, graph: CsrGraph) -> None:
        """Relax edges out of the frontier until no distance improves."""

        def step(frontier: Sequence[int]) -> list[int]:
            found: list[int] = []
            for u in frontier:
                du = self._dist[u]
                if du == _UNREACHED:
                    continue
                for v, w in graph.out_neighbors(u):
                    if self._dist.lower(v, du + w, self._in_next):
                        found.append(v)
            return found

        advance = _chunked(self._nthreads, step, self._in_next)
        _run_rounds(self._nthreads, [self._src], advance, "SSSP")

    def distance(self, v: int) -> int:
        return _reported(self._dist[v])


class CcPushSparse:
    """Weakly connected components labelled by their smallest vertex id."""

    def __init__(self, n: int, nthreads: int) -> None:
        _check_threads(nthreads)
        self._nthreads = nthreads
        self._comp = _Slots(list(range(n)))
        self._in_next = [False] * n

    def run(self, graph: CsrGraph) -> None:
        """Push labels along edges in both directions until none changes."""

        def step(frontier: Sequence[int]) -> list[int]:
            found: list[int] = []
            for u in frontier:
                cu = self._comp[u]
                for v in _all_neighbors(graph, u):
                    if self._comp.lower(v, cu, self._in_next):
                        found.append(v)
            return found

        advance = _chunked(self._nthreads, step, self._in_next)
        _run_rounds(self._nthreads, list(range(graph.num_vertices)), advance, "CC")

    def component(self, v: int) -> int:
        return self._comp[v]