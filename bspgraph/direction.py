"""Breadth-first search that switches between push and pull rounds."""

from __future__ import annotations

import functools
from collections.abc import Sequence
from concurrent.futures import Executor

from .dense import _Slots, _check_threads, _in_sources
from .graph import CsrGraph
from .sparse import _expand, _push_levels, _run_rounds


class BfsDirectionOptimizing:
    """Hop distances from ``src``; a round pulls when the frontier exceeds a quarter of the vertices."""

    def __init__(self, n: int, src: int, nthreads: int) -> None:
        _check_threads(nthreads)
        self._n = n
        self._nthreads = nthreads
        self._src = src
        dist = [-1] * n
        dist[src] = 0
        self._prev = list(dist)
        self._dist = _Slots(dist)

    def run(self, graph: CsrGraph) -> None:
        """Search until the frontier is empty, choosing push or pull each round."""
        push = functools.partial(_push_levels, graph, self._dist)

        def pull(vertices: Sequence[int]) -> list[int]:
            found: list[int] = []
            for v in vertices:
                if self._dist[v] != -1:
                    continue
                for u in _in_sources(graph, v):
                    if self._prev[u] != -1 and self._dist.claim(v, self._prev[u] + 1):
                        found.append(v)
                        break
            return found

        def advance(pool: Executor, frontier: list[int]) -> list[int]:
            if len(frontier) > self._n // 4:
                found = _expand(pool, range(self._n), self._nthreads, pull)
            else:
                found = _expand(pool, frontier, self._nthreads, push)
            for v in found:
                self._prev[v] = self._dist[v]
            return found

        _run_rounds(self._nthreads, [self._src], advance)

    def distance(self, v: int) -> int:
        return self._dist[v]