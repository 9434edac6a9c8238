"""Pull-style connected components and shortest paths."""

from __future__ import annotations

from .dense import _UNREACHED, _Rounds, _all_neighbors, _reported
from .graph import CsrGraph


class CcPull(_Rounds):
    """Weakly connected components: each vertex pulls the smallest neighbour label."""

    def __init__(self, n: int, nthreads: int) -> None:
        super().__init__(list(range(n)), nthreads)

    def has_work(self) -> bool:
        return self._work

    def process(self, tid: int, v: int, graph: CsrGraph) -> None:
        prev = self._prev
        self._improve(tid, v, min(prev[u] for u in (v, *_all_neighbors(graph, v))))

    def post_round(self) -> None:
        self._advance()

    def component(self, v: int) -> int:
        return self._live[v]


class SsspPull(_Rounds):
    """Shortest path lengths from ``src``, each vertex pulling from its in-edges."""

    def __init__(self, n: int, src: int, nthreads: int) -> None:
        dist: list[float] = [_UNREACHED] * n
        dist[src] = 0
        super().__init__(dist, nthreads)

    def has_work(self) -> bool:
        return self._work

    def process(self, tid: int, v: int, graph: CsrGraph) -> None:
        prev = self._prev
        best = min(
            (prev[u] + w for u, w in graph.in_neighbors(v) if prev[u] != _UNREACHED),
            default=_UNREACHED,
        )
        self._improve(tid, v, best)

    def post_round(self) -> None:
        self._advance()

    def distance(self, v: int) -> int:
        return _reported(self._live[v])