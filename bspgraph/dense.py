"""Push-style BFS, SSSP and connected components over a dense frontier."""

from __future__ import annotations

import math
import threading
from collections.abc import Iterable, MutableSequence, Sequence

from .bsp import BspAlgorithm
from .graph import CsrGraph

_UNREACHED = math.inf


def _check_threads(nthreads: int) -> None:
    if nthreads < 1:
        raise ValueError(f"nthreads must be at least 1, got {nthreads}")


def _out_targets(graph: CsrGraph, u: int) -> Sequence[int]:
    return graph.edges[graph.offsets[u] : graph.offsets[u + 1]]


def _in_sources(graph: CsrGraph, v: int) -> Sequence[int]:
    return graph.in_edges[graph.in_offsets[v] : graph.in_offsets[v + 1]]


def _all_neighbors(graph: CsrGraph, u: int) -> tuple[int, ...]:
    """Targets of out-edges followed by sources of in-edges of ``u``."""
    return (*_out_targets(graph, u), *_in_sources(graph, u))


def _reported(d: float) -> int:
    return -1 if d == _UNREACHED else int(d)


class _Slots:
    """Per-vertex values whose updates are serialised by a lock."""

    def __init__(self, values: list) -> None:
        self.values = values
        self._lock = threading.Lock()

    def __getitem__(self, v: int):
        return self.values[v]

    def claim(self, v: int, value: int) -> bool:
        """Fill an unset (-1) slot; report whether this call filled it."""
        with self._lock:
            if self.values[v] != -1:
                return False
            self.values[v] = value
            return True

    def lower(
        self, v: int, candidate: float, queued: MutableSequence[bool] | None = None
    ) -> bool:
        """Lower slot ``v`` to ``candidate``.

        Without ``queued`` report whether the value dropped; with it, report
        whether ``v`` was newly flagged in ``queued``.
        """
        with self._lock:
            if candidate >= self.values[v]:
                return False
            self.values[v] = candidate
            if queued is None:
                return True
            if queued[v]:
                return False
            queued[v] = True
            return True


class _Rounds(BspAlgorithm):
    """Rounds that continue while any worker improved a value."""

    def __init__(self, live: list, nthreads: int) -> None:
        _check_threads(nthreads)
        self._live = live
        self._prev = list(live)
        self._updated = [False] * nthreads
        self._work = True

    def _improve(self, tid: int, v: int, best: float) -> None:
        if best < self._live[v]:
            self._live[v] = best
            self._updated[tid] = True

    def _advance(self) -> None:
        """Close a round: decide whether to continue and snapshot the values."""
        self._work = any(self._updated)
        self._updated = [False] * len(self._updated)
        self._prev = list(self._live)


class _DenseFrontier(_Rounds):
    """Rounds that also track which vertices push in the next round."""

    def __init__(self, live: list, nthreads: int, frontier: Iterable[int]) -> None:
        super().__init__(live, nthreads)
        self._slots = _Slots(live)
        self._in_frontier = [False] * len(live)
        for v in frontier:
            self._in_frontier[v] = True
        self._in_next = [False] * len(live)

    def _mark(self, tid: int, v: int) -> None:
        self._in_next[v] = True
        self._updated[tid] = True

    def _advance(self) -> None:
        super()._advance()
        self._in_frontier = self._in_next
        self._in_next = [False] * len(self._in_frontier)


class BfsPushDense(_DenseFrontier):
    """Breadth-first hop distances from ``src``; unreached vertices report -1."""

    def __init__(self, n: int, src: int, nthreads: int) -> None:
        dist = [-1] * n
        dist[src] = 0
        super().__init__(dist, nthreads, (src,))

    def has_work(self) -> bool:
        return self._work

    def process(self, tid: int, u: int, graph: CsrGraph) -> None:
        if not self._in_frontier[u]:
            return
        candidate = self._prev[u] + 1
        for v in _out_targets(graph, u):
            if self._slots.claim(v, candidate):
                self._mark(tid, v)

    def post_round(self) -> None:
        self._advance()

    def distance(self, v: int) -> int:
        return self._live[v]


class SsspPushDense(_DenseFrontier):
    """Bellman-Ford style shortest path lengths from ``src``; unreached is -1."""

    def __init__(self, n: int, src: int, nthreads: int) -> None:
        dist: list[float] = [_UNREACHED] * n
        dist[src] = 0
        super().__init__(dist, nthreads, (src,))

    def has_work(self) -> bool:
        return self._work

    def process(self, tid: int, u: int, graph: CsrGraph) -> None:
        if not self._in_frontier[u]:
            return
        base = self._prev[u]
        for v, w in graph.out_neighbors(u):
            if self._slots.lower(v, base + w):
                self._mark(tid, v)

    def post_round(self) -> None:
        self._advance()

    def distance(self, v: int) -> int:
        return _reported(self._live[v])


class CcPushDense(_DenseFrontier):
    """Weakly connected components labelled by their smallest vertex id."""

    def __init__(self, n: int, nthreads: int) -> None:
        super().__init__(list(range(n)), nthreads, range(n))

    def has_work(self) -> bool:
        return self._work

    def process(self, tid: int, u: int, graph: CsrGraph) -> None:
        if not self._in_frontier[u]:
            return
        candidate = self._prev[u]
        for v in _all_neighbors(graph, u):
            if self._slots.lower(v, candidate):
                self._mark(tid, v)

    def post_round(self) -> None:
        self._advance()

    def component(self, v: int) -> int:
        return self._live[v]