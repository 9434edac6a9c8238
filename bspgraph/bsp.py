"""Bulk-synchronous rounds over every vertex of a graph."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor

from .graph import CsrGraph


class BspAlgorithm(ABC):
    """A vertex program run in rounds until it reports no more work."""

    @abstractmethod
    def has_work(self) -> bool:
        """Whether another round is needed."""

    @abstractmethod
    def process(self, tid: int, v: int, graph: CsrGraph) -> None:
        """Handle vertex ``v`` on worker ``tid`` during the current round."""

    @abstractmethod
    def post_round(self) -> None:
        """Finish a round once every vertex has been processed."""


def _chunks(n: int, nthreads: int) -> Iterator[tuple[int, range]]:
    """Split ``range(n)`` into at most ``nthreads`` contiguous, ceiling-sized chunks."""
    chunk = -(-n // nthreads)
    for tid in range(nthreads):
        start = tid * chunk
        if start >= n:
            break
        yield tid, range(start, min(start + chunk, n))


def bsp_serial(graph: CsrGraph, algo: BspAlgorithm) -> None:
    """Run ``algo`` to completion on a single worker with id 0."""
    while algo.has_work():
        for v in range(graph.num_vertices):
            algo.process(0, v, graph)
        algo.post_round()


def bsp_parallel(graph: CsrGraph, algo: BspAlgorithm, nthreads: int) -> None:
    """Run ``algo`` to completion, splitting each round across ``nthreads`` workers."""
    if nthreads < 1:
        raise ValueError(f"nthreads must be at least 1, got {nthreads}")

    def work(tid: int, vertices: range) -> None:
        for v in vertices:
            algo.process(tid, v, graph)

    with ThreadPoolExecutor(max_workers=nthreads) as pool:
        while algo.has_work():
            futures = [
                pool.submit(work, tid, vertices)
                for tid, vertices in _chunks(graph.num_vertices, nthreads)
            ]
            for future in futures:
                future.result()
            algo.post_round()