import threading
from itertools import groupby

import pytest

from bspgraph.bsp import BspAlgorithm, bsp_parallel, bsp_serial
from bspgraph.graph import build_graph


class _Recorder(BspAlgorithm):
    def __init__(self, rounds):
        self.remaining = rounds
        self.round = 0
        self.calls = []
        self._lock = threading.Lock()

    def has_work(self):
        return self.remaining > 0

    def process(self, tid, v, graph):
        with self._lock:
            self.calls.append((self.round, tid, v))

    def post_round(self):
        self.remaining -= 1
        self.round += 1


class _Failing(BspAlgorithm):
    def has_work(self):
        return True

    def process(self, tid, v, graph):
        if v == 2:
            raise KeyError("boom")

    def post_round(self):
        pass


def _graph(n):
    return build_graph([(i, i + 1, 1) for i in range(n - 1)])


def test_serial_visits_every_vertex_each_round_with_tid_zero():
    g = _graph(5)
    algo = _Recorder(3)
    bsp_serial(g, algo)
    assert algo.calls == [(r, 0, v) for r in range(3) for v in range(5)]
    assert not algo.has_work()


@pytest.mark.parametrize("nthreads", [1, 2, 3, 4, 9])
def test_parallel_visits_every_vertex_once_per_round(nthreads):
    g = _graph(7)
    algo = _Recorder(2)
    bsp_parallel(g, algo, nthreads)
    seen = sorted((r, v) for r, _, v in algo.calls)
    assert seen == [(r, v) for r in range(2) for v in range(7)]
    assert all(0 <= tid < nthreads for _, tid, _ in algo.calls)


@pytest.mark.parametrize("nthreads", [2, 3, 4])
def test_parallel_chunks_are_contiguous(nthreads):
    g = _graph(10)
    algo = _Recorder(1)
    bsp_parallel(g, algo, nthreads)
    by_vertex = sorted(algo.calls, key=lambda c: c[2])
    tids = [tid for _, tid, _ in by_vertex]
    assert tids == sorted(tids)
    groups = [tid for tid, _ in groupby(tids)]
    assert len(groups) == len(set(groups))


def test_no_rounds_when_no_work():
    g = _graph(4)
    algo = _Recorder(0)
    bsp_parallel(g, algo, 2)
    bsp_serial(g, algo)
    assert algo.calls == []


def test_parallel_rejects_zero_threads():
    with pytest.raises(ValueError):
        bsp_parallel(_graph(3), _Recorder(1), 0)


def test_parallel_propagates_worker_errors():
    with pytest.raises(KeyError):
        bsp_parallel(_graph(4), _Failing(), 2)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        BspAlgorithm()