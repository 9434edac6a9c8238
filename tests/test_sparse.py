import logging
import random

import pytest

from bspgraph.bsp import bsp_serial
from bspgraph.dense import BfsPushDense, CcPushDense
from bspgraph.graph import build_graph
from bspgraph.pull import SsspPull
from bspgraph.sparse import BfsPushSparse, CcPushSparse, SsspPushSparse


def _make_graph(seed, n=30, m=60):
    r = random.Random(seed)
    edge_list = []
    for _ in range(m):
        edge_list.append((r.randrange(n), r.randrange(n), r.randint(1, 20)))
    return build_graph(edge_list)


def _values(algo, g, reader="distance"):
    return [getattr(algo, reader)(v) for v in range(g.num_vertices)]


def _ran(algo, g):
    algo.run(g)
    return algo


_AGAINST_BSP = [
    pytest.param(
        lambda n, t: BfsPushSparse(n, 0, t), lambda n: BfsPushDense(n, 0, 1), "distance", 30, 60, id="bfs"
    ),
    pytest.param(
        lambda n, t: SsspPushSparse(n, 0, t), lambda n: SsspPull(n, 0, 1), "distance", 30, 60, id="sssp"
    ),
    pytest.param(
        lambda n, t: CcPushSparse(n, t), lambda n: CcPushDense(n, 1), "component", 40, 30, id="cc"
    ),
]


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("nthreads", [1, 3, 4])
@pytest.mark.parametrize("make, make_ref, reader, n, m", _AGAINST_BSP)
def test_matches_bsp_reference(make, make_ref, reader, n, m, seed, nthreads):
    g = _make_graph(seed, n, m)
    ref = make_ref(g.num_vertices)
    bsp_serial(g, ref)
    algo = _ran(make(g.num_vertices, nthreads), g)
    assert _values(algo, g, reader) == _values(ref, g, reader)


@pytest.mark.parametrize("seed", range(5))
def test_bfs_edge_invariant(seed):
    g = _make_graph(seed, n=40, m=90)
    dist = _values(_ran(BfsPushSparse(g.num_vertices, 0, 4), g), g)
    for u in range(g.num_vertices):
        if dist[u] == -1:
            continue
        for v, _ in g.out_neighbors(u):
            assert 0 <= dist[v] <= dist[u] + 1


def test_bfs_from_nonzero_source_matches_dense():
    g = _make_graph(11)
    src = g.num_vertices - 1
    ref = BfsPushDense(g.num_vertices, src, 1)
    bsp_serial(g, ref)
    dist = _values(_ran(BfsPushSparse(g.num_vertices, src, 2), g), g)
    assert dist[src] == 0
    assert dist == _values(ref, g)


def test_bfs_unreachable_vertices_report_minus_one():
    g = build_graph([(0, 1, 1), (2, 3, 1)])
    assert _values(_ran(BfsPushSparse(g.num_vertices, 0, 2), g), g) == [0, 1, -1, -1]


def test_sssp_prefers_lighter_longer_path():
    g = build_graph([(0, 1, 10), (0, 2, 1), (2, 1, 2)])
    assert _ran(SsspPushSparse(g.num_vertices, 0, 2), g).distance(1) == 3


def test_sssp_triangle_inequality_holds():
    g = _make_graph(21, n=25, m=80)
    dist = _values(_ran(SsspPushSparse(g.num_vertices, 0, 3), g), g)
    for u in range(g.num_vertices):
        if dist[u] == -1:
            continue
        for v, w in g.out_neighbors(u):
            assert 0 <= dist[v] <= dist[u] + w


def test_cc_label_is_smallest_member_ignoring_direction():
    g = build_graph([(3, 1, 1), (1, 2, 1), (0, 4, 1)])
    comp = _values(_ran(CcPushSparse(g.num_vertices, 2), g), g, "component")
    assert comp == [0, 1, 1, 1, 0]


@pytest.mark.parametrize(
    "factory",
    [lambda: BfsPushSparse(3, 0, 0), lambda: SsspPushSparse(3, 0, 0), lambda: CcPushSparse(3, 0)],
)
def test_zero_threads_rejected(factory):
    with pytest.raises(ValueError):
        factory()


def test_rounds_are_logged(caplog):
    caplog.set_level(logging.INFO, logger="bspgraph.sparse")
    g = build_graph([(0, 1, 1)])
    BfsPushSparse(g.num_vertices, 0, 1).run(g)
    assert "BFS sparse round 0 |F|=1" in caplog.text
    assert "BFS sparse round 1 |F|=1" in caplog.text