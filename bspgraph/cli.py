"""Command that times every algorithm on two graphs and checks results against references."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Callable, Sequence
from os import PathLike
from pathlib import Path
from typing import Any

from .bsp import bsp_parallel
from .dense import BfsPushDense, CcPushDense, SsspPushDense
from .direction import BfsDirectionOptimizing
from .graph import CsrGraph, load_graph, load_graph_undirected
from .sparse import BfsPushSparse, CcPushSparse, SsspPushSparse

_MAX_REPORTED_MISMATCHES = 4


def load_reference(path: str | PathLike[str], n: int, default: int) -> list[int]:
    """Read ``vertex value`` pairs into a list of ``n`` values filled with ``default``.

    Reading stops at the first token that is not an integer. A missing file
    yields the defaults alone.
    """
    values = [default] * n
    try:
        tokens = Path(path).read_text(encoding="utf-8").split()
    except FileNotFoundError:
        return values
    for v_token, d_token in zip(tokens[::2], tokens[1::2]):
        try:
            v, d = int(v_token), int(d_token)
        except ValueError:
            break
        if not 0 <= v < n:
            raise ValueError(f"reference vertex {v} out of range for {n} vertices")
        values[v] = d
    return values


def verify(label: str, reference: Sequence[int], value_of: Callable[[int], int], n: int) -> int:
    """Compare ``value_of(v)`` with ``reference[v]`` for every vertex, print a report, return mismatches."""
    errors = 0
    for v in range(n):
        got = value_of(v)
        if reference[v] != got:
            errors += 1
            if errors <= _MAX_REPORTED_MISMATCHES:
                print(f"{label} mismatch at {v} ref={reference[v]} got={got}")
    if errors == 0:
        print(f"{label} correct")
    else:
        print(f"{label} total mismatches: {errors}")
    return errors


def _suite(graph: CsrGraph, nt: int) -> list[tuple[str, str, Callable[[], Any], Callable[[Any], None]]]:
    n = graph.num_vertices

    def bsp(algo: Any) -> None:
        bsp_parallel(graph, algo, nt)

    def run(algo: Any) -> None:
        algo.run(graph)

    return [
        ("BFS dense atomic", "bfs", lambda: BfsPushDense(n, 0, nt), bsp),
        ("SSSP dense atomic", "sssp", lambda: SsspPushDense(n, 0, nt), bsp),
        ("CC dense atomic", "cc", lambda: CcPushDense(n, nt), bsp),
        ("BFS sparse atomic", "bfs", lambda: BfsPushSparse(n, 0, nt), run),
        ("SSSP sparse atomic", "sssp", lambda: SsspPushSparse(n, 0, nt), run),
        ("CC sparse atomic", "cc", lambda: CcPushSparse(n, nt), run),
        ("BFS bonus direction-opt", "bfs", lambda: BfsDirectionOptimizing(n, 0, nt), run),
    ]


def _timed(label: str, factory: Callable[[], Any], runner: Callable[[Any], None]) -> Any:
    start = time.perf_counter()
    algo = factory()
    runner(algo)
    print(f"{label}: {time.perf_counter() - start:g} sec")
    return algo


def _verify_label(name: str) -> str:
    return "BFS bonus" if name.startswith("BFS bonus") else name


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--graph", default="soc-LiveJournal1-weighted.txt")
    parser.add_argument("--road", default="roadNet-CA.txt")
    parser.add_argument("--bfs-ref", default="BFS.txt")
    parser.add_argument("--sssp-ref", default="SSSP.txt")
    parser.add_argument("--cc-ref", default="CC.txt")
    parser.add_argument("--threads", type=int, default=4)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.threads < 1:
        print(f"threads must be at least 1, got {args.threads}", file=sys.stderr)
        return 2
    logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stdout)
    nt = args.threads

    try:
        g = load_graph(args.graph)
        print(f"loaded: {g.num_vertices} vertices")
        n = g.num_vertices
        references = {
            "bfs": load_reference(args.bfs_ref, n, -1),
            "sssp": load_reference(args.sssp_ref, n, -1),
            "cc": load_reference(args.cc_ref, n, 0),
        }
        for name, kind, factory, runner in _suite(g, nt):
            algo = _timed(f"{name} ({nt}t)", factory, runner)
            value_of = algo.component if kind == "cc" else algo.distance
            verify(_verify_label(name), references[kind], value_of, n)

        road = load_graph_undirected(args.road)
        print(f"\n{Path(args.road).stem} loaded: {road.num_vertices} vertices")
        for name, _, factory, runner in _suite(road, nt):
            _timed(f"roadNet {name} ({nt}t)", factory, runner)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())