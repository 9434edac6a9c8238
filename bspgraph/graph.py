"""Compressed sparse row graphs and the edge-list loaders that build them."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import accumulate
from os import PathLike

_UNDIRECTED_WEIGHT_SEED = 42
_UNDIRECTED_WEIGHT_RANGE = (1, 400)


@dataclass(frozen=True)
class CsrGraph:
    """A directed, weighted graph stored with both outgoing and incoming CSR arrays."""

    num_vertices: int
    offsets: list[int]
    edges: list[int]
    weights: list[int]
    in_offsets: list[int]
    in_edges: list[int]
    in_weights: list[int]

    def out_neighbors(self, v: int) -> list[tuple[int, int]]:
        """Return ``(target, weight)`` pairs for the edges leaving ``v``."""
        lo, hi = self.offsets[v], self.offsets[v + 1]
        return list(zip(self.edges[lo:hi], self.weights[lo:hi]))

    def in_neighbors(self, v: int) -> list[tuple[int, int]]:
        """Return ``(source, weight)`` pairs for the edges entering ``v``."""
        lo, hi = self.in_offsets[v], self.in_offsets[v + 1]
        return list(zip(self.in_edges[lo:hi], self.in_weights[lo:hi]))


def _prefix_offsets(keys: list[int], n: int) -> list[int]:
    counts = [0] * (n + 1)
    for key in keys:
        counts[key + 1] += 1
    return list(accumulate(counts))


def _scatter(
    keys: list[int], values: list[int], weights: list[int], offsets: list[int]
) -> tuple[list[int], list[int]]:
    cursor = offsets[:-1]
    targets = [0] * len(keys)
    placed_weights = [0] * len(keys)
    for key, value, weight in zip(keys, values, weights):
        pos = cursor[key]
        cursor[key] += 1
        targets[pos] = value
        placed_weights[pos] = weight
    return targets, placed_weights


def build_graph(edges: Iterable[tuple[int, int, int]]) -> CsrGraph:
    """Build a graph from ``(source, target, weight)`` triples.

    The vertex count is one more than the largest vertex id seen, and at least one.
    Edges keep their input order within each vertex's adjacency range.
    """
    edge_list = [(int(u), int(v), int(w)) for u, v, w in edges]
    for u, v, _ in edge_list:
        if u < 0 or v < 0:
            raise ValueError(f"vertex ids must be non-negative, got edge {u} -> {v}")

    n = max((max(u, v) for u, v, _ in edge_list), default=0) + 1
    sources = [u for u, _, _ in edge_list]
    targets = [v for _, v, _ in edge_list]
    weights = [w for _, _, w in edge_list]

    offsets = _prefix_offsets(sources, n)
    in_offsets = _prefix_offsets(targets, n)
    out_edges, out_weights = _scatter(sources, targets, weights, offsets)
    in_edges, in_weights = _scatter(targets, sources, weights, in_offsets)

    return CsrGraph(
        num_vertices=n,
        offsets=offsets,
        edges=out_edges,
        weights=out_weights,
        in_offsets=in_offsets,
        in_edges=in_edges,
        in_weights=in_weights,
    )


def _read_records(path: str | PathLike[str], fields: int) -> Iterator[tuple[int, ...]]:
    """Yield the first ``fields`` integers of every usable line of an edge file.

    Blank lines, lines starting with ``#`` and lines that do not begin with enough
    integers are skipped. The first two integers are vertex ids and must be
    non-negative for the line to count.
    """
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if not line.strip() or line.startswith("#"):
                continue
            tokens = line.split()
            if len(tokens) < fields:
                continue
            try:
                values = tuple(int(token) for token in tokens[:fields])
            except ValueError:
                continue
            if values[0] < 0 or values[1] < 0:
                continue
            yield values


def load_graph(path: str | PathLike[str]) -> CsrGraph:
    """Load a directed graph from lines of ``source target weight``."""
    return build_graph(_read_records(path, 3))


def load_graph_undirected(path: str | PathLike[str]) -> CsrGraph:
    """Load an undirected graph from lines of ``u v``.

    Each pair becomes two directed edges sharing a pseudo-random weight drawn
    from a fixed seed, so repeated loads of the same file agree.
    """
    rng = random.Random(_UNDIRECTED_WEIGHT_SEED)
    low, high = _UNDIRECTED_WEIGHT_RANGE
    edges: list[tuple[int, int, int]] = []
    for u, v in _read_records(path, 2):
        w = rng.randint(low, high)
        edges.append((u, v, w))
        edges.append((v, u, w))
    return build_graph(edges)