# bspgraph

Graph algorithms written in the bulk-synchronous (BSP) style, working over
graphs stored in compressed sparse row (CSR) form:

- **Breadth-first search** – hop distance from a source vertex.
- **Single-source shortest paths** – weighted distance from a source vertex.
- **Connected components** – every vertex labelled with the smallest vertex
  id of its weakly connected component (edges followed in either direction).

Each problem comes in more than one formulation, so they can be compared:

| Module               | Classes                                           | Style                                                         |
|----------------------|---------------------------------------------------|---------------------------------------------------------------|
| `bspgraph.dense`     | `BfsPushDense`, `SsspPushDense`, `CcPushDense`    | frontier vertices push to neighbours; every vertex visited each round |
| `bspgraph.pull`      | `CcPull`, `SsspPull`                              | every vertex pulls from its neighbours each round             |
| `bspgraph.sparse`    | `BfsPushSparse`, `SsspPushSparse`, `CcPushSparse` | only the vertices on an explicit frontier list are visited    |
| `bspgraph.direction` | `BfsDirectionOptimizing`                          | BFS that switches between push and pull rounds                |

`SsspPull` pulls along in-edges; `CcPull` and both connected-components push
variants use edges in both directions. BFS and SSSP report `-1` for a vertex
that the source cannot reach.

`BfsDirectionOptimizing` pulls in a round whose frontier holds more than a
quarter of the vertices, and pushes otherwise.

## Installation

```
pip install .
```

The package needs nothing beyond the standard library.

## Graphs

`bspgraph.graph.CsrGraph` is a frozen dataclass holding both the outgoing
(`offsets`, `edges`, `weights`) and the incoming (`in_offsets`, `in_edges`,
`in_weights`) adjacency of every vertex, plus `num_vertices`.
`out_neighbors(v)` and `in_neighbors(v)` return lists of
`(vertex, weight)` pairs.

There are three ways to get a graph:

- `build_graph(edges)` from an iterable of `(source, target, weight)`
  triples. A negative vertex id raises `ValueError`. Edges keep their input
  order within each vertex's adjacency.
- `load_graph(path)` from a directed edge-list file of
  `source target weight` lines.
- `load_graph_undirected(path)` from an edge-list file of `source target`
  lines. Each pair is stored in both directions with the same weight, drawn
  uniformly from 1 to 400 by a generator with a fixed seed, so loading the
  same file twice gives the same weights.

In edge-list files, blank lines, lines starting with `#`, lines that do not
begin with enough integers and lines with a negative vertex id are skipped.
The number of vertices is one more than the largest vertex id that appears
(at least one).

```python
from bspgraph.graph import build_graph

graph = build_graph([(0, 1, 4), (1, 2, 3), (0, 2, 10)])
print(graph.out_neighbors(0))  # [(1, 4), (2, 10)]
print(graph.in_neighbors(2))   # [(1, 3), (0, 10)]
```

## Running an algorithm

The dense and pull classes implement the `bspgraph.bsp.BspAlgorithm`
interface: `has_work()`, `process(tid, v, graph)` and `post_round()`.
Run them with either driver from `bspgraph.bsp`:

- `bsp_serial(graph, algo)` visits every vertex in order as worker `0`,
  round after round, until the algorithm reports no more work;
- `bsp_parallel(graph, algo, nthreads)` splits the vertices of each round
  into contiguous chunks, one per worker thread, and waits for all of them
  before closing the round.

```python
from bspgraph.bsp import bsp_parallel
from bspgraph.dense import SsspPushDense

algo = SsspPushDense(graph.num_vertices, 0, 2)
bsp_parallel(graph, algo, 2)
print([algo.distance(v) for v in range(graph.num_vertices)])  # [0, 4, 7]
```

The sparse and direction-optimising classes keep their own frontier; call
`run(graph)` on them instead. Their constructors take the vertex count, the
source vertex (not for connected components) and the number of worker
threads.

Results are read per vertex with `distance(v)` for BFS and SSSP and
`component(v)` for connected components. Any thread count below one raises
`ValueError`.

New vertex programs can be written by subclassing `BspAlgorithm` and running
them with `bsp_serial` or `bsp_parallel`.

## Command line

The `bspgraph` command loads a directed weighted graph, runs every dense,
sparse and direction-optimising algorithm on it from vertex 0, prints how
long each took and checks the results against reference files of
`vertex value` pairs. It then loads an undirected graph and times the same
algorithms on it without checking them. The sparse runs log the size of
each round's frontier.

```
bspgraph --graph soc-LiveJournal1-weighted.txt --road roadNet-CA.txt \
         --bfs-ref BFS.txt --sssp-ref SSSP.txt --cc-ref CC.txt --threads 4
```

The values shown are the defaults. A missing reference file counts as all
`-1` (BFS, SSSP) or all `0` (components). The command exits with `2` for a
thread count below one and `1` when a file cannot be read or holds a vertex
out of range.

Its helpers are usable on their own, from `bspgraph.cli`:

- `load_reference(path, n, default)` reads `vertex value` pairs into a list
  of `n` values;
- `verify(label, reference, value_of, n)` prints up to four mismatches and a
  summary line, and returns the number of mismatches.

## Limits

The package does not compute reference results: the files the command checks
against must come from elsewhere. Worker threads are ordinary Python threads,
so the parallel drivers give the same results as the serial ones but are not
meant as a speed-up.

## Tests

```
pip install .[test]
pytest
```