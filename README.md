# labkit

A small toolkit with three parts:

- **Graphs** (`labkit.graphs`): breadth-first and depth-first search with levels,
  Dijkstra's shortest-path tree, 0/1 BFS and Prim's minimum spanning tree, on
  graphs that may be directed or undirected, weighted or not.
- **Sorting** (`labkit.sorting`): merge sort, quick sort, randomized quick sort,
  heap sort, bubble sort and selection sort.
- **File transfer** (`labkit.fileserver`, `labkit.fileclient`): a TCP server that
  sends back the file a client names, and a client that fetches a file, saves it
  as `received_<name>` and can compare it with the local original.

No third-party libraries are needed.

## Installation

```
pip install .
```

## Graphs

A `Graph(nodes, directed=False, weighted=True)` has nodes `0` to `nodes`
inclusive. `add_edge(u, v, weight=1)` adds an edge, and in an undirected graph
the edge back as well. Node numbers outside the range raise `ValueError`.

```python
from labkit.graphs import Graph, parse_graph

g = Graph(4, directed=False, weighted=True)
g.add_edge(0, 1, 4)
g.add_edge(1, 2, 1)
g.add_edge(0, 2, 7)
g.dijkstra(0)      # shortest-path tree edges (parent, child), in settling order
g.zero_one_bfs(0)  # tree edges (parent, child) found by 0/1 BFS
g.prim(0)          # spanning-tree edges (parent, child, weight)

g = parse_graph("3 2\n0 1\n1 2\n", directed=True, weighted=False)
g.bfs(0)           # [(0, 0), (1, 1), (2, 2)]: (node, level) pairs
g.dfs(0)           # (node, depth) pairs in stack order
```

`dijkstra`, `zero_one_bfs` and `prim` raise `ValueError` on an unweighted graph,
and `prim` also on a directed one.

`parse_graph(text, directed=False, weighted=True)` reads `n m` followed by `m`
edges, each `u v` or, for a weighted graph, `u v w`; whitespace of any kind
separates the numbers. Malformed or short input raises `ValueError`.

### Command line

`labkit-graph ALGORITHM [--directed]` reads a graph in the same format from
standard input, prints the kind of graph (`weighted undirected` and so on) and
then one line per result row, starting from node 0. `ALGORITHM` is one of
`bfs`, `dfs`, `dijkstra`, `wbfs` or `prim`; `bfs` and `dfs` read unweighted
edges, the others weighted ones.

```
echo "3 2 0 1 1 2" | labkit-graph bfs
echo "3 3 0 1 4 1 2 1 0 2 7" | labkit-graph dijkstra --directed
```

It exits with 1 on bad input and 2 when the algorithm does not apply (such as
`prim` with `--directed`).

## Sorting

Every sort takes any iterable of numbers and returns a new sorted list.
`randomized_quick_sort` also takes an optional `random.Random` for its pivots.
`get_algorithm(name)` looks a sort up by name, ignoring case and accepting `-`
for `_` (`"MERGE_SORT"`, `"heap-sort"`); an unknown name raises `ValueError`.

```python
import random
from labkit.sorting import merge_sort, randomized_quick_sort, get_algorithm

merge_sort([5, 2, 9, 1])                              # [1, 2, 5, 9]
randomized_quick_sort([3, 1, 2], random.Random(1))    # [1, 2, 3]
get_algorithm("heap_sort")([3, 1, 2])                 # [1, 2, 3]
```

### Command line

`labkit-sort COUNT -a ALGORITHM [--random]` prints `COUNT`, sorts an array of
that many elements with the chosen sort and prints `sorting done`. The array is
all zeros unless `--random` fills it with random values. Without `-a` it reports
that no algorithm was selected and exits with 2, as it does for an unknown name.

```
labkit-sort 20000 -a quick_sort --random
```

The command does not measure anything itself; to compare the sorts, run it
under an external timer.

## File transfer

### Server

`labkit-serve` listens on all addresses and, for each connection, reads a file
name (up to 511 bytes), opens that path relative to its working directory and
sends the file's bytes back, then closes the connection.

```
labkit-serve                       # one client at a time, port 9877
labkit-serve --concurrent          # a thread per client, port 8080
labkit-serve --host 127.0.0.1 --port 9000
```

With `--concurrent` it also prints each requested file name. Stop it with
Ctrl-C.

From Python, `make_server(host="", port=9877, concurrent=False)` returns a bound
`socketserver` server using `FileRequestHandler`, and
`serve_file(connection)` answers one already-accepted socket, returning the
number of bytes sent.

### Client

`labkit-fetch FILENAME` sends the name to the server and writes the reply to
`received_FILENAME`.

```
labkit-fetch notes.txt
labkit-fetch notes.txt --port 8080 --directory client_received_files --compare
```

`--host` and `--port` default to `127.0.0.1` and `9877`. `--directory` stores
the copy in that directory, creating it if needed. `--compare` checks the copy
byte for byte against the local file of the same name and prints
`Files are identical.` or `Files differ.`

```python
from labkit.fileclient import fetch_file, compare_files, received_path

path = fetch_file("notes.txt", "127.0.0.1", 9877, "client_received_files")
compare_files("notes.txt", path)   # True when the contents match
received_path("notes.txt", "client_received_files")
```

`compare_files` raises `FileNotFoundError` if either file is missing.

### What it does not do

The server does not restrict which paths a client may ask for, and sends no
error message: when the file cannot be opened it logs the error and closes the
connection, so the client ends up with an empty file. There is no
authentication or encryption.

## Tests

```
pip install .[test]
pytest
```