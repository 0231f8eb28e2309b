"""Graph traversal, shortest-path and minimum-spanning-tree routines."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections import deque
from typing import Callable, Sequence


class Graph:
    """Adjacency-list graph on nodes ``0 .. nodes`` inclusive."""

    def __init__(self, nodes: int, directed: bool = False, weighted: bool = True) -> None:
        if nodes < 0:
            raise ValueError(f"node count must be non-negative, got {nodes}")
        self.nodes = nodes
        self.directed = directed
        self.weighted = weighted
        self._adj: list[list[tuple[int, int]]] = [[] for _ in range(nodes + 1)]

    def _check(self, node: int) -> None:
        if not 0 <= node <= self.nodes:
            raise ValueError(f"node {node} out of range 0..{self.nodes}")

    def _require_weighted(self) -> None:
        if not self.weighted:
            raise ValueError("Unweighted graph allows BFS and DFS only")

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        """Add an edge from ``u`` to ``v`` (and back, if undirected)."""
        self._check(u)
        self._check(v)
        self._adj[u].append((v, weight))
        if not self.directed:
            self._adj[v].append((u, weight))

    def bfs(self, src: int) -> list[tuple[int, int]]:
        """Return ``(node, level)`` pairs in breadth-first order."""
        self._check(src)
        visited = {src}
        order: list[tuple[int, int]] = []
        frontier = [src]
        level = 0
        while frontier:
            upcoming: list[int] = []
            for node in frontier:
                order.append((node, level))
                for neighbour, _ in self._adj[node]:
                    if neighbour not in visited:
                        visited.add(neighbour)
                        upcoming.append(neighbour)
            frontier = upcoming
            level += 1
        return order

    def dfs(self, src: int) -> list[tuple[int, int]]:
        """Return ``(node, depth)`` pairs in stack-based depth-first order."""
        self._check(src)
        visited: set[int] = set()
        order: list[tuple[int, int]] = []
        stack = [(src, 0)]
        while stack:
            node, level = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            order.append((node, level))
            stack.extend(
                (neighbour, level + 1)
                for neighbour, _ in self._adj[node]
                if neighbour not in visited
            )
        return order

    def dijkstra(self, src: int) -> list[tuple[int, int]]:
        """Return shortest-path tree edges ``(parent, child)`` in settling order."""
        self._require_weighted()
        self._check(src)
        dist = [math.inf] * (self.nodes + 1)
        parent: list[int | None] = [None] * (self.nodes + 1)
        visited = [False] * (self.nodes + 1)
        edges: list[tuple[int, int]] = []
        dist[src] = 0
        heap = [(0, src)]
        while heap:
            distance, node = heapq.heappop(heap)
            if visited[node]:
                continue
            visited[node] = True
            if parent[node] is not None:
                edges.append((parent[node], node))
            for neighbour, weight in self._adj[node]:
                if distance + weight < dist[neighbour]:
                    dist[neighbour] = distance + weight
                    parent[neighbour] = node
                    heapq.heappush(heap, (dist[neighbour], neighbour))
        return edges

    def zero_one_bfs(self, src: int) -> list[tuple[int, int]]:
        """Return tree edges ``(parent, child)`` found by 0/1 breadth-first search."""
        self._require_weighted()
        self._check(src)
        dist = [math.inf] * (self.nodes + 1)
        parent: list[int | None] = [None] * (self.nodes + 1)
        dist[src] = 0
        queue = deque([src])
        edges: list[tuple[int, int]] = []
        while queue:
            node = queue.popleft()
            for neighbour, weight in self._adj[node]:
                if weight + dist[node] < dist[neighbour] and parent[neighbour] is None:
                    dist[neighbour] = weight + dist[node]
                    parent[neighbour] = node
                    edges.append((node, neighbour))
                    if weight == 0:
                        queue.appendleft(neighbour)
                    else:
                        queue.append(neighbour)
        return edges

    def prim(self, src: int) -> list[tuple[int, int, int]]:
        """Return minimum-spanning-tree edges ``(parent, child, weight)``."""
        self._require_weighted()
        if self.directed:
            raise ValueError("Prim's algorithm needs an undirected graph")
        self._check(src)
        best = [math.inf] * (self.nodes + 1)
        parent: list[int | None] = [None] * (self.nodes + 1)
        visited = [False] * (self.nodes + 1)
        best[src] = 0
        heap = [(0, src)]
        edges: list[tuple[int, int, int]] = []
        while heap:
            _, node = heapq.heappop(heap)
            if visited[node]:
                continue
            visited[node] = True
            if parent[node] is not None:
                edges.append((parent[node], node, best[node]))
            for neighbour, weight in self._adj[node]:
                if not visited[neighbour] and weight < best[neighbour]:
                    best[neighbour] = weight
                    parent[neighbour] = node
                    heapq.heappush(heap, (weight, neighbour))
        return edges


def parse_graph(text: str, directed: bool = False, weighted: bool = True) -> Graph:
    """Build a graph from ``n m`` followed by ``m`` edges of ``u v`` or ``u v w``."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise ValueError(f"malformed graph input: {exc}") from None
    if len(numbers) < 2:
        raise ValueError("graph input must start with node and edge counts")
    nodes, edge_count = numbers[0], numbers[1]
    if edge_count < 0:
        raise ValueError(f"edge count must be non-negative, got {edge_count}")
    width = 3 if weighted else 2
    body = numbers[2:]
    if len(body) < edge_count * width:
        raise ValueError(f"expected {edge_count} edges, input ended early")
    graph = Graph(nodes, directed=directed, weighted=weighted)
    for start in range(0, edge_count * width, width):
        record = body[start:start + width]
        if weighted:
            graph.add_edge(record[0], record[1], record[2])
        else:
            graph.add_edge(record[0], record[1])
    return graph


_RUNNERS: dict[str, Callable[[Graph, int], list[tuple[int, ...]]]] = {
    "bfs": Graph.bfs,
    "dfs": Graph.dfs,
    "dijkstra": Graph.dijkstra,
    "wbfs": Graph.zero_one_bfs,
    "prim": Graph.prim,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and print the chosen traversal from node 0."""
    parser = argparse.ArgumentParser(prog="labkit-graph", description=main.__doc__)
    parser.add_argument("algorithm", choices=sorted(_RUNNERS))
    parser.add_argument("--directed", action="store_true", help="treat edges as one-way")
    args = parser.parse_args(argv)

    weighted = args.algorithm not in ("bfs", "dfs")
    try:
        graph = parse_graph(sys.stdin.read(), directed=args.directed, weighted=weighted)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    kind = "weighted" if weighted else "unweighted"
    direction = "directed" if args.directed else "undirected"
    print(f"{kind} {direction}")
    try:
        rows = _RUNNERS[args.algorithm](graph, 0)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    for row in rows:
        print(" ".join(str(value) for value in row))
    if args.algorithm == "dfs":
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())