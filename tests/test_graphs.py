import io

import pytest

from labkit.graphs import Graph, main, parse_graph


def _triangle():
    graph = Graph(2)
    graph.add_edge(0, 1, 1)
    graph.add_edge(1, 2, 1)
    graph.add_edge(0, 2, 5)
    return graph


def _grid():
    graph = Graph(5, weighted=False)
    for u, v in [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (4, 5)]:
        graph.add_edge(u, v)
    return graph


def _unweighted_pair():
    graph = Graph(1, weighted=False)
    graph.add_edge(0, 1)
    return graph


def test_bfs_visits_every_node_once_with_nondecreasing_levels():
    order = _grid().bfs(0)
    nodes = [node for node, _ in order]
    levels = [level for _, level in order]
    assert sorted(nodes) == list(range(6))
    assert levels == sorted(levels)
    assert order[0] == (0, 0)


def test_bfs_on_path_levels_match_position():
    graph = Graph(3, weighted=False)
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    assert graph.bfs(0) == [(n, n) for n in range(4)]


def test_bfs_directed_does_not_walk_backwards():
    graph = Graph(2, directed=True, weighted=False)
    graph.add_edge(1, 0)
    graph.add_edge(1, 2)
    assert graph.bfs(0) == [(0, 0)]


def test_dfs_visits_every_node_once_and_starts_at_source():
    order = _grid().dfs(0)
    nodes = [node for node, _ in order]
    assert order[0] == (0, 0)
    assert sorted(nodes) == list(range(6))
    assert len(set(nodes)) == len(nodes)


def test_dfs_explores_last_neighbour_first():
    graph = Graph(2, weighted=False)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    assert [node for node, _ in graph.dfs(0)] == [0, 2, 1]


def test_dijkstra_prefers_shorter_route():
    assert _triangle().dijkstra(0) == [(0, 1), (1, 2)]


def test_dijkstra_tree_edges_exist_in_graph():
    graph = Graph(4, directed=True)
    for u, v, w in [(0, 1, 4), (0, 2, 1), (2, 1, 2), (1, 3, 1), (2, 3, 5)]:
        graph.add_edge(u, v, w)
    edges = graph.dijkstra(0)
    children = [child for _, child in edges]
    assert len(children) == len(set(children))
    assert set(children) == {1, 2, 3}
    assert (2, 1) in edges


def test_zero_one_bfs_covers_reachable_nodes():
    graph = Graph(3)
    graph.add_edge(0, 1, 1)
    graph.add_edge(1, 2, 0)
    graph.add_edge(2, 3, 1)
    edges = graph.zero_one_bfs(0)
    assert {child for _, child in edges} == {1, 2, 3}
    assert all(parent != child for parent, child in edges)


def test_prim_builds_spanning_tree_with_graph_weights():
    graph = _triangle()
    edges = graph.prim(0)
    assert len(edges) == graph.nodes
    assert {child for _, child, _ in edges} == {1, 2}
    assert sum(w for _, _, w in edges) < 5 + 1


def test_prim_rejects_directed_graph():
    graph = Graph(1, directed=True)
    graph.add_edge(0, 1, 3)
    with pytest.raises(ValueError):
        graph.prim(0)


def test_dijkstra_rejects_unweighted_graph():
    with pytest.raises(ValueError) as excinfo:
        _unweighted_pair().dijkstra(0)
    assert "BFS and DFS only" in str(excinfo.value)


def test_zero_one_bfs_rejects_unweighted_graph():
    with pytest.raises(ValueError) as excinfo:
        _unweighted_pair().zero_one_bfs(0)
    assert "BFS and DFS only" in str(excinfo.value)


def test_prim_rejects_unweighted_graph():
    with pytest.raises(ValueError) as excinfo:
        _unweighted_pair().prim(0)
    assert "BFS and DFS only" in str(excinfo.value)


def test_add_edge_out_of_range():
    with pytest.raises(ValueError):
        Graph(2).add_edge(0, 3, 1)


def test_parse_graph_round_trip():
    graph = parse_graph("3 3\n0 1 2\n1 2 3\n2 3 4\n")
    assert [node for node, _ in graph.bfs(0)] == [0, 1, 2, 3]
    assert len(graph.prim(0)) == 3


def test_parse_graph_unweighted_reads_pairs():
    graph = parse_graph("2 2\n0 1\n1 2\n", weighted=False)
    assert [node for node, _ in graph.bfs(0)] == [0, 1, 2]


@pytest.mark.parametrize("text", ["", "3", "2 2\n0 1 1\n", "2 1\n0 x 1\n"])
def test_parse_graph_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_graph(text)


def test_main_bfs_prints_header_and_levels(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1\n0 1\n"))
    assert main(["bfs"]) == 0
    assert capsys.readouterr().out == "unweighted undirected\n0 0\n1 1\n"


def test_main_prim_on_directed_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1\n0 1 2\n"))
    assert main(["prim", "--directed"]) == 2
    captured = capsys.readouterr()
    assert captured.out.startswith("weighted directed")
    assert "undirected" in captured.err


def test_main_dijkstra_output_lines(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 3\n0 1 1\n1 2 1\n0 2 5\n"))
    assert main(["dijkstra"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "weighted undirected"
    assert lines[1:] == ["0 1", "1 2"]