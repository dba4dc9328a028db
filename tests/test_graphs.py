import pytest

from dsalgo.graphs import AdjacencyListGraph, AdjacencyMatrixGraph, GraphError

FOUR_EDGES = [(0, 1), (0, 2), (0, 3), (1, 2), (2, 3)]
SIX_EDGES = [(0, 2), (2, 1), (2, 3), (0, 4), (4, 5), (1, 5)]


def matrix_graph(n, edges):
    g = AdjacencyMatrixGraph(n)
    for u, v in edges:
        g.insert_edge(u, v)
    return g


def list_graph(n, edges, append):
    g = AdjacencyListGraph(n)
    for u, v in edges:
        g.insert_edge(u, v, append)
        g.insert_edge(v, u, append)
    return g


def test_explicit_stack_dfs_order():
    g = list_graph(4, FOUR_EDGES, append=False)
    assert g.dfs_iterative(0) == [0, 1, 2, 3]


def test_insert_first_puts_newest_neighbour_first():
    g = list_graph(4, FOUR_EDGES, append=False)
    assert g.neighbors(0) == [3, 2, 1]
    assert g.format().splitlines()[0] == "vertex 0 adjacency list -> 3 -> 2 -> 1"


def test_append_keeps_insertion_order():
    g = list_graph(6, SIX_EDGES, append=True)
    assert g.neighbors(2) == [0, 1, 3]


def test_list_bfs_order():
    g = list_graph(6, SIX_EDGES, append=True)
    assert g.bfs(0) == [0, 2, 4, 1, 3, 5]


def test_matrix_bfs_matches_list_bfs():
    m = matrix_graph(6, SIX_EDGES)
    lst = list_graph(6, SIX_EDGES, append=True)
    assert m.bfs(0) == lst.bfs(0)


def test_matrix_dfs_order():
    assert matrix_graph(4, FOUR_EDGES).dfs(0) == [0, 1, 2, 3]


def test_matrix_format_and_symmetry():
    g = matrix_graph(4, FOUR_EDGES)
    assert g.format() == "0 1 1 1 \n1 0 1 0 \n1 1 0 1 \n1 0 1 0 \n"
    matrix = g.matrix
    assert all(matrix[i][j] == matrix[j][i] for i in range(4) for j in range(4))


@pytest.mark.parametrize("start", range(6))
def test_traversals_visit_each_vertex_once(start):
    m = matrix_graph(6, SIX_EDGES)
    lst = list_graph(6, SIX_EDGES, append=False)
    for order in (m.dfs(start), m.bfs(start), lst.dfs_iterative(start), lst.bfs(start)):
        assert order[0] == start
        assert sorted(order) == list(range(6))


def test_unreachable_vertex_is_not_visited():
    g = matrix_graph(3, [(0, 1)])
    assert 2 not in g.dfs(0)
    assert 2 not in g.bfs(0)
    lg = list_graph(3, [(0, 1)], append=True)
    assert lg.bfs(2) == [2]


def test_insert_vertex_returns_index():
    g = AdjacencyListGraph()
    assert [g.insert_vertex() for _ in range(3)] == [0, 1, 2]
    m = AdjacencyMatrixGraph()
    assert [m.insert_vertex() for _ in range(2)] == [0, 1]
    assert m.matrix == [[0, 0], [0, 0]]


def test_too_many_vertices():
    with pytest.raises(GraphError):
        AdjacencyMatrixGraph(3, max_vertices=2)
    g = AdjacencyListGraph(2, max_vertices=2)
    with pytest.raises(GraphError):
        g.insert_vertex()


def test_edge_to_missing_vertex():
    with pytest.raises(GraphError):
        AdjacencyMatrixGraph(2).insert_edge(0, 2)
    with pytest.raises(GraphError):
        AdjacencyListGraph(2).insert_edge(3, 0)


def test_traversal_from_missing_vertex():
    with pytest.raises(GraphError):
        AdjacencyMatrixGraph(2).bfs(5)
    with pytest.raises(GraphError):
        AdjacencyListGraph(2).dfs_iterative(-1)