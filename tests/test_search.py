import pytest

from hellodemo.search import GRAPH, HEURISTICS, bfs, dfs

NODES = range(len(GRAPH))


def test_edges_can_be_walked_both_ways():
    assert len(HEURISTICS) == len(GRAPH)
    for a in NODES:
        for b in NODES:
            if a != b and GRAPH[a][b]:
                assert bfs(a, b) == [a, b]
                assert bfs(b, a) == [b, a]


@pytest.mark.parametrize("node", list(NODES))
def test_bfs_same_start_and_end(node):
    assert bfs(node, node) == [node]


@pytest.mark.parametrize("node", list(NODES))
def test_dfs_same_start_and_end(node):
    assert dfs(node, node) == [node]


@pytest.mark.parametrize("start", list(NODES))
@pytest.mark.parametrize("end", list(NODES))
def test_bfs_returns_valid_path(start, end):
    path = bfs(start, end)
    assert path[0] == start
    assert path[-1] == end
    assert len(set(path)) == len(path)
    assert all(GRAPH[a][b] != 0 for a, b in zip(path, path[1:]))


def test_bfs_path_is_shortest_in_hops():
    # Nodes 1 and 12 of the graph are five edges apart.
    assert len(bfs(0, 11)) == 6


@pytest.mark.parametrize("start", list(NODES))
def test_bfs_neighbours_take_one_hop(start):
    for neighbour in NODES:
        if GRAPH[start][neighbour]:
            assert bfs(start, neighbour) == [start, neighbour]


@pytest.mark.parametrize("start", list(NODES))
@pytest.mark.parametrize("end", list(NODES))
def test_dfs_result_is_empty_or_simple_path(start, end):
    path = dfs(start, end)
    if path:
        assert path[0] == start
        assert path[-1] == end
        assert len(set(path)) == len(path)
    else:
        assert start != end


def test_end_outside_graph_finds_nothing():
    assert bfs(0, 12) == []
    assert dfs(0, 12) == []


@pytest.mark.parametrize("start", [-1, 12, 100])
def test_bfs_start_outside_graph_raises(start):
    with pytest.raises(IndexError):
        bfs(start, 0)


@pytest.mark.parametrize("start", [-1, 12, 100])
def test_dfs_start_outside_graph_raises(start):
    with pytest.raises(IndexError):
        dfs(start, 0)