import pytest

from algokit.bfs import bfs_path, sample_tree


def test_source_example():
    assert bfs_path(sample_tree(), "A", "G") == ["A", "C", "G"]


@pytest.mark.parametrize("goal", list("ABCDEFG"))
def test_paths_follow_edges(goal):
    tree = sample_tree()
    path = bfs_path(tree, "A", goal)
    assert path[0] == "A"
    assert path[-1] == goal
    for parent, child in zip(path, path[1:]):
        assert child in tree[parent]


def test_start_is_goal():
    assert bfs_path(sample_tree(), "B", "B") == ["B"]


def test_unreachable_returns_none():
    assert bfs_path(sample_tree(), "B", "C") is None
    assert bfs_path(sample_tree(), "A", "Z") is None


def test_shortest_path_in_graph_with_cycle():
    graph = {1: [2, 3], 2: [4], 3: [1, 5], 4: [5], 5: [1]}
    path = bfs_path(graph, 1, 5)
    assert path == [1, 3, 5]
    assert bfs_path(graph, 5, 4) == [5, 1, 2, 4]