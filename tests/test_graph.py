import math

import pytest

from algokit.graph import (
    a_star,
    bfs,
    dfs,
    dijkstra,
    format_adjacency,
    multi_source_bfs,
    prim_keys,
)


@pytest.fixture
def weighted():
    return [
        [(1, 2), (2, 4)],
        [(3, 7)],
        [(3, 1)],
        [(4, 3)],
        [(5, 2)],
        [],
    ]


@pytest.fixture
def tree():
    return [[1, 2], [3], [4], [], []]


@pytest.fixture
def undirected():
    return [[1, 2], [0, 3], [0, 3, 4], [1, 2, 5], [2], [3], []]


def test_a_star_example(weighted):
    assert a_star(0, 5, weighted) == [0, 2, 3, 4, 5]


def test_a_star_path_cost_matches_dijkstra(weighted):
    path = a_star(0, 5, weighted)
    cost = sum(dict(weighted[u])[v] for u, v in zip(path, path[1:]))
    assert cost == dijkstra(weighted, 0)[5]


def test_a_star_unreachable_goal(weighted):
    assert a_star(5, 0, weighted) == [0]


def test_a_star_start_is_goal(weighted):
    assert a_star(3, 3, weighted) == [3]


def test_dfs_example(tree):
    assert dfs(0, tree) == [0, 1, 3, 2, 4]


def test_dfs_visits_each_reachable_node_once(undirected):
    order = dfs(0, undirected)
    assert order[0] == 0
    assert len(order) == len(set(order))
    assert set(order) == set(bfs(0, undirected))


def test_bfs_starts_at_start_and_is_unique(undirected):
    order = bfs(2, undirected)
    assert order[0] == 2
    assert len(order) == len(set(order))
    assert 6 not in order


def test_bfs_order_has_nondecreasing_distance(undirected):
    order = bfs(0, undirected)
    dist = multi_source_bfs(undirected, [0])
    levels = [dist[n] for n in order]
    assert levels == sorted(levels)


def test_dijkstra_source_and_unreachable(weighted):
    dist = dijkstra(weighted, 3)
    assert dist[3] == 0
    assert dist[0] == math.inf


def test_dijkstra_satisfies_edge_relaxation(weighted):
    dist = dijkstra(weighted, 0)
    for u, edges in enumerate(weighted):
        for v, w in edges:
            assert dist[v] <= dist[u] + w


def test_multi_source_bfs_sources_are_zero(undirected):
    dist = multi_source_bfs(undirected, [0, 5])
    assert dist[0] == 0 and dist[5] == 0
    assert dist[6] == math.inf


def test_multi_source_bfs_edge_invariant(undirected):
    dist = multi_source_bfs(undirected, [4, 1])
    for u, neighbours in enumerate(undirected):
        for v in neighbours:
            assert dist[v] <= dist[u] + 1


def test_multi_source_bfs_single_source_matches_unit_dijkstra(undirected):
    unit = [[(v, 1) for v in neighbours] for neighbours in undirected]
    assert multi_source_bfs(undirected, [0]) == dijkstra(unit, 0)


def test_format_adjacency_round_trip(tree):
    text = format_adjacency(tree)
    lines = text.splitlines()
    assert len(lines) == len(tree)
    parsed = []
    for index, line in enumerate(lines):
        node, _, rest = line.partition(":")
        assert int(node) == index
        parsed.append([int(v) for v in rest.split()])
    assert parsed == tree


def test_prim_keys_example():
    adj = [[(1, 2), (3, 6)], [(2, 3), (3, 8)], [], [], []]
    assert prim_keys(adj) == [0, 2, 3, 6, math.inf]


def test_prim_keys_empty_graph():
    assert prim_keys([]) == []