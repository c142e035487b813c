"""Graph traversal, shortest paths and minimum spanning tree keys.

Unweighted graphs are adjacency lists: ``adj[u]`` is a sequence of neighbour
indices. Weighted graphs hold ``(neighbour, weight)`` pairs instead.
Unreachable distances are reported as ``math.inf``.
"""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence
from itertools import count

Graph = Sequence[Sequence[int]]
WeightedGraph = Sequence[Sequence[tuple[int, int]]]


def _heuristic(node: int, goal: int) -> int:
    return abs(node - goal)


def a_star(start: int, goal: int, adj: WeightedGraph) -> list[int]:
    """Return the path from ``start`` to ``goal`` found by A* search.

    The heuristic is the distance between node indices. If ``goal`` cannot
    be reached, the path holds ``goal`` alone.
    """
    cost: list[float] = [math.inf] * len(adj)
    parent: list[int | None] = [None] * len(adj)
    tie = count()

    cost[start] = 0
    frontier = [(_heuristic(start, goal), next(tie), start, 0)]

    while frontier:
        _, _, node, spent = heapq.heappop(frontier)
        if node == goal:
            break
        for neighbour, weight in adj[node]:
            new_cost = spent + weight
            if new_cost < cost[neighbour]:
                cost[neighbour] = new_cost
                parent[neighbour] = node
                heapq.heappush(
                    frontier,
                    (new_cost + _heuristic(neighbour, goal), next(tie), neighbour, new_cost),
                )

    path = []
    at: int | None = goal
    while at is not None:
        path.append(at)
        at = parent[at]
    path.reverse()
    return path


def bfs(start: int, adj: Graph) -> list[int]:
    """Return the nodes reachable from ``start`` in breadth-first order."""
    visited = {start}
    queue = deque([start])
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbour in adj[node]:
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(start: int, adj: Graph) -> list[int]:
    """Return the nodes reachable from ``start`` in depth-first preorder."""
    visited: set[int] = set()
    order = []
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        order.append(node)
        stack.extend(n for n in reversed(adj[node]) if n not in visited)
    return order


def dijkstra(adj: WeightedGraph, src: int) -> list[float]:
    """Return the shortest distance from ``src`` to every node."""
    dist: list[float] = [math.inf] * len(adj)
    dist[src] = 0
    frontier = [(0, src)]
    while frontier:
        d, node = heapq.heappop(frontier)
        if d > dist[node]:
            continue
        for neighbour, weight in adj[node]:
            candidate = d + weight
            if candidate < dist[neighbour]:
                dist[neighbour] = candidate
                heapq.heappush(frontier, (candidate, neighbour))
    return dist


def multi_source_bfs(adj: Graph, sources: Iterable[int]) -> list[float]:
    """Return each node's edge count to the nearest of ``sources``."""
    dist: list[float] = [math.inf] * len(adj)
    queue: deque[int] = deque()
    for src in sources:
        dist[src] = 0
        queue.append(src)
    while queue:
        node = queue.popleft()
        for neighbour in adj[node]:
            if dist[node] + 1 < dist[neighbour]:
                dist[neighbour] = dist[node] + 1
                queue.append(neighbour)
    return dist


def format_adjacency(adj: Graph) -> str:
    """Render an adjacency list as one ``node: neighbours`` line per node."""
    return "".join(
        f"{node}:" + "".join(f" {n}" for n in neighbours) + "\n"
        for node, neighbours in enumerate(adj)
    )


def prim_keys(adj: WeightedGraph) -> list[float]:
    """Return the key of each node after growing Prim's tree from node 0.

    A node's key is the weight of the edge that attached it to the tree;
    nodes never reached keep ``math.inf``.
    """
    if not adj:
        return []
    key: list[float] = [math.inf] * len(adj)
    in_tree = [False] * len(adj)
    key[0] = 0
    frontier = [(0, 0)]
    while frontier:
        _, node = heapq.heappop(frontier)
        in_tree[node] = True
        for neighbour, weight in adj[node]:
            if not in_tree[neighbour] and weight < key[neighbour]:
                key[neighbour] = weight
                heapq.heappush(frontier, (weight, neighbour))
    return key