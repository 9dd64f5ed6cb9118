"""Uninformed path search over a fixed 12-node weighted graph."""

from hellodemo.queue import Queue

# Adjacency matrix; a non-zero entry is the weight of an edge.
GRAPH: tuple[tuple[int, ...], ...] = (
    (0, 4, 0, 12, 0, 0, 0, 0, 0, 0, 0, 0),
    (4, 0, 8, 0, 15, 0, 0, 0, 0, 0, 0, 0),
    (0, 8, 0, 0, 0, 10, 0, 0, 0, 0, 0, 0),
    (12, 0, 0, 0, 2, 0, 7, 0, 0, 0, 0, 0),
    (0, 15, 0, 2, 0, 6, 0, 9, 0, 0, 0, 0),
    (0, 0, 10, 0, 6, 0, 0, 0, 9, 0, 0, 0),
    (0, 0, 0, 7, 0, 0, 0, 3, 0, 5, 0, 0),
    (0, 0, 0, 0, 9, 0, 3, 0, 0, 0, 17, 0),
    (0, 0, 0, 0, 0, 9, 0, 0, 0, 0, 0, 14),
    (0, 0, 0, 0, 0, 0, 5, 0, 0, 0, 8, 0),
    (0, 0, 0, 0, 0, 0, 0, 17, 0, 8, 0, 10),
    (0, 0, 0, 0, 0, 0, 0, 0, 14, 0, 10, 0),
)

HEURISTICS: tuple[int, ...] = (5, 13, 20, 7, 15, 10, 6, 10, 5, 13, 4, 0)


def _check_node(node: int) -> None:
    if not 0 <= node < len(GRAPH):
        raise IndexError(f"node {node} is not in the graph")


def bfs(start: int, end: int) -> list[int]:
    """Breadth-first search; return the node path from start to end, or []."""
    _check_node(start)
    frontier = Queue([[start]])
    while frontier:
        path = frontier.pop_front()
        current = path[-1]
        if current == end:
            return path
        for neighbour, weight in enumerate(GRAPH[current]):
            if weight and neighbour not in path:
                frontier.push_back([*path, neighbour])
    return []


def dfs(start: int, end: int) -> list[int]:
    """Depth-first search; return the node path from start to end, or [].

    Neighbours are numbered while walking each matrix row from its last
    column to its first.
    """
    _check_node(start)
    stack = [[start]]
    while stack:
        path = stack.pop()
        current = path[-1]
        if current == end:
            return path
        for neighbour, weight in enumerate(reversed(GRAPH[current])):
            if weight and neighbour not in path:
                stack.append([*path, neighbour])
    return []