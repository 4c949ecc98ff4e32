"""
Graph traversal algorithms: BFS and DFS.

Both traversals are lazy: they return an iterator that expands the frontier
one node per ``next()`` call. They accept either graph representation and
visit neighbors in the order ``graph.neighbors`` reports them, which is
ascending index order for matrix graphs and edge-insertion order for list
graphs. Every node is yielded at most once, so consuming the iterator from
``start`` yields exactly the set of nodes reachable from ``start``.

The start index is validated when the traversal is created, not on the first
``next()`` call.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import Any, Iterator, List, Set, Tuple

from .utils import check_node_index


def bfs(graph: Any, start: int) -> Iterator[int]:
    """
    Breadth-first visitation from a start node.

    Nodes are yielded in non-decreasing distance from ``start``; ties are
    broken by the order in which their edges were discovered.

    Args:
        graph: ListGraph or MatrixGraph.
        start: Index of the start node.

    Returns:
        Lazy iterator over node indices, ``start`` first.

    Raises:
        IndexError: If start is not a node of the graph.

    Complexity: O(V + E) for list graphs, O(V^2) for matrix graphs.

    Example:
        >>> g = DirectedGraph()
        >>> a, b, c = g.add_node("a"), g.add_node("b"), g.add_node("c")
        >>> g.add_edge(a, c)
        >>> g.add_edge(a, b)
        >>> list(bfs(g, a))
        [0, 1, 2]
    """
    start = check_node_index(start, graph.node_count())
    return _bfs(graph, start)


def _bfs(graph: Any, start: int) -> Iterator[int]:
    visited: Set[int] = {start}
    frontier = deque([start])

    while frontier:
        u = frontier.popleft()
        for v in graph.neighbors(u):
            if v not in visited:
                visited.add(v)
                frontier.append(v)
        yield u


def dfs(graph: Any, start: int) -> Iterator[int]:
    """
    Depth-first visitation from a start node.

    Yields nodes in the pre-order of a recursive depth-first walk, exploring
    neighbors in ``graph.neighbors`` order. The walk keeps an explicit stack
    of ``(node, remaining-neighbors)`` frames, so its depth is bounded by
    memory rather than the interpreter's recursion limit.

    Args:
        graph: ListGraph or MatrixGraph.
        start: Index of the start node.

    Returns:
        Lazy iterator over node indices, ``start`` first.

    Raises:
        IndexError: If start is not a node of the graph.

    Complexity: O(V + E) for list graphs, O(V^2) for matrix graphs.
    """
    start = check_node_index(start, graph.node_count())
    return _dfs(graph, start)


def _dfs(graph: Any, start: int) -> Iterator[int]:
    visited: Set[int] = {start}
    yield start
    stack: List[Tuple[int, Iterator[int]]] = [(start, iter(graph.neighbors(start)))]

    while stack:
        _, remaining = stack[-1]
        for v in remaining:
            if v not in visited:
                visited.add(v)
                yield v
                stack.append((v, iter(graph.neighbors(v))))
                break
        else:
            stack.pop()


def reachable(graph: Any, start: int) -> Set[int]:
    """
    Return the set of nodes reachable from ``start``, including ``start``.

    Raises:
        IndexError: If start is not a node of the graph.
    """
    return set(bfs(graph, start))
