"""
Strongly connected components: Tarjan's algorithm.

A single depth-first pass assigns each node a discovery index and a low-link
value; a node whose low-link equals its discovery index is the root of a
component, and everything above it on the component stack belongs to that
component. The depth-first walk runs on an explicit stack of
``(node, remaining-neighbors)`` frames, so deep graphs do not hit the
interpreter's recursion limit.

References:
    - Tarjan, R. E. "Depth-first search and linear graph algorithms",
      SIAM Journal on Computing 1(2), 1972.
"""

from typing import Any, Iterator, List, Tuple

from ..logging import get_logger
from .utils import group_components

logger = get_logger(__name__)


def tarjan(graph: Any) -> List[int]:
    """
    Label every node with the root of its strongly connected component.

    Two nodes share a label if and only if they belong to the same
    component. The label is the index of the component's root node (the
    first node of the component reached by the walk), not a sequential
    component id.

    Args:
        graph: ListGraph or MatrixGraph. Undirected graphs are accepted; their
            components are the connected components.

    Returns:
        List where entry i is the label of node i.

    Complexity: O(V + E) for list graphs, O(V^2) for matrix graphs.

    Example:
        >>> g = DirectedGraph()
        >>> for v in "abcde":
        ...     _ = g.add_node(v)
        >>> for x, y in [(1, 0), (0, 2), (2, 1), (0, 3), (3, 4)]:
        ...     g.add_edge(x, y)
        >>> tarjan(g)
        [0, 0, 0, 3, 4]
    """
    n = graph.node_count()
    discovery = [-1] * n
    low = [0] * n
    on_stack = [False] * n
    stack: List[int] = []
    labels = [-1] * n
    counter = 0

    for root in range(n):
        if discovery[root] != -1:
            continue

        discovery[root] = low[root] = counter
        counter += 1
        stack.append(root)
        on_stack[root] = True
        frames: List[Tuple[int, Iterator[int]]] = [(root, iter(graph.neighbors(root)))]

        while frames:
            v, remaining = frames[-1]
            for w in remaining:
                if discovery[w] == -1:
                    discovery[w] = low[w] = counter
                    counter += 1
                    stack.append(w)
                    on_stack[w] = True
                    frames.append((w, iter(graph.neighbors(w))))
                    break
                if on_stack[w]:
                    low[v] = min(low[v], discovery[w])
            else:
                frames.pop()
                if frames:
                    parent = frames[-1][0]
                    low[parent] = min(low[parent], low[v])

                if low[v] == discovery[v]:
                    while True:
                        w = stack.pop()
                        on_stack[w] = False
                        labels[w] = v
                        if w == v:
                            break

    logger.debug("tarjan: %d nodes, %d components", n, len(set(labels)))
    return labels


def strongly_connected_components(graph: Any) -> List[List[int]]:
    """
    Return the strongly connected components as lists of node indices.

    Components are ordered by their smallest member; members are ascending.
    """
    return list(group_components(tarjan(graph)).values())
