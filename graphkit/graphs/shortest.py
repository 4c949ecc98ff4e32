"""
Shortest path search: Dijkstra's algorithm with a cost cutoff and an
optional early-exit target.

The search reads edges through ``graph.out_edges``, so it runs on matrix
graphs (where only positive cells are edges) as well as on list graphs with
non-negative numeric weights.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from ..logging import get_logger
from .utils import check_node_index, reconstruct_path

logger = get_logger(__name__)


def dijkstra_costs(
    graph: Any,
    start: int,
    max_cost: Optional[float] = None,
    target: Optional[int] = None,
) -> Tuple[Dict[int, Optional[int]], Dict[int, float]]:
    """
    Dijkstra's algorithm returning both the predecessor map and the cost table.

    Args:
        graph: MatrixGraph or ListGraph with non-negative weights.
        start: Source node index.
        max_cost: If given, a relaxation whose new cost exceeds it is
            rejected, bounding the search radius.
        target: If given, the search stops as soon as this node is popped
            from the frontier.

    Returns:
        Tuple of:
        - predecessors: node -> node it was reached from (None for start)
        - costs: node -> best cost found. After an early exit, entries other
          than settled nodes are tentative.

    Raises:
        IndexError: If start or target is not a node of the graph.
        ValueError: If a negative edge weight is encountered.

    Complexity: O(E log V) with a binary heap; O(V^2 log V) on matrix graphs
    because each expansion scans a full row.
    """
    n = graph.node_count()
    start = check_node_index(start, n)
    if target is not None:
        target = check_node_index(target, n)

    predecessors: Dict[int, Optional[int]] = {start: None}
    costs: Dict[int, float] = {start: 0}
    settled: Set[int] = set()

    # Frontier entries are (cost, node); equal costs fall back to node index.
    frontier: List[Tuple[float, int]] = [(0, start)]

    while frontier:
        cost, u = heapq.heappop(frontier)
        if u in settled:
            continue
        settled.add(u)

        if u == target:
            break

        for v, weight in graph.out_edges(u):
            if weight < 0:
                raise ValueError(
                    f"Dijkstra requires non-negative weights. "
                    f"Found negative weight {weight} on edge ({u}, {v})"
                )
            if v in settled:
                continue

            new_cost = cost + weight
            if max_cost is not None and new_cost > max_cost:
                continue
            if v not in costs or new_cost < costs[v]:
                costs[v] = new_cost
                predecessors[v] = u
                heapq.heappush(frontier, (new_cost, v))

    logger.debug(
        "dijkstra from %d settled %d of %d nodes (max_cost=%s, target=%s)",
        start,
        len(settled),
        n,
        max_cost,
        target,
    )
    return predecessors, costs


def dijkstra(
    graph: Any,
    start: int,
    max_cost: Optional[float] = None,
    target: Optional[int] = None,
) -> Dict[int, Optional[int]]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Only strictly cheaper relaxations update a node's entry. Zero cells of a
    matrix graph are missing edges, so only positive weights relax costs.

    Args:
        graph: MatrixGraph or ListGraph with non-negative weights.
        start: Source node index.
        max_cost: Optional search radius; nodes whose cheapest discovered
            cost exceeds it are left out of the result.
        target: Optional node at which to stop once it is settled.

    Returns:
        Predecessor map of every node discovered so far: node -> the node it
        was reached from, with the start node mapped to None.

    Raises:
        IndexError: If start or target is not a node of the graph.
        ValueError: If a negative edge weight is encountered.

    Example:
        >>> g = DirectedWeightedGraph()
        >>> a, b, c = g.add_node("a"), g.add_node("b"), g.add_node("c")
        >>> g.add_edge(a, b, 1)
        >>> g.add_edge(b, c, 2)
        >>> g.add_edge(a, c, 5)
        >>> dijkstra(g, a)
        {0: None, 1: 0, 2: 1}
    """
    predecessors, _ = dijkstra_costs(graph, start, max_cost=max_cost, target=target)
    return predecessors


def path_to(graph: Any, start: int, target: int) -> Optional[List[int]]:
    """
    Shortest path from start to target.

    Runs :func:`dijkstra` with ``target`` as early-exit node and walks the
    predecessor map backwards.

    Returns:
        List of node indices in start -> target order with both endpoints
        included (``[start]`` when start == target), or None when target is
        unreachable.

    Raises:
        IndexError: If start or target is not a node of the graph.
    """
    predecessors = dijkstra(graph, start, target=target)
    return reconstruct_path(predecessors, start, target)


def path_cost(graph: Any, path: Sequence[int]) -> float:
    """
    Sum the edge weights along a path.

    When parallel edges exist (list graphs), the cheapest one is used.

    Args:
        graph: MatrixGraph or ListGraph.
        path: Node indices in travel order.

    Returns:
        Total weight; 0 for a single-node path.

    Raises:
        ValueError: If the path is empty or two consecutive nodes are not
            joined by an edge.
    """
    if not path:
        raise ValueError("path must contain at least one node")
    check_node_index(path[0], graph.node_count())

    total = 0
    for u, v in zip(path, path[1:]):
        weights = [w for t, w in graph.out_edges(u) if t == v]
        if not weights:
            raise ValueError(f"No edge ({u}, {v}) on path {list(path)}")
        total += min(weights)
    return total
