"""
Utility functions for graph algorithms.

Provides helpers for node index validation, grouping of component labels,
and path reconstruction from predecessor maps.
"""

import operator
from typing import Dict, Iterable, List, Mapping, Optional


def check_node_index(idx: int, node_count: int) -> int:
    """
    Validate a node index against the current node count.

    Args:
        idx: Candidate node index (any object supporting ``__index__``,
            so numpy integers are accepted).
        node_count: Number of nodes currently in the graph.

    Returns:
        The index as a plain ``int``.

    Raises:
        TypeError: If idx is not an integer.
        IndexError: If idx is outside ``[0, node_count)``.

    Example:
        >>> check_node_index(2, 3)
        2
    """
    i = operator.index(idx)
    if i < 0 or i >= node_count:
        raise IndexError(
            f"Node index {i} out of range for graph with {node_count} nodes"
        )
    return i


def group_components(labels: Iterable[int]) -> Dict[int, List[int]]:
    """
    Group node indices by component label.

    Args:
        labels: Per-node component labels, e.g. the output of ``tarjan``.

    Returns:
        Dictionary mapping label -> ascending list of node indices carrying
        that label. Keys appear in order of first occurrence.

    Example:
        >>> group_components([0, 0, 2, 2, 2, 5, 0])
        {0: [0, 1, 6], 2: [2, 3, 4], 5: [5]}
    """
    groups: Dict[int, List[int]] = {}
    for node, label in enumerate(labels):
        groups.setdefault(label, []).append(node)
    return groups


def reconstruct_path(
    predecessors: Mapping[int, Optional[int]], start: int, target: int
) -> Optional[List[int]]:
    """
    Reconstruct the path from start to target using a predecessor map.

    The map should come from a shortest-path search such as ``dijkstra``,
    where ``predecessors[node]`` is the node it was reached from and the
    start node maps to None.

    Args:
        predecessors: Dictionary mapping node -> previous node (or None).
        start: Node the search started from.
        target: Node to reconstruct the path to.

    Returns:
        List of nodes from start to target (both inclusive), or None if the
        chain from target breaks before reaching start.

    Example:
        >>> reconstruct_path({0: None, 1: 0, 2: 1}, 0, 2)
        [0, 1, 2]
        >>> reconstruct_path({0: None, 1: 0}, 0, 3) is None
        True
    """
    if target not in predecessors:
        return None

    path = [target]
    current = target
    seen = {target}
    while current != start:
        previous = predecessors.get(current)
        if previous is None or previous in seen:
            return None
        seen.add(previous)
        path.append(previous)
        current = previous

    path.reverse()
    return path
