"""
Adjacency-list graph representation.

Each node stores its payload value and an ordered list of outgoing edges.
Node insertion is O(1) amortized, which makes this form the better fit for
sparse graphs. Directedness is fixed by the class: ``DirectedListGraph``
appends a single record per ``add_edge`` call, ``UndirectedListGraph`` appends
the reciprocal record as well.

Re-adding an existing edge appends a duplicate record; algorithms treat
parallel edges as independent (Dijkstra uses the cheapest).
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Iterator, List, NamedTuple, Tuple

from ..diagnostics.core import assert_symmetric
from ..diagnostics.debug_mode import is_debug_enabled
from .scc import tarjan
from .traversal import bfs, dfs
from .utils import check_node_index


class Edge(NamedTuple):
    """Outgoing edge record: the edge weight and the destination index."""

    weight: Any
    target: int


@dataclass
class Node:
    """A node payload together with its outgoing edges in insertion order."""

    value: Any
    edges: List[Edge] = field(default_factory=list)


class ListGraph:
    """
    Base class for adjacency-list graphs.

    Use :class:`DirectedListGraph` or :class:`UndirectedListGraph`; the base
    class has no ``add_edge``.

    Complexity:
        - add_node: O(1) amortized
        - add_edge: O(1) amortized
        - edges / neighbors: O(deg(v))
        - has_edge: O(deg(v))
    """

    directed: ClassVar[bool]

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def add_node(self, value: Any = None) -> int:
        """
        Append a node and return its index.

        Args:
            value: Arbitrary payload stored with the node.

        Returns:
            The new node's index (indices are issued sequentially from 0).
        """
        self._nodes.append(Node(value))
        return len(self._nodes) - 1

    def _check(self, idx: int) -> int:
        return check_node_index(idx, len(self._nodes))

    def node_count(self) -> int:
        """Return the number of nodes."""
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, idx: int) -> Node:
        return self._nodes[self._check(idx)]

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def nodes(self) -> List[Node]:
        """Return the nodes in index order."""
        return list(self._nodes)

    def node_value(self, idx: int) -> Any:
        """Return the payload stored at ``idx``."""
        return self._nodes[self._check(idx)].value

    def edges(self, idx: int) -> List[Edge]:
        """
        Return the outgoing edges of a node in insertion order.

        Raises:
            IndexError: If idx is not a node of this graph.
        """
        return list(self._nodes[self._check(idx)].edges)

    def neighbors(self, idx: int) -> List[int]:
        """Return destination indices of the outgoing edges, in insertion order."""
        return [edge.target for edge in self._nodes[self._check(idx)].edges]

    def out_edges(self, idx: int) -> List[Tuple[int, Any]]:
        """Return ``(target, weight)`` pairs of the outgoing edges."""
        return [(edge.target, edge.weight) for edge in self._nodes[self._check(idx)].edges]

    def has_edge(self, a: int, b: int) -> bool:
        """Return True if at least one edge a -> b exists."""
        b = self._check(b)
        return any(edge.target == b for edge in self._nodes[self._check(a)].edges)

    def edge_count(self) -> int:
        """Return the number of stored edge records."""
        return sum(len(node.edges) for node in self._nodes)

    def bfs(self, start: int) -> Iterator[int]:
        """Lazy breadth-first visitation from ``start`` (see ``traversal.bfs``)."""
        return bfs(self, start)

    def dfs(self, start: int) -> Iterator[int]:
        """Lazy depth-first visitation from ``start`` (see ``traversal.dfs``)."""
        return dfs(self, start)

    def sccs(self) -> List[int]:
        """Strongly connected component labels (see ``scc.tarjan``)."""
        return tarjan(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={len(self._nodes)}, "
            f"edges={self.edge_count()})"
        )


class DirectedListGraph(ListGraph):
    """Adjacency-list graph whose edges are one-way."""

    directed = True

    def add_edge(self, source: int, target: int, weight: Any = 1) -> None:
        """
        Append the edge source -> target.

        Args:
            source: Index of the tail node.
            target: Index of the head node.
            weight: Edge weight (default 1).

        Raises:
            IndexError: If either index is not a node of this graph.
        """
        source = self._check(source)
        target = self._check(target)
        self._nodes[source].edges.append(Edge(weight, target))


class UndirectedListGraph(ListGraph):
    """Adjacency-list graph where every edge is stored in both directions."""

    directed = False

    def add_edge(self, a: int, b: int, weight: Any = 1) -> None:
        """
        Append the edges a -> b and b -> a with the same weight.

        Both indices are validated before either record is written.

        Raises:
            IndexError: If either index is not a node of this graph.
        """
        a = self._check(a)
        b = self._check(b)
        self._nodes[a].edges.append(Edge(weight, b))
        self._nodes[b].edges.append(Edge(weight, a))

        if is_debug_enabled():
            assert_symmetric(self)
