"""
Adjacency-matrix graph representation.

The graph is logically an N x N row-major matrix of non-negative integer
weights where 0 means "no edge". Cells live in a square numpy buffer whose
capacity doubles on demand; the logical matrix is its leading N x N block and
every cell outside that block is kept at 0, so growing the node set never
touches existing cells.

Four variants fix directedness and weighting at construction time:

==========================  ========  ========  ==========================
class                       directed  weighted  add_edge signature
==========================  ========  ========  ==========================
UndirectedGraph             no        no        add_edge(x, y)
DirectedGraph               yes       no        add_edge(x, y)
UndirectedWeightedGraph     no        yes       add_edge(x, y, weight)
DirectedWeightedGraph       yes       yes       add_edge(x, y, weight)
==========================  ========  ========  ==========================

Zero-weight edges cannot be represented: weight 0 is indistinguishable from a
missing edge, so inserting one raises ValueError.
"""

import operator
from typing import ClassVar, Dict, Hashable, Iterator, List, Optional, Tuple, Type

import numpy as np

from ..diagnostics.core import assert_symmetric
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .scc import tarjan
from .shortest import dijkstra, path_to
from .traversal import bfs, dfs
from .utils import check_node_index

logger = get_logger(__name__)


def _check_weight(weight: int) -> int:
    try:
        w = operator.index(weight)
    except TypeError:
        raise TypeError(
            f"Edge weight must be an integer, got {type(weight).__name__}"
        ) from None
    if w < 1:
        raise ValueError(
            f"Edge weight must be >= 1 (0 is reserved for 'no edge'), got {w}"
        )
    return w


class MatrixGraph:
    """
    Base class for adjacency-matrix graphs.

    Nodes carry hashable values; ``index_of`` maps a value back to the most
    recent node inserted with it.

    Complexity:
        - add_node: O(N) amortized (capacity doubling of the N x N buffer)
        - add_edge / has_edge / edge_weight: O(1)
        - edges / neighbors: O(N)
        - transpose: O(N^2)
    """

    directed: ClassVar[bool]
    weighted: ClassVar[bool]

    _INITIAL_CAPACITY: ClassVar[int] = 4

    def __init__(self) -> None:
        self._n = 0
        self._buffer = np.zeros((0, 0), dtype=np.int64)
        self._values: List[Hashable] = []
        self._index: Dict[Hashable, int] = {}

    def add_node(self, value: Hashable = None) -> int:
        """
        Append a node and return its index.

        The new row and column start at 0; previously stored cells are left
        unchanged. A value already present is re-pointed at the new index.

        Args:
            value: Hashable payload stored with the node.

        Returns:
            The new node's index.
        """
        n = self._n
        if n == self._buffer.shape[0]:
            capacity = max(self._INITIAL_CAPACITY, 2 * n)
            grown = np.zeros((capacity, capacity), dtype=np.int64)
            grown[:n, :n] = self._buffer[:n, :n]
            self._buffer = grown

        self._index[value] = n
        self._values.append(value)
        self._n = n + 1
        return n

    def _check(self, idx: int) -> int:
        return check_node_index(idx, self._n)

    def _set_weight(self, x: int, y: int, weight: int) -> None:
        x = self._check(x)
        y = self._check(y)
        weight = _check_weight(weight)
        self._buffer[x, y] = weight
        if not self.directed:
            self._buffer[y, x] = weight
            if is_debug_enabled():
                assert_symmetric(self)

    def node_count(self) -> int:
        """Return the number of nodes."""
        return self._n

    def __len__(self) -> int:
        return self._n

    def node_value(self, idx: int) -> Hashable:
        """Return the value stored at ``idx``."""
        return self._values[self._check(idx)]

    def values(self) -> List[Hashable]:
        """Return node values in index order."""
        return list(self._values)

    def index_of(self, value: Hashable) -> Optional[int]:
        """Return the index registered for ``value``, or None."""
        return self._index.get(value)

    def edges(self, idx: int) -> List[int]:
        """
        Return the full row of weights for a node.

        Entry j is the weight of idx -> j, or 0 when there is no such edge.

        Raises:
            IndexError: If idx is not a node of this graph.
        """
        i = self._check(idx)
        return self._buffer[i, : self._n].tolist()

    def neighbors(self, idx: int) -> List[int]:
        """Return destinations of the outgoing edges in ascending index order."""
        i = self._check(idx)
        return np.flatnonzero(self._buffer[i, : self._n]).tolist()

    def out_edges(self, idx: int) -> List[Tuple[int, int]]:
        """Return ``(target, weight)`` pairs in ascending target order."""
        i = self._check(idx)
        row = self._buffer[i, : self._n]
        return [(int(j), int(row[j])) for j in np.flatnonzero(row)]

    def has_edge(self, x: int, y: int) -> bool:
        """Return True if the edge x -> y exists."""
        return bool(self._buffer[self._check(x), self._check(y)] > 0)

    def edge_count(self) -> int:
        """Return the number of non-zero cells."""
        return int(np.count_nonzero(self._buffer[: self._n, : self._n]))

    def matrix(self) -> np.ndarray:
        """Return a copy of the N x N weight matrix."""
        return self._buffer[: self._n, : self._n].copy()

    def cells(self) -> List[int]:
        """Return the weight matrix flattened in row-major order."""
        return self._buffer[: self._n, : self._n].ravel().tolist()

    def transpose(self) -> None:
        """
        Reverse every edge in place by swapping cell (x, y) with (y, x).

        Applying it twice restores the original matrix; on an undirected
        graph the matrix is symmetric and nothing changes.
        """
        block = self._buffer[: self._n, : self._n]
        block[...] = block.T.copy()
        logger.debug("transposed %s with %d nodes", type(self).__name__, self._n)

    def bfs(self, start: int) -> Iterator[int]:
        """Lazy breadth-first visitation from ``start`` (see ``traversal.bfs``)."""
        return bfs(self, start)

    def dfs(self, start: int) -> Iterator[int]:
        """Lazy depth-first visitation from ``start`` (see ``traversal.dfs``)."""
        return dfs(self, start)

    def sccs(self) -> List[int]:
        """Strongly connected component labels (see ``scc.tarjan``)."""
        return tarjan(self)

    def dijkstra(
        self,
        start: int,
        max_cost: Optional[int] = None,
        target: Optional[int] = None,
    ) -> Dict[int, Optional[int]]:
        """Predecessor map of a Dijkstra search (see ``shortest.dijkstra``)."""
        return dijkstra(self, start, max_cost=max_cost, target=target)

    def path_to(self, start: int, target: int) -> Optional[List[int]]:
        """Shortest path from start to target (see ``shortest.path_to``)."""
        return path_to(self, start, target)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self._n}, edges={self.edge_count()})"
        )


class UndirectedGraph(MatrixGraph):
    """Undirected, unweighted adjacency-matrix graph."""

    directed = False
    weighted = False

    def add_edge(self, x: int, y: int) -> None:
        """Connect x and y in both directions with weight 1."""
        self._set_weight(x, y, 1)


class DirectedGraph(MatrixGraph):
    """Directed, unweighted adjacency-matrix graph."""

    directed = True
    weighted = False

    def add_edge(self, x: int, y: int) -> None:
        """Add the edge x -> y with weight 1."""
        self._set_weight(x, y, 1)


class WeightedMatrixGraph(MatrixGraph):
    """Common base of the weighted variants; adds ``edge_weight``."""

    weighted = True

    def edge_weight(self, x: int, y: int) -> int:
        """Return the weight of x -> y, or 0 when there is no such edge."""
        return int(self._buffer[self._check(x), self._check(y)])


class UndirectedWeightedGraph(WeightedMatrixGraph):
    """Undirected, weighted adjacency-matrix graph."""

    directed = False

    def add_edge(self, x: int, y: int, weight: int) -> None:
        """
        Connect x and y in both directions, overwriting any previous weight.

        Raises:
            IndexError: If either index is not a node of this graph.
            TypeError: If weight is not an integer.
            ValueError: If weight is less than 1.
        """
        self._set_weight(x, y, weight)


class DirectedWeightedGraph(WeightedMatrixGraph):
    """Directed, weighted adjacency-matrix graph."""

    directed = True

    def add_edge(self, x: int, y: int, weight: int) -> None:
        """
        Set the weight of x -> y, overwriting any previous weight.

        Raises:
            IndexError: If either index is not a node of this graph.
            TypeError: If weight is not an integer.
            ValueError: If weight is less than 1.
        """
        self._set_weight(x, y, weight)


_VARIANTS: Dict[Tuple[bool, bool], Type[MatrixGraph]] = {
    (False, False): UndirectedGraph,
    (True, False): DirectedGraph,
    (False, True): UndirectedWeightedGraph,
    (True, True): DirectedWeightedGraph,
}


def make_matrix_graph(directed: bool = False, weighted: bool = False) -> MatrixGraph:
    """
    Create an empty matrix graph of the requested variant.

    Args:
        directed: Whether edges are one-way.
        weighted: Whether ``add_edge`` takes an explicit weight.

    Returns:
        An instance of one of the four variant classes.

    Example:
        >>> g = make_matrix_graph(directed=True)
        >>> type(g).__name__
        'DirectedGraph'
    """
    return _VARIANTS[(bool(directed), bool(weighted))]()


def transpose(graph: MatrixGraph) -> None:
    """Reverse every edge of ``graph`` in place (see ``MatrixGraph.transpose``)."""
    graph.transpose()
