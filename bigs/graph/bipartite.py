"""Mutable bipartite graph over (variable, constraint) edges.

The graph keeps three structures in sync:

- a list indexed by variable label holding that variable's constraint labels
- a list indexed by constraint label holding that constraint's variable labels
- the set of edges, which is the membership oracle

Ordered sets are plain dicts with None values. They give O(1) membership,
insertion and removal, and iterate in insertion order, so the edge
enumeration order only depends on the sequence of insertions and removals.
Sampling relies on this for reproducibility.
"""

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

import numpy as np
import scipy.sparse

from bigs.graph.types import Edge, Node, NodeKind

if TYPE_CHECKING:
    from bigs.sampler.sampler import Sampler


class Graph:
    """A bipartite graph of variables and constraints.

    Graphs are either sampled through a Sampler or assembled by hand::

        graph = Graph()
        graph.insert_edge(Edge(0, 0))
        graph.insert_edge(Edge(0, 1))
        graph.insert_edge(Edge(1, 2))
        graph.insert_edge(Edge(1, 3))

        graph.number_of_variables()    # 2
        graph.number_of_constraints()  # 4

    Labels are expected to run from 0 to n - 1. Inserting an edge with a
    larger label allocates every node up to that label, and node counts
    never decrease, even when edges are removed.
    """

    def __init__(self) -> None:
        self._variable_neighbors: list[dict[int, None]] = []
        self._constraint_neighbors: list[dict[int, None]] = []
        self._edges: dict[Edge, None] = {}

    @classmethod
    def from_sampler(cls, sampler: "Sampler") -> "Graph":
        """Create an empty graph sized for the sampler's node counts."""
        graph = cls()
        graph._variable_neighbors = [
            {} for _ in range(sampler.number_of_variables)
        ]
        graph._constraint_neighbors = [
            {} for _ in range(sampler.number_of_constraints)
        ]
        return graph

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "Graph":
        """Build a graph by inserting edges in order. Duplicates are ignored."""
        graph = cls()
        for edge in edges:
            graph.insert_edge(edge)
        return graph

    def contains_edge(self, edge: Edge) -> bool:
        return edge in self._edges

    def __contains__(self, edge: object) -> bool:
        return edge in self._edges

    def insert_edge(self, edge: Edge) -> bool:
        """Insert an edge and return True if it was not already in the graph.

        If the edge's variable (or constraint) label is beyond the current
        number of variables (or constraints), the graph grows by the
        difference.

        Raises:
            ValueError: If either label is negative.
        """
        if edge.variable < 0 or edge.constraint < 0:
            raise ValueError(f"Edge labels must be non-negative, got {edge}")
        if edge in self._edges:
            return False
        self._edges[edge] = None
        self._insert_variable(edge)
        self._insert_constraint(edge)
        return True

    def _insert_variable(self, edge: Edge) -> None:
        missing = edge.variable - len(self._variable_neighbors) + 1
        if missing > 0:
            self._variable_neighbors.extend({} for _ in range(missing))
        self._variable_neighbors[edge.variable][edge.constraint] = None

    def _insert_constraint(self, edge: Edge) -> None:
        missing = edge.constraint - len(self._constraint_neighbors) + 1
        if missing > 0:
            self._constraint_neighbors.extend({} for _ in range(missing))
        self._constraint_neighbors[edge.constraint][edge.variable] = None

    def remove_edge(self, edge: Edge) -> bool:
        """Remove an edge and return True if it was in the graph.

        Node counts are left unchanged.
        """
        if edge not in self._edges:
            return False
        del self._edges[edge]
        del self._variable_neighbors[edge.variable][edge.constraint]
        del self._constraint_neighbors[edge.constraint][edge.variable]
        return True

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges in insertion order."""
        return iter(self._edges)

    def number_of_variables(self) -> int:
        """One more than the highest variable label the graph has seen."""
        return len(self._variable_neighbors)

    def number_of_constraints(self) -> int:
        """One more than the highest constraint label the graph has seen."""
        return len(self._constraint_neighbors)

    def number_of_edges(self) -> int:
        return len(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def variables(self) -> Iterator[Node]:
        """Iterate over all variables in increasing label order."""
        for label, neighbors in enumerate(self._variable_neighbors):
            yield Node(label, tuple(neighbors), NodeKind.VARIABLE)

    def constraints(self) -> Iterator[Node]:
        """Iterate over all constraints in increasing label order."""
        for label, neighbors in enumerate(self._constraint_neighbors):
            yield Node(label, tuple(neighbors), NodeKind.CONSTRAINT)

    def variable_degrees(self) -> np.ndarray:
        return np.array(
            [len(n) for n in self._variable_neighbors], dtype=np.int64
        )

    def constraint_degrees(self) -> np.ndarray:
        return np.array(
            [len(n) for n in self._constraint_neighbors], dtype=np.int64
        )

    def to_biadjacency(self) -> scipy.sparse.csr_matrix:
        """Return the 0/1 biadjacency matrix (variables x constraints).

        Row v has a one in column c for every edge (v, c). For a sampled
        graph this is a parity-check matrix with row weight equal to the
        variable degree and column weight equal to the constraint degree.
        """
        n_edges = len(self._edges)
        rows = np.fromiter(
            (e.variable for e in self._edges), dtype=np.int64, count=n_edges
        )
        cols = np.fromiter(
            (e.constraint for e in self._edges), dtype=np.int64, count=n_edges
        )
        data = np.ones(n_edges, dtype=np.int8)
        return scipy.sparse.csr_matrix(
            (data, (rows, cols)),
            shape=(self.number_of_variables(), self.number_of_constraints()),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self.number_of_variables() == other.number_of_variables()
            and self.number_of_constraints() == other.number_of_constraints()
            and self._edges.keys() == other._edges.keys()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Graph(variables={self.number_of_variables()}, "
            f"constraints={self.number_of_constraints()}, "
            f"edges={self.number_of_edges()})"
        )
