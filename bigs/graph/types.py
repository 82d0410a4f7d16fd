"""Value types for bipartite graphs: edges and read-only node views."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class Edge:
    """A (variable, constraint) pair.

    Variables and constraints are disjoint node sets, so an edge may use
    the same label on both sides. Labels are stored as given; whether they
    are in range depends on the graph the edge is used with.
    """

    variable: int
    constraint: int


class NodeKind(Enum):
    VARIABLE = "variable"
    CONSTRAINT = "constraint"


@dataclass(frozen=True, slots=True)
class Node:
    """Snapshot of one node produced by Graph.variables() / Graph.constraints().

    neighbors holds the labels of the nodes on the other side, in the order
    the corresponding edges were inserted.
    """

    label: int
    neighbors: tuple[int, ...]
    kind: NodeKind

    @property
    def degree(self) -> int:
        return len(self.neighbors)

    def has_neighbor(self, label: int) -> bool:
        return label in self.neighbors

    def is_variable(self) -> bool:
        return self.kind is NodeKind.VARIABLE

    def is_constraint(self) -> bool:
        return self.kind is NodeKind.CONSTRAINT
