"""Bipartite graph module: edges, node views, the graph itself and validation.

The on-disk cache lives in bigs.graph.cache and is imported explicitly,
since it depends on the sampler and config packages.
"""

from bigs.graph.bipartite import Graph
from bigs.graph.types import Edge, Node, NodeKind
from bigs.graph.validation import degree_errors, validate_graph

__all__ = [
    "Edge",
    "Graph",
    "Node",
    "NodeKind",
    "degree_errors",
    "validate_graph",
]
