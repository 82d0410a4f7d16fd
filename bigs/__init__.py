"""BIpartite Graph Sampler: random regular bipartite graphs.

A bipartite graph here is a set of variables and constraints (named after
SAT problems) together with a set of (variable, constraint) edges. Only
regular graphs are sampled: every variable has the same degree and every
constraint has the same degree.
"""

from bigs.graph import Edge, Graph
from bigs.sampler import InvalidParameters, Sampler

__all__ = ["Edge", "Graph", "InvalidParameters", "Sampler"]
