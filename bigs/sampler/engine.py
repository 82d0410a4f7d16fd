"""Configuration-model sampling with double edge swap repair.

One SampleEngine produces one graph:

1. Build a stub array per side: each variable label repeated
   variable_degree times, each constraint label repeated constraint_degree
   times.
2. Shuffle the variable stubs, then the constraint stubs, in place.
3. Zip the two arrays into a FIFO queue of candidate edges.
4. Pop candidates. A new edge is inserted directly. A duplicate is placed
   through a double edge swap with the first existing edge (in graph
   enumeration order) whose swapped halves are both absent. When no such
   edge exists the candidate goes to the back of the queue and is retried
   once more of the graph is filled in.

Each insertion or swap adds exactly one edge and preserves every node's
remaining stub budget, so the final graph is regular and simple. The
number of requeues is not bounded: when variable_degree exceeds
number_of_constraints (or constraint_degree exceeds number_of_variables)
no simple graph exists and the loop never drains.
"""

import logging
from collections import deque
from typing import TYPE_CHECKING

import numpy as np

from bigs.graph.bipartite import Graph
from bigs.graph.types import Edge

if TYPE_CHECKING:
    from bigs.sampler.sampler import Sampler

log = logging.getLogger(__name__)


def build_stubs(
    number_of_nodes: int, degree: int, rng: np.random.Generator
) -> np.ndarray:
    """Return each label in range(number_of_nodes) repeated degree times, shuffled."""
    stubs = np.repeat(np.arange(number_of_nodes, dtype=np.int64), degree)
    rng.shuffle(stubs)
    return stubs


def swap(first: Edge, second: Edge) -> tuple[Edge, Edge]:
    """Exchange the constraint endpoints of two edges."""
    return (
        Edge(first.variable, second.constraint),
        Edge(second.variable, first.constraint),
    )


def find_edge_to_swap(target: Edge, graph: Graph) -> Edge | None:
    """Return the first edge whose swap with target creates two new edges."""
    for edge in graph.edges():
        first, second = swap(target, edge)
        if not graph.contains_edge(first) and not graph.contains_edge(second):
            return edge
    return None


class SampleEngine:
    """Single-use state for drawing one graph from a sampler."""

    def __init__(self, sampler: "Sampler", rng: np.random.Generator) -> None:
        if not sampler.admits_simple_graph():
            log.warning(
                "No simple graph has %d variables of degree %d and %d "
                "constraints of degree %d; sampling will not terminate",
                sampler.number_of_variables,
                sampler.variable_degree,
                sampler.number_of_constraints,
                sampler.constraint_degree,
            )
        self.sampler = sampler
        self.graph = Graph.from_sampler(sampler)
        self.candidates = self._candidate_edges(rng)
        self.n_collisions = 0
        self.n_swaps = 0
        self.n_requeues = 0

    def _candidate_edges(self, rng: np.random.Generator) -> deque[Edge]:
        variables = build_stubs(
            self.sampler.number_of_variables, self.sampler.variable_degree, rng
        )
        constraints = build_stubs(
            self.sampler.number_of_constraints,
            self.sampler.constraint_degree,
            rng,
        )
        return deque(
            Edge(variable, constraint)
            for variable, constraint in zip(
                variables.tolist(), constraints.tolist()
            )
        )

    def run(self) -> Graph:
        """Drain the candidate queue and return the completed graph."""
        while self.candidates:
            edge = self.candidates.popleft()
            if self.graph.contains_edge(edge):
                self.n_collisions += 1
                self._swap_or_requeue(edge)
            else:
                self.graph.insert_edge(edge)

        log.debug(
            "Sampled graph (variables=%d, constraints=%d, edges=%d): "
            "collisions=%d, swaps=%d, requeues=%d",
            self.graph.number_of_variables(),
            self.graph.number_of_constraints(),
            self.graph.number_of_edges(),
            self.n_collisions,
            self.n_swaps,
            self.n_requeues,
        )
        return self.graph

    def _swap_or_requeue(self, edge: Edge) -> None:
        partner = find_edge_to_swap(edge, self.graph)
        if partner is None:
            self.n_requeues += 1
            self.candidates.append(edge)
            return
        self.graph.remove_edge(partner)
        first, second = swap(edge, partner)
        self.graph.insert_edge(first)
        self.graph.insert_edge(second)
        self.n_swaps += 1
