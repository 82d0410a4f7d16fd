"""Regularity checks for sampled bipartite graphs.

A graph is valid for a sampler when:
1. Node counts match the sampler's node counts
2. The edge count equals number_of_variables * variable_degree
3. Every variable has degree variable_degree
4. Every constraint has degree constraint_degree
5. No edge is enumerated twice
"""

import logging
from typing import TYPE_CHECKING

import numpy as np

from bigs.graph.bipartite import Graph

if TYPE_CHECKING:
    from bigs.sampler.sampler import Sampler

log = logging.getLogger(__name__)


def degree_errors(
    degrees: np.ndarray, expected: int, kind: str
) -> list[str]:
    """Report every node whose degree differs from expected.

    Args:
        degrees: Degree of each node, indexed by label.
        expected: Required degree for all nodes of this side.
        kind: "variable" or "constraint", used in messages.

    Returns:
        List of error strings, at most one per offending node.
    """
    bad = np.flatnonzero(degrees != expected)
    return [
        f"{kind.capitalize()} {int(label)} has degree {int(degrees[label])}, "
        f"expected {expected}"
        for label in bad
    ]


def validate_graph(graph: Graph, sampler: "Sampler") -> list[str]:
    """Validate a graph against the regular structure a sampler describes.

    Checks are run cheapest first; degree checks are skipped when the node
    counts already disagree.

    Args:
        graph: Graph to check.
        sampler: Sampler holding the target parameters.

    Returns:
        List of error strings (empty = valid graph).
    """
    errors: list[str] = []

    # 1. Node counts
    if graph.number_of_variables() != sampler.number_of_variables:
        errors.append(
            f"Graph has {graph.number_of_variables()} variables, "
            f"expected {sampler.number_of_variables}"
        )
    if graph.number_of_constraints() != sampler.number_of_constraints:
        errors.append(
            f"Graph has {graph.number_of_constraints()} constraints, "
            f"expected {sampler.number_of_constraints}"
        )

    # 2. Edge count
    if graph.number_of_edges() != sampler.number_of_edges():
        errors.append(
            f"Graph has {graph.number_of_edges()} edges, "
            f"expected {sampler.number_of_edges()}"
        )

    # 3-4. Degrees
    if not errors:
        errors.extend(
            degree_errors(
                graph.variable_degrees(), sampler.variable_degree, "variable"
            )
        )
        errors.extend(
            degree_errors(
                graph.constraint_degrees(),
                sampler.constraint_degree,
                "constraint",
            )
        )

    # 5. Simplicity
    enumerated = list(graph.edges())
    if len(set(enumerated)) != len(enumerated):
        errors.append(
            f"Duplicate edges: {len(enumerated)} enumerated, "
            f"{len(set(enumerated))} distinct"
        )

    if errors:
        log.debug("Graph failed validation with %d errors", len(errors))

    return errors
