"""Human-readable rendering and matrix export of sampled graphs."""

import logging
from pathlib import Path
from typing import Any

import scipy.sparse

from bigs.graph.bipartite import Graph

log = logging.getLogger(__name__)


def format_output(result: dict[str, Any]) -> str:
    """Render an output record as a plain text report."""
    lines = [
        "Random graph",
        "============",
        "",
        f"Number of variables: {result['number_of_variables']}",
        f"Number of constraints: {result['number_of_constraints']}",
        f"Variable degree: {result['variable_degree']}",
        f"Constraint degree: {result['constraint_degree']}",
        f"Rng seed: {result['rng_seed']}",
    ]
    for idx, graph in enumerate(result["graphs"]):
        title = "Graph" if len(result["graphs"]) == 1 else f"Graph {idx}"
        lines += ["", title, "-" * len(title)]
        lines += [f"{v} {c}" for v, c in graph["edges"]]
    return "\n".join(lines) + "\n"


def save_biadjacency(graph: Graph, path: str | Path) -> Path:
    """Save the variables x constraints biadjacency matrix as a scipy .npz."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    scipy.sparse.save_npz(str(path), graph.to_biadjacency())
    log.info("Saved biadjacency matrix to %s", path)
    return path


def load_biadjacency(path: str | Path) -> scipy.sparse.csr_matrix:
    return scipy.sparse.load_npz(str(path)).tocsr()
