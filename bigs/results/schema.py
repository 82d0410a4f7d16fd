"""Output record construction, validation, writing and loading.

Uses a Python validation function (not jsonschema) to check required
fields, types and edge counts before writing output JSON files.
"""

import json
import logging
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from bigs.config.hashing import full_config_hash
from bigs.config.run import RunConfig
from bigs.graph.bipartite import Graph
from bigs.graph.types import Edge
from bigs.results.run_id import generate_run_id
from bigs.sampler.sampler import Sampler

log = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"

REQUIRED_FIELDS = {
    "schema_version",
    "run_id",
    "timestamp",
    "number_of_variables",
    "number_of_constraints",
    "variable_degree",
    "constraint_degree",
    "rng_seed",
    "graphs",
}

INT_FIELDS = (
    "number_of_variables",
    "number_of_constraints",
    "variable_degree",
    "constraint_degree",
    "rng_seed",
)


def graph_to_dict(graph: Graph) -> dict[str, Any]:
    """Edges as [variable, constraint] pairs in enumeration order."""
    return {"edges": [[e.variable, e.constraint] for e in graph.edges()]}


def build_output(
    graphs: list[Graph],
    sampler: Sampler,
    seed: int,
    config: RunConfig | None = None,
) -> dict[str, Any]:
    """Assemble the output record for one run.

    Args:
        graphs: Graphs drawn during the run, in draw order.
        sampler: Sampler the graphs were drawn from.
        seed: Seed of the generator used for the run.
        config: Optional run config, stored with its hash.

    Returns:
        JSON-serializable dict.
    """
    result: dict[str, Any] = {
        "schema_version": SCHEMA_VERSION,
        "run_id": generate_run_id(sampler, seed),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "number_of_variables": sampler.number_of_variables,
        "number_of_constraints": sampler.number_of_constraints,
        "variable_degree": sampler.variable_degree,
        "constraint_degree": sampler.constraint_degree,
        "rng_seed": seed,
        "graphs": [graph_to_dict(g) for g in graphs],
    }
    if config is not None:
        result["config"] = asdict(config)
        result["config_hash"] = full_config_hash(config)
    return result


def validate_output(result: dict[str, Any]) -> list[str]:
    """Validate an output dict against the schema.

    Returns a list of error strings. An empty list means the output is valid.

    Checks:
    - All required fields are present
    - Parameter fields are integers
    - timestamp is ISO 8601
    - Each graph has the expected number of in-range, distinct edges
    """
    errors: list[str] = []

    missing = REQUIRED_FIELDS - set(result.keys())
    if missing:
        errors.append(f"Missing required fields: {sorted(missing)}")

    for name in INT_FIELDS:
        if name in result and not isinstance(result[name], int):
            errors.append(f"{name} must be an integer")

    if "timestamp" in result:
        ts = result["timestamp"]
        if not isinstance(ts, str):
            errors.append("timestamp must be a string")
        else:
            try:
                datetime.fromisoformat(ts)
            except ValueError:
                errors.append("timestamp must be in ISO 8601 format")

    if "graphs" in result and not isinstance(result["graphs"], list):
        errors.append("graphs must be a list")

    if errors:
        return errors

    n = result["number_of_variables"]
    m = result["number_of_constraints"]
    expected_edges = n * result["variable_degree"]

    for idx, graph in enumerate(result["graphs"]):
        edges = graph.get("edges") if isinstance(graph, dict) else None
        if not isinstance(edges, list):
            errors.append(f"graphs[{idx}].edges must be a list")
            continue
        if len(edges) != expected_edges:
            errors.append(
                f"graphs[{idx}] has {len(edges)} edges, expected {expected_edges}"
            )
        seen: set[tuple[int, int]] = set()
        for pair in edges:
            if not (isinstance(pair, list) and len(pair) == 2):
                errors.append(f"graphs[{idx}] has malformed edge {pair!r}")
                break
            v, c = pair
            if not (isinstance(v, int) and isinstance(c, int)):
                errors.append(f"graphs[{idx}] edge {pair!r} has non-integer labels")
                break
            if not (0 <= v < n and 0 <= c < m):
                errors.append(f"graphs[{idx}] edge {pair} out of range")
                break
            seen.add((v, c))
        else:
            if len(seen) != len(edges):
                errors.append(f"graphs[{idx}] has duplicate edges")

    return errors


def write_output(result: dict[str, Any], path: str | Path) -> Path:
    """Validate and write an output record as JSON.

    Raises:
        ValueError: If the output fails validation.
    """
    errors = validate_output(result)
    if errors:
        raise ValueError(
            "Output validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        )

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(result, f, indent=2)

    log.info("Saved output to %s", path)
    return path


def load_output(path: str | Path) -> dict[str, Any]:
    """Load and validate an output JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the loaded output fails validation.
    """
    path = Path(path)
    with open(path) as f:
        result = json.load(f)

    errors = validate_output(result)
    if errors:
        raise ValueError(
            f"Output validation failed for {path}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    return result


def graph_from_output(result: dict[str, Any], index: int = 0) -> Graph:
    """Rebuild a graph from an output record, preserving edge order.

    The graph is pre-sized to the recorded node counts, so isolated nodes
    (zero degree) are kept.
    """
    sampler = Sampler(
        variable_degree=result["variable_degree"],
        constraint_degree=result["constraint_degree"],
        number_of_variables=result["number_of_variables"],
        number_of_constraints=result["number_of_constraints"],
    )
    graph = Graph.from_sampler(sampler)
    for v, c in result["graphs"][index]["edges"]:
        graph.insert_edge(Edge(v, c))
    return graph
