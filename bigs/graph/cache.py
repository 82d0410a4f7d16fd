"""Graph caching by config hash and seed.

Sampling is deterministic given the sampler parameters and the seed, so a
graph drawn once can be reloaded instead of resampled. Dense parameter
sets make the swap repair loop slow, which is where the cache pays off.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from bigs.config.factory import sampler_from_config
from bigs.config.hashing import sampler_config_hash
from bigs.config.run import RunConfig
from bigs.graph.bipartite import Graph
from bigs.graph.types import Edge
from bigs.reproducibility.seed import make_rng
from bigs.sampler.sampler import Sampler

log = logging.getLogger(__name__)

DEFAULT_CACHE_DIR = Path(".cache/graphs")


def graph_cache_key(config: RunConfig, seed: int) -> str:
    """Compute cache key for a graph configuration.

    Key = sampler_config_hash + seed. Description, tags and num_samples
    don't affect the key.

    Returns:
        Cache key string like "a1b2c3d4e5f6g7h8_s42".
    """
    return f"{sampler_config_hash(config)}_s{seed}"


def _cache_path(config: RunConfig, seed: int, cache_dir: Path) -> Path:
    return cache_dir / graph_cache_key(config, seed)


def save_graph(
    graph: Graph,
    config: RunConfig,
    seed: int,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> Path:
    """Save a sampled graph to the cache.

    Stores:
    - edges.json: [variable, constraint] pairs in enumeration order
    - metadata.json: node counts, degrees, seed, config hash

    Returns:
        Path to the cache directory for this graph.
    """
    cache_path = _cache_path(config, seed, cache_dir)
    cache_path.mkdir(parents=True, exist_ok=True)

    with open(cache_path / "edges.json", "w") as f:
        json.dump([[e.variable, e.constraint] for e in graph.edges()], f)

    metadata = {
        "number_of_variables": graph.number_of_variables(),
        "number_of_constraints": graph.number_of_constraints(),
        "variable_degree": config.sampler.variable_degree,
        "constraint_degree": config.sampler.constraint_degree,
        "config_hash": sampler_config_hash(config),
        "seed": seed,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    with open(cache_path / "metadata.json", "w") as f:
        json.dump(metadata, f, indent=2)

    log.info("Graph cached at %s", cache_path)
    return cache_path


def load_graph(
    config: RunConfig, seed: int, cache_dir: Path = DEFAULT_CACHE_DIR
) -> Graph | None:
    """Load a cached graph, or return None on a cache miss."""
    cache_path = _cache_path(config, seed, cache_dir)

    for fname in ("edges.json", "metadata.json"):
        if not (cache_path / fname).exists():
            return None

    with open(cache_path / "metadata.json") as f:
        metadata = json.load(f)
    with open(cache_path / "edges.json") as f:
        pairs = json.load(f)

    # Pre-size so zero-degree nodes survive the round trip
    graph = Graph.from_sampler(
        Sampler(
            variable_degree=metadata["variable_degree"],
            constraint_degree=metadata["constraint_degree"],
            number_of_variables=metadata["number_of_variables"],
            number_of_constraints=metadata["number_of_constraints"],
        )
    )
    for v, c in pairs:
        graph.insert_edge(Edge(v, c))

    log.info("Graph loaded from cache: %s", cache_path)
    return graph


def generate_or_load_graph(
    config: RunConfig,
    seed: int,
    cache_dir: Path = DEFAULT_CACHE_DIR,
) -> Graph:
    """Sample a graph or load it from the cache if available.

    On cache miss the graph is drawn with make_rng(seed) and saved.

    Raises:
        InvalidParameters: If the config cannot describe a regular graph.
    """
    sampler = sampler_from_config(config)
    key = graph_cache_key(config, seed)

    cached = load_graph(config, seed, cache_dir)
    if cached is not None:
        log.info("Cache hit for %s", key)
        return cached

    log.info("Cache miss for %s, sampling...", key)
    graph = sampler.sample_with(make_rng(seed))
    save_graph(graph, config, seed, cache_dir)
    return graph
