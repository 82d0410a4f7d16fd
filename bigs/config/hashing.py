"""Config hashes for run identity and for the graph cache key."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from bigs.config.run import RunConfig

# Explicit counts are ignored once a scaling factor is set
SCALED_IGNORED_FIELDS = ("number_of_variables", "number_of_constraints")


def _drop_path(d: dict[str, Any], dotted: str) -> None:
    *parents, leaf = dotted.split(".")
    for key in parents:
        d = d.get(key)
        if not isinstance(d, dict):
            return
    d.pop(leaf, None)


def config_hash(config: Any, exclude_fields: list[str] | None = None) -> str:
    """First 16 hex chars of SHA-256 over the sorted JSON of a dataclass.

    exclude_fields holds dotted paths ("sampler.scaling_factor", "seed")
    left out of the digest.
    """
    d = asdict(config)
    for dotted in exclude_fields or []:
        _drop_path(d, dotted)
    payload = json.dumps(d, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]


def sampler_config_hash(config: RunConfig) -> str:
    """Hash of the fields that decide which graphs can be drawn.

    Seed, tags, description and num_samples are not part of it. With a
    scaling factor the explicit node counts are dropped too, so configs
    that only differ in ignored counts share cache entries.
    """
    exclude = ["seed", "num_samples", "description", "tags"]
    if config.sampler.scaling_factor is not None:
        exclude += [f"sampler.{name}" for name in SCALED_IGNORED_FIELDS]
    return config_hash(config, exclude)


def full_config_hash(config: RunConfig) -> str:
    """Hash of the whole run config, seed included."""
    return config_hash(config)
