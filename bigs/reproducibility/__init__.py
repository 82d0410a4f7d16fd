"""Reproducibility infrastructure: seed resolution and generator construction."""

from bigs.reproducibility.seed import (
    MAX_SEED,
    make_rng,
    resolve_seed,
    verify_seed_determinism,
)

__all__ = [
    "MAX_SEED",
    "make_rng",
    "resolve_seed",
    "verify_seed_determinism",
]
