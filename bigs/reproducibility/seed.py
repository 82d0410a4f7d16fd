"""Seed management for reproducible sampling.

All randomness of a sampling run comes from one numpy Generator. Seeding
two generators identically reproduces the same graphs, edge order
included.
"""

import logging

import numpy as np

log = logging.getLogger(__name__)

# Seeds are kept within a signed 64-bit range so they survive JSON round
# trips and command line parsing unchanged.
MAX_SEED = 2**63 - 1


def resolve_seed(seed: int | None) -> int:
    """Return seed unchanged, or draw a fresh one from OS entropy when None.

    Args:
        seed: Requested seed, or None for a fresh one.

    Returns:
        A non-negative seed to report alongside the run's output.
    """
    if seed is not None:
        return seed
    fresh = int(np.random.SeedSequence().generate_state(1, dtype=np.uint64)[0])
    fresh &= MAX_SEED
    log.info("No seed given, drew seed %d", fresh)
    return fresh


def make_rng(seed: int) -> np.random.Generator:
    """Create the generator used for one sampling run."""
    return np.random.default_rng(seed)


def verify_seed_determinism(seed: int, size: int = 100) -> bool:
    """Check that two generators seeded alike shuffle identically.

    This is the self-test behind reproducible sampling: sampling only
    consumes the generator through in-place shuffles.
    """
    first = np.arange(size)
    second = np.arange(size)
    make_rng(seed).shuffle(first)
    make_rng(seed).shuffle(second)
    return bool(np.array_equal(first, second))
