"""Run ID generation with scannable parameter slug format."""

from datetime import datetime, timezone

from bigs.sampler.sampler import Sampler


def generate_run_id(sampler: Sampler, seed: int) -> str:
    """Generate a scannable run ID from sampler parameters and seed.

    Format: v{variable_degree}_c{constraint_degree}_n{n}_m{m}_s{seed}_{YYYYMMDD}_{HHMMSS}
    Example: v3_c5_n10_m6_s42_20260224_143012
    """
    ts = datetime.now(timezone.utc)
    return (
        f"v{sampler.variable_degree}"
        f"_c{sampler.constraint_degree}"
        f"_n{sampler.number_of_variables}"
        f"_m{sampler.number_of_constraints}"
        f"_s{seed}"
        f"_{ts.strftime('%Y%m%d_%H%M%S')}"
    )
