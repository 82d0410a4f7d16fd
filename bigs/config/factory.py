"""Turn configuration records into samplers."""

from bigs.config.run import RunConfig, SamplerConfig
from bigs.sampler.builder import SamplerBuilder
from bigs.sampler.sampler import Sampler


def sampler_from_config(config: RunConfig | SamplerConfig) -> Sampler:
    """Build a sampler from a run config or its sampler section.

    Raises:
        InvalidParameters: If the parameters cannot describe a regular graph.
    """
    params = config.sampler if isinstance(config, RunConfig) else config
    builder = (
        SamplerBuilder()
        .variable_degree(params.variable_degree)
        .constraint_degree(params.constraint_degree)
        .number_of_variables(params.number_of_variables)
        .number_of_constraints(params.number_of_constraints)
    )
    if params.scaling_factor is not None:
        builder.scaling_factor(params.scaling_factor)
    return builder.build()
