"""Regular bipartite graph sampling: parameters, builder and sample engine."""

from bigs.sampler.builder import SamplerBuilder
from bigs.sampler.engine import SampleEngine, build_stubs, find_edge_to_swap, swap
from bigs.sampler.errors import InvalidParameters
from bigs.sampler.sampler import Sampler

__all__ = [
    "InvalidParameters",
    "SampleEngine",
    "Sampler",
    "SamplerBuilder",
    "build_stubs",
    "find_edge_to_swap",
    "swap",
]
