"""Run configuration system with frozen, hashable, serializable dataclasses."""

from bigs.config.defaults import DEFAULT_CONFIG
from bigs.config.factory import sampler_from_config
from bigs.config.hashing import config_hash, full_config_hash, sampler_config_hash
from bigs.config.run import RunConfig, SamplerConfig
from bigs.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "DEFAULT_CONFIG",
    "RunConfig",
    "SamplerConfig",
    "config_from_dict",
    "config_from_json",
    "config_hash",
    "config_to_dict",
    "config_to_json",
    "full_config_hash",
    "sampler_config_hash",
    "sampler_from_config",
]
