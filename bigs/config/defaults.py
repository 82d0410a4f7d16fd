"""Default run configuration, matching the command line defaults."""

from bigs.config.run import RunConfig

# 3 variables of degree 3 and 3 constraints of degree 3, fresh seed per run.
DEFAULT_CONFIG = RunConfig()
