"""Run configuration dataclasses, all frozen and slotted for immutability."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class SamplerConfig:
    """Regular bipartite graph parameters.

    When scaling_factor is set, the node counts are derived from it and
    the explicit counts are ignored.
    """

    variable_degree: int = 3  # constraints per variable
    constraint_degree: int = 3  # variables per constraint
    number_of_variables: int = 3
    number_of_constraints: int = 3
    scaling_factor: int | None = None

    def __post_init__(self) -> None:
        for name in (
            "variable_degree",
            "constraint_degree",
            "number_of_variables",
            "number_of_constraints",
        ):
            if getattr(self, name) < 0:
                raise ValueError(
                    f"{name} must be non-negative, got {getattr(self, name)}"
                )
        if self.scaling_factor is not None and self.scaling_factor < 0:
            raise ValueError(
                f"scaling_factor must be non-negative, got {self.scaling_factor}"
            )


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Top-level configuration of a sampling run.

    seed=None means a fresh seed is drawn at run time and reported with the
    output so the run can be reproduced.
    """

    sampler: SamplerConfig = field(default_factory=SamplerConfig)
    seed: int | None = None
    num_samples: int = 1
    description: str = ""
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.num_samples < 1:
            raise ValueError(
                f"num_samples must be >= 1, got {self.num_samples}"
            )
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative, got {self.seed}")
