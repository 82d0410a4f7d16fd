"""Chainable accumulator for sampler parameters."""

from bigs.sampler.sampler import Sampler


class SamplerBuilder:
    """Collects sampler parameters and validates them in build().

    Every parameter defaults to 0. Setters return the builder so calls can
    be chained. When a scaling factor is set, build() derives both node
    counts from it and ignores any explicit counts.
    """

    def __init__(self) -> None:
        self._variable_degree = 0
        self._constraint_degree = 0
        self._number_of_variables = 0
        self._number_of_constraints = 0
        self._scaling_factor: int | None = None

    def variable_degree(self, degree: int) -> "SamplerBuilder":
        self._variable_degree = degree
        return self

    def constraint_degree(self, degree: int) -> "SamplerBuilder":
        self._constraint_degree = degree
        return self

    def number_of_variables(self, n: int) -> "SamplerBuilder":
        self._number_of_variables = n
        return self

    def number_of_constraints(self, n: int) -> "SamplerBuilder":
        self._number_of_constraints = n
        return self

    def scaling_factor(self, factor: int) -> "SamplerBuilder":
        self._scaling_factor = factor
        return self

    def build(self) -> Sampler:
        """Build an immutable sampler.

        Raises:
            InvalidParameters: If number_of_variables * variable_degree !=
                number_of_constraints * constraint_degree.
        """
        if self._scaling_factor is not None:
            return Sampler.from_scaling_factor(
                self._variable_degree,
                self._constraint_degree,
                self._scaling_factor,
            )
        return Sampler(
            variable_degree=self._variable_degree,
            constraint_degree=self._constraint_degree,
            number_of_variables=self._number_of_variables,
            number_of_constraints=self._number_of_constraints,
        )

    def __repr__(self) -> str:
        return (
            f"SamplerBuilder(variable_degree={self._variable_degree}, "
            f"constraint_degree={self._constraint_degree}, "
            f"number_of_variables={self._number_of_variables}, "
            f"number_of_constraints={self._number_of_constraints}, "
            f"scaling_factor={self._scaling_factor})"
        )
