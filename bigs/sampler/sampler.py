"""Immutable description of a regular bipartite graph to sample."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from bigs.graph.bipartite import Graph
from bigs.sampler.engine import SampleEngine
from bigs.sampler.errors import InvalidParameters

if TYPE_CHECKING:
    from bigs.sampler.builder import SamplerBuilder


@dataclass(frozen=True, slots=True)
class Sampler:
    """Parameters of a regular bipartite graph, validated at construction.

    Every variable gets variable_degree constraints and every constraint gets
    constraint_degree variables. A sampler holds no random state, so the
    same instance can draw any number of independent graphs::

        sampler = (
            Sampler.builder()
            .number_of_variables(10)
            .number_of_constraints(6)
            .variable_degree(3)
            .constraint_degree(5)
            .build()
        )
        graph = sampler.sample_with(np.random.default_rng(42))

    Raises:
        InvalidParameters: If the variable and constraint stub counts differ
            or any value is negative.
    """

    variable_degree: int
    constraint_degree: int
    number_of_variables: int
    number_of_constraints: int

    def __post_init__(self) -> None:
        values = (
            self.variable_degree,
            self.constraint_degree,
            self.number_of_variables,
            self.number_of_constraints,
        )
        if (
            min(values) < 0
            or self.number_of_variables * self.variable_degree
            != self.number_of_constraints * self.constraint_degree
        ):
            raise InvalidParameters(
                number_of_variables=self.number_of_variables,
                number_of_constraints=self.number_of_constraints,
                variable_degree=self.variable_degree,
                constraint_degree=self.constraint_degree,
            )

    @staticmethod
    def builder() -> "SamplerBuilder":
        """Return a fresh builder with every parameter set to 0."""
        from bigs.sampler.builder import SamplerBuilder

        return SamplerBuilder()

    @classmethod
    def from_scaling_factor(
        cls, variable_degree: int, constraint_degree: int, scaling_factor: int
    ) -> "Sampler":
        """Derive both node counts from a shared scaling factor.

        number_of_variables = constraint_degree * scaling_factor and
        number_of_constraints = variable_degree * scaling_factor, which
        balances the stub counts by construction.
        """
        return cls(
            variable_degree=variable_degree,
            constraint_degree=constraint_degree,
            number_of_variables=constraint_degree * scaling_factor,
            number_of_constraints=variable_degree * scaling_factor,
        )

    def number_of_edges(self) -> int:
        """Total stub count on either side: n * v, equal to m * c."""
        return self.number_of_variables * self.variable_degree

    def admits_simple_graph(self) -> bool:
        """Whether a graph without repeated edges exists for these parameters.

        Each variable needs variable_degree distinct constraints and each
        constraint needs constraint_degree distinct variables.
        """
        return (
            self.variable_degree <= self.number_of_constraints
            and self.constraint_degree <= self.number_of_variables
        )

    def sample_with(self, rng: np.random.Generator) -> Graph:
        """Sample one graph, drawing all randomness from rng.

        Two generators in the same state produce equal graphs with the same
        edge enumeration order. Balanced parameters for which no simple
        graph exists (see admits_simple_graph) never finish.
        """
        return SampleEngine(self, rng).run()

    def sample_many(
        self, rng: np.random.Generator, count: int
    ) -> Iterator[Graph]:
        """Yield count graphs drawn one after the other from rng."""
        for _ in range(count):
            yield self.sample_with(rng)
