"""Tests for regularity validation of bipartite graphs."""

import numpy as np

from bigs.graph import Edge, Graph, degree_errors, validate_graph
from bigs.sampler import Sampler


def _sampler() -> Sampler:
    return Sampler(
        variable_degree=2,
        constraint_degree=1,
        number_of_variables=2,
        number_of_constraints=4,
    )


class TestDegreeErrors:
    """Per-node degree checks."""

    def test_no_errors_when_regular(self) -> None:
        assert degree_errors(np.array([3, 3, 3]), 3, "variable") == []

    def test_reports_each_bad_node(self) -> None:
        errors = degree_errors(np.array([3, 2, 4]), 3, "constraint")
        assert len(errors) == 2
        assert "Constraint 1 has degree 2" in errors[0]
        assert "Constraint 2 has degree 4" in errors[1]


class TestValidateGraph:
    """validate_graph against hand-built graphs."""

    def test_valid_hand_built_graph(self) -> None:
        graph = Graph.from_edges(
            [Edge(0, 0), Edge(0, 1), Edge(1, 2), Edge(1, 3)]
        )
        assert validate_graph(graph, _sampler()) == []

    def test_irregular_graph_reports_degrees(self) -> None:
        graph = Graph.from_edges(
            [Edge(0, 0), Edge(0, 1), Edge(0, 2), Edge(1, 3)]
        )
        errors = validate_graph(graph, _sampler())
        assert any("Variable 0 has degree 3" in e for e in errors)
        assert any("Variable 1 has degree 1" in e for e in errors)

    def test_wrong_edge_count(self) -> None:
        graph = Graph.from_edges([Edge(0, 0), Edge(1, 3)])
        errors = validate_graph(graph, _sampler())
        assert any("2 edges, expected 4" in e for e in errors)

    def test_wrong_node_counts(self) -> None:
        graph = Graph.from_edges([Edge(0, 0), Edge(0, 1), Edge(1, 2)])
        errors = validate_graph(graph, _sampler())
        assert any("3 constraints, expected 4" in e for e in errors)

    def test_sampled_graph_is_valid(self) -> None:
        sampler = Sampler.from_scaling_factor(3, 4, 5)
        graph = sampler.sample_with(np.random.default_rng(11))
        assert validate_graph(graph, sampler) == []
