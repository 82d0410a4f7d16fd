"""Tests for graph caching by config hash and seed."""

from dataclasses import replace
from pathlib import Path

import pytest

from bigs.config import RunConfig, SamplerConfig, sampler_config_hash, sampler_from_config
from bigs.graph import validate_graph
from bigs.graph.cache import generate_or_load_graph, graph_cache_key, load_graph, save_graph
from bigs.reproducibility import make_rng
from bigs.sampler import InvalidParameters

CONFIG = RunConfig(
    sampler=SamplerConfig(variable_degree=3, constraint_degree=4, scaling_factor=3),
    seed=42,
)


class TestCacheKey:
    """Tests for cache key computation."""

    def test_key_includes_seed_and_hash(self) -> None:
        key = graph_cache_key(CONFIG, 42)
        assert key == f"{sampler_config_hash(CONFIG)}_s42"

    def test_key_differs_for_different_seed(self) -> None:
        assert graph_cache_key(CONFIG, 1) != graph_cache_key(CONFIG, 2)

    def test_key_ignores_non_sampler_params(self) -> None:
        cfg2 = replace(CONFIG, description="run", tags=("a",), num_samples=3)
        assert graph_cache_key(CONFIG, 42) == graph_cache_key(cfg2, 42)

    def test_key_ignores_counts_overridden_by_scaling(self) -> None:
        cfg2 = replace(
            CONFIG,
            sampler=replace(CONFIG.sampler, number_of_variables=7, number_of_constraints=9),
        )
        assert graph_cache_key(CONFIG, 42) == graph_cache_key(cfg2, 42)


class TestSaveLoad:
    """Tests for graph save/load round-trip."""

    def test_save_and_load_roundtrip(self, tmp_path: Path) -> None:
        sampler = sampler_from_config(CONFIG)
        graph = sampler.sample_with(make_rng(42))
        save_graph(graph, CONFIG, 42, tmp_path)

        loaded = load_graph(CONFIG, 42, tmp_path)
        assert loaded is not None
        assert loaded == graph
        assert list(loaded.edges()) == list(graph.edges())

    def test_load_miss_returns_none(self, tmp_path: Path) -> None:
        assert load_graph(CONFIG, 42, tmp_path) is None

    def test_zero_degree_graph_keeps_node_counts(self, tmp_path: Path) -> None:
        cfg = RunConfig(
            sampler=SamplerConfig(
                variable_degree=0,
                constraint_degree=0,
                number_of_variables=4,
                number_of_constraints=2,
            )
        )
        graph = generate_or_load_graph(cfg, 0, tmp_path)
        loaded = load_graph(cfg, 0, tmp_path)
        assert loaded == graph
        assert loaded.number_of_variables() == 4
        assert loaded.number_of_constraints() == 2


class TestGenerateOrLoad:
    """Tests for the cache-aware sampling entry point."""

    def test_miss_then_hit(self, tmp_path: Path) -> None:
        first = generate_or_load_graph(CONFIG, 42, tmp_path)
        assert (tmp_path / graph_cache_key(CONFIG, 42) / "edges.json").exists()

        second = generate_or_load_graph(CONFIG, 42, tmp_path)
        assert second == first
        assert validate_graph(second, sampler_from_config(CONFIG)) == []

    def test_matches_direct_sampling(self, tmp_path: Path) -> None:
        graph = generate_or_load_graph(CONFIG, 7, tmp_path)
        direct = sampler_from_config(CONFIG).sample_with(make_rng(7))
        assert list(graph.edges()) == list(direct.edges())

    def test_invalid_parameters(self, tmp_path: Path) -> None:
        cfg = RunConfig(
            sampler=SamplerConfig(
                variable_degree=3,
                constraint_degree=2,
                number_of_variables=10,
                number_of_constraints=10,
            )
        )
        with pytest.raises(InvalidParameters):
            generate_or_load_graph(cfg, 0, tmp_path)
