"""Tests for the run_sampler command line entry point."""

import json
from pathlib import Path

from bigs.config import RunConfig, SamplerConfig, config_to_json
from bigs.results import graph_from_output, load_output
from run_sampler import main


class TestCli:
    """End-to-end runs through main(argv)."""

    def test_prints_text_report(self, capsys):
        code = main(["-v", "3", "-c", "5", "-n", "10", "-m", "6", "-r", "42"])
        out = capsys.readouterr().out
        assert code == 0
        assert "Random graph" in out
        assert "Number of variables: 10" in out
        assert "Rng seed: 42" in out

    def test_invalid_parameters_reported(self, capsys):
        code = main(["-v", "3", "-c", "2", "-n", "10", "-m", "10"])
        err = capsys.readouterr().err
        assert code == 1
        assert "n * v != m * c" in err
        assert "n = 10" in err
        assert "v = 3" in err
        assert "c = 2" in err

    def test_writes_json_output(self, tmp_path: Path):
        out_path = tmp_path / "graph.json"
        code = main(["-v", "3", "-c", "5", "-k", "2", "-r", "7", "-o", str(out_path)])
        assert code == 0
        result = load_output(out_path)
        assert result["rng_seed"] == 7
        assert result["number_of_variables"] == 10
        assert graph_from_output(result).number_of_edges() == 30

    def test_same_seed_same_output(self, tmp_path: Path):
        a, b = tmp_path / "a.json", tmp_path / "b.json"
        main(["-v", "4", "-c", "4", "-n", "8", "-m", "8", "-r", "3", "-o", str(a)])
        main(["-v", "4", "-c", "4", "-n", "8", "-m", "8", "-r", "3", "-o", str(b)])
        assert load_output(a)["graphs"] == load_output(b)["graphs"]

    def test_multiple_samples(self, tmp_path: Path):
        out_path = tmp_path / "graphs.json"
        code = main(["-k", "2", "-s", "3", "-r", "1", "-o", str(out_path)])
        assert code == 0
        assert len(load_output(out_path)["graphs"]) == 3

    def test_config_file(self, tmp_path: Path):
        config_path = tmp_path / "config.json"
        config_path.write_text(
            config_to_json(
                RunConfig(
                    sampler=SamplerConfig(
                        variable_degree=2,
                        constraint_degree=4,
                        number_of_variables=8,
                        number_of_constraints=4,
                    ),
                    seed=11,
                )
            )
        )
        out_path = tmp_path / "graph.json"
        code = main(["--config", str(config_path), "-o", str(out_path)])
        assert code == 0
        result = load_output(out_path)
        assert result["variable_degree"] == 2
        assert result["rng_seed"] == 11

    def test_missing_config_file(self, tmp_path: Path, capsys):
        code = main(["--config", str(tmp_path / "nope.json")])
        assert code == 1
        assert "not found" in capsys.readouterr().err

    def test_malformed_config_file(self, tmp_path: Path, capsys):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"sampler": {"bogus": 1}}))
        code = main(["--config", str(config_path)])
        assert code == 1

    def test_dry_run(self, capsys):
        code = main(["-k", "3", "-r", "5", "--dry-run"])
        out = capsys.readouterr().out
        assert code == 0
        assert "[dry-run]" in out
        assert "edges=27" in out

    def test_biadjacency_export(self, tmp_path: Path):
        npz = tmp_path / "h.npz"
        code = main(["-k", "2", "-r", "1", "-o", str(tmp_path / "g.json"),
                     "--biadjacency", str(npz)])
        assert code == 0
        assert npz.exists()

    def test_cache_dir(self, tmp_path: Path):
        cache = tmp_path / "cache"
        args = ["-k", "2", "-r", "4", "--cache-dir", str(cache),
                "-o", str(tmp_path / "g.json")]
        assert main(args) == 0
        assert any(cache.iterdir())
        assert main(args) == 0

    def test_cache_dir_requires_single_sample(self, tmp_path: Path):
        code = main(["-s", "2", "--cache-dir", str(tmp_path)])
        assert code == 1
