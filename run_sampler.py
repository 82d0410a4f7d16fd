#!/usr/bin/env python3
"""Entry point for sampling random regular bipartite graphs.

Usage:
    python run_sampler.py -v 3 -c 5 -n 10 -m 6
    python run_sampler.py -v 3 -c 5 -k 4 --rngseed 42 --output graph.json
    python run_sampler.py --config config.json --verbose
    python run_sampler.py --config config.json --dry-run
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from dacite import DaciteError

from bigs.config import (
    RunConfig,
    SamplerConfig,
    config_from_json,
    full_config_hash,
    sampler_from_config,
)
from bigs.graph import validate_graph
from bigs.graph.cache import generate_or_load_graph
from bigs.reproducibility import make_rng, resolve_seed
from bigs.results import build_output, format_output, save_biadjacency, write_output
from bigs.sampler import InvalidParameters

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that logs stage start and elapsed time."""
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    log.info("Completed: %s in %.3fs", name, time.monotonic() - t0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bigs",
        description="The BIpartite Graph Sampler: random regular bipartite graphs",
    )
    parser.add_argument(
        "-v", "--vardegree",
        type=int,
        default=3,
        help="Number of constraints connected to each variable (default: 3)",
    )
    parser.add_argument(
        "-c", "--constdegree",
        type=int,
        default=3,
        help="Number of variables connected to each constraint (default: 3)",
    )
    parser.add_argument(
        "-n", "--numvar",
        type=int,
        default=3,
        help="Number of variables in the graph (default: 3)",
    )
    parser.add_argument(
        "-m", "--numconst",
        type=int,
        default=3,
        help="Number of constraints in the graph (default: 3)",
    )
    parser.add_argument(
        "-k", "--scaling-factor",
        type=int,
        default=None,
        help="Derive counts as n = c * k and m = v * k (overrides -n and -m)",
    )
    parser.add_argument(
        "-r", "--rngseed",
        type=int,
        default=None,
        help="Seed for the random generator; a random seed is used and "
        "reported otherwise. Same seed and version give the same graph.",
    )
    parser.add_argument(
        "-s", "--samples",
        type=int,
        default=1,
        help="Number of graphs to draw from the same generator (default: 1)",
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Save the result as JSON at this path instead of printing it",
    )
    parser.add_argument(
        "--biadjacency",
        type=str,
        default=None,
        help="Also save the first graph's biadjacency matrix as .npz",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a run config JSON file (replaces the parameter flags)",
    )
    parser.add_argument(
        "--cache-dir",
        type=str,
        default=None,
        help="Reuse graphs cached by parameters and seed (single sample only)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate parameters and show the plan without sampling",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> RunConfig:
    """Load the run config from --config, or assemble it from flags."""
    if args.config is not None:
        config_path = Path(args.config)
        log.info("Config loaded from %s", config_path)
        return config_from_json(config_path.read_text())
    return RunConfig(
        sampler=SamplerConfig(
            variable_degree=args.vardegree,
            constraint_degree=args.constdegree,
            number_of_variables=args.numvar,
            number_of_constraints=args.numconst,
            scaling_factor=args.scaling_factor,
        ),
        seed=args.rngseed,
        num_samples=args.samples,
    )


def report_invalid_parameters(error: InvalidParameters) -> None:
    print("Can't build a regular graph since n * v != m * c.", file=sys.stderr)
    print(f"n = {error.number_of_variables} (number of variables)", file=sys.stderr)
    print(f"v = {error.variable_degree} (variable's degree)", file=sys.stderr)
    print(
        f"m = {error.number_of_constraints} (number of constraints)",
        file=sys.stderr,
    )
    print(f"c = {error.constraint_degree} (constraint's degree)", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except FileNotFoundError:
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        return 1
    except (ValueError, DaciteError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        sampler = sampler_from_config(config)
    except InvalidParameters as error:
        report_invalid_parameters(error)
        return 1

    if args.cache_dir is not None and config.num_samples != 1:
        print("Error: --cache-dir requires a single sample", file=sys.stderr)
        return 1

    seed = resolve_seed(config.seed)
    log.info("Config hash: %s", full_config_hash(config))
    log.info("Seed: %d", seed)

    if args.dry_run:
        print(
            f"Sampler: n={sampler.number_of_variables}, "
            f"m={sampler.number_of_constraints}, "
            f"v={sampler.variable_degree}, c={sampler.constraint_degree}, "
            f"edges={sampler.number_of_edges()}"
        )
        print(f"Seed:    {seed}")
        print(f"Samples: {config.num_samples}")
        print("[dry-run] Parameters are valid. Exiting.")
        return 0

    try:
        with stage_timer("Sampling"):
            if args.cache_dir is not None:
                graphs = [generate_or_load_graph(config, seed, Path(args.cache_dir))]
            else:
                graphs = list(sampler.sample_many(make_rng(seed), config.num_samples))

        for idx, graph in enumerate(graphs):
            errors = validate_graph(graph, sampler)
            if errors:
                log.warning(
                    "Graph %d failed validation: %s", idx, "; ".join(errors)
                )

        result = build_output(graphs, sampler, seed, config)
        if args.output is not None:
            write_output(result, args.output)
            print(f"Saved output to {args.output}")
        else:
            print(format_output(result), end="")

        if args.biadjacency is not None:
            save_biadjacency(graphs[0], args.biadjacency)
    except Exception:
        log.exception("Sampling failed")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
