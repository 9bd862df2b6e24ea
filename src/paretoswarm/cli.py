from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, Sequence

from paretoswarm.engine.algorithm.config import EVALUATORS, OMOPSOConfigData
from paretoswarm.engine.algorithm.omopso import OMOPSO
from paretoswarm.engine.config import load_config_file
from paretoswarm.foundation.exceptions import ConfigurationError, DataError, MissingConfigError
from paretoswarm.foundation.io_utils import write_metadata, write_timing
from paretoswarm.foundation.logging import configure_paretoswarm_logging
from paretoswarm.foundation.problem import get_problem_specs, resolve_objective

CONFIG_ERROR_EXIT = 2

# argparse destination -> configuration key
_RUN_OPTIONS = {
    "problem": "problem",
    "n_var": "n_var",
    "n_obj": "n_obj",
    "n_constr": "n_constr",
    "pop_size": "pop_size",
    "generations": "generations",
    "epsilon": "epsilon",
    "alpha": "alpha",
    "evaluator": "evaluator",
    "workers": "n_workers",
    "timeout": "timeout",
    "seed": "seed",
    "initial_solutions": "initial_solutions",
    "output_dir": "output_dir",
}


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _probability(raw: str) -> float:
    value = float(raw)
    if not 0.0 <= value < 1.0:
        raise argparse.ArgumentTypeError("must be within [0, 1).")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="paretoswarm", description="Multi-objective particle swarm optimizer.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Run OMOPSO on a registered objective function.")
    run.add_argument("--config", help="JSON or YAML file with run parameters; flags override it.")
    run.add_argument("--problem", help="Objective function name (see 'paretoswarm problems').")
    run.add_argument("--n-var", type=int, help="Number of decision variables.")
    run.add_argument("--n-obj", type=int, help="Number of objectives (scalable functions only).")
    run.add_argument("--n-constr", type=int, help="Number of constraints.")
    run.add_argument("--pop-size", type=int, help="Number of particles (also the archive size).")
    run.add_argument("--generations", type=int, help="Number of generations.")
    run.add_argument("--epsilon", type=_probability, help="Epsilon-dominance relaxation in [0, 1).")
    run.add_argument("--alpha", type=_probability, help="Alpha-dominance relaxation in [0, 1).")
    run.add_argument("--evaluator", choices=EVALUATORS, help="Evaluation backend.")
    run.add_argument("--workers", type=int, help="Worker threads for the 'threads' evaluator.")
    run.add_argument("--timeout", type=float, help="Seconds to wait for one evaluation phase.")
    run.add_argument("--seed", type=int, help="Random seed (runs are reproducible only with a seed).")
    run.add_argument("--initial-solutions", help="CSV of seed positions (one header row).")
    run.add_argument("--output-dir", help="Directory for per-generation archive CSV files.")
    run.add_argument("--plot", action="store_true", help="Save a Pareto front plot to the output directory.")

    sub.add_parser("problems", help="List registered objective functions.")
    return parser


def _merge_run_options(args: argparse.Namespace) -> Dict[str, Any]:
    data: Dict[str, Any] = dict(load_config_file(args.config)) if args.config else {}
    for dest, key in _RUN_OPTIONS.items():
        value = getattr(args, dest, None)
        if value is not None:
            data[key] = value
    return data


def _run(args: argparse.Namespace) -> int:
    data = _merge_run_options(args)
    name = data.get("problem")
    if not name:
        raise MissingConfigError("problem", "OMOPSO")
    problem = resolve_objective(
        name,
        n_var=data.get("n_var"),
        n_obj=data.get("n_obj"),
        n_constr=data.get("n_constr"),
    )
    for key in ("n_var", "n_obj", "n_constr"):
        if data.get(key) is None:
            data[key] = getattr(problem, key)
    cfg = OMOPSOConfigData.from_dict(data)

    result = OMOPSO(cfg).run(problem)
    print(
        f"{name}: {result.generations} generations, archive of {result.archive.position.shape[0]} particles, "
        f"{result.timeouts} timed-out evaluation phase(s), {result.elapsed:.2f}s."
    )
    if cfg.output_dir:
        write_metadata(
            cfg.output_dir,
            {"problem": name, "generations": result.generations, "timeouts": result.timeouts},
            cfg.to_dict(),
        )
        write_timing(cfg.output_dir, result.elapsed * 1000.0)
        if args.plot:
            from paretoswarm.ux.plotting import plot_archive_front

            plot_archive_front(result.F, output_dir=cfg.output_dir, title=f"Pareto front - {name}")
    elif args.plot:
        _logger().warning("--plot needs --output-dir; skipping plot.")
    return 0


def _problems() -> int:
    for key, spec in get_problem_specs().items():
        constr = f", {spec.n_constr} constraints" if spec.n_constr else ""
        print(f"{key:<12} {spec.label} ({spec.default_n_obj} objectives{constr}): {spec.description}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    configure_paretoswarm_logging(level=level)
    if args.command == "problems":
        return _problems()
    try:
        return _run(args)
    except (ConfigurationError, DataError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return CONFIG_ERROR_EXIT


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
