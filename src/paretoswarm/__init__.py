"""
paretoswarm: multi-objective particle swarm optimisation (OMOPSO).

Quick start:
    from paretoswarm import OMOPSO, OMOPSOConfig, resolve_objective

    problem = resolve_objective("zdt2", n_var=30)
    cfg = OMOPSOConfig().pop_size(20).n_var(30).generations(50).seed(7).fixed()
    result = OMOPSO(cfg).run(problem)
    print(result.F)
"""

from importlib.metadata import PackageNotFoundError, version

from .engine.algorithm.config import OMOPSOConfig, OMOPSOConfigData
from .engine.algorithm.omopso import OMOPSO, ArchiveSelector, OMOPSOResult, Particle, Swarm
from .engine.config import load_config_file
from .foundation.eval import SerialEvalBackend, ThreadPoolEvalBackend, current_worker_id, resolve_eval_backend
from .foundation.exceptions import ConfigurationError, ParetoSwarmError
from .foundation.io_utils import ArchiveCSVWriter, load_initial_positions
from .foundation.kernel import DominanceRule, calculate_border_rank, calculate_distance, dominated, ranking
from .foundation.logging import configure_paretoswarm_logging
from .foundation.problem import ObjectiveFunctionBase, available_problem_names, resolve_objective

try:
    __version__ = version("paretoswarm")
except PackageNotFoundError:  # pragma: no cover - running from a source tree
    __version__ = "0.0.0"

__all__ = [
    "OMOPSO",
    "OMOPSOConfig",
    "OMOPSOConfigData",
    "OMOPSOResult",
    "ArchiveSelector",
    "Particle",
    "Swarm",
    "load_config_file",
    "SerialEvalBackend",
    "ThreadPoolEvalBackend",
    "current_worker_id",
    "resolve_eval_backend",
    "ConfigurationError",
    "ParetoSwarmError",
    "ArchiveCSVWriter",
    "load_initial_positions",
    "DominanceRule",
    "calculate_border_rank",
    "calculate_distance",
    "dominated",
    "ranking",
    "configure_paretoswarm_logging",
    "ObjectiveFunctionBase",
    "available_problem_names",
    "resolve_objective",
    "__version__",
]
