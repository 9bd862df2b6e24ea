"""OMOPSO core algorithm implementation.

Multi-objective particle swarm optimisation with a bounded, crowding-thinned
archive of leaders and three-group turbulence (uniform / non-uniform /
untouched mutation). Dominance may be relaxed with epsilon or alpha rules and
constrained problems are ranked feasibility first.

Reference:
    Sierra, M.R. and Coello Coello, C.A. (2005). Improving PSO-based
    multi-objective optimization using crowding, mutation and
    epsilon-dominance. EMO 2005, LNCS 3410, pp. 505-519.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

import numpy as np

from paretoswarm.foundation.eval import resolve_eval_backend
from paretoswarm.foundation.io_utils import ArchiveCSVWriter, load_initial_positions
from paretoswarm.foundation.kernel.dominance import DominanceRule
from paretoswarm.foundation.problem.registry import validate_objective
from .helpers import mutate_swarm, update_swarm
from .selection import ArchiveSelector
from .state import OMOPSOState, Swarm

if TYPE_CHECKING:
    from paretoswarm.engine.algorithm.config import OMOPSOConfigData
    from paretoswarm.foundation.eval import EvaluationBackend
    from paretoswarm.foundation.problem.types import ObjectiveFunction

ArchiveSink = Callable[[Swarm, int], None]

__all__ = ["OMOPSO", "OMOPSOResult", "ArchiveSink"]


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@dataclass
class OMOPSOResult:
    """Outcome of a run: final archive and swarm plus bookkeeping."""

    archive: Swarm
    swarm: Swarm
    generations: int
    timeouts: int
    elapsed: float

    @property
    def X(self) -> np.ndarray:
        return self.archive.position

    @property
    def F(self) -> np.ndarray:
        return self.archive.fitness

    @property
    def G(self) -> np.ndarray | None:
        return self.archive.constraint if self.archive.n_constr > 0 else None


class OMOPSO:
    """Multi-Objective Particle Swarm Optimizer.

    Parameters
    ----------
    config : OMOPSOConfigData
        Validated run configuration (see ``OMOPSOConfig``).

    Examples
    --------
    >>> from paretoswarm import OMOPSO, OMOPSOConfig, resolve_objective
    >>> cfg = OMOPSOConfig().pop_size(20).n_var(30).generations(50).seed(1).fixed()
    >>> problem = resolve_objective("zdt2", n_var=30)
    >>> result = OMOPSO(cfg).run(problem)
    >>> result.F.shape
    (20, 2)
    """

    def __init__(self, config: "OMOPSOConfigData"):
        self.cfg = config
        self._st: OMOPSOState | None = None

    def run(
        self,
        problem: "ObjectiveFunction",
        *,
        sink: ArchiveSink | None = None,
        eval_backend: "EvaluationBackend | None" = None,
        initial_positions: np.ndarray | None = None,
        seed: int | None = None,
    ) -> OMOPSOResult:
        """Run the full generation budget.

        Parameters
        ----------
        problem : ObjectiveFunction
            Objective-function gateway; validated once before the first generation.
        sink : callable, optional
            Receives ``(archive, generation)`` before every generation and once
            after the last. Defaults to CSV output when ``output_dir`` is configured.
        eval_backend : EvaluationBackend, optional
            Evaluation backend; defaults to the configured evaluator.
        initial_positions : np.ndarray, optional
            Seed positions; defaults to ``initial_solutions`` from the config.
        seed : int, optional
            Overrides the configured seed.

        Returns
        -------
        OMOPSOResult
        """
        cfg = self.cfg
        n_obj = cfg.n_obj if cfg.n_obj is not None else int(problem.n_obj)
        validate_objective(problem, n_var=cfg.n_var, n_obj=n_obj, n_constr=cfg.n_constr)
        if initial_positions is None and cfg.initial_solutions:
            initial_positions = load_initial_positions(cfg.initial_solutions)
        if sink is None and cfg.output_dir:
            sink = ArchiveCSVWriter(cfg.output_dir)

        owns_backend = eval_backend is None
        backend = eval_backend or resolve_eval_backend(cfg.evaluator, n_workers=cfg.n_workers, timeout=cfg.timeout)
        rule = DominanceRule(epsilon=cfg.epsilon, alpha=cfg.alpha)
        selector = ArchiveSelector(rule, problem.min_value(), problem.max_value(), capacity=cfg.pop_size)
        seed_seq = np.random.SeedSequence(seed if seed is not None else cfg.seed)
        timeouts_before = getattr(backend, "timeouts", 0)
        start = time.perf_counter()

        _logger().info(
            "OMOPSO: %d particles, %d variables, %d objectives, %d constraints, %d generations, %s dominance.",
            cfg.pop_size,
            cfg.n_var,
            n_obj,
            cfg.n_constr,
            cfg.generations,
            rule.kind,
        )
        try:
            init_rng = np.random.default_rng(seed_seq.spawn(1)[0])
            swarm = Swarm.initialize(cfg.pop_size, cfg.n_var, n_obj, cfg.n_constr, init_rng, initial_positions)
            swarm = backend.evaluate(swarm, problem, generation=None)
            self._st = st = OMOPSOState(swarm=swarm, archive=swarm.copy())

            for generation in range(cfg.generations):
                _logger().info("Generation %d / %d", generation + 1, cfg.generations)
                _emit(sink, st.archive, generation)
                update_rng, mutate_rng = (np.random.default_rng(s) for s in seed_seq.spawn(2))
                swarm = update_swarm(st.swarm, st.archive, update_rng)
                swarm = mutate_swarm(swarm, generation, mutate_rng)
                st.swarm = backend.evaluate(swarm, problem, generation=generation)
                st.archive = selector.select(st.swarm, st.archive)
                st.generation = generation + 1

            _emit(sink, st.archive, cfg.generations)
        finally:
            if owns_backend:
                backend.close()

        st.timeouts = getattr(backend, "timeouts", 0) - timeouts_before
        elapsed = time.perf_counter() - start
        _logger().info("OMOPSO finished %d generations in %.2fs.", st.generation, elapsed)
        return OMOPSOResult(
            archive=st.archive,
            swarm=st.swarm,
            generations=st.generation,
            timeouts=st.timeouts,
            elapsed=elapsed,
        )

    @property
    def state(self) -> OMOPSOState | None:
        """Access current algorithm state."""
        return self._st


def _emit(sink: ArchiveSink | None, archive: Swarm, generation: int) -> None:
    if sink is None:
        return
    try:
        sink(archive, generation)
    except OSError:
        _logger().exception("Could not persist the archive of generation %d.", generation)
