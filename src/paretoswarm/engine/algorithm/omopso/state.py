"""Particle and swarm data structures for OMOPSO.

A :class:`Swarm` is a fixed-size arena of particle slots stored as
row-aligned numpy arrays. Evaluation writes one row at a time, so concurrent
workers never share a slot.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from paretoswarm.foundation.exceptions import EvaluationError, ProblemDimensionError
from paretoswarm.foundation.kernel.dominance import constraint_precedence, dominated_constrained
from paretoswarm.foundation.problem.types import split_evaluation

POSITION_RANGE = (0.0, 1.0)
VELOCITY_RANGE = (-0.5, 0.5)

_ARRAY_FIELDS = (
    "position",
    "velocity",
    "fitness",
    "constraint",
    "best_position",
    "best_fitness",
    "best_constraint",
)


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@dataclass(frozen=True)
class Particle:
    """Read-only snapshot of one swarm slot."""

    position: np.ndarray
    velocity: np.ndarray
    fitness: np.ndarray
    constraint_violation: np.ndarray
    best_position: np.ndarray
    best_fitness: np.ndarray
    best_constraint_violation: np.ndarray

    @property
    def feasible(self) -> bool:
        return bool(np.all(self.constraint_violation <= 0.0))


@dataclass
class Swarm:
    """Row-aligned particle arrays; the number of slots never changes."""

    position: np.ndarray
    velocity: np.ndarray
    fitness: np.ndarray
    constraint: np.ndarray
    best_position: np.ndarray
    best_fitness: np.ndarray
    best_constraint: np.ndarray

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls, pop_size: int, n_var: int, n_obj: int, n_constr: int = 0) -> "Swarm":
        """Slots with zero position/velocity and +inf fitness and violation."""
        return cls(
            position=np.zeros((pop_size, n_var)),
            velocity=np.zeros((pop_size, n_var)),
            fitness=np.full((pop_size, n_obj), np.inf),
            constraint=np.full((pop_size, n_constr), np.inf),
            best_position=np.zeros((pop_size, n_var)),
            best_fitness=np.full((pop_size, n_obj), np.inf),
            best_constraint=np.full((pop_size, n_constr), np.inf),
        )

    @classmethod
    def initialize(
        cls,
        pop_size: int,
        n_var: int,
        n_obj: int,
        n_constr: int,
        rng: np.random.Generator,
        initial_positions: np.ndarray | None = None,
    ) -> "Swarm":
        """Random (or seeded) positions in [0, 1], velocities in [-0.5, 0.5].

        Fitness starts at +inf so the first evaluation always becomes the
        personal best. Seeded positions must have ``n_var`` columns and at
        least ``pop_size`` rows; extra rows are ignored.
        """
        swarm = cls.empty(pop_size, n_var, n_obj, n_constr)
        if initial_positions is None:
            swarm.position = rng.random((pop_size, n_var))
        else:
            seeds = np.asarray(initial_positions, dtype=float)
            if seeds.ndim != 2 or seeds.shape[1] != n_var or seeds.shape[0] < pop_size:
                raise ProblemDimensionError(
                    f"Initial positions of shape {seeds.shape} cannot seed {pop_size} particles "
                    f"with {n_var} variables.",
                    n_var=n_var,
                )
            if seeds.shape[0] > pop_size:
                _logger().warning("Using the first %d of %d initial positions.", pop_size, seeds.shape[0])
            swarm.position = np.clip(seeds[:pop_size].copy(), *POSITION_RANGE)
        swarm.velocity = rng.random((pop_size, n_var)) - 0.5
        swarm.best_position = swarm.position.copy()
        return swarm

    # -------------------------------------------------------------------------
    # Shape
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return int(self.position.shape[0])

    @property
    def n_var(self) -> int:
        return int(self.position.shape[1])

    @property
    def n_obj(self) -> int:
        return int(self.fitness.shape[1])

    @property
    def n_constr(self) -> int:
        return int(self.constraint.shape[1])

    # -------------------------------------------------------------------------
    # Value semantics
    # -------------------------------------------------------------------------

    def copy(self) -> "Swarm":
        return Swarm(**{name: getattr(self, name).copy() for name in _ARRAY_FIELDS})

    def take(self, indices: Sequence[int] | np.ndarray) -> "Swarm":
        idx = np.asarray(indices, dtype=int)
        return Swarm(**{name: getattr(self, name)[idx].copy() for name in _ARRAY_FIELDS})

    def concat(self, other: "Swarm") -> "Swarm":
        return Swarm(
            **{name: np.concatenate([getattr(self, name), getattr(other, name)], axis=0) for name in _ARRAY_FIELDS}
        )

    def with_motion(self, position: np.ndarray, velocity: np.ndarray) -> "Swarm":
        """New swarm with the given position/velocity clamped to their ranges."""
        moved = self.copy()
        moved.position = np.clip(np.asarray(position, dtype=float), *POSITION_RANGE)
        moved.velocity = np.clip(np.asarray(velocity, dtype=float), *VELOCITY_RANGE)
        return moved

    def particle(self, index: int) -> Particle:
        return Particle(
            position=self.position[index].copy(),
            velocity=self.velocity[index].copy(),
            fitness=self.fitness[index].copy(),
            constraint_violation=self.constraint[index].copy(),
            best_position=self.best_position[index].copy(),
            best_fitness=self.best_fitness[index].copy(),
            best_constraint_violation=self.best_constraint[index].copy(),
        )

    def restore_slots(self, indices: Sequence[int] | np.ndarray, source: "Swarm") -> None:
        idx = np.asarray(indices, dtype=int)
        for name in _ARRAY_FIELDS:
            getattr(self, name)[idx] = getattr(source, name)[idx]

    # -------------------------------------------------------------------------
    # Per-slot evaluation (writes row ``index`` only)
    # -------------------------------------------------------------------------

    def evaluate_one(self, index: int, problem: Any) -> None:
        """Evaluate slot ``index`` through the objective function and refresh its personal best."""
        result = problem.evaluate(self.position[index].copy())
        fitness, violation = split_evaluation(result, self.n_constr)
        if fitness.shape != (self.n_obj,) or violation.shape != (self.n_constr,):
            raise EvaluationError(
                f"Objective function returned {fitness.size} objective(s) and {violation.size} "
                f"constraint(s); expected {self.n_obj} and {self.n_constr}.",
                solution=self.position[index].copy(),
            )
        self.fitness[index] = fitness
        self.constraint[index] = violation
        self.update_best(index)

    def update_best(self, index: int) -> bool:
        """Overwrite the personal best of slot ``index`` when the current state is at least as good.

        Single objective: strictly smaller fitness (after the feasibility
        layer). Multi objective: the current fitness is not dominated by the
        stored best under the constrained Pareto rule.
        """
        fitness = self.fitness[index]
        violation = self.constraint[index]
        best_fitness = self.best_fitness[index]
        best_violation = self.best_constraint[index]
        if self.n_obj == 1:
            decided = constraint_precedence(violation, best_violation)
            better = decided if decided is not None else bool(fitness[0] < best_fitness[0])
        else:
            better = not dominated_constrained(best_fitness, fitness, best_violation, violation)
        if better:
            self.best_position[index] = self.position[index]
            self.best_fitness[index] = fitness
            self.best_constraint[index] = violation
        return better


@dataclass
class OMOPSOState:
    """Mutable loop state of one OMOPSO run."""

    swarm: Swarm
    archive: Swarm
    generation: int = 0
    timeouts: int = 0

__all__ = [
    "POSITION_RANGE",
    "VELOCITY_RANGE",
    "Particle",
    "Swarm",
    "OMOPSOState",
]
