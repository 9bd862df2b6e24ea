"""OMOPSO helper functions.

This module contains the per-generation swarm transformations:
- Leader selection from the first rank of the archive
- Velocity and position update
- Three-group turbulence (uniform / non-uniform / untouched mutation)
"""

from __future__ import annotations

import numpy as np

from paretoswarm.foundation.kernel.dominance import rank_index, ranking
from .state import VELOCITY_RANGE, Swarm

__all__ = [
    "draw_coefficients",
    "select_leaders",
    "update_swarm",
    "mutation_groups",
    "mutate_swarm",
]

INERTIA_RANGE = (0.1, 0.5)
ACCELERATION_RANGE = (1.5, 2.0)


def draw_coefficients(rng: np.random.Generator) -> tuple[float, float, float]:
    """Draw the inertia weight and the two acceleration coefficients for one generation.

    Returns
    -------
    tuple
        ``(w, c1, c2)`` with ``w`` in [0.1, 0.5) and ``c1, c2`` in [1.5, 2.0).
    """
    w = float(rng.uniform(*INERTIA_RANGE))
    c1 = float(rng.uniform(*ACCELERATION_RANGE))
    c2 = float(rng.uniform(*ACCELERATION_RANGE))
    return w, c1, c2


def select_leaders(archive: Swarm, n: int, rng: np.random.Generator) -> np.ndarray:
    """Pick one global-best position per particle.

    Leaders are drawn uniformly from the rank-1 members of the archive,
    ranked with plain dominance on raw fitness (with the feasibility layer
    when the run is constrained).

    Parameters
    ----------
    archive : Swarm
        Current archive.
    n : int
        Number of leaders to draw.
    rng : np.random.Generator
        Random generator.

    Returns
    -------
    np.ndarray
        Leader positions, shape (n, n_var).
    """
    G = archive.constraint if archive.n_constr > 0 else None
    rank = ranking(archive.fitness, G)
    candidates = rank_index(rank, int(rank.min()))
    picks = rng.choice(candidates, size=n, replace=True)
    return archive.position[picks]


def update_swarm(
    swarm: Swarm,
    archive: Swarm,
    rng: np.random.Generator,
    coefficients: tuple[float, float, float] | None = None,
) -> Swarm:
    """Move every particle towards its personal best and a leader.

    ``v' = w*v + c1*r1*(pbest - x) + c2*r2*(leader - x)`` with ``r1, r2``
    drawn per particle and dimension; ``v'`` and the new position are clamped.
    A new swarm is returned; fitness and personal bests are carried over.
    """
    w, c1, c2 = coefficients if coefficients is not None else draw_coefficients(rng)
    leaders = select_leaders(archive, len(swarm), rng)
    r1 = rng.random(swarm.position.shape)
    r2 = rng.random(swarm.position.shape)
    velocity = (
        w * swarm.velocity
        + c1 * r1 * (swarm.best_position - swarm.position)
        + c2 * r2 * (leaders - swarm.position)
    )
    velocity = np.clip(velocity, *VELOCITY_RANGE)
    return swarm.with_motion(swarm.position + velocity, velocity)


def mutation_groups(n: int, rng: np.random.Generator) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Shuffle ``range(n)`` and split it into three near-equal groups.

    When ``n`` is not a multiple of three the first groups get one extra index.
    """
    order = rng.permutation(n)
    uniform, non_uniform, untouched = np.array_split(order, 3)
    return uniform, non_uniform, untouched


def _uniform_mutation(position: np.ndarray, velocity: np.ndarray, rows: np.ndarray, rng: np.random.Generator) -> None:
    n_var = position.shape[1]
    rate = 1.0 / n_var
    shape = (rows.size, n_var)
    pos_mask = rng.random(shape) < rate
    vel_mask = rng.random(shape) < rate
    block = position[rows]
    block[pos_mask] = rng.random(int(pos_mask.sum()))
    position[rows] = block
    block = velocity[rows]
    block[vel_mask] = rng.random(int(vel_mask.sum())) - 0.5
    velocity[rows] = block


def _non_uniform_mutation(
    position: np.ndarray,
    velocity: np.ndarray,
    rows: np.ndarray,
    generation: int,
    rng: np.random.Generator,
) -> None:
    n_var = position.shape[1]
    rate = 1.0 / n_var
    scale = 1.0 / np.sqrt(generation + 1.0)
    shape = (rows.size, n_var)
    pos_mask = rng.random(shape) < rate
    vel_mask = rng.random(shape) < rate
    block = position[rows]
    block[pos_mask] += (rng.random(int(pos_mask.sum())) - 0.5) * scale
    position[rows] = block
    block = velocity[rows]
    block[vel_mask] += (rng.random(int(vel_mask.sum())) - 0.5) * scale
    velocity[rows] = block


def mutate_swarm(swarm: Swarm, generation: int, rng: np.random.Generator) -> Swarm:
    """Apply turbulence to a shuffled third of the swarm each (particle order is kept).

    - Uniform: each component is redrawn with probability 1/n (position in
      [0, 1), velocity in [-0.5, 0.5)).
    - Non-uniform: each component is perturbed by ``(u - 0.5) / sqrt(generation + 1)``
      with probability 1/n, so the step shrinks over the run.
    - The last third is left untouched.
    """
    position = swarm.position.copy()
    velocity = swarm.velocity.copy()
    uniform, non_uniform, _untouched = mutation_groups(len(swarm), rng)
    if uniform.size:
        _uniform_mutation(position, velocity, uniform, rng)
    if non_uniform.size:
        _non_uniform_mutation(position, velocity, non_uniform, generation, rng)
    return swarm.with_motion(position, velocity)
