"""Bounded archive selection for OMOPSO.

The archive of the next generation is chosen from the evaluated swarm plus
the previous archive: every individual ranked strictly better than the border
rank is admitted, and the border rank is thinned by crowding distance until
the archive holds exactly ``capacity`` members.
"""

from __future__ import annotations

import logging

import numpy as np

from paretoswarm.foundation.exceptions import RankingInvariantError
from paretoswarm.foundation.kernel.dominance import (
    DominanceRule,
    calculate_border_rank,
    calculate_distance,
    normalize_fitness,
    rank_index,
)
from .state import Swarm


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def _most_isolated(F: np.ndarray, candidates: np.ndarray, reference: np.ndarray, k: int) -> np.ndarray:
    """The ``k`` candidates with the largest crowding distance measured within ``reference``."""
    if k <= 0:
        return np.empty(0, dtype=int)
    distance = calculate_distance(F[reference])
    position = {int(idx): i for i, idx in enumerate(reference)}
    candidate_distance = np.array([distance[position[int(c)]] for c in candidates], dtype=float)
    order = np.argsort(-candidate_distance, kind="stable")
    return candidates[order[:k]]


class ArchiveSelector:
    """
    Select the next fixed-size archive from ``swarm ++ archive``.

    Parameters
    ----------
    rule : DominanceRule
        Active dominance rule (epsilon / alpha relaxation).
    min_value, max_value : array-like
        Declared objective range used to normalise fitness before ranking and
        crowding. Raw fitness is what ends up in the archive.
    capacity : int, optional
        Archive size; defaults to the size of the previous archive.
    """

    def __init__(self, rule: DominanceRule, min_value, max_value, capacity: int | None = None):
        self.rule = rule
        self.min_value = np.asarray(min_value, dtype=float)
        self.max_value = np.asarray(max_value, dtype=float)
        self.capacity = capacity

    def select(self, swarm: Swarm, archive: Swarm) -> Swarm:
        capacity = self.capacity if self.capacity is not None else len(archive)
        population = swarm.concat(archive)
        if len(population) < capacity:
            raise ValueError(f"Cannot fill an archive of {capacity} from {len(population)} individuals.")

        F = normalize_fitness(population.fitness, self.min_value, self.max_value)
        G = population.constraint if population.n_constr > 0 else None
        rank = self.rule.ranking(F, G)
        border = calculate_border_rank(rank, capacity)
        upper = np.flatnonzero(rank < border)
        contested = rank_index(rank, border)

        if upper.size > capacity:
            _logger().error("%s", RankingInvariantError(int(upper.size), capacity).message)
            kept = _most_isolated(F, upper, upper, capacity)
            return population.take(np.sort(kept))

        reference = np.concatenate([upper, contested])
        chosen = _most_isolated(F, contested, reference, capacity - upper.size)
        _logger().debug(
            "Border rank %d: %d admitted, %d of %d contested selected.",
            border,
            upper.size,
            chosen.size,
            contested.size,
        )
        return population.take(np.concatenate([upper, chosen]))


__all__ = ["ArchiveSelector"]
