"""Dominance, ranking and crowding kernels.

Minimisation is assumed throughout. Fitness matrices are float64 of shape
(N, M); constraint matrices are (N, K) violation magnitudes where ``g <= 0``
means satisfied (K may be 0).

The plain rule is non-strict: ``basis`` dominates ``target`` as soon as
``target`` is nowhere better, so exact duplicates dominate each other.
Border-rank arithmetic in the archive selector relies on this.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from paretoswarm.foundation.constraints.utils import compute_violation, is_feasible, violated_count

MAX_DISTANCE = float(np.finfo(float).max)
NORMALIZATION_EPS = 1e-12


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Pairwise rules
# -----------------------------------------------------------------------------


def _dominated_plain(basis: np.ndarray, target: np.ndarray) -> bool:
    return not bool(np.any(target < basis))


def _dominated_epsilon(basis: np.ndarray, target: np.ndarray, epsilon: float) -> bool:
    return not bool(np.any(target < basis * (1.0 - epsilon)))


def _dominated_alpha(basis: np.ndarray, target: np.ndarray, alpha: float) -> bool:
    diff = basis - target
    wins = diff > 0.0
    n_wins = int(np.count_nonzero(wins))
    if n_wins == diff.size:
        return False
    if n_wins == 0:
        return True
    # A win larger than the alpha-weighted loss is a real trade-off.
    loss = float(np.sqrt(np.sum(diff[~wins] ** 2)))
    return not bool(np.any(loss * alpha < np.abs(diff[wins])))


def dominated(basis, target, epsilon: float = 0.0, alpha: float = 0.0) -> bool:
    """Return True when ``basis`` dominates ``target``.

    Exactly one rule applies, by precedence: alpha-domination when
    ``alpha > 0``, epsilon-domination when ``epsilon > 0``, plain Pareto
    dominance otherwise. Fitness should be normalised for the relaxed rules.
    """
    basis = np.asarray(basis, dtype=float)
    target = np.asarray(target, dtype=float)
    if basis.shape != target.shape:
        raise ValueError(f"Fitness vectors differ in length: {basis.shape} vs {target.shape}.")
    if alpha > 0.0:
        return _dominated_alpha(basis, target, alpha)
    if epsilon > 0.0:
        return _dominated_epsilon(basis, target, epsilon)
    return _dominated_plain(basis, target)


def constraint_precedence(cv_basis: np.ndarray, cv_target: np.ndarray) -> bool | None:
    """Decide dominance from feasibility alone, or None to defer to objectives."""
    if cv_basis.size == 0 and cv_target.size == 0:
        return None
    feasible_basis = bool(np.all(cv_basis <= 0.0))
    feasible_target = bool(np.all(cv_target <= 0.0))
    if feasible_basis and feasible_target:
        return None
    if feasible_basis != feasible_target:
        return feasible_basis
    count_basis = int(np.count_nonzero(cv_basis > 0.0))
    count_target = int(np.count_nonzero(cv_target > 0.0))
    if count_basis != count_target:
        return count_basis < count_target
    total_basis = float(np.sum(np.maximum(cv_basis, 0.0)))
    total_target = float(np.sum(np.maximum(cv_target, 0.0)))
    return total_target >= total_basis


def dominated_constrained(
    basis,
    target,
    cv_basis,
    cv_target,
    epsilon: float = 0.0,
    alpha: float = 0.0,
) -> bool:
    """Constraint-aware dominance.

    A feasible solution always dominates an infeasible one. Between two
    infeasible solutions the one violating fewer constraints wins; equal
    counts compare the total violation. Feasible (or unconstrained) pairs fall
    through to :func:`dominated`.
    """
    cv_basis = np.atleast_1d(np.asarray(cv_basis, dtype=float))
    cv_target = np.atleast_1d(np.asarray(cv_target, dtype=float))
    decided = constraint_precedence(cv_basis, cv_target)
    if decided is not None:
        return decided
    return dominated(basis, target, epsilon, alpha)


@dataclass(frozen=True)
class DominanceRule:
    """The active dominance rule of a run (epsilon and alpha relaxations)."""

    epsilon: float = 0.0
    alpha: float = 0.0

    @property
    def kind(self) -> str:
        if self.alpha > 0.0:
            return "alpha"
        if self.epsilon > 0.0:
            return "epsilon"
        return "pareto"

    def dominated(self, basis, target, cv_basis=None, cv_target=None) -> bool:
        if cv_basis is None or cv_target is None:
            return dominated(basis, target, self.epsilon, self.alpha)
        return dominated_constrained(basis, target, cv_basis, cv_target, self.epsilon, self.alpha)

    def ranking(self, F: np.ndarray, G: np.ndarray | None = None) -> np.ndarray:
        return ranking(F, G, epsilon=self.epsilon, alpha=self.alpha)


# -----------------------------------------------------------------------------
# Batch operations
# -----------------------------------------------------------------------------


def _has_constraints(G: np.ndarray | None) -> bool:
    return G is not None and np.asarray(G).ndim == 2 and np.asarray(G).shape[1] > 0


def dominance_matrix(
    F: np.ndarray,
    G: np.ndarray | None = None,
    epsilon: float = 0.0,
    alpha: float = 0.0,
) -> np.ndarray:
    """Boolean matrix ``D`` with ``D[j, i]`` True when j dominates i (diagonal False)."""
    F = np.asarray(F, dtype=float)
    n = F.shape[0]
    if n == 0:
        return np.zeros((0, 0), dtype=bool)

    if alpha > 0.0:
        D = np.zeros((n, n), dtype=bool)
        for j in range(n):
            for i in range(n):
                if i != j:
                    D[j, i] = _dominated_alpha(F[j], F[i], alpha)
    else:
        threshold = F * (1.0 - epsilon) if epsilon > 0.0 else F
        # D[j, i]: no component of F[i] is below the threshold of F[j]
        D = ~np.any(F[None, :, :] < threshold[:, None, :], axis=2)

    if _has_constraints(G):
        G = np.asarray(G, dtype=float)
        feas = is_feasible(G)
        count = violated_count(G)
        total = compute_violation(G)
        fewer = count[:, None] < count[None, :]
        same = count[:, None] == count[None, :]
        both_infeasible_pref = fewer | (same & (total[None, :] >= total[:, None]))
        pref = np.where(
            feas[:, None] & ~feas[None, :],
            True,
            np.where(~feas[:, None] & feas[None, :], False, both_infeasible_pref),
        )
        decided = ~(feas[:, None] & feas[None, :])
        D = np.where(decided, pref, D)

    np.fill_diagonal(D, False)
    return D


def ranking(
    F: np.ndarray,
    G: np.ndarray | None = None,
    *,
    epsilon: float = 0.0,
    alpha: float = 0.0,
) -> np.ndarray:
    """Fleming-style rank: 1 + number of individuals dominating each one."""
    D = dominance_matrix(F, G, epsilon, alpha)
    return np.asarray(D.sum(axis=0) + 1, dtype=int)


def rank_index(rank: np.ndarray, value: int) -> np.ndarray:
    """Indices of the individuals holding rank ``value``."""
    return np.flatnonzero(np.asarray(rank) == value)


def calculate_border_rank(rank: np.ndarray, capacity: int) -> int:
    """Smallest rank r whose cumulative count ``count(rank <= r)`` exceeds ``capacity``.

    When no such rank exists (``capacity`` >= population size) the maximum
    rank present is returned.
    """
    rank = np.asarray(rank, dtype=int)
    if rank.size == 0:
        raise ValueError("Cannot compute a border rank of an empty population.")
    if rank.size <= capacity:
        _logger().debug("Capacity %d covers the whole population of %d.", capacity, rank.size)
        return int(rank.max())
    cumulative = np.cumsum(np.bincount(rank))
    over = np.flatnonzero(cumulative > capacity)
    return int(over[0]) if over.size else int(rank.max())


def calculate_distance(F: np.ndarray) -> np.ndarray:
    """Crowding distance: Manhattan distance to the nearest plus the second-nearest neighbour.

    The first individual found at the maximum or minimum of any objective is
    a boundary point and receives ``MAX_DISTANCE``.
    """
    F = np.asarray(F, dtype=float)
    n = F.shape[0]
    if n == 0:
        return np.empty(0, dtype=float)
    n_obj = F.shape[1]
    f_max = F.max(axis=0)
    f_min = F.min(axis=0)
    max_taken = np.zeros(n_obj, dtype=bool)
    min_taken = np.zeros(n_obj, dtype=bool)
    edge = np.zeros(n, dtype=bool)
    for i in range(n):
        for o in range(n_obj):
            if F[i, o] == f_max[o] and not max_taken[o]:
                edge[i] = True
                max_taken[o] = True
            elif F[i, o] == f_min[o] and not min_taken[o]:
                edge[i] = True
                min_taken[o] = True

    manhattan = np.abs(F[:, None, :] - F[None, :, :]).sum(axis=2)
    np.fill_diagonal(manhattan, np.inf)
    nearest = np.sort(manhattan, axis=1)[:, :2]
    nearest = np.where(np.isfinite(nearest), nearest, 0.0)
    distance = nearest.sum(axis=1)
    distance[edge] = MAX_DISTANCE
    return distance


def normalize_fitness(F: np.ndarray, min_value, max_value) -> np.ndarray:
    """Linear min-max normalisation with declared bounds; zero spans become a small epsilon."""
    F = np.asarray(F, dtype=float)
    lo = np.asarray(min_value, dtype=float)
    hi = np.asarray(max_value, dtype=float)
    span = hi - lo
    span = np.where(np.abs(span) < NORMALIZATION_EPS, NORMALIZATION_EPS, span)
    return (F - lo) / span


def pareto_front_mask(F: np.ndarray) -> np.ndarray:
    """Strict Pareto filter (all <=, any <); duplicates do not eliminate each other."""
    F = np.asarray(F, dtype=float)
    if F.shape[0] == 0:
        return np.zeros(0, dtype=bool)
    le = F[:, None, :] <= F[None, :, :]
    lt = F[:, None, :] < F[None, :, :]
    dom = np.all(le, axis=2) & np.any(lt, axis=2)
    return ~np.any(dom, axis=0)


__all__ = [
    "MAX_DISTANCE",
    "DominanceRule",
    "dominated",
    "dominated_constrained",
    "constraint_precedence",
    "dominance_matrix",
    "ranking",
    "rank_index",
    "calculate_border_rank",
    "calculate_distance",
    "normalize_fitness",
    "pareto_front_mask",
]
