"""
Foundation layer: dominance, ranking and crowding kernels.
"""

from .dominance import (
    MAX_DISTANCE,
    DominanceRule,
    calculate_border_rank,
    calculate_distance,
    dominance_matrix,
    dominated,
    dominated_constrained,
    constraint_precedence,
    normalize_fitness,
    pareto_front_mask,
    rank_index,
    ranking,
)

__all__ = [
    "MAX_DISTANCE",
    "DominanceRule",
    "calculate_border_rank",
    "calculate_distance",
    "dominance_matrix",
    "dominated",
    "dominated_constrained",
    "constraint_precedence",
    "normalize_fitness",
    "pareto_front_mask",
    "rank_index",
    "ranking",
]
