"""
Utility helpers for constraint handling.

Constraint values are violation magnitudes: ``g <= 0`` means satisfied.
"""

from __future__ import annotations

import numpy as np


def compute_violation(G: np.ndarray | None, *, n: int | None = None) -> np.ndarray:
    """Sum of positive parts per-solution; assumes G shape (N, n_constr), g<=0 satisfied.

    When *G* is ``None`` or has no columns (unconstrained), returns zeros of
    length *n* (or the number of rows of *G*).
    """
    if G is None:
        return np.zeros(n or 0, dtype=float)
    G = np.asarray(G, dtype=float)
    if G.ndim == 1:
        G = G[None, :]
    positive = np.maximum(G, 0.0)
    return np.asarray(np.sum(positive, axis=1), dtype=float)


def violated_count(G: np.ndarray | None, *, n: int | None = None) -> np.ndarray:
    """Number of violated constraints (g > 0) per solution."""
    if G is None:
        return np.zeros(n or 0, dtype=int)
    G = np.asarray(G, dtype=float)
    if G.ndim == 1:
        G = G[None, :]
    return np.asarray(np.sum(G > 0.0, axis=1), dtype=int)


def is_feasible(G: np.ndarray | None, *, n: int | None = None, eps: float = 0.0) -> np.ndarray:
    """Boolean feasibility mask; assumes G shape (N, n_constr).

    When *G* is ``None`` (unconstrained), returns an all-``True`` mask of
    length *n*. A row without columns is feasible as well.

    *eps* is a feasibility tolerance: constraints with ``g(x) <= eps`` are
    treated as satisfied (default ``0.0``).
    """
    if G is None:
        return np.ones(n or 0, dtype=bool)
    G = np.asarray(G, dtype=float)
    if G.ndim == 1:
        G = G[None, :]
    return np.asarray(np.all(G <= eps, axis=1), dtype=bool)


__all__ = ["compute_violation", "violated_count", "is_feasible"]
