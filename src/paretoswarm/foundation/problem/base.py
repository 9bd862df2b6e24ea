"""
Base class for objective functions evaluated one position at a time.
"""

from __future__ import annotations

import numpy as np


class ObjectiveFunctionBase:
    """Base class for objective functions reached through the evaluation gateway.

    Positions live in the unit hypercube [0, 1]^n_var; a subclass rescales
    them to its own domain inside ``objectives``.

    **Required:** set ``n_var`` and ``n_obj`` in ``__init__`` and implement
    ``objectives``. Declare the normalisation range with the class-level
    ``MAX_VALUE`` / ``MIN_VALUE`` tuples, or override ``max_value`` /
    ``min_value`` when it depends on ``n_var``. The range must cover every
    fitness value reachable on the unit cube.
    **Optional:** set ``n_constr`` and implement ``constraints`` (violation
    magnitudes, ``g <= 0`` feasible).

    Example, constrained::

        class Disc(ObjectiveFunctionBase):
            MAX_VALUE = (2.0, 2.0)
            MIN_VALUE = (0.0, 0.0)
            n_constr = 1

            def __init__(self, n_var=2):
                self.n_var = n_var
                self.n_obj = 2

            def objectives(self, x):
                return np.array([x[0], 1.0 - x[0] + x[1]])

            def constraints(self, x):
                return np.array([np.sum(x ** 2) - 1.0])
    """

    MAX_VALUE: tuple[float, ...] = ()
    MIN_VALUE: tuple[float, ...] = ()

    n_var: int
    n_obj: int
    n_constr: int = 0

    def objectives(self, x: np.ndarray) -> np.ndarray:
        raise NotImplementedError

    def constraints(self, x: np.ndarray) -> np.ndarray:
        return np.empty(0, dtype=float)

    def evaluate(self, x: np.ndarray):
        x = np.asarray(x, dtype=float)
        if x.ndim != 1 or x.shape[0] != self.n_var:
            raise ValueError(f"Expected a position of length {self.n_var}, got shape {x.shape}.")
        fitness = np.asarray(self.objectives(x), dtype=float)
        if self.n_constr > 0:
            return fitness, np.asarray(self.constraints(x), dtype=float)
        return fitness

    def max_value(self) -> np.ndarray:
        return np.asarray(self.MAX_VALUE, dtype=float)

    def min_value(self) -> np.ndarray:
        return np.asarray(self.MIN_VALUE, dtype=float)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_var={self.n_var}, n_obj={self.n_obj}, n_constr={self.n_constr})"


__all__ = ["ObjectiveFunctionBase"]
