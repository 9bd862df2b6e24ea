from __future__ import annotations

import numpy as np

from .base import ObjectiveFunctionBase


class BinhKornProblem(ObjectiveFunctionBase):
    """
    Binh and Korn bi-objective problem with two inequality constraints.

    Variables are rescaled from the unit square to x0 in [0, 5], x1 in [0, 3].

    Objectives (to minimize):
        f1 = 4 x0^2 + 4 x1^2
        f2 = (x0 - 5)^2 + (x1 - 5)^2

    Constraint violations (<= 0 feasible):
        g1 = (x0 - 5)^2 + x1^2 - 25
        g2 = 7.7 - (x0 - 8)^2 - (x1 + 3)^2
    """

    MAX_VALUE = (136.0, 50.0)
    MIN_VALUE = (0.0, 0.0)
    n_constr = 2

    def __init__(self, n_var: int = 2):
        if n_var != 2:
            raise ValueError("Binh-Korn has exactly two decision variables.")
        self.n_var = 2
        self.n_obj = 2

    @staticmethod
    def _decode(x: np.ndarray) -> tuple[float, float]:
        return float(5.0 * x[0]), float(3.0 * x[1])

    def objectives(self, x: np.ndarray) -> np.ndarray:
        x0, x1 = self._decode(x)
        return np.array([4.0 * x0 * x0 + 4.0 * x1 * x1, (x0 - 5.0) ** 2 + (x1 - 5.0) ** 2])

    def constraints(self, x: np.ndarray) -> np.ndarray:
        x0, x1 = self._decode(x)
        g1 = (x0 - 5.0) ** 2 + x1 * x1 - 25.0
        g2 = 7.7 - (x0 - 8.0) ** 2 - (x1 + 3.0) ** 2
        return np.maximum(np.array([g1, g2]), 0.0)


__all__ = ["BinhKornProblem"]
