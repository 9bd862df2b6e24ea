"""Single-objective test functions.

Each function rescales the unit-cube position to its classic domain before
evaluating. Declared maxima grow with ``n_var`` and bound the function over
the whole domain, not only near the optimum.
"""

from __future__ import annotations

import numpy as np

from .base import ObjectiveFunctionBase


def _scale(x: np.ndarray, half_width: float) -> np.ndarray:
    return x * (2.0 * half_width) - half_width


class SphereProblem(ObjectiveFunctionBase):
    """Shifted sphere ``3 + sum(x^2)`` on the unit cube; handy for smoke tests."""

    MIN_VALUE = (0.0,)

    def __init__(self, n_var: int = 2):
        self.n_var = int(n_var)
        self.n_obj = 1

    def max_value(self) -> np.ndarray:
        return np.array([3.0 + self.n_var])

    def objectives(self, x: np.ndarray) -> np.ndarray:
        return np.array([3.0 + float(np.sum(x * x))])


class RastriginProblem(ObjectiveFunctionBase):
    MIN_VALUE = (0.0,)

    def __init__(self, n_var: int = 10):
        self.n_var = int(n_var)
        self.n_obj = 1

    def max_value(self) -> np.ndarray:
        return np.array([(20.0 + 5.12**2) * self.n_var])

    def objectives(self, x: np.ndarray) -> np.ndarray:
        z = _scale(x, 5.12)
        return np.array([10.0 * self.n_var + float(np.sum(z * z - 10.0 * np.cos(2.0 * np.pi * z)))])


class GriewankProblem(ObjectiveFunctionBase):
    MIN_VALUE = (0.0,)

    def __init__(self, n_var: int = 10):
        self.n_var = int(n_var)
        self.n_obj = 1

    def max_value(self) -> np.ndarray:
        return np.array([2.0 + self.n_var * 512.0**2 / 4000.0])

    def objectives(self, x: np.ndarray) -> np.ndarray:
        z = _scale(x, 512.0)
        idx = np.arange(1, self.n_var + 1, dtype=float)
        return np.array([1.0 + float(np.sum(z * z)) / 4000.0 - float(np.prod(np.cos(z / np.sqrt(idx))))])


class RosenbrockProblem(ObjectiveFunctionBase):
    MIN_VALUE = (0.0,)

    def __init__(self, n_var: int = 10):
        if n_var < 2:
            raise ValueError("Rosenbrock requires at least two decision variables.")
        self.n_var = int(n_var)
        self.n_obj = 1

    def max_value(self) -> np.ndarray:
        a = 2.048
        return np.array([(self.n_var - 1) * (100.0 * (a + a * a) ** 2 + (1.0 + a) ** 2)])

    def objectives(self, x: np.ndarray) -> np.ndarray:
        z = _scale(x, 2.048)
        return np.array([float(np.sum(100.0 * (z[1:] - z[:-1] ** 2) ** 2 + (1.0 - z[:-1]) ** 2))])


class SchwefelProblem(ObjectiveFunctionBase):
    # z sin(sqrt|z|) stays within +-418.9829 on [-512, 512]
    MIN_VALUE = (-1.0,)

    def __init__(self, n_var: int = 10):
        self.n_var = int(n_var)
        self.n_obj = 1

    def max_value(self) -> np.ndarray:
        return np.array([2.0 * 418.983 * self.n_var])

    def objectives(self, x: np.ndarray) -> np.ndarray:
        z = _scale(x, 512.0)
        return np.array([418.98288727 * self.n_var - float(np.sum(z * np.sin(np.sqrt(np.abs(z)))))])


__all__ = [
    "SphereProblem",
    "RastriginProblem",
    "GriewankProblem",
    "RosenbrockProblem",
    "SchwefelProblem",
]
