import numpy as np

from .base import ObjectiveFunctionBase


class ZDT2Problem(ObjectiveFunctionBase):
    """
    Classic bi-objective benchmark with a concave Pareto front.
    Shares structure with ZDT1 but uses a quadratic term in the second objective.
    """

    MAX_VALUE = (1.0, 10.0)
    MIN_VALUE = (0.0, 0.0)

    def __init__(self, n_var: int = 30):
        if n_var < 2:
            raise ValueError("ZDT2 requires at least two decision variables.")
        self.n_var = int(n_var)
        self.n_obj = 2

    def objectives(self, x: np.ndarray) -> np.ndarray:
        f1 = x[0]
        g = 1.0 + 9.0 * np.mean(x[1:])
        f2 = g * (1.0 - (f1 / g) ** 2)
        return np.array([f1, f2])


class ZDT3Problem(ObjectiveFunctionBase):
    """ZDT benchmark with a disconnected Pareto front.

    The sine term drives f2 below zero (about -0.77 on the front).
    """

    MAX_VALUE = (1.0, 10.0)
    MIN_VALUE = (0.0, -1.0)

    def __init__(self, n_var: int = 30):
        if n_var < 2:
            raise ValueError("ZDT3 requires at least two decision variables.")
        self.n_var = int(n_var)
        self.n_obj = 2

    def objectives(self, x: np.ndarray) -> np.ndarray:
        f1 = x[0]
        g = 1.0 + 9.0 * np.mean(x[1:])
        h = f1 / g
        f2 = g * (1.0 - np.sqrt(h) - h * np.sin(10.0 * np.pi * f1))
        return np.array([f1, f2])


class ZDT4Problem(ObjectiveFunctionBase):
    """ZDT4 benchmark introducing multimodality through the Rastrigin-like g term.

    Positions are used as-is in [0, 1]; the classic [-5, 5] tail bounds are
    not applied.
    """

    MIN_VALUE = (0.0, 0.0)

    # x^2 - 10 cos(4 pi x) <= 1 + 10 on [0, 1]
    TAIL_TERM_MAX = 11.0

    def __init__(self, n_var: int = 10):
        if n_var < 2:
            raise ValueError("ZDT4 requires at least two decision variables.")
        self.n_var = int(n_var)
        self.n_obj = 2

    def max_value(self) -> np.ndarray:
        g_max = 1.0 + (10.0 + self.TAIL_TERM_MAX) * (self.n_var - 1)
        return np.array([1.0, g_max])

    def objectives(self, x: np.ndarray) -> np.ndarray:
        f1 = x[0]
        x_tail = x[1:]
        g = 1.0 + 10.0 * (self.n_var - 1) + np.sum(x_tail**2 - 10.0 * np.cos(4.0 * np.pi * x_tail))
        ratio = f1 / g if g != 0.0 else 0.0
        f2 = g * (1.0 - np.sqrt(ratio))
        return np.array([f1, f2])


__all__ = ["ZDT2Problem", "ZDT3Problem", "ZDT4Problem"]
