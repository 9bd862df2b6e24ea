import numpy as np

from .base import ObjectiveFunctionBase


class DTLZBase(ObjectiveFunctionBase):
    """Every objective is (1 + g) times a product of cosines and sines, so it lies in [0, 1 + max g]."""

    MIN_VALUE = (0.0, 0.0)

    def __init__(self, n_var: int, n_obj: int = 2):
        if n_obj < 2:
            raise ValueError("DTLZ problems need at least two objectives.")
        if n_var < n_obj:
            raise ValueError(f"DTLZ with {n_obj} objectives needs at least {n_obj} variables.")
        self.n_var = int(n_var)
        self.n_obj = int(n_obj)

    def _g(self, x_tail: np.ndarray) -> float:
        raise NotImplementedError

    def _g_max(self, k: int) -> float:
        raise NotImplementedError

    def objectives(self, x: np.ndarray) -> np.ndarray:
        g = self._g(x[self.n_obj - 1 :])
        F = np.ones(self.n_obj)
        for i in range(self.n_obj):
            f = 1.0 + g
            for j in range(self.n_obj - i - 1):
                f *= np.cos(x[j] * np.pi / 2.0)
            if i > 0:
                f *= np.sin(x[self.n_obj - i - 1] * np.pi / 2.0)
            F[i] = f
        return F

    def max_value(self) -> np.ndarray:
        k = self.n_var - self.n_obj + 1
        return np.full(self.n_obj, 1.0 + self._g_max(k), dtype=float)

    def min_value(self) -> np.ndarray:
        return np.full(self.n_obj, self.MIN_VALUE[0], dtype=float)


class DTLZ2Problem(DTLZBase):
    """Spherical Pareto front."""

    def __init__(self, n_var: int = 12, n_obj: int = 2):
        super().__init__(n_var, n_obj)

    def _g(self, x_tail: np.ndarray) -> float:
        return float(np.sum((x_tail - 0.5) ** 2))

    def _g_max(self, k: int) -> float:
        return 0.25 * k


class DTLZ3Problem(DTLZBase):
    """Spherical front behind many local fronts (Rastrigin-like g)."""

    def __init__(self, n_var: int = 12, n_obj: int = 2):
        super().__init__(n_var, n_obj)

    def _g(self, x_tail: np.ndarray) -> float:
        k = x_tail.size
        return float(100.0 * (k + np.sum((x_tail - 0.5) ** 2 - np.cos(20.0 * np.pi * (x_tail - 0.5)))))

    def _g_max(self, k: int) -> float:
        # each tail term (x - 0.5)^2 - cos(...) is at most 0.25 + 1
        return 100.0 * (k + 1.25 * k)


__all__ = ["DTLZBase", "DTLZ2Problem", "DTLZ3Problem"]
