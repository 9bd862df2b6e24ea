from __future__ import annotations

from typing import Protocol, Union

import numpy as np

EvaluationOutput = Union[np.ndarray, "tuple[np.ndarray, np.ndarray]"]


class ObjectiveFunction(Protocol):
    """Gateway to an externally supplied objective function.

    ``evaluate`` receives one position in [0, 1]^n_var. Unconstrained
    functions return the fitness vector (length ``n_obj``); functions with
    ``n_constr > 0`` return ``(fitness, constraint_violation)`` where each
    violation is <= 0 when satisfied. ``max_value`` / ``min_value`` declare the
    objective range used for normalisation only.
    """

    n_var: int
    n_obj: int
    n_constr: int

    def evaluate(self, x: np.ndarray) -> EvaluationOutput: ...

    def max_value(self) -> np.ndarray: ...

    def min_value(self) -> np.ndarray: ...


def split_evaluation(result: EvaluationOutput, n_constr: int) -> tuple[np.ndarray, np.ndarray]:
    """Unpack a gateway result into ``(fitness, constraint_violation)`` vectors."""
    if n_constr > 0:
        fitness, violation = result  # type: ignore[misc]
        return np.atleast_1d(np.asarray(fitness, dtype=float)), np.atleast_1d(np.asarray(violation, dtype=float))
    return np.atleast_1d(np.asarray(result, dtype=float)), np.empty(0, dtype=float)


__all__ = ["ObjectiveFunction", "EvaluationOutput", "split_evaluation"]
