"""Static registry of objective functions.

Names are resolved once at configuration time into an
:class:`~paretoswarm.foundation.problem.types.ObjectiveFunction` instance that
is passed down explicitly; nothing is looked up by name during a run.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from difflib import get_close_matches

import numpy as np

from paretoswarm.foundation.exceptions import InvalidProblemError, ProblemDimensionError
from .constrained import BinhKornProblem
from .dtlz import DTLZ2Problem, DTLZ3Problem
from .single import GriewankProblem, RastriginProblem, RosenbrockProblem, SchwefelProblem, SphereProblem
from .types import ObjectiveFunction, split_evaluation
from .zdt import ZDT2Problem, ZDT3Problem, ZDT4Problem

ProblemFactory = Callable[[int, "int | None"], ObjectiveFunction]


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


@dataclass(frozen=True)
class ProblemSpec:
    """Metadata and factory for a registered objective function."""

    key: str
    label: str
    default_n_var: int
    default_n_obj: int
    allow_n_obj_override: bool
    factory: ProblemFactory
    n_constr: int = 0
    description: str = ""

    def resolve_dimensions(self, *, n_var: int | None, n_obj: int | None) -> tuple[int, int]:
        """
        Apply default dimensions and enforce override rules.
        """
        if self.allow_n_obj_override:
            actual_n_obj = n_obj if n_obj is not None else self.default_n_obj
            if actual_n_obj <= 0:
                raise ProblemDimensionError("n_obj must be a positive integer.", n_obj=actual_n_obj)
        else:
            actual_n_obj = self.default_n_obj
            if n_obj is not None and n_obj != actual_n_obj:
                raise ProblemDimensionError(
                    f"Objective function '{self.label}' has a fixed number of objectives ({self.default_n_obj}).",
                    n_obj=n_obj,
                )
        actual_n_var = self.default_n_var if n_var is None else n_var
        if actual_n_var <= 0:
            raise ProblemDimensionError("n_var must be a positive integer.", n_var=actual_n_var)
        return actual_n_var, actual_n_obj


_PROBLEM_SPECS: dict[str, ProblemSpec] = {
    "zdt2": ProblemSpec(
        key="zdt2",
        label="ZDT2",
        default_n_var=30,
        default_n_obj=2,
        allow_n_obj_override=False,
        description="ZDT variant with a concave Pareto front.",
        factory=lambda n_var, _n_obj: ZDT2Problem(n_var=n_var),
    ),
    "zdt3": ProblemSpec(
        key="zdt3",
        label="ZDT3",
        default_n_var=30,
        default_n_obj=2,
        allow_n_obj_override=False,
        description="ZDT benchmark with a disconnected Pareto front.",
        factory=lambda n_var, _n_obj: ZDT3Problem(n_var=n_var),
    ),
    "zdt4": ProblemSpec(
        key="zdt4",
        label="ZDT4",
        default_n_var=10,
        default_n_obj=2,
        allow_n_obj_override=False,
        description="ZDT benchmark with a multimodal landscape.",
        factory=lambda n_var, _n_obj: ZDT4Problem(n_var=n_var),
    ),
    "dtlz2": ProblemSpec(
        key="dtlz2",
        label="DTLZ2",
        default_n_var=12,
        default_n_obj=2,
        allow_n_obj_override=True,
        description="Spherical Pareto front, scalable objectives.",
        factory=lambda n_var, n_obj: DTLZ2Problem(n_var=n_var, n_obj=n_obj or 2),
    ),
    "dtlz3": ProblemSpec(
        key="dtlz3",
        label="DTLZ3",
        default_n_var=12,
        default_n_obj=2,
        allow_n_obj_override=True,
        description="Spherical front hidden behind many local fronts.",
        factory=lambda n_var, n_obj: DTLZ3Problem(n_var=n_var, n_obj=n_obj or 2),
    ),
    "binh_korn": ProblemSpec(
        key="binh_korn",
        label="Binh-Korn",
        default_n_var=2,
        default_n_obj=2,
        allow_n_obj_override=False,
        n_constr=2,
        description="Bi-objective problem with two inequality constraints.",
        factory=lambda n_var, _n_obj: BinhKornProblem(n_var=n_var),
    ),
    "sphere": ProblemSpec(
        key="sphere",
        label="Sphere",
        default_n_var=2,
        default_n_obj=1,
        allow_n_obj_override=False,
        description="Shifted sphere test function.",
        factory=lambda n_var, _n_obj: SphereProblem(n_var=n_var),
    ),
    "rastrigin": ProblemSpec(
        key="rastrigin",
        label="Rastrigin",
        default_n_var=10,
        default_n_obj=1,
        allow_n_obj_override=False,
        description="Highly multimodal single-objective function.",
        factory=lambda n_var, _n_obj: RastriginProblem(n_var=n_var),
    ),
    "griewank": ProblemSpec(
        key="griewank",
        label="Griewank",
        default_n_var=10,
        default_n_obj=1,
        allow_n_obj_override=False,
        description="Multimodal single-objective function with product term.",
        factory=lambda n_var, _n_obj: GriewankProblem(n_var=n_var),
    ),
    "rosenbrock": ProblemSpec(
        key="rosenbrock",
        label="Rosenbrock",
        default_n_var=10,
        default_n_obj=1,
        allow_n_obj_override=False,
        description="Curved valley single-objective function.",
        factory=lambda n_var, _n_obj: RosenbrockProblem(n_var=n_var),
    ),
    "schwefel": ProblemSpec(
        key="schwefel",
        label="Schwefel",
        default_n_var=10,
        default_n_obj=1,
        allow_n_obj_override=False,
        description="Deceptive single-objective function.",
        factory=lambda n_var, _n_obj: SchwefelProblem(n_var=n_var),
    ),
}


def get_problem_specs() -> dict[str, ProblemSpec]:
    return _PROBLEM_SPECS


def available_problem_names() -> tuple[str, ...]:
    return tuple(_PROBLEM_SPECS.keys())


def _suggest_names(name: str, options: tuple[str, ...]) -> list[str]:
    if not name or not options:
        return []
    lookup = {option.lower(): option for option in options}
    matches = get_close_matches(name.lower(), lookup.keys(), n=3, cutoff=0.6)
    return [lookup[match] for match in matches]


def _check_vector(values, expected: int, what: str, label: str, **dims) -> np.ndarray:
    if values is None:
        raise ProblemDimensionError(f"{label}: {what} is unavailable.", **dims)
    arr = np.atleast_1d(np.asarray(values, dtype=float))
    if arr.shape != (expected,):
        raise ProblemDimensionError(
            f"{label}: {what} has {arr.size} value(s) but {expected} were expected.",
            **dims,
        )
    return arr


def validate_objective(problem: ObjectiveFunction, *, n_var: int, n_obj: int, n_constr: int = 0) -> ObjectiveFunction:
    """Probe an objective function once and check that it agrees with the run dimensions.

    The function is evaluated at the all-ones position; the fitness, the
    declared max/min values and the constraint vector must have the expected
    lengths.
    """
    label = type(problem).__name__
    dims = {"n_var": n_var, "n_obj": n_obj, "n_constr": n_constr}
    declared_constr = int(getattr(problem, "n_constr", 0) or 0)
    if declared_constr != n_constr:
        raise ProblemDimensionError(
            f"{label} declares {declared_constr} constraint(s) but {n_constr} were configured.",
            **dims,
        )
    try:
        result = problem.evaluate(np.ones(n_var, dtype=float))
        fitness, violation = split_evaluation(result, n_constr)
    except (ValueError, TypeError, IndexError) as exc:
        raise ProblemDimensionError(f"{label} cannot evaluate a position of length {n_var}: {exc}", **dims) from exc
    _check_vector(fitness, n_obj, "fitness", label, **dims)
    if n_constr > 0:
        _check_vector(violation, n_constr, "constraint violation", label, **dims)
    _check_vector(problem.max_value(), n_obj, "max_value()", label, **dims)
    _check_vector(problem.min_value(), n_obj, "min_value()", label, **dims)
    return problem


def resolve_objective(
    name: str,
    *,
    n_var: int | None = None,
    n_obj: int | None = None,
    n_constr: int | None = None,
) -> ObjectiveFunction:
    """Resolve a registered objective function by name and validate it once."""
    key = (name or "").strip().lower()
    spec = _PROBLEM_SPECS.get(key)
    if spec is None:
        options = available_problem_names()
        raise InvalidProblemError(name, list(options), _suggest_names(key, options))
    actual_n_var, actual_n_obj = spec.resolve_dimensions(n_var=n_var, n_obj=n_obj)
    actual_n_constr = spec.n_constr if n_constr is None else int(n_constr)
    try:
        problem = spec.factory(actual_n_var, actual_n_obj)
    except ValueError as exc:
        raise ProblemDimensionError(
            f"{spec.label}: {exc}", n_var=actual_n_var, n_obj=actual_n_obj, n_constr=actual_n_constr
        ) from exc
    validate_objective(problem, n_var=actual_n_var, n_obj=actual_n_obj, n_constr=actual_n_constr)
    _logger().debug("Resolved objective function '%s' as %r", key, problem)
    return problem


__all__ = [
    "ProblemSpec",
    "ProblemFactory",
    "available_problem_names",
    "get_problem_specs",
    "resolve_objective",
    "validate_objective",
]
