from .base import ObjectiveFunctionBase
from .constrained import BinhKornProblem
from .dtlz import DTLZ2Problem, DTLZ3Problem
from .registry import (
    ProblemSpec,
    available_problem_names,
    get_problem_specs,
    resolve_objective,
    validate_objective,
)
from .single import GriewankProblem, RastriginProblem, RosenbrockProblem, SchwefelProblem, SphereProblem
from .types import ObjectiveFunction, split_evaluation
from .zdt import ZDT2Problem, ZDT3Problem, ZDT4Problem

__all__ = [
    "ObjectiveFunction",
    "ObjectiveFunctionBase",
    "ProblemSpec",
    "available_problem_names",
    "get_problem_specs",
    "resolve_objective",
    "validate_objective",
    "split_evaluation",
    "ZDT2Problem",
    "ZDT3Problem",
    "ZDT4Problem",
    "DTLZ2Problem",
    "DTLZ3Problem",
    "BinhKornProblem",
    "SphereProblem",
    "RastriginProblem",
    "GriewankProblem",
    "RosenbrockProblem",
    "SchwefelProblem",
]
