import numpy as np
import pytest

from paretoswarm.foundation.exceptions import ConfigurationError, InvalidProblemError, ProblemDimensionError
from paretoswarm.foundation.problem import (
    ObjectiveFunctionBase,
    ZDT2Problem,
    available_problem_names,
    get_problem_specs,
    resolve_objective,
    split_evaluation,
    validate_objective,
)


def test_registry_lists_benchmarks():
    names = available_problem_names()
    for name in ("zdt2", "zdt3", "zdt4", "dtlz2", "dtlz3", "rastrigin", "griewank", "rosenbrock", "schwefel"):
        assert name in names
    assert set(names) == set(get_problem_specs())


def test_resolve_returns_configured_instance():
    problem = resolve_objective("ZDT2", n_var=8)
    assert isinstance(problem, ZDT2Problem)
    assert (problem.n_var, problem.n_obj, problem.n_constr) == (8, 2, 0)


def test_resolve_unknown_name_suggests_matches():
    with pytest.raises(InvalidProblemError) as excinfo:
        resolve_objective("zdt")
    assert isinstance(excinfo.value, ConfigurationError)
    assert "Did you mean" in str(excinfo.value)


def test_fixed_objective_count_cannot_be_overridden():
    with pytest.raises(ProblemDimensionError):
        resolve_objective("zdt2", n_obj=3)


def test_too_few_variables_is_a_dimension_error():
    with pytest.raises(ProblemDimensionError):
        resolve_objective("zdt2", n_var=1)


def test_scalable_objective_count():
    problem = resolve_objective("dtlz2", n_var=7, n_obj=3)
    assert problem.n_obj == 3
    assert problem.max_value().shape == (3,)
    assert problem.min_value().shape == (3,)


def test_constrained_problem_declares_constraints():
    problem = resolve_objective("binh_korn")
    assert problem.n_constr == 2


def test_constraint_count_mismatch_is_rejected():
    with pytest.raises(ProblemDimensionError):
        resolve_objective("binh_korn", n_constr=1)


class _WrongBounds(ObjectiveFunctionBase):
    MAX_VALUE = (1.0,)
    MIN_VALUE = (0.0, 0.0)

    def __init__(self):
        self.n_var = 3
        self.n_obj = 2

    def objectives(self, x):
        return np.array([x[0], 1.0 - x[0]])


class _WrongArity(_WrongBounds):
    MAX_VALUE = (1.0, 1.0)

    def objectives(self, x):
        return np.array([x[0]])


def test_validate_rejects_bad_bounds():
    with pytest.raises(ProblemDimensionError, match="max_value"):
        validate_objective(_WrongBounds(), n_var=3, n_obj=2)


def test_validate_rejects_wrong_fitness_length():
    with pytest.raises(ProblemDimensionError, match="fitness"):
        validate_objective(_WrongArity(), n_var=3, n_obj=2)


def test_validate_rejects_wrong_variable_count():
    with pytest.raises(ProblemDimensionError):
        validate_objective(ZDT2Problem(n_var=5), n_var=4, n_obj=2)


def test_validate_returns_problem():
    problem = ZDT2Problem(n_var=4)
    assert validate_objective(problem, n_var=4, n_obj=2) is problem


@pytest.mark.parametrize("name", available_problem_names())
@pytest.mark.parametrize("n_var", [None, 40])
def test_declared_bounds_cover_the_unit_cube(name, n_var):
    spec = get_problem_specs()[name]
    if n_var is not None and spec.n_constr:
        n_var = None
    problem = resolve_objective(name, n_var=n_var)
    rng = np.random.default_rng(11)
    positions = np.vstack([rng.random((300, problem.n_var)), np.zeros(problem.n_var), np.ones(problem.n_var)])
    lo, hi = problem.min_value(), problem.max_value()
    for x in positions:
        fitness, _ = split_evaluation(problem.evaluate(x), problem.n_constr)
        assert np.all(fitness >= lo), (name, x, fitness)
        assert np.all(fitness <= hi), (name, x, fitness)
