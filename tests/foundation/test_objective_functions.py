import numpy as np
import pytest

from paretoswarm.foundation.problem import (
    BinhKornProblem,
    DTLZ2Problem,
    DTLZ3Problem,
    GriewankProblem,
    RastriginProblem,
    RosenbrockProblem,
    SchwefelProblem,
    SphereProblem,
    ZDT2Problem,
    ZDT3Problem,
    ZDT4Problem,
    split_evaluation,
)


def test_zdt2_values():
    problem = ZDT2Problem(n_var=4)
    np.testing.assert_allclose(problem.evaluate(np.ones(4)), [1.0, 9.9])
    np.testing.assert_allclose(problem.evaluate(np.array([0.5, 0.0, 0.0, 0.0])), [0.5, 0.75])


def test_zdt3_on_front_start():
    problem = ZDT3Problem(n_var=3)
    np.testing.assert_allclose(problem.evaluate(np.zeros(3)), [0.0, 1.0])


def test_zdt3_front_dips_below_zero_but_stays_in_bounds():
    problem = ZDT3Problem(n_var=30)
    x = np.zeros(30)
    x[0] = 0.8518
    f = problem.evaluate(x)
    assert f[1] == pytest.approx(-0.7733, abs=1e-3)
    assert np.all(f >= problem.min_value())


def test_zdt4_upper_bound_grows_with_tail_length():
    problem = ZDT4Problem(n_var=10)
    assert problem.max_value().tolist() == [1.0, 1.0 + 21.0 * 9]
    assert problem.min_value().tolist() == [0.0, 0.0]
    x = np.full(10, 0.75)
    x[0] = 0.0
    assert problem.evaluate(x)[1] <= problem.max_value()[1]


def test_dtlz3_upper_bound_covers_worst_tail():
    problem = DTLZ3Problem(n_var=12)
    worst = np.full(12, 0.45)
    worst[0] = 0.0
    assert problem.evaluate(worst)[0] <= problem.max_value()[0]
    assert problem.max_value()[0] > 1000.0


def test_dtlz2_front_is_unit_sphere():
    problem = DTLZ2Problem(n_var=6, n_obj=3)
    x = np.array([0.3, 0.7, 0.5, 0.5, 0.5, 0.5])
    f = problem.evaluate(x)
    assert f.shape == (3,)
    assert float(np.sum(f**2)) == pytest.approx(1.0)


def test_dtlz3_optimum_tail_matches_dtlz2():
    x = np.array([0.2, 0.5, 0.5, 0.5])
    np.testing.assert_allclose(DTLZ3Problem(n_var=4).evaluate(x), DTLZ2Problem(n_var=4).evaluate(x), atol=1e-9)


def test_single_objective_optima():
    assert SphereProblem(n_var=3).evaluate(np.zeros(3))[0] == pytest.approx(3.0)
    assert RastriginProblem(n_var=4).evaluate(np.full(4, 0.5))[0] == pytest.approx(0.0, abs=1e-9)
    assert GriewankProblem(n_var=4).evaluate(np.full(4, 0.5))[0] == pytest.approx(0.0, abs=1e-9)
    x_rosen = np.full(3, (1.0 + 2.048) / 4.096)
    assert RosenbrockProblem(n_var=3).evaluate(x_rosen)[0] == pytest.approx(0.0, abs=1e-9)
    x_schwefel = np.full(2, (420.9687 + 512.0) / 1024.0)
    assert SchwefelProblem(n_var=2).evaluate(x_schwefel)[0] == pytest.approx(0.0, abs=1e-2)


def test_evaluate_rejects_wrong_length():
    with pytest.raises(ValueError):
        ZDT2Problem(n_var=4).evaluate(np.ones(3))


def test_binh_korn_returns_fitness_and_violation():
    problem = BinhKornProblem()
    fitness, violation = split_evaluation(problem.evaluate(np.zeros(2)), problem.n_constr)
    np.testing.assert_allclose(fitness, [0.0, 50.0])
    np.testing.assert_allclose(violation, [0.0, 0.0])
    _, violation = split_evaluation(problem.evaluate(np.array([0.0, 1.0])), problem.n_constr)
    assert violation[0] > 0.0


def test_split_evaluation_unconstrained_has_empty_violation():
    fitness, violation = split_evaluation(np.array([1.0, 2.0]), 0)
    assert fitness.tolist() == [1.0, 2.0]
    assert violation.shape == (0,)
