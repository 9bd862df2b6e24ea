import itertools

import numpy as np
import pytest

from paretoswarm.foundation.kernel import (
    DominanceRule,
    constraint_precedence,
    dominance_matrix,
    dominated,
    dominated_constrained,
)


def test_plain_dominance_basic_cases():
    assert dominated([1.0, 2.0], [1.0, 3.0]) is True
    assert dominated([1.0, 2.0], [0.0, 3.0]) is False
    assert dominated([0.0, 0.0], [1.0, 1.0]) is True
    assert dominated([1.0, 1.0], [0.0, 0.0]) is False


def test_plain_dominance_counts_exact_ties():
    assert dominated([1.0, 2.0], [1.0, 2.0]) is True


def test_plain_dominance_matches_componentwise_definition():
    rng = np.random.default_rng(3)
    for _ in range(200):
        a = rng.integers(0, 4, size=3).astype(float)
        b = rng.integers(0, 4, size=3).astype(float)
        assert dominated(a, b) == bool(np.all(b >= a))


def test_zero_epsilon_reduces_to_plain():
    values = [0.0, 0.5, 1.0]
    for a in itertools.product(values, repeat=2):
        for b in itertools.product(values, repeat=2):
            assert dominated(a, b, epsilon=0.0) == dominated(a, b)


def test_epsilon_relaxes_small_losses():
    basis = [1.0, 1.0]
    target = [0.95, 2.0]
    assert dominated(basis, target) is False
    assert dominated(basis, target, epsilon=0.1) is True
    assert dominated(basis, target, epsilon=0.01) is False


def test_alpha_target_winning_everywhere_is_not_dominated():
    assert dominated([1.0, 1.0], [0.0, 0.0], alpha=0.5) is False


def test_alpha_target_winning_nowhere_is_dominated():
    assert dominated([0.5, 0.5], [0.6, 0.5], alpha=0.5) is True


def test_alpha_small_win_is_absorbed_by_weighted_loss():
    basis = [0.5, 0.5]
    target = [0.45, 0.9]  # wins 0.05 on f0, loses 0.4 on f1
    assert dominated(basis, target) is False
    assert dominated(basis, target, alpha=0.2) is True  # 0.4 * 0.2 = 0.08 >= 0.05
    assert dominated(basis, target, alpha=0.1) is False  # 0.4 * 0.1 = 0.04 < 0.05


def test_tiny_alpha_agrees_with_plain_dominance():
    rng = np.random.default_rng(5)
    for _ in range(200):
        basis, target = rng.random(3), rng.random(3)
        assert dominated(basis, target, alpha=1e-9) == dominated(basis, target)


def test_alpha_takes_precedence_over_epsilon():
    basis = [0.5, 0.5]
    target = [0.45, 0.9]
    assert dominated(basis, target, epsilon=0.5, alpha=0.1) == dominated(basis, target, alpha=0.1)


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        dominated([1.0, 2.0], [1.0, 2.0, 3.0])


def test_feasible_dominates_infeasible_regardless_of_objectives():
    assert dominated_constrained([5.0, 5.0], [0.0, 0.0], [-1.0], [1.0]) is True
    assert dominated_constrained([0.0, 0.0], [5.0, 5.0], [1.0], [-1.0]) is False


def test_fewer_violated_constraints_wins():
    assert dominated_constrained([5.0, 5.0], [0.0, 0.0], [1.0, 0.0], [1.0, 1.0]) is True
    assert dominated_constrained([0.0, 0.0], [5.0, 5.0], [1.0, 1.0], [1.0, 0.0]) is False


def test_equal_violation_counts_compare_totals():
    assert dominated_constrained([5.0, 5.0], [0.0, 0.0], [0.5], [1.0]) is True
    assert dominated_constrained([0.0, 0.0], [5.0, 5.0], [1.0], [0.5]) is False


def test_both_feasible_falls_through_to_objectives():
    assert dominated_constrained([1.0, 2.0], [0.0, 3.0], [-1.0], [0.0]) is False
    assert dominated_constrained([1.0, 2.0], [1.0, 3.0], [-1.0], [-2.0]) is True


def test_unconstrained_precedence_defers():
    assert constraint_precedence(np.empty(0), np.empty(0)) is None
    assert constraint_precedence(np.array([-1.0]), np.array([0.0])) is None


def test_dominance_rule_kind_and_dispatch():
    assert DominanceRule().kind == "pareto"
    assert DominanceRule(epsilon=0.1).kind == "epsilon"
    assert DominanceRule(epsilon=0.1, alpha=0.2).kind == "alpha"
    rule = DominanceRule(alpha=0.2)
    assert rule.dominated([0.5, 0.5], [0.45, 0.9]) is True
    assert rule.dominated([5.0, 5.0], [0.0, 0.0], [-1.0], [1.0]) is True


@pytest.mark.parametrize("epsilon,alpha", [(0.0, 0.0), (0.05, 0.0), (0.0, 0.3)])
def test_dominance_matrix_agrees_with_pairwise_rule(epsilon, alpha):
    rng = np.random.default_rng(11)
    F = rng.random((12, 3))
    G = np.where(rng.random((12, 2)) < 0.3, rng.random((12, 2)), -rng.random((12, 2)))
    D = dominance_matrix(F, G, epsilon, alpha)
    for j in range(F.shape[0]):
        for i in range(F.shape[0]):
            if i == j:
                assert not D[j, i]
                continue
            assert D[j, i] == dominated_constrained(F[j], F[i], G[j], G[i], epsilon, alpha)
