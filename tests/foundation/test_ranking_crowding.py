import numpy as np
import pytest

from paretoswarm.foundation.kernel import (
    MAX_DISTANCE,
    calculate_border_rank,
    calculate_distance,
    normalize_fitness,
    pareto_front_mask,
    rank_index,
    ranking,
)

FRONT_AND_TAIL = np.array(
    [
        [1.0, 4.0],
        [2.0, 3.0],
        [3.0, 2.0],
        [4.0, 1.0],
        [3.0, 3.0],
        [4.0, 4.0],
    ]
)


def test_ranking_counts_dominators():
    rank = ranking(FRONT_AND_TAIL)
    assert rank.tolist() == [1, 1, 1, 1, 3, 6]


def test_ranking_gives_rank_one_to_the_whole_front():
    rng = np.random.default_rng(0)
    F = rng.random((30, 2))
    rank = ranking(F)
    np.testing.assert_array_equal(rank == 1, pareto_front_mask(F))


def test_duplicates_dominate_each_other():
    rank = ranking(np.array([[1.0, 1.0], [1.0, 1.0], [0.0, 2.0]]))
    assert rank.tolist() == [2, 2, 1]


def test_constrained_ranking_puts_feasible_first():
    F = np.array([[0.0, 0.0], [1.0, 1.0]])
    G = np.array([[1.0], [-1.0]])
    assert ranking(F, G).tolist() == [2, 1]


def test_rank_index_selects_members():
    rank = np.array([1, 3, 1, 2])
    assert rank_index(rank, 1).tolist() == [0, 2]
    assert rank_index(rank, 4).tolist() == []


def test_border_rank_is_first_rank_exceeding_capacity():
    rank = ranking(FRONT_AND_TAIL)
    assert calculate_border_rank(rank, 4) == 3
    assert calculate_border_rank(rank, 3) == 1
    assert calculate_border_rank(rank, 5) == 6


def test_border_rank_when_capacity_covers_population():
    rank = np.array([1, 2, 2, 5])
    assert calculate_border_rank(rank, 4) == 5
    assert calculate_border_rank(rank, 10) == 5


def test_border_rank_of_empty_population_raises():
    with pytest.raises(ValueError):
        calculate_border_rank(np.array([], dtype=int), 3)


def test_crowding_marks_extremes_and_sums_two_nearest():
    F = np.array([[0.0, 1.0], [0.25, 0.75], [0.5, 0.5], [1.0, 0.0]])
    distance = calculate_distance(F)
    assert distance[0] == MAX_DISTANCE
    assert distance[3] == MAX_DISTANCE
    assert distance[1] == pytest.approx(1.0)
    assert distance[2] == pytest.approx(1.5)


def test_crowding_prefers_isolated_interior_points():
    F = np.array([[0.0, 1.0], [0.1, 0.9], [0.15, 0.85], [0.6, 0.4], [1.0, 0.0]])
    distance = calculate_distance(F)
    assert distance[3] > distance[1]
    assert distance[3] > distance[2]


def test_crowding_of_single_point_is_boundary():
    assert calculate_distance(np.array([[0.3, 0.7]])).tolist() == [MAX_DISTANCE]


def test_normalize_fitness_uses_declared_bounds():
    F = np.array([[5.0, 10.0], [0.0, 20.0]])
    np.testing.assert_allclose(normalize_fitness(F, [0.0, 0.0], [10.0, 20.0]), [[0.5, 0.5], [0.0, 1.0]])


def test_normalize_fitness_tolerates_zero_span():
    out = normalize_fitness(np.array([[1.0, 1.0]]), [1.0, 1.0], [1.0, 1.0])
    assert np.all(np.isfinite(out))
    np.testing.assert_allclose(out, 0.0)


def test_pareto_front_mask_keeps_duplicates():
    F = np.array([[1.0, 2.0], [2.0, 1.0], [2.0, 2.0], [1.0, 2.0]])
    assert pareto_front_mask(F).tolist() == [True, True, False, True]
