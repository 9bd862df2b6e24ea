import numpy as np

from paretoswarm.engine.algorithm.omopso import (
    Swarm,
    draw_coefficients,
    mutate_swarm,
    mutation_groups,
    select_leaders,
    update_swarm,
)


def _evaluated_swarm(n=9, n_var=3, seed=0):
    swarm = Swarm.initialize(n, n_var, 2, 0, np.random.default_rng(seed))
    swarm.fitness = np.random.default_rng(seed + 1).random((n, 2))
    swarm.best_fitness = swarm.fitness.copy()
    return swarm


def test_coefficients_stay_in_range():
    rng = np.random.default_rng(0)
    for _ in range(500):
        w, c1, c2 = draw_coefficients(rng)
        assert 0.1 <= w < 0.5
        assert 1.5 <= c1 < 2.0
        assert 1.5 <= c2 < 2.0


def test_mutation_groups_split_a_permutation():
    uniform, non_uniform, untouched = mutation_groups(20, np.random.default_rng(1))
    assert (uniform.size, non_uniform.size, untouched.size) == (7, 7, 6)
    assert sorted(np.concatenate([uniform, non_uniform, untouched]).tolist()) == list(range(20))
    sizes = [g.size for g in mutation_groups(4, np.random.default_rng(1))]
    assert sizes == [2, 1, 1]


def test_leaders_come_from_first_rank_only():
    archive = Swarm.empty(3, 2, 2)
    archive.position = np.array([[0.0, 0.0], [1.0, 1.0], [0.5, 0.5]])
    archive.fitness = np.array([[0.0, 1.0], [1.0, 0.0], [2.0, 2.0]])
    leaders = select_leaders(archive, 50, np.random.default_rng(2))
    assert leaders.shape == (50, 2)
    assert not np.any(np.all(leaders == [0.5, 0.5], axis=1))


def test_update_swarm_keeps_ranges_and_input():
    swarm = _evaluated_swarm()
    archive = swarm.copy()
    before = swarm.copy()

    moved = update_swarm(swarm, archive, np.random.default_rng(3))

    assert np.all((moved.position >= 0.0) & (moved.position <= 1.0))
    assert np.all((moved.velocity >= -0.5) & (moved.velocity <= 0.5))
    np.testing.assert_array_equal(moved.fitness, swarm.fitness)
    np.testing.assert_array_equal(swarm.position, before.position)


def test_update_swarm_without_forces_keeps_positions():
    swarm = _evaluated_swarm()
    moved = update_swarm(swarm, swarm.copy(), np.random.default_rng(4), coefficients=(0.0, 0.0, 0.0))
    np.testing.assert_allclose(moved.position, swarm.position)
    np.testing.assert_allclose(moved.velocity, 0.0)


def test_update_swarm_pulls_towards_personal_best():
    swarm = _evaluated_swarm()
    swarm.velocity[:] = 0.0
    swarm.best_position = np.clip(swarm.position + 0.1, 0.0, 1.0)
    moved = update_swarm(swarm, swarm.copy(), np.random.default_rng(5), coefficients=(0.0, 1.0, 0.0))
    assert np.all(moved.position >= swarm.position)


def test_mutation_preserves_order_and_untouched_group():
    swarm = _evaluated_swarm(n=12, n_var=4)
    _, _, untouched = mutation_groups(12, np.random.default_rng(6))

    mutated = mutate_swarm(swarm, generation=0, rng=np.random.default_rng(6))

    np.testing.assert_array_equal(mutated.position[untouched], swarm.position[untouched])
    np.testing.assert_array_equal(mutated.velocity[untouched], swarm.velocity[untouched])
    np.testing.assert_array_equal(mutated.fitness, swarm.fitness)
    assert np.all((mutated.position >= 0.0) & (mutated.position <= 1.0))
    assert np.all((mutated.velocity >= -0.5) & (mutated.velocity <= 0.5))


def test_mutation_changes_some_particles():
    swarm = _evaluated_swarm(n=30, n_var=2)
    mutated = mutate_swarm(swarm, generation=0, rng=np.random.default_rng(7))
    assert np.any(mutated.position != swarm.position)
