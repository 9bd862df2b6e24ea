import logging

import numpy as np
import pytest

from paretoswarm.ux.plotting import plot_archive_front


def test_plot_is_saved(tmp_path):
    pytest.importorskip("matplotlib")
    F = np.array([[0.0, 1.0], [0.5, 0.5], [1.0, 0.0], [0.8, 0.8]])
    path = plot_archive_front(F, output_dir=tmp_path, title="Pareto front - test")
    assert path is not None and path.exists()


def test_single_objective_is_skipped(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        assert plot_archive_front(np.array([[1.0], [2.0]]), output_dir=tmp_path, title="t") is None
    assert "at least two objectives" in caplog.text


def test_empty_archive_is_skipped(tmp_path):
    assert plot_archive_front(np.empty((0, 2)), output_dir=tmp_path, title="t") is None
