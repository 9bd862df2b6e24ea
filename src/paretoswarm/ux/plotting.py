from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from paretoswarm.foundation.io_utils import ensure_dir
from paretoswarm.foundation.kernel.dominance import pareto_front_mask


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def plot_archive_front(
    F: np.ndarray,
    *,
    output_dir: str | Path,
    title: str,
    filename: str = "pareto_front.png",
) -> Path | None:
    """Scatter the archive in objective space and trace its non-dominated subset.

    Returns the image path, or None when the plot was skipped (fewer than two
    objectives, empty archive, or matplotlib not installed).
    """
    F = np.asarray(F, dtype=float)
    if F.size == 0:
        return None
    n_obj = F.shape[1]
    if n_obj < 2:
        _logger().warning("Pareto visualization requires at least two objectives; skipping plot.")
        return None
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
    except ImportError as exc:
        _logger().warning(
            "matplotlib is required for plotting the Pareto front (skipping plot: %s).",
            exc,
        )
        return None

    dims = 3 if n_obj >= 3 else 2
    if dims == 3:
        fig = plt.figure(figsize=(8, 6))
        ax = fig.add_subplot(111, projection="3d")
        ax.set_zlabel("Objective 3")
    else:
        fig, ax = plt.subplots(figsize=(7, 5))
    ax.set_xlabel("Objective 1")
    ax.set_ylabel("Objective 2")

    coords = F[:, :dims]
    if dims == 3:
        ax.scatter(coords[:, 0], coords[:, 1], coords[:, 2], label="archive", s=22, alpha=0.7)
    else:
        ax.scatter(coords[:, 0], coords[:, 1], label="archive", s=35, alpha=0.8)

    front = F[pareto_front_mask(F)][:, :dims]
    if dims == 2 and front.shape[0] > 1:
        front = front[np.argsort(front[:, 0])]
        ax.plot(front[:, 0], front[:, 1], color="black", linewidth=1.5, label="non-dominated")

    plot_title = title
    if n_obj > dims:
        plot_title += f" (showing first {dims} objectives)"
    ax.set_title(plot_title)
    ax.legend()
    fig.tight_layout()

    plot_path = ensure_dir(output_dir) / filename
    fig.savefig(plot_path, dpi=200)
    plt.close(fig)
    _logger().info("Pareto front plot saved to: %s", plot_path)
    return plot_path


__all__ = ["plot_archive_front"]
