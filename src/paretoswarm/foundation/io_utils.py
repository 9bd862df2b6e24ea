"""
Persistence helpers for paretoswarm run artifacts.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import numpy as np

from paretoswarm.foundation.exceptions import DataError


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def ensure_dir(path: str | Path) -> Path:
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def _header(label: str, count: int) -> str:
    return ",".join(f"{label} {i}" for i in range(count))


def write_archive(output_dir: str | Path, archive: Any, generation: int) -> dict:
    """
    Save one archive snapshot as ``fitness{g}.csv``, ``position{g}.csv`` and,
    for constrained runs, ``constraint{g}.csv``.

    Returns:
        dict: artifact names keyed by a short label.
    """
    out = {}
    output_dir = ensure_dir(output_dir)

    fitness_path = output_dir / f"fitness{generation}.csv"
    np.savetxt(fitness_path, archive.fitness, delimiter=",", header=_header("objective", archive.n_obj), comments="")
    out["fitness"] = fitness_path.name

    position_path = output_dir / f"position{generation}.csv"
    np.savetxt(position_path, archive.position, delimiter=",", header=_header("variable", archive.n_var), comments="")
    out["position"] = position_path.name

    if archive.n_constr > 0:
        constraint_path = output_dir / f"constraint{generation}.csv"
        np.savetxt(
            constraint_path,
            archive.constraint,
            delimiter=",",
            header=_header("constraint", archive.n_constr),
            comments="",
        )
        out["constraint"] = constraint_path.name

    return out


class ArchiveCSVWriter:
    """Persistence sink: ``writer(archive, generation)`` stores one CSV snapshot per call."""

    def __init__(self, output_dir: str | Path):
        self.output_dir = Path(output_dir)

    def __call__(self, archive: Any, generation: int) -> None:
        written = write_archive(self.output_dir, archive, generation)
        _logger().debug("Archive of generation %d written to %s: %s", generation, self.output_dir, written)


def load_initial_positions(path: str | Path) -> np.ndarray:
    """Read seed positions: one header row, then one comma-separated row per particle."""
    path = Path(path)
    if not path.is_file():
        raise DataError(f"Initial solution file '{path}' does not exist.", path=str(path))
    try:
        positions = np.loadtxt(path, delimiter=",", skiprows=1, ndmin=2)
    except ValueError as exc:
        raise DataError(f"Initial solution file '{path}' is not numeric CSV: {exc}", path=str(path)) from exc
    if positions.size == 0:
        raise DataError(f"Initial solution file '{path}' holds no positions.", path=str(path))
    return positions


def write_metadata(output_dir: str | Path, metadata: dict, resolved_cfg: dict) -> None:
    output_dir = ensure_dir(output_dir)
    with (output_dir / "metadata.json").open("w", encoding="utf-8") as f:
        json.dump(metadata, f, indent=2, sort_keys=True)
    with (output_dir / "resolved_config.json").open("w", encoding="utf-8") as f:
        json.dump(resolved_cfg, f, indent=2, sort_keys=True)


def write_timing(output_dir: str | Path, total_time_ms: float) -> None:
    output_dir = ensure_dir(output_dir)
    with (output_dir / "time.txt").open("w", encoding="utf-8") as f:
        f.write(f"{total_time_ms:.2f}\n")


__all__ = [
    "ArchiveCSVWriter",
    "ensure_dir",
    "load_initial_positions",
    "write_archive",
    "write_metadata",
    "write_timing",
]
