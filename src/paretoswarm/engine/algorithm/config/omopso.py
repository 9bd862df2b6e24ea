"""OMOPSO configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from paretoswarm.foundation.exceptions import InvalidEvaluatorError, InvalidParameterError
from .base import _SerializableConfig, _reject_unknown_keys, _require_fields

EVALUATORS = ("serial", "threads")


@dataclass(frozen=True)
class OMOPSOConfigData(_SerializableConfig):
    pop_size: int
    n_var: int
    generations: int
    n_obj: Optional[int] = None
    n_constr: int = 0
    epsilon: float = 0.0
    alpha: float = 0.0
    evaluator: str = "serial"
    n_workers: Optional[int] = None
    timeout: Optional[float] = None
    seed: Optional[int] = None
    problem: Optional[str] = None
    initial_solutions: Optional[str] = None
    output_dir: Optional[str] = None

    def validate(self) -> "OMOPSOConfigData":
        """Check every run parameter against its admissible range; return self."""
        if self.pop_size < 3:
            raise InvalidParameterError("pop_size", self.pop_size, "at least 3")
        if self.n_var < 2:
            raise InvalidParameterError("n_var", self.n_var, "at least 2")
        if self.generations < 0:
            raise InvalidParameterError("generations", self.generations, "zero or positive")
        if self.n_obj is not None and self.n_obj < 1:
            raise InvalidParameterError("n_obj", self.n_obj, "at least 1")
        if self.n_constr < 0:
            raise InvalidParameterError("n_constr", self.n_constr, "zero or positive")
        if not 0.0 <= self.epsilon < 1.0:
            raise InvalidParameterError("epsilon", self.epsilon, "in [0, 1)")
        if not 0.0 <= self.alpha < 1.0:
            raise InvalidParameterError("alpha", self.alpha, "in [0, 1)")
        if self.evaluator not in EVALUATORS:
            raise InvalidEvaluatorError(self.evaluator, list(EVALUATORS))
        if self.n_workers is not None and self.n_workers < 1:
            raise InvalidParameterError("n_workers", self.n_workers, "at least 1")
        if self.timeout is not None and self.timeout <= 0:
            raise InvalidParameterError("timeout", self.timeout, "a positive number of seconds")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OMOPSOConfigData":
        """Build a validated config from a plain mapping (e.g. a loaded config file)."""
        _reject_unknown_keys(data, cls, "OMOPSO")
        builder = OMOPSOConfig()
        builder._cfg.update(data)
        return builder.fixed()


class OMOPSOConfig:
    """Declarative configuration holder for OMOPSO settings."""

    def __init__(self) -> None:
        self._cfg: Dict[str, Any] = {}

    def pop_size(self, value: int) -> "OMOPSOConfig":
        self._cfg["pop_size"] = value
        return self

    def n_var(self, value: int) -> "OMOPSOConfig":
        self._cfg["n_var"] = value
        return self

    def n_obj(self, value: int) -> "OMOPSOConfig":
        self._cfg["n_obj"] = value
        return self

    def n_constr(self, value: int) -> "OMOPSOConfig":
        self._cfg["n_constr"] = value
        return self

    def generations(self, value: int) -> "OMOPSOConfig":
        self._cfg["generations"] = value
        return self

    def epsilon(self, value: float) -> "OMOPSOConfig":
        self._cfg["epsilon"] = value
        return self

    def alpha(self, value: float) -> "OMOPSOConfig":
        self._cfg["alpha"] = value
        return self

    def evaluator(self, value: str, *, n_workers: int | None = None, timeout: float | None = None) -> "OMOPSOConfig":
        self._cfg["evaluator"] = value
        if n_workers is not None:
            self._cfg["n_workers"] = n_workers
        if timeout is not None:
            self._cfg["timeout"] = timeout
        return self

    def seed(self, value: int) -> "OMOPSOConfig":
        self._cfg["seed"] = value
        return self

    def problem(self, name: str) -> "OMOPSOConfig":
        self._cfg["problem"] = name
        return self

    def initial_solutions(self, path: str) -> "OMOPSOConfig":
        self._cfg["initial_solutions"] = str(path)
        return self

    def output_dir(self, path: str) -> "OMOPSOConfig":
        self._cfg["output_dir"] = str(path)
        return self

    def fixed(self) -> OMOPSOConfigData:
        _require_fields(self._cfg, ("pop_size", "n_var", "generations"), "OMOPSO")
        cfg = self._cfg
        n_obj = cfg.get("n_obj")
        n_workers = cfg.get("n_workers")
        timeout = cfg.get("timeout")
        seed = cfg.get("seed")
        return OMOPSOConfigData(
            pop_size=int(cfg["pop_size"]),
            n_var=int(cfg["n_var"]),
            generations=int(cfg["generations"]),
            n_obj=int(n_obj) if n_obj is not None else None,
            n_constr=int(cfg.get("n_constr") or 0),
            epsilon=float(cfg.get("epsilon") or 0.0),
            alpha=float(cfg.get("alpha") or 0.0),
            evaluator=str(cfg.get("evaluator") or "serial").lower(),
            n_workers=int(n_workers) if n_workers is not None else None,
            timeout=float(timeout) if timeout is not None else None,
            seed=int(seed) if seed is not None else None,
            problem=cfg.get("problem"),
            initial_solutions=cfg.get("initial_solutions"),
            output_dir=cfg.get("output_dir"),
        ).validate()


__all__ = ["EVALUATORS", "OMOPSOConfig", "OMOPSOConfigData"]
