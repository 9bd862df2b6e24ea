from __future__ import annotations

from typing import Any, Protocol, TypeVar

ArenaT = TypeVar("ArenaT", bound="SlotArena")


class SlotArena(Protocol):
    """A fixed-size collection of slots evaluated one index at a time.

    ``evaluate_one(i, problem)`` may only write slot ``i``; this is what makes
    concurrent evaluation safe without locks.
    """

    def __len__(self) -> int: ...

    def copy(self: ArenaT) -> ArenaT: ...

    def evaluate_one(self, index: int, problem: Any) -> None: ...

    def restore_slots(self, indices: Any, source: Any) -> None: ...


class EvaluationBackend(Protocol):
    """Protocol for evaluation backends."""

    def evaluate(self, arena: ArenaT, problem: Any, *, generation: int | None = None) -> ArenaT: ...

    def close(self) -> None:  # pragma: no cover - optional for pooled backends
        """Clean up any resources (executors, pools)."""
        return None


from .backends import (  # noqa: E402
    SerialEvalBackend,
    ThreadPoolEvalBackend,
    current_worker_id,
    resolve_eval_backend,
)

__all__ = [
    "EvaluationBackend",
    "SlotArena",
    "SerialEvalBackend",
    "ThreadPoolEvalBackend",
    "current_worker_id",
    "resolve_eval_backend",
]
