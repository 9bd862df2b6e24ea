"""Evaluation backends for swarm arenas.

Both backends evaluate every slot of an arena exactly once and return a new
arena; the input is left untouched. The thread backend creates a fresh pool
per call (its lifetime is one evaluation phase) and joins it before
returning.
"""

from __future__ import annotations

import itertools
import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Any, Optional

from paretoswarm.foundation.exceptions import EvaluationTimeoutError, InvalidEvaluatorError

_worker_local = threading.local()


def _logger() -> logging.Logger:
    return logging.getLogger(__name__)


def current_worker_id() -> int | None:
    """Pool-slot index of the evaluating worker (0 for serial evaluation), None elsewhere.

    Objective functions that hold one resource per worker (a simulator
    process, a licence, a scratch directory) can use it to address theirs.
    """
    return getattr(_worker_local, "worker_id", None)


def _assign_worker_id(counter: "itertools.count[int]", lock: threading.Lock) -> None:
    with lock:
        _worker_local.worker_id = next(counter)


def _evaluate_slot(arena: Any, index: int, problem: Any) -> int:
    """Worker task: evaluate one slot and report its index."""
    _logger().debug("%s: evaluating particle %d", threading.current_thread().name, index)
    arena.evaluate_one(index, problem)
    _logger().debug("%s: finished particle %d", threading.current_thread().name, index)
    return index


class SerialEvalBackend:
    """Synchronous in-process evaluation."""

    def evaluate(self, arena: Any, problem: Any, *, generation: int | None = None) -> Any:
        result = arena.copy()
        previous = getattr(_worker_local, "worker_id", None)
        _worker_local.worker_id = 0
        try:
            for index in range(len(result)):
                try:
                    result.evaluate_one(index, problem)
                except Exception:
                    _logger().exception("Evaluation of particle %d failed; keeping its previous values.", index)
        finally:
            _worker_local.worker_id = previous
        return result

    def close(self) -> None:
        return None


class ThreadPoolEvalBackend:
    """
    Concurrent evaluation, one task per particle on an ephemeral thread pool.

    Notes:
        - Each task writes only its own slot, so no locking is needed.
        - The coordinator waits at most ``timeout`` seconds, by default one
          minute per particle. Unfinished evaluations are logged as critical,
          never retried, and their slots keep the pre-evaluation values.
          Evaluations already running are not interrupted.
        - Worker threads get stable ids 0..n_workers-1, see :func:`current_worker_id`.
    """

    def __init__(self, n_workers: Optional[int] = None, timeout: Optional[float] = None):
        self.n_workers = max(1, n_workers or os.cpu_count() or 1)
        self.timeout = timeout
        self.timeouts = 0

    def deadline(self, n_particles: int) -> float:
        if self.timeout is not None:
            return float(self.timeout)
        return 60.0 * n_particles

    def evaluate(self, arena: Any, problem: Any, *, generation: int | None = None) -> Any:
        n = len(arena)
        working = arena.copy()
        counter = itertools.count()
        lock = threading.Lock()
        executor = ThreadPoolExecutor(
            max_workers=self.n_workers,
            thread_name_prefix="paretoswarm-eval",
            initializer=_assign_worker_id,
            initargs=(counter, lock),
        )
        futures = {}
        try:
            for index in range(n):
                futures[executor.submit(_evaluate_slot, working, index, problem)] = index
        finally:
            # No new submissions; queued tasks keep running.
            executor.shutdown(wait=False)

        timeout = self.deadline(n)
        done, not_done = wait(futures, timeout=timeout)

        for fut in done:
            exc = fut.exception()
            if exc is not None:
                _logger().error(
                    "Evaluation of particle %d failed; keeping its previous values.",
                    futures[fut],
                    exc_info=exc,
                )

        if not not_done:
            return working

        for fut in not_done:
            fut.cancel()  # only succeeds for tasks that never started
        unfinished = sorted(futures[fut] for fut in not_done)
        self.timeouts += 1
        _logger().critical("%s", EvaluationTimeoutError(generation, len(unfinished), timeout).message)
        result = working.copy()
        result.restore_slots(unfinished, arena)
        return result

    def close(self) -> None:
        return None


def resolve_eval_backend(
    name: str | None,
    *,
    n_workers: Optional[int] = None,
    timeout: Optional[float] = None,
):
    key = (name or "serial").lower()
    if key == "serial":
        return SerialEvalBackend()
    if key in {"threads", "thread", "threadpool"}:
        return ThreadPoolEvalBackend(n_workers=n_workers, timeout=timeout)
    raise InvalidEvaluatorError(str(name))


__all__ = [
    "SerialEvalBackend",
    "ThreadPoolEvalBackend",
    "current_worker_id",
    "resolve_eval_backend",
]
