"""
paretoswarm exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All paretoswarm-specific exceptions inherit from ParetoSwarmError for easy catching.

Example:
    try:
        config = OMOPSOConfig().pop_size(2).fixed()
    except ParetoSwarmError as e:
        print(f"Configuration rejected: {e}")
        print(f"Suggestion: {e.suggestion}")
"""

from __future__ import annotations

from typing import Any


class ParetoSwarmError(Exception):
    """
    Base exception for all paretoswarm errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(ParetoSwarmError):
    """Raised when configuration is invalid or incomplete."""

    pass


class InvalidParameterError(ConfigurationError):
    """Raised when a numeric run parameter is outside its admissible range."""

    def __init__(self, field: str, value: Any, expected: str) -> None:
        message = f"Invalid value for '{field}': {value!r}."
        suggestion = f"'{field}' must be {expected}"
        super().__init__(message, suggestion, {"field": field, "value": value})


class InvalidEvaluatorError(ConfigurationError):
    """Raised when an unknown evaluation backend is specified."""

    def __init__(self, evaluator: str, available: list[str] | None = None) -> None:
        available = available or ["serial", "threads"]
        message = f"Unknown evaluator '{evaluator}'."
        suggestion = f"Available evaluators: {', '.join(available)}"
        super().__init__(message, suggestion, {"evaluator": evaluator, "available": available})


class MissingConfigError(ConfigurationError):
    """Raised when required configuration is missing."""

    def __init__(self, field: str, config_class: str | None = None) -> None:
        message = f"Missing required configuration: '{field}'."
        suggestion = f"Add '{field}' to your configuration"
        if config_class:
            suggestion += f" or set it through {config_class}().{field}(...)"
        super().__init__(message, suggestion, {"field": field})


# =============================================================================
# Problem Errors
# =============================================================================


class InvalidProblemError(ConfigurationError):
    """Raised when an unknown objective function is specified."""

    def __init__(self, problem: str, available: list[str] | None = None, matches: list[str] | None = None) -> None:
        message = f"Unknown objective function '{problem}'."
        if matches:
            suggestion = "Did you mean " + " or ".join(f"'{m}'" for m in matches) + "?"
        elif available:
            suggestion = f"Available: {', '.join(available)}."
        else:
            suggestion = "Use available_problem_names() to see registered objective functions."
        super().__init__(message, suggestion, {"problem": problem})


class ProblemDimensionError(ConfigurationError):
    """Raised when the objective function disagrees with the configured dimensions."""

    def __init__(
        self,
        message: str,
        n_var: int | None = None,
        n_obj: int | None = None,
        n_constr: int | None = None,
    ) -> None:
        suggestion = "Check n_var (variables), n_obj (objectives) and n_constr (constraints)"
        super().__init__(message, suggestion, {"n_var": n_var, "n_obj": n_obj, "n_constr": n_constr})


# =============================================================================
# Runtime conditions
# =============================================================================


class OptimizationError(ParetoSwarmError):
    """Raised (or logged) when something goes wrong inside a generation."""

    pass


class EvaluationTimeoutError(OptimizationError):
    """A concurrent evaluation phase did not finish before its deadline.

    The optimizer logs this condition and continues with partial results;
    it is never raised out of a generation.
    """

    def __init__(self, generation: int | None, unfinished: int, timeout: float) -> None:
        message = f"{unfinished} evaluation(s) did not finish within {timeout:.0f}s" + (
            f" in generation {generation}." if generation is not None else "."
        )
        suggestion = "Increase the evaluation timeout or the number of workers"
        super().__init__(
            message,
            suggestion,
            {"generation": generation, "unfinished": unfinished, "timeout": timeout},
        )


class RankingInvariantError(OptimizationError):
    """More individuals ranked above the border rank than the archive can hold."""

    def __init__(self, upper_size: int, capacity: int) -> None:
        message = f"Upper rank set holds {upper_size} individuals but the archive capacity is {capacity}."
        suggestion = "Ranking degenerated; inspect the dominance rule and the objective values"
        super().__init__(message, suggestion, {"upper_size": upper_size, "capacity": capacity})


class EvaluationError(OptimizationError):
    """Raised when objective evaluation returns malformed values."""

    def __init__(self, message: str, solution: Any = None) -> None:
        suggestion = "Check your objective function's evaluate() for errors"
        super().__init__(message, suggestion, {"solution": solution})


# =============================================================================
# Data/IO Errors
# =============================================================================


class DataError(ParetoSwarmError):
    """Raised when an input file (initial solutions, config) cannot be used."""

    def __init__(self, message: str, path: str | None = None) -> None:
        suggestion = "Check the file path and its contents"
        super().__init__(message, suggestion, {"path": path})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "ParetoSwarmError",
    # Configuration
    "ConfigurationError",
    "InvalidParameterError",
    "InvalidEvaluatorError",
    "MissingConfigError",
    # Problem
    "InvalidProblemError",
    "ProblemDimensionError",
    # Runtime
    "OptimizationError",
    "EvaluationTimeoutError",
    "RankingInvariantError",
    "EvaluationError",
    # Data/IO
    "DataError",
]
