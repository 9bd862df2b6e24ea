from .utils import compute_violation, is_feasible, violated_count

__all__ = ["compute_violation", "is_feasible", "violated_count"]
