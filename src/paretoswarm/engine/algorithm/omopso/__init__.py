"""
OMOPSO algorithm module.

This package provides the OMOPSO (Optimized Multi-Objective Particle Swarm
Optimization) implementation with modular components:
- `omopso.py`: main OMOPSO class (generation loop) and OMOPSOResult
- `state.py`: Particle, Swarm and OMOPSOState
- `helpers.py`: leader selection, velocity update and turbulence
- `selection.py`: ArchiveSelector (border rank + crowding truncation)

References:
    Sierra, M.R. and Coello Coello, C.A. (2005). Improving PSO-based
    multi-objective optimization using crowding, mutation and
    epsilon-dominance. EMO 2005, LNCS 3410, pp. 505-519.
"""

from .omopso import OMOPSO, ArchiveSink, OMOPSOResult
from .helpers import draw_coefficients, mutate_swarm, mutation_groups, select_leaders, update_swarm
from .selection import ArchiveSelector
from .state import POSITION_RANGE, VELOCITY_RANGE, OMOPSOState, Particle, Swarm

__all__ = [
    "OMOPSO",
    "OMOPSOResult",
    "ArchiveSink",
    # Helpers
    "draw_coefficients",
    "mutate_swarm",
    "mutation_groups",
    "select_leaders",
    "update_swarm",
    # Selection
    "ArchiveSelector",
    # State
    "POSITION_RANGE",
    "VELOCITY_RANGE",
    "OMOPSOState",
    "Particle",
    "Swarm",
]
