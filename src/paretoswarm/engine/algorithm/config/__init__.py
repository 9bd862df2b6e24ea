"""Algorithm configuration module.

Examples:
    from paretoswarm.engine.algorithm.config import OMOPSOConfig

    cfg = OMOPSOConfig().pop_size(20).n_var(30).generations(50).epsilon(0.01).fixed()
"""

from .omopso import EVALUATORS, OMOPSOConfig, OMOPSOConfigData

__all__ = ["EVALUATORS", "OMOPSOConfig", "OMOPSOConfigData"]
