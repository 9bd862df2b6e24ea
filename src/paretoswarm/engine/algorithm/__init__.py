from .config import OMOPSOConfig, OMOPSOConfigData
from .omopso import OMOPSO, ArchiveSelector, OMOPSOResult, Particle, Swarm

__all__ = ["OMOPSO", "OMOPSOConfig", "OMOPSOConfigData", "OMOPSOResult", "ArchiveSelector", "Particle", "Swarm"]
