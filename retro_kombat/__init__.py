"""
Retro Kombat - two-fighter arcade simulation
"""

from .core.simulation import Simulation, WorldSnapshot, RoundOutcome
from .input_snapshot import InputSnapshot, PlayerInput

__version__ = "1.0.0"

__all__ = ['Simulation', 'WorldSnapshot', 'RoundOutcome', 'InputSnapshot', 'PlayerInput']
