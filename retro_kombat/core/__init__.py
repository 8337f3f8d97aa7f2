"""
Core simulation modules
"""

from .state_machine import StateMachine
from .simulation import Simulation, WorldSnapshot, RoundOutcome

__all__ = ['StateMachine', 'Simulation', 'WorldSnapshot', 'RoundOutcome']
