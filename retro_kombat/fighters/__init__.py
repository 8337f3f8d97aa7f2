"""
Fighter System Module
"""

from .fighter import Fighter, create_fighter
from .hitbox import Hitbox, check_collision, attack_hitbox
from .movement import PhysicsIntegrator

__all__ = ['Fighter', 'create_fighter', 'Hitbox', 'check_collision', 'attack_hitbox', 'PhysicsIntegrator']
