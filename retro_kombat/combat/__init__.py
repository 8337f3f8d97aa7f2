"""
Combat System Module
"""

from .engine import CombatEngine, HitEvent
from .projectiles import Projectile, ProjectileManager, ProjectileHit

__all__ = ['CombatEngine', 'HitEvent', 'Projectile', 'ProjectileManager', 'ProjectileHit']
