"""
Movement / Physics Integrator
=============================
Gravity, velocity, ground clamping, dan batas layar untuk fighter.
Deterministic per tick, tidak ada error.
"""

from dataclasses import dataclass

from ..config import (
    ARENA_WIDTH, GROUND_Y, GRAVITY, FRICTION, VELOCITY_EPSILON,
    FighterState
)


@dataclass
class PhysicsIntegrator:
    """
    Integrasi posisi fighter satu tick.
    """
    arena_width: float = ARENA_WIDTH
    ground_y: float = GROUND_Y
    gravity: float = GRAVITY
    friction: float = FRICTION
    velocity_epsilon: float = VELOCITY_EPSILON

    def update(self, fighter):
        """Update posisi per tick"""
        # Friction hanya jika tidak ada input gerak horizontal tick ini
        if not fighter.moved_this_tick:
            self.apply_friction(fighter)

        # Gravity
        if not fighter.is_grounded:
            fighter.velocity_y += self.gravity

        # Apply velocity
        fighter.x += fighter.velocity_x
        fighter.y += fighter.velocity_y

        # Ground collision
        if fighter.y >= self.ground_y - fighter.height:
            self.land(fighter)

        # Clamp ke arena
        fighter.x = max(0, min(self.arena_width - fighter.width, fighter.x))

    def apply_friction(self, fighter):
        fighter.velocity_x *= self.friction
        if abs(fighter.velocity_x) < self.velocity_epsilon:
            fighter.velocity_x = 0
            if fighter.state is FighterState.WALKING:
                fighter.state = FighterState.IDLE

    def land(self, fighter):
        """Fighter menyentuh tanah"""
        fighter.y = self.ground_y - fighter.height
        fighter.velocity_y = 0
        fighter.is_grounded = True
        if fighter.state is FighterState.JUMPING:
            fighter.state = FighterState.IDLE
