"""
Retro Kombat - Configuration & Constants
========================================
All simulation settings, colors, and constants in one place.
Units are pixels and ticks (one tick per display frame).
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================

SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 600
FPS = 60
GAME_TITLE = "RETRO KOMBAT - 2 Player Fighting"

# =============================================================================
# ARENA SETTINGS
# =============================================================================

ARENA_WIDTH = SCREEN_WIDTH
GROUND_Y = 500  # Feet line
GRAVITY = 0.8
JUMP_FORCE = -18
FRICTION = 0.8
VELOCITY_EPSILON = 0.1

# =============================================================================
# FIGHTER SETTINGS
# =============================================================================

FIGHTER_WIDTH = 60
FIGHTER_HEIGHT = 80
FIGHTER_START_Y = GROUND_Y - FIGHTER_HEIGHT

MOVE_SPEED = 1.2
DEFAULT_MAX_HEALTH = 100
DEFAULT_MAX_ENERGY = 100
ENERGY_REGEN_RATE = 0.5  # per tick

ANIMATION_TICKS_PER_FRAME = 8

# =============================================================================
# COMBAT SETTINGS
# =============================================================================

ATTACK_DAMAGE = 15
ATTACK_COOLDOWN = 30
ATTACK_REACH = 40
HIT_STUN = 20
KNOCKBACK_FORCE = 3

BLOCK_STUN = 15
BLOCK_ENERGY_COST = 5

SPECIAL_ENERGY_COST = 30
SPECIAL_COOLDOWN = 60

# Particle bursts (count)
HIT_PARTICLES = 8
BLOCK_PARTICLES = 3
PROJECTILE_HIT_PARTICLES = 10

# =============================================================================
# PROJECTILE SETTINGS
# =============================================================================

SPECIAL_DAMAGE = 25
PROJECTILE_SPEED = 8
PROJECTILE_SIZE = 12
PROJECTILE_HIT_STUN = 25
PROJECTILE_BOUNDS_MARGIN = 50

# =============================================================================
# PARTICLE SETTINGS
# =============================================================================

PARTICLE_LIFETIME = 30
PARTICLE_JITTER = 10
PARTICLE_MAX_SPEED = 5.0
PARTICLE_DRAG = 0.98
PARTICLE_SIZE_MIN = 2.0
PARTICLE_SIZE_MAX = 6.0

# =============================================================================
# COLORS
# =============================================================================

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)
DARK_GRAY = (40, 40, 40)

SUB_ZERO_BLUE = "#3B82F6"
SCORPION_RED = "#EF4444"
HIT_RED = "#FF0000"
BLOCK_GOLD = "#FFD700"

FIREBALL_ORANGE = "#FF6B35"
ICE_CYAN = "#00D4FF"
LIGHTNING_GOLD = "#FFD700"

# Arena colors
SKY_TOP = (44, 24, 16)
SKY_BOTTOM = (101, 67, 33)
GROUND_BROWN = (139, 69, 19)

# UI colors
HEALTH_GREEN = (50, 200, 50)
HEALTH_RED = (200, 50, 50)
ENERGY_BLUE = (50, 150, 230)
BLOCK_GREEN = (0, 255, 0)

# =============================================================================
# ENUMS
# =============================================================================


class GamePhase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "gameOver"


class FighterState(Enum):
    """Combat state, exactly one at a time"""
    IDLE = "idle"
    WALKING = "walking"
    JUMPING = "jumping"
    ATTACKING = "attacking"
    BLOCKING = "blocking"
    HIT = "hit"
    SPECIAL = "special"


class Facing(Enum):
    LEFT = "left"
    RIGHT = "right"

    @property
    def direction(self) -> int:
        """+1 for right, -1 for left"""
        return 1 if self is Facing.RIGHT else -1

    @property
    def opposite(self) -> 'Facing':
        return Facing.LEFT if self is Facing.RIGHT else Facing.RIGHT


class Action(Enum):
    """Logical input actions, identical semantics for both players"""
    MOVE_LEFT = "moveLeft"
    MOVE_RIGHT = "moveRight"
    JUMP = "jump"
    ATTACK = "attack"
    BLOCK = "block"
    SPECIAL = "special"


class ProjectileType(Enum):
    FIREBALL = "fireball"
    ICE = "ice"
    LIGHTNING = "lightning"


PROJECTILE_COLORS: Dict[ProjectileType, str] = {
    ProjectileType.FIREBALL: FIREBALL_ORANGE,
    ProjectileType.ICE: ICE_CYAN,
    ProjectileType.LIGHTNING: LIGHTNING_GOLD,
}

# =============================================================================
# ROSTER
# =============================================================================


@dataclass(frozen=True)
class FighterProfile:
    """Fixed round-start data for one player slot"""
    name: str
    color: str
    start_x: float
    facing: Facing
    projectile_type: ProjectileType


FIGHTER_PROFILES: Dict[int, FighterProfile] = {
    1: FighterProfile(
        name="Sub-Zero",
        color=SUB_ZERO_BLUE,
        start_x=200,
        facing=Facing.RIGHT,
        projectile_type=ProjectileType.ICE,
    ),
    2: FighterProfile(
        name="Scorpion",
        color=SCORPION_RED,
        start_x=ARENA_WIDTH - 260,
        facing=Facing.LEFT,
        projectile_type=ProjectileType.FIREBALL,
    ),
}

# =============================================================================
# DEBUG FLAGS
# =============================================================================

DEBUG_HITBOXES = False
DEBUG_FRAMERATE = True
