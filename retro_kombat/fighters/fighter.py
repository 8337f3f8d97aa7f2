"""
Fighter
=======
Fighter entity dan state machine per tick.
Semua timer dihitung dalam tick, bukan detik.
"""

import logging
from dataclasses import dataclass
from typing import Tuple

from ..config import (
    Action, Facing, FighterState, ProjectileType, FIGHTER_PROFILES,
    ARENA_WIDTH, FIGHTER_WIDTH, FIGHTER_HEIGHT, FIGHTER_START_Y,
    DEFAULT_MAX_HEALTH, DEFAULT_MAX_ENERGY, ENERGY_REGEN_RATE,
    MOVE_SPEED, JUMP_FORCE, ATTACK_COOLDOWN,
    SPECIAL_ENERGY_COST, SPECIAL_COOLDOWN, ANIMATION_TICKS_PER_FRAME
)
from ..input_snapshot import PlayerInput
from .hitbox import Rect

logger = logging.getLogger(__name__)


@dataclass
class Fighter:
    """
    Satu combatant. Mutable record yang hanya diubah oleh Simulation.
    (x, y) adalah pojok kiri atas rectangle.
    """
    id: int
    name: str
    color: str
    facing: Facing
    projectile_type: ProjectileType

    x: float = 0
    y: float = FIGHTER_START_Y
    width: float = FIGHTER_WIDTH
    height: float = FIGHTER_HEIGHT
    velocity_x: float = 0
    velocity_y: float = 0

    health: float = DEFAULT_MAX_HEALTH
    max_health: float = DEFAULT_MAX_HEALTH
    energy: float = DEFAULT_MAX_ENERGY
    max_energy: float = DEFAULT_MAX_ENERGY

    state: FighterState = FighterState.IDLE
    is_grounded: bool = True

    attack_cooldown: int = 0
    special_cooldown: int = 0
    hit_stun: int = 0
    block_stun: int = 0

    combo: int = 0
    animation_frame: int = 0
    animation_timer: int = 0

    # Serangan melee kena satu kali, satu tick setelah dimulai
    pending_strike: bool = False
    strike_ready: bool = False

    # Apakah input gerak horizontal dipakai tick ini (untuk friction)
    moved_this_tick: bool = False

    # Stun di awal tick mengunci input sepanjang tick itu
    input_locked: bool = False

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    @property
    def is_stunned(self) -> bool:
        return self.hit_stun > 0 or self.block_stun > 0

    def faces(self, other: 'Fighter') -> bool:
        """True jika facing berlawanan dengan other (saling berhadapan)"""
        return self.facing is other.facing.opposite

    # ------------------------------------------------------------------
    # Per-tick bookkeeping
    # ------------------------------------------------------------------

    def update_animation(self):
        self.animation_timer += 1
        if self.animation_timer % ANIMATION_TICKS_PER_FRAME == 0:
            self.animation_frame += 1

    def update_timers(self):
        """Kurangi semua countdown yang masih positif, lalu arm strike"""
        self.input_locked = self.is_stunned

        if self.attack_cooldown > 0:
            self.attack_cooldown -= 1
        if self.special_cooldown > 0:
            self.special_cooldown -= 1
        if self.hit_stun > 0:
            self.hit_stun -= 1
        if self.block_stun > 0:
            self.block_stun -= 1

        # Strike yang dimulai tick lalu jadi aktif tick ini saja
        self.strike_ready = self.pending_strike
        self.pending_strike = False

    def regenerate_energy(self):
        if self.energy < self.max_energy:
            self.energy = min(self.max_energy, self.energy + ENERGY_REGEN_RATE)

    def recover_from_stun(self):
        if not self.is_stunned and self.state is FighterState.HIT:
            self.state = FighterState.IDLE

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def apply_input(self, player_input: PlayerInput) -> bool:
        """
        Terapkan input tick ini sesuai urutan check.
        Urutan: move, jump, attack, special, block. State terakhir yang
        ditulis menang. Return True jika special dilepas (caller spawn
        projectile).
        """
        self.moved_this_tick = False
        if self.input_locked or self.is_stunned:
            return False

        if player_input.is_held(Action.MOVE_LEFT) and self.x > 0:
            self._walk(Facing.LEFT)
        elif player_input.is_held(Action.MOVE_RIGHT) and self.x < ARENA_WIDTH - self.width:
            self._walk(Facing.RIGHT)

        if player_input.is_held(Action.JUMP) and self.is_grounded:
            self.velocity_y = JUMP_FORCE
            self.is_grounded = False
            self.state = FighterState.JUMPING

        if player_input.is_held(Action.ATTACK) and self.attack_cooldown == 0:
            self.state = FighterState.ATTACKING
            self.attack_cooldown = ATTACK_COOLDOWN
            self.pending_strike = True

        special_fired = False
        if (player_input.is_held(Action.SPECIAL) and
                self.energy >= SPECIAL_ENERGY_COST and
                self.special_cooldown == 0):
            self.state = FighterState.SPECIAL
            self.spend_energy(SPECIAL_ENERGY_COST)
            self.special_cooldown = SPECIAL_COOLDOWN
            special_fired = True

        if player_input.is_held(Action.BLOCK):
            self.state = FighterState.BLOCKING

        return special_fired

    def _walk(self, facing: Facing):
        self.velocity_x = facing.direction * MOVE_SPEED
        self.facing = facing
        self.state = FighterState.WALKING
        self.moved_this_tick = True

    # ------------------------------------------------------------------
    # Combat
    # ------------------------------------------------------------------

    def take_damage(self, amount: float) -> float:
        """Kurangi health (clamp di 0). Return damage yang benar-benar masuk"""
        before = self.health
        self.health = max(0, self.health - amount)
        return before - self.health

    def spend_energy(self, amount: float):
        self.energy = max(0, self.energy - amount)

    @property
    def is_defeated(self) -> bool:
        return self.health <= 0

    @property
    def health_percent(self) -> float:
        return self.health / self.max_health if self.max_health else 0.0

    @property
    def energy_percent(self) -> float:
        return self.energy / self.max_energy if self.max_energy else 0.0


def create_fighter(player_id: int) -> Fighter:
    """
    Buat fighter baru dengan stats awal untuk slot player.
    Dipanggil setiap awal round, tidak ada carry-over.
    """
    profile = FIGHTER_PROFILES.get(player_id)
    if profile is None:
        raise ValueError(f"Unknown player slot: {player_id}")

    fighter = Fighter(
        id=player_id,
        name=profile.name,
        color=profile.color,
        facing=profile.facing,
        projectile_type=profile.projectile_type,
        x=profile.start_x,
    )
    logger.debug("Created fighter %s (%d) at x=%s", fighter.name, player_id, fighter.x)
    return fighter
