"""
Projectile System
=================
Projectile lifecycle: spawn, move, collide, destroy.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..config import (
    ProjectileType, FighterState, PROJECTILE_COLORS,
    ARENA_WIDTH, PROJECTILE_SPEED, PROJECTILE_SIZE, PROJECTILE_BOUNDS_MARGIN,
    PROJECTILE_HIT_STUN, PROJECTILE_HIT_PARTICLES, SPECIAL_DAMAGE
)
from ..fighters.hitbox import Rect, check_collision

logger = logging.getLogger(__name__)


@dataclass
class Projectile:
    """Special-move projectile. (x, y) adalah titik tengah."""
    id: int
    x: float
    y: float
    velocity_x: float
    velocity_y: float
    damage: float
    owner: int
    type: ProjectileType
    color: str
    animation_frame: int = 0

    @property
    def rect(self) -> Rect:
        half = PROJECTILE_SIZE / 2
        return (self.x - half, self.y - half, PROJECTILE_SIZE, PROJECTILE_SIZE)

    @property
    def direction(self) -> int:
        return 1 if self.velocity_x >= 0 else -1


@dataclass
class ProjectileHit:
    """Hasil tabrakan projectile dengan fighter"""
    projectile: Projectile
    defender_id: int
    blocked: bool
    damage: float = 0


class ProjectileManager:
    """
    Pemilik tunggal semua projectile yang masih hidup.
    """

    def __init__(self, arena_width: float = ARENA_WIDTH,
                 margin: float = PROJECTILE_BOUNDS_MARGIN):
        self.projectiles: List[Projectile] = []
        self.arena_width = arena_width
        self.margin = margin
        self._ids = itertools.count(1)

    def spawn(self, owner, projectile_type: ProjectileType) -> Projectile:
        """Spawn projectile di sisi depan owner, bergerak searah facing"""
        if not isinstance(projectile_type, ProjectileType):
            try:
                projectile_type = ProjectileType(projectile_type)
            except ValueError:
                raise ValueError(f"Unknown projectile type: {projectile_type!r}") from None

        direction = owner.facing.direction
        projectile = Projectile(
            id=next(self._ids),
            x=owner.x + owner.width if direction > 0 else owner.x,
            y=owner.y + owner.height / 2,
            velocity_x=direction * PROJECTILE_SPEED,
            velocity_y=0,
            damage=SPECIAL_DAMAGE,
            owner=owner.id,
            type=projectile_type,
            color=PROJECTILE_COLORS[projectile_type],
        )
        self.projectiles.append(projectile)
        logger.debug("%s fired %s #%d at x=%.1f",
                     owner.name, projectile_type.value, projectile.id, projectile.x)
        return projectile

    def update(self, fighters: Sequence, particle_system=None,
               resolve_hits: bool = True) -> List[ProjectileHit]:
        """
        Advance semua projectile satu tick.
        Projectile yang kena fighter non-owner atau keluar arena dibuang
        di tick yang sama. Return daftar hit tick ini.
        """
        hits: List[ProjectileHit] = []
        alive: List[Projectile] = []

        for projectile in self.projectiles:
            projectile.x += projectile.velocity_x
            projectile.y += projectile.velocity_y
            projectile.animation_frame += 1

            if resolve_hits:
                target = self._target_of(projectile, fighters)
                if target is not None and check_collision(projectile.rect, target.rect):
                    hit = self._resolve_hit(projectile, target, particle_system)
                    hits.append(hit)
                    # Knockout: sisa projectile tick ini tidak resolve hit lagi
                    if not hit.blocked and target.is_defeated:
                        resolve_hits = False
                    continue

            if not self.in_bounds(projectile):
                logger.debug("Projectile #%d left the arena", projectile.id)
                continue

            alive.append(projectile)

        self.projectiles = alive
        return hits

    def in_bounds(self, projectile: Projectile) -> bool:
        return -self.margin < projectile.x < self.arena_width + self.margin

    @staticmethod
    def _target_of(projectile: Projectile, fighters: Sequence) -> Optional[object]:
        for fighter in fighters:
            if fighter.id != projectile.owner:
                return fighter
        return None

    @staticmethod
    def _resolve_hit(projectile: Projectile, target, particle_system) -> ProjectileHit:
        # Blocking dan menghadap arah datangnya projectile: dinegasi penuh
        blocked = (target.state is FighterState.BLOCKING and
                   target.facing.direction == -projectile.direction)
        if blocked:
            logger.debug("%s blocked projectile #%d", target.name, projectile.id)
            return ProjectileHit(projectile, target.id, blocked=True)

        dealt = target.take_damage(projectile.damage)
        target.hit_stun = PROJECTILE_HIT_STUN
        target.state = FighterState.HIT
        if particle_system is not None:
            particle_system.spawn_at(target.center, projectile.color, PROJECTILE_HIT_PARTICLES)
        logger.debug("Projectile #%d hit %s for %s", projectile.id, target.name, dealt)
        return ProjectileHit(projectile, target.id, blocked=False, damage=dealt)

    def clear(self):
        self.projectiles.clear()

    @property
    def projectile_count(self) -> int:
        return len(self.projectiles)
