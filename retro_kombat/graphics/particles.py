"""
Particle System
===============
Efek partikel untuk hit impacts dan block sparks.
Murni dekoratif: tidak ada efek gameplay, hanya dibaca renderer.
"""

import itertools
import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from ..config import (
    PARTICLE_LIFETIME, PARTICLE_JITTER, PARTICLE_MAX_SPEED, PARTICLE_DRAG,
    PARTICLE_SIZE_MIN, PARTICLE_SIZE_MAX
)

logger = logging.getLogger(__name__)


@dataclass
class Particle:
    """Single particle"""
    id: int
    x: float
    y: float
    velocity_x: float
    velocity_y: float
    life: int
    max_life: int
    color: str
    size: float

    def update(self, drag: float = PARTICLE_DRAG) -> bool:
        """
        Update particle satu tick.
        Return True if still alive.
        """
        self.x += self.velocity_x
        self.y += self.velocity_y
        self.velocity_x *= drag
        self.velocity_y *= drag
        self.life -= 1
        return self.life > 0

    @property
    def life_ratio(self) -> float:
        """1.0 saat spawn, turun ke 0.0 (renderer pakai untuk alpha)"""
        if self.max_life <= 0:
            return 0.0
        return max(0.0, self.life / self.max_life)


class ParticleSystem:
    """
    Manages all particles dalam game.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.particles: List[Particle] = []
        self._rng = rng or random.Random()
        self._ids = itertools.count(1)
        # Spawn tick ini belum menua, mulai menua di update berikutnya
        self._fresh: Set[int] = set()

    def spawn(self, x: float, y: float, color: str, count: int = 5) -> List[Particle]:
        """Spawn `count` particles di sekitar (x, y)"""
        rng = self._rng
        spawned = []
        for _ in range(count):
            particle = Particle(
                id=next(self._ids),
                x=x + rng.uniform(-PARTICLE_JITTER, PARTICLE_JITTER),
                y=y + rng.uniform(-PARTICLE_JITTER, PARTICLE_JITTER),
                velocity_x=rng.uniform(-PARTICLE_MAX_SPEED, PARTICLE_MAX_SPEED),
                velocity_y=rng.uniform(-PARTICLE_MAX_SPEED, PARTICLE_MAX_SPEED),
                life=PARTICLE_LIFETIME,
                max_life=PARTICLE_LIFETIME,
                color=color,
                size=rng.uniform(PARTICLE_SIZE_MIN, PARTICLE_SIZE_MAX),
            )
            spawned.append(particle)
            self._fresh.add(particle.id)
        self.particles.extend(spawned)
        return spawned

    def spawn_at(self, position: Tuple[float, float], color: str, count: int) -> List[Particle]:
        return self.spawn(position[0], position[1], color, count)

    def update(self):
        """
        Advance semua particle, buang yang life-nya habis.
        Particle life 30 tampil di 30 update (termasuk tick spawn),
        hilang di update ke-31.
        """
        fresh, self._fresh = self._fresh, set()
        self.particles = [p for p in self.particles if p.id in fresh or p.update()]

    def clear(self):
        """Clear all particles"""
        self.particles.clear()
        self._fresh.clear()

    @property
    def particle_count(self) -> int:
        return len(self.particles)
