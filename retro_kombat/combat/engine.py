"""
Combat Engine
=============
Melee hit detection, block mitigation, damage, dan knockback.
Round end ditangani Simulation berdasarkan HitEvent.knockout.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..config import (
    FighterState, ATTACK_DAMAGE, HIT_STUN, KNOCKBACK_FORCE,
    BLOCK_STUN, BLOCK_ENERGY_COST,
    HIT_PARTICLES, BLOCK_PARTICLES, HIT_RED, BLOCK_GOLD
)
from ..fighters.hitbox import attack_hitbox, check_collision

logger = logging.getLogger(__name__)


@dataclass
class HitEvent:
    """Event untuk hit yang terjadi"""
    attacker_id: int
    defender_id: int
    damage: float
    position: Tuple[float, float]
    is_blocked: bool = False
    combo_count: int = 0
    knockout: bool = False


class CombatEngine:
    """
    Engine untuk resolusi melee.
    Setiap serangan kena paling banyak satu kali per aktivasi.
    """

    def update(self, fighters: Sequence, particle_system=None) -> List[HitEvent]:
        """
        Resolve strike yang jatuh tempo tick ini untuk kedua fighter.
        Berhenti setelah ada knockout.
        """
        events: List[HitEvent] = []
        if len(fighters) < 2:
            return events

        fighter1, fighter2 = fighters[0], fighters[1]
        for attacker, defender in ((fighter1, fighter2), (fighter2, fighter1)):
            event = self.check_strike(attacker, defender, particle_system)
            if event is None:
                continue
            events.append(event)
            if event.knockout:
                break

        return events

    def check_strike(self, attacker, defender,
                     particle_system=None) -> Optional[HitEvent]:
        """Cek dan resolve strike attacker. Flag strike dikonsumsi di sini."""
        if not attacker.strike_ready:
            return None
        attacker.strike_ready = False

        if attacker.state is not FighterState.ATTACKING:
            return None

        if not check_collision(attack_hitbox(attacker), defender.rect):
            return None

        if defender.state is FighterState.BLOCKING and defender.faces(attacker):
            return self._block(attacker, defender, particle_system)
        return self._hit(attacker, defender, particle_system)

    def _block(self, attacker, defender, particle_system) -> HitEvent:
        defender.block_stun = BLOCK_STUN
        defender.spend_energy(BLOCK_ENERGY_COST)
        if particle_system is not None:
            particle_system.spawn_at(defender.center, BLOCK_GOLD, BLOCK_PARTICLES)
        logger.debug("%s blocked %s", defender.name, attacker.name)
        return HitEvent(
            attacker_id=attacker.id,
            defender_id=defender.id,
            damage=0,
            position=defender.center,
            is_blocked=True,
            combo_count=attacker.combo,
        )

    def _hit(self, attacker, defender, particle_system) -> HitEvent:
        dealt = defender.take_damage(ATTACK_DAMAGE)
        defender.hit_stun = HIT_STUN
        defender.state = FighterState.HIT
        attacker.combo += 1

        # Knockback searah facing attacker
        defender.velocity_x = attacker.facing.direction * KNOCKBACK_FORCE

        if particle_system is not None:
            particle_system.spawn_at(defender.center, HIT_RED, HIT_PARTICLES)

        logger.debug("%s hit %s for %s (combo %d)",
                     attacker.name, defender.name, dealt, attacker.combo)
        return HitEvent(
            attacker_id=attacker.id,
            defender_id=defender.id,
            damage=dealt,
            position=defender.center,
            combo_count=attacker.combo,
            knockout=defender.is_defeated,
        )
