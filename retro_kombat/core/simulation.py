"""
Simulation Tick
===============
Root simulation context. Owns fighters, projectiles, particles, round,
scores and game phase, and advances all of them once per frame in a fixed
order:

1. per fighter: animation, timers, energy regen, stun recovery, input, physics
2. melee resolution
3. projectiles (move, hit, retire)
4. particles
5. publish a new WorldSnapshot

The tick runs only while the phase is PLAYING. A knockout inside a tick lets
the tick finish, then the phase is GAME_OVER until the round is restarted.
"""

import logging
import random
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from ..config import GamePhase, FIGHTER_PROFILES
from ..combat.engine import CombatEngine
from ..combat.projectiles import Projectile, ProjectileManager
from ..fighters.fighter import Fighter, create_fighter
from ..fighters.movement import PhysicsIntegrator
from ..graphics.particles import Particle, ParticleSystem
from ..input_snapshot import InputSnapshot, EMPTY_SNAPSHOT
from .state_machine import StateMachine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundOutcome:
    """Published once per round when a fighter's health reaches 0"""
    winner_id: int
    winner_name: str
    round: int
    scores: Mapping[int, int]


@dataclass(frozen=True)
class WorldSnapshot:
    """Read-only world state after a tick. Entities are copies."""
    fighters: Tuple[Fighter, ...]
    projectiles: Tuple[Projectile, ...]
    particles: Tuple[Particle, ...]
    round: int
    scores: Mapping[int, int]  # read-only view
    phase: GamePhase
    winner: Optional[str]
    tick: int

    def fighter(self, player_id: int) -> Fighter:
        for fighter in self.fighters:
            if fighter.id == player_id:
                return fighter
        raise ValueError(f"Unknown player slot: {player_id}")


class Simulation:
    """
    Single owner of all entity state. Nothing outside this class mutates
    fighters, projectiles or particles.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.state_machine = StateMachine(GamePhase.MENU)
        self.physics = PhysicsIntegrator()
        self.combat_engine = CombatEngine()
        self.projectile_manager = ProjectileManager()
        self.particle_system = ParticleSystem(rng)

        self.fighters: List[Fighter] = []
        self.round = 1
        self.scores: Dict[int, int] = {player_id: 0 for player_id in FIGHTER_PROFILES}
        self.winner: Optional[str] = None
        self.winner_id: Optional[int] = None
        self.tick_count = 0

        self._round_end_listeners: List[Callable[[RoundOutcome], None]] = []
        self._pending_outcome: Optional[RoundOutcome] = None

        self.snapshot = self._build_snapshot()

    # =========================================================================
    # PHASE CONTROL
    # =========================================================================

    @property
    def phase(self) -> GamePhase:
        return self.state_machine.current_state

    def start_game(self) -> WorldSnapshot:
        """Fresh fighters and empty effects, then start playing"""
        self._init_round()
        self.state_machine.transition_to(GamePhase.PLAYING)
        self.snapshot = self._build_snapshot()
        return self.snapshot

    def next_round(self) -> WorldSnapshot:
        if self.phase is not GamePhase.GAME_OVER:
            raise RuntimeError("next_round() is only valid after a round has ended")
        self.round += 1
        return self.start_game()

    def reset_game(self) -> WorldSnapshot:
        """Reset scores and round counter, then start round 1"""
        self.scores = {player_id: 0 for player_id in self.scores}
        self.round = 1
        return self.start_game()

    def toggle_pause(self) -> bool:
        """PLAYING <-> PAUSED. Return True if the phase changed."""
        if self.phase is GamePhase.PLAYING:
            self.state_machine.transition_to(GamePhase.PAUSED)
        elif self.phase is GamePhase.PAUSED:
            self.state_machine.transition_to(GamePhase.PLAYING)
        else:
            return False
        self.snapshot = self._build_snapshot()
        return True

    def quit_to_menu(self):
        self.state_machine.transition_to(GamePhase.MENU)
        self.snapshot = self._build_snapshot()

    def on_round_end(self, callback: Callable[[RoundOutcome], None]):
        """Register a listener for round outcomes"""
        self._round_end_listeners.append(callback)

    def _init_round(self):
        self.fighters = [create_fighter(player_id) for player_id in sorted(FIGHTER_PROFILES)]
        self.projectile_manager.clear()
        self.particle_system.clear()
        self.winner = None
        self.winner_id = None
        self.tick_count = 0
        logger.info("Round %d: %s", self.round, " vs ".join(f.name for f in self.fighters))

    # =========================================================================
    # TICK
    # =========================================================================

    def tick(self, inputs: InputSnapshot = EMPTY_SNAPSHOT) -> WorldSnapshot:
        """Advance the world one frame. No-op unless the phase is PLAYING."""
        if self.phase is not GamePhase.PLAYING:
            return self.snapshot

        self.tick_count += 1

        # (1) Fighters
        for fighter in self.fighters:
            self._update_fighter(fighter, inputs)

        # (2) Melee
        if self.winner is None:
            events = self.combat_engine.update(self.fighters, self.particle_system)
            for event in events:
                if event.knockout:
                    self._declare_winner(event.attacker_id)

        # (3) Projectiles
        hits = self.projectile_manager.update(
            self.fighters, self.particle_system,
            resolve_hits=self.winner is None
        )
        for hit in hits:
            if not hit.blocked and self.winner is None and self._fighter(hit.defender_id).is_defeated:
                self._declare_winner(hit.projectile.owner)

        # (4) Particles
        self.particle_system.update()

        # (5) Publish
        self.snapshot = self._build_snapshot()
        self._notify_round_end()
        return self.snapshot

    def _update_fighter(self, fighter: Fighter, inputs: InputSnapshot):
        fighter.update_animation()
        fighter.update_timers()
        fighter.regenerate_energy()
        fighter.recover_from_stun()

        if fighter.apply_input(inputs.for_player(fighter.id)):
            self.projectile_manager.spawn(fighter, fighter.projectile_type)

        self.physics.update(fighter)

    def _declare_winner(self, attacker_id: int):
        winner = self._fighter(attacker_id)
        self.winner = winner.name
        self.winner_id = winner.id
        self.scores[winner.id] = self.scores.get(winner.id, 0) + 1
        self.state_machine.transition_to(GamePhase.GAME_OVER)
        self._pending_outcome = RoundOutcome(
            winner_id=winner.id,
            winner_name=winner.name,
            round=self.round,
            scores=MappingProxyType(dict(self.scores)),
        )
        logger.info("Round %d won by %s, scores %s", self.round, winner.name, self.scores)

    def _notify_round_end(self):
        outcome, self._pending_outcome = self._pending_outcome, None
        if outcome is None:
            return
        for listener in self._round_end_listeners:
            listener(outcome)

    def _fighter(self, player_id: int) -> Fighter:
        for fighter in self.fighters:
            if fighter.id == player_id:
                return fighter
        raise ValueError(f"Unknown player slot: {player_id}")

    def _build_snapshot(self) -> WorldSnapshot:
        return WorldSnapshot(
            fighters=tuple(replace(f) for f in self.fighters),
            projectiles=tuple(replace(p) for p in self.projectile_manager.projectiles),
            particles=tuple(replace(p) for p in self.particle_system.particles),
            round=self.round,
            scores=MappingProxyType(dict(self.scores)),
            phase=self.phase,
            winner=self.winner,
            tick=self.tick_count,
        )
