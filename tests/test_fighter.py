"""
Tests for fighters.fighter - timers, energy and the input state machine
"""

import pytest

from retro_kombat.config import (
    Action, Facing, FighterState, ProjectileType,
    ATTACK_COOLDOWN, SPECIAL_COOLDOWN, FIGHTER_START_Y, ARENA_WIDTH
)
from retro_kombat.fighters.fighter import create_fighter
from retro_kombat.input_snapshot import PlayerInput


def press(*actions):
    return PlayerInput.of(*actions)


class TestCreateFighter:
    def test_player_one_profile(self):
        f = create_fighter(1)
        assert f.name == "Sub-Zero"
        assert f.x == 200
        assert f.y == FIGHTER_START_Y
        assert f.facing is Facing.RIGHT
        assert f.projectile_type is ProjectileType.ICE
        assert f.health == f.max_health == 100
        assert f.energy == f.max_energy == 100
        assert f.state is FighterState.IDLE
        assert f.is_grounded

    def test_player_two_mirrors_player_one(self):
        f = create_fighter(2)
        assert f.name == "Scorpion"
        assert f.x == ARENA_WIDTH - 260
        assert f.facing is Facing.LEFT
        assert f.projectile_type is ProjectileType.FIREBALL

    def test_unknown_slot(self):
        with pytest.raises(ValueError):
            create_fighter(3)


class TestTimers:
    def test_countdowns_decrement_only_while_positive(self):
        f = create_fighter(1)
        f.attack_cooldown = 2
        f.special_cooldown = 1
        f.hit_stun = 0
        f.block_stun = 3

        f.update_timers()
        assert (f.attack_cooldown, f.special_cooldown, f.hit_stun, f.block_stun) == (1, 0, 0, 2)

        f.update_timers()
        f.update_timers()
        assert (f.attack_cooldown, f.special_cooldown, f.hit_stun, f.block_stun) == (0, 0, 0, 0)

    def test_energy_regenerates_toward_max(self):
        f = create_fighter(1)
        f.energy = 50
        f.regenerate_energy()
        assert f.energy == 50.5

        f.energy = 99.8
        f.regenerate_energy()
        assert f.energy == 100

    def test_hit_clears_only_when_both_stuns_are_zero(self):
        f = create_fighter(1)
        f.state = FighterState.HIT
        f.hit_stun = 0
        f.block_stun = 1
        f.recover_from_stun()
        assert f.state is FighterState.HIT

        f.block_stun = 0
        f.recover_from_stun()
        assert f.state is FighterState.IDLE

    def test_animation_frame_advances_every_eight_ticks(self):
        f = create_fighter(1)
        for _ in range(7):
            f.update_animation()
        assert f.animation_frame == 0
        f.update_animation()
        assert f.animation_frame == 1
        assert f.animation_timer == 8

    def test_strike_is_ready_for_exactly_one_tick(self):
        f = create_fighter(1)
        f.apply_input(press(Action.ATTACK))
        assert f.pending_strike and not f.strike_ready

        f.update_timers()
        assert f.strike_ready and not f.pending_strike

        f.update_timers()
        assert not f.strike_ready


class TestApplyInput:
    def test_move_right(self):
        f = create_fighter(2)
        f.apply_input(press(Action.MOVE_RIGHT))
        assert f.velocity_x == pytest.approx(1.2)
        assert f.facing is Facing.RIGHT
        assert f.state is FighterState.WALKING
        assert f.moved_this_tick

    def test_opposite_move_keys_first_checked_wins(self):
        f = create_fighter(1)
        f.apply_input(press(Action.MOVE_LEFT, Action.MOVE_RIGHT))
        assert f.velocity_x == pytest.approx(-1.2)
        assert f.facing is Facing.LEFT

    def test_move_key_ignored_against_arena_edge(self):
        f = create_fighter(1)
        f.x = 0
        f.apply_input(press(Action.MOVE_LEFT))
        assert f.velocity_x == 0
        assert f.state is FighterState.IDLE
        assert not f.moved_this_tick

    def test_jump_only_when_grounded(self):
        f = create_fighter(1)
        f.apply_input(press(Action.JUMP))
        assert f.velocity_y == -18
        assert not f.is_grounded
        assert f.state is FighterState.JUMPING

        f.velocity_y = -5
        f.state = FighterState.IDLE
        f.apply_input(press(Action.JUMP))
        assert f.velocity_y == -5
        assert f.state is FighterState.IDLE

    def test_attack_sets_cooldown(self):
        f = create_fighter(1)
        f.apply_input(press(Action.ATTACK))
        assert f.state is FighterState.ATTACKING
        assert f.attack_cooldown == ATTACK_COOLDOWN

    def test_attack_during_cooldown_does_not_retrigger(self):
        f = create_fighter(1)
        f.attack_cooldown = 10
        f.apply_input(press(Action.ATTACK))
        assert f.attack_cooldown == 10
        assert f.state is FighterState.IDLE
        assert not f.pending_strike

    def test_special_spends_energy(self):
        f = create_fighter(1)
        assert f.apply_input(press(Action.SPECIAL)) is True
        assert f.state is FighterState.SPECIAL
        assert f.energy == 70
        assert f.special_cooldown == SPECIAL_COOLDOWN

    def test_special_without_energy(self):
        f = create_fighter(1)
        f.energy = 20
        assert f.apply_input(press(Action.SPECIAL)) is False
        assert f.energy == 20
        assert f.state is FighterState.IDLE
        assert f.special_cooldown == 0

    def test_special_during_cooldown(self):
        f = create_fighter(1)
        f.special_cooldown = 5
        assert f.apply_input(press(Action.SPECIAL)) is False
        assert f.energy == 100

    def test_later_checks_overwrite_state(self):
        f = create_fighter(1)
        f.apply_input(press(Action.MOVE_RIGHT, Action.JUMP, Action.ATTACK))
        assert f.state is FighterState.ATTACKING
        # Movement and jump still happened
        assert f.velocity_x == pytest.approx(1.2)
        assert f.velocity_y == -18

    def test_block_is_checked_last(self):
        f = create_fighter(1)
        fired = f.apply_input(press(Action.ATTACK, Action.SPECIAL, Action.BLOCK))
        assert f.state is FighterState.BLOCKING
        assert fired
        assert f.attack_cooldown == ATTACK_COOLDOWN
        assert f.energy == 70

    @pytest.mark.parametrize("stun", ["hit_stun", "block_stun"])
    def test_stunned_fighter_ignores_input(self, stun):
        f = create_fighter(1)
        setattr(f, stun, 3)
        f.apply_input(press(Action.MOVE_RIGHT, Action.JUMP, Action.ATTACK, Action.SPECIAL))
        assert f.velocity_x == 0
        assert f.velocity_y == 0
        assert f.state is FighterState.IDLE
        assert f.attack_cooldown == 0
        assert f.energy == 100

    def test_stun_at_tick_start_locks_input_for_that_tick(self):
        f = create_fighter(1)
        f.hit_stun = 1
        f.state = FighterState.HIT
        f.update_timers()
        f.recover_from_stun()
        f.apply_input(press(Action.MOVE_RIGHT))
        assert f.state is FighterState.IDLE
        assert f.velocity_x == 0


class TestDamage:
    def test_health_clamped_at_zero(self):
        f = create_fighter(1)
        f.health = 10
        assert f.take_damage(25) == 10
        assert f.health == 0
        assert f.is_defeated

    def test_energy_clamped_at_zero(self):
        f = create_fighter(1)
        f.energy = 3
        f.spend_energy(5)
        assert f.energy == 0

    def test_faces(self):
        a, b = create_fighter(1), create_fighter(2)
        assert a.faces(b) and b.faces(a)
        b.facing = Facing.RIGHT
        assert not b.faces(a)
