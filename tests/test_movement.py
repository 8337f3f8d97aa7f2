"""
Tests for fighters.movement - the physics integrator
"""

import pytest

from retro_kombat.config import FighterState, FIGHTER_START_Y, ARENA_WIDTH
from retro_kombat.fighters.fighter import create_fighter
from retro_kombat.fighters.movement import PhysicsIntegrator


@pytest.fixture
def physics():
    return PhysicsIntegrator()


class TestGravity:
    def test_grounded_fighter_stays_on_ground(self, physics):
        f = create_fighter(1)
        physics.update(f)
        assert f.y == FIGHTER_START_Y
        assert f.velocity_y == 0

    def test_airborne_fighter_accelerates_down(self, physics):
        f = create_fighter(1)
        f.is_grounded = False
        f.velocity_y = -18
        physics.update(f)
        assert f.velocity_y == pytest.approx(-17.2)
        assert f.y == pytest.approx(FIGHTER_START_Y - 17.2)

    def test_landing_clamps_and_ends_jump(self, physics):
        f = create_fighter(1)
        f.is_grounded = False
        f.state = FighterState.JUMPING
        f.y = FIGHTER_START_Y - 2
        f.velocity_y = 5
        physics.update(f)
        assert f.y == FIGHTER_START_Y
        assert f.velocity_y == 0
        assert f.is_grounded
        assert f.state is FighterState.IDLE

    def test_landing_keeps_non_jump_state(self, physics):
        f = create_fighter(1)
        f.is_grounded = False
        f.state = FighterState.ATTACKING
        f.y = FIGHTER_START_Y - 1
        f.velocity_y = 3
        physics.update(f)
        assert f.state is FighterState.ATTACKING

    def test_full_jump_arc_returns_to_ground(self, physics):
        f = create_fighter(1)
        f.is_grounded = False
        f.state = FighterState.JUMPING
        f.velocity_y = -18
        peak = f.y
        for _ in range(60):
            physics.update(f)
            peak = min(peak, f.y)
        assert peak < FIGHTER_START_Y - 150
        assert f.is_grounded
        assert f.y == FIGHTER_START_Y
        assert f.state is FighterState.IDLE


class TestHorizontal:
    def test_clamped_to_right_edge(self, physics):
        f = create_fighter(2)
        f.x = ARENA_WIDTH - f.width - 1
        f.velocity_x = 5
        f.moved_this_tick = True
        physics.update(f)
        assert f.x == ARENA_WIDTH - f.width

    def test_clamped_to_left_edge_while_airborne(self, physics):
        f = create_fighter(1)
        f.x = 2
        f.velocity_x = -5
        f.moved_this_tick = True
        f.is_grounded = False
        f.velocity_y = -10
        physics.update(f)
        assert f.x == 0

    def test_no_friction_while_moving(self, physics):
        f = create_fighter(1)
        f.velocity_x = 1.2
        f.moved_this_tick = True
        physics.update(f)
        assert f.velocity_x == pytest.approx(1.2)
        assert f.x == pytest.approx(201.2)

    def test_friction_decays_then_snaps_to_idle(self, physics):
        f = create_fighter(1)
        f.velocity_x = 1.2
        f.state = FighterState.WALKING

        physics.update(f)
        assert f.velocity_x == pytest.approx(0.96)
        assert f.state is FighterState.WALKING

        for _ in range(11):
            physics.update(f)
        assert f.velocity_x == 0
        assert f.state is FighterState.IDLE

    def test_friction_keeps_other_states(self, physics):
        f = create_fighter(1)
        f.velocity_x = 0.05
        f.state = FighterState.HIT
        physics.update(f)
        assert f.velocity_x == 0
        assert f.state is FighterState.HIT
