"""
Tests for input snapshots and the keyboard InputHandler
"""

import pygame
import pytest

from retro_kombat.config import Action
from retro_kombat.core.input_handler import InputHandler
from retro_kombat.input_snapshot import InputSnapshot, PlayerInput, NO_INPUT


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


class TestPlayerInput:
    def test_accepts_members_and_names(self):
        pi = PlayerInput.of(Action.ATTACK, "moveLeft", "BLOCK", "special")
        assert pi.held == {Action.ATTACK, Action.MOVE_LEFT, Action.BLOCK, Action.SPECIAL}

    def test_unknown_action(self):
        with pytest.raises(ValueError):
            PlayerInput.of("uppercut")

    def test_missing_slot_reads_as_no_input(self):
        snap = InputSnapshot.from_actions({1: ["jump"]})
        assert snap.for_player(1).is_held(Action.JUMP)
        assert snap.for_player(2) is NO_INPUT
        assert not snap.for_player(2).is_held(Action.JUMP)


class TestInputHandler:
    def test_held_keys_map_to_actions(self):
        handler = InputHandler()
        handler.process_event(key_down(pygame.K_f))
        handler.process_event(key_down(pygame.K_LEFT))

        snap = handler.snapshot()
        assert snap.for_player(1).held == {Action.ATTACK}
        assert snap.for_player(2).held == {Action.MOVE_LEFT}

    def test_release(self):
        handler = InputHandler()
        handler.process_event(key_down(pygame.K_m))
        handler.process_event(key_up(pygame.K_m))
        assert handler.player_input(2) == NO_INPUT
        assert pygame.K_m in handler.state.keys_just_released

    def test_just_pressed_lasts_one_frame(self):
        handler = InputHandler()
        handler.update()
        handler.process_event(key_down(pygame.K_RETURN))
        assert handler.is_action_just_pressed('confirm')

        handler.update()
        assert not handler.is_action_just_pressed('confirm')
        assert handler.is_key_pressed(pygame.K_RETURN)

    def test_unknown_menu_action(self):
        assert not InputHandler().is_action_just_pressed('fatality')

    def test_unknown_player(self):
        handler = InputHandler()
        with pytest.raises(ValueError):
            handler.player_input(3)

    def test_quit_and_clear(self):
        handler = InputHandler()
        handler.process_event(pygame.event.Event(pygame.QUIT))
        assert handler.should_quit()

        handler.process_event(key_down(pygame.K_s))
        handler.clear()
        assert handler.player_input(1) == NO_INPUT
