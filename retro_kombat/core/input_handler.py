"""
Input handling for keyboard
Turns pygame key events into per-tick InputSnapshots.
"""

import pygame
from typing import Dict, Set
from dataclasses import dataclass, field

from ..config import Action
from ..input_snapshot import InputSnapshot, PlayerInput


# Player 1: AZERTY ZQSD + F/G, Player 2: arrows + N/M
PLAYER_BINDINGS: Dict[int, Dict[Action, int]] = {
    1: {
        Action.MOVE_LEFT: pygame.K_q,
        Action.MOVE_RIGHT: pygame.K_d,
        Action.JUMP: pygame.K_z,
        Action.ATTACK: pygame.K_f,
        Action.BLOCK: pygame.K_s,
        Action.SPECIAL: pygame.K_g,
    },
    2: {
        Action.MOVE_LEFT: pygame.K_LEFT,
        Action.MOVE_RIGHT: pygame.K_RIGHT,
        Action.JUMP: pygame.K_UP,
        Action.ATTACK: pygame.K_n,
        Action.BLOCK: pygame.K_DOWN,
        Action.SPECIAL: pygame.K_m,
    },
}


@dataclass
class InputState:
    """Current state of the keyboard"""
    keys_pressed: Set[int] = field(default_factory=set)
    keys_just_pressed: Set[int] = field(default_factory=set)
    keys_just_released: Set[int] = field(default_factory=set)
    quit_requested: bool = False


class InputHandler:
    """
    Centralized input handling.
    Tracks held, just-pressed and just-released keys, and builds the
    InputSnapshot the simulation reads each tick.
    """

    def __init__(self):
        self.state = InputState()

        # Menu bindings (action -> key)
        self.bindings: Dict[str, int] = {
            'pause': pygame.K_ESCAPE,
            'confirm': pygame.K_RETURN,
            'restart': pygame.K_r,
            'menu': pygame.K_BACKSPACE,
            'debug': pygame.K_F1,
        }
        self.player_bindings: Dict[int, Dict[Action, int]] = {
            player_id: dict(keys) for player_id, keys in PLAYER_BINDINGS.items()
        }

    def update(self):
        """
        Reset per-frame flags. Call once per frame before processing events.
        """
        self.state.keys_just_pressed.clear()
        self.state.keys_just_released.clear()
        self.state.quit_requested = False

    def process_event(self, event: pygame.event.Event):
        """Process a single pygame event"""
        if event.type == pygame.QUIT:
            self.state.quit_requested = True

        elif event.type == pygame.KEYDOWN:
            if event.key not in self.state.keys_pressed:
                self.state.keys_just_pressed.add(event.key)
            self.state.keys_pressed.add(event.key)

        elif event.type == pygame.KEYUP:
            self.state.keys_pressed.discard(event.key)
            self.state.keys_just_released.add(event.key)

    def is_key_pressed(self, key: int) -> bool:
        """Check if key is currently held down"""
        return key in self.state.keys_pressed

    def is_key_just_pressed(self, key: int) -> bool:
        """Check if key was just pressed this frame"""
        return key in self.state.keys_just_pressed

    def is_action_just_pressed(self, action: str) -> bool:
        """Check if bound menu key was just pressed"""
        if action in self.bindings:
            return self.is_key_just_pressed(self.bindings[action])
        return False

    def player_input(self, player_id: int) -> PlayerInput:
        keys = self.player_bindings.get(player_id)
        if keys is None:
            raise ValueError(f"Unknown player slot: {player_id}")
        return PlayerInput(frozenset(
            action for action, key in keys.items() if self.is_key_pressed(key)
        ))

    def snapshot(self) -> InputSnapshot:
        """Held actions for every player this frame"""
        return InputSnapshot({
            player_id: self.player_input(player_id)
            for player_id in self.player_bindings
        })

    def clear(self):
        """Forget held keys (e.g. when the window loses focus)"""
        self.state.keys_pressed.clear()

    def should_quit(self) -> bool:
        """Check if quit was requested"""
        return self.state.quit_requested
