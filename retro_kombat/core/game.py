"""
Main Game Loop for Retro Kombat
Runs one simulation tick per display frame.
"""

import logging
from functools import partial
from typing import Optional

import pygame

from ..config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, GAME_TITLE, DEBUG_FRAMERATE,
    GamePhase, WHITE
)
from .input_handler import InputHandler
from .simulation import RoundOutcome, Simulation

logger = logging.getLogger(__name__)

PHASE_CAPTIONS = {
    GamePhase.MENU: "Menu",
    GamePhase.PLAYING: "Fight!",
    GamePhase.PAUSED: "Paused",
    GamePhase.GAME_OVER: "Round Over",
}


class Game:
    """
    Pygame shell around the Simulation: window, clock, keyboard, renderer.
    """

    def __init__(self, simulation: Optional[Simulation] = None, fps: int = FPS):
        pygame.init()

        # Display
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))

        # Clock
        self.clock = pygame.time.Clock()
        self.target_fps = fps
        self.running = True
        self.fps = 0.0
        self.frame_count = 0

        # Core systems
        self.simulation = simulation or Simulation()
        self.input_handler = InputHandler()
        self.renderer = None

        self.simulation.on_round_end(self._on_round_end)
        for phase in GamePhase:
            self.simulation.state_machine.register_handlers(
                phase, enter=partial(self._on_phase_enter, phase)
            )
        self._on_phase_enter(self.simulation.phase)

        try:
            self.fps_font = pygame.font.Font(None, 24)
        except pygame.error as e:
            print(f"[Game] FPS counter disabled: {e}")
            self.fps_font = None

    def set_renderer(self, renderer):
        self.renderer = renderer

    def run(self):
        """Main game loop"""
        while self.running:
            self.clock.tick(self.target_fps)
            self.fps = self.clock.get_fps()
            self.frame_count += 1

            # Handle events
            self._handle_events()

            # Check quit
            if self.input_handler.should_quit():
                self.running = False
                continue

            # Update
            self._update()

            # Render
            self._render()

            # Flip display
            pygame.display.flip()

        self._cleanup()

    def _handle_events(self):
        """Process pygame events"""
        self.input_handler.update()
        for event in pygame.event.get():
            if event.type == pygame.WINDOWFOCUSLOST:
                self.input_handler.clear()
            self.input_handler.process_event(event)

    def _update(self):
        """Phase keys, then one simulation tick"""
        sim = self.simulation
        handler = self.input_handler

        if handler.is_action_just_pressed('pause'):
            if sim.phase is GamePhase.MENU:
                self.running = False
                return
            if sim.phase is GamePhase.GAME_OVER:
                sim.quit_to_menu()
            else:
                sim.toggle_pause()
        elif handler.is_action_just_pressed('menu') and sim.phase is GamePhase.PAUSED:
            sim.quit_to_menu()

        if handler.is_action_just_pressed('confirm'):
            if sim.phase is GamePhase.MENU:
                sim.start_game()
            elif sim.phase is GamePhase.GAME_OVER:
                sim.next_round()

        if handler.is_action_just_pressed('restart') and sim.phase is GamePhase.GAME_OVER:
            sim.reset_game()

        if handler.is_action_just_pressed('debug') and self.renderer:
            self.renderer.debug_hitboxes = not self.renderer.debug_hitboxes

        # Simulation sendiri no-op di luar PLAYING
        sim.tick(handler.snapshot())

    def _on_phase_enter(self, phase: GamePhase):
        self.caption = f"{GAME_TITLE} - {PHASE_CAPTIONS[phase]}"
        pygame.display.set_caption(self.caption)

    def _on_round_end(self, outcome: RoundOutcome):
        print(f"[Round {outcome.round}] {outcome.winner_name} wins! Scores: {dict(outcome.scores)}")

    def _render(self):
        """Render current frame"""
        if self.renderer:
            self.renderer.render(self.screen, self.simulation.snapshot)

        if DEBUG_FRAMERATE:
            self._render_fps()

    def _render_fps(self):
        """Render FPS counter"""
        if self.fps_font is None:
            return
        fps_text = self.fps_font.render(f"FPS: {int(self.fps)}", True, WHITE)
        self.screen.blit(fps_text, (10, SCREEN_HEIGHT - 30))

    def _cleanup(self):
        """Clean up resources"""
        logger.info("Shutting down after %d frames", self.frame_count)
        pygame.quit()
