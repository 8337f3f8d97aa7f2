"""
Main Renderer
=============
Gambar WorldSnapshot ke layar: arena, fighters, projectiles, particles, HUD.
Renderer hanya membaca snapshot, tidak pernah mengubah state simulasi.
"""

import math
import pygame
from typing import Optional

from ..config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, GROUND_Y,
    BLACK, WHITE, GRAY, DARK_GRAY, SKY_TOP, SKY_BOTTOM, GROUND_BROWN,
    HEALTH_GREEN, HEALTH_RED, ENERGY_BLUE, BLOCK_GREEN,
    PROJECTILE_SIZE, DEBUG_HITBOXES,
    FighterState, GamePhase, FIGHTER_PROFILES
)
from ..fighters.hitbox import attack_hitbox


class Renderer:
    """
    Main renderer untuk game.
    """

    def __init__(self):
        self._background = self._create_background()
        self.debug_hitboxes = DEBUG_HITBOXES

        try:
            self.font = pygame.font.Font(None, 24)
            self.title_font = pygame.font.Font(None, 72)
        except pygame.error as e:
            print(f"[Renderer] Fonts disabled: {e}")
            self.font = None
            self.title_font = None

    def _create_background(self) -> pygame.Surface:
        """Gradient langit + lantai, di-cache"""
        surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        for y in range(GROUND_Y):
            t = y / GROUND_Y
            color = tuple(
                int(SKY_TOP[i] + (SKY_BOTTOM[i] - SKY_TOP[i]) * t) for i in range(3)
            )
            pygame.draw.line(surface, color, (0, y), (SCREEN_WIDTH, y))
        pygame.draw.rect(surface, GROUND_BROWN,
                         (0, GROUND_Y, SCREEN_WIDTH, SCREEN_HEIGHT - GROUND_Y))
        return surface

    def render(self, surface: pygame.Surface, snapshot):
        """
        Render complete game frame.
        """
        surface.fill(BLACK)
        surface.blit(self._background, (0, 0))

        for fighter in snapshot.fighters:
            self._render_fighter(surface, fighter)

        for projectile in snapshot.projectiles:
            self._render_projectile(surface, projectile)

        for particle in snapshot.particles:
            self._render_particle(surface, particle)

        self._render_hud(surface, snapshot)
        self._render_phase_banner(surface, snapshot)

    def _render_fighter(self, surface: pygame.Surface, fighter):
        """Render single fighter"""
        rect = pygame.Rect(int(fighter.x), int(fighter.y),
                           int(fighter.width), int(fighter.height))

        # Shadow
        pygame.draw.rect(surface, DARK_GRAY, (rect.x + 5, GROUND_Y + 5, rect.width, 8))

        # Flash putih saat hit stun
        if fighter.hit_stun > 0 and fighter.hit_stun % 4 < 2:
            color = pygame.Color(WHITE)
        else:
            color = pygame.Color(fighter.color)
        pygame.draw.rect(surface, color, rect)

        if fighter.state is FighterState.BLOCKING:
            pygame.draw.rect(surface, BLOCK_GREEN, rect.inflate(4, 4), 2)

        if fighter.state is FighterState.ATTACKING or self.debug_hitboxes:
            hx, hy, hw, hh = attack_hitbox(fighter)
            arm_y = int(hy + hh * 0.4)
            pygame.draw.rect(surface, color, (int(hx), arm_y, int(hw), 8))
            if self.debug_hitboxes:
                pygame.draw.rect(surface, HEALTH_RED, (int(hx), int(hy), int(hw), int(hh)), 1)

        if self.font:
            label = self.font.render(fighter.name, True, WHITE)
            surface.blit(label, label.get_rect(center=(rect.centerx, rect.y - 12)))

    def _render_projectile(self, surface: pygame.Surface, projectile):
        size = PROJECTILE_SIZE + math.sin(projectile.animation_frame * 0.5) * 2
        color = pygame.Color(projectile.color)

        # Trail
        for i in range(1, 4):
            trail_size = size * (1 - i * 0.2)
            trail_x = projectile.x - projectile.velocity_x * i * 0.5
            trail = pygame.Surface((int(trail_size), int(trail_size)), pygame.SRCALPHA)
            trail.fill((color.r, color.g, color.b, 96))
            surface.blit(trail, (trail_x - trail_size / 2, projectile.y - trail_size / 2))

        pygame.draw.rect(surface, color,
                         (projectile.x - size / 2, projectile.y - size / 2, size, size))
        pygame.draw.rect(surface, WHITE,
                         (projectile.x - size / 6, projectile.y - size / 6, size / 3, size / 3))

    def _render_particle(self, surface: pygame.Surface, particle):
        size = max(1, int(particle.size))
        color = pygame.Color(particle.color)
        alpha = int(255 * particle.life_ratio)

        temp_surface = pygame.Surface((size, size), pygame.SRCALPHA)
        temp_surface.fill((color.r, color.g, color.b, alpha))
        surface.blit(temp_surface, (int(particle.x), int(particle.y)))

    def _render_hud(self, surface: pygame.Surface, snapshot):
        """Health/energy bars dan score"""
        bar_width = 400
        for fighter in snapshot.fighters:
            x = 20 if fighter.id == 1 else SCREEN_WIDTH - bar_width - 20
            self._render_bar(surface, x, 20, bar_width, 20,
                             fighter.health_percent, HEALTH_GREEN)
            self._render_bar(surface, x, 46, bar_width, 10,
                             fighter.energy_percent, ENERGY_BLUE)

        if self.font:
            scores = "  -  ".join(
                f"{FIGHTER_PROFILES[pid].name}: {snapshot.scores.get(pid, 0)}"
                for pid in sorted(FIGHTER_PROFILES)
            )
            text = self.font.render(f"Round {snapshot.round}   {scores}", True, WHITE)
            surface.blit(text, text.get_rect(center=(SCREEN_WIDTH // 2, 80)))

    @staticmethod
    def _render_bar(surface: pygame.Surface, x: int, y: int, width: int,
                    height: int, ratio: float, color):
        ratio = max(0.0, min(1.0, ratio))
        pygame.draw.rect(surface, HEALTH_RED, (x, y, width, height))
        pygame.draw.rect(surface, color, (x, y, int(width * ratio), height))
        pygame.draw.rect(surface, GRAY, (x, y, width, height), 2)

    def _render_phase_banner(self, surface: pygame.Surface, snapshot):
        if not self.title_font:
            return

        title: Optional[str] = None
        subtitle: Optional[str] = None
        if snapshot.phase is GamePhase.MENU:
            title, subtitle = "RETRO KOMBAT", "ENTER to fight  |  ESC to quit"
        elif snapshot.phase is GamePhase.PAUSED:
            title, subtitle = "PAUSED", "ESC to resume  |  BACKSPACE to menu"
        elif snapshot.phase is GamePhase.GAME_OVER:
            title = "FINISH HIM!"
            subtitle = f"{snapshot.winner} WINS  |  ENTER next round  |  R reset  |  ESC menu"

        if title is None:
            return

        overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 160))
        surface.blit(overlay, (0, 0))

        text = self.title_font.render(title, True, WHITE)
        surface.blit(text, text.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 - 30)))
        if subtitle and self.font:
            sub = self.font.render(subtitle, True, WHITE)
            surface.blit(sub, sub.get_rect(center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + 30)))
