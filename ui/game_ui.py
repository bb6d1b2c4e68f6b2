"""Game UI components including HUD, overlays and explosion effects."""

import pygame
import math
from typing import List, Optional
from game.constants import EXPLOSION_LIFETIME, EXPLOSION_PARTICLES
from .colors import (
    WHITE, RED, YELLOW, GRAY, BACKGROUND, HUD_TEXT, HUD_SHADOW,
    LIVES_COLOR, SCORE_COLOR, WAVE_COLOR, PAUSE_OVERLAY, EXPLOSION_COLORS
)


class GameUI:
    """Manages all game UI elements."""

    def __init__(self, surface: pygame.Surface):
        """
        Initialize the game UI.

        Args:
            surface: Main pygame surface to draw on
        """
        self.surface = surface
        self.width, self.height = surface.get_size()
        self.fonts = {
            'small': pygame.font.Font(None, 24),
            'medium': pygame.font.Font(None, 36),
            'large': pygame.font.Font(None, 48),
            'title': pygame.font.Font(None, 80),
        }

        # Animation state
        self.score_pulse = 0
        self.lives_flash = 0
        self.explosions = []
        self.star_phase = 0.0

    def update(self, dt: float = 1.0):
        """Update UI animations."""
        if self.score_pulse > 0:
            self.score_pulse -= 0.1 * dt

        if self.lives_flash > 0:
            self.lives_flash -= 0.1 * dt

        for explosion in self.explosions:
            explosion['lifetime'] -= dt
        self.explosions = [e for e in self.explosions if e['lifetime'] > 0]

        self.star_phase += 0.5 * dt

    def draw_background(self):
        """Draw the background with slowly scrolling stars."""
        self.surface.fill(BACKGROUND)

        for i in range(60):
            x = (i * 97) % self.width
            y = int((i * 53 + self.star_phase * (1 + i % 3)) % self.height)
            size = (i % 3) + 1
            brightness = 80 + (i * 7) % 100
            pygame.draw.circle(self.surface, (brightness, brightness, brightness + 40), (x, y), size)

    def _blit_shadowed(self, font: pygame.font.Font, text: str, color: tuple, pos: tuple):
        shadow = font.render(text, True, HUD_SHADOW)
        self.surface.blit(shadow, (pos[0] + 2, pos[1] + 2))
        self.surface.blit(font.render(text, True, color), pos)

    def draw_hud(self, score: int, wave: int, lives: int, high_score: int = 0):
        """
        Draw the heads-up display.

        Args:
            score: Current score
            wave: Current wave number
            lives: Remaining lives
            high_score: Best score so far
        """
        score_color = SCORE_COLOR
        if self.score_pulse > 0:
            pulse = abs(math.sin(self.score_pulse * 5))
            score_color = tuple(int(c + (255 - c) * pulse) for c in SCORE_COLOR)

        self._blit_shadowed(self.fonts['medium'], f"Score: {score}", score_color, (20, 20))
        self._blit_shadowed(self.fonts['medium'], f"Wave: {wave}", WAVE_COLOR, (20, 60))

        # One bar per life
        bar_color = WHITE if self.lives_flash > 0 else LIVES_COLOR
        for i in range(max(0, lives)):
            pygame.draw.rect(self.surface, bar_color, (20 + 10 * i, 100, 5, 30))

        if high_score:
            text = f"Best: {high_score}"
            width = self.fonts['small'].size(text)[0]
            self._blit_shadowed(self.fonts['small'], text, HUD_TEXT, (self.width - width - 20, 20))

    def trigger_score_pulse(self):
        """Trigger a score animation."""
        self.score_pulse = 1.0

    def trigger_lives_flash(self):
        """Trigger a lives lost flash."""
        self.lives_flash = 1.0

    def add_explosion(self, x: int, y: int):
        """Add an explosion effect at the given position."""
        self.explosions.append({
            'x': x,
            'y': y,
            'lifetime': EXPLOSION_LIFETIME,
            'particles': [
                {'dx': (i % 5 - 2) * 3, 'dy': (i // 5 - 2) * 3, 'size': 5 + i % 3}
                for i in range(EXPLOSION_PARTICLES)
            ]
        })

    def draw_explosions(self):
        """Draw active explosions."""
        for explosion in self.explosions:
            progress = explosion['lifetime'] / EXPLOSION_LIFETIME
            for particle in explosion['particles']:
                px = explosion['x'] + particle['dx'] * (1 - progress) * 10
                py = explosion['y'] + particle['dy'] * (1 - progress) * 10
                size = int(particle['size'] * progress)
                if size > 0:
                    color_index = int((1 - progress) * (len(EXPLOSION_COLORS) - 1))
                    pygame.draw.circle(self.surface, EXPLOSION_COLORS[color_index], (int(px), int(py)), size)

    def _draw_overlay(self, alpha: int):
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, alpha))
        self.surface.blit(overlay, (0, 0))

    def _draw_centered(self, font: pygame.font.Font, text: str, color: tuple, y: int):
        rendered = font.render(text, True, color)
        self.surface.blit(rendered, rendered.get_rect(center=(self.width // 2, y)))

    def draw_pause_overlay(self):
        """Draw the pause overlay."""
        self._draw_overlay(PAUSE_OVERLAY[3])
        self._draw_centered(self.fonts['title'], "PAUSED", WHITE, self.height // 2 - 40)
        self._draw_centered(self.fonts['medium'], "Press P to resume", GRAY, self.height // 2 + 30)

    def draw_game_over(self, score: int, high_score: int = 0, high_scores: Optional[List] = None):
        """
        Draw the game over screen.

        Args:
            score: Final score
            high_score: Best score known to the game
            high_scores: Optional table entries (objects with score and wave) to list
        """
        self._draw_overlay(160)

        center_y = self.height // 2
        self._draw_centered(self.fonts['title'], "GAME OVER", RED, center_y - 60)
        self._draw_centered(self.fonts['small'], "Press R to restart", WHITE, center_y - 10)
        self._draw_centered(self.fonts['large'], f"Final Score: {score}", WHITE, center_y + 40)

        if score > 0 and score >= high_score:
            self._draw_centered(self.fonts['medium'], "NEW HIGH SCORE!", YELLOW, center_y + 85)
        else:
            self._draw_centered(self.fonts['medium'], f"High Score: {high_score}", GRAY, center_y + 85)

        for i, entry in enumerate((high_scores or [])[:5]):
            line = f"{i + 1}. {entry.score:>6}   wave {entry.wave}"
            self._draw_centered(self.fonts['small'], line, HUD_TEXT, center_y + 130 + i * 24)
