"""Pooled player projectile that travels straight up the screen."""

import pygame
from .constants import PROJECTILE_WIDTH, PROJECTILE_HEIGHT, PROJECTILE_SPEED
from ui.colors import PROJECTILE_COLOR, PROJECTILE_GLOW


class Projectile:
    """
    A reusable projectile owned by the game's fixed-size pool.

    A projectile is either free (parked, invisible, available for the next
    shot) or in flight. It is never destroyed, only reset back to free.
    """

    def __init__(self):
        self.width = PROJECTILE_WIDTH
        self.height = PROJECTILE_HEIGHT
        self.x = 0
        self.y = 0
        self.speed = PROJECTILE_SPEED
        self.free = True

    def update(self):
        """Move upward while in flight; recycle once fully off the top."""
        if not self.free:
            self.y -= self.speed
        if self.y < -self.height:
            self.reset()

    def start(self, x: float, y: float):
        """
        Launch the projectile.

        Args:
            x: Horizontal center of the launch point
            y: Top edge of the projectile at launch
        """
        self.x = x - self.width * 0.5
        self.y = y
        self.free = False

    def reset(self):
        """Return the projectile to the pool."""
        self.free = True

    def get_rect(self) -> pygame.Rect:
        """Get the projectile's bounding rectangle."""
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def draw(self, surface: pygame.Surface):
        """Draw the projectile if it is in flight."""
        if self.free:
            return

        rect = self.get_rect()
        pygame.draw.rect(surface, PROJECTILE_GLOW, rect.inflate(4, 4), border_radius=3)
        pygame.draw.rect(surface, PROJECTILE_COLOR, rect, border_radius=2)
