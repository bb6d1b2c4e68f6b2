"""Player ship steered along the bottom edge of the screen."""

import pygame
from .constants import PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_SPEED, STARTING_LIVES
from ui.colors import PLAYER_BODY, PLAYER_COCKPIT, PLAYER_THRUSTER


class Player:
    """The player's ship."""

    def __init__(self, game):
        """
        Initialize the ship at its spawn point.

        Args:
            game: Owning Game instance (screen size, held keys, projectile pool)
        """
        self.game = game
        self.width = PLAYER_WIDTH
        self.height = PLAYER_HEIGHT
        self.speed = PLAYER_SPEED
        self.x = 0
        self.y = 0
        self.lives = STARTING_LIVES
        self._spawn()

    def _spawn(self):
        self.x = self.game.width / 2 - self.width / 2
        self.y = self.game.height - self.height

    def update(self):
        """Move according to the held arrow keys and clamp to the screen."""
        if pygame.K_LEFT in self.game.keys:
            self.x -= self.speed
        if pygame.K_RIGHT in self.game.keys:
            self.x += self.speed

        # Half the ship may hang off either edge
        if self.x < -self.width * 0.5:
            self.x = -self.width * 0.5
        elif self.x > self.game.width - self.width * 0.5:
            self.x = self.game.width - self.width * 0.5

    def shoot(self):
        """
        Fire a projectile from the nose of the ship.

        Returns:
            The launched Projectile, or None if the pool is exhausted
        """
        projectile = self.game.get_projectile()
        if projectile:
            projectile.start(self.x + self.width * 0.5, self.y)
        return projectile

    def restart(self):
        """Return to the spawn point with full lives."""
        self._spawn()
        self.lives = STARTING_LIVES

    def get_rect(self) -> pygame.Rect:
        """Get the ship's bounding rectangle."""
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def get_center(self) -> tuple:
        """Get the ship's center position."""
        return (self.x + self.width // 2, self.y + self.height // 2)

    def draw(self, surface: pygame.Surface):
        """
        Draw the ship on the given surface.

        Args:
            surface: Pygame surface to draw on
        """
        w, h = self.width, self.height
        hull = [
            (self.x + w * 0.5, self.y + h * 0.1),   # Nose
            (self.x + w * 0.9, self.y + h * 0.8),   # Right wing tip
            (self.x + w * 0.6, self.y + h * 0.7),
            (self.x + w * 0.4, self.y + h * 0.7),
            (self.x + w * 0.1, self.y + h * 0.8),   # Left wing tip
        ]
        pygame.draw.polygon(surface, PLAYER_BODY, hull)
        pygame.draw.polygon(surface, (255, 255, 255), hull, 2)

        cockpit = pygame.Rect(0, 0, w * 0.16, h * 0.22)
        cockpit.center = (self.x + w * 0.5, self.y + h * 0.45)
        pygame.draw.ellipse(surface, PLAYER_COCKPIT, cockpit)

        flame = [
            (self.x + w * 0.42, self.y + h * 0.7),
            (self.x + w * 0.5, self.y + h * 0.95),
            (self.x + w * 0.58, self.y + h * 0.7),
        ]
        pygame.draw.polygon(surface, PLAYER_THRUSTER, flame)
