"""A rectangular formation of enemies that moves as one."""

from typing import List
import pygame
from .constants import WAVE_ENTRY_SPEED, WAVE_SPEED_X
from .enemy import Enemy, BeetleMorph


class Wave:
    """
    Grid of enemies sweeping left and right across the screen.

    The wave enters from above, slides sideways and drops by one enemy
    height every time it touches a screen edge.
    """

    def __init__(self, game):
        """
        Build a wave sized from the game's current rows and columns.

        Args:
            game: Owning Game instance
        """
        self.game = game
        self.width = game.columns * game.enemy_size
        self.height = game.rows * game.enemy_size
        self.x = game.width * 0.5 - self.width * 0.5
        self.y = -self.height
        self.speed_x = WAVE_SPEED_X if game.rng.random() > 0.5 else -WAVE_SPEED_X
        self.speed_y = 0
        self.enemies: List[Enemy] = []
        self.next_wave_trigger = False
        self.create()

    def update(self):
        """Move the formation, update every enemy and drop the dead ones."""
        if self.y < 0:
            self.y += WAVE_ENTRY_SPEED
        self.speed_y = 0

        if self.x < 0 or self.x > self.game.width - self.width:
            self.speed_x *= -1
            self.speed_y = self.game.enemy_size

        self.x += self.speed_x
        self.y += self.speed_y

        for enemy in self.enemies:
            enemy.update(self.x, self.y)

        self.enemies = [enemy for enemy in self.enemies if not enemy.mark_for_deletion]

    def draw(self, surface: pygame.Surface):
        """Draw every enemy in the formation."""
        for enemy in self.enemies:
            enemy.draw(surface)

    def create(self):
        """Fill the grid row by row."""
        for y in range(self.game.rows):
            for x in range(self.game.columns):
                enemy_x = x * self.game.enemy_size
                enemy_y = y * self.game.enemy_size
                self.enemies.append(BeetleMorph(self.game, enemy_x, enemy_y))

    def is_cleared(self) -> bool:
        """Check whether every enemy has been removed."""
        return not self.enemies
