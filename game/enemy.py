"""Enemies that fly in wave formation."""

import pygame
from .constants import (
    BEETLEMORPH_LIVES, BEETLEMORPH_MAX_FRAME, BEETLEMORPH_VARIANTS,
    POINTS_PLAYER_COLLISION
)
from ui.sprites import create_beetlemorph_sheet


class Enemy:
    """
    Base enemy positioned relative to its owning wave.

    Subclasses provide the sprite sheet and the life / animation settings.
    """

    def __init__(self, game, position_x: float, position_y: float):
        """
        Initialize an enemy at a fixed offset inside its wave.

        Args:
            game: Owning Game instance
            position_x: Horizontal offset from the wave's left edge
            position_y: Vertical offset from the wave's top edge
        """
        self.game = game
        self.width = game.enemy_size
        self.height = game.enemy_size
        self.x = 0
        self.y = 0
        self.position_x = position_x
        self.position_y = position_y
        self.mark_for_deletion = False

        # Sprite sheet: columns are death frames, rows are variants
        self.image = None
        self.frame_x = 0
        self.frame_y = 0
        self.max_frame = 0

        self.lives = 0
        self.max_lives = 0

    def update(self, x: float, y: float):
        """
        Follow the wave and resolve this frame's collisions.

        Args:
            x: Current left edge of the owning wave
            y: Current top edge of the owning wave
        """
        game = self.game
        self.x = x + self.position_x
        self.y = y + self.position_y

        for projectile in game.projectiles_pool:
            if not projectile.free and game.check_collision(self, projectile) and self.lives > 0:
                self.hit(1)
                projectile.reset()
                game.events['enemies_hit'].append(self.get_center())

        # Dying: play the death frames, then leave the wave
        if self.lives < 1:
            if game.sprite_update:
                self.frame_x += 1

            if self.frame_x > self.max_frame:
                self.mark_for_deletion = True
                if not game.game_over:
                    game.score += self.max_lives
                game.events['enemies_destroyed'].append(self.get_center())

        if game.check_collision(self, game.player):
            self.mark_for_deletion = True

            if not game.game_over and game.score > 0:
                game.score += POINTS_PLAYER_COLLISION
            game.player.lives -= 1
            game.events['life_lost'] = True
            if game.player.lives < 1:
                game.game_over = True

        # Reaching the bottom ends the game
        if self.y + self.height > game.height:
            game.game_over = True
            self.mark_for_deletion = True

    def hit(self, damage: int):
        """Take damage from a projectile."""
        self.lives -= damage

    def get_rect(self) -> pygame.Rect:
        """Get the enemy's bounding rectangle."""
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def get_center(self) -> tuple:
        """Get the enemy's center position."""
        return (self.x + self.width // 2, self.y + self.height // 2)

    def draw(self, surface: pygame.Surface):
        """Blit the current animation frame from the sprite sheet."""
        if self.image is None:
            return

        frame = pygame.Rect(
            self.frame_x * self.width, self.frame_y * self.height,
            self.width, self.height
        )
        surface.blit(self.image, (self.x, self.y), frame)


class BeetleMorph(Enemy):
    """One-hit beetle with a three-frame splat animation."""

    def __init__(self, game, position_x: float, position_y: float):
        super().__init__(game, position_x, position_y)
        self.max_frame = BEETLEMORPH_MAX_FRAME
        self.image = create_beetlemorph_sheet(self.width, self.max_frame + 1)
        self.frame_x = 0
        self.frame_y = game.rng.randrange(BEETLEMORPH_VARIANTS)
        self.lives = BEETLEMORPH_LIVES
        self.max_lives = self.lives
