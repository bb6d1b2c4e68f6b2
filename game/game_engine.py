"""Main game engine managing game state and logic."""

import pygame
import random
from typing import List, Dict, Optional
from .constants import (
    WINDOW_WIDTH, WINDOW_HEIGHT, PROJECTILE_POOL_SIZE, ENEMY_SIZE,
    STARTING_COLUMNS, STARTING_ROWS, STARTING_SCORE, SPRITE_INTERVAL,
    MAX_WAVE_WIDTH_RATIO, MAX_WAVE_HEIGHT_RATIO, EXTRA_LIVES_PER_WAVE
)
from .player import Player
from .projectile import Projectile
from .wave import Wave


class Game:
    """Core game engine: owns the player, the projectile pool and the waves."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT,
                 seed: Optional[int] = None):
        """
        Initialize the game engine.

        Args:
            width: Width of the playfield in pixels
            height: Height of the playfield in pixels
            seed: Optional seed for wave direction, growth and sprite variants
        """
        self.width = width
        self.height = height
        self.rng = random.Random(seed)

        # Input state
        self.keys = set()
        self.fired = False

        self.player = Player(self)

        # Projectile pool
        self.projectiles_pool: List[Projectile] = []
        self.number_of_projectiles = PROJECTILE_POOL_SIZE
        self.create_projectiles()

        # Wave grid
        self.columns = STARTING_COLUMNS
        self.rows = STARTING_ROWS
        self.enemy_size = ENEMY_SIZE

        self.score = STARTING_SCORE
        self.high_score = 0
        self.game_over = False
        self.paused = False

        # Per-frame events, filled in by entities during update()
        self.events = self._new_events()

        self.waves: List[Wave] = [Wave(self)]
        self.wave_count = 1

        # Sprite timing
        self.sprite_update = False
        self.sprite_timer = 0
        self.sprite_interval = SPRITE_INTERVAL

    @staticmethod
    def _new_events() -> Dict:
        return {
            'score_change': 0,
            'enemies_hit': [],
            'enemies_destroyed': [],
            'life_lost': False,
            'wave_cleared': False,
            'new_wave': None,
            'game_over': False,
        }

    def update(self, delta_time: float) -> Dict:
        """
        Advance the game by one frame.

        Args:
            delta_time: Milliseconds since the previous frame

        Returns:
            Dictionary with this frame's events for UI / sound / logging
        """
        self.events = self._new_events()
        if self.paused:
            return self.events

        score_before = self.score
        was_over = self.game_over

        # Sprite timing
        if self.sprite_timer > self.sprite_interval:
            self.sprite_update = True
            self.sprite_timer = 0
        else:
            self.sprite_update = False
            self.sprite_timer += delta_time

        self.player.update()

        for projectile in self.projectiles_pool:
            projectile.update()

        # Waves appended during this frame start moving next frame
        for wave in list(self.waves):
            wave.update()

            if wave.is_cleared() and not wave.next_wave_trigger and not self.game_over:
                self.new_wave()
                self.wave_count += 1
                wave.next_wave_trigger = True
                self.player.lives += EXTRA_LIVES_PER_WAVE
                self.events['wave_cleared'] = True
                self.events['new_wave'] = self.wave_count

        self.waves = [wave for wave in self.waves if not wave.next_wave_trigger]

        self.events['score_change'] = self.score - score_before
        if self.game_over and not was_over:
            self.events['game_over'] = True
            if self.score > self.high_score:
                self.high_score = self.score

        return self.events

    def draw(self, surface: pygame.Surface):
        """Draw the player, projectiles and waves."""
        self.player.draw(surface)
        for projectile in self.projectiles_pool:
            projectile.draw(surface)
        for wave in self.waves:
            wave.draw(surface)

    # ========== Input ==========

    def handle_key_down(self, key: int) -> bool:
        """
        Handle a key press.

        Args:
            key: pygame key code

        Returns:
            True if a projectile was fired
        """
        fired = False
        if key == pygame.K_SPACE and not self.fired and not self.paused:
            fired = self.player.shoot() is not None
            self.fired = True
        if key == pygame.K_r and self.game_over:
            self.restart()
        self.keys.add(key)
        return fired

    def handle_key_up(self, key: int):
        """Handle a key release."""
        if key == pygame.K_SPACE:
            self.fired = False
        self.keys.discard(key)

    # ========== Projectile pool ==========

    def create_projectiles(self):
        """Pre-allocate the projectile pool."""
        for _ in range(self.number_of_projectiles):
            self.projectiles_pool.append(Projectile())

    def get_projectile(self) -> Optional[Projectile]:
        """Get the first free projectile, or None if all are in flight."""
        for projectile in self.projectiles_pool:
            if projectile.free:
                return projectile
        return None

    # ========== Rules ==========

    def check_collision(self, a, b) -> bool:
        """Strict axis-aligned bounding box overlap on the raw float coordinates."""
        return (
            a.x < b.x + b.width
            and a.x + a.width > b.x
            and a.y < b.y + b.height
            and a.y + a.height > b.y
        )

    def new_wave(self):
        """Grow the grid by a column or a row and queue the next wave."""
        if (self.rng.random() < 0.5
                and self.columns * self.enemy_size < self.width * MAX_WAVE_WIDTH_RATIO):
            self.columns += 1
        elif self.rows * self.enemy_size < self.height * MAX_WAVE_HEIGHT_RATIO:
            self.rows += 1

        self.waves.append(Wave(self))

    def restart(self):
        """Reset to the first wave with a fresh ship."""
        self.player.restart()
        for projectile in self.projectiles_pool:
            projectile.reset()

        self.columns = STARTING_COLUMNS
        self.rows = STARTING_ROWS

        self.waves = [Wave(self)]
        self.wave_count = 1

        self.score = STARTING_SCORE
        self.game_over = False
        self.paused = False

    def pause_game(self):
        """Pause the game."""
        if not self.game_over:
            self.paused = True

    def resume_game(self):
        """Resume from pause."""
        self.paused = False

    def toggle_pause(self) -> bool:
        """Toggle pause; returns the new paused state."""
        if self.paused:
            self.resume_game()
        else:
            self.pause_game()
        return self.paused

    def get_game_state(self) -> Dict:
        """Get current game state for rendering and logging."""
        return {
            'score': self.score,
            'lives': self.player.lives,
            'wave': self.wave_count,
            'high_score': self.high_score,
            'game_over': self.game_over,
            'paused': self.paused,
            'enemies_remaining': sum(len(wave.enemies) for wave in self.waves),
        }
