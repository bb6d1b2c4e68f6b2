#!/usr/bin/env python3
"""
Beetle Invaders - A wave shooter.

Waves of beetlemorphs slide in from the top of the screen and sweep side
to side, stepping down at every edge. Move the ship with the arrow keys
and fire with Space. Each cleared wave grows the next one and grants an
extra life.
"""

import pygame

# Initialize pygame
pygame.init()

# Import game modules
from game.constants import WINDOW_WIDTH, WINDOW_HEIGHT, FPS, GAME_TITLE
from game.game_engine import Game
from game.high_scores import HighScoreManager
from game.sound_manager import SoundManager
from session.session_logger import SessionLogger
from ui.game_ui import GameUI


class BeetleInvaders:
    """Main game application class."""

    def __init__(self):
        """Initialize the game application."""
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)
        self.clock = pygame.time.Clock()

        # Initialize game engine
        self.game = Game(WINDOW_WIDTH, WINDOW_HEIGHT)

        # Initialize high score manager and load persisted high score
        self.high_score_manager = HighScoreManager()
        top_score = self.high_score_manager.get_top_score()
        if top_score:
            self.game.high_score = top_score

        # Initialize session logger
        self.session_logger = SessionLogger()
        self.session_logger.start_session()

        # Initialize sound manager
        self.sound_manager = SoundManager()

        # Initialize UI components
        self.game_ui = GameUI(self.screen)

        # Rank of the last finished game, None if it missed the table
        self.last_rank = None

        # Running state
        self.running = True

    def run(self):
        """Main game loop."""
        while self.running:
            delta_time = self.clock.tick(FPS)

            self._handle_events()
            self._update(delta_time)
            self._render()

            pygame.display.flip()

        self._cleanup()

    def _handle_events(self):
        """Handle pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.KEYUP:
                self.game.handle_key_up(event.key)

    def _handle_keydown(self, event):
        """Handle key press events."""
        if event.key == pygame.K_ESCAPE:
            self.running = False

        elif event.key == pygame.K_m:
            # Toggle sound
            enabled = self.sound_manager.toggle_sound()
            print(f"Sound {'enabled' if enabled else 'disabled'}")

        elif event.key == pygame.K_p:
            self.game.toggle_pause()

        else:
            finished = self.game.get_game_state() if self.game.game_over else None
            if self.game.handle_key_down(event.key):
                self.sound_manager.play_fire()
                self.session_logger.log_shot(self.game.get_game_state())

            # R during game over restarted the game
            if finished and not self.game.game_over:
                self._start_new_session(finished)

    def _start_new_session(self, finished_state: dict):
        """
        Close the finished session log and open a fresh one.

        Args:
            finished_state: Game state captured before the restart
        """
        if self.session_logger.is_active():
            self.session_logger.end_session(finished_state['score'], finished_state['wave'])
        self.session_logger.start_session()
        self.last_rank = None

    def _save_high_score(self):
        """Save the finished game's score to the high score table."""
        game_state = self.game.get_game_state()
        summary = self.session_logger.get_summary() or {}

        rank = self.high_score_manager.add_score(
            score=game_state['score'],
            wave=game_state['wave'],
            duration_seconds=round(self.session_logger.get_duration(), 2),
            accuracy=summary.get('accuracy', 0.0)
        )

        top = self.high_score_manager.get_top_score()
        if top:
            self.game.high_score = max(self.game.high_score, top)

        if rank:
            print(f"New high score! Rank #{rank} with {game_state['score']} points")
        self.last_rank = rank

    def _update(self, delta_time: int):
        """
        Update game state and react to this frame's events.

        Args:
            delta_time: Milliseconds since the previous frame
        """
        events = self.game.update(delta_time)

        # UI animations are tuned in 60fps frames
        self.game_ui.update(delta_time / (1000 / FPS))

        if self.game.paused:
            return

        state = self.game.get_game_state()

        for position in events['enemies_hit']:
            self.sound_manager.play_hit()
            self.session_logger.log_enemy_hit(state, position)

        for position in events['enemies_destroyed']:
            self.sound_manager.play_explosion()
            self.game_ui.add_explosion(*position)
            self.session_logger.log_enemy_destroyed(state, position)

        if events['score_change'] > 0:
            self.game_ui.trigger_score_pulse()

        if events['life_lost']:
            self.sound_manager.play_life_lost()
            self.game_ui.trigger_lives_flash()
            self.session_logger.log_life_lost(state)

        if events['wave_cleared']:
            self.sound_manager.play_wave_cleared()
            self.session_logger.log_wave_cleared(state, events['new_wave'])
            print(f"Wave {events['new_wave']} incoming")

        if events['game_over']:
            self.sound_manager.play_game_over()
            self.session_logger.log_game_over(state)
            self._save_high_score()

    def _render(self):
        """Render the current frame."""
        self.game_ui.draw_background()
        self.game.draw(self.screen)
        self.game_ui.draw_explosions()

        state = self.game.get_game_state()
        self.game_ui.draw_hud(state['score'], state['wave'], state['lives'], state['high_score'])

        if self.game.game_over:
            self.game_ui.draw_game_over(
                state['score'],
                state['high_score'],
                self.high_score_manager.get_high_scores()
            )
        elif self.game.paused:
            self.game_ui.draw_pause_overlay()

    def _cleanup(self):
        """Clean up resources."""
        # End any active session
        if self.session_logger.is_active():
            game_state = self.game.get_game_state()
            self.session_logger.end_session(game_state['score'], game_state['wave'])

        pygame.quit()


def main():
    """Entry point for the game."""
    print("=" * 50)
    print("  BEETLE INVADERS")
    print("=" * 50)
    print()
    print("Controls:")
    print("  - Left/Right arrows: Move ship")
    print("  - Space: Fire")
    print("  - P: Pause/Resume")
    print("  - R: Restart after game over")
    print("  - M: Toggle sound on/off")
    print("  - Escape: Quit")
    print()

    app = BeetleInvaders()
    app.run()


if __name__ == "__main__":
    main()
