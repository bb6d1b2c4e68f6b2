"""Session data logger for recording gameplay events."""

import json
import os
import time
from datetime import datetime
from typing import Dict, Optional
from game.constants import SESSION_LOG_DIRECTORY


class SessionLogger:
    """Logs every shot, hit, kill, lost life and cleared wave of a play session."""

    def __init__(self, log_directory: str = SESSION_LOG_DIRECTORY):
        """
        Initialize the session logger.

        Args:
            log_directory: Directory to store session log files
        """
        self.log_directory = log_directory
        self.session_id = None
        self.session_file = None
        self.session_data = None
        self.session_start_time = None

        os.makedirs(log_directory, exist_ok=True)

    def start_session(self):
        """Start a new logging session."""
        self.session_start_time = time.time()
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        self.session_file = os.path.join(
            self.log_directory,
            f"session_{self.session_id}.json"
        )

        self.session_data = {
            "session_id": self.session_id,
            "start_time": datetime.now().isoformat(),
            "start_timestamp": self.session_start_time,
            "events": [],
            "summary": {
                "shots_fired": 0,
                "hits": 0,
                "accuracy": 0.0,
                "enemies_destroyed": 0,
                "lives_lost": 0,
                "waves_cleared": 0,
            },
        }

        self._save_session()
        print(f"Session logging started: {self.session_file}")

    def is_active(self) -> bool:
        """Check whether a session is being recorded."""
        return self.session_data is not None

    def _append_event(self, event_type: str, game_state: Dict, **details) -> Optional[Dict]:
        if not self.session_data:
            return None

        event = {
            "type": event_type,
            "timestamp": datetime.now().isoformat(),
            "elapsed_seconds": round(time.time() - self.session_start_time, 3),
            "game_state": {
                "score": game_state.get("score", 0),
                "lives": game_state.get("lives", 0),
                "wave": game_state.get("wave", 0),
            },
        }
        event.update(details)
        self.session_data["events"].append(event)
        return event

    def _update_accuracy(self):
        summary = self.session_data["summary"]
        if summary["shots_fired"]:
            summary["accuracy"] = round(summary["hits"] / summary["shots_fired"] * 100, 2)

    def log_shot(self, game_state: Dict):
        """
        Log a fired projectile.

        Shots are frequent, so they are written out with the next
        less frequent event or at the end of the session.

        Args:
            game_state: Snapshot from Game.get_game_state()
        """
        if self._append_event("shot", game_state):
            self.session_data["summary"]["shots_fired"] += 1
            self._update_accuracy()

    def log_enemy_hit(self, game_state: Dict, position: tuple):
        """Log a projectile connecting with an enemy."""
        if self._append_event("enemy_hit", game_state, position=list(position)):
            self.session_data["summary"]["hits"] += 1
            self._update_accuracy()

    def log_enemy_destroyed(self, game_state: Dict, position: tuple):
        """Log an enemy finishing its death animation."""
        if self._append_event("enemy_destroyed", game_state, position=list(position)):
            self.session_data["summary"]["enemies_destroyed"] += 1
            self._save_session()

    def log_life_lost(self, game_state: Dict):
        """Log an enemy ramming the player."""
        if self._append_event("life_lost", game_state):
            self.session_data["summary"]["lives_lost"] += 1
            self._save_session()

    def log_wave_cleared(self, game_state: Dict, next_wave: int):
        """
        Log the end of a wave.

        Args:
            game_state: Snapshot taken after the next wave was queued
            next_wave: Number of the wave that starts now
        """
        if self._append_event("wave_cleared", game_state, cleared_wave=next_wave - 1):
            self.session_data["summary"]["waves_cleared"] += 1
            self._save_session()

    def log_game_over(self, game_state: Dict):
        """Log the game over transition."""
        if self._append_event("game_over", game_state):
            self._save_session()

    def end_session(self, final_score: int, final_wave: int):
        """
        End the current session and save final data.

        Args:
            final_score: Final game score
            final_wave: Wave the player reached
        """
        if not self.session_data:
            return

        end_time = time.time()
        self.session_data["end_time"] = datetime.now().isoformat()
        self.session_data["end_timestamp"] = end_time
        self.session_data["duration_seconds"] = round(
            end_time - self.session_start_time, 2
        )
        self.session_data["final_score"] = final_score
        self.session_data["final_wave"] = final_wave

        self._save_session()
        print(f"Session ended. Log saved to: {self.session_file}")
        print(f"  Shots fired: {self.session_data['summary']['shots_fired']}")
        print(f"  Accuracy: {self.session_data['summary']['accuracy']}%")

        self.session_id = None
        self.session_file = None
        self.session_data = None

    def get_summary(self) -> Optional[Dict]:
        """Get a copy of the running summary, or None when no session is active."""
        if not self.session_data:
            return None
        return dict(self.session_data["summary"])

    def get_duration(self) -> float:
        """Seconds since the session started, 0 when inactive."""
        if not self.session_data:
            return 0.0
        return time.time() - self.session_start_time

    def _save_session(self):
        """Save session data to file."""
        if not self.session_file or not self.session_data:
            return

        try:
            with open(self.session_file, 'w') as f:
                json.dump(self.session_data, f, indent=2)
        except IOError as e:
            print(f"Error saving session log: {e}")

    def get_session_file(self) -> Optional[str]:
        """Get the current session file path."""
        return self.session_file
