"""High score persistence across game sessions."""

import json
import os
from datetime import datetime
from typing import List, Optional
from dataclasses import dataclass, asdict
from .constants import HIGH_SCORES_FILE, MAX_HIGH_SCORES


@dataclass
class HighScoreEntry:
    """A single high score entry."""
    score: int
    date: str
    wave: int
    duration_seconds: float = 0.0
    accuracy: float = 0.0


class HighScoreManager:
    """Keeps the best scores, sorted highest first, in a JSON file."""

    def __init__(self, filepath: str = HIGH_SCORES_FILE, max_scores: int = MAX_HIGH_SCORES):
        """
        Initialize the high score manager.

        Args:
            filepath: Path to the high scores JSON file
            max_scores: How many entries to keep
        """
        self.filepath = filepath
        self.max_scores = max_scores
        self.scores: List[HighScoreEntry] = []
        self._load_scores()

    def _load_scores(self):
        """Load high scores from file."""
        if not os.path.exists(self.filepath):
            self.scores = []
            return

        try:
            with open(self.filepath, 'r') as f:
                data = json.load(f)
            self.scores = [HighScoreEntry(**entry) for entry in data.get('scores', [])]
            self.scores.sort(key=lambda entry: entry.score, reverse=True)
        except (json.JSONDecodeError, IOError, TypeError, AttributeError) as e:
            print(f"Warning: Could not load high scores: {e}")
            self.scores = []

    def _save_scores(self):
        """Save high scores to file."""
        try:
            with open(self.filepath, 'w') as f:
                json.dump({'scores': [asdict(entry) for entry in self.scores]}, f, indent=2)
        except IOError as e:
            print(f"Error saving high scores: {e}")

    def add_score(
        self,
        score: int,
        wave: int = 1,
        duration_seconds: float = 0,
        accuracy: float = 0
    ) -> Optional[int]:
        """
        Add a new score and return its rank if it's a high score.

        Args:
            score: The score achieved
            wave: The wave the player reached
            duration_seconds: How long the session lasted
            accuracy: Percentage of shots that hit an enemy

        Returns:
            Rank (1-based) if it's a new high score, None otherwise
        """
        if not self.is_high_score(score):
            return None

        entry = HighScoreEntry(
            score=score,
            date=datetime.now().strftime("%Y-%m-%d %H:%M"),
            wave=wave,
            duration_seconds=round(duration_seconds, 1),
            accuracy=round(accuracy, 1),
        )

        # Ties rank below existing entries
        position = len(self.scores)
        for i, existing in enumerate(self.scores):
            if score > existing.score:
                position = i
                break

        self.scores.insert(position, entry)
        self.scores = self.scores[:self.max_scores]
        self._save_scores()
        return position + 1

    def get_high_scores(self) -> List[HighScoreEntry]:
        """Get high scores, sorted by score descending."""
        return list(self.scores)

    def get_top_score(self) -> Optional[int]:
        """Get the highest score, or None if no scores exist."""
        return self.scores[0].score if self.scores else None

    def is_high_score(self, score: int) -> bool:
        """
        Check if a score would make the table.

        Args:
            score: The score to check

        Returns:
            True if this would be a new high score
        """
        if score <= 0:
            return False
        if len(self.scores) < self.max_scores:
            return True
        return score > self.scores[-1].score

    def clear_scores(self):
        """Remove every stored score."""
        self.scores = []
        self._save_scores()
