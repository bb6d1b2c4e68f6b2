"""Game module containing core game logic."""

from .constants import *
from .projectile import Projectile
from .player import Player
from .enemy import Enemy, BeetleMorph
from .wave import Wave
from .game_engine import Game
from .high_scores import HighScoreManager, HighScoreEntry
from .sound_manager import SoundManager
