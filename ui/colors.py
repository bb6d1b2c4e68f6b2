"""Color definitions for the game UI."""

# Basic colors
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
YELLOW = (255, 255, 0)
GRAY = (128, 128, 128)

# Game-specific colors
BACKGROUND = (10, 10, 30)
PLAYER_BODY = (90, 140, 220)
PLAYER_COCKPIT = (180, 230, 255)
PLAYER_THRUSTER = (255, 160, 40)
PROJECTILE_COLOR = (255, 255, 180)
PROJECTILE_GLOW = (255, 200, 60)
HUD_TEXT = (200, 200, 200)
HUD_SHADOW = (0, 0, 0)
LIVES_COLOR = (255, 100, 100)
SCORE_COLOR = (100, 255, 100)
WAVE_COLOR = (120, 170, 255)
PAUSE_OVERLAY = (0, 0, 0, 180)
EXPLOSION_COLORS = [(255, 255, 0), (255, 200, 0), (255, 150, 0), (255, 100, 0), (255, 50, 0)]

# Beetlemorph shell colors, one per sprite sheet row
BEETLE_VARIANTS = [
    (110, 200, 90),    # Green
    (220, 170, 60),    # Amber
    (90, 170, 220),    # Teal
    (200, 90, 170),    # Magenta
]
BEETLE_OUTLINE = (20, 20, 20)
BEETLE_EYES = (255, 60, 60)
BEETLE_GOO = (150, 230, 120)
