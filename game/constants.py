"""Game constants and configuration settings."""

# Window settings
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 800
FPS = 60
GAME_TITLE = "Beetle Invaders"

# Player settings
PLAYER_WIDTH = 100
PLAYER_HEIGHT = 100
PLAYER_SPEED = 5
STARTING_LIVES = 10

# Projectile settings
PROJECTILE_WIDTH = 8
PROJECTILE_HEIGHT = 40
PROJECTILE_SPEED = 15
PROJECTILE_POOL_SIZE = 10

# Enemy / wave settings
ENEMY_SIZE = 80
STARTING_COLUMNS = 2
STARTING_ROWS = 2
WAVE_ENTRY_SPEED = 1  # px per frame while sliding in from above
WAVE_SPEED_X = 1
MAX_WAVE_WIDTH_RATIO = 0.8   # of screen width
MAX_WAVE_HEIGHT_RATIO = 0.6  # of screen height

# Beetlemorph
BEETLEMORPH_LIVES = 1
BEETLEMORPH_MAX_FRAME = 2
BEETLEMORPH_VARIANTS = 4

# Sprite animation
SPRITE_INTERVAL = 140  # ms

# Scoring
STARTING_SCORE = 0
POINTS_PLAYER_COLLISION = -1
EXTRA_LIVES_PER_WAVE = 1

# Persistence
HIGH_SCORES_FILE = 'high_scores.json'
MAX_HIGH_SCORES = 10
SESSION_LOG_DIRECTORY = 'session_logs'

# Explosion settings
EXPLOSION_LIFETIME = 30  # frames
EXPLOSION_PARTICLES = 20
