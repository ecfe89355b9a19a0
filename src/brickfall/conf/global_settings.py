"""Default settings for Brickfall.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from brickfall.conf import global_settings

    # Override defaults
    SCREEN_WIDTH = 480
    STARTING_LIVES = 5

    # Register an extra system
    INSTALLED_SYSTEMS = [
        *global_settings.INSTALLED_SYSTEMS,
        "myproject.systems.combo",
    ]
"""

# Window settings
SCREEN_WIDTH = 400
"""Width of the playing surface in pixels."""

SCREEN_HEIGHT = 800
"""Height of the playing surface in pixels."""

WINDOW_TITLE = "Brickfall"
"""Title displayed in the window title bar."""

UPDATE_RATE = 1 / 60
"""Seconds between simulation ticks (one tick per window update)."""

LOG_LEVEL = "INFO"
"""Logging level used by run_game()."""

RANDOM_SEED = None
"""Seed for brick colors and effects. None picks a fresh seed every run."""

# Paddle settings
PADDLE_WIDTH = 90
"""Paddle width in pixels."""

PADDLE_HEIGHT = 12
"""Paddle height in pixels."""

PADDLE_BOTTOM_MARGIN = 20
"""Space between the paddle and the bottom edge in pixels."""

PADDLE_SPEED = 7
"""Paddle movement speed in pixels per tick."""

POINTER_DEADZONE_DIVISOR = 1.5
"""Pointer control moves the paddle only when its target is farther than PADDLE_SPEED / this value."""

# Ball settings
BALL_RADIUS = 8
"""Ball radius in pixels."""

BALL_START_OFFSET = 80
"""Distance from the bottom edge where the ball waits before launch."""

INITIAL_BALL_SPEED_X = 4
"""Horizontal launch speed in pixels per tick (direction picked at random)."""

INITIAL_BALL_SPEED_Y = -5
"""Vertical launch speed in pixels per tick (negative is upwards)."""

PADDLE_BOUNCE_FACTOR = 0.15
"""Horizontal speed gained per pixel of distance between the ball and the paddle center."""

PADDLE_MAX_BOUNCE_FACTOR = 2.2
"""Maximum horizontal bounce speed, as a multiple of INITIAL_BALL_SPEED_X."""

PADDLE_FLUSH_GAP = 0.1
"""Gap left between the ball and the paddle top after a bounce."""

GAME_OVER_BALL_OFFSET = 50
"""Distance below the surface center where the ball rests after game over."""

# Brick settings
BRICK_ROW_COUNT = 18
"""Total rows in the grid, including rows waiting to scroll into play."""

BRICK_COLUMN_COUNT = 7
"""Number of brick columns."""

BRICK_WIDTH = 45
"""Brick width in pixels."""

BRICK_HEIGHT = 20
"""Brick height in pixels."""

BRICK_PADDING = 8
"""Gap between neighbouring bricks in pixels."""

BRICK_OFFSET_TOP = 60
"""Space above the first brick row, reserved for the HUD."""

BRICK_COLORS = [
    "#e74c3c",  # Red
    "#3498db",  # Blue
    "#2ecc71",  # Green
    "#f1c40f",  # Yellow
    "#9b59b6",  # Purple
    "#1abc9c",  # Teal
    "#e67e22",  # Orange
    "#34ace0",  # Light blue
    "#ff7f50",  # Coral
    "#ff6b81",  # Pink
]
"""Palette new bricks draw their color from."""

ROW_ANIMATION_SPEED = 8
"""Pixels per tick the brick field slides down during a row shift."""

# Particle settings
PARTICLE_COUNT = 10
"""Square particles emitted per destroyed brick."""

PARTICLE_LIFE = 30
"""Base particle lifetime in ticks."""

PARTICLE_LIFE_JITTER = 10
"""Maximum extra lifetime added to each particle, in ticks."""

PARTICLE_SPEED_FACTOR = 2.0
"""Maximum particle speed on each axis at spawn."""

PARTICLE_SIZE = 2.0
"""Base particle size in pixels (up to one pixel is added at random)."""

PARTICLE_GRAVITY = 0.06
"""Downward acceleration applied to particles every tick."""

# Shard settings
SHARD_COUNT = 5
"""Triangular shards emitted per destroyed brick."""

SHARD_GRAVITY = 0.2
"""Base downward acceleration of shards."""

SHARD_GRAVITY_JITTER = 0.05
"""Spread of the per-shard gravity around SHARD_GRAVITY."""

SHARD_DX_RANGE = 2.0
"""Maximum horizontal shard speed at spawn."""

SHARD_DY_RANGE = 2.5
"""Spread of the vertical shard speed at spawn (centered on zero)."""

SHARD_ROTATION_SPEED_RANGE = 0.15
"""Maximum angular velocity of shards in radians per tick."""

SHARD_SIZE_FACTOR = 0.75
"""Shard radius relative to the smaller brick dimension."""

SHARD_ALPHA = 0.75
"""Opacity used when drawing shards."""

SHARD_DARKEN_FACTOR = 0.75
"""How much shard colors are darkened from the brick color."""

SHARD_CULL_MARGIN = 50
"""Shards are removed once they fall this far below the surface."""

EFFECT_POPULATION_CAP = 2000
"""Hard cap on live particles and on live shards; the oldest are dropped first."""

# Gameplay settings
STARTING_LIVES = 3
"""Lives at the start of a game."""

LAUNCH_DELAY_FRAMES = 50
"""Ticks the ball waits on the paddle before launching by itself."""

SCORE_FOR_EXTRA_LIFE = 50
"""An extra life is granted every time the score reaches a multiple of this value."""

DEBUG_MODE = False
"""Start with debug mode enabled (faster ball, bottom edge bounces)."""

DEBUG_SPEED_MULTIPLIER = 5
"""Ball speed multiplier while debug mode is on."""

# Presentation settings
BACKGROUND_COLOR = "#1e1e1e"
"""Surface background color."""

PADDLE_COLOR = "#bdc3c7"
"""Paddle color."""

BALL_COLOR = "#ffffff"
"""Ball color."""

TEXT_COLOR = "#e0e0e0"
"""HUD text color."""

GAMEOVER_COLOR = "#e74c3c"
"""Color of the GAME OVER message."""

PAUSE_COLOR = "#3498db"
"""Color of the PAUSED message."""

BRICK_OUTLINE_COLOR = (0, 0, 0, 51)
"""RGBA outline drawn around every brick."""

MESSAGE_BACKGROUND_COLOR = (30, 30, 30, 217)
"""RGBA stripe drawn behind centered messages."""

MESSAGE_STRIPE_HEIGHT = 100
"""Height of the stripe behind centered messages."""

UI_TOP_PADDING = 15
"""Padding between the HUD and the surface edges."""

UI_FONT_SIZE = 14
"""Font size of the score and lives counters."""

MESSAGE_FONT_SIZE = 28
"""Font size of centered messages."""

PAUSE_BUTTON_SIZE = 30
"""Side of the square pause button centered at the top of the surface."""

PAUSE_BUTTON_BACKGROUND_COLOR = (255, 255, 255, 26)
"""RGBA fill of the pause button."""

PAUSE_ICON_COLOR = "#e0e0e0"
"""Color of the pause and resume icons."""

# Installed systems
INSTALLED_SYSTEMS = [
    "brickfall.systems.bricks",
    "brickfall.systems.particle",
    "brickfall.systems.session",
    "brickfall.systems.physics",
    "brickfall.systems.input",
]
"""List of module paths to import for system registration.

Example:
    INSTALLED_SYSTEMS = [
        *global_settings.INSTALLED_SYSTEMS,
        "myproject.systems.combo",
    ]
"""
