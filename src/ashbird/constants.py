"""
constants.py: Centralized configuration for the simulation and its driver.
"""

# Time scaling
TARGET_FPS = 60
FRAME_MS = 1000.0 / TARGET_FPS  # Nominal frame duration (ms), scale factor 1.0
MAX_FRAME_MS = 100.0            # Clamp for long pauses / backgrounded windows

# -------- Game World Config --------
SCREEN_WIDTH = 400
SCREEN_HEIGHT = 600
GROUND_OFFSET = 80              # Ground line sits this far above the bottom edge
BIRD_X_RATIO = 0.2              # Bird anchor as a fraction of screen width

# -------- Pipe Config --------
PIPE_WIDTH = 80
PIPE_GAP = 125
PIPE_SPEED = 3.2                # Pixels per nominal frame
PIPE_SPACING = 200              # Distance from the right edge before the next spawn
PIPE_MIN_HEIGHT = 80            # Minimum solid margin above and below the gap
FIRST_PIPE_X_RATIO = 0.65       # First pipe of a round spawns closer to the bird

# -------- Physics Config (pixels / nominal frame) --------
GRAVITY = 0.55
FLAP_STRENGTH = -7.5            # Velocity is set to this on every flap
MAX_FALL_SPEED = 10.0

# -------- Bird Config --------
BIRD_SIZE = 40
HITBOX_INSET = 5                # Collision box is shrunk by this on every side
ROTATION_GAIN = 4.0
MIN_ROTATION = -25.0
MAX_ROTATION = 90.0

# -------- Persistence --------
SCORE_DB_FILE = "ashbird_scores.db"
HIGH_SCORE_KEY = "flappyHighScore"

# -------- Driver --------
RENDER_FPS = 60
