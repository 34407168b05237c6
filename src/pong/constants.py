"""
constants.py: Centralized configuration for the simulation and the front-end.
"""

# -------- Time Step --------
TICK_RATE = 60                  # Simulated frames per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step (Delta Time)
RENDER_FPS = 60

# -------- Field Config --------
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768

# -------- Physics Config (Pixels / Second) --------
BALL_SPEED = 550.0
OPPONENT_SPEED = 350.0
PADDLE_STEP_DIVISOR = 4         # Player moves height / 4 per key press

# Serve direction: each axis magnitude is drawn from [SERVE_MIN, SERVE_MAX]
SERVE_MIN = 1
SERVE_MAX = 10

# Reflection steepness at the paddle ends (vertical : horizontal)
MAX_REFLECTION = 2.0

# -------- Rules --------
WINNING_SCORE = 11

# -------- Sprites (width, height) --------
PADDLE_SPRITE_SIZE = (20, 100)
BALL_SPRITE_SIZE = (20, 20)
