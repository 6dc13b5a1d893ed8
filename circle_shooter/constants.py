"""
Screen dimensions, colors, font sizes, tuning knobs for spawning, scoring and
particle effects, asset paths, and logging configuration.
"""

import os

WIDTH, HEIGHT = 1024, 640
FPS = 60
BG_COLOR = (0, 0, 0)
TEXT_COLOR = (235, 235, 235)
ACCENT_COLOR = (255, 235, 90)
HUD_PADDING = 12
FONT_NAME = "freesansbold.ttf"

# Font Size Constants
FONT_SIZE_SMALL = 14
FONT_SIZE_MEDIUM = 18
FONT_SIZE_LARGE = 36

# Player / projectiles
PLAYER_RADIUS = 20
PLAYER_COLOR = "white"
PROJECTILE_RADIUS = 5
PROJECTILE_COLOR = "white"
PROJECTILE_SPEED = 5

# Enemies
SPAWN_INTERVAL_MS = 1300
ENEMY_MIN_RADIUS = 4
ENEMY_MAX_RADIUS = 30
ENEMY_SPEED = 1.0
ENEMY_SATURATION = 50
ENEMY_LIGHTNESS = 50

# Collisions & scoring
TOUCH_DISTANCE = 1                 # gap below which two circles count as touching
SHRINK_AMOUNT = 10
MIN_ENEMY_RADIUS = 5               # a hit that would leave the enemy at or below this destroys it
SHRINK_TWEEN_MS = 300
SHRINK_SCORE = 100
KILL_SCORE = 250

# Particles
FRICTION = 0.97
PARTICLE_FADE = 0.01
PARTICLE_MAX_RADIUS = 2
PARTICLE_SPREAD = 6
PARTICLES_PER_RADIUS = 2

# Render
TRAIL_ALPHA = 0.1                  # opacity of the per-frame clear, lower = longer trails

# Sound effect names
SFX_HIT = "hit"
SFX_EXPLOSION = "explosion"

# Log file settings
ROOT_DIR = os.path.dirname(os.path.dirname(__file__))
LOG_FILE = os.path.join(ROOT_DIR, "log.md")
ASSETS_DIR = os.path.join(ROOT_DIR, "assets")
HIT_SFX_PATH = os.path.join(ASSETS_DIR, "hit.wav")
EXPLOSION_SFX_PATH = os.path.join(ASSETS_DIR, "explosion.wav")
SFX_VOLUME = 0.7
