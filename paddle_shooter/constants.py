"""
Paddle Shooter Constants
"""

WIDTH = 800
HEIGHT = 600
FPS = 60
TITLE = "Paddle Shooter"

BACKGROUND = (20, 20, 20, 178)
TEXT_COLOR = "white"

MAX_LIVES = 3
MAX_ENEMIES = 6
MAX_PARTICLES = 10
KILL_SCORE = 15

# milliseconds
START_INVINCIBILITY = 2000
HIT_INVINCIBILITY = 2000
RESUME_INVINCIBILITY = 1000
RESPAWN_DELAY = 2000

# frames
AUTO_FIRE_INTERVAL = 10
BLINK_WINDOW = 20

PLAYER_SIZE = (60, 20)
PLAYER_SPEED = 8

BULLET_SIZE = (8, 20)
BULLET_SPEED = 8
ENEMY_BULLET_SPEED = 6

ENEMY_SIZE = (60, 20)

PARTICLE_SIZE = 40
PARTICLE_DECAY = 0.89
PARTICLE_GRAVITY = 0.05
PARTICLE_MAX_LIFE = 100
PARTICLE_COLOR = "orange"
