from dataclasses import dataclass
from typing import Optional

# ----- Arena -----
ARENA_WIDTH, ARENA_HEIGHT = 800, 700
FPS = 60
TICK_MS = 1000 / FPS

# ----- Player -----
PLAYER_W, PLAYER_H = 150, 150
PLAYER_FLOOR_GAP = 200          # player y = arena height - gap
PLAYER_SPEED = 8                # px per tick

# ----- Animation (ms per frame) -----
IDLE_FRAME_MS = 200
WALK_FRAME_MS = 100
EAT_FRAME_MS = 300
HIT_FRAME_MS = 150
DRAMATIC_FRAME_MS = 200        # Hit frames while the game-over sequence runs

EAT_HOLD_MS = 150               # Eating reverts to Idle after this
HIT_HOLD_MS = 1200              # Hit reverts to Idle after this

# ----- Dramatic game over -----
BANNER_DELAY_MS = 1500
FINALIZE_DELAY_MS = 4000

# ----- Falling food -----
FOOD_W, FOOD_H = 150, 150
GOOD_HITBOX = 150
BAD_HITBOX = 100
FOOD_VARIANTS = 3
BASE_FALL_SPEED = 1.5
FALL_SPEED_PER_LEVEL = 0.3
FALL_SPEED_JITTER = 1.5

# ----- Scoring & difficulty -----
START_LIVES = 3
POINTS_PER_LEVEL = 200
GOOD_BASE_POINTS = 10
GOOD_POINTS_PER_LEVEL = 5

START_GAME_SPEED = 0.7
GAME_SPEED_STEP = 0.1
START_SPAWN_RATE = 0.004
SPAWN_RATE_STEP = 0.002
START_BAD_CHANCE = 0.2
BAD_CHANCE_STEP = 0.05
MAX_BAD_CHANCE = 0.5

# ----- High scores -----
MAX_HIGH_SCORES = 10
DEFAULT_NAME = "Anonymous"

# ----- Colors -----
BG = (255, 255, 255)
GOOD_COLOR = (76, 175, 80)      # #4CAF50
BAD_COLOR = (244, 67, 54)       # #F44336
PLAYER_COLOR = (76, 175, 80)
PLAYER_DARK = (46, 125, 50)
PROGRESS = (0, 230, 118)        # #00E676
GOLD = (255, 215, 0)
BANNER_RED = (255, 68, 68)
HEART_EMPTY = (153, 153, 153)
TEXT = (51, 51, 51)


# ----- Tunables (what you'd tweak per run) -----
@dataclass
class Config:
    seed: Optional[int] = 0
    arena_width: int = ARENA_WIDTH
    arena_height: int = ARENA_HEIGHT
    start_lives: int = START_LIVES
    dramatic_game_over: bool = True
    scores_path: Optional[str] = "highscores.json"

    def __post_init__(self):
        if self.arena_width <= PLAYER_W or self.arena_height <= PLAYER_FLOOR_GAP:
            raise ValueError(
                f"Arena {self.arena_width}x{self.arena_height} too small for the player"
            )
        if self.start_lives < 1:
            raise ValueError(f"start_lives must be >= 1, got {self.start_lives}")


CFG = Config()
