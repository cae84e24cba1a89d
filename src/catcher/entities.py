# entities.py
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Tuple
import logging

from .config import (
    PLAYER_W, PLAYER_H, PLAYER_FLOOR_GAP, PLAYER_SPEED,
    IDLE_FRAME_MS, WALK_FRAME_MS, EAT_FRAME_MS, HIT_FRAME_MS,
)

logger = logging.getLogger(__name__)


class Facing(Enum):
    LEFT = "left"
    RIGHT = "right"


class AnimationState(Enum):
    IDLE = "idle"
    WALKING = "walking"
    EATING = "eating"
    HIT = "hit"


class FoodKind(Enum):
    GOOD = "good"
    BAD = "bad"


FRAME_MS = {
    AnimationState.IDLE: IDLE_FRAME_MS,
    AnimationState.WALKING: WALK_FRAME_MS,
    AnimationState.EATING: EAT_FRAME_MS,
    AnimationState.HIT: HIT_FRAME_MS,
}

# Reactive states that movement input does not override
STICKY = (AnimationState.EATING, AnimationState.HIT)


# ---------- Player ----------
@dataclass
class PlayerEntity:
    x: float
    y: float
    width: int = PLAYER_W
    height: int = PLAYER_H
    speed: float = PLAYER_SPEED
    facing: Facing = Facing.RIGHT
    state: AnimationState = AnimationState.IDLE
    frame: int = 0
    frame_timer_ms: float = 0.0
    hold_ms: Optional[float] = None   # countdown back to Idle; None = no auto-revert
    frame_ms: Optional[float] = None  # overrides FRAME_MS for the current state

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


def new_player(arena_width: int, arena_height: int) -> PlayerEntity:
    return PlayerEntity(
        x=arena_width / 2 - PLAYER_W / 2,
        y=arena_height - PLAYER_FLOOR_GAP,
    )


def recenter(player: PlayerEntity, arena_width: int) -> None:
    player.x = arena_width / 2 - player.width / 2


def set_animation(player: PlayerEntity, state: AnimationState,
                  hold_ms: Optional[float] = None,
                  frame_ms: Optional[float] = None) -> None:
    """
    Enter `state` from frame 0. With hold_ms, revert to Idle once it elapses.
    frame_ms replaces the state's usual frame duration until the next change.
    """
    if state != player.state:
        logger.debug("player animation %s -> %s", player.state.value, state.value)
    player.state = state
    player.frame = 0
    player.frame_timer_ms = 0.0
    player.hold_ms = hold_ms
    player.frame_ms = frame_ms


def move_player(player: PlayerEntity, move_left: bool, move_right: bool,
                arena_width: int) -> bool:
    """
    Apply one tick of horizontal movement. Left and right are independent
    clamped adjustments, so both may apply in the same tick.
    Returns True if the player moved.
    """
    moving = False
    if move_left and player.x > 0:
        player.x = max(0.0, player.x - player.speed)
        player.facing = Facing.LEFT
        moving = True
    if move_right and player.x < arena_width - player.width:
        player.x = min(float(arena_width - player.width), player.x + player.speed)
        player.facing = Facing.RIGHT
        moving = True

    if player.state not in STICKY:
        wanted = AnimationState.WALKING if moving else AnimationState.IDLE
        if wanted != player.state:
            set_animation(player, wanted)
    return moving


def advance_animation(player: PlayerEntity, dt_ms: float,
                      frame_counts: Mapping[AnimationState, int]) -> None:
    """Count down any reactive hold, then step the frame timer."""
    if player.hold_ms is not None:
        player.hold_ms -= dt_ms
        if player.hold_ms <= 0:
            set_animation(player, AnimationState.IDLE)
            return

    player.frame_timer_ms += dt_ms
    duration = player.frame_ms if player.frame_ms is not None else FRAME_MS[player.state]
    if player.frame_timer_ms >= duration:
        player.frame_timer_ms = 0.0
        n = frame_counts.get(player.state, 0)
        if n > 0:
            player.frame = (player.frame + 1) % n


# ---------- Falling food ----------
@dataclass
class FallingObject:
    x: float
    y: float
    width: int
    height: int
    hitbox_w: int
    hitbox_h: int
    fall_speed: float
    kind: FoodKind
    points: int
    variant: int = 0

    @property
    def is_good(self) -> bool:
        return self.kind is FoodKind.GOOD

    @property
    def hitbox(self) -> Tuple[float, float, float, float]:
        """Collision rect, centered inside the visual rect."""
        hx = self.x + (self.width - self.hitbox_w) / 2
        hy = self.y + (self.height - self.hitbox_h) / 2
        return (hx, hy, self.hitbox_w, self.hitbox_h)

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)
