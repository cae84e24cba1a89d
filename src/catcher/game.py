# game.py
"""
The simulation context and its tick pipeline. NO UI DEPENDENCIES.

One tick runs, in order: movement, animation/timers, spawn, fall, collisions,
difficulty, terminal check. Everything a tick touches lives on GameState, so
a run is replayable from its seed and the inputs fed to it.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple
import logging
import random

from .config import (
    CFG, Config, GOOD_COLOR, BAD_COLOR,
    EAT_HOLD_MS, HIT_HOLD_MS, DRAMATIC_FRAME_MS, BANNER_DELAY_MS, FINALIZE_DELAY_MS,
)
from .difficulty import level_for_score, difficulty_for_level
from .entities import (
    AnimationState, FallingObject, PlayerEntity,
    new_player, recenter, set_animation, move_player, advance_animation,
)
from .events import (
    GameEvent, ScoreChanged, LivesChanged, LevelUp, ObjectCaught, PlayerHit,
    ScreenShake, DramaticSequenceStarted, DramaticSequenceBannerShown, SessionEnded,
)
from .objects import maybe_spawn, advance_objects

logger = logging.getLogger(__name__)

Rect = Tuple[float, float, float, float]


# ---------- Helpers ----------
def overlaps(a: Rect, b: Rect) -> bool:
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


# ---------- State ----------
@dataclass
class InputState:
    """Normalized input, read once per tick."""
    move_left: bool = False
    move_right: bool = False


@dataclass
class DramaticSequence:
    """Final-hit countdown: banner at BANNER_DELAY_MS, finalize at FINALIZE_DELAY_MS."""
    elapsed_ms: float = 0.0
    banner_shown: bool = False


@dataclass
class GameState:
    cfg: Config
    rng: random.Random
    player: PlayerEntity
    objects: List[FallingObject] = field(default_factory=list)
    score: int = 0
    level: int = 1
    lives: int = 3
    game_speed: float = 0.0
    spawn_rate: float = 0.0
    bad_food_chance: float = 0.0
    frame_counts: Dict[AnimationState, int] = field(default_factory=dict)
    dramatic: Optional[DramaticSequence] = None
    finished: bool = False
    ticks: int = 0
    elapsed_ms: float = 0.0


def new_game_state(cfg: Config = CFG, rng: Optional[random.Random] = None,
                   frame_counts: Optional[Mapping[AnimationState, int]] = None) -> GameState:
    state = GameState(
        cfg=cfg,
        rng=rng if rng is not None else random.Random(cfg.seed),
        player=new_player(cfg.arena_width, cfg.arena_height),
        frame_counts=dict(frame_counts or {}),
    )
    reset_game_state(state)
    return state


def reset_game_state(state: GameState) -> None:
    """Start a fresh session on the same context; the player entity is reused."""
    d = difficulty_for_level(1)
    state.score = 0
    state.level = d.level
    state.lives = state.cfg.start_lives
    state.game_speed = d.game_speed
    state.spawn_rate = d.spawn_rate
    state.bad_food_chance = d.bad_food_chance
    state.objects.clear()
    state.dramatic = None
    state.finished = False
    state.ticks = 0
    state.elapsed_ms = 0.0
    recenter(state.player, state.cfg.arena_width)
    set_animation(state.player, AnimationState.IDLE)


# ---------- Collisions & scoring ----------
def _catch(state: GameState, obj: FallingObject, events: List[GameEvent]) -> None:
    state.score += obj.points
    cx, cy = obj.center
    events.append(ObjectCaught(cx, cy, GOOD_COLOR))
    events.append(ScoreChanged(state.score))
    if state.dramatic is None:
        set_animation(state.player, AnimationState.EATING, hold_ms=EAT_HOLD_MS)


def _hit(state: GameState, obj: FallingObject, events: List[GameEvent]) -> None:
    if state.lives <= 0:
        # Already out of lives (same-tick or post-fatal hit): absorbed.
        return
    state.lives -= 1
    cx, cy = obj.center
    events.append(PlayerHit(cx, cy, BAD_COLOR))
    events.append(LivesChanged(state.lives))

    if state.lives > 0:
        set_animation(state.player, AnimationState.HIT, hold_ms=HIT_HOLD_MS)
        events.append(ScreenShake())
        return

    logger.info("Final hit at score %d (level %d)", state.score, state.level)
    if state.cfg.dramatic_game_over:
        start_dramatic_sequence(state, events)


def start_dramatic_sequence(state: GameState, events: List[GameEvent]) -> None:
    """Hold Hit with no auto-revert until finalize. Entering twice is a no-op."""
    if state.dramatic is not None or state.finished:
        return
    state.dramatic = DramaticSequence()
    set_animation(state.player, AnimationState.HIT, frame_ms=DRAMATIC_FRAME_MS)
    px, py = state.player.center
    events.append(DramaticSequenceStarted(px, py))


def resolve_collisions(state: GameState) -> List[GameEvent]:
    """Test each object's hitbox against the player; consume the ones that overlap."""
    events: List[GameEvent] = []
    player_rect = state.player.rect
    kept = []
    for obj in state.objects:
        if not overlaps(obj.hitbox, player_rect):
            kept.append(obj)
            continue
        if obj.is_good:
            _catch(state, obj, events)
        else:
            _hit(state, obj, events)
    state.objects[:] = kept
    return events


# ---------- Difficulty ----------
def update_difficulty(state: GameState) -> Optional[LevelUp]:
    new_level = level_for_score(state.score)
    if new_level <= state.level:
        return None
    old = state.level
    d = difficulty_for_level(new_level)
    state.level = d.level
    state.game_speed = d.game_speed
    state.spawn_rate = d.spawn_rate
    state.bad_food_chance = d.bad_food_chance
    logger.info("Level up! %d -> %d", old, new_level)
    return LevelUp(new_level)


# ---------- Terminal ----------
def finalize(state: GameState, events: List[GameEvent]) -> None:
    if state.finished:
        return
    state.finished = True
    state.dramatic = None
    logger.info("Session over: score=%d level=%d", state.score, state.level)
    events.append(SessionEnded(state.score, state.level))


def _check_terminal(state: GameState, events: List[GameEvent]) -> None:
    seq = state.dramatic
    if seq is not None:
        if not seq.banner_shown and seq.elapsed_ms >= BANNER_DELAY_MS:
            seq.banner_shown = True
            events.append(DramaticSequenceBannerShown())
        if seq.elapsed_ms >= FINALIZE_DELAY_MS:
            finalize(state, events)
    elif state.lives <= 0:
        finalize(state, events)


# ---------- Tick ----------
def step_game(state: GameState, inputs: InputState, dt_ms: float) -> List[GameEvent]:
    """
    Advance the simulation by one tick of dt_ms.
    Returns the events emitted during the tick; a finished state is left as is.
    """
    if state.finished:
        return []
    events: List[GameEvent] = []
    cfg = state.cfg

    # 1) movement
    move_player(state.player, inputs.move_left, inputs.move_right, cfg.arena_width)

    # 2) animation frame + reactive holds + dramatic clock
    advance_animation(state.player, dt_ms, state.frame_counts)
    if state.dramatic is not None:
        state.dramatic.elapsed_ms += dt_ms

    # 3) spawn
    maybe_spawn(state.objects, state.rng, state.level, state.spawn_rate,
                state.bad_food_chance, cfg.arena_width)

    # 4) fall / prune misses
    advance_objects(state.objects, state.game_speed, cfg.arena_height)

    # 5) collisions
    events.extend(resolve_collisions(state))

    # 6) difficulty
    level_up = update_difficulty(state)
    if level_up is not None:
        events.append(level_up)

    # 7) terminal
    _check_terminal(state, events)

    state.ticks += 1
    state.elapsed_ms += dt_ms
    return events
