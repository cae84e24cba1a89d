"""
Shared fixtures. NO DISPLAY NEEDED - the simulation never touches pygame.
"""
import pytest

from src.catcher.config import Config
from src.catcher.entities import FallingObject, FoodKind
from src.catcher.game import InputState, new_game_state
from src.catcher.session import GamePhase


class ScriptedRng:
    """Stand-in for random.Random: replays fixed draws, then a default."""

    def __init__(self, values=(), default=None):
        self.values = list(values)
        self.default = default

    def random(self):
        if self.values:
            return self.values.pop(0)
        if self.default is None:
            raise AssertionError("unexpected random draw")
        return self.default


def make_food(kind, x, y, points=None, fall_speed=0.0):
    good = kind is FoodKind.GOOD
    return FallingObject(
        x=x, y=y, width=150, height=150,
        hitbox_w=150 if good else 100,
        hitbox_h=150 if good else 100,
        fall_speed=fall_speed,
        kind=kind,
        points=(15 if good else 0) if points is None else points,
    )


def food_on_player(state, kind, points=None):
    """An object sitting right on top of the player, so it collides this tick."""
    p = state.player
    return make_food(kind, p.x, p.y, points)


@pytest.fixture
def cfg():
    return Config(seed=0, scores_path=None)


@pytest.fixture
def quiet_rng():
    # 0.99 never passes a spawn roll
    return ScriptedRng(default=0.99)


@pytest.fixture
def state(cfg, quiet_rng):
    return new_game_state(cfg, quiet_rng)


def play_until_over(session, dt=500, max_frames=100):
    """Put bad food on the player until the session ends."""
    events = []
    for _ in range(max_frames):
        if session.game.lives > 0:
            session.game.objects.append(food_on_player(session.game, FoodKind.BAD))
        events.extend(session.update(InputState(), dt))
        if session.phase is GamePhase.GAME_OVER:
            return events
    raise AssertionError("session never ended")
