"""
Events the simulation emits for the presentation layer (HUD, effects,
screens). NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass
class GameEvent:
    """Something happened during a tick that a UI may react to."""
    pass


@dataclass
class ScoreChanged(GameEvent):
    score: int


@dataclass
class LivesChanged(GameEvent):
    lives: int


@dataclass
class LevelUp(GameEvent):
    level: int


@dataclass
class ObjectCaught(GameEvent):
    """Good food caught; x, y is the object's center."""
    x: float
    y: float
    color: Tuple[int, int, int]


@dataclass
class PlayerHit(GameEvent):
    """Bad food hit the player; x, y is the object's center."""
    x: float
    y: float
    color: Tuple[int, int, int]


@dataclass
class ScreenShake(GameEvent):
    pass


@dataclass
class DramaticSequenceStarted(GameEvent):
    """Final life lost; x, y is the player's center (zoom origin)."""
    x: float
    y: float


@dataclass
class DramaticSequenceBannerShown(GameEvent):
    pass


@dataclass
class SessionEnded(GameEvent):
    final_score: int
    final_level: int
