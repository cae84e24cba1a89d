"""
Difficulty curve. Every parameter is derived from the level, and the level
from the score, so nothing drifts from repeated accumulation.
"""
from dataclasses import dataclass

from .config import (
    POINTS_PER_LEVEL, GOOD_BASE_POINTS, GOOD_POINTS_PER_LEVEL,
    START_GAME_SPEED, GAME_SPEED_STEP,
    START_SPAWN_RATE, SPAWN_RATE_STEP,
    START_BAD_CHANCE, BAD_CHANCE_STEP, MAX_BAD_CHANCE,
)


def level_for_score(score: int) -> int:
    return score // POINTS_PER_LEVEL + 1


def game_speed(level: int) -> float:
    return START_GAME_SPEED + (level - 1) * GAME_SPEED_STEP


def spawn_rate(level: int) -> float:
    return START_SPAWN_RATE + (level - 1) * SPAWN_RATE_STEP


def bad_food_chance(level: int) -> float:
    return min(MAX_BAD_CHANCE, START_BAD_CHANCE + (level - 1) * BAD_CHANCE_STEP)


def good_points(level: int) -> int:
    return GOOD_BASE_POINTS + level * GOOD_POINTS_PER_LEVEL


def level_progress(score: int) -> float:
    """Fraction of the way to the next level, in [0, 1)."""
    return (score % POINTS_PER_LEVEL) / POINTS_PER_LEVEL


@dataclass(frozen=True)
class Difficulty:
    level: int
    game_speed: float
    spawn_rate: float
    bad_food_chance: float


def difficulty_for_level(level: int) -> Difficulty:
    return Difficulty(
        level=level,
        game_speed=game_speed(level),
        spawn_rate=spawn_rate(level),
        bad_food_chance=bad_food_chance(level),
    )
