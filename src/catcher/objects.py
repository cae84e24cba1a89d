# objects.py
from typing import List, Optional
import random

from .config import (
    FOOD_W, FOOD_H, GOOD_HITBOX, BAD_HITBOX, FOOD_VARIANTS,
    BASE_FALL_SPEED, FALL_SPEED_PER_LEVEL, FALL_SPEED_JITTER,
)
from .difficulty import good_points
from .entities import FallingObject, FoodKind


def spawn_object(rng: random.Random, level: int, bad_chance: float,
                 arena_width: int) -> FallingObject:
    """Build one object just above the arena. Draw order: kind, x, speed, variant."""
    kind = FoodKind.GOOD if rng.random() >= bad_chance else FoodKind.BAD
    good = kind is FoodKind.GOOD
    hitbox = GOOD_HITBOX if good else BAD_HITBOX
    return FallingObject(
        x=rng.random() * (arena_width - FOOD_W),
        y=-FOOD_H,
        width=FOOD_W,
        height=FOOD_H,
        hitbox_w=hitbox,
        hitbox_h=hitbox,
        fall_speed=BASE_FALL_SPEED + level * FALL_SPEED_PER_LEVEL + rng.random() * FALL_SPEED_JITTER,
        kind=kind,
        points=good_points(level) if good else 0,
        variant=int(rng.random() * FOOD_VARIANTS),
    )


def maybe_spawn(objects: List[FallingObject], rng: random.Random, level: int,
                rate: float, bad_chance: float, arena_width: int) -> Optional[FallingObject]:
    """One spawn roll per tick; appends and returns the new object on success."""
    if rng.random() >= rate:
        return None
    obj = spawn_object(rng, level, bad_chance, arena_width)
    objects.append(obj)
    return obj


def advance_objects(objects: List[FallingObject], speed_mult: float,
                    arena_height: int) -> int:
    """
    Move every object down by fall_speed * speed_mult and drop the ones
    past the bottom edge. A miss costs nothing. Returns how many were dropped.
    """
    kept = []
    for obj in objects:
        obj.y += obj.fall_speed * speed_mult
        if obj.y <= arena_height:
            kept.append(obj)
    dropped = len(objects) - len(kept)
    objects[:] = kept
    return dropped
