# effects.py
"""
Cosmetic effects driven by game events. Each record carries its own
remaining lifetime and is advanced once per tick with the main loop;
reset clears the lot.
"""
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple
import math
import random

from .events import (
    GameEvent, ObjectCaught, PlayerHit, ScreenShake, LevelUp,
    DramaticSequenceStarted, DramaticSequenceBannerShown, SessionEnded,
)

PARTICLES_PER_BURST = 8
PARTICLE_LIFE = 30          # ticks
PARTICLE_SPREAD = 10.0      # velocity range per axis, centered on 0

SHAKE_COUNT = 10
SHAKE_INTENSITY = 10.0
SHAKE_DECAY = 0.8
SHAKE_STEP_MS = 50

ZOOM_MAX = 2.5
ZOOM_STEP = 0.02
ZOOM_STEP_MS = 50

LEVEL_UP_MS = 1000
GAME_OVER_BANNER_MS = 2500


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    color: Tuple[int, int, int]
    life: int = PARTICLE_LIFE

    @property
    def alpha(self) -> float:
        return self.life / PARTICLE_LIFE


@dataclass
class Shake:
    remaining: int = SHAKE_COUNT
    intensity: float = SHAKE_INTENSITY
    timer_ms: float = 0.0
    offset: Tuple[float, float] = (0.0, 0.0)


@dataclass
class Zoom:
    origin: Tuple[float, float]
    scale: float = 1.0
    timer_ms: float = 0.0


@dataclass
class Banner:
    duration_ms: float
    elapsed_ms: float = 0.0
    level: Optional[int] = None

    @property
    def progress(self) -> float:
        return min(self.elapsed_ms / self.duration_ms, 1.0)

    @property
    def done(self) -> bool:
        return self.elapsed_ms >= self.duration_ms


def level_up_curve(progress: float) -> Tuple[float, float]:
    """(scale, opacity): grow, hold, then shrink a little while fading."""
    if progress < 0.3:
        return progress / 0.3, progress / 0.3
    if progress < 0.8:
        return 1.0, 1.0
    fade = (progress - 0.8) / 0.2
    return 1 - fade * 0.2, 1 - fade


def game_over_curve(progress: float) -> Tuple[float, float]:
    """(scale, opacity): grow from 0.3, then pulse around 1."""
    if progress < 0.2:
        return 0.3 + (progress / 0.2) * 0.7, progress / 0.2
    return 1 + math.sin((progress - 0.2) * 20) * 0.05, 1.0


@dataclass
class Effects:
    rng: random.Random = field(default_factory=random.Random)
    particles: List[Particle] = field(default_factory=list)
    shake: Optional[Shake] = None
    zoom: Optional[Zoom] = None
    level_up: Optional[Banner] = None
    game_over: Optional[Banner] = None

    def clear(self) -> None:
        self.particles.clear()
        self.shake = None
        self.zoom = None
        self.level_up = None
        self.game_over = None

    def burst(self, x: float, y: float, color: Tuple[int, int, int]) -> None:
        for _ in range(PARTICLES_PER_BURST):
            self.particles.append(Particle(
                x=x, y=y,
                vx=(self.rng.random() - 0.5) * PARTICLE_SPREAD,
                vy=(self.rng.random() - 0.5) * PARTICLE_SPREAD,
                color=color,
            ))

    def handle(self, event: GameEvent) -> None:
        if isinstance(event, (ObjectCaught, PlayerHit)):
            self.burst(event.x, event.y, event.color)
        elif isinstance(event, ScreenShake):
            self.shake = Shake()
        elif isinstance(event, LevelUp):
            self.level_up = Banner(LEVEL_UP_MS, level=event.level)
        elif isinstance(event, DramaticSequenceStarted):
            self.zoom = Zoom(origin=(event.x, event.y))
        elif isinstance(event, DramaticSequenceBannerShown):
            self.game_over = Banner(GAME_OVER_BANNER_MS)
        elif isinstance(event, SessionEnded):
            # the game-over screen takes over from here
            self.clear()

    def handle_all(self, events: Iterable[GameEvent]) -> None:
        for event in events:
            self.handle(event)

    def advance(self, dt_ms: float) -> None:
        alive = []
        for p in self.particles:
            p.x += p.vx
            p.y += p.vy
            p.life -= 1
            if p.life > 0:
                alive.append(p)
        self.particles = alive

        if self.shake is not None:
            self._advance_shake(dt_ms)

        if self.zoom is not None:
            z = self.zoom
            z.timer_ms += dt_ms
            while z.timer_ms >= ZOOM_STEP_MS and z.scale < ZOOM_MAX:
                z.timer_ms -= ZOOM_STEP_MS
                z.scale = min(ZOOM_MAX, z.scale + ZOOM_STEP)

        if self.level_up is not None:
            self.level_up.elapsed_ms += dt_ms
            if self.level_up.done:
                self.level_up = None

        # the game-over banner keeps pulsing until the session ends
        if self.game_over is not None:
            self.game_over.elapsed_ms += dt_ms

    def _advance_shake(self, dt_ms: float) -> None:
        s = self.shake
        s.timer_ms += dt_ms
        while s.timer_ms >= SHAKE_STEP_MS:
            s.timer_ms -= SHAKE_STEP_MS
            if s.remaining <= 0:
                self.shake = None
                return
            s.offset = (
                (self.rng.random() - 0.5) * s.intensity,
                (self.rng.random() - 0.5) * s.intensity,
            )
            s.intensity *= SHAKE_DECAY
            s.remaining -= 1

    @property
    def shake_offset(self) -> Tuple[float, float]:
        return self.shake.offset if self.shake is not None else (0.0, 0.0)

    @property
    def zoom_scale(self) -> float:
        return self.zoom.scale if self.zoom is not None else 1.0
