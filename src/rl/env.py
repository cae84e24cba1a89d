# src/rl/env.py
from __future__ import annotations
from dataclasses import dataclass
import random

import numpy as np  # type: ignore
import pygame       # type: ignore

from src.catcher.config import Config, TICK_MS
from src.catcher.effects import Effects
from src.catcher.game import GameState, InputState, new_game_state, step_game
from src.catcher.render import draw_game
from src.catcher.sprites import SpriteBank

# -----------------------------------------------------------------------------
# Actions: integers -> (move_left, move_right)
# -----------------------------------------------------------------------------
ACTIONS = {
    0: InputState(False, False),   # stay
    1: InputState(True, False),    # left
    2: InputState(False, True),    # right
}

N_NEAREST = 3   # falling objects described in the observation

# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def _obs(state: GameState) -> np.ndarray:
    """
    Fixed-length observation, no visuals.

    Features:
      0:            px_n   - player left edge normalized in [0, 1]
      1 + 3k:       dx_n   - k-th nearest object's center x minus player center x, / arena width
      2 + 3k:       y_n    - k-th nearest object's top y / arena height (may be < 0 while entering)
      3 + 3k:       bad    - 1.0 if that object is bad food, else 0.0
      1 + 3N:       lives_n - remaining lives / starting lives
      2 + 3N:       level   - current level (raw)

    "Nearest" means lowest on screen (largest y). Missing slots are zeros
    with y_n = -1.
    """
    cfg = state.cfg
    p = state.player
    px_c, _ = p.center
    out = [p.x / max(cfg.arena_width - p.width, 1)]

    nearest = sorted(state.objects, key=lambda o: o.y, reverse=True)[:N_NEAREST]
    for k in range(N_NEAREST):
        if k < len(nearest):
            obj = nearest[k]
            ox, _ = obj.center
            out += [(ox - px_c) / cfg.arena_width, obj.y / cfg.arena_height, 0.0 if obj.is_good else 1.0]
        else:
            out += [0.0, -1.0, 0.0]

    out += [max(state.lives, 0) / cfg.start_lives, float(state.level)]
    return np.array(out, dtype=np.float32)

# -----------------------------------------------------------------------------
# RL Environment
# -----------------------------------------------------------------------------
@dataclass
class CatcherRLEnv:
    """
    Minimal Gym-like environment over the falling-food simulation.
    One step = one 60 Hz tick. The dramatic game-over is off, so an
    episode terminates on the tick the last life is lost.

    Rewards:
      + score gained this tick / score_scale
      + hit_reward per life lost
    """
    score_scale: float = 100.0
    hit_reward: float = -1.0
    seed_value: int = 0

    # enable/disable pygame rendering
    render_enabled: bool = False

    def __post_init__(self):
        self.cfg = Config(seed=self.seed_value, dramatic_game_over=False, scores_path=None)
        self.rng = random.Random(self.seed_value)
        np.random.seed(self.seed_value)
        self.state: GameState | None = None

        # --- Rendering state (pygame) ---
        self.screen = None
        self.clock = None
        self.font = None
        self.sprites = SpriteBank()
        self.effects = Effects(rng=random.Random(self.seed_value))

        if self.render_enabled:
            pygame.init()
            self.screen = pygame.display.set_mode((self.cfg.arena_width, self.cfg.arena_height))
            pygame.display.set_caption("Falling Food autoplay")
            self.font = pygame.font.SysFont(None, 24)
            self.clock = pygame.time.Clock()

    # Gym-like API -------------------------------------------------------------
    def reset(self, seed: int | None = None) -> np.ndarray:
        """Start a new episode. Returns the initial observation."""
        if seed is not None:
            self.rng.seed(seed)
            np.random.seed(seed)
        self.state = new_game_state(self.cfg, self.rng, self.sprites.frame_counts())
        self.effects.clear()
        return _obs(self.state)

    def step(self, action: int):
        """
        Apply an action (0..2), advance exactly one tick, and return:
          (obs, reward, terminated, info)
        """
        if self.state is None:
            raise RuntimeError("Call reset() first.")
        if action not in ACTIONS:
            raise ValueError(f"Invalid action {action}")

        score_before = self.state.score
        lives_before = self.state.lives

        events = step_game(self.state, ACTIONS[action], TICK_MS)
        if self.render_enabled:
            self.effects.handle_all(events)
            self.effects.advance(TICK_MS)

        lost = max(lives_before - max(self.state.lives, 0), 0)
        reward = (self.state.score - score_before) / self.score_scale + self.hit_reward * lost
        terminated = self.state.finished

        info = {"score": self.state.score, "level": self.state.level, "lives": self.state.lives}
        return _obs(self.state), reward, terminated, info

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def render(self, mode: str = "human") -> None:
        """Draw the current state with the game's own renderer (render_enabled only)."""
        if not self.render_enabled or self.state is None or self.screen is None:
            return

        # Handle window close events
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                raise SystemExit

        draw_game(self.screen, self.font, self.state, self.sprites, self.effects)
        pygame.display.flip()

        if self.clock is not None:
            self.clock.tick(60)

    def close(self) -> None:
        if self.render_enabled:
            pygame.quit()

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        return (1 + 3 * N_NEAREST + 2,)
