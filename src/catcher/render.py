# render.py
from typing import List, Optional
import logging
import os

import pygame  # type: ignore

from .config import (
    BG, GOOD_COLOR, BAD_COLOR, PLAYER_COLOR, PLAYER_DARK, PROGRESS,
    GOLD, BANNER_RED, HEART_EMPTY, TEXT,
)
from .difficulty import level_progress
from .effects import Effects, level_up_curve, game_over_curve
from .entities import AnimationState, Facing, FoodKind, PlayerEntity
from .game import GameState
from .scores import HighScoreEntry
from .sprites import SpriteBank

logger = logging.getLogger(__name__)

SPRITE_DIRS = {
    AnimationState.IDLE: "idle",
    AnimationState.WALKING: "walking",
    AnimationState.EATING: "eat",
    AnimationState.HIT: "hit",
    FoodKind.GOOD: "goodfood",
    FoodKind.BAD: "badfood",
}


# ---------- Assets ----------
def load_sprite_bank(root: Optional[str]) -> SpriteBank:
    """
    Load <root>/<dir>/*.png for each sprite key, sorted by file name.
    Missing or broken images just leave that key not ready.
    """
    bank = SpriteBank()
    if not root:
        return bank
    for key, sub in SPRITE_DIRS.items():
        folder = os.path.join(root, sub)
        if not os.path.isdir(folder):
            continue
        frames = []
        for name in sorted(os.listdir(folder)):
            if not name.lower().endswith(".png"):
                continue
            try:
                frames.append(pygame.image.load(os.path.join(folder, name)))
            except pygame.error as exc:
                logger.warning("Skipping sprite %s/%s: %s", sub, name, exc)
        if frames:
            bank.register(key, frames)
    return bank


# ---------- Draw ----------
def draw_player(screen: pygame.Surface, player: PlayerEntity, sprites: SpriteBank) -> None:
    sprite = sprites.player_frame(player.state, player.frame)
    if sprite is not None:
        img = pygame.transform.smoothscale(sprite, (player.width, player.height))
        if player.facing is Facing.LEFT:
            img = pygame.transform.flip(img, True, False)
        screen.blit(img, (player.x, player.y))
        return

    # flat-color stand-in: body block, head, torso
    x, y, w, h = player.rect
    pygame.draw.rect(screen, PLAYER_COLOR, pygame.Rect(x + 10, y + 10, w - 20, h - 20))
    pygame.draw.circle(screen, PLAYER_DARK, (int(x + w / 2), int(y + 30)), 20)
    pygame.draw.rect(screen, PLAYER_DARK, pygame.Rect(x + w / 2 - 15, y + 50, 30, 60))


def draw_objects(screen: pygame.Surface, state: GameState, sprites: SpriteBank) -> None:
    for obj in state.objects:
        sprite = sprites.food_frame(obj.kind, obj.variant)
        if sprite is not None:
            screen.blit(pygame.transform.smoothscale(sprite, (obj.width, obj.height)), (obj.x, obj.y))
        else:
            color = GOOD_COLOR if obj.is_good else BAD_COLOR
            pygame.draw.rect(screen, color, pygame.Rect(obj.x, obj.y, obj.width, obj.height))


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, state: GameState) -> None:
    bar = pygame.Rect(10, 10, 280, 30)
    pygame.draw.rect(screen, (240, 240, 240), bar, border_radius=15)
    filled = int(level_progress(state.score) * bar.width)
    if filled > 0:
        pygame.draw.rect(screen, PROGRESS, pygame.Rect(bar.x, bar.y, filled, bar.height), border_radius=15)
    pygame.draw.rect(screen, (180, 180, 180), bar, width=2, border_radius=15)
    screen.blit(font.render("Level Progress", True, TEXT), (bar.x, bar.bottom + 6))

    txt = font.render(f"Score: {state.score}   Level: {state.level}", True, TEXT)
    screen.blit(txt, (bar.x, bar.bottom + 28))

    # hearts, top right
    width = screen.get_width()
    lives = max(0, state.lives)
    for i in range(state.cfg.start_lives):
        color = BAD_COLOR if i < lives else HEART_EMPTY
        pygame.draw.circle(screen, color, (width - 130 + i * 40, 32), 15)


def _draw_banner(screen: pygame.Surface, lines, scale: float, opacity: float) -> None:
    cx, cy = screen.get_width() // 2, screen.get_height() // 2
    for text, size, color, dy in lines:
        font = pygame.font.SysFont(None, max(1, int(size * scale)))
        surf = font.render(text, True, color)
        surf.set_alpha(int(255 * opacity))
        screen.blit(surf, surf.get_rect(center=(cx, cy + dy)))


def draw_effects(screen: pygame.Surface, effects: Effects, level: int) -> None:
    for p in effects.particles:
        dot = pygame.Surface((3, 3), pygame.SRCALPHA)
        dot.fill((*p.color, int(255 * p.alpha)))
        screen.blit(dot, (p.x, p.y))

    if effects.level_up is not None:
        scale, opacity = level_up_curve(effects.level_up.progress)
        _draw_banner(screen, [
            ("LEVEL UP!", 60, GOLD, -40),
            (str(effects.level_up.level or level), 100, PROGRESS, 50),
        ], scale, opacity)

    if effects.game_over is not None:
        scale, opacity = game_over_curve(effects.game_over.progress)
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, int(153 * opacity)))
        screen.blit(overlay, (0, 0))
        _draw_banner(screen, [("GAME OVER", 80, BANNER_RED, 0)], scale, opacity)


def _apply_camera(screen: pygame.Surface, frame: pygame.Surface, effects: Effects) -> None:
    """Blit the finished frame with zoom (around the player) and shake applied."""
    scale = effects.zoom_scale
    if scale > 1.0 and effects.zoom is not None:
        w, h = frame.get_size()
        cw, ch = int(w / scale), int(h / scale)
        ox, oy = effects.zoom.origin
        left = min(max(0, int(ox - cw / 2)), w - cw)
        top = min(max(0, int(oy - ch / 2)), h - ch)
        frame = pygame.transform.smoothscale(frame.subsurface(pygame.Rect(left, top, cw, ch)), (w, h))
    dx, dy = effects.shake_offset
    screen.fill(BG)
    screen.blit(frame, (int(dx), int(dy)))


def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState,
              sprites: SpriteBank, effects: Effects) -> None:
    frame = pygame.Surface(screen.get_size())
    frame.fill(BG)
    draw_player(frame, state.player, sprites)
    draw_objects(frame, state, sprites)
    draw_hud(frame, font, state)
    draw_effects(frame, effects, state.level)
    _apply_camera(screen, frame, effects)


def draw_menu(screen: pygame.Surface, font: pygame.font.Font) -> None:
    screen.fill(BG)
    cx, cy = screen.get_width() // 2, screen.get_height() // 2
    lines = ["FALLING FOOD", "", "SPACE - play", "H - high scores", "ESC - quit"]
    for i, line in enumerate(lines):
        surf = font.render(line, True, TEXT)
        screen.blit(surf, surf.get_rect(center=(cx, cy - 60 + i * 28)))


def draw_scores(screen: pygame.Surface, font: pygame.font.Font,
                ranked: List[HighScoreEntry]) -> None:
    screen.fill(BG)
    cx = screen.get_width() // 2
    title = font.render("HIGH SCORES", True, TEXT)
    screen.blit(title, title.get_rect(center=(cx, 60)))
    if not ranked:
        msg = font.render("No high scores yet. Be the first!", True, HEART_EMPTY)
        screen.blit(msg, msg.get_rect(center=(cx, 120)))
    for i, e in enumerate(ranked):
        row = font.render(f"#{i + 1}  {e.name:<16} {e.score:>6}  Level {e.level}  {e.date}", True, TEXT)
        screen.blit(row, row.get_rect(center=(cx, 110 + i * 30)))
    hint = font.render("M - menu", True, HEART_EMPTY)
    screen.blit(hint, hint.get_rect(center=(cx, screen.get_height() - 40)))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int, level: int,
                   awaiting_name: bool, name: str) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))
    screen.blit(overlay, (0, 0))

    cx, cy = screen.get_width() // 2, screen.get_height() // 2
    lines = ["GAME OVER", f"Score: {score}   Level: {level}"]
    if awaiting_name:
        lines += ["New high score! Type your name, ENTER to save, ESC to skip:", name + "_"]
    lines += ["", "R - play again   M - menu"]
    for i, line in enumerate(lines):
        surf = font.render(line, True, (240, 240, 250))
        screen.blit(surf, surf.get_rect(center=(cx, cy - 60 + i * 30)))
