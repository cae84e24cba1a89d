# main.py
import argparse
import logging

import pygame  # type: ignore

from .config import Config, FPS
from .game import InputState
from .render import load_sprite_bank, draw_game, draw_menu, draw_scores, draw_game_over
from .scores import ScoreStore
from .session import GamePhase, Session

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
MAX_NAME_LEN = 20

logger = logging.getLogger(__name__)


def read_inputs(screen: pygame.Surface) -> InputState:
    """Keyboard arrows / A-D, or a held mouse button on either half of the window."""
    keys = pygame.key.get_pressed()
    left = any(keys[k] for k in LEFT_KEYS)
    right = any(keys[k] for k in RIGHT_KEYS)
    if pygame.mouse.get_pressed()[0]:
        mx, _ = pygame.mouse.get_pos()
        if mx < screen.get_width() // 2:
            left = True
        else:
            right = True
    return InputState(move_left=left, move_right=right)


def submit_name(session: Session, name_buf: list) -> None:
    """Save the typed name. A store that cannot be written drops the prompt."""
    try:
        session.submit_name("".join(name_buf))
    except OSError as e:
        logger.warning("Could not save high score: %s", e)
        session.skip_name()
    name_buf.clear()


def handle_key(session: Session, name_buf: list, key: int, unicode: str = "") -> bool:
    """One key press for the current screen. Return False to quit."""
    if session.phase is GamePhase.MENU:
        if key == pygame.K_SPACE:
            session.start()
        elif key == pygame.K_h:
            session.show_scores()
        elif key == pygame.K_ESCAPE:
            return False
    elif session.phase is GamePhase.SCORES:
        if key in (pygame.K_m, pygame.K_ESCAPE):
            session.show_menu()
    elif session.phase is GamePhase.PLAYING:
        if key == pygame.K_ESCAPE:
            session.show_menu()
    elif session.phase is GamePhase.GAME_OVER:
        if session.awaiting_name:
            if key == pygame.K_RETURN:
                submit_name(session, name_buf)
            elif key == pygame.K_ESCAPE:
                session.skip_name()
                name_buf.clear()
            elif key == pygame.K_BACKSPACE:
                if name_buf:
                    name_buf.pop()
            elif unicode and unicode.isprintable() and len(name_buf) < MAX_NAME_LEN:
                name_buf.append(unicode)
        elif key == pygame.K_r:
            session.start()
        elif key in (pygame.K_m, pygame.K_ESCAPE):
            session.show_menu()
    return True


def handle_events(session: Session, name_buf: list) -> bool:
    """Screen navigation and name entry. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and not handle_key(session, name_buf, event.key, event.unicode):
            return False
    return True


def main():
    parser = argparse.ArgumentParser(description="Catch the good food, dodge the bad.")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--assets", type=str, default=None,
                        help="folder with idle/ walking/ eat/ hit/ goodfood/ badfood/ PNG frames")
    parser.add_argument("--scores", type=str, default="highscores.json")
    parser.add_argument("--no-drama", action="store_true",
                        help="end the session as soon as the last life is lost")
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    cfg = Config(seed=args.seed, scores_path=args.scores,
                 dramatic_game_over=not args.no_drama)

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode((cfg.arena_width, cfg.arena_height))
    pygame.display.set_caption("Falling Food")
    clock = pygame.time.Clock()

    sprites = load_sprite_bank(args.assets)
    session = Session(cfg, ScoreStore(cfg.scores_path), sprites)
    name_buf: list = []

    running = True
    while running:
        dt = clock.tick(FPS)

        # 1) input
        running = handle_events(session, name_buf)
        if not running:
            break

        # 2) update (no-op unless playing)
        session.update(read_inputs(screen), dt)

        # 3) render
        if session.phase is GamePhase.MENU:
            draw_menu(screen, font)
        elif session.phase is GamePhase.SCORES:
            draw_scores(screen, font, session.ranked)
        else:
            draw_game(screen, font, session.game, sprites, session.effects)
            if session.phase is GamePhase.GAME_OVER:
                draw_game_over(screen, font, session.game.score, session.game.level,
                               session.awaiting_name, "".join(name_buf))
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
