# session.py
"""
Session lifecycle: menu / playing / game over / scores. Owns the GameState,
the cosmetic effects and the score store, and is the only thing the
platform loop talks to.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
import logging
import random

from .config import CFG, Config
from .effects import Effects
from .events import GameEvent, SessionEnded
from .game import GameState, InputState, new_game_state, reset_game_state, step_game
from .scores import HighScoreEntry, ScoreStore, is_high_score
from .sprites import SpriteBank

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "gameover"
    SCORES = "scores"


@dataclass
class PhaseChanged(GameEvent):
    old_phase: GamePhase
    new_phase: GamePhase


class Session:
    """
    Usage:
        session = Session(cfg, store)
        session.start()
        while True:
            events = session.update(inputs, dt_ms)
            # render session.game / session.effects
    """

    def __init__(self, cfg: Config = CFG, store: Optional[ScoreStore] = None,
                 sprites: Optional[SpriteBank] = None, rng: Optional[random.Random] = None):
        self.cfg = cfg
        self.store = store if store is not None else ScoreStore(cfg.scores_path)
        self.sprites = sprites if sprites is not None else SpriteBank()
        self.game: GameState = new_game_state(cfg, rng, self.sprites.frame_counts())
        self.effects = Effects(rng=random.Random(cfg.seed))
        self.phase = GamePhase.MENU
        self.ranked: List[HighScoreEntry] = self.store.load_ranked()
        self.awaiting_name = False
        self._pending: List[GameEvent] = []

    # ---------- transitions ----------
    def _set_phase(self, phase: GamePhase) -> None:
        if phase is self.phase:
            return
        logger.debug("phase %s -> %s", self.phase.value, phase.value)
        self._pending.append(PhaseChanged(self.phase, phase))
        self.phase = phase

    def start(self) -> None:
        """Menu/GameOver -> Playing with a freshly reset simulation."""
        reset_game_state(self.game)
        self.game.frame_counts = self.sprites.frame_counts()
        self.effects.clear()
        self.awaiting_name = False
        self._set_phase(GamePhase.PLAYING)

    def show_menu(self) -> None:
        self.effects.clear()
        self.awaiting_name = False
        self._set_phase(GamePhase.MENU)

    def show_scores(self) -> None:
        self.ranked = self.store.load_ranked()
        self._set_phase(GamePhase.SCORES)

    # ---------- per frame ----------
    def update(self, inputs: InputState, dt_ms: float) -> List[GameEvent]:
        """One platform frame. Only advances the simulation while Playing."""
        events, self._pending = self._pending, []
        if self.phase is not GamePhase.PLAYING:
            return events

        tick_events = step_game(self.game, inputs, dt_ms)
        self.effects.handle_all(tick_events)
        self.effects.advance(dt_ms)
        events.extend(tick_events)

        if any(isinstance(e, SessionEnded) for e in tick_events):
            self._finalize()
            events.extend(self._pending)
            self._pending = []
        return events

    def _finalize(self) -> None:
        self.ranked = self.store.load_ranked()
        self.awaiting_name = is_high_score(self.game.score, self.ranked)
        self._set_phase(GamePhase.GAME_OVER)

    # ---------- high scores ----------
    def submit_name(self, name: str) -> List[HighScoreEntry]:
        """Hand the finished session's result to the store (blank name -> Anonymous)."""
        if self.phase is not GamePhase.GAME_OVER or not self.awaiting_name:
            return self.ranked
        entry = HighScoreEntry.create(name, self.game.score, self.game.level)
        self.ranked = self.store.submit_score(entry)
        self.awaiting_name = False
        logger.info("Saved high score %s: %d", entry.name, entry.score)
        return self.ranked

    def skip_name(self) -> None:
        """Leave the prompt without recording anything."""
        if self.awaiting_name:
            logger.info("High score %d not saved", self.game.score)
        self.awaiting_name = False
