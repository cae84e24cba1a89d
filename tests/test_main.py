"""
KEYBOARD NAVIGATION TESTS

Game-over name entry as the frame loop sees it: one key press at a time.
No window is opened; only pygame's key constants are used.
"""
import logging

import pygame
import pytest

from src.catcher.config import Config
from src.catcher.main import handle_key
from src.catcher.scores import ScoreStore
from src.catcher.session import GamePhase, Session
from conftest import ScriptedRng, play_until_over


def game_over(cfg, store):
    session = Session(cfg, store, rng=ScriptedRng(default=0.99))
    session.start()
    session.game.score = 40
    play_until_over(session)
    assert session.awaiting_name
    return session


def type_text(session, name_buf, text):
    for ch in text:
        handle_key(session, name_buf, ord(ch), ch)


class TestNameEntry:
    """Typing, saving and skipping the high-score prompt."""

    def test_enter_saves_typed_name(self, cfg):
        store = ScoreStore(None)
        session = game_over(cfg, store)
        name_buf = []
        type_text(session, name_buf, "bob")
        handle_key(session, name_buf, pygame.K_RETURN)
        assert [e.name for e in store.load_ranked()] == ["bob"]
        assert name_buf == []
        assert not session.awaiting_name

    def test_keys_are_typed_while_prompting(self, cfg):
        session = game_over(cfg, ScoreStore(None))
        name_buf = []
        type_text(session, name_buf, "rm")
        assert name_buf == ["r", "m"]
        assert session.phase is GamePhase.GAME_OVER

    def test_escape_skips_without_saving(self, cfg):
        store = ScoreStore(None)
        session = game_over(cfg, store)
        name_buf = []
        type_text(session, name_buf, "ann")
        handle_key(session, name_buf, pygame.K_ESCAPE)
        assert not session.awaiting_name
        assert name_buf == []
        assert store.load_ranked() == []
        assert session.phase is GamePhase.GAME_OVER

    def test_play_again_after_skipping(self, cfg):
        session = game_over(cfg, ScoreStore(None))
        name_buf = []
        handle_key(session, name_buf, pygame.K_ESCAPE)
        handle_key(session, name_buf, pygame.K_r, "r")
        assert session.phase is GamePhase.PLAYING
        assert session.game.score == 0

    def test_menu_after_skipping(self, cfg):
        session = game_over(cfg, ScoreStore(None))
        name_buf = []
        handle_key(session, name_buf, pygame.K_ESCAPE)
        handle_key(session, name_buf, pygame.K_m, "m")
        assert session.phase is GamePhase.MENU


class TestUnwritableStore:
    """A score file that cannot be written does not end the game."""

    @pytest.fixture
    def blocked_path(self, tmp_path):
        blocker = tmp_path / "notadir"
        blocker.write_text("")
        return str(blocker / "hs.json")

    def test_save_failure_drops_prompt_and_keeps_running(self, blocked_path, caplog):
        cfg = Config(seed=0, scores_path=blocked_path)
        session = game_over(cfg, ScoreStore(blocked_path))
        name_buf = []
        type_text(session, name_buf, "bob")
        with caplog.at_level(logging.WARNING, logger="src.catcher.main"):
            assert handle_key(session, name_buf, pygame.K_RETURN)
        assert not session.awaiting_name
        assert name_buf == []
        assert "Could not save high score" in caplog.text

        handle_key(session, name_buf, pygame.K_r, "r")
        assert session.phase is GamePhase.PLAYING

    def test_store_itself_still_raises(self, blocked_path, cfg):
        session = game_over(cfg, ScoreStore(blocked_path))
        with pytest.raises(OSError):
            session.submit_name("bob")
