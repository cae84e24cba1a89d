"""
SESSION LIFECYCLE TESTS

Menu -> Playing -> GameOver -> (name entry) -> Playing / Menu, driven the
way the platform loop drives it: one update per frame.
"""
import pytest

from src.catcher.config import Config
from src.catcher.entities import AnimationState, FoodKind
from src.catcher.events import SessionEnded, DramaticSequenceStarted
from src.catcher.game import InputState
from src.catcher.scores import HighScoreEntry, ScoreStore
from src.catcher.session import GamePhase, PhaseChanged, Session
from src.catcher.sprites import SpriteBank
from conftest import ScriptedRng, food_on_player, play_until_over

IDLE = InputState()


@pytest.fixture
def store():
    return ScoreStore(None)


@pytest.fixture
def session(cfg, store):
    return Session(cfg, store, rng=ScriptedRng(default=0.99))


class TestNavigation:
    """Screens and the playing-only update guard."""

    def test_starts_in_menu(self, session):
        assert session.phase is GamePhase.MENU

    def test_menu_does_not_tick(self, session):
        session.update(InputState(move_left=True), 16)
        assert session.game.ticks == 0

    def test_start_plays(self, session):
        session.start()
        events = session.update(IDLE, 16)
        assert session.phase is GamePhase.PLAYING
        assert PhaseChanged(GamePhase.MENU, GamePhase.PLAYING) in events
        assert session.game.ticks == 1

    def test_scores_and_back(self, session):
        session.show_scores()
        assert session.phase is GamePhase.SCORES
        session.show_menu()
        events = session.update(IDLE, 16)
        assert [e.new_phase for e in events] == [GamePhase.SCORES, GamePhase.MENU]

    def test_leaving_play_stops_the_loop(self, session):
        session.start()
        session.update(IDLE, 16)
        session.show_menu()
        session.update(IDLE, 16)
        assert session.game.ticks == 1

    def test_sprite_frame_counts_reach_the_simulation(self, cfg, store):
        sprites = SpriteBank()
        sprites.register(AnimationState.IDLE, ["a", "b"])
        s = Session(cfg, store, sprites, rng=ScriptedRng(default=0.99))
        s.start()
        assert s.game.frame_counts[AnimationState.IDLE] == 2


class TestGameOver:
    """Finalizing a session and recording the score."""

    def test_session_ends_after_dramatic_sequence(self, session):
        session.start()
        events = play_until_over(session)
        assert len([e for e in events if isinstance(e, DramaticSequenceStarted)]) == 1
        assert [e for e in events if isinstance(e, SessionEnded)] == [SessionEnded(0, 1)]
        assert PhaseChanged(GamePhase.PLAYING, GamePhase.GAME_OVER) in events
        assert session.phase is GamePhase.GAME_OVER

    def test_no_updates_after_game_over(self, session):
        session.start()
        play_until_over(session)
        ticks = session.game.ticks
        session.update(IDLE, 16)
        assert session.game.ticks == ticks

    def test_empty_list_asks_for_name(self, session, store):
        session.start()
        session.game.score = 80
        play_until_over(session)
        assert session.awaiting_name
        ranked = session.submit_name("   ")
        assert ranked[0].name == "Anonymous"
        assert ranked[0].score == 80
        assert store.load_ranked() == ranked
        assert not session.awaiting_name

    def test_skipping_the_name_saves_nothing(self, session, store):
        session.start()
        session.game.score = 80
        play_until_over(session)
        session.skip_name()
        assert not session.awaiting_name
        assert store.load_ranked() == []
        assert session.submit_name("late") == []
        session.start()
        assert session.phase is GamePhase.PLAYING

    def test_low_score_on_full_list_is_not_asked(self, cfg, store):
        for i in range(10):
            store.submit_score(HighScoreEntry(f"p{i}", 1000 + i, 5, "2026-01-01"))
        session = Session(cfg, store, rng=ScriptedRng(default=0.99))
        session.start()
        play_until_over(session)
        assert not session.awaiting_name
        assert session.submit_name("late") == store.load_ranked()
        assert len(store.load_ranked()) == 10

    def test_restart_resets_everything(self, session):
        session.start()
        session.game.score = 300
        play_until_over(session)
        session.start()
        assert session.phase is GamePhase.PLAYING
        assert (session.game.score, session.game.level, session.game.lives) == (0, 1, 3)
        assert session.game.objects == []
        assert not session.game.finished
        assert not session.awaiting_name

    def test_without_drama_ends_on_the_fatal_tick(self, store):
        cfg = Config(seed=0, scores_path=None, dramatic_game_over=False)
        session = Session(cfg, store, rng=ScriptedRng(default=0.99))
        session.start()
        session.game.lives = 1
        session.game.objects.append(food_on_player(session.game, FoodKind.BAD))
        session.update(IDLE, 16)
        assert session.phase is GamePhase.GAME_OVER
