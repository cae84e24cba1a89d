"""
COSMETIC EFFECT TESTS

Effect records live and die with the tick; nothing here draws.
"""
import random

import pytest

from src.catcher.effects import (
    Effects, level_up_curve, game_over_curve, PARTICLE_LIFE,
)
from src.catcher.events import (
    ObjectCaught, PlayerHit, ScreenShake, LevelUp,
    DramaticSequenceStarted, DramaticSequenceBannerShown, SessionEnded,
)


@pytest.fixture
def fx():
    return Effects(rng=random.Random(3))


class TestCurves:
    """Banner scale/opacity over their lifetime."""

    @pytest.mark.parametrize("progress,expected", [
        (0.0, (0.0, 0.0)), (0.15, (0.5, 0.5)), (0.5, (1.0, 1.0)), (0.9, (0.9, 0.5)), (1.0, (0.8, 0.0)),
    ])
    def test_level_up(self, progress, expected):
        assert level_up_curve(progress) == pytest.approx(expected)

    @pytest.mark.parametrize("progress,expected", [
        (0.0, (0.3, 0.0)), (0.1, (0.65, 0.5)), (0.2, (1.0, 1.0)),
    ])
    def test_game_over(self, progress, expected):
        assert game_over_curve(progress) == pytest.approx(expected)

    def test_game_over_pulses_gently(self):
        for i in range(21):
            scale, opacity = game_over_curve(0.2 + i * 0.04)
            assert 0.95 <= scale <= 1.05
            assert opacity == 1.0


class TestParticles:
    """Bursts on catch/hit."""

    def test_burst_on_catch(self, fx):
        fx.handle(ObjectCaught(100, 200, (76, 175, 80)))
        assert len(fx.particles) == 8
        assert all(p.color == (76, 175, 80) for p in fx.particles)
        assert all(-5 <= p.vx <= 5 and -5 <= p.vy <= 5 for p in fx.particles)

    def test_particles_fade_and_expire(self, fx):
        fx.handle(PlayerHit(0, 0, (244, 67, 54)))
        fx.advance(16)
        assert fx.particles[0].alpha == pytest.approx((PARTICLE_LIFE - 1) / PARTICLE_LIFE)
        for _ in range(PARTICLE_LIFE - 1):
            fx.advance(16)
        assert fx.particles == []


class TestShakeAndZoom:
    """Timed camera effects."""

    def test_shake_runs_ten_steps(self, fx):
        fx.handle(ScreenShake())
        fx.advance(50)
        assert fx.shake.remaining == 9
        assert fx.shake.intensity == pytest.approx(8.0)
        dx, dy = fx.shake_offset
        assert abs(dx) <= 5 and abs(dy) <= 5
        for _ in range(10):
            fx.advance(50)
        assert fx.shake is None
        assert fx.shake_offset == (0.0, 0.0)

    def test_zoom_grows_to_cap(self, fx):
        fx.handle(DramaticSequenceStarted(400, 575))
        fx.advance(50)
        assert fx.zoom_scale == pytest.approx(1.02)
        fx.advance(10_000)
        assert fx.zoom_scale == pytest.approx(2.5)
        assert fx.zoom.origin == (400, 575)


class TestBanners:
    """Level-up and game-over banners."""

    def test_level_up_banner_expires(self, fx):
        fx.handle(LevelUp(3))
        assert fx.level_up.level == 3
        fx.advance(999)
        assert fx.level_up is not None
        fx.advance(1)
        assert fx.level_up is None

    def test_game_over_banner_stays_until_session_ends(self, fx):
        fx.handle(DramaticSequenceBannerShown())
        fx.advance(5000)
        assert fx.game_over is not None
        assert fx.game_over.progress == 1.0
        fx.handle(SessionEnded(10, 1))
        assert fx.game_over is None

    def test_clear_drops_everything(self, fx):
        fx.handle_all([
            ObjectCaught(0, 0, (0, 0, 0)), ScreenShake(), LevelUp(2),
            DramaticSequenceStarted(0, 0), DramaticSequenceBannerShown(),
        ])
        fx.clear()
        assert fx.particles == []
        assert fx.shake is None and fx.zoom is None
        assert fx.level_up is None and fx.game_over is None
