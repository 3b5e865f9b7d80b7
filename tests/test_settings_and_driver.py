import pytest
from pydantic import ValidationError

from endless_runner.config.settings import PhysicsSettings, Settings
from endless_runner.core.driver import TickDriver
from endless_runner.core.state import GameState


class TestSettings:
    def test_defaults_match_classic_tuning(self, settings):
        assert settings.physics.gravity == 0.5
        assert settings.physics.jump_power == -12
        assert settings.physics.max_jumps == 2
        assert settings.difficulty.max_speed == 12
        assert settings.obstacles.height == 40
        assert settings.input.double_tap_window_ms == 300
        assert settings.window.ground_margin == 50

    def test_nested_env_override(self, monkeypatch):
        monkeypatch.setenv("RUNNER_PHYSICS__GRAVITY", "0.75")
        monkeypatch.setenv("RUNNER_DEBUG", "true")
        settings = Settings(_env_file=None)
        assert settings.physics.gravity == 0.75
        assert settings.debug

    def test_validation(self):
        with pytest.raises(ValidationError):
            PhysicsSettings(max_jumps=0)
        with pytest.raises(ValidationError):
            PhysicsSettings(jump_power=5)


class TestTickDriver:
    def test_update_then_render(self):
        calls = []
        driver = TickDriver(lambda v: calls.append(("update", v)), lambda: calls.append(("render", None)))
        driver.run(2, "vp")
        assert calls == [("update", "vp"), ("render", None)] * 2
        assert driver.frame_count == 2

    def test_failure_propagates(self):
        def update(_):
            raise RuntimeError("corrupt")

        driver = TickDriver(update)
        with pytest.raises(RuntimeError):
            driver.tick(None)
        assert driver.frame_count == 0

    def test_drives_session_deterministically(self, playing, viewport):
        renders = []
        driver = TickDriver(playing.tick, lambda: renders.append(playing.snapshot().score))
        driver.run(250, viewport)

        assert playing.state == GameState.PLAYING
        assert playing.score == 250
        assert renders == list(range(1, 251))
