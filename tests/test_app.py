import pygame
import pytest

from endless_runner.config.settings import Settings, StorageSettings
from endless_runner.core.events import Event, EventType
from endless_runner.core.state import GameState
from endless_runner.simulator.main import RunnerApp


@pytest.fixture
def app(tmp_path):
    settings = Settings(
        _env_file=None,
        storage=StorageSettings(best_score_path=tmp_path / "best.json"),
    )
    return RunnerApp(settings)


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def test_activation_waits_for_next_update(app):
    app.window._handle_keydown(key(pygame.K_SPACE))
    assert app.session.state == GameState.START

    assert app.event_bus.process_queue() == 1
    assert app.session.state == GameState.PLAYING


def test_tick_event_advances_session(app):
    app.window._handle_keydown(key(pygame.K_RETURN))
    app.event_bus.process_queue()

    app.event_bus.emit(Event(EventType.TICK, source="window"))
    app.event_bus.emit(Event(EventType.TICK, source="window"))

    assert app.session.score == 2
    assert app.driver.frame_count == 2


def test_escape_stops_window(app, monkeypatch):
    stops = []
    monkeypatch.setattr(app.window, "stop", lambda: stops.append(True))

    app.window._handle_keydown(key(pygame.K_ESCAPE))

    assert stops == [True]
    assert app.event_bus.get_history(EventType.QUIT)[0].source == "keyboard"


def test_stop_ends_loop(app):
    app.window._running = True
    app.event_bus.emit(Event(EventType.QUIT, source="window"))
    assert not app.window._running
