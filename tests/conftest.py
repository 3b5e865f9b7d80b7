"""Shared fixtures for the game tests."""

from typing import Iterable

import pytest

from endless_runner.config.settings import Settings
from endless_runner.core.events import EventBus
from endless_runner.game.entities import Viewport
from endless_runner.game.scoring import ScoreKeeper
from endless_runner.game.session import GameSession


class ScriptedRandom:
    """Returns queued samples, then a value that never spawns."""

    def __init__(self, samples: Iterable[float] = (), default: float = 0.999) -> None:
        self.samples = list(samples)
        self.default = default
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if self.samples:
            return self.samples.pop(0)
        return self.default


class RecordingStore:
    """In-memory best-score store that remembers every write."""

    def __init__(self, best: int = 0, fail_saves: bool = False) -> None:
        self.best = best
        self.fail_saves = fail_saves
        self.loads = 0
        self.saves: list[int] = []

    def load_best(self) -> int:
        self.loads += 1
        return self.best

    def save_best(self, score: int) -> bool:
        self.saves.append(score)
        if self.fail_saves:
            return False
        self.best = score
        return True


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def viewport() -> Viewport:
    return Viewport(800, 450)


@pytest.fixture
def rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def make_session(settings, viewport, rng, event_bus):
    def _make(store=None, rng_=None, viewport_=None, **collaborators) -> GameSession:
        return GameSession.from_settings(
            settings,
            rng=rng_ or rng,
            score_keeper=ScoreKeeper(store or RecordingStore()),
            viewport=viewport_ or viewport,
            event_bus=collaborators.pop("event_bus", event_bus),
            **collaborators,
        )
    return _make


@pytest.fixture
def session(make_session, store) -> GameSession:
    return make_session(store=store)


@pytest.fixture
def playing(session) -> GameSession:
    session.start_game()
    return session
