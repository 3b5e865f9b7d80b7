"""One game session: lifecycle, per-tick update and the render snapshot."""

import logging
from typing import Optional

from endless_runner.config.settings import (
    DifficultySettings,
    ObstacleSettings,
    PhysicsSettings,
    Settings,
)
from endless_runner.core.events import Event, EventBus, EventType
from endless_runner.core.state import GameState, StateMachine
from endless_runner.game import physics
from endless_runner.game.collision import first_hit
from endless_runner.game.entities import FrameSnapshot, Player, Viewport
from endless_runner.game.obstacles import ObstacleManager, RandomSource
from endless_runner.game.scoring import ScoreKeeper
from endless_runner.utils.share import ShareResult, ShareService

logger = logging.getLogger(__name__)


class GameSession:
    """Owns the player, the obstacles and the score of one game.

    Collaborators (random source, score keeper, share service, event
    bus) are injected, so several sessions can run side by side and
    tests can drive one tick at a time.

    Lifecycle:
        1. start_game() - START/GAME_OVER -> PLAYING, fresh run
        2. tick(viewport) - one simulation step while PLAYING
        3. game_over() - PLAYING -> GAME_OVER on collision, best score updated
    """

    def __init__(
        self,
        viewport: Viewport,
        *,
        physics_settings: PhysicsSettings,
        difficulty: DifficultySettings,
        obstacle_settings: ObstacleSettings,
        rng: RandomSource,
        score_keeper: ScoreKeeper,
        share_service: Optional[ShareService] = None,
        state_machine: Optional[StateMachine] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.physics_settings = physics_settings
        self.difficulty = difficulty
        self.viewport = viewport
        self.state_machine = state_machine or StateMachine()
        self.score_keeper = score_keeper
        self.share_service = share_service
        self.event_bus = event_bus

        self.obstacles = ObstacleManager(obstacle_settings, rng)
        self.player: Player = physics.new_player(viewport, physics_settings)
        self.score = 0
        self.game_speed = difficulty.base_speed
        self.spawn_rate = difficulty.base_spawn_rate

        self.state_machine.add_listener(self._on_state_changed)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        rng: RandomSource,
        score_keeper: ScoreKeeper,
        viewport: Optional[Viewport] = None,
        **collaborators,
    ) -> "GameSession":
        """Build a session from application settings."""
        if viewport is None:
            viewport = Viewport(
                settings.window.width,
                settings.window.height,
                settings.window.ground_margin,
            )
        return cls(
            viewport,
            physics_settings=settings.physics,
            difficulty=settings.difficulty,
            obstacle_settings=settings.obstacles,
            rng=rng,
            score_keeper=score_keeper,
            **collaborators,
        )

    @property
    def state(self) -> GameState:
        return self.state_machine.state

    @property
    def best_score(self) -> int:
        return self.score_keeper.best

    @property
    def ground_y(self) -> float:
        return self.viewport.ground_y

    # Lifecycle

    def start_game(self, viewport: Optional[Viewport] = None) -> None:
        """Begin a fresh run. From PLAYING this restarts the current run."""
        if viewport is not None:
            self.viewport = viewport

        if self.state != GameState.PLAYING:
            if not self.state_machine.transition(GameState.PLAYING):
                return
        else:
            logger.info("Restarting run in progress")

        self.score = 0
        self.game_speed = self.difficulty.base_speed
        self.spawn_rate = self.difficulty.base_spawn_rate
        self.obstacles.clear()
        self.player = physics.new_player(self.viewport, self.physics_settings)

    def game_over(self) -> None:
        if not self.state_machine.transition(GameState.GAME_OVER):
            return

        if self.score_keeper.record(self.score) and self.event_bus is not None:
            self.event_bus.emit(Event(
                EventType.NEW_BEST,
                data={"score": self.score},
                source="session",
            ))
        logger.info(f"Game over: score={self.score} best={self.best_score}")

    def resize(self, viewport: Viewport) -> None:
        """Adopt a new viewport. Before the first run the player is re-centered."""
        self.viewport = viewport
        if self.state == GameState.START:
            self.player = physics.new_player(viewport, self.physics_settings)
        logger.debug(f"Viewport resized to {viewport.width:.0f}x{viewport.height:.0f}")

    # Actions

    def jump(self, allow_extra: bool = False) -> bool:
        """Jump while playing. Returns False when there was nothing to do."""
        if self.state != GameState.PLAYING:
            return False
        return physics.jump(self.player, self.physics_settings.jump_power, allow_extra=allow_extra)

    def request_share(self) -> Optional[ShareResult]:
        if self.share_service is None:
            logger.info("Sharing is not available")
            return None

        result = self.share_service.share(self.score)
        if self.event_bus is not None:
            self.event_bus.emit(Event(
                EventType.SHARE_COMPLETED,
                data={"outcome": result.outcome, "notice": result.notice},
                source="session",
            ))
        return result

    # Simulation

    def tick(self, viewport: Optional[Viewport] = None) -> bool:
        """Advance one step. Returns False when the state is not PLAYING."""
        if viewport is not None:
            self.viewport = viewport
        if self.state != GameState.PLAYING:
            return False

        # Difficulty scales with score
        self.game_speed = physics.game_speed_for(self.score, self.difficulty)
        self.spawn_rate = physics.spawn_rate_for(self.score, self.difficulty)

        self.score += 1

        physics.update_player(self.player, self.viewport, self.physics_settings.gravity)

        self.obstacles.maybe_spawn(self.spawn_rate, self.viewport)
        self.obstacles.advance(self.game_speed)

        hit = first_hit(self.player, self.obstacles)
        if hit is not None:
            logger.debug(f"Hit obstacle at x={hit.x:.1f}")
            self.game_over()

        return True

    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot(
            state=self.state,
            viewport=self.viewport,
            ground_y=self.ground_y,
            player=self.player.box(),
            obstacles=tuple(o.box() for o in self.obstacles),
            score=self.score,
            best_score=self.best_score,
            game_speed=self.game_speed,
        )

    def _on_state_changed(self, old_state: GameState, new_state: GameState) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(Event(
                EventType.STATE_CHANGED,
                data={"from": old_state, "to": new_state},
                source="session",
            ))
