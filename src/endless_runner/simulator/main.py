"""
Game entry point.

Runs Endless Runner in a desktop pygame window.
"""

import asyncio
import logging
import random
import sys
from pathlib import Path

# Load environment variables before settings are read
from dotenv import load_dotenv
load_dotenv()

from endless_runner.config.settings import Settings, get_settings
from endless_runner.core.driver import TickDriver
from endless_runner.core.events import Event, EventBus, EventType
from endless_runner.game.entities import Viewport
from endless_runner.game.input import InputMapper
from endless_runner.game.scoring import ScoreKeeper
from endless_runner.game.session import GameSession
from endless_runner.graphics.renderer import RunnerRenderer
from endless_runner.simulator.window import GameWindow, WindowConfig
from endless_runner.storage.best_score import JsonBestScoreStore
from endless_runner.utils.share import ShareService

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """Configure logging with console and file output."""
    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    # File handler - truncate on each run for fresh logs
    if log_file is not None:
        try:
            file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        except OSError as e:
            logging.warning(f"File logging disabled: {e}")
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
            logging.info(f"Logging to file: {log_file}")


class RunnerApp:
    """Wires the session, input, renderer and window together."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.event_bus = EventBus()

        # Window
        self.window = GameWindow(
            config=WindowConfig(
                width=settings.window.width,
                height=settings.window.height,
                title=settings.window.title,
                fullscreen=settings.window.fullscreen,
                fps=settings.window.fps,
                ground_margin=settings.window.ground_margin,
            ),
            event_bus=self.event_bus,
        )

        # Game
        store = JsonBestScoreStore(
            settings.storage.best_score_path,
            key=settings.storage.best_score_key,
        )
        self.session = GameSession.from_settings(
            settings,
            rng=random.Random(),
            score_keeper=ScoreKeeper(store),
            viewport=self.window.viewport,
            share_service=ShareService(
                title=settings.share.title,
                url=settings.share.url,
                copier=self.window.copy_to_clipboard,
            ),
            event_bus=self.event_bus,
        )
        self.input = InputMapper(self.session, settings.input.double_tap_window_ms)
        self.input.attach(self.event_bus)

        self.renderer = RunnerRenderer()
        self._buffer = None
        self.driver: TickDriver[Viewport] = TickDriver(self.session.tick, self._render)

        self._setup_event_handlers()

        logger.info("RunnerApp initialized")

    def _setup_event_handlers(self) -> None:
        self.event_bus.subscribe(EventType.TICK, self._on_tick)
        self.event_bus.subscribe(EventType.RESIZE, self._on_resize)
        self.event_bus.subscribe(EventType.NEW_BEST, self._on_new_best)
        self.event_bus.subscribe(EventType.QUIT, self._on_quit)

    def _on_tick(self, event: Event) -> None:
        self.driver.tick(self.window.viewport)

    def _on_resize(self, event: Event) -> None:
        self.session.resize(event.data["viewport"])

    def _on_new_best(self, event: Event) -> None:
        logger.info(f"New record: {event.data.get('score')}")

    def _on_quit(self, event: Event) -> None:
        logger.info(f"Quit requested ({event.source})")
        self.window.stop()

    def _render(self) -> None:
        snapshot = self.session.snapshot()
        self._buffer = self.renderer.render(snapshot, self._buffer)
        self.window.present(snapshot, self._buffer)

    async def run(self) -> None:
        logger.info("Starting Endless Runner...")
        await self.window.run()
        self.input.detach()


def main() -> None:
    """Main entry point."""
    settings = get_settings()
    setup_logging(settings.debug, settings.log_file)

    logger.info("=" * 50)
    logger.info("Endless Runner Starting")
    logger.info("=" * 50)
    logger.info("Controls:")
    logger.info("  SPACE / click / tap - Start, jump (double tap: double jump)")
    logger.info("  ENTER               - Restart")
    logger.info("  S                   - Share score")
    logger.info("  F                   - Toggle fullscreen")
    logger.info("  ESC / Q             - Quit")

    try:
        asyncio.run(RunnerApp(settings).run())
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except Exception as e:
        logger.exception(f"Game error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
