"""
Desktop game window using pygame.

Maps raw pygame input to bus events, paces frames, and presents the
rendered buffer with the HUD and menu overlays on top.
"""

import asyncio
import logging
from dataclasses import dataclass

import numpy as np
import pygame
from numpy.typing import NDArray

from ..core.events import Event, EventBus, EventType, activate_event
from ..core.state import GameState
from ..game.entities import FrameSnapshot, Viewport

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Game window configuration."""
    width: int = 800
    height: int = 450
    title: str = "Endless Runner"
    fullscreen: bool = False
    fps: int = 60
    ground_margin: float = 50.0

    # Colors
    text_color: tuple[int, int, int] = (255, 255, 255)
    shadow_color: tuple[int, int, int] = (20, 40, 60)
    overlay_color: tuple[int, int, int, int] = (10, 20, 40, 160)
    accent_color: tuple[int, int, int] = (255, 215, 0)

    notice_ms: int = 2500


class GameWindow:
    """
    Main game window.

    Keyboard/mouse mapping:
        SPACE, mouse click, touch: Activate (start / jump / restart)
        ENTER: Start or restart
        S: Share score
        F: Toggle fullscreen
        ESC, Q: Quit
    """

    def __init__(self, config: WindowConfig | None = None, event_bus: EventBus | None = None) -> None:
        self.config = config or WindowConfig()
        self.event_bus = event_bus or EventBus()

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._clipboard_ready = False

        # Fonts
        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None

        self._notice = ""
        self._notice_until = 0
        self._windowed_size = (self.config.width, self.config.height)

        self.event_bus.subscribe(EventType.SHARE_COMPLETED, self._on_share_completed)

        logger.info("GameWindow created")

    @property
    def viewport(self) -> Viewport:
        return Viewport(self.config.width, self.config.height, self.config.ground_margin)

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)
        self._set_mode()
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont(None, 28)
        self._big_font = pygame.font.SysFont(None, 64)

        try:
            pygame.scrap.init()
            self._clipboard_ready = True
        except pygame.error as e:
            logger.warning(f"Clipboard unavailable: {e}")

        # Fullscreen may have changed the size
        self._resize(self.config.width, self.config.height)

        logger.info(f"Pygame initialized: {self.config.width}x{self.config.height}")

    def _set_mode(self) -> None:
        if self.config.fullscreen:
            info = pygame.display.Info()
            self.config.width, self.config.height = info.current_w, info.current_h
            flags = pygame.FULLSCREEN | pygame.DOUBLEBUF
        else:
            flags = pygame.RESIZABLE | pygame.DOUBLEBUF
        self._screen = pygame.display.set_mode((self.config.width, self.config.height), flags)

    def _now_ms(self) -> int:
        return pygame.time.get_ticks()

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.event_bus.emit(Event(EventType.QUIT, source="window"))

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                # Touches also arrive as FINGERDOWN; skip the emulated mouse copy
                if not getattr(event, "touch", False):
                    self.event_bus.queue_event(activate_event(self._now_ms(), source="mouse"))

            elif event.type == pygame.FINGERDOWN:
                self.event_bus.queue_event(activate_event(self._now_ms(), source="touch"))

            elif event.type == pygame.VIDEORESIZE:
                self._resize(event.w, event.h)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self.event_bus.emit(Event(EventType.QUIT, source="keyboard"))
        elif key == pygame.K_SPACE:
            self.event_bus.queue_event(activate_event(self._now_ms(), source="keyboard"))
        elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self.event_bus.queue_event(Event(EventType.START_REQUESTED, source="keyboard"))
        elif key == pygame.K_s:
            self.event_bus.queue_event(Event(EventType.SHARE_REQUESTED, source="keyboard"))
        elif key == pygame.K_f:
            self._toggle_fullscreen()

    def _resize(self, width: int, height: int) -> None:
        self.config.width = max(1, width)
        self.config.height = max(1, height)
        self.event_bus.emit(Event(
            EventType.RESIZE,
            data={"viewport": self.viewport},
            source="window",
        ))
        logger.debug(f"Window resized to {self.config.width}x{self.config.height}")

    def _toggle_fullscreen(self) -> None:
        """Toggle fullscreen mode."""
        self.config.fullscreen = not self.config.fullscreen
        if not self.config.fullscreen:
            self.config.width, self.config.height = self._windowed_size
        else:
            self._windowed_size = (self.config.width, self.config.height)
        self._set_mode()
        self._resize(self.config.width, self.config.height)
        logger.info(f"Fullscreen: {self.config.fullscreen}")

    def copy_to_clipboard(self, text: str) -> None:
        """Clipboard copier for the share service. Raises pygame.error when unavailable."""
        if not self._clipboard_ready:
            raise pygame.error("clipboard not initialized")
        pygame.scrap.put_text(text)

    def _on_share_completed(self, event: Event) -> None:
        notice = event.data.get("notice", "")
        if notice:
            self._notice = notice
            self._notice_until = self._now_ms() + self.config.notice_ms

    # Presentation

    def present(self, snapshot: FrameSnapshot, buffer: NDArray[np.uint8]) -> None:
        """Blit a rendered frame and draw the text overlays for its state."""
        if not self._screen:
            return

        if buffer.shape[:2] == (self._screen.get_height(), self._screen.get_width()):
            pygame.surfarray.blit_array(self._screen, buffer.swapaxes(0, 1))
        elif buffer.size:
            # Frame rendered before a resize; stretch it for this one frame
            surface = pygame.surfarray.make_surface(buffer.swapaxes(0, 1))
            self._screen.blit(pygame.transform.scale(surface, self._screen.get_size()), (0, 0))

        if snapshot.state == GameState.PLAYING:
            self._draw_hud(snapshot)
        elif snapshot.state == GameState.START:
            self._draw_panel([
                ("ENDLESS RUNNER", self._big_font, self.config.text_color),
                ("Tap, click or press SPACE to jump", self._font, self.config.text_color),
                ("Double tap for a double jump", self._font, self.config.text_color),
                (f"Best: {snapshot.best_score}", self._font, self.config.accent_color),
            ])
        else:
            self._draw_panel([
                ("GAME OVER", self._big_font, self.config.text_color),
                (f"Score: {snapshot.score}", self._font, self.config.text_color),
                (f"Best: {snapshot.best_score}", self._font, self.config.accent_color),
                ("SPACE to restart  -  S to share", self._font, self.config.text_color),
            ])

        if self._notice and self._now_ms() < self._notice_until:
            self._draw_text(self._notice, self._font, self.config.text_color,
                            center=(self.config.width // 2, self.config.height - 20))

    def _draw_hud(self, snapshot: FrameSnapshot) -> None:
        self._draw_text(f"Score: {snapshot.score}", self._font, self.config.text_color, topleft=(12, 10))
        self._draw_text(f"Best: {snapshot.best_score}", self._font, self.config.accent_color, topleft=(12, 36))

    def _draw_panel(self, lines: list) -> None:
        overlay = pygame.Surface(self._screen.get_size(), pygame.SRCALPHA)
        overlay.fill(self.config.overlay_color)
        self._screen.blit(overlay, (0, 0))

        y = self.config.height // 2 - 24 * len(lines)
        for text, font, color in lines:
            rect = self._draw_text(text, font, color, center=(self.config.width // 2, y))
            y += rect.height + 14 if rect else 30

    def _draw_text(self, text: str, font: pygame.font.Font | None, color, **position) -> pygame.Rect | None:
        if not font or not self._screen:
            return None
        shadow = font.render(text, True, self.config.shadow_color)
        surface = font.render(text, True, color)
        rect = surface.get_rect(**position)
        self._screen.blit(shadow, rect.move(2, 2))
        self._screen.blit(surface, rect)
        return rect

    async def run(self) -> None:
        """Main window loop."""
        self._init_pygame()
        self._running = True

        logger.info("Window loop started")

        while self._running:
            # Collect input, then handle it before this frame's Update
            self._handle_events()
            self.event_bus.process_queue()

            self.event_bus.emit(Event(EventType.TICK, source="window"))

            pygame.display.flip()

            # Frame timing
            if self._clock:
                self._clock.tick(self.config.fps)

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Window closed")

    def stop(self) -> None:
        """Stop the window loop after the current frame."""
        self._running = False
