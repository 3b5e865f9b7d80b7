"""Input mapping.

Every raw input (mouse button, touch, action key) becomes one
"activation". What an activation does depends on the game state and
on how soon it follows the previous one.
"""

import logging
import math
from typing import Callable, Optional

from endless_runner.core.events import Event, EventBus, EventType
from endless_runner.core.state import GameState
from endless_runner.game.session import GameSession
from endless_runner.utils.share import ShareResult

logger = logging.getLogger(__name__)


class InputMapper:
    """
    Turns activations into game actions.

    Playing rules:
        - A quick second activation (inside the double-tap window) claims
          the extra jump, as long as the player has charges to spare.
        - A slow activation is a plain jump; with no charge left it does nothing.
    """

    def __init__(self, session: GameSession, double_tap_window_ms: float = 300.0) -> None:
        self.session = session
        self.double_tap_window_ms = double_tap_window_ms
        self.last_activation_ms = -math.inf
        self._unsubscribers: list[Callable[[], None]] = []

    def handle_activation(self, timestamp_ms: float) -> bool:
        """Process one activation. Returns True if it changed the game."""
        is_double = (timestamp_ms - self.last_activation_ms) < self.double_tap_window_ms
        self.last_activation_ms = timestamp_ms

        state = self.session.state
        if state in (GameState.START, GameState.GAME_OVER):
            self.session.start_game()
            return True

        player = self.session.player
        if is_double and player.jumps_available < player.max_jumps:
            # Double tap for second jump
            return self.session.jump(allow_extra=True)
        if not is_double:
            return self.session.jump()
        return False

    def request_start(self) -> None:
        """Start/restart button."""
        self.session.start_game()

    def request_share(self) -> Optional[ShareResult]:
        """Share button."""
        return self.session.request_share()

    def attach(self, event_bus: EventBus) -> None:
        """Subscribe to input events on the bus."""
        self._unsubscribers = [
            event_bus.subscribe(EventType.ACTIVATE, self._on_activate),
            event_bus.subscribe(EventType.START_REQUESTED, lambda _: self.request_start()),
            event_bus.subscribe(EventType.SHARE_REQUESTED, lambda _: self.request_share()),
        ]

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def _on_activate(self, event: Event) -> None:
        timestamp_ms = event.data.get("timestamp_ms")
        if timestamp_ms is None:
            timestamp_ms = event.timestamp * 1000.0
        self.handle_activation(timestamp_ms)
