"""Player physics and difficulty scaling.

All quantities are per tick: the simulation advances one fixed step
per frame, so speeds are pixels/tick and gravity is pixels/tick^2.
"""

import logging

from endless_runner.config.settings import DifficultySettings, PhysicsSettings
from endless_runner.game.entities import Player, Viewport

logger = logging.getLogger(__name__)


def game_speed_for(score: int, difficulty: DifficultySettings) -> float:
    """Scroll speed for a score, capped at max_speed."""
    return min(
        difficulty.base_speed + score * difficulty.speed_increment,
        difficulty.max_speed,
    )


def spawn_rate_for(score: int, difficulty: DifficultySettings) -> float:
    """Per-tick obstacle spawn probability for a score, capped at max_spawn_rate."""
    return min(
        difficulty.base_spawn_rate + score * difficulty.spawn_rate_increment,
        difficulty.max_spawn_rate,
    )


def new_player(viewport: Viewport, physics: PhysicsSettings) -> Player:
    """Player centered horizontally and resting on the ground."""
    return Player(
        x=viewport.width / 2 - physics.player_width / 2,
        y=viewport.ground_y - physics.player_height,
        width=physics.player_width,
        height=physics.player_height,
        max_jumps=physics.max_jumps,
    )


def jump(player: Player, jump_power: float, allow_extra: bool = False) -> bool:
    """Try to jump. Returns True if the jump happened.

    A plain jump consumes a charge. With allow_extra, a player that has
    no charge left but has jumped fewer than max_jumps times since
    landing gets the extra (second) jump without consuming a charge.
    """
    if player.jumps_available > 0:
        player.jumps_available -= 1
    elif not (allow_extra and 0 < player.jumps_since_landing < player.max_jumps):
        return False

    player.velocity_y = jump_power
    player.is_jumping = True
    player.jumps_since_landing += 1
    logger.debug(f"Jump #{player.jumps_since_landing} (charges left: {player.jumps_available})")
    return True


def update_player(player: Player, viewport: Viewport, gravity: float) -> None:
    """Integrate one tick of vertical motion, landing on the ground line."""
    player.velocity_y += gravity
    player.y += player.velocity_y

    ground_y = viewport.ground_y
    if player.y + player.height >= ground_y:
        player.y = ground_y - player.height
        player.velocity_y = 0.0
        player.is_jumping = False
        player.jumps_available = 1
        player.jumps_since_landing = 0

    # Keep on screen horizontally
    player.x = min(max(player.x, 0.0), viewport.max_x(player.width))
